"""Schema-governance gate for event schemas kept under version control."""

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())
