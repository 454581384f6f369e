"""Revision access exports."""

from .git_revision_source import GitRevisionSource, RevisionAccessError

__all__ = ["GitRevisionSource", "RevisionAccessError"]
