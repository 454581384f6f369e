"""Results writing domain exports."""

from .console_report import ConsoleLabel, console_label, render_console_report
from .report_workbook_writer import CHANGES_SHEET_NAME, SUMMARY_SHEET_NAME, write_report_workbook

__all__ = [
    "CHANGES_SHEET_NAME",
    "SUMMARY_SHEET_NAME",
    "ConsoleLabel",
    "console_label",
    "render_console_report",
    "write_report_workbook",
]
