"""Run report workbook writer service."""

from __future__ import annotations

from pathlib import Path

from openpyxl import Workbook
from openpyxl.styles import Font
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from eventdiff.schema_diff.change_models import RunReport

from .console_report import console_label

SUMMARY_SHEET_NAME = "Summary"
CHANGES_SHEET_NAME = "Changes"
CHANGE_COLUMNS = ("file", "severity", "kind", "path", "message")


def write_report_workbook(report: RunReport, output_path: Path | str) -> Path:
    """Write the run report as a Summary sheet and a Changes sheet.

    Args:
      report: Completed run report.
      output_path: Destination workbook path; parent directories are created.

    Returns:
      The resolved destination path.
    """
    workbook = Workbook()
    sheet = workbook.active
    if not isinstance(sheet, Worksheet):
        raise RuntimeError("Workbook active sheet is not available.")
    sheet.title = SUMMARY_SHEET_NAME
    _write_summary_sheet(sheet, report)
    _write_changes_sheet(workbook.create_sheet(CHANGES_SHEET_NAME), report)

    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    workbook.save(output)
    return output.resolve()


def _write_summary_sheet(sheet: Worksheet, report: RunReport) -> None:
    entries = (
        ("base", report.base),
        ("head", report.head),
        ("dir", report.dir),
        ("decision", report.decision.value),
        ("label", console_label(report.summary).value),
        ("files", len(report.reports)),
        ("blocks", report.summary.blocks),
        ("warns", report.summary.warns),
        ("passes", report.summary.passes),
        ("owners", ", ".join(report.owner_teams())),
    )
    for row, (key, value) in enumerate(entries, start=1):
        sheet.cell(row=row, column=1, value=key).font = Font(bold=True)
        sheet.cell(row=row, column=2, value=value)
    sheet.column_dimensions["A"].width = 12
    sheet.column_dimensions["B"].width = 40


def _write_changes_sheet(sheet: Worksheet, report: RunReport) -> None:
    for column_index, name in enumerate(CHANGE_COLUMNS, start=1):
        sheet.cell(row=1, column=column_index, value=name).font = Font(bold=True)

    widths = [len(name) for name in CHANGE_COLUMNS]
    row = 2
    for file_report in report.reports:
        for change in file_report.changes:
            values = (
                file_report.file,
                change.severity.value,
                change.kind.value,
                change.path,
                change.message,
            )
            for column_index, value in enumerate(values, start=1):
                sheet.cell(row=row, column=column_index, value=value)
                widths[column_index - 1] = max(widths[column_index - 1], len(value))
            row += 1

    for column_index, width in enumerate(widths, start=1):
        sheet.column_dimensions[get_column_letter(column_index)].width = max(
            12, min(width + 2, 80)
        )
    sheet.freeze_panes = "A2"
