"""
Excel export of ESG reports.

Two workbooks:
  - single report: sheet "ESG Report" with the scores and every response
  - historical: "Summary" sheet plus one "Company_<id>_Details" sheet per company
"""
import io
import logging
from datetime import datetime, timezone
from typing import Any, Iterable, List, Optional, Sequence
from urllib.parse import quote

from openpyxl import Workbook
from openpyxl.styles import Font
from openpyxl.utils import get_column_letter

from app.models.enums import SECTION_ORDER

logger = logging.getLogger(__name__)

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
NOT_AVAILABLE = "N/A"

SUMMARY_HEADERS = [
    "Report ID",
    "Company Name",
    "Questionnaire Name",
    "Overall Score",
    "Environmental Score",
    "Social Score",
    "Governance Score",
    "Created At",
]
DETAIL_HEADERS = [
    "Report ID",
    "Questionnaire",
    "Date",
    "Overall Score",
    "Environmental",
    "Social",
    "Governance",
]
RESPONSE_HEADERS = ["Section", "Question", "Response", "Score"]


def _or_na(value: Any) -> Any:
    return NOT_AVAILABLE if value is None else value


def _section_cells(section_scores: Optional[dict]) -> List[Any]:
    """Section scores in Environmental/Social/Governance column order."""
    scores = section_scores or {}
    return [_or_na(scores.get(section.value)) for section in SECTION_ORDER]


def _bold_row(ws, row: int, values: Sequence[Any]) -> None:
    bold = Font(bold=True)
    for col_idx, value in enumerate(values, start=1):
        ws.cell(row=row, column=col_idx, value=value).font = bold


def _autosize(ws, widths: Sequence[int]) -> None:
    for col_idx, width in enumerate(widths, start=1):
        ws.column_dimensions[get_column_letter(col_idx)].width = width


def _to_bytes(wb: Workbook) -> bytes:
    output = io.BytesIO()
    wb.save(output)
    output.seek(0)
    return output.read()


class ReportExcelExporter:
    """Builds xlsx workbooks from Report rows (with company/questionnaire loaded)."""

    def __init__(self, generated_at: Optional[datetime] = None):
        self.generated_at = generated_at or datetime.now(timezone.utc)

    def single_report(self, report, responses: Iterable) -> bytes:
        """
        Export one report with its underlying responses.

        Args:
            report: Report row with ``company`` loaded.
            responses: Response rows of the company for the report's
                questionnaire, each with ``question`` loaded.

        Returns:
            Excel file contents as bytes
        """
        wb = Workbook()
        ws = wb.active
        ws.title = "ESG Report"

        ws.cell(row=1, column=1, value=f"Company: {report.company.name}")
        ws.cell(
            row=2,
            column=1,
            value=f"Report Generated: {self.generated_at.strftime('%Y-%m-%d')}"
        )

        row = 4
        ws.cell(row=row, column=1, value="Overall ESG Score").font = Font(bold=True)
        ws.cell(row=row, column=2, value=_or_na(report.overall_score))

        row += 2
        ws.cell(row=row, column=1, value="Section Scores").font = Font(bold=True)
        for section, score in (report.section_scores or {}).items():
            row += 1
            ws.cell(row=row, column=1, value=section)
            ws.cell(row=row, column=2, value=score)

        row += 2
        ws.cell(row=row, column=1, value="Question Responses").font = Font(bold=True)
        row += 1
        _bold_row(ws, row, RESPONSE_HEADERS)
        count = 0
        for response in responses:
            row += 1
            count += 1
            ws.cell(row=row, column=1, value=response.question.section)
            ws.cell(row=row, column=2, value=response.question.text)
            ws.cell(row=row, column=3, value=response.value)
            ws.cell(row=row, column=4, value=_or_na(response.score))

        _autosize(ws, [22, 60, 30, 10])
        logger.info(f"Exported report {report.id} with {count} responses")
        return _to_bytes(wb)

    def historical(self, reports: Sequence) -> bytes:
        """
        Export many reports: one summary row each, plus a per-company history sheet.

        ``reports`` should already be ordered (company, newest first).
        """
        wb = Workbook()
        summary = wb.active
        summary.title = "Summary"
        _bold_row(summary, 1, SUMMARY_HEADERS)

        details = {}
        for row_idx, report in enumerate(reports, start=2):
            summary_row = [
                report.id,
                report.company.name,
                report.questionnaire.name,
                _or_na(report.overall_score),
                *_section_cells(report.section_scores),
                report.created_at.isoformat(),
            ]
            for col_idx, value in enumerate(summary_row, start=1):
                summary.cell(row=row_idx, column=col_idx, value=value)

            sheet_name = f"Company_{report.company_id}_Details"
            if sheet_name not in details:
                ws = wb.create_sheet(sheet_name)
                ws.cell(row=1, column=1, value=f"Company: {report.company.name}")
                ws.cell(row=2, column=1, value="Detailed Report History")
                _bold_row(ws, 4, DETAIL_HEADERS)
                details[sheet_name] = ws
            ws = details[sheet_name]
            detail_row = [
                report.id,
                report.questionnaire.name,
                report.created_at.date().isoformat(),
                _or_na(report.overall_score),
                *_section_cells(report.section_scores),
            ]
            next_row = ws.max_row + 1
            for col_idx, value in enumerate(detail_row, start=1):
                ws.cell(row=next_row, column=col_idx, value=value)

        _autosize(summary, [10, 30, 30, 14, 20, 14, 18, 28])
        logger.info(f"Exported {len(reports)} reports across {len(details)} companies")
        return _to_bytes(wb)


def attachment_headers(filename: str) -> dict:
    """Response headers for an xlsx download.

    Headers go out as latin-1, so ``filename`` carries an ASCII fallback and
    ``filename*`` the UTF-8 name (RFC 5987).
    """
    fallback = filename.encode("ascii", "replace").decode("ascii").replace("?", "_")
    fallback = fallback.replace('"', "_")
    return {
        "Content-Disposition": (
            f'attachment; filename="{fallback}"; '
            f"filename*=UTF-8''{quote(filename, safe='')}"
        )
    }
