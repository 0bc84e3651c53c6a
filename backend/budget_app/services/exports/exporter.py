import csv
import datetime as dt
import html
import io
from pathlib import Path
from typing import Iterator, Sequence

import pandas as pd
from reportlab.lib import colors
from reportlab.lib.pagesizes import A4, landscape
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from budget_app.core.config import settings
from budget_app.core.logging import logger
from budget_app.schemas.reports import ProjectReport, ReportTotals, SummaryRow
from budget_app.services.costs import format_currency
from budget_app.services.reports.columns import ColumnConfig
from budget_app.services.reports.service import TOTAL_COLUMNS

TOTAL_LABEL = "TOTAL GENERAL"

# carries subtotal and summary labels when the first requested column is numeric
LABEL_COLUMN = ColumnConfig("row_label", "", lambda item: "")


def export_columns(columns: Sequence[ColumnConfig]) -> list[ColumnConfig]:
    """Caller-ordered columns, led by a label column if the first one holds numbers."""
    columns = list(columns)
    if columns and columns[0].numeric:
        return [LABEL_COLUMN, *columns]
    return columns


def _num(v):
    if v is None:
        return None
    f = float(v)
    return int(f) if f.is_integer() else f


def _totals_cells(label: str, totals: ReportTotals, columns: Sequence[ColumnConfig], formatted: bool) -> list:
    cells = []
    for i, col in enumerate(columns):
        if i == 0:
            cells.append(label)
        elif col.id in TOTAL_COLUMNS:
            value = getattr(totals, col.id)
            cells.append(format_currency(value) if formatted else _num(value))
        else:
            cells.append("")
    return cells


def _summary_cells(row: SummaryRow, columns: Sequence[ColumnConfig], formatted: bool) -> list:
    cells = []
    for i, col in enumerate(columns):
        if i == 0:
            cells.append(row.label)
        elif col.id == "actual_cost":
            cells.append(format_currency(row.actual_cost) if formatted else _num(row.actual_cost))
        else:
            cells.append("")
    return cells


def iter_report_rows(
    report: ProjectReport,
    columns: Sequence[ColumnConfig],
    formatted: bool = False,
) -> Iterator[tuple[str, list]]:
    """Walk the grouped report as ``(row_kind, cells)`` in print order.

    Row kinds: ``item``, ``subtotal``, ``total``, ``income``, ``balance``.
    With ``formatted`` every cell is display text; otherwise numeric columns
    carry raw numbers (``None`` when unknown).
    """
    columns = export_columns(columns)
    for group in report.groups:
        for item in group.items:
            if formatted:
                yield "item", [col.render(item) for col in columns]
            else:
                yield "item", [_num(col.value(item)) if col.numeric else col.value(item) for col in columns]
        yield "subtotal", _totals_cells(f"Subtotal: {group.area}", group.totals, columns, formatted)
    yield "total", _totals_cells(TOTAL_LABEL, report.grand_totals, columns, formatted)
    for row in (report.income_row, report.balance_row):
        if row is not None:
            yield row.kind, _summary_cells(row, columns, formatted)


def export_report_csv(report: ProjectReport, columns: Sequence[ColumnConfig]) -> str:
    # text quoted, numbers raw; unknown numbers become an empty unquoted field
    buf = io.StringIO()
    w = csv.writer(buf, quoting=csv.QUOTE_STRINGS, lineterminator="\n")
    w.writerow([col.label for col in export_columns(columns)])
    for _kind, cells in iter_report_rows(report, columns):
        w.writerow(cells)
    return buf.getvalue()


def export_report_xlsx(report: ProjectReport, columns: Sequence[ColumnConfig], out_path: Path) -> Path:
    rows = [cells for _kind, cells in iter_report_rows(report, columns)]
    df = pd.DataFrame(rows, columns=[col.label for col in export_columns(columns)])
    out_path.parent.mkdir(parents=True, exist_ok=True)
    with pd.ExcelWriter(out_path, engine="xlsxwriter") as w:
        df.to_excel(w, index=False, sheet_name="reporte")
    return out_path


_ROW_CLASSES = {
    "subtotal": "subtotal-row",
    "total": "total-row double-border-top",
    "income": "total-row income-row",
    "balance": "total-row balance-row",
}

PRINT_STYLES = """
body { font-family: Arial, sans-serif; margin: 1cm; color: #333; }
.project-name { font-size: 22px; font-weight: bold; margin: 0 0 5px; }
.report-date { font-size: 14px; color: #666; margin: 0; }
.notes { margin: 10px 0 15px; padding: 8px 10px; background-color: #f9f9f9; border-left: 3px solid #ddd; }
table { width: 100%; border-collapse: collapse; font-size: 11px; border: 1px solid #e0e0e0; }
th { background-color: rgba(0, 0, 0, 0.05); text-align: left; padding: 6px; border-bottom: 2px solid #ddd; font-size: 10px; text-transform: uppercase; }
td { padding: 5px 6px; border-bottom: 1px solid #ddd; }
.numeric { text-align: right; }
.wrap-text { white-space: normal; max-width: 250px; }
.bg-gray-50 { background-color: #f9fafb; }
.subtotal-row { background-color: rgba(0, 0, 0, 0.05); font-weight: 600; }
.total-row { background-color: rgba(0, 100, 255, 0.07); font-weight: bold; }
.double-border-top td { border-top: 3px double #999; }
.income-row { background-color: rgba(0, 200, 0, 0.07); }
.balance-row { background-color: rgba(0, 100, 200, 0.07); }
.over { color: #e53e3e; }
.under { color: #38a169; }
@media print { body { -webkit-print-color-adjust: exact; print-color-adjust: exact; } }
"""


def render_report_table(report: ProjectReport, columns: Sequence[ColumnConfig]) -> str:
    columns = export_columns(columns)
    out = ["<thead><tr>"]
    out += [f"<th>{html.escape(col.label)}</th>" for col in columns]
    out.append("</tr></thead><tbody>")

    stripe = 0
    for kind, cells in iter_report_rows(report, columns, formatted=True):
        if kind == "item":
            row_class = "bg-gray-50" if stripe % 2 else ""
            stripe += 1
        else:
            row_class = _ROW_CLASSES[kind]
            stripe = 0
        out.append(f'<tr class="{row_class}">')
        for col, cell in zip(columns, cells):
            classes = []
            if col.numeric:
                classes.append("numeric")
            if col.id == "description":
                classes.append("wrap-text")
            if kind == "balance" and col.id == "actual_cost":
                classes.append("over" if report.balance_row.negative else "under")
            out.append(f'<td class="{" ".join(classes)}">{html.escape(str(cell))}</td>')
        out.append("</tr>")
    out.append("</tbody>")
    return "".join(out)


def render_report_html(
    report: ProjectReport,
    columns: Sequence[ColumnConfig],
    project_name: str,
    client_name: str | None = None,
    notes: str | None = None,
    report_date: dt.date | None = None,
) -> str:
    """Standalone printable document for the report."""
    title = f"{settings.REPORT_TITLE_PREFIX}: {project_name}"
    d = (report_date or dt.date.today()).strftime("%d/%m/%Y")
    header = [f'<h1 class="project-name">{html.escape(project_name)}</h1>']
    if client_name:
        header.append(f'<p class="report-date" style="font-weight: 600;">Cliente: {html.escape(client_name)}</p>')
    header.append(f'<p class="report-date">{d}</p>')
    if report.filter_subtitle:
        header.append(f'<p class="filter-subtitle"><strong>Filtro:</strong> {html.escape(report.filter_subtitle)}</p>')
    notes_html = ""
    if notes:
        body = "<br>".join(html.escape(line) for line in notes.splitlines())
        notes_html = f'<div class="notes"><h3>Notas</h3><div class="notes-content">{body}</div></div>'

    return (
        "<!DOCTYPE html><html><head>"
        f'<meta charset="utf-8"><title>{html.escape(title)}</title><style>{PRINT_STYLES}</style>'
        "</head><body><div class=\"report-container\">"
        f'<div class="report-header">{"".join(header)}</div>'
        f"{notes_html}"
        f'<table class="w-full">{render_report_table(report, columns)}</table>'
        "</div></body></html>"
    )


def export_report_pdf(
    report: ProjectReport,
    columns: Sequence[ColumnConfig],
    out_path: Path,
    project_name: str,
    client_name: str | None = None,
) -> Path:
    columns = export_columns(columns)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    styles = getSampleStyleSheet()
    doc = SimpleDocTemplate(
        str(out_path),
        pagesize=landscape(A4),
        leftMargin=10 * mm,
        rightMargin=10 * mm,
        topMargin=12 * mm,
        bottomMargin=12 * mm,
    )
    story = [Paragraph(html.escape(f"{settings.REPORT_TITLE_PREFIX}: {project_name}"), styles["Title"])]
    if client_name:
        story.append(Paragraph(html.escape(f"Cliente: {client_name}"), styles["Normal"]))
    if report.filter_subtitle:
        story.append(Paragraph(html.escape(f"Filtro: {report.filter_subtitle}"), styles["Normal"]))
    story.append(Spacer(1, 5 * mm))

    data = [[col.label for col in columns]]
    style = [
        ("FONT", (0, 0), (-1, 0), "Helvetica-Bold", 8),
        ("FONT", (0, 1), (-1, -1), "Helvetica", 7),
        ("GRID", (0, 0), (-1, -1), 0.25, colors.lightgrey),
        ("BACKGROUND", (0, 0), (-1, 0), colors.whitesmoke),
    ]
    for i, col in enumerate(columns):
        if col.numeric:
            style.append(("ALIGN", (i, 1), (i, -1), "RIGHT"))
    for kind, cells in iter_report_rows(report, columns, formatted=True):
        data.append([str(c) for c in cells])
        r = len(data) - 1
        if kind != "item":
            style.append(("FONT", (0, r), (-1, r), "Helvetica-Bold", 7))
            style.append(("BACKGROUND", (0, r), (-1, r), colors.Color(0.93, 0.95, 1.0)))
        if kind == "total":
            style.append(("LINEABOVE", (0, r), (-1, r), 1.5, colors.grey))
        if kind == "balance" and "actual_cost" in [c.id for c in columns]:
            ci = [c.id for c in columns].index("actual_cost")
            tone = colors.red if report.balance_row.negative else colors.green
            style.append(("TEXTCOLOR", (ci, r), (ci, r), tone))

    table = Table(data, repeatRows=1)
    table.setStyle(TableStyle(style))
    story.append(table)
    doc.build(story)
    logger.info("report_pdf_written", path=str(out_path), rows=len(data) - 1)
    return out_path


def default_export_path(prefix: str, ext: str) -> Path:
    ts = dt.datetime.now(dt.timezone.utc).strftime("%Y%m%d_%H%M%S")
    return Path(settings.EXPORT_DIR) / f"{prefix}_{ts}.{ext}"
