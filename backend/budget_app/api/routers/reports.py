from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import FileResponse, HTMLResponse, Response
from sqlalchemy.orm import Session

from budget_app.core.deps import get_column_store, get_db
from budget_app.core.logging import bind_project, logger
from budget_app.crud.projects import get_project
from budget_app.crud.suppliers import get_supplier
from budget_app.schemas.reports import ProjectReport
from budget_app.services.exports.exporter import (
    default_export_path,
    export_report_csv,
    export_report_pdf,
    export_report_xlsx,
    render_report_html,
)
from budget_app.services.reports.columns import COLUMNS, ColumnPreferenceStore, resolve_columns, toggle_column
from budget_app.services.reports.query import project_report_items, project_total_income
from budget_app.services.reports.service import build_report, filter_report_items, filter_subtitle

router = APIRouter()


def _load_report(
    db: Session,
    project_id: int,
    area: str | None,
    category: str | None,
    supplier_id: int | None,
    item_id: int | None,
    show_income: bool,
    show_balance: bool,
) -> ProjectReport:
    bind_project(project_id)
    if not get_project(db, project_id):
        raise HTTPException(status_code=404, detail="Project not found")
    rows = project_report_items(db, project_id)
    rows = filter_report_items(rows, area=area, category=category, supplier_id=supplier_id, item_id=item_id)
    supplier = get_supplier(db, supplier_id) if supplier_id is not None else None
    item_name = next((r.item_name for r in rows if r.item_id == item_id), None) if item_id is not None else None
    subtitle = filter_subtitle(area, category, supplier.name if supplier else None, item_name)
    report = build_report(
        rows,
        total_income=project_total_income(db, project_id),
        show_income=show_income,
        show_balance=show_balance,
        project_id=project_id,
        subtitle=subtitle,
    )
    logger.info("report_built", items=len(rows), groups=len(report.groups))
    return report


def _split_columns(columns: str | None) -> list[str] | None:
    if not columns:
        return None
    return [c.strip() for c in columns.split(",") if c.strip()]


@router.get("/project/{project_id}", response_model=ProjectReport)
def project_report(
    project_id: int,
    area: str | None = Query(None),
    category: str | None = Query(None),
    supplier_id: int | None = Query(None),
    item_id: int | None = Query(None),
    show_income: bool = Query(True),
    show_balance: bool = Query(True),
    db: Session = Depends(get_db),
):
    return _load_report(db, project_id, area, category, supplier_id, item_id, show_income, show_balance)


@router.get("/columns")
def get_columns(store: ColumnPreferenceStore = Depends(get_column_store)):
    visible = {c.id for c in resolve_columns(store)}
    return [{"id": c.id, "label": c.label, "numeric": c.numeric, "visible": c.id in visible} for c in COLUMNS]


@router.post("/columns/{column_id}/toggle")
def post_toggle_column(column_id: str, store: ColumnPreferenceStore = Depends(get_column_store)):
    return toggle_column(store, column_id)


@router.get("/project/{project_id}/export.csv")
def export_csv(
    project_id: int,
    columns: str | None = Query(None, description="comma separated column ids"),
    area: str | None = Query(None),
    category: str | None = Query(None),
    supplier_id: int | None = Query(None),
    item_id: int | None = Query(None),
    show_income: bool = Query(True),
    show_balance: bool = Query(True),
    db: Session = Depends(get_db),
    store: ColumnPreferenceStore = Depends(get_column_store),
):
    report = _load_report(db, project_id, area, category, supplier_id, item_id, show_income, show_balance)
    text = export_report_csv(report, resolve_columns(store, _split_columns(columns)))
    return Response(
        content=text,
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="reporte_{project_id}.csv"'},
    )


@router.get("/project/{project_id}/export.html", response_class=HTMLResponse)
def export_html(
    project_id: int,
    columns: str | None = Query(None),
    area: str | None = Query(None),
    category: str | None = Query(None),
    supplier_id: int | None = Query(None),
    item_id: int | None = Query(None),
    show_income: bool = Query(True),
    show_balance: bool = Query(True),
    notes: str | None = Query(None),
    db: Session = Depends(get_db),
    store: ColumnPreferenceStore = Depends(get_column_store),
):
    report = _load_report(db, project_id, area, category, supplier_id, item_id, show_income, show_balance)
    p = get_project(db, project_id)
    return render_report_html(
        report,
        resolve_columns(store, _split_columns(columns)),
        project_name=p.name,
        client_name=p.client_name,
        notes=notes,
    )


@router.get("/project/{project_id}/export.pdf")
def export_pdf(
    project_id: int,
    columns: str | None = Query(None),
    area: str | None = Query(None),
    category: str | None = Query(None),
    supplier_id: int | None = Query(None),
    item_id: int | None = Query(None),
    show_income: bool = Query(True),
    show_balance: bool = Query(True),
    db: Session = Depends(get_db),
    store: ColumnPreferenceStore = Depends(get_column_store),
):
    report = _load_report(db, project_id, area, category, supplier_id, item_id, show_income, show_balance)
    p = get_project(db, project_id)
    out = default_export_path(f"reporte_{project_id}", "pdf")
    export_report_pdf(report, resolve_columns(store, _split_columns(columns)), out, p.name, p.client_name)
    return FileResponse(str(out), media_type="application/pdf", filename=out.name)


@router.get("/project/{project_id}/export.xlsx")
def export_xlsx(
    project_id: int,
    columns: str | None = Query(None),
    area: str | None = Query(None),
    category: str | None = Query(None),
    supplier_id: int | None = Query(None),
    item_id: int | None = Query(None),
    show_income: bool = Query(True),
    show_balance: bool = Query(True),
    db: Session = Depends(get_db),
    store: ColumnPreferenceStore = Depends(get_column_store),
):
    report = _load_report(db, project_id, area, category, supplier_id, item_id, show_income, show_balance)
    out = default_export_path(f"reporte_{project_id}", "xlsx")
    export_report_xlsx(report, resolve_columns(store, _split_columns(columns)), out)
    return FileResponse(
        str(out),
        media_type="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        filename=out.name,
    )
