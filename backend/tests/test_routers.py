import datetime as dt

import pytest
from fastapi import HTTPException

from budget_app.api.routers import items as items_router
from budget_app.api.routers import reports as reports_router
from budget_app.api.routers import transactions as tx_router
from budget_app.schemas.transactions import TransactionIn
from budget_app.services.ledger.validators import ValidationError
from budget_app.services.notify import RecordingNotifier
from budget_app.services.reports.columns import InMemoryColumnPreferenceStore


def test_transaction_form_round_trip(db, seeded):
    notifier = RecordingNotifier()
    pid, table_id = seeded["project"].id, seeded["table"].id
    data = TransactionIn(project_id=pid, project_item_id=table_id, kind="expense", amount=450,
                         client_facing_amount=500, date=dt.date(2025, 4, 1))
    out = tx_router.post_transaction(data, db=db, notifier=notifier)
    assert out.kind == "expense"
    assert out.amount == 450
    assert out.entered_amount == 450
    assert out.entered_client_facing_amount == 500
    assert out.item_name == "Mesa"

    edit = data.model_copy(update={"kind": "income", "amount": 300})
    out = tx_router.put_transaction(out.id, edit, db=db, notifier=notifier)
    assert out.kind == "income"
    assert out.amount == -300
    assert out.client_facing_amount == -300
    assert out.entered_amount == 300
    assert out.entered_client_facing_amount == 300
    assert [m for _, m in notifier.messages] == ["Transacción registrada", "Transacción actualizada"]


def test_negative_magnitude_is_rejected(db, seeded):
    data = TransactionIn(project_id=seeded["project"].id, kind="expense", amount=-5, date=dt.date(2025, 4, 1))
    with pytest.raises(ValidationError):
        tx_router.post_transaction(data, db=db, notifier=RecordingNotifier())


def test_guidance_endpoint_excludes_edited_transaction(db, seeded):
    sofa = seeded["sofa"]
    g = tx_router.get_guidance(item_id=sofa.id, exclude_transaction_id=None, db=db)
    assert g.total_expenses == 900
    assert g.remaining_budget == 300

    first = next(t for t in sofa.transactions if t.amount == 800)
    g = tx_router.get_guidance(item_id=sofa.id, exclude_transaction_id=first.id, db=db)
    assert g.total_expenses == 100
    assert g.recommended_client_facing_amount == 1100

    with pytest.raises(HTTPException):
        tx_router.get_guidance(item_id=999, exclude_transaction_id=None, db=db)


def test_report_endpoint_with_filters(db, seeded):
    report = reports_router.project_report(
        seeded["project"].id, area="Sala", category=None, supplier_id=seeded["supplier"].id,
        item_id=None, show_income=True, show_balance=True, db=db,
    )
    assert [g.area for g in report.groups] == ["Sala"]
    assert [it.item_name for it in report.groups[0].items] == ["Sofá"]
    assert report.filter_subtitle == "Área: Sala · Proveedor: Maderas del Cibao"
    # income is project-wide, not filtered
    assert report.income_row.actual_cost == -2500


def test_csv_endpoint(db, seeded):
    resp = reports_router.export_csv(
        seeded["project"].id, columns="item_name,actual_cost", area=None, category=None, supplier_id=None,
        item_id=None, show_income=False, show_balance=False, db=db, store=InMemoryColumnPreferenceStore(),
    )
    assert resp.media_type.startswith("text/csv")
    lines = resp.body.decode("utf-8").splitlines()
    assert lines[0] == '"Artículo","Costo Actual"'
    assert lines[-1] == '"TOTAL GENERAL",1600'


def test_deleting_item_via_router(db, seeded):
    notifier = RecordingNotifier()
    items_router.remove_item(seeded["sofa"].id, db=db, notifier=notifier)
    with pytest.raises(HTTPException):
        items_router.remove_item(seeded["sofa"].id, db=db, notifier=notifier)
    assert notifier.messages == [("success", "Artículo eliminado")]
