import pytest

from budget_app.schemas.items import ProjectItem
from budget_app.schemas.transactions import Transaction
from budget_app.services.guidance import compute_budget_guidance
from budget_app.services.ledger.validators import ValidationError


def _item(client_cost, estimated_cost=None):
    return ProjectItem(id=1, project_id=1, item_name="Sofá", client_cost=client_cost, estimated_cost=estimated_cost)


def _tx(id, amount):
    return Transaction(id=id, project_id=1, project_item_id=1, amount=amount)


def test_excluding_the_edited_transaction():
    item = _item(1000)
    txs = [_tx(10, 600)]

    g = compute_budget_guidance(item, txs, exclude_transaction_id=10)
    assert g.total_expenses == 0
    assert g.remaining_budget == 1000
    assert g.recommended_client_facing_amount == 1000

    g = compute_budget_guidance(item, txs)
    assert g.total_expenses == 600
    assert g.remaining_budget == 400
    assert g.recommended_client_facing_amount == 400


def test_first_payment_recommends_full_budget():
    item = _item(500)
    g = compute_budget_guidance(item, [])
    assert g.recommended_client_facing_amount == 500
    assert g.remaining_budget == 500
    assert g.is_over_budget is False

    g = compute_budget_guidance(item, [_tx(1, 200)])
    assert g.remaining_budget == 300
    assert g.recommended_client_facing_amount == 300


def test_over_budget_is_flagged_and_recommendation_clamped():
    g = compute_budget_guidance(_item(100), [_tx(1, 150)])
    assert g.remaining_budget == -50
    assert g.is_over_budget is True
    assert g.recommended_client_facing_amount == 0


def test_income_on_the_item_is_not_spent():
    g = compute_budget_guidance(_item(1000), [_tx(1, 300), _tx(2, -700)])
    assert g.total_expenses == 300
    assert g.remaining_budget == 700
    assert g.recommended_client_facing_amount == 700


def test_unknown_client_cost_propagates_none():
    g = compute_budget_guidance(_item(None, estimated_cost=800), [_tx(1, 300)])
    assert g.total_expenses == 300
    assert g.remaining_budget is None
    assert g.is_over_budget is False
    assert g.recommended_client_facing_amount is None
    assert g.estimated_cost == 800
    assert g.item_name == "Sofá"


def test_new_transaction_excludes_nothing():
    txs = [_tx(1, 100), _tx(2, 50)]
    assert compute_budget_guidance(_item(400), txs, exclude_transaction_id=None).total_expenses == 150


def test_inputs_are_not_modified():
    item = _item(1000)
    txs = [_tx(1, 100)]
    before = ([t.model_copy() for t in txs], item.model_copy())
    compute_budget_guidance(item, txs, exclude_transaction_id=1)
    assert (txs, item) == before


def test_item_without_id_is_rejected():
    with pytest.raises(ValidationError) as exc:
        compute_budget_guidance(ProjectItem(client_cost=10), [])
    assert exc.value.field == "id"


def test_item_without_project_is_rejected():
    with pytest.raises(ValidationError) as exc:
        compute_budget_guidance(ProjectItem(id=1, client_cost=10), [])
    assert exc.value.field == "project_id"
