import datetime as dt
import math

import pytest
from hypothesis import given, strategies as st

from budget_app.schemas.transactions import Transaction, TransactionIn
from budget_app.services.ledger.rules import (
    build_transaction,
    classify,
    form_values,
    to_stored_amount,
    to_stored_client_facing_amount,
    total_income,
)
from budget_app.services.ledger.validators import ValidationError


def test_stored_amount_sign():
    assert to_stored_amount("expense", 150) == 150
    assert to_stored_amount("income", 150) == -150


def test_negative_entry_rejected():
    with pytest.raises(ValidationError) as exc:
        to_stored_amount("expense", -1)
    assert exc.value.field == "amount"
    with pytest.raises(ValidationError):
        to_stored_amount("income", -0.01)


def test_unknown_kind_rejected():
    with pytest.raises(ValidationError):
        to_stored_amount("refund", 10)


def test_client_facing_amount_for_income_matches_amount():
    stored = to_stored_amount("income", 400)
    assert to_stored_client_facing_amount("income", stored, 123) == stored == -400


def test_client_facing_amount_for_expense_is_independent():
    assert to_stored_client_facing_amount("expense", 400, 550) == 550
    assert to_stored_client_facing_amount("expense", 400, None) is None


def test_classify():
    assert classify(-0.01) == "income"
    assert classify(0) == "expense"
    assert classify(10) == "expense"


@given(
    kind=st.sampled_from(["expense", "income"]),
    entered=st.floats(min_value=0, max_value=1e12, allow_nan=False, allow_infinity=False),
)
def test_sign_round_trip(kind, entered):
    stored = to_stored_amount(kind, entered)
    assert classify(stored) == kind
    if kind == "income":
        assert to_stored_client_facing_amount(kind, stored, None) == stored


def test_zero_income_still_classifies_as_income():
    stored = to_stored_amount("income", 0)
    assert math.copysign(1.0, stored) < 0
    assert classify(stored) == "income"


def test_total_income_is_positive_sum_of_client_payments():
    txs = [Transaction(amount=-1000), Transaction(amount=250), Transaction(amount=-500.5), Transaction(amount=0)]
    assert total_income(txs) == 1500.5
    assert total_income([]) == 0


def test_build_transaction_and_form_values():
    data = TransactionIn(project_id=7, project_item_id=3, kind="income", amount=900,
                         client_facing_amount=5, date=dt.date(2025, 1, 10))
    tx = build_transaction(data, transaction_id=11)
    assert tx.id == 11
    assert tx.amount == -900
    assert tx.client_facing_amount == -900
    assert tx.payment_method == "Efectivo"
    assert form_values(tx) == {"kind": "income", "amount": 900, "client_facing_amount": 900}


def test_build_transaction_requires_project():
    data = TransactionIn.model_construct(project_id=None, project_item_id=None, kind="expense", amount=10,
                                         client_facing_amount=None, date=dt.date(2025, 1, 1))
    with pytest.raises(ValidationError) as exc:
        build_transaction(data)
    assert exc.value.field == "project_id"
