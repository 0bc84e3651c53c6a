from budget_app.schemas.items import ProjectItem
from budget_app.services.costs import difference_percentage, format_currency, format_percentage, item_line_totals, line_total

def test_line_total_scales_and_propagates_none():
    assert line_total(250.0, 3) == 750.0
    assert line_total(0, 5) == 0.0
    assert line_total(None, 4) is None
    assert line_total(99.5, None) == 99.5

def test_item_line_totals():
    item = ProjectItem(id=1, quantity=2, estimated_cost=100, internal_cost=None, client_cost=130)
    assert item_line_totals(item) == {"estimated_cost": 200.0, "internal_cost": None, "client_cost": 260.0}

def test_quantity_defaults_to_one():
    item = ProjectItem(id=1, quantity=None, client_cost=10)
    assert item.quantity == 1

def test_difference_percentage():
    assert difference_percentage(100, 125) == 25.0
    assert difference_percentage(200, 150) == -25.0
    assert difference_percentage(None, 10) is None
    assert difference_percentage(0, 10) is None

def test_format_currency():
    assert format_currency(None) == "-"
    assert format_currency(1234567.5) == "RD$1,234,567.50"
    assert format_currency(-300) == "-RD$300.00"
    assert format_currency(0, prefix="") == "0.00"

def test_format_percentage():
    assert format_percentage(None) == "-"
    assert format_percentage(12.345) == "12.35%"
