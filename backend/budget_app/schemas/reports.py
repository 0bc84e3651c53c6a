from typing import Literal
from pydantic import BaseModel, ConfigDict


class ReportItem(BaseModel):
    """One row of the reporting query; all money already scaled by quantity."""

    model_config = ConfigDict(from_attributes=True)

    item_id: int | None = None
    area: str | None = None
    category: str | None = None
    item_name: str = ""
    description: str | None = None
    estimated_cost: float | None = None
    internal_cost: float | None = None
    actual_cost: float | None = None
    difference_percentage: float | None = None
    amount_paid: float | None = None
    internal_amount_paid: float | None = None
    pending_to_pay: float | None = None
    supplier_id: int | None = None
    supplier_name: str | None = None


class ReportTotals(BaseModel):
    estimated_cost: float = 0.0
    actual_cost: float = 0.0
    amount_paid: float = 0.0
    internal_amount_paid: float = 0.0
    pending_to_pay: float = 0.0


class GrandTotals(ReportTotals):
    pass


class GroupedReportData(BaseModel):
    area: str
    items: list[ReportItem]
    totals: ReportTotals


class SummaryRow(BaseModel):
    kind: Literal["income", "balance"]
    label: str
    actual_cost: float
    negative: bool = False


class ProjectReport(BaseModel):
    project_id: int | None = None
    groups: list[GroupedReportData]
    grand_totals: GrandTotals
    total_income: float = 0.0
    income_row: SummaryRow | None = None
    balance_row: SummaryRow | None = None
    filter_subtitle: str | None = None


class BudgetGuidance(BaseModel):
    item_name: str
    client_cost: float | None
    estimated_cost: float | None
    total_expenses: float
    remaining_budget: float | None
    is_over_budget: bool
    recommended_client_facing_amount: float | None
