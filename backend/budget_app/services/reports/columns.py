"""Report columns and where the visible-column choice is kept."""
import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Protocol, Sequence

from budget_app.core.logging import logger
from budget_app.schemas.reports import ReportItem
from budget_app.services.costs import format_currency, format_percentage
from budget_app.services.ledger.validators import ValidationError


@dataclass(frozen=True)
class ColumnConfig:
    id: str
    label: str
    render: Callable[[ReportItem], str]
    numeric: bool = False
    visible: bool = True

    def value(self, item: ReportItem):
        """Raw cell value: the number for numeric columns, else the rendered text."""
        if self.numeric:
            return getattr(item, self.id, None)
        return self.render(item)


def _text(attr: str, blank: str = "-") -> Callable[[ReportItem], str]:
    return lambda item: getattr(item, attr, None) or blank


def _money(attr: str) -> Callable[[ReportItem], str]:
    return lambda item: format_currency(getattr(item, attr, None))


COLUMNS: tuple[ColumnConfig, ...] = (
    ColumnConfig("area", "Área", _text("area")),
    ColumnConfig("category", "Categoría", _text("category")),
    ColumnConfig("item_name", "Artículo", _text("item_name", blank="")),
    ColumnConfig("description", "Descripción", _text("description")),
    ColumnConfig("supplier_name", "Proveedor", _text("supplier_name"), visible=False),
    ColumnConfig("estimated_cost", "Costo Estimado", _money("estimated_cost"), numeric=True),
    ColumnConfig("internal_cost", "Costo Interno", _money("internal_cost"), numeric=True, visible=False),
    ColumnConfig("actual_cost", "Costo Actual", _money("actual_cost"), numeric=True),
    ColumnConfig(
        "difference_percentage",
        "% Diferencia",
        lambda item: format_percentage(item.difference_percentage),
        numeric=True,
        visible=False,
    ),
    ColumnConfig("amount_paid", "Pagado", _money("amount_paid"), numeric=True),
    ColumnConfig("internal_amount_paid", "Pagado Interno", _money("internal_amount_paid"), numeric=True, visible=False),
    ColumnConfig("pending_to_pay", "Pendiente", _money("pending_to_pay"), numeric=True),
)

COLUMNS_BY_ID = {c.id: c for c in COLUMNS}


def default_visibility() -> dict[str, bool]:
    return {c.id: c.visible for c in COLUMNS}


class ColumnPreferenceStore(Protocol):
    def load(self) -> dict[str, bool] | None: ...

    def save(self, state: dict[str, bool]) -> None: ...


@dataclass
class InMemoryColumnPreferenceStore:
    state: dict[str, bool] | None = None

    def load(self) -> dict[str, bool] | None:
        return dict(self.state) if self.state is not None else None

    def save(self, state: dict[str, bool]) -> None:
        self.state = dict(state)


@dataclass
class JsonColumnPreferenceStore:
    path: Path
    key: str = field(default="report_columns")

    def load(self) -> dict[str, bool] | None:
        if not self.path.exists():
            return None
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except json.JSONDecodeError:
            logger.warning("column_prefs_unreadable", path=str(self.path))
            return None
        state = data.get(self.key)
        if not isinstance(state, dict):
            return None
        return {k: bool(v) for k, v in state.items()}

    def save(self, state: dict[str, bool]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        data = {}
        if self.path.exists():
            try:
                data = json.loads(self.path.read_text(encoding="utf-8"))
            except json.JSONDecodeError:
                data = {}
        data[self.key] = dict(state)
        self.path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")


def toggle_column(store: ColumnPreferenceStore, column_id: str) -> dict[str, bool]:
    if column_id not in COLUMNS_BY_ID:
        raise ValidationError(f"unknown report column: {column_id}", field="columns")
    state = default_visibility()
    state.update({k: v for k, v in (store.load() or {}).items() if k in COLUMNS_BY_ID})
    state[column_id] = not state[column_id]
    store.save(state)
    return state


def resolve_columns(
    store: ColumnPreferenceStore | None = None,
    requested: Sequence[str] | None = None,
) -> list[ColumnConfig]:
    """Ordered visible columns.

    An explicit ``requested`` id list wins and keeps its own order; otherwise
    stored preferences are laid over the defaults in registry order.
    """
    if requested:
        unknown = [cid for cid in requested if cid not in COLUMNS_BY_ID]
        if unknown:
            raise ValidationError(f"unknown report columns: {', '.join(unknown)}", field="columns")
        return [COLUMNS_BY_ID[cid] for cid in requested]

    state = default_visibility()
    if store is not None:
        state.update({k: v for k, v in (store.load() or {}).items() if k in COLUMNS_BY_ID})
    return [c for c in COLUMNS if state[c.id]]
