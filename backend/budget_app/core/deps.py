from pathlib import Path

from budget_app.core.config import settings
from budget_app.db.session import SessionLocal
from budget_app.services.notify import LogNotifier, Notifier
from budget_app.services.reports.columns import ColumnPreferenceStore, JsonColumnPreferenceStore

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

def get_notifier() -> Notifier:
    return LogNotifier()

def get_column_store() -> ColumnPreferenceStore:
    return JsonColumnPreferenceStore(Path(settings.COLUMN_PREFS_PATH))
