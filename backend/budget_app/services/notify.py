"""User-facing notifications for the HTTP layer.

The ledger, guidance and report code never notify; routers receive a
``Notifier`` through dependency injection.
"""
from typing import Any, Protocol

from budget_app.core.logging import logger


class Notifier(Protocol):
    def success(self, message: str, **context: Any) -> None: ...

    def error(self, message: str, **context: Any) -> None: ...


class LogNotifier:
    def __init__(self, log=None):
        self._log = log or logger

    def success(self, message: str, **context: Any) -> None:
        self._log.info("notify_success", message=message, **context)

    def error(self, message: str, **context: Any) -> None:
        self._log.warning("notify_error", message=message, **context)


class RecordingNotifier:
    """Keeps messages in memory; handy for tests and previews."""

    def __init__(self):
        self.messages: list[tuple[str, str]] = []

    def success(self, message: str, **context: Any) -> None:
        self.messages.append(("success", message))

    def error(self, message: str, **context: Any) -> None:
        self.messages.append(("error", message))
