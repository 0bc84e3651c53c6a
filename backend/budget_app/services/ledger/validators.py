from typing import Any


class ValidationError(ValueError):
    """Deterministic input-validation failure reported back to the caller."""

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.message = message
        self.field = field


def is_negative(v: Any) -> bool:
    try:
        return float(v) < 0
    except (TypeError, ValueError):
        return False


def require_fields(obj: Any, *names: str) -> None:
    for name in names:
        value = obj.get(name) if isinstance(obj, dict) else getattr(obj, name, None)
        if value is None:
            raise ValidationError(f"{name} is required", field=name)
