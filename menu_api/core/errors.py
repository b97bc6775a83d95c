from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FieldViolation:
    field: str
    message: str

    def as_dict(self) -> dict[str, str]:
        return {"field": self.field, "message": self.message}


class MenuError(Exception):
    """Base class for expected, caller-actionable menu failures."""


class MenuValidationError(MenuError):
    def __init__(self, errors: list[FieldViolation]) -> None:
        super().__init__(", ".join(f"{e.field}: {e.message}" for e in errors))
        self.errors = errors


class MenuItemNotFoundError(MenuError):
    def __init__(self, item_id: int | None) -> None:
        super().__init__(f"Menu item {item_id} not found")
        self.item_id = item_id
