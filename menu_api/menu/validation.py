"""Field rules for menu item payloads.

Every rule in ``MENU_ITEM_RULES`` is evaluated against the payload, so a single
response reports all violations at once. Free-text fields are cleaned before
the rules run and HTML-escaped once the payload is accepted.
"""

from __future__ import annotations

import html
import math
import re
from collections.abc import Callable, Mapping
from typing import Any

from menu_api.core.errors import FieldViolation, MenuValidationError
from menu_api.menu.models import CATEGORIES, MenuItemFields

CONTROL_CHARS_RE = re.compile(r"[\x00-\x1f\x7f]")

TEXT_FIELDS = ("name", "description")

_MISSING = object()

Predicate = Callable[[Any], bool]


def _clean_text(value: Any) -> Any:
    if not isinstance(value, str):
        return value
    return CONTROL_CHARS_RE.sub("", value).strip()


def _is_text(min_length: int) -> Predicate:
    def check(value: Any) -> bool:
        return isinstance(value, str) and len(value) >= min_length

    return check


def _is_positive_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        number = float(value)
    except OverflowError:
        return False
    return math.isfinite(number) and number > 0


def _is_category(value: Any) -> bool:
    return isinstance(value, str) and value in CATEGORIES


def _is_non_empty_list(value: Any) -> bool:
    return isinstance(value, list) and len(value) >= 1


def _has_text_elements(value: Any) -> bool:
    # Only judged when the value is a list; other shapes are reported above.
    if not isinstance(value, list):
        return True
    return all(isinstance(element, str) for element in value)


def _is_optional_bool(value: Any) -> bool:
    return value is _MISSING or isinstance(value, bool)


MENU_ITEM_RULES: tuple[tuple[str, Predicate, str], ...] = (
    ("name", _is_text(3), "Name must be at least 3 chars"),
    ("description", _is_text(10), "Description must be at least 10 chars"),
    ("price", _is_positive_number, "Price must be greater than 0"),
    ("category", _is_category, "Invalid category"),
    ("ingredients", _is_non_empty_list, "At least one ingredient required"),
    ("ingredients", _has_text_elements, "Ingredients must be a list of text"),
    ("available", _is_optional_bool, "Available must be a boolean"),
)


def collect_violations(payload: Any) -> list[FieldViolation]:
    """Run every rule and return the violations in rule order."""
    data: Mapping[str, Any] = payload if isinstance(payload, Mapping) else {}
    violations: list[FieldViolation] = []
    for field, predicate, message in MENU_ITEM_RULES:
        value = data.get(field, _MISSING)
        if field in TEXT_FIELDS:
            value = _clean_text(value)
        if not predicate(value):
            violations.append(FieldViolation(field=field, message=message))
    return violations


def validate_menu_item(payload: Any) -> MenuItemFields:
    """Validate a create/update payload or raise ``MenuValidationError``."""
    violations = collect_violations(payload)
    if violations:
        raise MenuValidationError(violations)

    available = payload.get("available", True)
    return MenuItemFields(
        name=html.escape(_clean_text(payload["name"])),
        description=html.escape(_clean_text(payload["description"])),
        price=float(payload["price"]),
        category=payload["category"],
        ingredients=list(payload["ingredients"]),
        available=available,
    )
