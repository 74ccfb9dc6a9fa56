"""Draft validation rules applied before any mutating request."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..canonical import is_blank, parse_price, survives_float
from .report import ValidationIssue, ValidationReport

NAME_REQUIRED = "Name is required"
DESCRIPTION_REQUIRED = "Description is required"
PRICE_REQUIRED = "Price is required"
PRICE_NOT_POSITIVE = "Price must be a positive number"


def _field(candidate: Any, name: str) -> Any:
    if isinstance(candidate, Mapping):
        return candidate.get(name)
    return getattr(candidate, name, None)


def _price_issue(value: Any) -> ValidationIssue | None:
    if is_blank(value):
        return ValidationIssue(code="missing_price", message=PRICE_REQUIRED, field="price")

    parsed = parse_price(value)
    # Sent as a JSON number, so it must survive float conversion unchanged.
    if parsed is None or parsed <= 0 or not survives_float(parsed):
        return ValidationIssue(code="invalid_price", message=PRICE_NOT_POSITIVE, field="price")
    return None


def validate_product(candidate: Any) -> ValidationReport:
    """Check a Draft, Product or plain mapping; every rule runs, none short-circuits."""
    issues: list[ValidationIssue] = []

    if is_blank(_field(candidate, "name")):
        issues.append(ValidationIssue(code="missing_name", message=NAME_REQUIRED, field="name"))

    if is_blank(_field(candidate, "description")):
        issues.append(
            ValidationIssue(
                code="missing_description",
                message=DESCRIPTION_REQUIRED,
                field="description",
            )
        )

    price_issue = _price_issue(_field(candidate, "price"))
    if price_issue is not None:
        issues.append(price_issue)

    return ValidationReport(valid=not issues, issues=issues)


__all__ = [
    "DESCRIPTION_REQUIRED",
    "NAME_REQUIRED",
    "PRICE_NOT_POSITIVE",
    "PRICE_REQUIRED",
    "validate_product",
]
