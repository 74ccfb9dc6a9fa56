from .report import ValidationErrors, ValidationIssue, ValidationReport
from .rules import (
    DESCRIPTION_REQUIRED,
    NAME_REQUIRED,
    PRICE_NOT_POSITIVE,
    PRICE_REQUIRED,
    validate_product,
)

__all__ = [
    "DESCRIPTION_REQUIRED",
    "NAME_REQUIRED",
    "PRICE_NOT_POSITIVE",
    "PRICE_REQUIRED",
    "ValidationErrors",
    "ValidationIssue",
    "ValidationReport",
    "validate_product",
]
