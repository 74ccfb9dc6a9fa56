from decimal import Decimal, InvalidOperation
import math
from typing import Any


def is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def parse_price(value: Any) -> Decimal | None:
    """Parse a user-entered price.

    Unlike lenient money parsing this does not strip currency symbols or
    thousands separators: ``"1abc"`` and ``"$5"`` are rejected. Returns
    ``None`` for anything that is not a finite number.
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, Decimal):
        return value if value.is_finite() else None

    if isinstance(value, int):
        return Decimal(value)

    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return None
        return Decimal(str(value))

    if isinstance(value, str):
        cleaned = value.strip()
        if not cleaned:
            return None
        try:
            parsed = Decimal(cleaned)
        except InvalidOperation:
            return None
        return parsed if parsed.is_finite() else None

    return None


def survives_float(value: Decimal) -> bool:
    """True when the JSON number sent on the wire reads back as the same value."""
    as_float = float(value)
    if math.isinf(as_float):
        return False
    return Decimal(str(as_float)) == value


def format_decimal(value: Decimal | None) -> str:
    if value is None:
        return ""
    if not value.is_finite():
        return ""

    text = format(value.normalize(), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in {"", "-0"}:
        return "0"
    return text


def clean_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


__all__ = ["clean_text", "format_decimal", "is_blank", "parse_price", "survives_float"]
