from decimal import Decimal
from typing import Any

from babel.numbers import get_currency_symbol

from ..config import get_settings
from ..core.canonical import Product, format_decimal

_DEFAULT_DESCRIPTION_LIMITS = {
    "low": 80,
    "medium": 160,
    "high": 240,
}
_SUPPORTED_VERBOSITIES = {"low", "medium", "high", "extrahigh"}


def _truncate_description(value: str | None, *, limit: int) -> str:
    text = str(value or "").strip()
    if len(text) <= limit:
        return text
    return f"{text[:limit].rstrip()}... [truncated]"


def _normalize_verbosity(verbosity: str) -> str:
    normalized = str(verbosity or "").strip().lower()
    if normalized in _SUPPORTED_VERBOSITIES:
        return normalized
    return "medium"


def _format_price(value: Decimal | None, currency: str | None) -> str:
    if value is None:
        return ""
    number = format_decimal(value)

    symbol = ""
    currency_code = str(currency or "").upper()
    if currency_code:
        try:
            symbol = get_currency_symbol(currency_code, locale="en_US")
        except Exception:
            symbol = currency_code

    if symbol:
        if symbol.isalpha():
            return f"{number} {symbol}"
        return f"{number}{symbol}"
    return number


def _full_dict(product: Product) -> dict[str, Any]:
    data = product.to_dict()
    data["price"] = format_decimal(product.price)
    return data


def product_to_loggable(
    product: Product,
    *,
    verbosity: str | None = None,
    debug_enabled: bool | None = None,
    currency: str | None = None,
) -> dict[str, Any] | None:
    """JSON-safe summary of a product for debug logs, or None when debug is off."""
    settings = get_settings()
    if debug_enabled is None:
        debug_enabled = settings.debug

    if not debug_enabled:
        return None

    resolved_verbosity = verbosity if verbosity is not None else settings.log_verbosity
    level = _normalize_verbosity(resolved_verbosity)
    if level == "extrahigh":
        return _full_dict(product)

    if level == "high":
        data = _full_dict(product)
        data["description"] = _truncate_description(data.get("description"), limit=_DEFAULT_DESCRIPTION_LIMITS["high"])
        return data

    price = _format_price(product.price, currency if currency is not None else settings.currency)

    if level == "low":
        return {"name": product.name, "price": price}

    return {
        "name": product.name,
        "description": _truncate_description(product.description, limit=_DEFAULT_DESCRIPTION_LIMITS["medium"]),
        "price": price,
    }


def products_to_loggable(
    products: list[Product],
    *,
    verbosity: str | None = None,
    debug_enabled: bool | None = None,
    currency: str | None = None,
) -> list[dict[str, Any]] | None:
    if debug_enabled is None:
        debug_enabled = get_settings().debug
    if not debug_enabled:
        return None
    return [
        product_to_loggable(product, verbosity=verbosity, debug_enabled=True, currency=currency)  # type: ignore[misc]
        for product in products
    ]


__all__ = ["product_to_loggable", "products_to_loggable"]
