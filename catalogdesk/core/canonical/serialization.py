from collections.abc import Mapping
from typing import Any

from .entities import Draft, Product, ProductId
from .helpers import clean_text, parse_price


def product_from_payload(data: Any) -> Product:
    if not isinstance(data, dict):
        raise ValueError(f"Expected a product object, got {type(data).__name__}.")

    price = parse_price(data.get("price"))
    if price is None:
        raise ValueError(f"Product payload has no usable price: {data.get('price')!r}")

    return Product(
        id=data.get("id"),
        name=clean_text(data.get("name")),
        description=clean_text(data.get("description")),
        price=price,
    )


def products_from_payload(data: Any) -> list[Product]:
    if not isinstance(data, list):
        raise ValueError(f"Expected a list of products, got {type(data).__name__}.")
    return [product_from_payload(item) for item in data]


def draft_to_product(draft: Draft, *, product_id: ProductId | None = None) -> Product:
    """Convert a validated draft into a Product ready to send."""
    price = parse_price(draft.price)
    if price is None:
        raise ValueError(f"Draft price is not a number: {draft.price!r}")
    return Product(
        id=product_id if product_id is not None else draft.id,
        name=clean_text(draft.name),
        description=clean_text(draft.description),
        price=price,
    )


def as_draft(candidate: Draft | Product | Mapping[str, Any]) -> Draft:
    if isinstance(candidate, Draft):
        return candidate.copy()
    if isinstance(candidate, Product):
        return Draft.from_product(candidate)
    if isinstance(candidate, Mapping):
        return Draft(
            name=candidate.get("name", ""),
            description=candidate.get("description", ""),
            price=candidate.get("price", ""),
            id=candidate.get("id"),
        )
    raise TypeError(f"Expected Draft, Product or mapping, got {type(candidate).__name__}.")


__all__ = ["as_draft", "draft_to_product", "product_from_payload", "products_from_payload"]
