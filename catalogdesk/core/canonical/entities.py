from dataclasses import dataclass, replace
from decimal import Decimal
from typing import Any

from .helpers import format_decimal

ProductId = int | str
ProductField = str

PRODUCT_FIELDS: tuple[ProductField, ...] = ("name", "description", "price")


@dataclass
class Product:
    id: ProductId | None
    name: str
    description: str
    price: Decimal

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "price": self.price,
        }

    def to_payload(self) -> dict[str, Any]:
        """JSON-ready body; identifier omitted while unassigned."""
        data: dict[str, Any] = {
            "name": self.name,
            "description": self.description,
            "price": float(self.price),
        }
        if self.id is not None:
            data["id"] = self.id
        return data


@dataclass
class Draft:
    """Product fields under edit, kept as the raw text the user typed."""

    name: str = ""
    description: str = ""
    price: Any = ""
    id: ProductId | None = None

    @classmethod
    def empty(cls) -> "Draft":
        return cls()

    @classmethod
    def from_product(cls, product: Product) -> "Draft":
        return cls(
            name=product.name,
            description=product.description,
            price=format_decimal(product.price),
            id=product.id,
        )

    def copy(self, **changes: Any) -> "Draft":
        return replace(self, **changes)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "price": self.price,
        }


__all__ = ["PRODUCT_FIELDS", "Draft", "Product", "ProductField", "ProductId"]
