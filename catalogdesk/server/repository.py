"""In-memory products collection backing the reference server."""

from __future__ import annotations

import threading
from decimal import Decimal
from typing import Iterable

from ..core.canonical import Product


class ProductRepository:
    """Insertion-ordered products with server-assigned incrementing integer ids."""

    def __init__(self, products: Iterable[Product] = ()):
        self._lock = threading.Lock()
        self._items: dict[int, Product] = {}
        self._next_id = 1
        for product in products:
            self.add(product.name, product.description, product.price)

    def all(self) -> list[Product]:
        with self._lock:
            return list(self._items.values())

    def get(self, product_id: int) -> Product | None:
        with self._lock:
            return self._items.get(product_id)

    def add(self, name: str, description: str, price: Decimal) -> Product:
        with self._lock:
            product = Product(id=self._next_id, name=name, description=description, price=price)
            self._items[product.id] = product
            self._next_id += 1
            return product

    def replace(self, product_id: int, name: str, description: str, price: Decimal) -> Product | None:
        with self._lock:
            if product_id not in self._items:
                return None
            product = Product(id=product_id, name=name, description=description, price=price)
            self._items[product_id] = product
            return product

    def remove(self, product_id: int) -> bool:
        with self._lock:
            return self._items.pop(product_id, None) is not None


__all__ = ["ProductRepository"]
