from __future__ import annotations

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from ..canonical import Draft, Product, ProductId


class RemoteError(RuntimeError):
    """A remote catalog call failed: transport error, bad status or bad payload."""

    def __init__(self, message: str, *, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def __str__(self) -> str:
        return self.message


def http_session(retries: int = 0) -> requests.Session:
    s = requests.Session()
    # Mutating requests are never retried.
    retry = Retry(
        total=max(int(retries), 0),
        backoff_factor=0.6,
        status_forcelist=(429, 500, 502, 503, 504),
        allowed_methods=("GET",),
        raise_on_status=False,
    )
    adapter = HTTPAdapter(max_retries=retry)
    s.mount("https://", adapter)
    s.mount("http://", adapter)
    s.headers.update({"Accept": "application/json"})
    return s


class CatalogClient:
    """Remote products collection: list, create, update and delete by id."""

    def list_products(self) -> list[Product]:
        raise NotImplementedError

    def create_product(self, draft: Draft) -> Product:
        raise NotImplementedError

    def update_product(self, product_id: ProductId, draft: Draft) -> Product:
        raise NotImplementedError

    def delete_product(self, product_id: ProductId) -> None:
        raise NotImplementedError


__all__ = ["CatalogClient", "RemoteError", "http_session"]
