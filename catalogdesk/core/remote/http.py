from __future__ import annotations

from decimal import Decimal
import logging
from typing import Any
from urllib.parse import quote

import requests

from ...config import Settings, get_settings
from ..canonical import (
    Draft,
    Product,
    ProductId,
    draft_to_product,
    product_from_payload,
    products_from_payload,
)
from .common import CatalogClient, RemoteError, http_session

logger = logging.getLogger(__name__)


class HttpCatalogClient(CatalogClient):
    """JSON-over-HTTP client for a ``<base_url>/products`` collection."""

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 20,
        retries: int = 0,
        session: requests.Session | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._http = session if session is not None else http_session(retries=retries)
        self.timeout = timeout

    @property
    def collection_url(self) -> str:
        return f"{self.base_url}/products"

    def _item_url(self, product_id: ProductId) -> str:
        return f"{self.collection_url}/{quote(str(product_id), safe='')}"

    def _send(self, method: str, url: str, *, json: dict[str, Any] | None = None) -> requests.Response:
        logger.debug("%s %s", method, url)
        try:
            response = self._http.request(method, url, json=json, timeout=self.timeout)
            response.raise_for_status()
        except requests.HTTPError as exc:
            status = getattr(exc.response, "status_code", None)
            raise RemoteError(f"Request failed with status code {status}", status_code=status) from exc
        except requests.RequestException as exc:
            raise RemoteError(str(exc) or exc.__class__.__name__) from exc
        return response

    def _decode(self, response: requests.Response) -> Any:
        try:
            return response.json(parse_float=Decimal)
        except ValueError as exc:
            raise RemoteError(f"Invalid JSON in response: {exc}", status_code=response.status_code) from exc

    def list_products(self) -> list[Product]:
        response = self._send("GET", self.collection_url)
        try:
            return products_from_payload(self._decode(response))
        except ValueError as exc:
            raise RemoteError(f"Invalid product list: {exc}", status_code=response.status_code) from exc

    def create_product(self, draft: Draft) -> Product:
        body = draft_to_product(draft).to_payload()
        body.pop("id", None)
        response = self._send("POST", self.collection_url, json=body)
        return self._product_from(response)

    def update_product(self, product_id: ProductId, draft: Draft) -> Product:
        body = draft_to_product(draft, product_id=product_id).to_payload()
        response = self._send("PUT", self._item_url(product_id), json=body)
        return self._product_from(response)

    def delete_product(self, product_id: ProductId) -> None:
        self._send("DELETE", self._item_url(product_id))

    def _product_from(self, response: requests.Response) -> Product:
        try:
            return product_from_payload(self._decode(response))
        except ValueError as exc:
            raise RemoteError(f"Invalid product: {exc}", status_code=response.status_code) from exc


def client_from_settings(settings: Settings | None = None) -> HttpCatalogClient:
    resolved = settings or get_settings()
    return HttpCatalogClient(
        resolved.api_base_url,
        timeout=resolved.request_timeout,
        retries=resolved.http_retries,
    )


__all__ = ["HttpCatalogClient", "client_from_settings"]
