import json
from decimal import Decimal

import pytest
import requests

from catalogdesk.config import get_settings
from catalogdesk.core.canonical import Draft
from catalogdesk.core.remote import HttpCatalogClient, RemoteError, client_from_settings


class _FakeResponse:
    def __init__(self, *, status_code: int = 200, payload=None, text: str | None = None):
        self.status_code = status_code
        self._payload = payload
        self.text = text if text is not None else json.dumps(payload)

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"HTTP {self.status_code}", response=self)

    def json(self, **kwargs):
        return json.loads(self.text, **kwargs)


def _client_with(monkeypatch, responder) -> tuple[HttpCatalogClient, list[dict]]:
    client = HttpCatalogClient("http://catalog.test/api/", timeout=5)
    calls: list[dict] = []

    def fake_request(method, url, json=None, timeout=None):
        calls.append({"method": method, "url": url, "json": json, "timeout": timeout})
        return responder(method, url, json)

    monkeypatch.setattr(client._http, "request", fake_request)
    return client, calls


def test_list_products_decodes_prices_exactly(monkeypatch) -> None:
    payload = [
        {"id": 1, "name": "A", "description": "d", "price": 10},
        {"id": 2, "name": "B", "description": "e", "price": 0.1},
    ]
    client, calls = _client_with(monkeypatch, lambda *_: _FakeResponse(payload=payload))

    products = client.list_products()

    assert calls == [{"method": "GET", "url": "http://catalog.test/api/products", "json": None, "timeout": 5}]
    assert [p.id for p in products] == [1, 2]
    assert products[1].price == Decimal("0.1")


def test_create_product_posts_fields_without_id(monkeypatch) -> None:
    client, calls = _client_with(
        monkeypatch,
        lambda method, url, body: _FakeResponse(status_code=201, payload={"id": 7, **body}),
    )

    product = client.create_product(Draft(name=" B ", description="e", price="5", id=3))

    assert calls[0]["method"] == "POST"
    assert calls[0]["json"] == {"name": "B", "description": "e", "price": 5.0}
    assert product.id == 7
    assert product.price == Decimal("5")


def test_update_product_puts_to_item_url(monkeypatch) -> None:
    client, calls = _client_with(monkeypatch, lambda method, url, body: _FakeResponse(payload=body))

    product = client.update_product(2, Draft(name="B", description="e", price="2.5"))

    assert calls[0]["method"] == "PUT"
    assert calls[0]["url"] == "http://catalog.test/api/products/2"
    assert calls[0]["json"] == {"id": 2, "name": "B", "description": "e", "price": 2.5}
    assert product.id == 2


def test_delete_product_quotes_identifier(monkeypatch) -> None:
    client, calls = _client_with(monkeypatch, lambda *_: _FakeResponse(status_code=204, text=""))

    assert client.delete_product("a/b") is None
    assert calls[0]["method"] == "DELETE"
    assert calls[0]["url"] == "http://catalog.test/api/products/a%2Fb"


def test_error_status_becomes_remote_error(monkeypatch) -> None:
    client, _ = _client_with(monkeypatch, lambda *_: _FakeResponse(status_code=404, payload={"detail": "nope"}))

    with pytest.raises(RemoteError) as exc_info:
        client.delete_product(9)

    assert str(exc_info.value) == "Request failed with status code 404"
    assert exc_info.value.status_code == 404


def test_transport_error_becomes_remote_error(monkeypatch) -> None:
    def _raise(*_):
        raise requests.ConnectionError("Connection refused")

    client, _ = _client_with(monkeypatch, _raise)

    with pytest.raises(RemoteError, match="Connection refused"):
        client.list_products()


def test_invalid_json_becomes_remote_error(monkeypatch) -> None:
    client, _ = _client_with(monkeypatch, lambda *_: _FakeResponse(text="<html>oops</html>"))

    with pytest.raises(RemoteError, match="Invalid JSON"):
        client.list_products()


def test_malformed_product_becomes_remote_error(monkeypatch) -> None:
    client, _ = _client_with(monkeypatch, lambda *_: _FakeResponse(payload={"id": 1, "name": "A"}))

    with pytest.raises(RemoteError, match="Invalid product"):
        client.create_product(Draft(name="A", description="d", price="1"))


def test_list_requires_array_payload(monkeypatch) -> None:
    client, _ = _client_with(monkeypatch, lambda *_: _FakeResponse(payload={"items": []}))

    with pytest.raises(RemoteError, match="Invalid product list"):
        client.list_products()


def test_client_from_settings_uses_environment(monkeypatch) -> None:
    monkeypatch.setenv("CATALOG_API_BASE_URL", "https://shop.example/api/")
    monkeypatch.setenv("CATALOG_HTTP_TIMEOUT", "3.5")
    get_settings.cache_clear()

    client = client_from_settings()

    assert client.collection_url == "https://shop.example/api/products"
    assert client.timeout == 3.5
