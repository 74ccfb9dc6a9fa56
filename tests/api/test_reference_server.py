from fastapi.testclient import TestClient

from catalogdesk.server.main import create_app
from tests.helpers._catalog_fakes import make_product


def _client(*products) -> TestClient:
    return TestClient(create_app(products))


def test_health() -> None:
    response = _client().get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_list_returns_seeded_products_in_order() -> None:
    client = _client(make_product(name="A", price="10"), make_product(name="B", price="2.5"))

    response = client.get("/api/products")

    assert response.status_code == 200
    assert response.json() == [
        {"id": 1, "name": "A", "description": "d", "price": 10.0},
        {"id": 2, "name": "B", "description": "d", "price": 2.5},
    ]


def test_create_assigns_next_id() -> None:
    client = _client(make_product(name="A"))

    response = client.post("/api/products", json={"name": " B ", "description": "e", "price": 5})

    assert response.status_code == 201
    assert response.json() == {"id": 2, "name": "B", "description": "e", "price": 5.0}
    assert len(client.get("/api/products").json()) == 2


def test_create_rejects_invalid_payload() -> None:
    client = _client()

    response = client.post("/api/products", json={"name": " ", "description": "e", "price": 0})

    assert response.status_code == 422
    assert client.get("/api/products").json() == []


def test_update_replaces_product_and_ignores_body_id() -> None:
    client = _client(make_product(name="A"), make_product(name="B"))

    response = client.put("/api/products/2", json={"id": 99, "name": "B2", "description": "e", "price": "7.25"})

    assert response.status_code == 200
    assert response.json() == {"id": 2, "name": "B2", "description": "e", "price": 7.25}
    assert [p["name"] for p in client.get("/api/products").json()] == ["A", "B2"]


def test_update_unknown_id_is_404() -> None:
    response = _client().put("/api/products/5", json={"name": "B", "description": "e", "price": 1})

    assert response.status_code == 404


def test_delete_removes_product() -> None:
    client = _client(make_product(name="A"), make_product(name="B"))

    response = client.delete("/api/products/1")

    assert response.status_code == 204
    assert [p["id"] for p in client.get("/api/products").json()] == [2]
    assert client.delete("/api/products/1").status_code == 404
