import json

import pytest

from catalogdesk.cli import main as cli
from tests.helpers._catalog_fakes import FakeCatalogClient, make_product


@pytest.fixture
def fake_client(monkeypatch) -> FakeCatalogClient:
    client = FakeCatalogClient([make_product(1, "A"), make_product(2, "B")], next_id=3)
    seen_urls: list = []

    def fake_make_client(base_url):
        seen_urls.append(base_url)
        return client

    monkeypatch.setattr(cli, "_make_client", fake_make_client)
    client.seen_urls = seen_urls  # type: ignore[attr-defined]
    return client


def _output(capsys):
    return json.loads(capsys.readouterr().out)


def test_list_prints_products(fake_client, capsys) -> None:
    assert cli.main(["--base-url", "http://x/api", "list"]) == 0

    assert [p["name"] for p in _output(capsys)] == ["A", "B"]
    assert fake_client.seen_urls == ["http://x/api"]


def test_add_reports_validation_errors_without_calling_remote(fake_client, capsys) -> None:
    assert cli.main(["add", "--name", "C", "--price", "abc"]) == 1

    out = _output(capsys)
    assert out["status"] == "invalid"
    assert set(out["errors"]) == {"description", "price"}
    assert fake_client.calls["create"] == 0


def test_add_creates_product(fake_client, capsys) -> None:
    assert cli.main(["add", "--name", "C", "--description", "c", "--price", "4.5"]) == 0

    out = _output(capsys)
    assert out["product"] == {"id": 3, "name": "C", "description": "c", "price": 4.5}


def test_edit_applies_overrides(fake_client, capsys) -> None:
    assert cli.main(["edit", "2", "--price", "9"]) == 0

    out = _output(capsys)
    assert out["product"] == {"id": 2, "name": "B", "description": "d", "price": 9.0}


def test_edit_unknown_id(fake_client, capsys) -> None:
    assert cli.main(["edit", "42", "--name", "x"]) == 1

    assert _output(capsys)["status"] == "not_found"
    assert fake_client.calls["update"] == 0


def test_delete_failure_exits_nonzero(fake_client, capsys) -> None:
    fake_client.fail = {"delete"}
    fake_client.fail_message = "Request failed with status code 404"

    assert cli.main(["delete", "7"]) == 1

    out = _output(capsys)
    assert out["message"] == "Error deleting product: Request failed with status code 404"
    assert fake_client.received[-1] == ("delete", 7)
