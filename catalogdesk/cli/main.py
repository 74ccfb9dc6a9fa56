"""Command-line frontend for the catalog store."""

from __future__ import annotations

import argparse
import json
from dataclasses import replace
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from catalogdesk.config import get_settings
from catalogdesk.core import CatalogClient, CatalogStore, Draft, OperationResult, Product, client_from_settings

load_dotenv(Path(__file__).resolve().parents[2] / ".env")


def _json_dump(data: Any) -> None:
    print(json.dumps(data, ensure_ascii=False, indent=2))


def _parse_id(value: str) -> int | str:
    stripped = value.strip()
    return int(stripped) if stripped.isdigit() else stripped


def _make_client(base_url: str | None) -> CatalogClient:
    settings = get_settings()
    if base_url:
        settings = replace(settings, api_base_url=base_url.rstrip("/"))
    return client_from_settings(settings)


def _store(args: argparse.Namespace) -> CatalogStore:
    return CatalogStore(_make_client(args.base_url))


def _report(result: OperationResult) -> int:
    payload: dict[str, Any] = {"status": result.status}
    if result.errors:
        payload["errors"] = result.errors
    if result.message:
        payload["message"] = result.message
    if result.product is not None:
        payload["product"] = result.product.to_payload()
    _json_dump(payload)
    return 0 if result.ok else 1


def _products(store: CatalogStore) -> list[dict[str, Any]]:
    return [product.to_payload() for product in store.state.products]


def _cmd_list(args: argparse.Namespace) -> int:
    store = _store(args)
    result = store.load_all()
    if not result.ok:
        return _report(result)
    _json_dump(_products(store))
    return 0


def _cmd_add(args: argparse.Namespace) -> int:
    store = _store(args)
    draft = Draft(name=args.name, description=args.description, price=args.price)
    return _report(store.submit_new(draft))


def _find(store: CatalogStore, product_id: int | str) -> Product | None:
    for product in store.state.products:
        if str(product.id) == str(product_id):
            return product
    return None


def _cmd_edit(args: argparse.Namespace) -> int:
    store = _store(args)
    loaded = store.load_all()
    if not loaded.ok:
        return _report(loaded)

    product_id = _parse_id(args.id)
    product = _find(store, product_id)
    if product is None:
        _json_dump({"status": "not_found", "message": f"No product with id {args.id}"})
        return 1

    store.begin_edit(product)
    overrides = {
        name: value
        for name, value in (("name", args.name), ("description", args.description), ("price", args.price))
        if value is not None
    }
    store.update_editing_draft(**overrides)
    return _report(store.submit_edit(product.id))


def _cmd_delete(args: argparse.Namespace) -> int:
    store = _store(args)
    return _report(store.delete_one(_parse_id(args.id)))


def _cmd_serve(args: argparse.Namespace) -> int:
    from catalogdesk.server.main import run

    run(host=args.host, port=args.port)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="catalogdesk", description="Manage a remote product catalog")
    parser.add_argument("--base-url", default=None, help="Catalog API base URL (default: CATALOG_API_BASE_URL)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    list_cmd = subparsers.add_parser("list", help="List all products")
    list_cmd.set_defaults(func=_cmd_list)

    add_cmd = subparsers.add_parser("add", help="Validate and create a product")
    add_cmd.add_argument("--name", default="")
    add_cmd.add_argument("--description", default="")
    add_cmd.add_argument("--price", default="")
    add_cmd.set_defaults(func=_cmd_add)

    edit_cmd = subparsers.add_parser("edit", help="Validate and update an existing product")
    edit_cmd.add_argument("id", help="Product id")
    edit_cmd.add_argument("--name", default=None)
    edit_cmd.add_argument("--description", default=None)
    edit_cmd.add_argument("--price", default=None)
    edit_cmd.set_defaults(func=_cmd_edit)

    delete_cmd = subparsers.add_parser("delete", help="Delete a product by id")
    delete_cmd.add_argument("id", help="Product id")
    delete_cmd.set_defaults(func=_cmd_delete)

    serve_cmd = subparsers.add_parser("serve", help="Run the in-memory reference catalog server")
    serve_cmd.add_argument("--host", default="127.0.0.1")
    serve_cmd.add_argument("--port", type=int, default=5108)
    serve_cmd.set_defaults(func=_cmd_serve)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return int(args.func(args) or 0)
    except Exception as exc:
        parser.exit(status=2, message=f"error: {exc}\n")


if __name__ == "__main__":
    raise SystemExit(main())
