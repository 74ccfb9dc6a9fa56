"""Public package entrypoint for Catalog Desk.

This package provides a stable import surface for the product catalog client
core (validation, remote collection client and state store), plus optional
frontends (CLI and a FastAPI reference server).
"""

from importlib.metadata import PackageNotFoundError, version
from typing import Any

_LAZY_EXPORTS: dict[str, tuple[str, str]] = {
    "CatalogStore": ("catalogdesk.core.store", "CatalogStore"),
    "Draft": ("catalogdesk.core.canonical", "Draft"),
    "HttpCatalogClient": ("catalogdesk.core.remote", "HttpCatalogClient"),
    "Product": ("catalogdesk.core.canonical", "Product"),
    "RemoteError": ("catalogdesk.core.remote", "RemoteError"),
    "app": ("catalogdesk.server.main", "app"),
    "create_app": ("catalogdesk.server.main", "create_app"),
    "validate_product": ("catalogdesk.core.validate", "validate_product"),
}

try:
    __version__ = version("catalogdesk")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "CatalogStore",
    "Draft",
    "HttpCatalogClient",
    "Product",
    "RemoteError",
    "__version__",
    "app",
    "create_app",
    "validate_product",
]


def __getattr__(name: str) -> Any:
    target = _LAZY_EXPORTS.get(name)
    if target is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

    module_name, attribute_name = target
    module = __import__(module_name, fromlist=[attribute_name])
    value = getattr(module, attribute_name)
    globals()[name] = value
    return value
