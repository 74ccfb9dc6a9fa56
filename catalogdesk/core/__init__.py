"""Core catalog engine.

The core layer is framework-agnostic and safe to import from scripts, tests,
the CLI and the reference server.
"""

from typing import Any

_LAZY_EXPORTS: dict[str, tuple[str, str]] = {
    "CatalogClient": ("catalogdesk.core.remote", "CatalogClient"),
    "CatalogState": ("catalogdesk.core.store", "CatalogState"),
    "CatalogStore": ("catalogdesk.core.store", "CatalogStore"),
    "Draft": ("catalogdesk.core.canonical", "Draft"),
    "HttpCatalogClient": ("catalogdesk.core.remote", "HttpCatalogClient"),
    "OperationResult": ("catalogdesk.core.store", "OperationResult"),
    "Product": ("catalogdesk.core.canonical", "Product"),
    "RemoteError": ("catalogdesk.core.remote", "RemoteError"),
    "ValidationReport": ("catalogdesk.core.validate", "ValidationReport"),
    "client_from_settings": ("catalogdesk.core.remote", "client_from_settings"),
    "validate_product": ("catalogdesk.core.validate", "validate_product"),
}

__all__ = [
    "CatalogClient",
    "CatalogState",
    "CatalogStore",
    "Draft",
    "HttpCatalogClient",
    "OperationResult",
    "Product",
    "RemoteError",
    "ValidationReport",
    "client_from_settings",
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
