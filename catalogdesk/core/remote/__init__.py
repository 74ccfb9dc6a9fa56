from .common import CatalogClient, RemoteError, http_session
from .http import HttpCatalogClient, client_from_settings

__all__ = [
    "CatalogClient",
    "HttpCatalogClient",
    "RemoteError",
    "client_from_settings",
    "http_session",
]
