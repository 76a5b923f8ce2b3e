from .auth import AuthError, TokenProvider
from .base import BaseClient, CatalogError
from .spotify_catalog import SpotifyCatalog

__all__ = [
    "AuthError",
    "BaseClient",
    "CatalogError",
    "SpotifyCatalog",
    "TokenProvider",
]
