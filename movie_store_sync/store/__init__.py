"""
Remote store module.

HTTP client for the JSON document collection that holds movie records.
"""

from .client import RemoteStoreClient, parse_collection

__all__ = [
    "RemoteStoreClient",
    "parse_collection",
]
