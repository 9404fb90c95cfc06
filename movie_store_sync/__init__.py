"""
Movie Store Sync

Async client and view-state controller for a movie collection kept in a
remote JSON document store.

Provides:
- RemoteStoreClient: list and append movies over HTTP
- SyncController: owns {records, is_loading, error} and the fetch lifecycle
- resolve_content / render_state: what to display for a given state

Usage:

    >>> from movie_store_sync import RemoteStoreClient, StoreConfig, SyncController, render_state
    >>> async with RemoteStoreClient(StoreConfig.from_env()) as client:
    ...     controller = SyncController(client)
    ...     await controller.activate()
    ...     print(render_state(controller.state))
"""

from .config import StoreConfig
from .controller import SyncController

# Exceptions
from .exceptions import (
    AppendError,
    ConfigError,
    FetchError,
    MovieStoreError,
    StoreParseError,
    StoreTransportError,
)
from .render import render_content, render_state
from .store import RemoteStoreClient
from .types import (
    CollectionView,
    ContentKind,
    MovieRecord,
    NewMovie,
    ResolvedContent,
    SyncState,
    resolve_content,
)

__all__ = [
    # Store
    "RemoteStoreClient",
    "StoreConfig",
    # Controller
    "SyncController",
    # Types
    "CollectionView",
    "ContentKind",
    "MovieRecord",
    "NewMovie",
    "ResolvedContent",
    "SyncState",
    "resolve_content",
    # Rendering
    "render_content",
    "render_state",
    # Exceptions
    "AppendError",
    "ConfigError",
    "FetchError",
    "MovieStoreError",
    "StoreParseError",
    "StoreTransportError",
]

__version__ = "0.1.0"
