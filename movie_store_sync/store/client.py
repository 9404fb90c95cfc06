"""
Remote document store client.

Talks to a Firebase-style JSON collection endpoint over HTTP:
- GET  <endpoint>/<collection>.json  lists every record, keyed by store id
- POST <endpoint>/<collection>.json  appends one record, the store assigns the key

Translates between the wire shape (an object keyed by id) and the
application shape (an ordered tuple of MovieRecord carrying its id).
"""

from __future__ import annotations

import asyncio
import json
from collections.abc import Mapping
from typing import Any

import aiohttp

from ..config import StoreConfig
from ..exceptions import AppendError, FetchError, StoreParseError, StoreTransportError
from ..logging_utils import SyncLoggerAdapter, get_sync_logger
from ..types import CollectionView, MovieRecord, NewMovie

logger = get_sync_logger("store")

JSON_HEADERS = {"Content-Type": "application/json"}


def _is_success(status: int) -> bool:
    return 200 <= status < 300


def parse_collection(body: bytes | str, url: str) -> CollectionView:
    """Convert a collection document into records.

    An empty body or a JSON ``null`` means the collection has no records.
    Record order follows the key order of the decoded object.

    Args:
        body: Raw response body
        url: Collection URL, used in error messages

    Returns:
        Tuple of MovieRecord, one per key

    Raises:
        StoreParseError: If the body is not JSON or not an object of objects
    """
    if not body or not body.strip():
        return ()

    try:
        data = json.loads(body)
    except ValueError as e:
        raise StoreParseError(url, f"body is not valid JSON ({e})") from e

    if data is None:
        return ()
    if not isinstance(data, dict):
        raise StoreParseError(url, f"expected a JSON object, got {type(data).__name__}")

    records = []
    for key, value in data.items():
        if not isinstance(value, dict):
            raise StoreParseError(url, f"entry {key!r} is not a JSON object")
        records.append(MovieRecord.from_wire(key, value))
    return tuple(records)


class RemoteStoreClient:
    """Async client for the movie collection.

    No caching and no retries. With the default config there is no request
    timeout, so a hung request hangs whatever awaits it.

    Example:
        >>> config = StoreConfig(endpoint="https://example-default-rtdb.firebaseio.com")
        >>> async with RemoteStoreClient(config) as client:
        ...     movies = await client.list_all()
        ...     new_id = await client.append(NewMovie("Heat", "A heist...", "1995-12-15"))
    """

    def __init__(self, config: StoreConfig, session: aiohttp.ClientSession | None = None):
        """Initialize the client.

        Args:
            config: Store configuration
            session: Optional shared aiohttp session. When omitted the client
                creates one lazily and closes it in close().
        """
        self.config = config
        self._session = session
        self._owns_session = session is None
        self._timeout = aiohttp.ClientTimeout(total=config.timeout)
        self._log = SyncLoggerAdapter(logger, {"collection_url": config.collection_url})

    async def __aenter__(self) -> RemoteStoreClient:
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()

    @property
    def url(self) -> str:
        return self.config.collection_url

    def _ensure_session(self) -> aiohttp.ClientSession:
        if self._session is None or (self._owns_session and self._session.closed):
            self._session = aiohttp.ClientSession()
            self._owns_session = True
        elif self._session.closed:
            # A caller-provided session is never reopened here
            self._log.warning("Shared HTTP session is closed")
            raise StoreTransportError(self.url, RuntimeError("Session is closed"))
        return self._session

    async def close(self) -> None:
        """Close the HTTP session if this client created it."""
        if self._owns_session and self._session is not None and not self._session.closed:
            await self._session.close()
        if self._owns_session:
            self._session = None

    async def _request(
        self,
        method: str,
        data: str | None = None,
        headers: dict[str, str] | None = None,
    ) -> tuple[int, bytes]:
        """Issue a request against the collection URL.

        Returns:
            Tuple of (status, body)

        Raises:
            StoreTransportError: If no response status was obtained
        """
        session = self._ensure_session()
        try:
            async with session.request(
                method, self.url, data=data, headers=headers, timeout=self._timeout
            ) as response:
                return response.status, await response.read()
        except (aiohttp.ClientError, asyncio.TimeoutError, OSError) as e:
            self._log.warning(f"{method} {self.url} failed: {e}")
            raise StoreTransportError(self.url, e) from e

    async def list_all(self) -> CollectionView:
        """Fetch every movie in the collection.

        Returns:
            Records in the order the store enumerated their keys

        Raises:
            StoreTransportError: If the store could not be reached
            FetchError: If the store answered with a non-success status
            StoreParseError: If the body is not a collection document
        """
        status, body = await self._request("GET")
        if not _is_success(status):
            self._log.warning(f"Listing movies returned status {status}")
            raise FetchError(status, self.url)

        records = parse_collection(body, self.url)
        self._log.debug(f"Listed {len(records)} movies")
        return records

    async def append(self, record: NewMovie | Mapping[str, Any]) -> str | None:
        """Add a movie to the collection.

        The response is not merged into any local model; only the store-assigned
        key is returned, when the store reports one.

        Args:
            record: Movie payload, either a NewMovie or a mapping with wire field names

        Returns:
            The new key, or None if the response did not carry one

        Raises:
            StoreTransportError: If the store could not be reached
            AppendError: If the store answered with a non-success status
        """
        if not isinstance(record, NewMovie):
            record = NewMovie.from_dict(record)

        status, body = await self._request(
            "POST", data=json.dumps(record.to_wire()), headers=JSON_HEADERS
        )
        if not _is_success(status):
            self._log.warning(f"Adding movie returned status {status}")
            raise AppendError(status, self.url)

        try:
            data = json.loads(body) if body else None
        except ValueError:
            self._log.warning(f"Unparseable append response: {body[:200]!r}")
            return None

        new_id = data.get("name") if isinstance(data, dict) else None
        self._log.debug(f"Added movie: {data}")
        return new_id
