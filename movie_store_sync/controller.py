"""
Synchronization controller.

Owns the view state {records, is_loading, error}, drives the fetch
lifecycle against the remote store, and forwards new records to it.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from .exceptions import MovieStoreError
from .logging_utils import SyncLoggerAdapter, get_sync_logger
from .store.client import RemoteStoreClient
from .types import NewMovie, ResolvedContent, SyncState, resolve_content

logger = get_sync_logger("controller")

StateListener = Callable[[SyncState], None]


class SyncController:
    """Mediates between the remote store client and a presentation layer.

    The presentation layer reads ``state`` (or subscribes to changes) and
    calls ``refresh`` and ``submit_record``. The controller is the only
    writer of the state.

    Concurrent ``refresh`` calls are not serialized: whichever request
    resolves last overwrites the state, even if it was issued first.

    Example:
        >>> controller = SyncController(client)
        >>> controller.subscribe(lambda state: print(render_state(state)))
        >>> await controller.activate()
        >>> await controller.submit_record({"title": "Heat", ...})
        >>> await controller.refresh()  # the new movie shows up only now
    """

    def __init__(self, client: RemoteStoreClient):
        """Initialize the controller.

        Args:
            client: Store client used for listing and appending movies
        """
        self.client = client
        self._state = SyncState()
        self._activated = False
        self._listeners: list[StateListener] = []
        self._refresh_count = 0
        self._log = SyncLoggerAdapter(logger, {"collection_url": client.url})

    @property
    def state(self) -> SyncState:
        """Get the current state snapshot."""
        return self._state

    @property
    def activated(self) -> bool:
        return self._activated

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register a listener called with every new state.

        Returns:
            Callable that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def content(self) -> ResolvedContent:
        """Apply the content resolution policy to the current state."""
        return resolve_content(self._state)

    def _set_state(self, state: SyncState) -> None:
        self._state = state
        for listener in list(self._listeners):
            try:
                listener(state)
            except Exception as e:
                self._log.error(f"State listener failed: {e}", exc_info=True)

    async def activate(self) -> None:
        """Run the initial fetch, once per controller lifetime."""
        if self._activated:
            self._log.debug("Controller already activated, skipping initial refresh")
            return

        self._activated = True
        await self.refresh()

    async def refresh(self) -> None:
        """Reload the collection from the store.

        Failures never propagate: they are stored as the error message and
        the records from the last successful fetch are kept on the state.
        """
        self._refresh_count += 1
        log = self._log.bind(refresh_id=self._refresh_count)

        self._set_state(self._state.loading())

        try:
            records = await self.client.list_all()
        except MovieStoreError as e:
            log.warning(f"Refresh failed: {e.message}")
            self._set_state(self._state.failed(e.message))
            return
        except Exception as e:
            log.error(f"Refresh failed unexpectedly: {e}", exc_info=True)
            self._set_state(self._state.failed(str(e) or type(e).__name__))
            return

        self._set_state(self._state.loaded(records))
        log.info(f"Loaded {len(records)} movies")

    async def submit_record(self, record: NewMovie | Mapping[str, Any]) -> str | None:
        """Send a new movie to the store.

        The local records are not updated and no refresh is triggered, so
        the movie stays invisible until the next refresh.

        Returns:
            The store-assigned key, if the store reported one

        Raises:
            MovieStoreError: If the append failed; the state is left untouched
        """
        try:
            new_id = await self.client.append(record)
        except MovieStoreError as e:
            self._log.error(f"Adding movie failed: {e.message}")
            raise

        self._log.info(f"Added movie {new_id}")
        return new_id
