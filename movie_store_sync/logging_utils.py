"""
Logger helpers for the sync components.

All loggers live under the ``movie_store_sync`` namespace. Store and refresh
context travels on each record as ``extra`` fields, so the collection URL and
refresh number can be filtered on without parsing messages.
"""

import logging
from typing import Any


def get_sync_logger(name: str) -> logging.Logger:
    """
    Get a logger for a sync component with consistent naming.

    Args:
        name: Component name (e.g., 'controller', 'store')

    Returns:
        Logger instance with name 'movie_store_sync.{name}'
    """
    return logging.getLogger(f"movie_store_sync.{name}")


class SyncLoggerAdapter(logging.LoggerAdapter):
    """
    Logger adapter carrying store context.

    Known context keys:
    - collection_url: collection the record concerns
    - refresh_id: number of the refresh that produced the record; also
      prefixed to the message as ``[refresh #N]``
    """

    def bind(self, **context: Any) -> "SyncLoggerAdapter":
        """Return an adapter with additional context."""
        return SyncLoggerAdapter(self.logger, {**self.extra, **context})

    def process(self, msg: str, kwargs: dict[str, Any]) -> tuple[str, dict[str, Any]]:
        """Add context to the record; call-site ``extra`` values win."""
        extra = {**self.extra, **(kwargs.get("extra") or {})}
        kwargs["extra"] = extra

        refresh_id = extra.get("refresh_id")
        if refresh_id is not None:
            msg = f"[refresh #{refresh_id}] {msg}"
        return msg, kwargs
