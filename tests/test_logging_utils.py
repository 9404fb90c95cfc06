"""Tests for sync logger helpers."""

from __future__ import annotations

import logging

from movie_store_sync.logging_utils import SyncLoggerAdapter, get_sync_logger

COLLECTION_URL = "http://store.test/movies.json"


def make_adapter(name: str) -> SyncLoggerAdapter:
    return SyncLoggerAdapter(get_sync_logger(name), {"collection_url": COLLECTION_URL})


class TestGetSyncLogger:
    """Tests for logger naming."""

    def test_namespaced(self) -> None:
        assert get_sync_logger("store").name == "movie_store_sync.store"


class TestSyncLoggerAdapter:
    """Tests for store context on log records."""

    def test_adds_collection_url(self, caplog) -> None:
        """Test that adapter context lands on every record."""
        adapter = make_adapter("test_adapter")

        with caplog.at_level(logging.INFO, logger="movie_store_sync.test_adapter"):
            adapter.info("listed")

        record = caplog.records[-1]
        assert record.collection_url == COLLECTION_URL
        assert record.getMessage() == "listed"

    def test_bind_adds_refresh_prefix(self, caplog) -> None:
        """Test that a bound refresh number is kept and prefixed to the message."""
        adapter = make_adapter("test_bind")
        bound = adapter.bind(refresh_id=3)

        with caplog.at_level(logging.INFO, logger="movie_store_sync.test_bind"):
            bound.info("Loaded 2 movies")

        record = caplog.records[-1]
        assert record.getMessage() == "[refresh #3] Loaded 2 movies"
        assert record.refresh_id == 3
        assert record.collection_url == COLLECTION_URL

    def test_bind_leaves_parent_unchanged(self) -> None:
        adapter = make_adapter("test_parent")

        adapter.bind(refresh_id=1)

        assert adapter.extra == {"collection_url": COLLECTION_URL}

    def test_call_site_extra_wins(self, caplog) -> None:
        """Test that per-call extra values override bound context."""
        adapter = make_adapter("test_extra")

        with caplog.at_level(logging.INFO, logger="movie_store_sync.test_extra"):
            adapter.info("moved", extra={"collection_url": "http://other.test/movies.json"})

        assert caplog.records[-1].collection_url == "http://other.test/movies.json"
