"""
Shared test configuration and fixtures.

Provides an in-process document store served by aiohttp so the store client
is exercised over real HTTP without network access.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer

from movie_store_sync import RemoteStoreClient, StoreConfig

logger = logging.getLogger(__name__)


class FakeDocumentStore:
    """
    Minimal Firebase-style collection endpoint for testing.

    Serves ``/movies.json``: GET returns every document keyed by id (or
    ``null`` when empty), POST stores the body under a generated key and
    answers ``{"name": <key>}``.
    """

    def __init__(self) -> None:
        self.documents: dict[str, Any] = {}
        self.status = 200
        self.raw_body: bytes | None = None
        self.append_raw_body: bytes | None = None
        self.delay = 0.0
        self.requests: list[dict[str, Any]] = []
        self._next_key = 0

    def application(self) -> web.Application:
        app = web.Application()
        app.router.add_get("/movies.json", self.handle_list)
        app.router.add_post("/movies.json", self.handle_append)
        return app

    async def handle_list(self, request: web.Request) -> web.Response:
        self.requests.append({"method": request.method})
        if self.delay:
            await asyncio.sleep(self.delay)

        if self.status != 200:
            return web.json_response({"error": "unavailable"}, status=self.status)
        if self.raw_body is not None:
            return web.Response(body=self.raw_body, content_type="application/json")
        if not self.documents:
            return web.Response(text="null", content_type="application/json")
        return web.json_response(self.documents)

    async def handle_append(self, request: web.Request) -> web.Response:
        body = await request.json()
        self.requests.append(
            {
                "method": request.method,
                "body": body,
                "content_type": request.headers.get("Content-Type"),
            }
        )

        if self.status != 200:
            return web.json_response({"error": "unavailable"}, status=self.status)
        if self.append_raw_body is not None:
            return web.Response(body=self.append_raw_body, content_type="text/html")

        self._next_key += 1
        key = f"-Nmovie{self._next_key:03d}"
        self.documents[key] = body
        logger.debug(f"Stored {key}")
        return web.json_response({"name": key})


@pytest.fixture
def document_store() -> FakeDocumentStore:
    """Fixture providing an empty fake document store."""
    return FakeDocumentStore()


@pytest.fixture
async def store_server(document_store: FakeDocumentStore):
    """Fixture serving the fake document store on a local port."""
    server = TestServer(document_store.application())
    await server.start_server()
    yield server
    await server.close()


@pytest.fixture
def store_config(store_server: TestServer) -> StoreConfig:
    """Fixture providing a config that points at the fake store."""
    return StoreConfig(endpoint=str(store_server.make_url("/")))


@pytest.fixture
async def store_client(store_config: StoreConfig):
    """Fixture providing a store client bound to the fake store."""
    async with RemoteStoreClient(store_config) as client:
        yield client
