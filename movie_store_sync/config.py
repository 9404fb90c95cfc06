"""
Store configuration.

Resolves the collection endpoint from explicit values, environment
variables, or a YAML settings file.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from .exceptions import ConfigError

DEFAULT_COLLECTION = "movies"

ENDPOINT_ENV = "MOVIE_STORE_ENDPOINT"
COLLECTION_ENV = "MOVIE_STORE_COLLECTION"
TIMEOUT_ENV = "MOVIE_STORE_TIMEOUT"


@dataclass
class StoreConfig:
    """Configuration for the remote document store.

    Attributes:
        endpoint: Base URL of the document store
        collection: Collection name; requests go to ``<endpoint>/<collection>.json``
        timeout: Total request timeout in seconds, None to wait indefinitely
    """

    endpoint: str
    collection: str = DEFAULT_COLLECTION
    timeout: float | None = None

    def __post_init__(self) -> None:
        if not self.endpoint:
            raise ConfigError("Store endpoint must not be empty", field="endpoint")
        if not self.collection:
            raise ConfigError("Store collection must not be empty", field="collection")
        if self.timeout is not None and self.timeout <= 0:
            raise ConfigError("Store timeout must be positive", field="timeout")

    @property
    def collection_url(self) -> str:
        return f"{self.endpoint.rstrip('/')}/{self.collection}.json"

    @classmethod
    def from_env(cls) -> "StoreConfig":
        """Create config from environment variables.

        Expected environment variables:
        - MOVIE_STORE_ENDPOINT: Base URL of the store (required)
        - MOVIE_STORE_COLLECTION: Collection name (optional)
        - MOVIE_STORE_TIMEOUT: Request timeout in seconds (optional)

        Raises:
            ConfigError: If the endpoint is not set or the timeout is not a positive number
        """
        endpoint = os.environ.get(ENDPOINT_ENV)
        if not endpoint:
            raise ConfigError(f"{ENDPOINT_ENV} environment variable not set", field="endpoint")

        return cls(
            endpoint=endpoint,
            collection=os.environ.get(COLLECTION_ENV) or DEFAULT_COLLECTION,
            timeout=_parse_timeout(os.environ.get(TIMEOUT_ENV)),
        )

    @classmethod
    def from_file(cls, config_path: Path) -> "StoreConfig":
        """Create config from a YAML settings file.

        Configuration layout:

        ```yaml
        store:
          endpoint: "https://example-default-rtdb.firebaseio.com"
          collection: "movies"   # Optional
          timeout: 10            # Optional, seconds
        ```

        Raises:
            ConfigError: If the file is missing, unreadable, or has no endpoint
        """
        if not config_path.exists():
            raise ConfigError(f"Config file not found: {config_path}")

        try:
            config = yaml.safe_load(config_path.read_text()) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

        if not isinstance(config, dict):
            raise ConfigError(f"Expected a mapping at the top of {config_path}", field="store")

        store_config: dict[str, Any] = config.get("store") or {}
        if not isinstance(store_config, dict):
            raise ConfigError(
                f"The store section of {config_path} must be a mapping", field="store"
            )

        endpoint = store_config.get("endpoint")
        if not endpoint:
            raise ConfigError(f"No store endpoint in {config_path}", field="endpoint")

        return cls(
            endpoint=str(endpoint),
            collection=str(store_config.get("collection") or DEFAULT_COLLECTION),
            timeout=_parse_timeout(store_config.get("timeout")),
        )


def _parse_timeout(value: Any) -> float | None:
    if value is None or value == "":
        return None
    try:
        timeout = float(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid timeout: {value!r}", field="timeout") from e
    # aiohttp reads a zero total as "no timeout"
    if timeout <= 0:
        raise ConfigError(f"Timeout must be positive: {value!r}", field="timeout")
    return timeout
