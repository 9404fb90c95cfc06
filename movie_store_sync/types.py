"""
Movie record and view-state types.

Defines the application-side record shape, the controller-owned SyncState,
and the content resolution policy the presentation layer renders from.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any

LOADING_MESSAGE = "Data is loading..."
EMPTY_MESSAGE = "Found no movies"

# Wire field names used by the remote document store
TITLE_FIELD = "title"
OPENING_TEXT_FIELD = "openingText"
RELEASE_DATE_FIELD = "releaseDate"


@dataclass(frozen=True)
class MovieRecord:
    """A movie as stored remotely, keyed by its store-assigned id.

    Field values are kept as the JSON scalars the store returned;
    they are only coerced to strings when rendered.
    """

    id: str
    title: Any = None
    opening_text: Any = None
    release_date: Any = None

    @classmethod
    def from_wire(cls, key: str, value: Mapping[str, Any]) -> MovieRecord:
        """Build a record from one entry of the collection document."""
        return cls(
            id=key,
            title=value.get(TITLE_FIELD),
            opening_text=value.get(OPENING_TEXT_FIELD),
            release_date=value.get(RELEASE_DATE_FIELD),
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "id": self.id,
            TITLE_FIELD: self.title,
            OPENING_TEXT_FIELD: self.opening_text,
            RELEASE_DATE_FIELD: self.release_date,
        }


# Ordered as enumerated from the remote document; never sorted.
CollectionView = tuple[MovieRecord, ...]


@dataclass
class NewMovie:
    """Payload for a movie that has not been assigned a key yet."""

    title: Any
    opening_text: Any
    release_date: Any

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> NewMovie:
        """Create from a mapping using the wire field names."""
        return cls(
            title=data.get(TITLE_FIELD),
            opening_text=data.get(OPENING_TEXT_FIELD),
            release_date=data.get(RELEASE_DATE_FIELD),
        )

    def to_wire(self) -> dict[str, Any]:
        """Body sent to the store on append."""
        return {
            TITLE_FIELD: self.title,
            OPENING_TEXT_FIELD: self.opening_text,
            RELEASE_DATE_FIELD: self.release_date,
        }


@dataclass(frozen=True)
class SyncState:
    """Snapshot of the view state owned by the sync controller."""

    records: CollectionView = field(default_factory=tuple)
    is_loading: bool = False
    error: str | None = None

    def loading(self) -> SyncState:
        """Enter the loading state, keeping the current records."""
        return replace(self, is_loading=True, error=None)

    def loaded(self, records: CollectionView) -> SyncState:
        return replace(self, records=tuple(records), is_loading=False, error=None)

    def failed(self, error: str) -> SyncState:
        """Record a failure; previous records stay on the snapshot."""
        return replace(self, is_loading=False, error=error)


class ContentKind(Enum):
    """What the presentation layer should display."""

    LOADING = "loading"
    ERROR = "error"
    RECORDS = "records"
    EMPTY = "empty"


@dataclass(frozen=True)
class ResolvedContent:
    """Result of applying the content resolution policy to a SyncState."""

    kind: ContentKind
    message: str | None = None
    records: CollectionView = field(default_factory=tuple)


def resolve_content(state: SyncState) -> ResolvedContent:
    """Decide what to display for a given state.

    Precedence: loading, then error, then records, then the empty notice.
    """
    if state.is_loading:
        return ResolvedContent(kind=ContentKind.LOADING, message=LOADING_MESSAGE)
    if state.error is not None:
        return ResolvedContent(kind=ContentKind.ERROR, message=state.error)
    if state.records:
        return ResolvedContent(kind=ContentKind.RECORDS, records=state.records)
    return ResolvedContent(kind=ContentKind.EMPTY, message=EMPTY_MESSAGE)
