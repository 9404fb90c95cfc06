"""Plain-text rendering of resolved content."""

from __future__ import annotations

from typing import Any

from .types import ContentKind, MovieRecord, ResolvedContent, SyncState, resolve_content


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def render_movie(movie: MovieRecord) -> str:
    return "\n".join(
        [
            _text(movie.title),
            _text(movie.release_date),
            _text(movie.opening_text),
        ]
    )


def render_content(content: ResolvedContent) -> str:
    """Render content as text: one block per movie, or the notice message."""
    if content.kind == ContentKind.RECORDS:
        return "\n\n".join(render_movie(movie) for movie in content.records)
    return content.message or ""


def render_state(state: SyncState) -> str:
    return render_content(resolve_content(state))
