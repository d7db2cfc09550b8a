"""Turn search service responses into the rows of a results list."""

from __future__ import annotations

import enum
import json
from dataclasses import dataclass
from typing import Any, Union

from mediasearch.items import YtPlaylist, YtVideo

NO_RESULTS_TRY_AGAIN = "No results returned, try again!"


class SearchMode(enum.Enum):
    """What a search service request asks for."""

    VIDEO = "video"
    PLAYLIST = "playlist"
    TRENDING_DEFAULT = "trending_default"
    TRENDING_MUSIC = "trending_music"
    TRENDING_GAMES = "trending_games"
    TRENDING_MOVIES = "trending_movies"


@dataclass(frozen=True)
class PseudoItem:
    """A disabled informational row such as a header or a message."""

    label: str


ResultRow = Union[PseudoItem, YtVideo, YtPlaylist]

_TRENDING_HEADERS = {
    SearchMode.TRENDING_DEFAULT: "Trending Videos",
    SearchMode.TRENDING_MUSIC: "Trending Music",
    SearchMode.TRENDING_GAMES: "Trending Gaming",
    SearchMode.TRENDING_MOVIES: "Trending Movies",
}


def _parse_array(data: bytes | str) -> list[Any] | None:
    """The top-level JSON array in ``data``, or None if there is none."""
    if not data:
        return None
    try:
        doc = json.loads(data)
    except (ValueError, TypeError):
        return None
    return doc if isinstance(doc, list) else None


def _as_object(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


def trending_header(mode: SearchMode) -> str:
    """The header shown above trending results of ``mode``."""
    return _TRENDING_HEADERS.get(mode, "Trending Uncategorized")


def _results_header(term: str, page: int) -> PseudoItem:
    return PseudoItem(f'Results for "{term}" on page {page}')


def _no_results(term: str) -> PseudoItem:
    return PseudoItem(f'No results returned for "{term}"')


def video_results(data: bytes | str, term: str, page: int) -> list[ResultRow]:
    """Rows for a video search response; empty if it is not a JSON array."""
    array = _parse_array(data)
    if array is None:
        return []
    if not array:
        return [_no_results(term)]
    return [_results_header(term, page)] + [
        YtVideo.from_json(_as_object(value)) for value in array
    ]


def playlist_results(data: bytes | str, term: str, page: int) -> list[ResultRow]:
    """Rows for a playlist search response; empty if it is not a JSON array."""
    array = _parse_array(data)
    if array is None:
        return []
    if not array:
        return [_no_results(term)]
    return [_results_header(term, page)] + [
        YtPlaylist.from_json(_as_object(value)) for value in array
    ]


def trending_results(data: bytes | str, mode: SearchMode) -> list[ResultRow]:
    """Rows for a trending response; empty if it is not a JSON array."""
    array = _parse_array(data)
    if array is None:
        return []
    header = PseudoItem(trending_header(mode))
    if not array:
        return [header, PseudoItem(NO_RESULTS_TRY_AGAIN)]
    return [header] + [YtVideo.from_json(_as_object(value)) for value in array]


def needs_retry(data: bytes | str) -> bool:
    """True unless ``data`` is a non-empty JSON array."""
    return not _parse_array(data)