import json

import pytest

from mediasearch.items import YtPlaylist, YtVideo
from mediasearch.yt_results import (
    PseudoItem,
    SearchMode,
    needs_retry,
    playlist_results,
    trending_header,
    trending_results,
    video_results,
)


@pytest.mark.parametrize(
    "mode,header",
    [
        (SearchMode.TRENDING_DEFAULT, "Trending Videos"),
        (SearchMode.TRENDING_MUSIC, "Trending Music"),
        (SearchMode.TRENDING_GAMES, "Trending Gaming"),
        (SearchMode.TRENDING_MOVIES, "Trending Movies"),
        (SearchMode.VIDEO, "Trending Uncategorized"),
    ],
)
def test_trending_header(mode, header):
    assert trending_header(mode) == header


def test_video_results_header_and_items():
    data = json.dumps([{"title": "one", "videoId": "a"}, {"title": "two", "videoId": "b"}])
    rows = video_results(data, "cats", 2)
    assert rows[0] == PseudoItem('Results for "cats" on page 2')
    assert [row.title for row in rows[1:]] == ["one", "two"]
    assert all(isinstance(row, YtVideo) for row in rows[1:])


def test_video_results_empty_array():
    rows = video_results(b"[]", "dogs", 1)
    assert rows == [PseudoItem('No results returned for "dogs"')]


@pytest.mark.parametrize("data", [b"", b"not json", b'{"a": 1}'])
def test_video_results_not_array(data):
    assert video_results(data, "x", 1) == []


def test_video_results_non_object_entry_gives_empty_item():
    rows = video_results("[5]", "x", 1)
    assert len(rows) == 2
    assert rows[1] == YtVideo.from_json({})


def test_playlist_results_items():
    data = json.dumps([{"title": "list", "playlistId": "p"}])
    rows = playlist_results(data, "music", 3)
    assert rows[0] == PseudoItem('Results for "music" on page 3')
    assert isinstance(rows[1], YtPlaylist)
    assert rows[1].playlist_id == "p"


def test_playlist_results_empty():
    assert playlist_results("[]", "m", 1) == [PseudoItem('No results returned for "m"')]


def test_trending_results_items():
    data = json.dumps([{"title": "t", "lengthStr": "1:00"}])
    rows = trending_results(data, SearchMode.TRENDING_MUSIC)
    assert rows[0] == PseudoItem("Trending Music")
    assert rows[1].trending is True
    assert rows[1].title == "t"


def test_trending_results_empty_keeps_header():
    rows = trending_results("[]", SearchMode.TRENDING_GAMES)
    assert rows == [
        PseudoItem("Trending Gaming"),
        PseudoItem("No results returned, try again!"),
    ]


def test_trending_results_not_array():
    assert trending_results("{}", SearchMode.TRENDING_MOVIES) == []


@pytest.mark.parametrize("data", [b"", b"[]", b"{}", b"garbage", b'{"x": [1]}'])
def test_needs_retry_true(data):
    assert needs_retry(data) is True


def test_needs_retry_false_for_items():
    assert needs_retry(b'[{"title": "a"}]') is False