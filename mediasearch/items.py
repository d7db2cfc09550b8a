"""Search result items: videos and playlists described by JSON objects."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Mapping

LINK_SEPARATOR = "<:>"
VIDEO_PLACEHOLDER_ICON = "qrc:///icons/video.png"


class LinkAction(enum.Enum):
    """What activating a link in a result item asks for."""

    PLAY_VIDEO = "play_video"
    PLAY_AUDIO = "play_audio"
    DOWNLOAD = "download"
    COPY_LINK = "copy_link"
    PLAY_PREVIEW = "play_preview"


@dataclass(frozen=True)
class LinkActivation:
    """An activated link: the requested action and its data."""

    action: LinkAction
    data: str


def _text(obj: Mapping[str, Any], key: str) -> str:
    value = obj.get(key)
    return value if isinstance(value, str) else ""


def _integer(obj: Mapping[str, Any], key: str) -> int:
    value = obj.get(key)
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return 0


def _leading_int(text: str) -> int:
    try:
        return int(text.strip())
    except ValueError:
        return 0


def nice_number(views: int) -> str:
    """Abbreviate a view count with a K, M, B or T suffix."""
    for threshold, suffix in (
        (1_000_000_000_000, "T"),
        (1_000_000_000, "B"),
        (1_000_000, "M"),
        (1_000, "K"),
    ):
        if views > threshold:
            return f"{views / threshold:.0f}{suffix}"
    return str(views)


def format_seconds(seconds: int) -> str:
    """Format a number of seconds as a time of day, hh:mm:ss."""
    hours, rest = divmod(seconds % 86400, 3600)
    minutes, secs = divmod(rest, 60)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}"


def parse_link(link: str) -> tuple[int, str]:
    """Split an item link into its numeric action code and its data.

    A code that is not a number reads as 0.
    """
    parts = link.split(LINK_SEPARATOR)
    return _leading_int(parts[0]), parts[-1]


class YtLinkType(enum.IntEnum):
    PLAY = 0
    PLAY_AUDIO = 1
    DOWNLOAD = 2
    COPYLINK = 3


class XpLinkType(enum.IntEnum):
    PLAY = 0
    PLAY_AUDIO = 1
    DOWNLOAD = 2
    COPYLINK = 3
    PLAY_PREVIEW = 4


class PlaylistLinkType(enum.IntEnum):
    PLAY = 0
    DOWNLOAD = 1
    COPYLINK = 2


_YT_LINKS_TEMPLATE = (
    "\n"
    "        <span style='font-weight: bold;'>\n"
    "            <a href=\"3<:>{0}\">Copy Video Link</a> &nbsp;\n"
    "            <a href=\"3<:>{1}\">Copy Channel link</a>&nbsp;\n"
    "            <a href='1<:>{2}'>Play Audio</a>&nbsp;\n"
    "            <a href='0<:>{2}'>Play Video</a>\n"
    "        </span>\n"
    "    "
)

_XP_LINKS_TEMPLATE = (
    "\n"
    "        <span style='font-weight: bold;'>\n"
    "            <a href=\"3<:>{0}\">Copy Video Link</a> &nbsp;\n"
    "            <a href='4<:>{1}'>Preview Video</a>&nbsp;\n"
    "            <a href='0<:>{2}'>Play Video</a>\n"
    "        </span>\n"
    "    "
)

_PLAYLIST_LINKS_TEMPLATE = (
    "\n"
    "        <span style='font-weight: bold;'>\n"
    "            <a href=\"2<:>{0}\">Copy Playlist Link</a> &nbsp;\n"
    "            <a href=\"2<:>{1}\">Copy Author link</a>\n"
    "        </span>\n"
    "    "
)


@dataclass
class YtVideo:
    """A video result, either from a search or from a trending list."""

    title: str = ""
    author: str = ""
    length_seconds: int = 0
    view_count: int = 0
    published_text: str = ""
    video_id: str = ""
    author_id: str = ""
    view_count_str: str = ""
    length_str: str = ""
    trending: bool = False
    status: str = ""

    @classmethod
    def from_json(cls, obj: Mapping[str, Any]) -> "YtVideo":
        return cls(
            title=_text(obj, "title"),
            author=_text(obj, "author"),
            length_seconds=_integer(obj, "lengthSeconds"),
            view_count=_integer(obj, "viewCount"),
            published_text=_text(obj, "publishedText"),
            video_id=_text(obj, "videoId"),
            author_id=_text(obj, "authorId"),
            view_count_str=_text(obj, "viewCountStr"),
            length_str=_text(obj, "lengthStr"),
            trending="lengthStr" in obj,
        )

    @property
    def thumbnail_url(self) -> str:
        return "https://i.ytimg.com/vi/" + self.video_id + "/mqdefault.jpg"

    @property
    def video_link(self) -> str:
        return "https://youtube.com/watch?v=" + self.video_id

    @property
    def channel_link(self) -> str:
        return "https://youtube.com/channel/" + self.author_id

    def meta_text(self) -> str:
        if self.trending:
            duration, views = self.length_str, self.view_count_str
        else:
            duration = format_seconds(self.length_seconds)
            views = nice_number(self.view_count)
        return (
            "Duration: " + duration + "<br>"
            + "By: " + self.author + "<br>"
            + "Views: " + views + "<br>"
            + "Publised: " + self.published_text
        )

    def links_text(self) -> str:
        return _YT_LINKS_TEMPLATE.format(
            self.video_link, self.channel_link, self.video_link
        )

    def activate_link(self, link: str) -> LinkActivation | None:
        """Resolve an activated link; None if its code is not handled."""
        code, data = parse_link(link)
        actions = {
            YtLinkType.PLAY: LinkAction.PLAY_VIDEO,
            YtLinkType.PLAY_AUDIO: LinkAction.PLAY_AUDIO,
            YtLinkType.DOWNLOAD: LinkAction.DOWNLOAD,
            YtLinkType.COPYLINK: LinkAction.COPY_LINK,
        }
        action = actions.get(code)
        return LinkActivation(action, data) if action else None


@dataclass
class XpVideo:
    """A video result from the category and search service."""

    title: str = ""
    thumbnail_url: str = ""
    view_count_str: str = ""
    length_str: str = ""
    video_link: str = ""
    preview_url: str = ""
    status: str = ""

    @classmethod
    def from_json(cls, obj: Mapping[str, Any]) -> "XpVideo":
        return cls(
            title=_text(obj, "title"),
            thumbnail_url=_text(obj, "thumbnailUrl"),
            view_count_str=_text(obj, "viewCountStr"),
            length_str=_text(obj, "lengthStr"),
            video_link=_text(obj, "videoLink"),
            preview_url=_text(obj, "previewUrl"),
        )

    def meta_text(self) -> str:
        return (
            "Duration: " + self.length_str + "<br>"
            + "Views: " + self.view_count_str + "<br>"
        )

    def links_text(self) -> str:
        return _XP_LINKS_TEMPLATE.format(
            self.video_link, self.preview_url, self.video_link
        )

    def activate_link(self, link: str) -> LinkActivation | None:
        """Resolve an activated link; None if its code is not handled."""
        code, data = parse_link(link)
        actions = {
            XpLinkType.PLAY: LinkAction.PLAY_VIDEO,
            XpLinkType.DOWNLOAD: LinkAction.DOWNLOAD,
            XpLinkType.COPYLINK: LinkAction.COPY_LINK,
            XpLinkType.PLAY_PREVIEW: LinkAction.PLAY_PREVIEW,
        }
        action = actions.get(code)
        return LinkActivation(action, data) if action else None


@dataclass
class YtPlaylist:
    """A playlist result with the titles and lengths of its videos."""

    title: str = ""
    author: str = ""
    video_count: int = 0
    playlist_id: str = ""
    author_id: str = ""
    thumbnail_url: str = ""
    videos: list[tuple[str, int]] = field(default_factory=list)

    @classmethod
    def from_json(cls, obj: Mapping[str, Any]) -> "YtPlaylist":
        raw_videos = obj.get("videos")
        if not isinstance(raw_videos, list):
            raw_videos = []
        videos = []
        for entry in raw_videos:
            entry = entry if isinstance(entry, Mapping) else {}
            videos.append((_text(entry, "title"), _integer(entry, "lengthSeconds")))
        return cls(
            title=_text(obj, "title"),
            author=_text(obj, "author"),
            video_count=_integer(obj, "videoCount"),
            playlist_id=_text(obj, "playlistId"),
            author_id=_text(obj, "authorId"),
            thumbnail_url=_text(obj, "playlistThumbnail").replace(
                "hqdefault", "mqdefault"
            ),
            videos=videos,
        )

    @property
    def playlist_link(self) -> str:
        return "https://www.youtube.com/playlist?list=" + self.playlist_id

    @property
    def author_link(self) -> str:
        return "https://www.youtube.com/channel/" + self.author_id + "/playlists"

    def meta_text(self) -> str:
        listing = "<br>".join(
            f"{title} ({format_seconds(length)})" for title, length in self.videos
        )
        return (
            "By: " + self.author + "<br>"
            + "Videos: " + str(self.video_count) + "<br>"
            + listing
        )

    def links_text(self) -> str:
        return _PLAYLIST_LINKS_TEMPLATE.format(self.playlist_link, self.author_link)

    def activate_link(self, link: str) -> LinkActivation | None:
        """Resolve an activated link; None if its code is not handled."""
        code, data = parse_link(link)
        actions = {
            PlaylistLinkType.PLAY: LinkAction.PLAY_VIDEO,
            PlaylistLinkType.DOWNLOAD: LinkAction.DOWNLOAD,
            PlaylistLinkType.COPYLINK: LinkAction.COPY_LINK,
        }
        action = actions.get(code)
        return LinkActivation(action, data) if action else None