"""Helpers for inspecting and editing command-line option lists in place."""

from __future__ import annotations

from typing import MutableSequence

MEDIA_DOWNLOADER_DATA_PATH = "{MediaDownloaderDataPath}"
MEDIA_DOWNLOADER_DEFAULT_DOWNLOAD_PATH = "{MediaDownloaderDefaultDownloadPath}"
MEDIA_DOWNLOADER_CWD = "{MediaDownloaderCWD}"
DEFAULT_PATH = "${default}"
BACKEND_PATH = "${BackendPath}"
COMMAND_NAME = "${CommandName}"
POST_PROCESS_MARKER = "DoneDownloading"


class Arguments:
    """A view over a list of command-line arguments that edits it in place."""

    def __init__(self, args: MutableSequence[str]) -> None:
        self.args = args

    def has_option(self, opt: str, remove: bool = False) -> bool:
        """Return True if ``opt`` is present, removing its first occurrence if asked."""
        try:
            position = self.args.index(opt)
        except ValueError:
            return False
        if remove:
            del self.args[position]
        return True

    def remove_option(self, opt: str) -> None:
        """Remove the first occurrence of ``opt``."""
        self.has_option(opt, remove=True)

    def has_value(self, opt: str, remove: bool = False) -> str:
        """Return the value following the last occurrence of ``opt``.

        With ``remove`` set, each occurrence found is removed together with
        the value after it. Returns an empty string when no value is found.
        """
        result = ""
        i = 0
        while i < len(self.args):
            if self.args[i] == opt:
                if i + 1 < len(self.args):
                    result = self.args[i + 1]
                    if remove:
                        del self.args[i + 1]
                if remove:
                    del self.args[i]
            i += 1
        return result

    def remove_option_with_argument(self, opt: str) -> None:
        """Remove ``opt`` together with the value that follows it."""
        self.has_value(opt, remove=True)


def remove_argument(args: MutableSequence[str], value: str) -> None:
    """Remove every occurrence of ``value`` from ``args``."""
    args[:] = [item for item in args if item != value]


def remove_argument_with_option(args: MutableSequence[str], value: str) -> None:
    """Remove the first occurrence of ``value`` and the item after it."""
    try:
        position = args.index(value)
    except ValueError:
        return
    del args[position:position + 2]


def is_post_process_marker(data: bytes | str) -> bool:
    """Return True if ``data`` starts with the post-processing marker."""
    if isinstance(data, (bytes, bytearray)):
        return bytes(data).startswith(POST_PROCESS_MARKER.encode())
    return data.startswith(POST_PROCESS_MARKER)