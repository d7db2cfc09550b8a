"""Process exit states, output channel selection and debug printing."""

from __future__ import annotations

import enum
import sys
from dataclasses import dataclass
from typing import Any, TextIO


class ExitStatus(enum.Enum):
    """How a child process ended."""

    NORMAL_EXIT = "normal"
    CRASH_EXIT = "crash"


class ChannelMode(enum.Enum):
    """Whether standard output and standard error are read together."""

    SEPARATE_CHANNELS = "separate"
    MERGED_CHANNELS = "merged"


class ProcessChannel(enum.Enum):
    """One output stream of a child process."""

    STANDARD_OUTPUT = "stdout"
    STANDARD_ERROR = "stderr"


@dataclass(frozen=True)
class ProcessExitState:
    """The outcome of a finished process."""

    cancelled: bool
    exit_code: int
    duration: int
    exit_status: ExitStatus

    def success(self) -> bool:
        """True if the process exited normally with code 0."""
        return self.exit_code == 0 and self.exit_status is ExitStatus.NORMAL_EXIT


@dataclass(frozen=True)
class ProcessOutputChannels:
    """Which output of a process is treated as data.

    Without a channel both streams are merged; with one, the streams are
    read separately and only the named channel carries data.
    """

    channel: ProcessChannel | None = None

    @property
    def channel_mode(self) -> ChannelMode:
        if self.channel is None:
            return ChannelMode.MERGED_CHANNELS
        return ChannelMode.SEPARATE_CHANNELS


@dataclass
class ContextState:
    """State handed to a context-menu callback."""

    none_are_running: bool = True
    finished_success: bool = False
    show_log_window: bool = False
    clear: bool = False

    def set_show_log_window(self) -> None:
        self.show_log_window = True

    def set_clear(self) -> None:
        self.clear = True


def format_debug_value(value: Any) -> str:
    """Render a value the way debug output shows it.

    Lists of strings appear as ``("a", "b")`` and an empty list as ``()``.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    if isinstance(value, (list, tuple)):
        if not value:
            return "()"
        return "(" + ", ".join(f'"{item}"' for item in value) + ")"
    return str(value)


class DebugPrinter:
    """Prints values when a debug switch is set.

    ``--debug`` writes to standard output, ``--qdebug`` to standard error;
    any other switch prints nothing.
    """

    def __init__(
        self,
        switch: str = "",
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.switch = switch
        self._out = out
        self._err = err

    def write(self, value: Any) -> "DebugPrinter":
        """Print ``value`` if enabled and return self for chaining."""
        if self.switch == "--debug":
            stream = self._out if self._out is not None else sys.stdout
        elif self.switch == "--qdebug":
            stream = self._err if self._err is not None else sys.stderr
        else:
            return self
        stream.write(format_debug_value(value) + "\n")
        stream.flush()
        return self

    __lshift__ = write