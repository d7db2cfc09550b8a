"""Geometry and mouse handling of a two-handle range slider."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from mediasearch.range_values import RangeValues

HANDLE_SIDE_LENGTH = 11
SLIDER_BAR_HEIGHT = 5
LEFT_RIGHT_MARGIN = 1
ENABLED_COLOR = "#3688C6"
DISABLED_COLOR = "#808080"


class Orientation(enum.Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class HandleOption(enum.IntFlag):
    NO_HANDLE = 0
    LEFT_HANDLE = 1
    RIGHT_HANDLE = 2
    DOUBLE_HANDLES = 3


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle."""

    x: float
    y: float
    width: float
    height: float

    def contains(self, x: float, y: float) -> bool:
        """True if the point lies inside or on the edge."""
        return (
            self.x <= x <= self.x + self.width
            and self.y <= y <= self.y + self.height
        )


def _half(value: int) -> int:
    return int(value / 2)


class RangeSlider(RangeValues):
    """A range slider of a given size whose handles follow the values."""

    def __init__(
        self,
        orientation: Orientation = Orientation.HORIZONTAL,
        options: HandleOption = HandleOption.DOUBLE_HANDLES,
        width: int = 100,
        height: int = 30,
    ) -> None:
        super().__init__(0, 100)
        self.orientation = orientation
        self.options = HandleOption(options)
        self.width = width
        self.height = height
        self.enabled = True
        self.background_color = ENABLED_COLOR
        self.first_handle_pressed = False
        self.second_handle_pressed = False
        self.delta = 0

    def _has(self, option: HandleOption) -> bool:
        return (self.options & option) == option

    @property
    def _horizontal(self) -> bool:
        return self.orientation is Orientation.HORIZONTAL

    def valid_length(self) -> int:
        """Length of the track the handles travel along."""
        length = self.width if self._horizontal else self.height
        handles = 2 if self._has(HandleOption.DOUBLE_HANDLES) else 1
        return length - LEFT_RIGHT_MARGIN * 2 - HANDLE_SIDE_LENGTH * handles

    def _percentage(self, value: int) -> float:
        if self.interval == 0:
            return 0.0
        return (value - self.minimum) / self.interval

    def _handle_rect(self, position: int) -> Rect:
        if self._horizontal:
            return Rect(
                position,
                _half(self.height - HANDLE_SIDE_LENGTH),
                HANDLE_SIDE_LENGTH,
                HANDLE_SIDE_LENGTH,
            )
        return Rect(
            _half(self.width - HANDLE_SIDE_LENGTH),
            position,
            HANDLE_SIDE_LENGTH,
            HANDLE_SIDE_LENGTH,
        )

    def first_handle_rect(self) -> Rect:
        position = self._percentage(self.lower_value) * self.valid_length()
        return self._handle_rect(int(position + LEFT_RIGHT_MARGIN))

    def second_handle_rect(self) -> Rect:
        offset = HANDLE_SIDE_LENGTH if self._has(HandleOption.LEFT_HANDLE) else 0
        position = self._percentage(self.upper_value) * self.valid_length()
        return self._handle_rect(int(position + LEFT_RIGHT_MARGIN + offset))

    def minimum_size_hint(self) -> tuple[int, int]:
        return (
            HANDLE_SIDE_LENGTH * 2 + LEFT_RIGHT_MARGIN * 2,
            HANDLE_SIDE_LENGTH,
        )

    def _along(self, rect: Rect) -> int:
        return int(rect.x if self._horizontal else rect.y)

    def _value_at(self, offset: float) -> int:
        length = self.valid_length()
        if length == 0:
            return self.minimum
        return int(offset / length * self.interval + self.minimum)

    def mouse_press(self, x: int, y: int) -> None:
        """Handle a left-button press at ``(x, y)``."""
        pos_check = y if self._horizontal else x
        pos_max = self.height if self._horizontal else self.width
        pos_value = x if self._horizontal else y
        first = self.first_handle_rect()
        second = self.second_handle_rect()
        first_pos = self._along(first)
        second_pos = self._along(second)
        half = HANDLE_SIDE_LENGTH // 2

        self.second_handle_pressed = second.contains(x, y)
        self.first_handle_pressed = (
            not self.second_handle_pressed and first.contains(x, y)
        )
        if self.first_handle_pressed:
            self.delta = pos_value - (first_pos + half)
            return
        if self.second_handle_pressed:
            self.delta = pos_value - (second_pos + half)
            return
        if not 2 <= pos_check <= pos_max - 2:
            return

        step = max(1, self.interval // 10)
        first_end = first_pos + HANDLE_SIDE_LENGTH

        def step_lower() -> None:
            lowered = self.lower_value + step
            self.set_lower_value(lowered if lowered < self.upper_value else self.upper_value)

        def step_upper() -> None:
            raised = self.upper_value - step
            self.set_upper_value(raised if raised > self.lower_value else self.lower_value)

        if pos_value < first_pos:
            self.set_lower_value(self.lower_value - step)
        elif pos_value > second_pos + HANDLE_SIDE_LENGTH:
            self.set_upper_value(self.upper_value + step)
        elif (pos_value > first_end or not self._has(HandleOption.LEFT_HANDLE)) and (
            pos_value < second_pos or not self._has(HandleOption.RIGHT_HANDLE)
        ):
            if self._has(HandleOption.DOUBLE_HANDLES):
                if pos_value - first_end < int((second_pos - first_end) / 2):
                    step_lower()
                else:
                    step_upper()
            elif self._has(HandleOption.LEFT_HANDLE):
                step_lower()
            elif self._has(HandleOption.RIGHT_HANDLE):
                step_upper()

    def mouse_move(self, x: int, y: int) -> None:
        """Drag the pressed handle to follow the pointer at ``(x, y)``."""
        pos_value = x if self._horizontal else y
        first_pos = self._along(self.first_handle_rect())
        second_pos = self._along(self.second_handle_rect())
        half = HANDLE_SIDE_LENGTH // 2
        double = self._has(HandleOption.DOUBLE_HANDLES)

        if self.first_handle_pressed and self._has(HandleOption.LEFT_HANDLE):
            if pos_value - self.delta + half <= second_pos:
                self.set_lower_value(
                    self._value_at(pos_value - self.delta - LEFT_RIGHT_MARGIN - half)
                )
            else:
                self.set_lower_value(self.upper_value)
        elif self.second_handle_pressed and self._has(HandleOption.RIGHT_HANDLE):
            reach = HANDLE_SIDE_LENGTH * (1.5 if double else 0.5)
            if first_pos + reach <= pos_value - self.delta:
                self.set_upper_value(
                    self._value_at(
                        pos_value
                        - self.delta
                        - LEFT_RIGHT_MARGIN
                        - half
                        - (HANDLE_SIDE_LENGTH if double else 0)
                    )
                )
            else:
                self.set_upper_value(self.lower_value)

    def mouse_release(self) -> None:
        self.first_handle_pressed = False
        self.second_handle_pressed = False

    def set_enabled(self, enabled: bool) -> None:
        """Enable or disable the slider; the selection colour follows."""
        self.enabled = enabled
        self.background_color = ENABLED_COLOR if enabled else DISABLED_COLOR