"""State and line colours of a rotating waiting indicator."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Any


@dataclass(frozen=True)
class Color:
    """An RGB colour with an alpha between 0 and 1."""

    red: int = 0
    green: int = 0
    blue: int = 0
    alpha: float = 1.0

    def with_alpha(self, alpha: float) -> "Color":
        return replace(self, alpha=alpha)


def line_count_distance_from_primary(current: int, primary: int, total: int) -> int:
    """How many lines ``current`` trails behind the primary line."""
    distance = primary - current
    if distance < 0:
        distance += total
    return distance


def current_line_color(
    distance: int,
    total: int,
    trail_fade: float,
    min_opacity: float,
    color: Color,
) -> Color:
    """Colour of a line ``distance`` steps behind the primary line."""
    if distance == 0:
        return color
    min_alpha = min_opacity / 100.0
    threshold = int(math.ceil((total - 1) * trail_fade / 100.0))
    if distance > threshold:
        return color.with_alpha(min_alpha)
    gradient = (color.alpha - min_alpha) / float(threshold + 1)
    alpha = color.alpha - gradient * distance
    return color.with_alpha(min(1.0, max(0.0, alpha)))


class WaitingSpinner:
    """A spinner of radial lines whose bright line advances on each tick.

    ``parent`` may be any object with ``width``, ``height`` and ``enabled``
    attributes; it is centred on and disabled while spinning if asked.
    """

    def __init__(
        self,
        parent: Any = None,
        center_on_parent: bool = False,
        disable_parent_when_spinning: bool = False,
    ) -> None:
        self.parent = parent
        self.center_on_parent = center_on_parent
        self.disable_parent_when_spinning = disable_parent_when_spinning
        self.color = Color()
        self.minimum_trail_opacity = math.pi
        self.trail_fade_percentage = 80.0
        self._roundness = 100.0
        self._revolutions_per_second = math.pi / 2
        self._number_of_lines = 20
        self._line_length = 10
        self._line_width = 2
        self._inner_radius = 10
        self.current_counter = 0
        self.is_spinning = False
        self.visible = False
        self.timer_active = False
        self.position = (0, 0)
        self.size = 0
        self.interval = 0
        self._update_size()
        self._update_timer()

    @property
    def roundness(self) -> float:
        return self._roundness

    @property
    def revolutions_per_second(self) -> float:
        return self._revolutions_per_second

    @property
    def number_of_lines(self) -> int:
        return self._number_of_lines

    @property
    def line_length(self) -> int:
        return self._line_length

    @property
    def line_width(self) -> int:
        return self._line_width

    @property
    def inner_radius(self) -> int:
        return self._inner_radius

    def start(self) -> None:
        self._update_position()
        self.is_spinning = True
        self.visible = True
        if self.parent is not None and self.disable_parent_when_spinning:
            self.parent.enabled = False
        if not self.timer_active:
            self.timer_active = True
            self.current_counter = 0

    def stop(self) -> None:
        self.is_spinning = False
        self.visible = False
        if self.parent is not None and self.disable_parent_when_spinning:
            self.parent.enabled = True
        if self.timer_active:
            self.timer_active = False
            self.current_counter = 0

    def rotate(self) -> None:
        """Advance the primary line by one, wrapping around."""
        self.current_counter += 1
        if self.current_counter >= self._number_of_lines:
            self.current_counter = 0

    def set_number_of_lines(self, lines: int) -> None:
        self._number_of_lines = lines
        self.current_counter = 0
        self._update_timer()

    def set_line_length(self, length: int) -> None:
        self._line_length = length
        self._update_size()

    def set_line_width(self, width: int) -> None:
        self._line_width = width
        self._update_size()

    def set_inner_radius(self, radius: int) -> None:
        self._inner_radius = radius
        self._update_size()

    def set_roundness(self, roundness: float) -> None:
        self._roundness = max(0.0, min(100.0, roundness))

    def set_revolutions_per_second(self, revolutions: float) -> None:
        self._revolutions_per_second = revolutions
        self._update_timer()

    def line_colors(self) -> list[Color]:
        """Colours of every line, in drawing order, for the current frame."""
        self._update_position()
        if self.current_counter >= self._number_of_lines:
            self.current_counter = 0
        return [
            current_line_color(
                line_count_distance_from_primary(
                    line, self.current_counter, self._number_of_lines
                ),
                self._number_of_lines,
                self.trail_fade_percentage,
                self.minimum_trail_opacity,
                self.color,
            )
            for line in range(self._number_of_lines)
        ]

    def _update_size(self) -> None:
        self.size = (self._inner_radius + self._line_length) * 2

    def _update_timer(self) -> None:
        self.interval = int(
            1000 / (self._number_of_lines * self._revolutions_per_second)
        )

    def _update_position(self) -> None:
        if self.parent is not None and self.center_on_parent:
            self.position = (
                self.parent.width // 2 - self.size // 2,
                self.parent.height // 2 - self.size // 2,
            )