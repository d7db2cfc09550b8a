"""The bounded lower and upper values held by a range slider."""

from __future__ import annotations

from typing import Callable


class RangeValues:
    """A minimum, a maximum, and two values clamped between them.

    Listeners appended to ``lower_changed``, ``upper_changed`` and
    ``range_changed`` are called whenever the matching value is set.
    """

    def __init__(self, minimum: int = 0, maximum: int = 100) -> None:
        self.minimum = minimum
        self.maximum = maximum
        self.lower_value = minimum
        self.upper_value = maximum
        self.interval = maximum - minimum
        self.lower_changed: list[Callable[[int], None]] = []
        self.upper_changed: list[Callable[[int], None]] = []
        self.range_changed: list[Callable[[int, int], None]] = []

    def _clamp(self, value: int) -> int:
        return max(self.minimum, min(self.maximum, value))

    def set_lower_value(self, value: int) -> None:
        """Set the lower value, clamped to the range."""
        self.lower_value = self._clamp(int(value))
        for listener in self.lower_changed:
            listener(self.lower_value)

    def set_upper_value(self, value: int) -> None:
        """Set the upper value, clamped to the range."""
        self.upper_value = self._clamp(int(value))
        for listener in self.upper_changed:
            listener(self.upper_value)

    def _range_updated(self) -> None:
        self.interval = self.maximum - self.minimum
        self.set_lower_value(self.minimum)
        self.set_upper_value(self.maximum)
        for listener in self.range_changed:
            listener(self.minimum, self.maximum)

    def set_minimum(self, minimum: int) -> None:
        """Set the minimum; one above the maximum swaps the two.

        Both values are reset to the ends of the new range.
        """
        if minimum <= self.maximum:
            self.minimum = minimum
        else:
            self.minimum, self.maximum = self.maximum, minimum
        self._range_updated()

    def set_maximum(self, maximum: int) -> None:
        """Set the maximum; one below the minimum swaps the two.

        Both values are reset to the ends of the new range.
        """
        if maximum >= self.minimum:
            self.maximum = maximum
        else:
            self.minimum, self.maximum = maximum, self.minimum
        self._range_updated()

    def set_range(self, minimum: int, maximum: int) -> None:
        """Set the minimum and then the maximum."""
        self.set_minimum(minimum)
        self.set_maximum(maximum)