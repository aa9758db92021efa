"""Time units and duration formatting."""

from __future__ import annotations

from enum import Enum

Second = float


class Unit(Enum):
    """Supported time units."""

    SECOND = "s"
    MILLISECOND = "ms"
    MICROSECOND = "µs"

    def short_name(self) -> str:
        """The abbreviation of the unit."""
        return self.value

    def format(self, value: Second) -> str:
        """Format a value given in seconds for this unit."""
        if self is Unit.SECOND:
            return f"{value:.3f}"
        if self is Unit.MILLISECOND:
            return f"{value * 1e3:.1f}"
        return f"{value * 1e6:.1f}"


def format_duration_value(duration: Second, unit: Unit | None = None) -> tuple[str, Unit]:
    """Format a duration without a unit suffix; return the text and the unit used.

    When ``unit`` is None, the unit is chosen from the size of the duration.
    """
    if (duration < 0.001 and unit is None) or unit is Unit.MICROSECOND:
        chosen = Unit.MICROSECOND
    elif (duration < 1.0 and unit is None) or unit is Unit.MILLISECOND:
        chosen = Unit.MILLISECOND
    else:
        chosen = Unit.SECOND
    return chosen.format(duration), chosen


def format_duration_unit(duration: Second, unit: Unit | None = None) -> tuple[str, Unit]:
    """Format a duration with its unit suffix; return the text and the unit used."""
    text, chosen = format_duration_value(duration, unit)
    return f"{text} {chosen.short_name()}", chosen


def format_duration(duration: Second, unit: Unit | None = None) -> str:
    """Format a duration with its unit suffix."""
    return format_duration_unit(duration, unit)[0]