"""Shared table rendering for markup-based result exports."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from cmdbench.units import Unit, format_duration_value


class Alignment(Enum):
    """Horizontal alignment of a table column."""

    LEFT = "left"
    RIGHT = "right"


@dataclass
class BenchmarkResult:
    """Summary of the measurements for one benchmarked command."""

    command: str
    command_with_unused_parameters: str
    mean: float
    stddev: Optional[float]
    median: float
    user: float
    system: float
    min: float
    max: float
    times: Optional[list[float]] = None
    exit_codes: list[Optional[int]] = field(default_factory=list)
    parameters: dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.parameters = dict(sorted(self.parameters.items()))


@dataclass(frozen=True)
class RelativeSpeedEntry:
    """A benchmark result together with its speed relative to the reference."""

    result: BenchmarkResult
    relative_speed: float
    relative_speed_stddev: Optional[float]
    is_fastest: bool


_CELL_ALIGNMENTS = (
    Alignment.LEFT,
    Alignment.RIGHT,
    Alignment.RIGHT,
    Alignment.RIGHT,
    Alignment.RIGHT,
)


class MarkupExporter(ABC):
    """Base for exporters that render results as a markup table."""

    def table_results(self, entries: Sequence[RelativeSpeedEntry], unit: Unit) -> str:
        """Render the complete results table in the given unit."""
        notation = f"[{unit.short_name()}]"
        parts = [
            self.table_header(_CELL_ALIGNMENTS),
            self.table_row(
                [
                    "Command",
                    f"Mean {notation}",
                    f"Min {notation}",
                    f"Max {notation}",
                    "Relative",
                ]
            ),
            self.table_divider(_CELL_ALIGNMENTS),
        ]

        for entry in entries:
            measurement = entry.result
            cmd_str = measurement.command_with_unused_parameters.replace("|", "\\|")
            mean_str = format_duration_value(measurement.mean, unit)[0]
            stddev_str = (
                f" ± {format_duration_value(measurement.stddev, unit)[0]}"
                if measurement.stddev is not None
                else ""
            )
            min_str = format_duration_value(measurement.min, unit)[0]
            max_str = format_duration_value(measurement.max, unit)[0]
            rel_str = f"{entry.relative_speed:.2f}"
            if entry.is_fastest or entry.relative_speed_stddev is None:
                rel_stddev_str = ""
            else:
                rel_stddev_str = f" ± {entry.relative_speed_stddev:.2f}"

            parts.append(
                self.table_row(
                    [
                        self.command(cmd_str),
                        f"{mean_str}{stddev_str}",
                        min_str,
                        max_str,
                        f"{rel_str}{rel_stddev_str}",
                    ]
                )
            )

        parts.append(self.table_footer(_CELL_ALIGNMENTS))
        return "".join(parts)

    @abstractmethod
    def table_row(self, cells: Sequence[str]) -> str:
        """Render one row of cells."""

    @abstractmethod
    def table_divider(self, alignments: Sequence[Alignment]) -> str:
        """Render the line between the header and the data rows."""

    def table_header(self, alignments: Sequence[Alignment]) -> str:
        """Render text that opens the table."""
        return ""

    def table_footer(self, alignments: Sequence[Alignment]) -> str:
        """Render text that closes the table."""
        return ""

    @abstractmethod
    def command(self, cmd: str) -> str:
        """Render a command as inline code."""


def determine_unit_from_results(results: Sequence[BenchmarkResult]) -> Unit:
    """The unit suited to the first result's mean, or seconds if there is none."""
    if results:
        return format_duration_value(results[0].mean, None)[1]
    return Unit.SECOND