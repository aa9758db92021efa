"""Settings for a benchmark session and how they are read from arguments."""

from __future__ import annotations

import os
import re
import shlex
import subprocess
import sys
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path, PurePath
from typing import IO, Any, Literal, Optional, Union

from cmdbench.units import Second, Unit

_IS_WINDOWS = sys.platform == "win32"

DEFAULT_SHELL = "cmd.exe" if _IS_WINDOWS else "sh"

_U64_MAX = 2**64 - 1
_U64_PATTERN = re.compile(r"\+?[0-9]+")

StreamSpec = Union[int, IO[Any], None]


class OptionsError(ValueError):
    """Raised when the given options are invalid.

    ``kind`` names the problem, for example ``"empty_shell"`` or
    ``"empty_runs_range"``.
    """

    def __init__(self, kind: str, message: str) -> None:
        super().__init__(message)
        self.kind = kind


@dataclass(frozen=True)
class Shell:
    """The shell used to run benchmarked commands."""

    cmdline: tuple[str, ...]
    is_default: bool = False

    @classmethod
    def default(cls) -> Shell:
        """The platform's default shell."""
        return cls((DEFAULT_SHELL,), is_default=True)

    @classmethod
    def parse(cls, s: str) -> Shell:
        """Parse a shell command line such as ``"bash -e"``."""
        try:
            words = shlex.split(s)
        except ValueError as exc:
            raise OptionsError("shell_parse", f"Could not parse shell command line: {exc}") from exc
        if not words or not words[0]:
            raise OptionsError("empty_shell", "Empty command at --shell option")
        return cls(tuple(words))

    def __str__(self) -> str:
        if self.is_default:
            return self.cmdline[0]
        return shlex.join(self.cmdline)

    def argv(self) -> list[str]:
        """The program and its arguments."""
        return list(self.cmdline)


class CmdFailureAction(Enum):
    """What to do when a benchmarked command fails."""

    RAISE_ERROR = "raise-error"
    IGNORE = "ignore"


class OutputStyle(Enum):
    """How terminal output is styled."""

    BASIC = "basic"
    FULL = "full"
    NO_COLOR = "nocolor"
    COLOR = "color"
    DISABLED = "none"


class SortOrder(Enum):
    """How benchmarks are ordered in comparisons and exports."""

    COMMAND = "command"
    MEAN_TIME = "mean-time"


@dataclass
class RunBounds:
    """Bounds for the number of benchmark runs."""

    min: int = 10
    max: Optional[int] = None


@dataclass(frozen=True)
class CommandInputPolicy:
    """Where the benchmarked command reads its input from; ``None`` is the null device."""

    path: Optional[Path] = None

    def open_stdin(self) -> StreamSpec:
        """A stdin value for ``subprocess``; a file object must be closed by the caller."""
        if self.path is None:
            return subprocess.DEVNULL
        return open(self.path, "rb")


@dataclass(frozen=True)
class CommandOutputPolicy:
    """What happens to the output of the benchmarked command."""

    mode: Literal["null", "pipe", "file", "inherit"] = "null"
    path: Optional[Path] = None

    def open_streams(self) -> tuple[StreamSpec, StreamSpec]:
        """Stdout and stderr values for ``subprocess``."""
        if self.mode == "null":
            return subprocess.DEVNULL, subprocess.DEVNULL
        if self.mode == "pipe":
            # Typically only stdout is performance-relevant, so only that is piped.
            return subprocess.PIPE, subprocess.DEVNULL
        if self.mode == "file":
            if self.path is None:
                raise ValueError("file output policy without a path")
            return open(self.path, "wb"), subprocess.DEVNULL
        return None, None


@dataclass(frozen=True)
class ExecutorKind:
    """How commands are run: directly, through a shell, or mocked."""

    kind: Literal["raw", "shell", "mock"] = "shell"
    shell: Optional[Shell] = field(default_factory=Shell.default)
    mock_shell: Optional[str] = None


def _parse_u64(name: str, text: str) -> int:
    if not _U64_PATTERN.fullmatch(text) or int(text) > _U64_MAX:
        raise OptionsError(
            "int_parsing", f"Could not read numeric integer argument to '--{name}': {text!r}"
        )
    return int(text)


def _parse_float(name: str, text: str) -> float:
    if text != text.strip() or "_" in text:
        raise OptionsError(
            "float_parsing", f"Could not read numeric argument to '--{name}': {text!r}"
        )
    try:
        return float(text)
    except ValueError as exc:
        raise OptionsError(
            "float_parsing", f"Could not read numeric argument to '--{name}': {text!r}"
        ) from exc


def _component_count(arg: str) -> int:
    count = len(PurePath(arg).parts)
    separators = ("/", "\\") if _IS_WINDOWS else ("/",)
    if arg == "." or any(arg.startswith("." + sep) for sep in separators):
        count += 1
    return count


def _output_policy(args: Mapping[str, Any]) -> CommandOutputPolicy:
    if args.get("show-output"):
        return CommandOutputPolicy("inherit")
    output = args.get("output")
    if output is None or output == "null":
        return CommandOutputPolicy("null")
    if output == "pipe":
        return CommandOutputPolicy("pipe")
    if output == "inherit":
        return CommandOutputPolicy("inherit")
    if _component_count(output) <= 1:
        raise OptionsError(
            "unknown_output_policy",
            f"Unknown output policy '{output}'. Use './{output}' to output to a file named '{output}'.",
        )
    return CommandOutputPolicy("file", Path(output))


def _auto_output_style(output_policy: CommandOutputPolicy) -> OutputStyle:
    if output_policy.mode == "inherit" or not sys.stdout.isatty():
        return OutputStyle.BASIC
    term = os.environ.get("TERM")
    dumb_terminal = term in ("unknown", "dumb") if term is not None else not _IS_WINDOWS
    if dumb_terminal or os.environ.get("NO_COLOR"):
        return OutputStyle.NO_COLOR
    return OutputStyle.FULL


_STYLES = {style.value: style for style in OutputStyle}

_SORT_ORDERS = {
    None: (SortOrder.MEAN_TIME, SortOrder.COMMAND),
    "auto": (SortOrder.MEAN_TIME, SortOrder.COMMAND),
    "command": (SortOrder.COMMAND, SortOrder.COMMAND),
    "mean-time": (SortOrder.MEAN_TIME, SortOrder.MEAN_TIME),
}

_TIME_UNITS = {
    "microsecond": Unit.MICROSECOND,
    "millisecond": Unit.MILLISECOND,
    "second": Unit.SECOND,
}


def _executor_kind(args: Mapping[str, Any]) -> ExecutorKind:
    if args.get("no-shell"):
        return ExecutorKind("raw", None)
    shell = args.get("shell")
    if args.get("debug-mode"):
        return ExecutorKind("mock", None, shell)
    if shell is None or shell == "default":
        return ExecutorKind("shell", Shell.default())
    if shell == "none":
        return ExecutorKind("raw", None)
    return ExecutorKind("shell", Shell.parse(shell))


def _input_policy(args: Mapping[str, Any]) -> CommandInputPolicy:
    path_str = args.get("input")
    if path_str is None or path_str == "null":
        return CommandInputPolicy()
    path = Path(path_str)
    if not path.exists():
        raise OptionsError(
            "stdin_data_file_does_not_exist",
            f"The file '{path_str}' specified as '--input' does not exist",
        )
    return CommandInputPolicy(path)


@dataclass
class Options:
    """The main settings for a benchmark session."""

    run_bounds: RunBounds = field(default_factory=RunBounds)
    warmup_count: int = 0
    min_benchmarking_time: Second = 3.0
    command_failure_action: CmdFailureAction = CmdFailureAction.RAISE_ERROR
    preparation_command: Optional[list[str]] = None
    setup_command: Optional[str] = None
    cleanup_command: Optional[str] = None
    output_style: OutputStyle = OutputStyle.FULL
    sort_order_speed_comparison: SortOrder = SortOrder.MEAN_TIME
    sort_order_exports: SortOrder = SortOrder.COMMAND
    executor_kind: ExecutorKind = field(default_factory=ExecutorKind)
    command_input_policy: CommandInputPolicy = field(default_factory=CommandInputPolicy)
    command_output_policy: CommandOutputPolicy = field(default_factory=CommandOutputPolicy)
    time_unit: Optional[Unit] = None

    @classmethod
    def from_arguments(cls, args: Optional[Mapping[str, Any]] = None) -> Options:
        """Build options from parsed arguments keyed by long option name.

        Absent options are missing or ``None``; flags are booleans and
        ``"prepare"`` is a list of strings.
        """
        args = args or {}
        options = cls()

        def u64(name: str) -> Optional[int]:
            value = args.get(name)
            return None if value is None else _parse_u64(name, value)

        warmup = u64("warmup")
        if warmup is not None:
            options.warmup_count = warmup

        min_runs = u64("min-runs")
        max_runs = u64("max-runs")
        runs = u64("runs")
        if runs is not None:
            min_runs = max_runs = runs

        if min_runs is not None and max_runs is not None and min_runs > max_runs:
            raise OptionsError(
                "empty_runs_range",
                "Minimum number of runs is larger than maximum number of runs",
            )
        if min_runs is not None:
            options.run_bounds.min = min_runs
        elif max_runs is not None:
            # The minimum was not explicit, so lower it if max is below the default.
            options.run_bounds.min = min(options.run_bounds.min, max_runs)
        if max_runs is not None:
            options.run_bounds.max = max_runs

        options.setup_command = args.get("setup")
        prepare = args.get("prepare")
        options.preparation_command = None if prepare is None else list(prepare)
        options.cleanup_command = args.get("cleanup")

        options.command_output_policy = _output_policy(args)

        style = _STYLES.get(args.get("style"))
        options.output_style = style or _auto_output_style(options.command_output_policy)

        sort = args.get("sort")
        if sort not in _SORT_ORDERS:
            raise OptionsError("unknown_sort_order", f"Unknown sort order '{sort}'")
        options.sort_order_speed_comparison, options.sort_order_exports = _SORT_ORDERS[sort]

        options.executor_kind = _executor_kind(args)

        if args.get("ignore-failure"):
            options.command_failure_action = CmdFailureAction.IGNORE

        options.time_unit = _TIME_UNITS.get(args.get("time-unit"))

        min_time = args.get("min-benchmarking-time")
        if min_time is not None:
            options.min_benchmarking_time = _parse_float("min-benchmarking-time", min_time)

        options.command_input_policy = _input_policy(args)
        return options

    def validate_against_command_list(self, num_commands: int) -> None:
        """Check that '--prepare' was given once or once per command."""
        prepare = self.preparation_command
        if prepare is not None and len(prepare) > 1 and len(prepare) != num_commands:
            raise OptionsError(
                "prepare_count",
                "The '--prepare' option has to be provided just once or N times, where N is "
                "the number of benchmark commands.",
            )