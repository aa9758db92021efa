"""Parameter values, numeric parameter ranges and value-list tokenizing."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from decimal import Decimal
from typing import Union

Number = Union[int, Decimal]

MAX_PARAMETERS = 100_000


class ParameterScanError(ValueError):
    """Raised when a parameter range is invalid."""


@dataclass(frozen=True)
class ParameterValue:
    """A parameter value: either text or a number."""

    value: Union[str, int, Decimal]

    def __str__(self) -> str:
        if isinstance(self.value, Decimal):
            return format(self.value, "f")
        return str(self.value)


def _trunc_div(a: Number, b: Number) -> int:
    """Divide and truncate towards zero."""
    if isinstance(a, int) and isinstance(b, int):
        q = abs(a) // abs(b)
        return q if (a >= 0) == (b > 0) else -q
    return int(Decimal(a) / Decimal(b))


class RangeStep:
    """The values ``start, start + step, ...`` up to and including ``end``."""

    def __init__(self, start: Number, end: Number, step: Number) -> None:
        if isinstance(start, Decimal) or isinstance(end, Decimal) or isinstance(step, Decimal):
            start, end, step = Decimal(start), Decimal(end), Decimal(step)
        if end < start:
            raise ParameterScanError("Empty parameter range")
        if step == 0:
            raise ParameterScanError("Zero is not a valid parameter step")
        size = _trunc_div(end - start + 1, step)
        if step < 0 or size < 0 or size > MAX_PARAMETERS:
            raise ParameterScanError("Parameter range is too large")
        self.start = start
        self.end = end
        self.step = step

    def __iter__(self) -> Iterator[Number]:
        value = self.start
        while value <= self.end:
            yield value
            value += self.step

    def __len__(self) -> int:
        return _trunc_div(self.end - self.start, self.step) + 1


def tokenize(values: str) -> list[str]:
    """Split a comma-separated list; ``\\,`` and ``\\\\`` are escapes."""
    tokens: list[str] = []
    buf: list[str] = []
    chars = iter(values)
    for c in chars:
        if c == "\\":
            nxt = next(chars, None)
            if nxt is None:
                buf.append("\\")
            elif nxt in ",\\":
                buf.append(nxt)
            else:
                buf.append("\\" + nxt)
        elif c == ",":
            tokens.append("".join(buf))
            buf = []
        else:
            buf.append(c)
    tokens.append("".join(buf))
    return tokens