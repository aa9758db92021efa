"""Export of benchmark results as CSV."""

from __future__ import annotations

import csv
import io
import math
from collections.abc import Sequence
from decimal import Decimal

from cmdbench.markup import BenchmarkResult

_HEADERS = ("command", "mean", "stddev", "median", "user", "system", "min", "max")


def _format_float(value: float) -> str:
    """Shortest round-trip decimal representation, without an exponent."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value.is_integer():
        return str(int(value))
    return format(Decimal(repr(value)), "f")


class CsvExporter:
    """Writes results as comma-separated values; run times and exit codes are left out."""

    def serialize(self, results: Sequence[BenchmarkResult]) -> bytes:
        """Render the results as CSV bytes."""
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")

        headers = list(_HEADERS)
        if results:
            headers.extend(f"parameter_{name}" for name in results[0].parameters)
        writer.writerow(headers)

        for res in results:
            numbers = (
                res.mean,
                res.stddev if res.stddev is not None else 0.0,
                res.median,
                res.user,
                res.system,
                res.min,
                res.max,
            )
            writer.writerow(
                [res.command, *map(_format_float, numbers), *res.parameters.values()]
            )

        return buffer.getvalue().encode("utf-8")