"""Export of benchmark results as JSON."""

from __future__ import annotations

import dataclasses
import json
import math
from collections.abc import Sequence
from typing import Any

from cmdbench.markup import BenchmarkResult


def _finite(value: Any) -> Any:
    """Replace non-finite floats with None, recursively."""
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, list):
        return [_finite(v) for v in value]
    if isinstance(value, dict):
        return {k: _finite(v) for k, v in value.items()}
    return value


class JsonExporter:
    """Writes results as a pretty-printed JSON document."""

    def serialize(self, results: Sequence[BenchmarkResult]) -> bytes:
        """Render ``{"results": [...]}`` as UTF-8 bytes with a trailing newline."""
        summary = {"results": [_finite(dataclasses.asdict(r)) for r in results]}
        text = json.dumps(summary, indent=2, ensure_ascii=False)
        return (text + "\n").encode("utf-8")