"""Minimum/maximum helpers and statistical outlier detection.

Outliers are detected via modified Z-scores, following Iglewicz and Hoaglin
(1993), "How to Detect and Handle Outliers".
"""

from __future__ import annotations

import math
import statistics
import sys
from collections.abc import Sequence

# 1.4826 converts the MAD into an estimator of the standard deviation; the
# second factor is the number of standard deviations.
OUTLIER_THRESHOLD = 1.4826 * 10.0


def _checked(vals: Sequence[float]) -> Sequence[float]:
    if not vals:
        raise ValueError("empty sequence")
    if any(math.isnan(v) for v in vals):
        raise ValueError("NaN values are not supported")
    return vals


def maximum(vals: Sequence[float]) -> float:
    """Largest value of a non-empty sequence without NaNs."""
    return max(_checked(vals))


def minimum(vals: Sequence[float]) -> float:
    """Smallest value of a non-empty sequence without NaNs."""
    return min(_checked(vals))


def modified_zscores(xs: Sequence[float]) -> list[float]:
    """Modified Z-scores ``(x - median) / MAD`` of a non-empty sample."""
    if not xs:
        raise ValueError("cannot compute Z-scores of an empty sample")
    x_median = statistics.median(xs)
    mad = statistics.median(abs(x - x_median) for x in xs)
    if not mad > 0.0:
        mad = sys.float_info.epsilon
    return [(x - x_median) / mad for x in xs]


def num_outliers(xs: Sequence[float]) -> int:
    """Number of points whose modified Z-score exceeds the outlier threshold."""
    if not xs:
        return 0
    return sum(1 for s in modified_zscores(xs) if abs(s) > OUTLIER_THRESHOLD)