"""Math helpers — rounding and clamping shared by the engine. No engine imports."""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray


def round_half_up(value: float) -> int:
    """Round to nearest integer with .5 going up (4.5 → 5, -0.5 → 0).

    Python's round() is banker's rounding; pixel maths here follows the
    browser convention instead.
    """
    return int(math.floor(value + 0.5))


def round_half_up_array(values: NDArray) -> NDArray[np.int64]:
    """Vectorised round_half_up."""
    return np.floor(np.asarray(values, dtype=np.float64) + 0.5).astype(np.int64)


def clamp(value: int, lo: int, hi: int) -> int:
    return max(lo, min(hi, value))
