"""Small numeric helpers used to size the playing grid."""

from __future__ import annotations

import math


def get_factors(value: int) -> list[int]:
    """Return every positive divisor of ``value`` in ascending order."""
    return [candidate for candidate in range(1, value + 1) if value % candidate == 0]


def get_common_factors(a: int, b: int) -> list[int]:
    """Return the divisors shared by ``a`` and ``b``, in ascending order."""
    factors_b = set(get_factors(b))
    return [factor for factor in get_factors(a) if factor in factors_b]


def snap_to_grid(value: float, grid_size: float) -> float:
    """Round ``value`` to the nearest multiple of ``grid_size``.

    Halfway cases are rounded away from zero.
    """
    if grid_size == 0:
        raise ZeroDivisionError("grid_size must not be zero")
    steps = value / grid_size
    rounded = math.copysign(math.floor(abs(steps) + 0.5), steps)
    return rounded * grid_size