"""Numeric helpers."""

from __future__ import annotations

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with .5 going up (2.5 -> 3, -2.5 -> -2).

    Python's built-in :func:`round` uses banker's rounding, which would
    shift prices and averages that land exactly on .5.
    """
    return math.floor(value + 0.5)
