"""
Numeric Helpers
===============

The calculators follow IEEE-754 semantics instead of raising: division by
zero gives inf and fractional powers of negative numbers give nan, so that
non-physical inputs show up as non-physical outputs.
"""

import functools
import math

import numpy as np


def ieee754(func):
    """Evaluate func with numpy floating-point warnings silenced."""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            return func(*args, **kwargs)
    return wrapper


def as_float(value) -> np.float64:
    """Promote a number to numpy float64 so that arithmetic never raises."""
    return np.float64(value)


def area_or_floor(area: float, floor: float) -> float:
    """
    Return area, or floor when area is zero or undefined.

    A negative area is returned unchanged.
    """
    if area == 0 or math.isnan(area):
        return floor
    return area
