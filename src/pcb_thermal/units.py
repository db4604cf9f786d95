"""
Unit Conversions
================

Helpers between SI units and the units PCB designers work in
(mil, oz/ft² copper weight, mm²).
"""

from .config import MM_PER_MIL, MM_PER_OZ, MIL_PER_OZ


def mm_to_mil(mm: float) -> float:
    """Convert millimeters to mils."""
    return mm / MM_PER_MIL


def mil_to_mm(mil: float) -> float:
    """Convert mils to millimeters."""
    return mil * MM_PER_MIL


def oz_to_mm(oz: float) -> float:
    """Convert copper weight (oz/ft²) to thickness in millimeters."""
    return oz * MM_PER_OZ


def mm_to_oz(mm: float) -> float:
    """Convert copper thickness in millimeters to weight (oz/ft²)."""
    return mm / MM_PER_OZ


def oz_to_mil(oz: float) -> float:
    """Convert copper weight (oz/ft²) to thickness in mils."""
    return oz * MIL_PER_OZ


def mm_to_m(mm: float) -> float:
    """Convert millimeters to meters."""
    return mm / 1000.0


def mm2_to_m2(mm2: float) -> float:
    return mm2 * 1e-6


def m2_to_mm2(m2: float) -> float:
    return m2 * 1e6
