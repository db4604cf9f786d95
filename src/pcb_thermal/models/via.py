"""
Thermal Via Model
=================

Input and result records for the thermal via array calculator.
"""

import math
from dataclasses import dataclass, asdict
from typing import List

from ..config import (
    COPPER_THERMAL_CONDUCTIVITY,
    DEFAULT_VIA_COUNT,
    DEFAULT_VIA_HOLE_MM,
    DEFAULT_VIA_PLATING_MM,
    DEFAULT_BOARD_THICKNESS_MM,
)


@dataclass(frozen=True)
class ThermalViaInput:
    """
    User inputs for the thermal via array calculator.

    Attributes:
    ----------
    via_count : float
        Number of vias in the array. Kept as float so that
        unparsable entries can carry nan.

    hole_mm : float
        Finished hole diameter Di (mm)

    plating_mm : float
        Barrel plating thickness (mm)

    board_thickness_mm : float
        Board thickness, the conduction path length (mm)

    thermal_conductivity : float
        Barrel copper thermal conductivity (W/m·K)
    """
    via_count: float = DEFAULT_VIA_COUNT
    hole_mm: float = DEFAULT_VIA_HOLE_MM
    plating_mm: float = DEFAULT_VIA_PLATING_MM
    board_thickness_mm: float = DEFAULT_BOARD_THICKNESS_MM
    thermal_conductivity: float = COPPER_THERMAL_CONDUCTIVITY

    def advisories(self) -> List[str]:
        """List inputs that will produce non-physical results."""
        notes = [
            f"{name} is not a number"
            for name, value in asdict(self).items()
            if math.isnan(value)
        ]
        if self.via_count <= 0:
            notes.append("Via count must be positive")
        elif math.isfinite(self.via_count) and not float(self.via_count).is_integer():
            notes.append("Via count is not a whole number")
        if self.hole_mm < 0 or self.plating_mm <= 0:
            notes.append("Hole must be non-negative and plating positive")
        if self.board_thickness_mm <= 0:
            notes.append("Board thickness must be positive")
        if self.thermal_conductivity <= 0:
            notes.append("Thermal conductivity must be positive")
        return notes


@dataclass(frozen=True)
class ThermalViaResult:
    """
    Derived via array conduction quantities.

    Attributes:
    ----------
    outer_diameter_mm : float
        Barrel outer diameter Do = Di + 2 * plating (mm)

    inner_diameter_mm : float
        Finished hole Di (mm)

    via_area_mm2 : float
        Annular copper area of one barrel (mm²)

    total_area_m2 : float
        Copper area of the whole array (m²)

    rth_k_per_w : float
        Vertical conductive thermal resistance through barrel copper (K/W).
        Lower bound: ignores spreading, pad contact, solder fill and
        dielectric conduction.
    """
    outer_diameter_mm: float
    inner_diameter_mm: float
    via_area_mm2: float
    total_area_m2: float
    rth_k_per_w: float

    @property
    def total_area_mm2(self) -> float:
        return self.total_area_m2 * 1e6

    def to_dict(self) -> dict:
        """Convert to dictionary for tabular export."""
        return asdict(self)
