"""
Resistance vs Temperature Model
===============================

Input and result records for the conductor resistance calculator.
"""

import math
from dataclasses import dataclass, asdict
from typing import List

from ..config import (
    COPPER_RESISTIVITY_20C,
    COPPER_TEMP_COEFF,
    REFERENCE_TEMP_C,
    DEFAULT_TEMP1_C,
    DEFAULT_TEMP2_C,
    DEFAULT_CONDUCTOR_LENGTH_MM,
    DEFAULT_CONDUCTOR_WIDTH_MM,
    DEFAULT_CONDUCTOR_THICKNESS_MM,
)


@dataclass(frozen=True)
class ResistanceTempInput:
    """
    User inputs for the resistance vs temperature calculator.

    Attributes:
    ----------
    resistivity_20c : float
        Resistivity at 20°C (Ω·m)

    temp_coefficient : float
        Temperature coefficient alpha (1/°C)

    temp1_c, temp2_c : float
        Evaluation temperatures (°C)

    length_mm, width_mm, thickness_mm : float
        Conductor geometry (mm)
    """
    resistivity_20c: float = COPPER_RESISTIVITY_20C
    temp_coefficient: float = COPPER_TEMP_COEFF
    temp1_c: float = DEFAULT_TEMP1_C
    temp2_c: float = DEFAULT_TEMP2_C
    length_mm: float = DEFAULT_CONDUCTOR_LENGTH_MM
    width_mm: float = DEFAULT_CONDUCTOR_WIDTH_MM
    thickness_mm: float = DEFAULT_CONDUCTOR_THICKNESS_MM

    def advisories(self, reference_temp_c: float = REFERENCE_TEMP_C) -> List[str]:
        """
        List inputs that will produce non-physical results.

        reference_temp_c is the temperature alpha is specified at; pass the
        engine config's value when it is overridden.
        """
        notes = [
            f"{name} is not a number"
            for name, value in asdict(self).items()
            if math.isnan(value)
        ]
        if self.resistivity_20c <= 0:
            notes.append("Resistivity must be positive")
        if self.width_mm <= 0 or self.thickness_mm <= 0:
            notes.append("Width and thickness must be positive")
        if self.length_mm < 0:
            notes.append("Length is negative")
        # Linear model breaks down once 1 + alpha*(T - T_ref) reaches zero
        for temp in (self.temp1_c, self.temp2_c):
            if 1 + self.temp_coefficient * (temp - reference_temp_c) <= 0:
                notes.append(f"{temp:g}°C is outside the linear alpha model")
        return notes


@dataclass(frozen=True)
class ResistanceTempResult:
    """
    Derived conductor resistance.

    Attributes:
    ----------
    cross_section_m2 : float
        Width x thickness (m²)

    length_m : float
        Conductor length (m)

    r_temp1_ohm, r_temp2_ohm : float
        Resistance at temp1_c and temp2_c (Ω)
    """
    cross_section_m2: float
    length_m: float
    r_temp1_ohm: float
    r_temp2_ohm: float

    @property
    def cross_section_mm2(self) -> float:
        return self.cross_section_m2 * 1e6

    def to_dict(self) -> dict:
        """Convert to dictionary for tabular export."""
        return asdict(self)
