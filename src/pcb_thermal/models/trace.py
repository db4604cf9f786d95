"""
Trace Width Model
=================

Input and result records for the IPC-2221 trace width calculator.
"""

import math
from dataclasses import dataclass, asdict
from enum import Enum
from typing import List

from ..config import (
    DEFAULT_TRACE_CURRENT_A,
    DEFAULT_TRACE_TEMP_RISE_C,
    DEFAULT_TRACE_COPPER_OZ,
    DEFAULT_TRACE_LENGTH_MM,
    DEFAULT_AMBIENT_TEMP_C,
)


class LayerKind(Enum):
    """PCB layer position, selects the IPC-2221 calibration constant."""
    EXTERNAL = "external"
    INTERNAL = "internal"

    @property
    def label(self) -> str:
        """Human-readable label."""
        return self.value.capitalize()


@dataclass(frozen=True)
class TraceWidthInput:
    """
    User inputs for the trace width calculator.

    Attributes:
    ----------
    current_a : float
        Target continuous current (A)

    temp_rise_c : float
        Allowed temperature rise above ambient (°C)

    layer : LayerKind
        External or internal layer, or its value "external"/"internal"

    copper_oz : float
        Copper weight (oz/ft²)

    length_mm : float
        Trace length (mm)

    ambient_c : float
        Ambient temperature estimate (°C)
    """
    current_a: float = DEFAULT_TRACE_CURRENT_A
    temp_rise_c: float = DEFAULT_TRACE_TEMP_RISE_C
    layer: LayerKind = LayerKind.EXTERNAL
    copper_oz: float = DEFAULT_TRACE_COPPER_OZ
    length_mm: float = DEFAULT_TRACE_LENGTH_MM
    ambient_c: float = DEFAULT_AMBIENT_TEMP_C

    def __post_init__(self):
        """Accept the layer as a LayerKind or its value; raises ValueError otherwise."""
        object.__setattr__(self, "layer", LayerKind(self.layer))

    def advisories(self) -> List[str]:
        """List inputs that will produce non-physical results."""
        notes = []
        for name, value in (
            ("Current", self.current_a),
            ("Allowable dT", self.temp_rise_c),
            ("Copper thickness", self.copper_oz),
            ("Trace length", self.length_mm),
            ("Ambient", self.ambient_c),
        ):
            if math.isnan(value):
                notes.append(f"{name} is not a number")
        if self.current_a < 0:
            notes.append("Current is negative")
        if self.temp_rise_c <= 0:
            notes.append("Allowable dT must be positive for the IPC-2221 fit")
        if self.copper_oz <= 0:
            notes.append("Copper thickness must be positive")
        if self.length_mm < 0:
            notes.append("Trace length is negative")
        return notes


@dataclass(frozen=True)
class TraceWidthResult:
    """
    Derived trace quantities.

    Attributes:
    ----------
    width_mm, width_mil : float
        Minimum trace width

    area_mil2 : float
        Required copper cross-section from the IPC-2221 fit (mil²)

    cross_section_m2 : float
        Cross-section from copper thickness and width (m²)

    hot_temp_c : float
        Ambient plus allowed rise (°C)

    r20_ohm, r_hot_ohm : float
        Resistance at 20°C and at hot_temp_c

    p20_w, p_hot_w : float
        I²R loss at 20°C and at hot_temp_c

    current_density_a_m2 : float
        Current density (A/m²)
    """
    width_mm: float
    width_mil: float
    area_mil2: float
    cross_section_m2: float
    hot_temp_c: float
    r20_ohm: float
    r_hot_ohm: float
    p20_w: float
    p_hot_w: float
    current_density_a_m2: float

    @property
    def cross_section_mm2(self) -> float:
        return self.cross_section_m2 * 1e6

    @property
    def current_density_a_mm2(self) -> float:
        return self.current_density_a_m2 / 1e6

    def to_dict(self) -> dict:
        """Convert to dictionary for tabular export."""
        return asdict(self)
