"""
Thermal Via Calculations
========================

Vertical conduction through the plated copper of a via array:

    Do = Di + 2 * plating
    A_via = pi/4 * (Do² - Di²)
    R_th = t_board / (k * n * A_via)

Only barrel copper is considered. Spreading resistance in planes, pad
contact resistance, solder fill and dielectric conduction are ignored, so
the result is a lower bound on the real thermal resistance.
"""

import math

from ..config import PcbThermalConfig, DEFAULT_CONFIG, AREA_FLOOR_M2
from ..models.via import ThermalViaInput, ThermalViaResult
from ..units import mm_to_m, mm2_to_m2
from .numeric import ieee754, as_float, area_or_floor


@ieee754
def via_outer_diameter_mm(hole_mm: float, plating_mm: float) -> float:
    """Barrel outer diameter (mm)."""
    return float(as_float(hole_mm) + 2 * as_float(plating_mm))


@ieee754
def annular_area_mm2(outer_mm: float, inner_mm: float) -> float:
    """Area of a ring between two diameters (mm²)."""
    outer = as_float(outer_mm)
    inner = as_float(inner_mm)
    return float(math.pi / 4 * (outer * outer - inner * inner))


@ieee754
def conduction_resistance(
    path_length_m: float,
    thermal_conductivity: float,
    area_m2: float,
    area_floor_m2: float = AREA_FLOOR_M2
) -> float:
    """1-D conductive thermal resistance L / (k * A) (K/W)."""
    return float(
        as_float(path_length_m)
        / (as_float(thermal_conductivity) * area_or_floor(area_m2, area_floor_m2))
    )


@ieee754
def calculate_thermal_via(
    inputs: ThermalViaInput,
    config: PcbThermalConfig = DEFAULT_CONFIG
) -> ThermalViaResult:
    """
    Evaluate the vertical conductive resistance of a via array.

    Parameters:
    ----------
    inputs : ThermalViaInput
        Via count, drill, plating, board thickness and copper k

    config : PcbThermalConfig
        Supplies the zero-area floor

    Returns:
    -------
    ThermalViaResult
        Barrel geometry, copper areas and R_th
    """
    outer_mm = via_outer_diameter_mm(inputs.hole_mm, inputs.plating_mm)
    via_area_mm2 = annular_area_mm2(outer_mm, inputs.hole_mm)
    total_area_m2 = float(mm2_to_m2(as_float(via_area_mm2) * inputs.via_count))
    path_length_m = float(mm_to_m(as_float(inputs.board_thickness_mm)))

    return ThermalViaResult(
        outer_diameter_mm=outer_mm,
        inner_diameter_mm=float(inputs.hole_mm),
        via_area_mm2=via_area_mm2,
        total_area_m2=total_area_m2,
        rth_k_per_w=conduction_resistance(
            path_length_m, inputs.thermal_conductivity,
            total_area_m2, config.area_floor_m2
        ),
    )
