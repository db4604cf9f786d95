"""
Conductor Calculations
======================

Resistance and Joule heating of a rectangular conductor:
- Temperature scaling of resistivity
- R = rho * L / A
- P = I²R
"""

from ..config import REFERENCE_TEMP_C, AREA_FLOOR_M2
from ..units import mm_to_m
from .numeric import ieee754, as_float, area_or_floor


@ieee754
def temperature_factor(
    temp_coefficient: float,
    temp_c: float,
    reference_temp_c: float = REFERENCE_TEMP_C
) -> float:
    """
    Linear resistivity scaling 1 + alpha * (T - T_ref).

    Parameters:
    ----------
    temp_coefficient : float
        Temperature coefficient alpha (1/°C)

    temp_c : float
        Conductor temperature (°C)

    reference_temp_c : float
        Temperature at which alpha and resistivity are specified (°C)

    Returns:
    -------
    float
        Dimensionless scale factor
    """
    return float(1 + as_float(temp_coefficient) * (as_float(temp_c) - reference_temp_c))


@ieee754
def rectangular_cross_section_m2(width_mm: float, thickness_mm: float) -> float:
    """Cross-section of a width x thickness conductor, mm inputs to m²."""
    return float(mm_to_m(as_float(thickness_mm)) * mm_to_m(as_float(width_mm)))


@ieee754
def conductor_resistance(
    resistivity_20c: float,
    temp_coefficient: float,
    temp_c: float,
    length_m: float,
    area_m2: float,
    reference_temp_c: float = REFERENCE_TEMP_C,
    area_floor_m2: float = AREA_FLOOR_M2
) -> float:
    """
    Resistance of a conductor at a given temperature.

    R(T) = rho20 * (1 + alpha * (T - 20)) * L / A

    A zero or undefined area is replaced by area_floor_m2.

    Returns:
    -------
    float
        Resistance (Ω)
    """
    rho = as_float(resistivity_20c) * temperature_factor(temp_coefficient, temp_c, reference_temp_c)
    return float(rho * as_float(length_m) / area_or_floor(area_m2, area_floor_m2))


@ieee754
def joule_loss(current_a: float, resistance_ohm: float) -> float:
    """I²R power loss (W)."""
    current = as_float(current_a)
    return float(current * current * resistance_ohm)


@ieee754
def current_density(
    current_a: float,
    area_m2: float,
    area_floor_m2: float = AREA_FLOOR_M2
) -> float:
    """Current density J = I / A (A/m²)."""
    return float(as_float(current_a) / area_or_floor(area_m2, area_floor_m2))
