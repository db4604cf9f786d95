"""
PCB Thermal Calculations Module
===============================

Pure functions for the three calculators.
All calculations use SI units internally.
"""

from .conductor import (
    temperature_factor,
    rectangular_cross_section_m2,
    conductor_resistance,
    joule_loss,
    current_density,
)

from .trace_width import (
    layer_constant,
    ipc2221_area_mil2,
    ipc2221_current,
    width_from_area_mil,
    calculate_trace_width,
)

from .resistance import calculate_resistance_vs_temp

from .thermal_via import (
    via_outer_diameter_mm,
    annular_area_mm2,
    conduction_resistance,
    calculate_thermal_via,
)

__all__ = [
    # Conductor
    "temperature_factor",
    "rectangular_cross_section_m2",
    "conductor_resistance",
    "joule_loss",
    "current_density",
    # Trace width
    "layer_constant",
    "ipc2221_area_mil2",
    "ipc2221_current",
    "width_from_area_mil",
    "calculate_trace_width",
    # Resistance
    "calculate_resistance_vs_temp",
    # Thermal via
    "via_outer_diameter_mm",
    "annular_area_mm2",
    "conduction_resistance",
    "calculate_thermal_via",
]
