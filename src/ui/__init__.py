"""
PCB Thermal Toolkit UI Module
=============================

Tk desktop front end for the PCB thermal calculators.

Usage:
------
    from src.ui import PcbThermalUI

    PcbThermalUI().run()
"""

from .pcb_thermal_ui import PcbThermalUI

__all__ = [
    "PcbThermalUI",
]
