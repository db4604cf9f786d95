"""
PCB Thermal Toolkit - Main Package
==================================

Engineering calculators for printed circuit board thermal design.

This package provides modules for:
- PCB Thermal Calculators (pcb_thermal): trace width, copper resistance
  vs temperature, thermal via conduction
- User Interface (ui): Tk desktop front end

"""

__version__ = "0.1.0"
