"""
PCB Thermal Toolkit Models
==========================

Input and result records for each calculator.
"""

from .trace import LayerKind, TraceWidthInput, TraceWidthResult
from .resistance import ResistanceTempInput, ResistanceTempResult
from .via import ThermalViaInput, ThermalViaResult

__all__ = [
    "LayerKind",
    "TraceWidthInput",
    "TraceWidthResult",
    "ResistanceTempInput",
    "ResistanceTempResult",
    "ThermalViaInput",
    "ThermalViaResult",
]
