"""
PCB Thermal Toolkit Module
==========================

Unit-aware calculators for PCB trace sizing, copper losses, and
thermal-via conduction.

Features:
---------
- IPC-2221 trace width from current and allowed temperature rise,
  with resistance and I²R loss at 20°C and at ambient + dT
- Copper resistance vs temperature (linear alpha model)
- Thermal via array vertical conductive resistance (barrel copper only)
- Parameter sweeps, plots and step-by-step calculation traces

Usage:
------
    from src.pcb_thermal import TraceWidthEngine, TraceWidthInput, LayerKind

    result = TraceWidthEngine().compute(
        TraceWidthInput(current_a=30.0, temp_rise_c=10.0, layer=LayerKind.EXTERNAL)
    )
    print(f"{result.width_mm:.3f} mm")

Inputs are not validated: negative or non-numeric values propagate to
non-physical results (negative widths, nan). Each input record lists such
values through advisories().
"""

from .config import PcbThermalConfig, DEFAULT_CONFIG
from .models import (
    LayerKind,
    TraceWidthInput,
    TraceWidthResult,
    ResistanceTempInput,
    ResistanceTempResult,
    ThermalViaInput,
    ThermalViaResult,
)
from .engines import TraceWidthEngine, ResistanceTemperatureEngine, ThermalViaEngine
from .debugger import CalculationTrace
from .debug_trace import trace_trace_width, trace_resistance_vs_temp, trace_thermal_via
from .sweeps import (
    sweep_trace_current,
    sweep_resistance_temperature,
    sweep_via_count,
    export_sweep_csv,
)
from .logger import get_logger, setup_logging

__all__ = [
    # Engines
    "TraceWidthEngine",
    "ResistanceTemperatureEngine",
    "ThermalViaEngine",
    # Models
    "LayerKind",
    "TraceWidthInput",
    "TraceWidthResult",
    "ResistanceTempInput",
    "ResistanceTempResult",
    "ThermalViaInput",
    "ThermalViaResult",
    # Config
    "PcbThermalConfig",
    "DEFAULT_CONFIG",
    # Traces
    "CalculationTrace",
    "trace_trace_width",
    "trace_resistance_vs_temp",
    "trace_thermal_via",
    # Sweeps
    "sweep_trace_current",
    "sweep_resistance_temperature",
    "sweep_via_count",
    "export_sweep_csv",
    # Logging
    "get_logger",
    "setup_logging",
]
