"""
Calculator Engines
==================

Stateless engines binding each calculator to a configuration. An engine
holds no state besides its config, so compute() is a pure function of its
input and may be called on every form edit.

Usage:
------
    from src.pcb_thermal import TraceWidthEngine, TraceWidthInput, LayerKind

    engine = TraceWidthEngine()
    result = engine.compute(TraceWidthInput(current_a=5.0, layer=LayerKind.INTERNAL))
    print(result.width_mm)
"""

from typing import List, Optional

from .config import PcbThermalConfig, DEFAULT_CONFIG
from .logger import get_logger
from .models import (
    TraceWidthInput,
    TraceWidthResult,
    ResistanceTempInput,
    ResistanceTempResult,
    ThermalViaInput,
    ThermalViaResult,
)
from .calculations import (
    calculate_trace_width,
    calculate_resistance_vs_temp,
    calculate_thermal_via,
)


logger = get_logger("engines")


class _Engine:
    """Shared config handling."""

    def __init__(self, config: Optional[PcbThermalConfig] = None):
        self.config = config if config is not None else DEFAULT_CONFIG

    def advisories(self, inputs) -> List[str]:
        """Non-physical input values, as listed by the input record."""
        return inputs.advisories()


class TraceWidthEngine(_Engine):
    """IPC-2221 trace width, resistance and loss."""

    def compute(self, inputs: TraceWidthInput) -> TraceWidthResult:
        result = calculate_trace_width(inputs, self.config)
        logger.debug(
            "trace width: I=%gA dT=%gC %s %goz -> %.4g mm",
            inputs.current_a, inputs.temp_rise_c, inputs.layer.value,
            inputs.copper_oz, result.width_mm
        )
        return result


class ResistanceTemperatureEngine(_Engine):
    """Conductor resistance at two temperatures."""

    def compute(self, inputs: ResistanceTempInput) -> ResistanceTempResult:
        result = calculate_resistance_vs_temp(inputs, self.config)
        logger.debug(
            "resistance: R(%gC)=%.4g ohm R(%gC)=%.4g ohm",
            inputs.temp1_c, result.r_temp1_ohm, inputs.temp2_c, result.r_temp2_ohm
        )
        return result

    def advisories(self, inputs: ResistanceTempInput) -> List[str]:
        return inputs.advisories(self.config.reference_temp_c)


class ThermalViaEngine(_Engine):
    """Vertical conductive resistance of a via array."""

    def compute(self, inputs: ThermalViaInput) -> ThermalViaResult:
        result = calculate_thermal_via(inputs, self.config)
        logger.debug(
            "thermal via: n=%g Di=%gmm plating=%gmm -> %.4g K/W",
            inputs.via_count, inputs.hole_mm, inputs.plating_mm, result.rth_k_per_w
        )
        return result
