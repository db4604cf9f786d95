"""
Parameter Sweeps
================

Evaluates a calculator over a grid of one input while holding the others
fixed. Sweeps feed the plots and the CSV export.

Each sweep returns a pandas DataFrame with one row per grid point; the
first column is the swept variable.
"""

import math
from dataclasses import replace
from pathlib import Path
from typing import Optional, Union

import numpy as np
import pandas as pd

from .config import (
    DEFAULT_TRACE_CURRENT_A,
    DEFAULT_VIA_COUNT,
)
from .engines import TraceWidthEngine, ResistanceTemperatureEngine, ThermalViaEngine
from .models import TraceWidthInput, ResistanceTempInput, ThermalViaInput


DEFAULT_SWEEP_POINTS = 50

# Resistance sweep range (°C), covers industrial and automotive grades
SWEEP_TEMP_MIN_C = -40.0
SWEEP_TEMP_MAX_C = 150.0

MAX_SWEEP_VIAS = 400


def _usable(value: float, fallback: float) -> float:
    """value if it can anchor a sweep range, else fallback."""
    if math.isfinite(value) and value > 0:
        return value
    return fallback


def sweep_trace_current(
    inputs: TraceWidthInput,
    engine: Optional[TraceWidthEngine] = None,
    points: int = DEFAULT_SWEEP_POINTS
) -> pd.DataFrame:
    """
    Trace width and losses from 10% to 200% of the input current.

    Returns:
    -------
    pd.DataFrame
        Columns: current_a, width_mm, width_mil, area_mil2, r_hot_ohm, p_hot_w
    """
    engine = engine if engine is not None else TraceWidthEngine()
    current = _usable(inputs.current_a, DEFAULT_TRACE_CURRENT_A)

    rows = []
    for current_a in np.linspace(0.1 * current, 2.0 * current, points):
        result = engine.compute(replace(inputs, current_a=float(current_a)))
        rows.append({
            "current_a": float(current_a),
            "width_mm": result.width_mm,
            "width_mil": result.width_mil,
            "area_mil2": result.area_mil2,
            "r_hot_ohm": result.r_hot_ohm,
            "p_hot_w": result.p_hot_w,
        })
    return pd.DataFrame(rows)


def sweep_resistance_temperature(
    inputs: ResistanceTempInput,
    engine: Optional[ResistanceTemperatureEngine] = None,
    temp_min_c: float = SWEEP_TEMP_MIN_C,
    temp_max_c: float = SWEEP_TEMP_MAX_C,
    points: int = DEFAULT_SWEEP_POINTS
) -> pd.DataFrame:
    """
    Conductor resistance over a temperature range.

    Returns:
    -------
    pd.DataFrame
        Columns: temp_c, r_ohm
    """
    engine = engine if engine is not None else ResistanceTemperatureEngine()

    rows = []
    for temp_c in np.linspace(temp_min_c, temp_max_c, points):
        result = engine.compute(replace(inputs, temp1_c=float(temp_c)))
        rows.append({"temp_c": float(temp_c), "r_ohm": result.r_temp1_ohm})
    return pd.DataFrame(rows)


def sweep_via_count(
    inputs: ThermalViaInput,
    engine: Optional[ThermalViaEngine] = None,
    max_count: Optional[int] = None
) -> pd.DataFrame:
    """
    Thermal resistance for 1 .. max_count vias.

    max_count defaults to twice the input count, capped at MAX_SWEEP_VIAS.

    Returns:
    -------
    pd.DataFrame
        Columns: via_count, total_area_mm2, rth_k_per_w
    """
    engine = engine if engine is not None else ThermalViaEngine()
    if max_count is None:
        max_count = min(
            MAX_SWEEP_VIAS,
            max(2, int(2 * _usable(inputs.via_count, DEFAULT_VIA_COUNT)))
        )

    rows = []
    for count in np.arange(1, max_count + 1):
        result = engine.compute(replace(inputs, via_count=int(count)))
        rows.append({
            "via_count": int(count),
            "total_area_mm2": result.total_area_mm2,
            "rth_k_per_w": result.rth_k_per_w,
        })
    return pd.DataFrame(rows)


def export_sweep_csv(sweep: pd.DataFrame, filepath: Union[str, Path]) -> Path:
    """Write a sweep table to CSV and return the path written."""
    path = Path(filepath)
    sweep.to_csv(path, index=False)
    return path
