"""
PCB Thermal Plotting Module
===========================

Draws parameter sweeps onto matplotlib Axes, marking the operating point
of the current inputs. The functions only draw; the caller owns the
Figure (an embedded Tk canvas in the UI, or a plain Figure for export).

Usage:
-----
    from matplotlib.figure import Figure
    from src.pcb_thermal.plotting import plot_trace_sweep

    fig = Figure(figsize=(6, 4))
    ax = fig.add_subplot(111)
    plot_trace_sweep(ax, sweep, inputs, result)
    fig.savefig("trace.png")
"""

import math

import pandas as pd
from matplotlib.axes import Axes

from .models import (
    TraceWidthInput,
    TraceWidthResult,
    ResistanceTempInput,
    ResistanceTempResult,
    ThermalViaInput,
    ThermalViaResult,
)


PRIMARY_COLOR = 'tab:blue'
SECONDARY_COLOR = 'tab:green'
MARKER_COLOR = 'orange'
GRID_ALPHA = 0.3


def _mark_point(ax: Axes, x: float, y: float, label: str):
    """Operating point marker, skipped for non-finite coordinates."""
    if math.isfinite(x) and math.isfinite(y):
        ax.plot([x], [y], 'o', color=MARKER_COLOR, markersize=7, label=label, zorder=5)


def plot_trace_sweep(
    ax: Axes,
    sweep: pd.DataFrame,
    inputs: TraceWidthInput,
    result: TraceWidthResult
) -> Axes:
    """
    Required width vs current, with hot-temperature loss on a second axis.

    Returns:
    -------
    Axes
        The secondary (power) axis
    """
    ax.clear()
    ax.set_xlabel('Current (A)')
    ax.set_ylabel('Required width (mm)', color=PRIMARY_COLOR)
    ax.plot(sweep['current_a'], sweep['width_mm'], color=PRIMARY_COLOR, linewidth=2, label='Width')
    ax.tick_params(axis='y', labelcolor=PRIMARY_COLOR)
    _mark_point(ax, inputs.current_a, result.width_mm, f'{inputs.current_a:g} A')

    ax2 = ax.twinx()
    ax2.set_ylabel(f'I²R loss @ {result.hot_temp_c:g}°C (W)', color=SECONDARY_COLOR)
    ax2.plot(sweep['current_a'], sweep['p_hot_w'], color=SECONDARY_COLOR,
             linewidth=2, linestyle=':', label='Loss')
    ax2.tick_params(axis='y', labelcolor=SECONDARY_COLOR)

    ax.set_title(f'IPC-2221 {inputs.layer.label}, dT={inputs.temp_rise_c:g}°C, {inputs.copper_oz:g} oz')
    ax.grid(True, alpha=GRID_ALPHA)
    ax.legend(loc='upper left')
    return ax2


def plot_resistance_sweep(
    ax: Axes,
    sweep: pd.DataFrame,
    inputs: ResistanceTempInput,
    result: ResistanceTempResult
) -> Axes:
    """Resistance vs temperature with T1 and T2 marked."""
    ax.clear()
    ax.plot(sweep['temp_c'], sweep['r_ohm'] * 1e3, color=PRIMARY_COLOR, linewidth=2, label='R(T)')
    _mark_point(ax, inputs.temp1_c, result.r_temp1_ohm * 1e3, f'T1 = {inputs.temp1_c:g}°C')
    _mark_point(ax, inputs.temp2_c, result.r_temp2_ohm * 1e3, f'T2 = {inputs.temp2_c:g}°C')

    ax.axvline(x=20.0, color='gray', linestyle='--', alpha=0.5, label='20°C reference')
    ax.set_xlabel('Temperature (°C)')
    ax.set_ylabel('Resistance (mΩ)')
    ax.set_title(f'{inputs.length_mm:g} x {inputs.width_mm:g} x {inputs.thickness_mm:g} mm conductor')
    ax.grid(True, alpha=GRID_ALPHA)
    ax.legend(loc='upper left')
    return ax


def plot_via_sweep(
    ax: Axes,
    sweep: pd.DataFrame,
    inputs: ThermalViaInput,
    result: ThermalViaResult
) -> Axes:
    """Thermal resistance vs via count (log scale)."""
    ax.clear()
    ax.plot(sweep['via_count'], sweep['rth_k_per_w'], color=PRIMARY_COLOR,
            linewidth=2, marker='.', label='Rθ (barrel copper)')
    _mark_point(ax, inputs.via_count, result.rth_k_per_w, f'n = {inputs.via_count:g}')

    ax.set_yscale('log')
    ax.set_xlabel('Via count')
    ax.set_ylabel('Rθ (K/W)')
    ax.set_title(f'Di={inputs.hole_mm:g} mm, plating={inputs.plating_mm:g} mm, board={inputs.board_thickness_mm:g} mm')
    ax.grid(True, which='both', alpha=GRID_ALPHA)
    ax.legend(loc='upper right')
    return ax
