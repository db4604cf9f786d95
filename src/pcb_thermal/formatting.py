"""
Result Formatting
=================

Plain-text result panels for each calculator, in SI and PCB units.
Non-finite values render as nan/inf so non-physical inputs stay visible.
"""

from typing import List

from .models import (
    TraceWidthInput,
    TraceWidthResult,
    ResistanceTempInput,
    ResistanceTempResult,
    ThermalViaInput,
    ThermalViaResult,
)


SEPARATOR_WIDTH = 45


def _section(title: str) -> List[str]:
    return ["=" * SEPARATOR_WIDTH, title, "=" * SEPARATOR_WIDTH]


def _row(label: str, value: str) -> str:
    return f"{label + ':':<22}{value}"


def format_trace_width(inputs: TraceWidthInput, result: TraceWidthResult) -> str:
    """Format the trace width result panel."""
    lines = [
        f"{inputs.layer.label} layer, {inputs.current_a:g} A, dT = {inputs.temp_rise_c:g} C",
        "",
        *_section("WIDTH"),
        f"Required width:       {result.width_mm:>10.3f} mm",
        f"                      {result.width_mil:>10.1f} mil",
        f"IPC-2221 area:        {result.area_mil2:>10.1f} mil²",
        _row(f"Cross-section @ {inputs.copper_oz:g} oz", f"{result.cross_section_mm2:>10.2f} mm²"),
        "",
        *_section("RESISTANCE & LOSS"),
        f"R @ 20C:              {result.r20_ohm:>10.3e} Ohm",
        _row(f"R @ {result.hot_temp_c:g}C", f"{result.r_hot_ohm:>10.3e} Ohm"),
        f"I²R loss @ 20C:       {result.p20_w:>10.3f} W",
        _row(f"I²R loss @ {result.hot_temp_c:g}C", f"{result.p_hot_w:>10.3f} W"),
        f"Current density:      {result.current_density_a_mm2:>10.1f} A/mm²",
        "",
        "IPC-2221 is conservative/legacy; IPC-2152 with",
        "geometry & environment often gives wider traces",
        "for the same dT. Use this as a first-pass check.",
    ]
    return "\n".join(lines)


def format_resistance_vs_temp(inputs: ResistanceTempInput, result: ResistanceTempResult) -> str:
    """Format the resistance vs temperature result panel."""
    lines = [
        *_section("CONDUCTOR"),
        f"Cross-section:        {result.cross_section_mm2:>10.2f} mm²",
        f"Length:               {result.length_m:>10.4f} m",
        "",
        *_section("RESISTANCE"),
        _row(f"R @ {inputs.temp1_c:g}C", f"{result.r_temp1_ohm:>10.3e} Ohm"),
        _row(f"R @ {inputs.temp2_c:g}C", f"{result.r_temp2_ohm:>10.3e} Ohm"),
        "",
        "R(T) = R(20C) * [1 + alpha * (T - 20C)]",
        "with alpha ≈ 0.0039 1/C for copper near room temp.",
    ]
    return "\n".join(lines)


def format_thermal_via(inputs: ThermalViaInput, result: ThermalViaResult) -> str:
    """Format the thermal via result panel."""
    lines = [
        *_section("BARREL"),
        f"Outer diameter Do:    {result.outer_diameter_mm:>10.3f} mm",
        f"One-via copper area:  {result.via_area_mm2:>10.4f} mm²",
        f"Total copper area:    {result.total_area_mm2:>10.2f} mm²",
        "",
        *_section("CONDUCTION"),
        f"Vertical Rθ (via copper only): {result.rth_k_per_w:.3f} K/W",
        "",
        "Ignores spreading resistance in planes, pad/land",
        "contact resistance, solder fill and dielectric",
        "conduction. Treat as a lower bound. Add vias and",
        "copper pour to reduce total Rθ.",
    ]
    return "\n".join(lines)
