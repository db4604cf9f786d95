"""
Calculation Trace, Sweep and Output Tests
=========================================

Checks that:
- Step-by-step traces end on the same numbers the engines return
- Sweeps have the expected grid and trends
- CSV export, plots and text panels render from real results
- Calculators log through the package logger
"""

import io
import logging
import math
import sys
import tempfile
import unittest
from dataclasses import replace
from pathlib import Path

import pandas as pd

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.pcb_thermal import (
    LayerKind,
    PcbThermalConfig,
    TraceWidthInput,
    ResistanceTempInput,
    ThermalViaInput,
    TraceWidthEngine,
    ResistanceTemperatureEngine,
    ThermalViaEngine,
    trace_trace_width,
    trace_resistance_vs_temp,
    trace_thermal_via,
    sweep_trace_current,
    sweep_resistance_temperature,
    sweep_via_count,
    export_sweep_csv,
    setup_logging,
)
from src.pcb_thermal.logger import LOGGER_NAME
from src.pcb_thermal.formatting import (
    format_trace_width,
    format_resistance_vs_temp,
    format_thermal_via,
)


class TestCalculationTraces(unittest.TestCase):
    """Trace reports reproduce engine output exactly."""

    def test_trace_width_matches_engine(self):
        inputs = TraceWidthInput(layer=LayerKind.INTERNAL, copper_oz=1.0)
        result = TraceWidthEngine().compute(inputs)
        trace = trace_trace_width(inputs)

        self.assertEqual(trace.find_step_by_result("A").result, result.area_mil2)
        self.assertEqual(trace.find_step_by_result("w_mm").result, result.width_mm)
        self.assertEqual(trace.find_step_by_result("R20").result, result.r20_ohm)
        self.assertEqual(trace.find_step_by_result("R_hot").result, result.r_hot_ohm)
        self.assertEqual(trace.find_step_by_result("P_hot").result, result.p_hot_w)
        self.assertEqual(trace.find_step_by_result("J").result, result.current_density_a_m2)
        self.assertEqual(trace.find_step_by_result("k").result, 0.024)

    def test_trace_width_matches_engine_with_reference_override(self):
        config = PcbThermalConfig(reference_temp_c=25.0)
        inputs = TraceWidthInput(layer="internal")
        result = TraceWidthEngine(config).compute(inputs)
        trace = trace_trace_width(inputs, config)

        self.assertEqual(trace.find_step_by_result("R20").result, result.r20_ohm)
        self.assertEqual(trace.find_step_by_result("R_hot").result, result.r_hot_ohm)
        self.assertEqual(trace.find_step_by_result("T_ref").result, 25.0)

    def test_resistance_trace_matches_engine(self):
        inputs = ResistanceTempInput(temp2_c=125.0)
        result = ResistanceTemperatureEngine().compute(inputs)
        trace = trace_resistance_vs_temp(inputs)

        self.assertEqual(trace.find_step_by_result("R1").result, result.r_temp1_ohm)
        self.assertEqual(trace.find_step_by_result("R2").result, result.r_temp2_ohm)

    def test_via_trace_matches_engine(self):
        inputs = ThermalViaInput(via_count=9, hole_mm=0.2)
        result = ThermalViaEngine().compute(inputs)
        trace = trace_thermal_via(inputs)

        self.assertEqual(trace.find_step_by_result("Do").result, result.outer_diameter_mm)
        self.assertEqual(trace.find_step_by_result("R_th").result, result.rth_k_per_w)

    def test_report_layout(self):
        trace = trace_trace_width(TraceWidthInput())
        report = trace.get_report()

        self.assertIn("CALCULATION STEPS - IPC-2221 Trace Width", report)
        self.assertIn("A = (I / (k * dT^b))^(1/c)", report)
        self.assertIn(f"Total Steps: {len(trace.steps)}", report)
        self.assertEqual(trace.sections()[0], "INPUT PARAMETERS")

    def test_trace_survives_zero_area(self):
        """Zero vias still produce a complete report."""
        trace = trace_thermal_via(ThermalViaInput(via_count=0))
        self.assertTrue(math.isfinite(trace.find_step_by_result("R_th").result))
        self.assertIn("R_th", trace.get_report())

    def test_missing_step(self):
        trace = trace_thermal_via(ThermalViaInput())
        self.assertIsNone(trace.find_step_by_result("does_not_exist"))


class TestSweeps(unittest.TestCase):
    """Sweep tables around the default operating points."""

    def test_current_sweep(self):
        sweep = sweep_trace_current(TraceWidthInput(), points=20)

        self.assertEqual(len(sweep), 20)
        self.assertEqual(
            list(sweep.columns),
            ["current_a", "width_mm", "width_mil", "area_mil2", "r_hot_ohm", "p_hot_w"]
        )
        self.assertAlmostEqual(sweep["current_a"].iloc[0], 3.0)
        self.assertAlmostEqual(sweep["current_a"].iloc[-1], 60.0)
        self.assertTrue(sweep["width_mm"].is_monotonic_increasing)

    def test_current_sweep_falls_back_for_unusable_current(self):
        """A nan current still gives a plottable range."""
        sweep = sweep_trace_current(TraceWidthInput(current_a=math.nan))
        self.assertEqual(len(sweep), 50)
        self.assertTrue(sweep["current_a"].notna().all())

    def test_temperature_sweep(self):
        sweep = sweep_resistance_temperature(ResistanceTempInput(), temp_min_c=0.0, temp_max_c=100.0, points=11)

        self.assertEqual(list(sweep.columns), ["temp_c", "r_ohm"])
        self.assertEqual(len(sweep), 11)
        self.assertTrue(sweep["r_ohm"].is_monotonic_increasing)

        # 20°C sits on the grid and gives the nominal 8 mOhm
        at_20 = sweep.loc[sweep["temp_c"] == 20.0, "r_ohm"].iloc[0]
        self.assertAlmostEqual(at_20, 0.008, places=9)

    def test_via_count_sweep(self):
        inputs = ThermalViaInput()
        sweep = sweep_via_count(inputs)

        self.assertEqual(len(sweep), 32)
        self.assertEqual(sweep["via_count"].iloc[0], 1)
        self.assertTrue(sweep["rth_k_per_w"].is_monotonic_decreasing)

        at_16 = sweep.loc[sweep["via_count"] == 16, "rth_k_per_w"].iloc[0]
        self.assertAlmostEqual(at_16, ThermalViaEngine().compute(inputs).rth_k_per_w, places=9)

    def test_via_count_sweep_is_capped(self):
        sweep = sweep_via_count(ThermalViaInput(via_count=1000))
        self.assertEqual(len(sweep), 400)

    def test_export_csv(self):
        sweep = sweep_via_count(ThermalViaInput(), max_count=5)

        with tempfile.TemporaryDirectory() as tmpdir:
            path = export_sweep_csv(sweep, Path(tmpdir) / "vias.csv")
            self.assertTrue(path.exists())

            loaded = pd.read_csv(path)
            self.assertEqual(list(loaded.columns), list(sweep.columns))
            self.assertEqual(len(loaded), 5)
            self.assertAlmostEqual(loaded["rth_k_per_w"].iloc[-1], sweep["rth_k_per_w"].iloc[-1])


class TestPlotting(unittest.TestCase):
    """Plots draw onto a headless Figure."""

    def setUp(self):
        from matplotlib.figure import Figure
        self.figure = Figure(figsize=(6, 4))
        self.ax = self.figure.add_subplot(111)

    def test_trace_plot(self):
        from src.pcb_thermal.plotting import plot_trace_sweep

        inputs = TraceWidthInput()
        result = TraceWidthEngine().compute(inputs)
        ax2 = plot_trace_sweep(self.ax, sweep_trace_current(inputs), inputs, result)

        # Width curve plus operating point, loss curve on the twin axis
        self.assertEqual(len(self.ax.lines), 2)
        self.assertEqual(len(ax2.lines), 1)

    def test_via_plot_uses_log_scale(self):
        from src.pcb_thermal.plotting import plot_via_sweep

        inputs = ThermalViaInput()
        result = ThermalViaEngine().compute(inputs)
        plot_via_sweep(self.ax, sweep_via_count(inputs), inputs, result)
        self.assertEqual(self.ax.get_yscale(), "log")

    def test_non_finite_point_not_marked(self):
        from src.pcb_thermal.plotting import plot_resistance_sweep

        inputs = ResistanceTempInput(temp2_c=math.nan)
        result = ResistanceTemperatureEngine().compute(inputs)
        plot_resistance_sweep(self.ax, sweep_resistance_temperature(inputs), inputs, result)

        # Curve, T1 marker and the 20°C reference line; no T2 marker
        self.assertEqual(len(self.ax.lines), 3)


class TestFormatting(unittest.TestCase):
    """Result panels show the documented precision."""

    def test_trace_panel(self):
        inputs = TraceWidthInput()
        result = TraceWidthEngine().compute(inputs)
        text = format_trace_width(inputs, result)

        self.assertIn(f"{result.width_mm:.3f} mm", text)
        self.assertIn(f"{result.width_mil:.1f} mil", text)
        self.assertIn("R @ 35C", text)
        self.assertIn("IPC-2152", text)

    def test_resistance_panel(self):
        inputs = ResistanceTempInput()
        text = format_resistance_vs_temp(inputs, ResistanceTemperatureEngine().compute(inputs))
        self.assertIn("8.000e-03 Ohm", text)
        self.assertIn("R @ 80C", text)

    def test_via_panel(self):
        inputs = ThermalViaInput()
        result = ThermalViaEngine().compute(inputs)
        text = format_thermal_via(inputs, result)
        self.assertIn(f"{result.rth_k_per_w:.3f} K/W", text)
        self.assertIn("0.350 mm", text)

    def test_nan_renders(self):
        inputs = TraceWidthInput(current_a=-1.0)
        text = format_trace_width(inputs, TraceWidthEngine().compute(inputs))
        self.assertIn("nan", text)


class TestLogging(unittest.TestCase):
    """Engines log each calculation at DEBUG."""

    def tearDown(self):
        logger = logging.getLogger(LOGGER_NAME)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)
        logger.propagate = True

    def test_debug_logging(self):
        stream = io.StringIO()
        setup_logging(logging.DEBUG, stream=stream)

        ThermalViaEngine().compute(ThermalViaInput())
        output = stream.getvalue()

        self.assertIn("DEBUG", output)
        self.assertIn("thermal via", output)

    def test_info_level_hides_calculations(self):
        stream = io.StringIO()
        setup_logging(logging.INFO, stream=stream)

        TraceWidthEngine().compute(replace(TraceWidthInput(), current_a=5.0))
        self.assertEqual(stream.getvalue(), "")


if __name__ == "__main__":
    unittest.main(verbosity=2)
