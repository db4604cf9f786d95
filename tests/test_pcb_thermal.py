"""
PCB Thermal Calculator Validation Tests
=======================================

Validates the three calculators against hand calculations.

Reference formulas:
- IPC-2221: I = k * dT^0.44 * A^0.725 (A in mil², k = 0.048 external, 0.024 internal)
- R(T) = rho20 * (1 + alpha * (T - 20)) * L / A
- Via barrel: A = pi/4 * (Do² - Di²), R_th = t / (k * n * A)

Test Methodology:
- Verify the worked scenarios match the closed-form formulas
- Verify monotonic behavior in current and temperature rise
- Verify zero areas give large but finite results instead of errors
- Verify non-physical inputs propagate instead of raising
"""

import sys
import math
from dataclasses import replace
from pathlib import Path
import unittest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.pcb_thermal import (
    LayerKind,
    TraceWidthInput,
    ResistanceTempInput,
    ThermalViaInput,
    TraceWidthEngine,
    ResistanceTemperatureEngine,
    ThermalViaEngine,
    PcbThermalConfig,
)
from src.pcb_thermal.calculations import (
    ipc2221_area_mil2,
    ipc2221_current,
    layer_constant,
    temperature_factor,
    annular_area_mm2,
)
from src.pcb_thermal.formatting import format_trace_width
from src.pcb_thermal.units import (
    mm_to_mil,
    mil_to_mm,
    mm_to_m,
    oz_to_mm,
    mm_to_oz,
    oz_to_mil,
    mm2_to_m2,
    m2_to_mm2,
)


def assert_close(test: unittest.TestCase, actual: float, expected: float, rel: float = 1e-12):
    """Relative comparison for values spanning many orders of magnitude."""
    test.assertTrue(
        math.isclose(actual, expected, rel_tol=rel),
        f"{actual!r} != {expected!r} (rel_tol={rel})"
    )


class TestTraceWidthScenario(unittest.TestCase):
    """30 A, 10°C rise, external, 2 oz, 50 mm, 25°C ambient."""

    def setUp(self):
        self.inputs = TraceWidthInput(
            current_a=30.0,
            temp_rise_c=10.0,
            layer=LayerKind.EXTERNAL,
            copper_oz=2.0,
            length_mm=50.0,
            ambient_c=25.0,
        )
        self.result = TraceWidthEngine().compute(self.inputs)

    def test_defaults_match_scenario(self):
        """The default input is the reference scenario."""
        self.assertEqual(TraceWidthInput(), self.inputs)

    def test_area(self):
        """A = (30 / (0.048 * 10^0.44))^(1/0.725) mil²."""
        expected = math.pow(30 / (0.048 * math.pow(10, 0.44)), 1 / 0.725)
        assert_close(self, self.result.area_mil2, expected)

        # Roughly 1780 mil² from the IPC-2221 chart
        self.assertGreater(self.result.area_mil2, 1700)
        self.assertLess(self.result.area_mil2, 1850)

    def test_width(self):
        """Width = area / (2 * 1.378) mil."""
        expected_mil = self.result.area_mil2 / (2 * 1.378)
        assert_close(self, self.result.width_mil, expected_mil)
        assert_close(self, self.result.width_mm, expected_mil * 0.0254)

        # ~16.4 mm for 30 A on 2 oz outer copper
        self.assertGreater(self.result.width_mm, 16.0)
        self.assertLess(self.result.width_mm, 17.0)

    def test_resistance_and_loss(self):
        """R20 = rho * L / A and R_hot scales by 1 + alpha * (35 - 20)."""
        area_m2 = (2 * 0.0348 / 1000) * (self.result.width_mm / 1000)
        r20 = 0.05 * 1.68e-8 / area_m2

        assert_close(self, self.result.cross_section_m2, area_m2)
        assert_close(self, self.result.r20_ohm, r20)
        self.assertEqual(self.result.hot_temp_c, 35.0)
        assert_close(self, self.result.r_hot_ohm, r20 * (1 + 0.0039 * 15))

        assert_close(self, self.result.p20_w, 30 * 30 * self.result.r20_ohm)
        assert_close(self, self.result.p_hot_w, 30 * 30 * self.result.r_hot_ohm)

    def test_current_density(self):
        """J = I / A, reported in A/m² and A/mm²."""
        assert_close(self, self.result.current_density_a_m2, 30 / self.result.cross_section_m2)
        assert_close(self, self.result.current_density_a_mm2, self.result.current_density_a_m2 / 1e6)

    def test_internal_layer_needs_more_area(self):
        """Internal k is half of external: area grows by 2^(1/0.725)."""
        internal = TraceWidthEngine().compute(replace(self.inputs, layer=LayerKind.INTERNAL))
        ratio = internal.area_mil2 / self.result.area_mil2
        self.assertAlmostEqual(ratio, math.pow(2, 1 / 0.725), places=9)
        self.assertGreater(internal.width_mm, self.result.width_mm)

    def test_layer_given_as_text(self):
        """"external"/"internal" select the same constants as the enum."""
        inputs = TraceWidthInput(layer="external")
        self.assertIs(inputs.layer, LayerKind.EXTERNAL)
        self.assertEqual(TraceWidthEngine().compute(inputs), self.result)

        self.assertEqual(layer_constant("external"), 0.048)
        self.assertEqual(layer_constant("internal"), 0.024)
        self.assertEqual(layer_constant(LayerKind.INTERNAL), 0.024)

    def test_unknown_layer_rejected(self):
        with self.assertRaises(ValueError):
            TraceWidthInput(layer="top")
        with self.assertRaises(ValueError):
            layer_constant("top")


class TestTraceWidthBehavior(unittest.TestCase):
    """Monotonicity, idempotence and permissive edge cases."""

    def setUp(self):
        self.engine = TraceWidthEngine()
        self.base = TraceWidthInput()

    def test_width_increases_with_current(self):
        widths = [
            self.engine.compute(replace(self.base, current_a=i)).width_mm
            for i in [0.5, 1.0, 5.0, 10.0, 20.0, 40.0, 80.0]
        ]
        for lower, higher in zip(widths, widths[1:]):
            self.assertLess(lower, higher)

    def test_width_decreases_with_temp_rise(self):
        widths = [
            self.engine.compute(replace(self.base, temp_rise_c=dt)).width_mm
            for dt in [2.0, 5.0, 10.0, 20.0, 40.0, 100.0]
        ]
        for lower_rise, higher_rise in zip(widths, widths[1:]):
            self.assertGreater(lower_rise, higher_rise)

    def test_compute_is_idempotent(self):
        """Same input, bit-identical result."""
        first = self.engine.compute(self.base)
        second = self.engine.compute(self.base)
        self.assertEqual(first, second)

    def test_zero_copper_weight_uses_area_floor(self):
        """0 oz gives an undefined cross-section; R and J stay finite."""
        result = self.engine.compute(replace(self.base, copper_oz=0.0))
        self.assertTrue(math.isinf(result.width_mm))
        self.assertTrue(math.isnan(result.cross_section_m2))
        assert_close(self, result.r20_ohm, 0.05 * 1.68e-8 / 1e-18)
        self.assertTrue(math.isfinite(result.current_density_a_m2))

    def test_negative_current_propagates_nan(self):
        """A negative current is not rejected; the fit yields nan."""
        result = self.engine.compute(replace(self.base, current_a=-5.0))
        self.assertTrue(math.isnan(result.area_mil2))
        self.assertTrue(math.isnan(result.width_mm))

    def test_zero_temp_rise_does_not_raise(self):
        result = self.engine.compute(replace(self.base, temp_rise_c=0.0))
        self.assertTrue(math.isinf(result.area_mil2))

    def test_nan_input_propagates(self):
        """Unparsable form text arrives as nan and shows up in the output."""
        result = self.engine.compute(replace(self.base, current_a=math.nan))
        self.assertTrue(math.isnan(result.width_mm))
        self.assertTrue(math.isnan(result.p20_w))

    def test_fit_round_trip(self):
        """Forward fit of the solved area returns the original current."""
        area = ipc2221_area_mil2(12.5, 20.0, 0.024)
        self.assertAlmostEqual(ipc2221_current(area, 20.0, 0.024), 12.5, places=9)


class TestResistanceVsTemperature(unittest.TestCase):
    """rho20 = 1.68e-8, alpha = 0.0039, 100 x 3 x 0.070 mm."""

    def setUp(self):
        self.inputs = ResistanceTempInput(
            resistivity_20c=1.68e-8,
            temp_coefficient=0.0039,
            temp1_c=20.0,
            temp2_c=80.0,
            length_mm=100.0,
            width_mm=3.0,
            thickness_mm=0.070,
        )
        self.engine = ResistanceTemperatureEngine()
        self.result = self.engine.compute(self.inputs)

    def test_defaults_match_scenario(self):
        self.assertEqual(ResistanceTempInput(), self.inputs)

    def test_resistance_at_20c(self):
        """R1 = 1.68e-8 * 0.1 / (3e-3 * 0.070e-3) = 8 mOhm."""
        expected = 1.68e-8 * 0.1 / (3e-3 * 0.070e-3)
        assert_close(self, self.result.r_temp1_ohm, expected)
        self.assertAlmostEqual(self.result.r_temp1_ohm, 0.008, places=9)

    def test_resistance_at_80c(self):
        """R2 = R1 * (1 + 0.0039 * 60)."""
        assert_close(self, self.result.r_temp2_ohm, self.result.r_temp1_ohm * (1 + 0.0039 * 60))

    def test_geometry(self):
        assert_close(self, self.result.cross_section_m2, 3e-3 * 0.070e-3)
        assert_close(self, self.result.cross_section_mm2, 0.21)
        self.assertAlmostEqual(self.result.length_m, 0.1)

    def test_equal_temperatures_equal_resistance(self):
        result = self.engine.compute(replace(self.inputs, temp1_c=65.0, temp2_c=65.0))
        self.assertEqual(result.r_temp1_ohm, result.r_temp2_ohm)

    def test_compute_is_idempotent(self):
        self.assertEqual(self.engine.compute(self.inputs), self.engine.compute(self.inputs))

    def test_zero_width_uses_area_floor(self):
        """Zero cross-section gives a large but finite resistance."""
        result = self.engine.compute(replace(self.inputs, width_mm=0.0))
        self.assertEqual(result.cross_section_m2, 0.0)
        self.assertTrue(math.isfinite(result.r_temp1_ohm))
        assert_close(self, result.r_temp1_ohm, 1.68e-8 * 0.1 / 1e-18)

    def test_below_zero_resistance_is_not_clamped(self):
        """The linear model goes negative far below -236°C; no clamping."""
        result = self.engine.compute(replace(self.inputs, temp1_c=-300.0))
        self.assertLess(result.r_temp1_ohm, 0)

    def test_temperature_factor(self):
        self.assertEqual(temperature_factor(0.0039, 20.0), 1.0)
        self.assertAlmostEqual(temperature_factor(0.0039, 120.0), 1.39)


class TestThermalVia(unittest.TestCase):
    """16 vias, 0.3 mm hole, 0.025 mm plating, 1.6 mm board, k = 385."""

    def setUp(self):
        self.inputs = ThermalViaInput(
            via_count=16,
            hole_mm=0.3,
            plating_mm=0.025,
            board_thickness_mm=1.6,
            thermal_conductivity=385.0,
        )
        self.engine = ThermalViaEngine()
        self.result = self.engine.compute(self.inputs)

    def test_defaults_match_scenario(self):
        self.assertEqual(ThermalViaInput(), self.inputs)

    def test_outer_diameter(self):
        self.assertAlmostEqual(self.result.outer_diameter_mm, 0.35, places=12)
        self.assertEqual(self.result.inner_diameter_mm, 0.3)

    def test_copper_area(self):
        """A_via = pi/4 * (0.35² - 0.3²) mm², total = 16 * A_via."""
        per_via = math.pi / 4 * (0.35 ** 2 - 0.3 ** 2)
        assert_close(self, self.result.via_area_mm2, per_via, rel=1e-9)
        assert_close(self, self.result.total_area_m2, 16 * per_via * 1e-6, rel=1e-9)
        assert_close(self, self.result.total_area_mm2, 16 * per_via, rel=1e-9)

    def test_thermal_resistance(self):
        """R_th = 0.0016 / (385 * A_total) ≈ 10.2 K/W."""
        expected = 0.0016 / (385 * self.result.total_area_m2)
        assert_close(self, self.result.rth_k_per_w, expected)
        self.assertGreater(self.result.rth_k_per_w, 10.0)
        self.assertLess(self.result.rth_k_per_w, 10.5)

    def test_doubling_vias_halves_resistance(self):
        doubled = self.engine.compute(replace(self.inputs, via_count=32))
        self.assertAlmostEqual(doubled.rth_k_per_w * 2, self.result.rth_k_per_w, places=9)

    def test_compute_is_idempotent(self):
        self.assertEqual(self.engine.compute(self.inputs), self.engine.compute(self.inputs))

    def test_zero_vias_large_but_finite(self):
        """Zero vias must not raise; the area floor bounds the result."""
        result = self.engine.compute(replace(self.inputs, via_count=0))
        self.assertEqual(result.total_area_m2, 0.0)
        self.assertTrue(math.isfinite(result.rth_k_per_w))
        assert_close(self, result.rth_k_per_w, 0.0016 / (385 * 1e-18))

    def test_zero_conductivity_does_not_raise(self):
        result = self.engine.compute(replace(self.inputs, thermal_conductivity=0.0))
        self.assertTrue(math.isinf(result.rth_k_per_w))

    def test_annular_area_of_solid_rod(self):
        self.assertAlmostEqual(annular_area_mm2(1.0, 0.0), math.pi / 4)


class TestUnitConversions(unittest.TestCase):
    """Round trips between SI and PCB units."""

    def test_mil_mm_round_trip(self):
        for mil in [0.0, 1.0, 6.0, 10.0, 644.6, 1e4]:
            self.assertAlmostEqual(mm_to_mil(mil_to_mm(mil)), mil, places=9)

    def test_oz_mm_round_trip(self):
        for oz in [0.5, 1.0, 2.0, 3.0, 10.0]:
            self.assertAlmostEqual(mm_to_oz(oz_to_mm(oz)), oz, places=12)

    def test_area_round_trip(self):
        self.assertAlmostEqual(m2_to_mm2(mm2_to_m2(0.21)), 0.21, places=12)

    def test_known_values(self):
        self.assertAlmostEqual(mil_to_mm(1000.0), 25.4)
        self.assertAlmostEqual(oz_to_mm(1.0), 0.0348)
        self.assertAlmostEqual(oz_to_mil(2.0), 2.756)
        self.assertAlmostEqual(mm_to_m(1.6), 0.0016)


class TestConfiguration(unittest.TestCase):
    """Material overrides and configuration validation."""

    def test_default_config_valid(self):
        valid, message = PcbThermalConfig().validate()
        self.assertTrue(valid)
        self.assertEqual(message, "")

    def test_invalid_config_reports_all_errors(self):
        config = PcbThermalConfig(resistivity_20c=-1.0, area_floor_m2=0.0)
        valid, message = config.validate()
        self.assertFalse(valid)
        self.assertIn("Resistivity", message)
        self.assertIn("Area floor", message)

    def test_resistivity_override_scales_resistance(self):
        """Aluminium-like resistivity raises trace resistance proportionally."""
        base = TraceWidthEngine().compute(TraceWidthInput())
        other = TraceWidthEngine(PcbThermalConfig(resistivity_20c=2.65e-8)).compute(TraceWidthInput())
        self.assertAlmostEqual(other.r20_ohm / base.r20_ohm, 2.65 / 1.68, places=9)
        self.assertEqual(other.width_mm, base.width_mm)

    def test_area_floor_override(self):
        engine = ThermalViaEngine(PcbThermalConfig(area_floor_m2=1e-12))
        result = engine.compute(ThermalViaInput(via_count=0))
        assert_close(self, result.rth_k_per_w, 0.0016 / (385 * 1e-12))

    def test_reference_temperature_override_keeps_r20_at_20c(self):
        """R20 stays the resistance at 20C when rho and alpha are specified at 25C."""
        base = TraceWidthEngine().compute(TraceWidthInput())
        result = TraceWidthEngine(PcbThermalConfig(reference_temp_c=25.0)).compute(TraceWidthInput())

        assert_close(self, result.r20_ohm, base.r20_ohm * (1 + 0.0039 * (20 - 25)))
        assert_close(self, result.r_hot_ohm, base.r20_ohm * (1 + 0.0039 * (35 - 25)))
        self.assertAlmostEqual(result.r20_ohm, 7.2289e-4, places=7)

        panel = format_trace_width(TraceWidthInput(), result)
        self.assertIn(f"R @ 20C:              {result.r20_ohm:>10.3e} Ohm", panel)

    def test_reference_temperature_override_moves_advisory_limit(self):
        """-230C is inside the linear model for T_ref = 20C but not for 40C."""
        inputs = ResistanceTempInput(temp1_c=-230.0)
        self.assertEqual(ResistanceTemperatureEngine().advisories(inputs), [])

        engine = ResistanceTemperatureEngine(PcbThermalConfig(reference_temp_c=40.0))
        notes = engine.advisories(inputs)
        self.assertEqual(len(notes), 1)
        self.assertIn("linear alpha model", notes[0])
        self.assertEqual(inputs.advisories(40.0), notes)


class TestAdvisories(unittest.TestCase):
    """Advisories flag non-physical inputs without changing results."""

    def test_defaults_have_no_advisories(self):
        self.assertEqual(TraceWidthInput().advisories(), [])
        self.assertEqual(ResistanceTempInput().advisories(), [])
        self.assertEqual(ThermalViaInput().advisories(), [])

    def test_negative_current(self):
        notes = TraceWidthInput(current_a=-1.0).advisories()
        self.assertIn("Current is negative", notes)

    def test_nan_field_reported(self):
        notes = TraceWidthInput(copper_oz=math.nan).advisories()
        self.assertIn("Copper thickness is not a number", notes)

    def test_zero_via_count(self):
        self.assertIn("Via count must be positive", ThermalViaInput(via_count=0).advisories())

    def test_fractional_via_count(self):
        self.assertIn("Via count is not a whole number", ThermalViaInput(via_count=2.5).advisories())

    def test_nan_via_count_does_not_raise(self):
        notes = ThermalViaInput(via_count=math.nan).advisories()
        self.assertIn("via_count is not a number", notes)

    def test_linear_model_breakdown(self):
        notes = ResistanceTempInput(temp1_c=-300.0).advisories()
        self.assertEqual(len(notes), 1)
        self.assertIn("linear alpha model", notes[0])


def run_validation():
    """Run validation tests and print summary."""
    print("=" * 60)
    print("PCB Thermal Toolkit Validation")
    print("=" * 60)
    print()

    loader = unittest.TestLoader()
    suite = unittest.TestSuite()

    suite.addTests(loader.loadTestsFromTestCase(TestTraceWidthScenario))
    suite.addTests(loader.loadTestsFromTestCase(TestTraceWidthBehavior))
    suite.addTests(loader.loadTestsFromTestCase(TestResistanceVsTemperature))
    suite.addTests(loader.loadTestsFromTestCase(TestThermalVia))
    suite.addTests(loader.loadTestsFromTestCase(TestUnitConversions))
    suite.addTests(loader.loadTestsFromTestCase(TestConfiguration))
    suite.addTests(loader.loadTestsFromTestCase(TestAdvisories))

    runner = unittest.TextTestRunner(verbosity=2)
    result = runner.run(suite)

    print()
    print("=" * 60)
    if result.wasSuccessful():
        print("All validation tests PASSED")
    else:
        print(f"FAILED: {len(result.failures)} failures, {len(result.errors)} errors")
    print("=" * 60)

    return result.wasSuccessful()


if __name__ == "__main__":
    success = run_validation()
    sys.exit(0 if success else 1)
