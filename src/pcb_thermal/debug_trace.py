"""
Debug Trace Functions
=====================

Step-by-step traces of each calculator. Every trace evaluates the same
helper functions as the engines, so its final values match engine output.
"""

from .config import PcbThermalConfig, DEFAULT_CONFIG, ROOM_TEMP_C
from .debugger import CalculationTrace
from .models import TraceWidthInput, ResistanceTempInput, ThermalViaInput
from .units import mil_to_mm, mm_to_m
from .calculations.numeric import as_float, area_or_floor
from .calculations.conductor import (
    temperature_factor,
    rectangular_cross_section_m2,
    conductor_resistance,
    joule_loss,
    current_density,
)
from .calculations.trace_width import (
    layer_constant,
    ipc2221_area_mil2,
    width_from_area_mil,
)
from .calculations.thermal_via import (
    via_outer_diameter_mm,
    annular_area_mm2,
    conduction_resistance,
)


def trace_trace_width(
    inputs: TraceWidthInput,
    config: PcbThermalConfig = DEFAULT_CONFIG
) -> CalculationTrace:
    """
    Trace the IPC-2221 trace width calculation.

    Parameters:
    ----------
    inputs : TraceWidthInput
        Calculator inputs

    config : PcbThermalConfig
        Coefficients and copper properties

    Returns:
    -------
    CalculationTrace
        Trace with every step recorded
    """
    trace = CalculationTrace("IPC-2221 Trace Width")

    trace.start_section("INPUT PARAMETERS")
    trace.add_input("I", inputs.current_a, "A", "Target current")
    trace.add_input("dT", inputs.temp_rise_c, "C", "Allowable temperature rise")
    trace.add_input("layer", inputs.layer.value, "", "Layer position")
    trace.add_input("w_cu", inputs.copper_oz, "oz/ft²", "Copper weight")
    trace.add_input("L", inputs.length_mm, "mm", "Trace length")
    trace.add_input("T_amb", inputs.ambient_c, "C", "Ambient temperature")

    trace.start_section("CONSTANTS")
    trace.add_constant("b", config.ipc_exponent_dt, "", "IPC-2221 temperature exponent")
    trace.add_constant("c", config.ipc_exponent_area, "", "IPC-2221 area exponent")
    trace.add_constant("rho_ref", config.resistivity_20c, "ohm*m", "Copper resistivity at T_ref")
    trace.add_constant("T_ref", config.reference_temp_c, "C", "Reference temperature for rho and alpha")
    trace.add_constant("alpha", config.temp_coefficient, "1/C", "Copper temperature coefficient")

    trace.start_section("IPC-2221 AREA AND WIDTH")
    k = trace.add_step(
        description="Select layer calibration constant",
        formula="k = k_ext if external else k_int",
        variables={"layer": inputs.layer.value},
        result=layer_constant(inputs.layer, config),
        result_name="k",
        comment="Internal layers need more area for the same dT",
    )
    area_mil2 = trace.add_step(
        description="Required copper cross-section",
        formula="A = (I / (k * dT^b))^(1/c)",
        variables={"I": inputs.current_a, "k": k, "dT": inputs.temp_rise_c,
                   "b": config.ipc_exponent_dt, "c": config.ipc_exponent_area},
        result=ipc2221_area_mil2(inputs.current_a, inputs.temp_rise_c, k,
                                 config.ipc_exponent_dt, config.ipc_exponent_area),
        result_name="A",
        result_unit="mil²",
    )
    width_mil = trace.add_step(
        description="Trace width from copper thickness",
        formula="w = A / (w_cu * mil_per_oz)",
        variables={"A": area_mil2, "w_cu": inputs.copper_oz, "mil_per_oz": config.mil_per_oz},
        result=width_from_area_mil(area_mil2, inputs.copper_oz, config.mil_per_oz),
        result_name="w_mil",
        result_unit="mil",
    )
    width_mm = trace.add_step(
        description="Width in millimeters",
        formula="w_mm = w_mil * 0.0254",
        variables={"w_mil": width_mil},
        result=float(mil_to_mm(as_float(width_mil))),
        result_name="w_mm",
        result_unit="mm",
    )

    trace.start_section("RESISTANCE AND LOSS")
    thickness_mm = trace.add_step(
        description="Copper thickness",
        formula="t = w_cu * mm_per_oz",
        variables={"w_cu": inputs.copper_oz, "mm_per_oz": config.mm_per_oz},
        result=float(as_float(inputs.copper_oz) * config.mm_per_oz),
        result_name="t_mm",
        result_unit="mm",
    )
    cross_section = trace.add_step(
        description="Conductor cross-section",
        formula="A_m2 = (t/1000) * (w_mm/1000)",
        variables={"t": thickness_mm, "w_mm": width_mm},
        result=rectangular_cross_section_m2(width_mm, thickness_mm),
        result_name="A_m2",
        result_unit="m²",
    )
    length_m = float(mm_to_m(as_float(inputs.length_mm)))
    floored_area = area_or_floor(cross_section, config.area_floor_m2)
    r20 = trace.add_step(
        description="Resistance at 20C",
        formula="R20 = rho_ref * (1 + alpha * (20 - T_ref)) * L / A_m2",
        variables={"rho_ref": config.resistivity_20c, "alpha": config.temp_coefficient,
                   "T_ref": config.reference_temp_c, "L": length_m, "A_m2": floored_area},
        result=conductor_resistance(
            config.resistivity_20c, config.temp_coefficient, ROOM_TEMP_C,
            length_m, cross_section, config.reference_temp_c, config.area_floor_m2
        ),
        result_name="R20",
        result_unit="ohm",
        comment=f"Zero or undefined area replaced by {config.area_floor_m2:g} m²",
    )
    hot_temp = trace.add_step(
        description="Trace temperature at full rise",
        formula="T_hot = T_amb + dT",
        variables={"T_amb": inputs.ambient_c, "dT": inputs.temp_rise_c},
        result=float(as_float(inputs.ambient_c) + inputs.temp_rise_c),
        result_name="T_hot",
        result_unit="C",
    )
    r_hot = trace.add_step(
        description="Resistance at T_hot",
        formula="R_hot = rho_ref * (1 + alpha * (T_hot - T_ref)) * L / A_m2",
        variables={"rho_ref": config.resistivity_20c, "alpha": config.temp_coefficient,
                   "T_hot": hot_temp, "T_ref": config.reference_temp_c,
                   "L": length_m, "A_m2": floored_area},
        result=conductor_resistance(
            config.resistivity_20c, config.temp_coefficient, hot_temp,
            length_m, cross_section, config.reference_temp_c, config.area_floor_m2
        ),
        result_name="R_hot",
        result_unit="ohm",
    )
    trace.add_step(
        description="I²R loss at 20C",
        formula="P20 = I² * R20",
        variables={"I": inputs.current_a, "R20": r20},
        result=joule_loss(inputs.current_a, r20),
        result_name="P20",
        result_unit="W",
    )
    trace.add_step(
        description="I²R loss at T_hot",
        formula="P_hot = I² * R_hot",
        variables={"I": inputs.current_a, "R_hot": r_hot},
        result=joule_loss(inputs.current_a, r_hot),
        result_name="P_hot",
        result_unit="W",
    )
    trace.add_step(
        description="Current density",
        formula="J = I / A_m2",
        variables={"I": inputs.current_a, "A_m2": cross_section},
        result=current_density(inputs.current_a, cross_section, config.area_floor_m2),
        result_name="J",
        result_unit="A/m²",
    )

    return trace


def trace_resistance_vs_temp(
    inputs: ResistanceTempInput,
    config: PcbThermalConfig = DEFAULT_CONFIG
) -> CalculationTrace:
    """Trace the resistance vs temperature calculation."""
    trace = CalculationTrace("Copper Resistance vs Temperature")

    trace.start_section("INPUT PARAMETERS")
    trace.add_input("rho_20", inputs.resistivity_20c, "ohm*m", "Resistivity at 20C")
    trace.add_input("alpha", inputs.temp_coefficient, "1/C", "Temperature coefficient")
    trace.add_input("T1", inputs.temp1_c, "C")
    trace.add_input("T2", inputs.temp2_c, "C")
    trace.add_input("L", inputs.length_mm, "mm", "Length")
    trace.add_input("w", inputs.width_mm, "mm", "Width")
    trace.add_input("t", inputs.thickness_mm, "mm", "Thickness")

    trace.start_section("GEOMETRY")
    area = trace.add_step(
        description="Cross-section",
        formula="A = (w/1000) * (t/1000)",
        variables={"w": inputs.width_mm, "t": inputs.thickness_mm},
        result=rectangular_cross_section_m2(inputs.width_mm, inputs.thickness_mm),
        result_name="A",
        result_unit="m²",
    )
    length_m = trace.add_step(
        description="Length in meters",
        formula="L_m = L / 1000",
        variables={"L": inputs.length_mm},
        result=float(mm_to_m(as_float(inputs.length_mm))),
        result_name="L_m",
        result_unit="m",
    )

    trace.start_section("RESISTANCE")
    for label, temp_c in (("R1", inputs.temp1_c), ("R2", inputs.temp2_c)):
        factor = trace.add_step(
            description=f"Resistivity scale at {temp_c:g}C",
            formula="f = 1 + alpha * (T - 20)",
            variables={"alpha": inputs.temp_coefficient, "T": temp_c},
            result=temperature_factor(inputs.temp_coefficient, temp_c, config.reference_temp_c),
            result_name=f"f_{label}",
        )
        trace.add_step(
            description=f"Resistance at {temp_c:g}C",
            formula="R = rho_20 * f * L_m / A",
            variables={"rho_20": inputs.resistivity_20c, "f": factor, "L_m": length_m,
                       "A": area_or_floor(area, config.area_floor_m2)},
            result=conductor_resistance(
                inputs.resistivity_20c, inputs.temp_coefficient, temp_c,
                length_m, area, config.reference_temp_c, config.area_floor_m2
            ),
            result_name=label,
            result_unit="ohm",
        )

    return trace


def trace_thermal_via(
    inputs: ThermalViaInput,
    config: PcbThermalConfig = DEFAULT_CONFIG
) -> CalculationTrace:
    """Trace the thermal via array calculation."""
    trace = CalculationTrace("Thermal Via Array")

    trace.start_section("INPUT PARAMETERS")
    trace.add_input("n", inputs.via_count, "", "Via count")
    trace.add_input("Di", inputs.hole_mm, "mm", "Finished hole")
    trace.add_input("t_p", inputs.plating_mm, "mm", "Plating thickness")
    trace.add_input("t_b", inputs.board_thickness_mm, "mm", "Board thickness")
    trace.add_input("k", inputs.thermal_conductivity, "W/m*K", "Copper thermal conductivity")

    trace.start_section("BARREL GEOMETRY")
    outer = trace.add_step(
        description="Barrel outer diameter",
        formula="Do = Di + 2 * t_p",
        variables={"Di": inputs.hole_mm, "t_p": inputs.plating_mm},
        result=via_outer_diameter_mm(inputs.hole_mm, inputs.plating_mm),
        result_name="Do",
        result_unit="mm",
    )
    via_area = trace.add_step(
        description="Annular copper area of one via",
        formula="A_via = pi/4 * (Do² - Di²)",
        variables={"Do": outer, "Di": inputs.hole_mm},
        result=annular_area_mm2(outer, inputs.hole_mm),
        result_name="A_via",
        result_unit="mm²",
    )
    total_area = trace.add_step(
        description="Total copper area",
        formula="A_tot = n * A_via * 1e-6",
        variables={"n": inputs.via_count, "A_via": via_area},
        result=float(as_float(via_area) * inputs.via_count * 1e-6),
        result_name="A_tot",
        result_unit="m²",
    )

    trace.start_section("CONDUCTION")
    path_length = float(mm_to_m(as_float(inputs.board_thickness_mm)))
    trace.add_step(
        description="Vertical conductive resistance",
        formula="R_th = (t_b/1000) / (k * A_tot)",
        variables={"t_b": inputs.board_thickness_mm, "k": inputs.thermal_conductivity,
                   "A_tot": area_or_floor(total_area, config.area_floor_m2)},
        result=conduction_resistance(
            path_length, inputs.thermal_conductivity, total_area, config.area_floor_m2
        ),
        result_name="R_th",
        result_unit="K/W",
        comment="Barrel copper only; lower bound on the real resistance",
    )

    return trace
