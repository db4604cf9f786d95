"""
Trace Width Calculations
========================

IPC-2221 trace sizing:

    I = k * dT^0.44 * A^0.725

solved for the copper area A (mil²), then converted to a width using the
copper weight. k = 0.048 for external layers and 0.024 for internal layers.

IPC-2221 is a conservative legacy curve fit; IPC-2152 accounts for planes,
board material and environment and often gives different widths.
"""

from ..config import PcbThermalConfig, DEFAULT_CONFIG, ROOM_TEMP_C
from ..models.trace import LayerKind, TraceWidthInput, TraceWidthResult
from ..units import mil_to_mm, mm_to_m
from .numeric import ieee754, as_float
from .conductor import (
    rectangular_cross_section_m2,
    conductor_resistance,
    joule_loss,
    current_density,
)


def layer_constant(layer: LayerKind, config: PcbThermalConfig = DEFAULT_CONFIG) -> float:
    """
    IPC-2221 calibration constant k for a layer position.

    Accepts a LayerKind or its value ("external", "internal"); anything
    else raises ValueError.
    """
    constants = {
        LayerKind.EXTERNAL: config.k_external,
        LayerKind.INTERNAL: config.k_internal,
    }
    return constants[LayerKind(layer)]


@ieee754
def ipc2221_area_mil2(
    current_a: float,
    temp_rise_c: float,
    k: float,
    exponent_dt: float = DEFAULT_CONFIG.ipc_exponent_dt,
    exponent_area: float = DEFAULT_CONFIG.ipc_exponent_area
) -> float:
    """
    Required copper cross-section from the IPC-2221 curve fit.

    A = (I / (k * dT^b))^(1/c)

    Parameters:
    ----------
    current_a : float
        Target current (A)

    temp_rise_c : float
        Allowed temperature rise (°C)

    k : float
        Layer calibration constant

    exponent_dt, exponent_area : float
        Curve-fit exponents b and c

    Returns:
    -------
    float
        Copper area (mil²). nan for a negative current or rise.
    """
    denominator = as_float(k) * as_float(temp_rise_c) ** exponent_dt
    return float((as_float(current_a) / denominator) ** (1 / exponent_area))


@ieee754
def ipc2221_current(
    area_mil2: float,
    temp_rise_c: float,
    k: float,
    exponent_dt: float = DEFAULT_CONFIG.ipc_exponent_dt,
    exponent_area: float = DEFAULT_CONFIG.ipc_exponent_area
) -> float:
    """Ampacity of a given copper area, the forward form I = k * dT^b * A^c."""
    return float(as_float(k) * as_float(temp_rise_c) ** exponent_dt * as_float(area_mil2) ** exponent_area)


@ieee754
def width_from_area_mil(
    area_mil2: float,
    copper_oz: float,
    mil_per_oz: float = DEFAULT_CONFIG.mil_per_oz
) -> float:
    """Trace width (mil) giving area_mil2 at the given copper weight."""
    return float(as_float(area_mil2) / (as_float(copper_oz) * mil_per_oz))


@ieee754
def calculate_trace_width(
    inputs: TraceWidthInput,
    config: PcbThermalConfig = DEFAULT_CONFIG
) -> TraceWidthResult:
    """
    Size a trace and evaluate its resistance and losses.

    Resistance is reported at 20°C and at ambient + dT, where the trace
    sits once it reaches the allowed rise.

    Parameters:
    ----------
    inputs : TraceWidthInput
        Current, allowed rise, layer, copper weight, length, ambient

    config : PcbThermalConfig
        Curve-fit coefficients and copper properties

    Returns:
    -------
    TraceWidthResult
        Width, area, resistances, losses and current density
    """
    k = layer_constant(inputs.layer, config)
    area_mil2 = ipc2221_area_mil2(
        inputs.current_a, inputs.temp_rise_c, k,
        config.ipc_exponent_dt, config.ipc_exponent_area
    )

    width_mil = width_from_area_mil(area_mil2, inputs.copper_oz, config.mil_per_oz)
    width_mm = float(mil_to_mm(as_float(width_mil)))
    thickness_mm = float(as_float(inputs.copper_oz) * config.mm_per_oz)

    cross_section_m2 = rectangular_cross_section_m2(width_mm, thickness_mm)
    length_m = float(mm_to_m(as_float(inputs.length_mm)))

    hot_temp_c = float(as_float(inputs.ambient_c) + inputs.temp_rise_c)
    r20, r_hot = (
        conductor_resistance(
            config.resistivity_20c, config.temp_coefficient, temp_c,
            length_m, cross_section_m2,
            config.reference_temp_c, config.area_floor_m2
        )
        for temp_c in (ROOM_TEMP_C, hot_temp_c)
    )

    return TraceWidthResult(
        width_mm=width_mm,
        width_mil=width_mil,
        area_mil2=area_mil2,
        cross_section_m2=cross_section_m2,
        hot_temp_c=hot_temp_c,
        r20_ohm=r20,
        r_hot_ohm=r_hot,
        p20_w=joule_loss(inputs.current_a, r20),
        p_hot_w=joule_loss(inputs.current_a, r_hot),
        current_density_a_m2=current_density(
            inputs.current_a, cross_section_m2, config.area_floor_m2
        ),
    )
