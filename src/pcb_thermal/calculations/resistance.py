"""
Resistance vs Temperature Calculations
======================================

R(T) = R(20°C) * [1 + alpha * (T - 20°C)], alpha ≈ 0.0039 1/°C for copper
near room temperature.
"""

from ..config import PcbThermalConfig, DEFAULT_CONFIG
from ..models.resistance import ResistanceTempInput, ResistanceTempResult
from ..units import mm_to_m
from .numeric import ieee754, as_float
from .conductor import rectangular_cross_section_m2, conductor_resistance


@ieee754
def calculate_resistance_vs_temp(
    inputs: ResistanceTempInput,
    config: PcbThermalConfig = DEFAULT_CONFIG
) -> ResistanceTempResult:
    """
    Evaluate conductor resistance at two temperatures.

    Resistivity and alpha come from the inputs; config only supplies the
    reference temperature and the zero-area floor.
    """
    area = rectangular_cross_section_m2(inputs.width_mm, inputs.thickness_mm)
    length_m = float(mm_to_m(as_float(inputs.length_mm)))

    r1, r2 = (
        conductor_resistance(
            inputs.resistivity_20c, inputs.temp_coefficient, temp_c,
            length_m, area,
            config.reference_temp_c, config.area_floor_m2
        )
        for temp_c in (inputs.temp1_c, inputs.temp2_c)
    )

    return ResistanceTempResult(
        cross_section_m2=area,
        length_m=length_m,
        r_temp1_ohm=r1,
        r_temp2_ohm=r2,
    )
