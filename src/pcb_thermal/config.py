"""
PCB Thermal Toolkit Configuration
=================================

Contains physical constants, IPC-2221 curve-fit coefficients, and default
input values for the PCB thermal calculators.

Internal calculations use SI units (m, m², Ω, W, K/W). Inputs follow PCB
conventions:
- Length, width, thickness, diameters: mm
- Copper weight: oz/ft²
- IPC-2221 area: mil²
- Temperature: Celsius
"""

from dataclasses import dataclass


# =============================================================================
# IPC-2221 Curve Fit
# =============================================================================
# I = k * dT^b * A^c   (I in A, dT in °C, A in mil²)
# Curve-fit to the legacy IPC-2221 ampacity charts.

IPC_EXPONENT_DT = 0.44       # b
IPC_EXPONENT_AREA = 0.725    # c
K_EXTERNAL = 0.048           # Outer layers
K_INTERNAL = 0.024           # Inner layers (worse heat dissipation)


# =============================================================================
# Copper Properties (room temperature)
# =============================================================================

# Resistivity of ETP copper at 20°C (Ω·m) - HyperPhysics typical value
COPPER_RESISTIVITY_20C = 1.68e-8

# Temperature coefficient of resistance around 20-25°C (1/°C)
COPPER_TEMP_COEFF = 0.0039

# Thermal conductivity (W/m·K)
COPPER_THERMAL_CONDUCTIVITY = 385.0

# Reference temperature for resistivity and alpha (°C)
REFERENCE_TEMP_C = 20.0

# Temperature of the baseline trace resistance R20, independent of the reference (°C)
ROOM_TEMP_C = 20.0


# =============================================================================
# Unit Conversion Factors
# =============================================================================

MM_PER_MIL = 0.0254          # 1 mil = 0.001 inch
MM_PER_OZ = 0.0348           # 1 oz/ft² ≈ 34.8 µm of copper
MIL_PER_OZ = 1.378           # 1 oz/ft² ≈ 1.378 mil of copper

# Denominator used when a cross-section is zero or undefined (m²)
AREA_FLOOR_M2 = 1e-18


# =============================================================================
# Default Inputs
# =============================================================================

DEFAULT_TRACE_CURRENT_A = 30.0
DEFAULT_TRACE_TEMP_RISE_C = 10.0
DEFAULT_TRACE_COPPER_OZ = 2.0
DEFAULT_TRACE_LENGTH_MM = 50.0
DEFAULT_AMBIENT_TEMP_C = 25.0

DEFAULT_TEMP1_C = 20.0
DEFAULT_TEMP2_C = 80.0
DEFAULT_CONDUCTOR_LENGTH_MM = 100.0
DEFAULT_CONDUCTOR_WIDTH_MM = 3.0
DEFAULT_CONDUCTOR_THICKNESS_MM = 0.070   # ≈ 2 oz

DEFAULT_VIA_COUNT = 16
DEFAULT_VIA_HOLE_MM = 0.3                # Finished drill
DEFAULT_VIA_PLATING_MM = 0.025           # ~1 oz barrel plating
DEFAULT_BOARD_THICKNESS_MM = 1.6


# =============================================================================
# Configuration Dataclass
# =============================================================================

@dataclass
class PcbThermalConfig:
    """
    Material properties and curve-fit coefficients used by the engines.

    Override fields to evaluate other conductor materials or alternative
    curve fits; the defaults describe copper and IPC-2221.

    Attributes:
    ----------
    ipc_exponent_dt : float
        Temperature-rise exponent b of the IPC-2221 fit

    ipc_exponent_area : float
        Area exponent c of the IPC-2221 fit

    k_external : float
        IPC-2221 constant for external layers

    k_internal : float
        IPC-2221 constant for internal layers

    resistivity_20c : float
        Conductor resistivity at the reference temperature (Ω·m)

    temp_coefficient : float
        Temperature coefficient of resistance (1/°C)

    thermal_conductivity : float
        Conductor thermal conductivity (W/m·K)

    reference_temp_c : float
        Temperature at which resistivity is specified (°C)

    mil_per_oz : float
        Copper thickness per oz/ft² in mil

    mm_per_oz : float
        Copper thickness per oz/ft² in mm

    area_floor_m2 : float
        Substitute denominator for zero or undefined cross-sections (m²)
    """
    # IPC-2221
    ipc_exponent_dt: float = IPC_EXPONENT_DT
    ipc_exponent_area: float = IPC_EXPONENT_AREA
    k_external: float = K_EXTERNAL
    k_internal: float = K_INTERNAL

    # Material
    resistivity_20c: float = COPPER_RESISTIVITY_20C
    temp_coefficient: float = COPPER_TEMP_COEFF
    thermal_conductivity: float = COPPER_THERMAL_CONDUCTIVITY
    reference_temp_c: float = REFERENCE_TEMP_C

    # Copper weight conversions
    mil_per_oz: float = MIL_PER_OZ
    mm_per_oz: float = MM_PER_OZ

    area_floor_m2: float = AREA_FLOOR_M2

    def validate(self) -> tuple[bool, str]:
        """Validate configuration values."""
        errors = []

        if not 0 < self.ipc_exponent_area <= 1:
            errors.append("IPC area exponent should be in (0, 1]")
        if self.ipc_exponent_dt <= 0:
            errors.append("IPC temperature exponent must be positive")
        if self.k_external <= 0 or self.k_internal <= 0:
            errors.append("IPC layer constants must be positive")
        if self.resistivity_20c <= 0:
            errors.append("Resistivity must be positive")
        if self.thermal_conductivity <= 0:
            errors.append("Thermal conductivity must be positive")
        if self.mil_per_oz <= 0 or self.mm_per_oz <= 0:
            errors.append("Copper weight conversions must be positive")
        if self.area_floor_m2 <= 0:
            errors.append("Area floor must be positive")

        if errors:
            return False, "; ".join(errors)
        return True, ""


DEFAULT_CONFIG = PcbThermalConfig()
