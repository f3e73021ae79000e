"""
Engineering constants for API 2000 venting calculations.

Module-level constants and read-only mappings only. Nothing here is
modified at runtime.
"""
from types import MappingProxyType


# =============================================================================
# REFERENCE FLUID (HEXANE)
# =============================================================================

HEXANE_LATENT_HEAT = 334.9            # [kJ/kg]
HEXANE_RELIEVING_TEMPERATURE = 15.6   # [°C]
HEXANE_MOLECULAR_MASS = 86.17         # [g/mol]

REFERENCE_FLUID_HEXANE = "Hexane"
REFERENCE_FLUID_USER = "User-defined"


# =============================================================================
# FLUID CLASSIFICATION
# =============================================================================

FLASH_POINT_THRESHOLD = 37.8      # [°C] FP >= threshold -> low volatility
BOILING_POINT_THRESHOLD = 149.0   # [°C] BP >= threshold -> low volatility
VOLATILE_VAPOUR_PRESSURE = 5.0    # [kPa] 7th edition process outbreathing


# =============================================================================
# DESIGN LIMITS
# =============================================================================

MAX_DESIGN_PRESSURE_KPAG = 103.4
EMERGENCY_VENT_PRESSURE_THRESHOLD = 7.0   # [kPag]
CAPACITY_WARNING_M3 = 30_000.0
WETTED_AREA_HEIGHT_CAP_MM = 9_144.0       # 30 ft
SMALL_TANK_CAPACITY_M3 = 25.0             # C-factor capacity split


# =============================================================================
# GEOMETRY
# =============================================================================

CONE_ROOF_SLOPE = 12.0   # roof height = D / CONE_ROOF_SLOPE


# =============================================================================
# LATITUDE BANDS
# =============================================================================

LATITUDE_BAND_LOW = 42.0    # 0 < lat <= 42
LATITUDE_BAND_MID = 58.0    # 42 < lat <= 58


# =============================================================================
# EMERGENCY VENTING
# =============================================================================

EMERGENCY_TABLE_MAX_AREA_M2 = 260.0
GENERAL_FORMULA_CONSTANT = 906.6
HEXANE_LOW_PRESSURE_VENT_RATE = 19_910.0   # [Nm³/h] F x 19910, DP <= 7
HEXANE_HIGH_PRESSURE_CONSTANT = 208.2      # 208.2 x F x A^0.82, DP > 7
HEXANE_HIGH_PRESSURE_EXPONENT = 0.82


# =============================================================================
# NORMAL VENTING MULTIPLIERS
# =============================================================================

FIFTH_EDITION_INBREATHING_FACTOR = 0.94
FIFTH_EDITION_LOW_VOL_OUTBREATHING = 1.01
FIFTH_EDITION_OTHER_OUTBREATHING = 2.02
SEVENTH_EDITION_VOLATILE_OUTBREATHING = 2.0
SEVENTH_EDITION_NON_VOLATILE_OUTBREATHING = 1.0
THERMAL_OUTBREATHING_EXPONENT = 0.9
THERMAL_INBREATHING_EXPONENT = 0.7


# =============================================================================
# DRAIN SYSTEM
# =============================================================================

DRAIN_DISCHARGE_COEFFICIENT = 3.48
DRAIN_CORRECTION_FACTOR = 0.94
SECONDS_PER_HOUR = 3600.0


# =============================================================================
# INSULATION MATERIALS (W/m·K)
# =============================================================================

INSULATION_CONDUCTIVITY = MappingProxyType({
    "cellular glass": 0.05,
    "mineral fiber": 0.04,
    "calcium silicate": 0.06,
    "perlite": 0.07,
})
