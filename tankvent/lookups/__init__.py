"""
Lookup tables for API 2000 venting calculations.

Every tabulated quantity goes through the same clamped interpolation
primitive.
"""

from tankvent.lookups.interpolate import interpolate
from tankvent.lookups.y_factor import get_y_factor
from tankvent.lookups.c_factor import get_c_factor, is_low_volatility
from tankvent.lookups.f_factor import get_f_factor_insulated, get_environmental_factor
from tankvent.lookups.normal_vent_table import (
    normal_vent_inbreathing,
    normal_vent_outbreathing,
)
from tankvent.lookups.emergency_vent_table import emergency_vent_table_lookup

__all__ = [
    "interpolate",
    "get_y_factor",
    "get_c_factor",
    "is_low_volatility",
    "get_f_factor_insulated",
    "get_environmental_factor",
    "normal_vent_inbreathing",
    "normal_vent_outbreathing",
    "emergency_vent_table_lookup",
]
