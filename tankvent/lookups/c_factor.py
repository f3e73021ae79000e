"""
C-factor for thermal inbreathing (API 2000 6th/7th edition).

The factor depends on latitude band, fluid class and tank capacity:

    Lat band   | Low-vol <25 m³ | Low-vol >=25 m³ | Other
    <= 42°     |      4.0       |       6.5       |  6.5
    42°-58°    |      3.0       |       5.0       |  5.0
    > 58°      |      2.5       |       4.0       |  4.0
"""
from typing import Optional

from tankvent.core.config import FlashBoilingPointType
from tankvent.core.constants import (
    LATITUDE_BAND_LOW,
    LATITUDE_BAND_MID,
    FLASH_POINT_THRESHOLD,
    BOILING_POINT_THRESHOLD,
    SMALL_TANK_CAPACITY_M3,
)

# latitude band upper bound -> (low-vol small tank, all other cases)
_C_FACTORS = (
    (LATITUDE_BAND_LOW, 4.0, 6.5),
    (LATITUDE_BAND_MID, 3.0, 5.0),
    (float('inf'), 2.5, 4.0),
)


def is_low_volatility(
    fp_type: FlashBoilingPointType,
    fp_value: Optional[float]
) -> bool:
    """
    Classify the stored fluid.

    Low volatility means FP >= 37.8 °C or BP >= 149 °C. An unknown value is
    never low volatility.
    """
    if fp_value is None:
        return False
    if FlashBoilingPointType.parse(fp_type) is FlashBoilingPointType.FP:
        return fp_value >= FLASH_POINT_THRESHOLD
    return fp_value >= BOILING_POINT_THRESHOLD


def get_c_factor(
    latitude: float,
    fp_type: FlashBoilingPointType,
    fp_value: Optional[float],
    capacity_m3: float
) -> float:
    """
    C-factor for thermal inbreathing.

    Args:
        latitude: Site latitude [deg]
        fp_type: Flash point or boiling point classification
        fp_value: Flash / boiling point [°C], None if unknown
        capacity_m3: Tank capacity [m³]

    Returns:
        C-factor [-]
    """
    small_low_vol = (
        is_low_volatility(fp_type, fp_value)
        and capacity_m3 < SMALL_TANK_CAPACITY_M3
    )
    for band_max, low_vol_small, other in _C_FACTORS:
        if latitude <= band_max:
            return low_vol_small if small_low_vol else other
    return _C_FACTORS[-1][2]
