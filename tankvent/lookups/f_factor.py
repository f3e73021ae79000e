"""
Environmental factor F for fire exposure (API 2000).

Insulated tanks derive F from the insulation conductance U = k / t:

    Conductance [W/(m²·K)] | Thickness [mm] | F
    22.7                   |  25            | 0.300
    11.4                   |  51            | 0.150
     5.7                   | 102            | 0.075
     3.8                   | 152            | 0.050
     2.8                   | 203            | 0.0375
     2.3                   | 254            | 0.030
     1.9                   | 305            | 0.025

All other configurations use a fixed factor.
"""
from types import MappingProxyType
from typing import Optional

from tankvent.core.config import TankConfiguration
from tankvent.core.exceptions import MissingParameterError
from tankvent.lookups.interpolate import interpolate

# (conductance W/m²K, F) sorted ascending by conductance
F_FACTOR_TABLE = (
    (1.9, 0.025),
    (2.3, 0.030),
    (2.8, 0.0375),
    (3.8, 0.050),
    (5.7, 0.075),
    (11.4, 0.150),
    (22.7, 0.300),
)

FIXED_ENVIRONMENTAL_FACTORS = MappingProxyType({
    TankConfiguration.BARE_METAL: 1.0,
    TankConfiguration.WATER_APPLICATION: 1.0,
    TankConfiguration.DEPRESSURING: 1.0,
    TankConfiguration.UNDERGROUND: 0.0,
    TankConfiguration.EARTH_COVERED: 0.03,
    TankConfiguration.CONCRETE: 0.03,
    TankConfiguration.IMPOUNDMENT_AWAY: 0.3,
    TankConfiguration.IMPOUNDMENT: 0.5,
})


def get_f_factor_insulated(conductivity: float, thickness_mm: float) -> float:
    """
    F-factor for an insulated tank.

    Args:
        conductivity: Insulation thermal conductivity [W/(m·K)]
        thickness_mm: Insulation thickness [mm]

    Returns:
        F [-], clamped to 0.025 ... 0.300
    """
    # zero thickness means unbounded conductance
    if thickness_mm <= 0:
        return float(F_FACTOR_TABLE[-1][1])
    conductance = conductivity / (thickness_mm / 1000)
    return interpolate(conductance, F_FACTOR_TABLE)


def get_environmental_factor(
    config: TankConfiguration,
    conductivity: Optional[float] = None,
    thickness_mm: Optional[float] = None
) -> float:
    """
    Environmental factor for any tank configuration.

    Raises:
        MissingParameterError: insulated configuration without conductivity
            and thickness
    """
    config = TankConfiguration.parse(config)
    fixed = FIXED_ENVIRONMENTAL_FACTORS.get(config)
    if fixed is not None:
        return fixed

    if conductivity is None or thickness_mm is None:
        raise MissingParameterError(
            f"Insulation conductivity and thickness required for configuration '{config.value}'"
        )
    return get_f_factor_insulated(conductivity, thickness_mm)
