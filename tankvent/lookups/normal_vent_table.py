"""
Normal venting table (API 2000 5th edition, Tables 1 and 2).

Keyed on tank capacity [m³]. Columns are inbreathing, outbreathing for
low-volatility fluids (FP >= 37.8 °C or BP >= 149 °C) and outbreathing for
all other fluids, all in Nm³/h. Each column interpolates independently.
"""
from tankvent.lookups.interpolate import interpolate, column

# capacity, inbreathing, out low-vol, out other
NORMAL_VENT_TABLE = (
    (10, 1.69, 1.01, 1.69),
    (20, 3.38, 2.02, 3.38),
    (100, 16.9, 10.1, 16.9),
    (200, 33.8, 20.3, 33.8),
    (300, 50.4, 30.4, 50.4),
    (500, 84.4, 50.7, 84.5),
    (700, 118, 71, 118),
    (1000, 169, 101, 169),
    (1500, 254, 152, 254),
    (2000, 338, 203, 338),
    (3000, 507, 304, 507),
    (3180, 537, 322, 537),
    (4000, 647, 388, 647),
    (5000, 787, 472, 787),
    (6000, 896, 538, 896),
    (10000, 1210, 726, 1210),
    (12000, 1345, 807, 1345),
    (14000, 1480, 888, 1480),
    (16000, 1615, 969, 1615),
    (18000, 1750, 1047, 1750),
    (25000, 2179, 1307, 2179),
    (30000, 2495, 1497, 2495),
)

INBREATHING_COLUMN = column(NORMAL_VENT_TABLE, 1)
OUTBREATHING_LOW_VOL_COLUMN = column(NORMAL_VENT_TABLE, 2)
OUTBREATHING_OTHER_COLUMN = column(NORMAL_VENT_TABLE, 3)


def normal_vent_inbreathing(capacity_m3: float) -> float:
    """Tabulated thermal inbreathing [Nm³/h]."""
    return interpolate(capacity_m3, INBREATHING_COLUMN)


def normal_vent_outbreathing(capacity_m3: float, low_volatility: bool) -> float:
    """Tabulated thermal outbreathing [Nm³/h] for the fluid class."""
    col = OUTBREATHING_LOW_VOL_COLUMN if low_volatility else OUTBREATHING_OTHER_COLUMN
    return interpolate(capacity_m3, col)
