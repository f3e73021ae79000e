"""
Emergency venting table for fire exposure (API 2000 5th/6th edition).

Keyed on wetted surface area [m²]; values are vent rates [Nm³/h of air]
for Hexane at F = 1. Valid up to 260 m²; the caller selects table or
formula for larger areas.
"""
from tankvent.lookups.interpolate import interpolate

EMERGENCY_VENT_TABLE = (
    (2, 608),
    (3, 913),
    (9, 2738),
    (11, 3347),
    (13, 3955),
    (15, 4563),
    (17, 5172),
    (19, 5780),
    (22, 6217),
    (25, 6684),
    (30, 7411),
    (35, 8086),
    (40, 8721),
    (45, 9322),
    (50, 9895),
    (60, 10971),
    (70, 11971),
    (80, 12911),
    (90, 13801),
    (110, 15461),
    (130, 15751),
    (150, 16532),
    (175, 17416),
    (200, 18220),
    (230, 19102),
    (260, 19910),
)


def emergency_vent_table_lookup(wetted_area_m2: float) -> float:
    """Tabulated emergency vent rate [Nm³/h], clamped outside 2-260 m²."""
    return interpolate(wetted_area_m2, EMERGENCY_VENT_TABLE)
