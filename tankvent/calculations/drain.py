"""
Drain system inbreathing.

Liquid draining through the drain line under its own head displaces an
equal volume of air into the tank:

    Q_drain = 3.48 * d² * sqrt(H) * 3600 * 0.94   [Nm³/h]

with d the drain line size and H the liquid height above the drain, both
converted from mm to m.
"""
import numpy as np

from tankvent.core.constants import (
    DRAIN_DISCHARGE_COEFFICIENT,
    DRAIN_CORRECTION_FACTOR,
    SECONDS_PER_HOUR,
)


def compute_drain_inbreathing(line_size_mm: float, max_height_above_drain_mm: float) -> float:
    """Drain inbreathing [Nm³/h]; zero when either input is zero."""
    d = line_size_mm / 1000
    h = max_height_above_drain_mm / 1000
    return float(
        DRAIN_DISCHARGE_COEFFICIENT * d * d * np.sqrt(h)
        * SECONDS_PER_HOUR * DRAIN_CORRECTION_FACTOR
    )
