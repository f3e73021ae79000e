"""
Clamped linear interpolation over sorted two-column tables.

Reproduces spreadsheet VLOOKUP(..., TRUE) followed by manual linear
interpolation between the bracketing rows. No extrapolation: values outside
the tabulated key range are clamped to the first / last row.
"""
from typing import Sequence, Tuple

import numpy as np

from tankvent.core.exceptions import InvalidTableError

Table = Sequence[Tuple[float, float]]


def interpolate(x: float, table: Table) -> float:
    """
    Interpolate a value from a table sorted ascending by key.

    Args:
        x: Lookup key
        table: Sequence of (key, value) rows sorted ascending by key

    Returns:
        Interpolated value (first/last value outside the key range)

    Raises:
        InvalidTableError: if the table has no rows
    """
    if len(table) == 0:
        raise InvalidTableError("interpolate: table must not be empty")
    if len(table) == 1:
        return float(table[0][1])

    if x <= table[0][0]:
        return float(table[0][1])
    if x >= table[-1][0]:
        return float(table[-1][1])

    keys = np.fromiter((row[0] for row in table), dtype=float, count=len(table))
    upper = int(np.searchsorted(keys, x, side='right'))

    x0, y0 = table[upper - 1]
    x1, y1 = table[upper]
    return float(y0 + (y1 - y0) / (x1 - x0) * (x - x0))


def column(table: Sequence[Sequence[float]], index: int) -> Tuple[Tuple[float, float], ...]:
    """Extract a (key, value) sub-table from a multi-column table."""
    return tuple((row[0], row[index]) for row in table)
