"""Y-factor for thermal outbreathing (API 2000 6th/7th edition)."""
from tankvent.core.constants import LATITUDE_BAND_LOW, LATITUDE_BAND_MID


def get_y_factor(latitude: float) -> float:
    """
    Y-factor by latitude band.

    0 < lat <= 42  -> 0.32
    42 < lat <= 58 -> 0.25
    lat > 58       -> 0.20
    """
    if latitude <= LATITUDE_BAND_LOW:
        return 0.32
    if latitude <= LATITUDE_BAND_MID:
        return 0.25
    return 0.20
