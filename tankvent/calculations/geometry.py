"""
Tank geometry and insulation reduction factors.

All dimension inputs are in mm; areas are returned in m² and volumes in m³.
"""
import logging

import numpy as np

from tankvent.core.config import CalculationInput, TankConfiguration
from tankvent.core.constants import CONE_ROOF_SLOPE, WETTED_AREA_HEIGHT_CAP_MM
from tankvent.core.exceptions import (
    DivisionByZeroError,
    MissingInsulationParamsError,
    MissingPartialAreaError,
)
from tankvent.core.results import DerivedGeometry

logger = logging.getLogger(__name__)


def calc_max_tank_volume(diameter_mm: float, height_mm: float) -> float:
    """Cylinder volume V = pi * (D/2)^2 * H [m³]."""
    r = diameter_mm / 2
    return float(np.pi * r * r * height_mm / 1e9)


def calc_shell_surface_area(diameter_mm: float, height_mm: float) -> float:
    """Cylindrical shell area A = pi * D * H [m²]."""
    return float(np.pi * diameter_mm * height_mm / 1e6)


def calc_cone_roof_area(diameter_mm: float) -> float:
    """
    Cone roof lateral area [m²].

    Roof height is D / 12; area = pi * r * sqrt(r² + h²).
    """
    r_m = diameter_mm / 2 / 1000
    h_roof_m = diameter_mm / CONE_ROOF_SLOPE / 1000
    slant = np.sqrt(r_m * r_m + h_roof_m * h_roof_m)
    return float(np.pi * r_m * slant)


def calc_total_surface_area(shell_m2: float, cone_roof_m2: float) -> float:
    """Total exposed surface A_TTS = shell + cone roof [m²]."""
    return shell_m2 + cone_roof_m2


def calc_wetted_area(diameter_mm: float, height_mm: float) -> float:
    """Shell area exposed to fire, height capped at 9144 mm (30 ft) [m²]."""
    return min(
        calc_shell_surface_area(diameter_mm, height_mm),
        calc_shell_surface_area(diameter_mm, WETTED_AREA_HEIGHT_CAP_MM),
    )


def calc_r_in(
    inside_heat_transfer_coeff: float,
    insulation_thickness_mm: float,
    insulation_conductivity: float
) -> float:
    """
    Reduction factor for a fully insulated tank.

    R_in = 1 / (1 + U_i * t / k)

    Args:
        inside_heat_transfer_coeff: U_i [W/(m²·K)]
        insulation_thickness_mm: t [mm]
        insulation_conductivity: k [W/(m·K)]
    """
    t_m = insulation_thickness_mm / 1000
    return 1 / (1 + inside_heat_transfer_coeff * t_m / insulation_conductivity)


def calc_r_inp(total_surface_area_m2: float, insulated_area_m2: float, r_in: float) -> float:
    """
    Reduction factor for a partially insulated tank.

    R_inp = (A_inp / A_TTS) * R_in + (1 - A_inp / A_TTS)

    Raises:
        DivisionByZeroError: if the total surface area is zero
    """
    if total_surface_area_m2 == 0:
        raise DivisionByZeroError("calc_r_inp: total tank surface area is zero")
    ratio = insulated_area_m2 / total_surface_area_m2
    return ratio * r_in + (1 - ratio)


def _reduction_factor(case: CalculationInput, total_surface_area: float) -> float:
    config = case.tank_configuration
    if not config.is_insulated:
        return 1.0

    ins = case.insulation
    if (
        ins is None
        or ins.inside_heat_transfer_coeff is None
        or ins.thickness_mm is None
        or ins.conductivity is None
    ):
        raise MissingInsulationParamsError(
            "Insulation thickness, conductivity and inside heat transfer "
            f"coefficient are required for '{config.value}'"
        )

    r_in = calc_r_in(ins.inside_heat_transfer_coeff, ins.thickness_mm, ins.conductivity)
    if config is TankConfiguration.INSULATED_FULL:
        return r_in

    if ins.insulated_area is None:
        raise MissingPartialAreaError(
            "Insulated surface area is required for partially insulated tanks"
        )
    return calc_r_inp(total_surface_area, ins.insulated_area, r_in)


def compute_derived_geometry(case: CalculationInput) -> DerivedGeometry:
    """
    Compute all derived geometry for a case.

    Reduction factor:
        INSULATED_FULL    -> R_in
        INSULATED_PARTIAL -> R_inp
        otherwise         -> 1.0
    """
    shell = calc_shell_surface_area(case.diameter, case.height)
    cone = calc_cone_roof_area(case.diameter)
    total = calc_total_surface_area(shell, cone)

    derived = DerivedGeometry(
        max_tank_volume=calc_max_tank_volume(case.diameter, case.height),
        shell_surface_area=shell,
        cone_roof_area=cone,
        total_surface_area=total,
        wetted_area=calc_wetted_area(case.diameter, case.height),
        reduction_factor=_reduction_factor(case, total),
    )
    logger.debug(
        f"Geometry {case.tank_number}: V={derived.max_tank_volume:.2f} m³, "
        f"A_wet={derived.wetted_area:.2f} m², R={derived.reduction_factor:.4f}"
    )
    return derived
