"""
Venting calculations for TANKVENT.

Pure functions with no side effects or I/O.
"""

from tankvent.calculations.geometry import (
    calc_max_tank_volume,
    calc_shell_surface_area,
    calc_cone_roof_area,
    calc_total_surface_area,
    calc_wetted_area,
    calc_r_in,
    calc_r_inp,
    compute_derived_geometry,
)
from tankvent.calculations.normal_venting import (
    FifthEditionRules,
    SixthEditionRules,
    SeventhEditionRules,
    PlainProcessRules,
    rules_for_edition,
    compute_normal_venting,
)
from tankvent.calculations.emergency_venting import (
    HexaneSimplifiedMethod,
    TableOrFormulaMethod,
    select_heat_input_coefficients,
    calc_heat_input,
    calc_general_vent_rate,
    calc_hexane_vent_rate,
    resolve_reference_fluid,
    compute_emergency_venting,
)
from tankvent.calculations.drain import compute_drain_inbreathing

__all__ = [
    "calc_max_tank_volume",
    "calc_shell_surface_area",
    "calc_cone_roof_area",
    "calc_total_surface_area",
    "calc_wetted_area",
    "calc_r_in",
    "calc_r_inp",
    "compute_derived_geometry",
    "FifthEditionRules",
    "SixthEditionRules",
    "SeventhEditionRules",
    "PlainProcessRules",
    "rules_for_edition",
    "compute_normal_venting",
    "HexaneSimplifiedMethod",
    "TableOrFormulaMethod",
    "select_heat_input_coefficients",
    "calc_heat_input",
    "calc_general_vent_rate",
    "calc_hexane_vent_rate",
    "resolve_reference_fluid",
    "compute_emergency_venting",
    "compute_drain_inbreathing",
]
