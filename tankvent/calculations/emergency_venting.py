"""
Emergency venting for fire exposure (API 2000).

Steps:
    1. Select heat input coefficients (a, n) by wetted area and design pressure
    2. Q = a * A_wet^n  [W]
    3. F = environmental factor from the tank configuration / insulation
    4. Vent rate from the table or a formula, depending on the method

General formula:
    V = 906.6 * Q * F / (1000 * L) * sqrt((T_r + 273.15) / M)   [Nm³/h]

Hexane properties (L = 334.9 kJ/kg, T_r = 15.6 °C, M = 86.17 g/mol) fill any
fluid property the user leaves blank.
"""
import logging
from typing import Optional

import numpy as np

from tankvent.core.config import CalculationInput, ApiEdition, FluidProperties
from tankvent.core.constants import (
    EMERGENCY_TABLE_MAX_AREA_M2,
    EMERGENCY_VENT_PRESSURE_THRESHOLD,
    GENERAL_FORMULA_CONSTANT,
    HEXANE_HIGH_PRESSURE_CONSTANT,
    HEXANE_HIGH_PRESSURE_EXPONENT,
    HEXANE_LATENT_HEAT,
    HEXANE_LOW_PRESSURE_VENT_RATE,
    HEXANE_MOLECULAR_MASS,
    HEXANE_RELIEVING_TEMPERATURE,
    REFERENCE_FLUID_HEXANE,
    REFERENCE_FLUID_USER,
)
from tankvent.core.interfaces import EmergencyVentMethod, ReferenceFluid
from tankvent.core.results import (
    DerivedGeometry,
    EmergencyVentingResult,
    HeatInputCoefficients,
)
from tankvent.lookups.emergency_vent_table import emergency_vent_table_lookup
from tankvent.lookups.f_factor import get_environmental_factor

logger = logging.getLogger(__name__)


# =============================================================================
# BUILDING BLOCKS
# =============================================================================

def select_heat_input_coefficients(
    wetted_area_m2: float,
    design_pressure_kpag: float,
    unbounded_mid_row: bool = False
) -> HeatInputCoefficients:
    """
    Heat input coefficients for Q = a * A^n.

        A < 18.6             -> (63 150, 1)
        18.6 <= A < 93       -> (224 200, 0.566)
        93 <= A < 260        -> (630 400, 0.338)
        A >= 260, DP > 7     -> (43 200, 0.82)
        A >= 260, DP <= 7    -> (4 129 700, 0)

    Args:
        wetted_area_m2: Wetted surface area [m²]
        design_pressure_kpag: Design pressure [kPag]
        unbounded_mid_row: Apply the 93-260 m² row to every area >= 93 m²
    """
    if wetted_area_m2 < 18.6:
        return HeatInputCoefficients(a=63_150, n=1)
    if wetted_area_m2 < 93:
        return HeatInputCoefficients(a=224_200, n=0.566)
    if wetted_area_m2 < EMERGENCY_TABLE_MAX_AREA_M2 or unbounded_mid_row:
        return HeatInputCoefficients(a=630_400, n=0.338)
    if design_pressure_kpag > EMERGENCY_VENT_PRESSURE_THRESHOLD:
        return HeatInputCoefficients(a=43_200, n=0.82)
    return HeatInputCoefficients(a=4_129_700, n=0)


def calc_heat_input(coefficients: HeatInputCoefficients, wetted_area_m2: float) -> float:
    """Fire heat input Q = a * A^n [W]."""
    return float(coefficients.a * wetted_area_m2 ** coefficients.n)


def resolve_reference_fluid(fluid: FluidProperties) -> ReferenceFluid:
    """
    Fill unspecified fluid properties from Hexane.

    The tag is "Hexane" only when all three properties are unspecified.
    """
    all_blank = (
        fluid.latent_heat is None
        and fluid.relieving_temperature is None
        and fluid.molecular_mass is None
    )
    return ReferenceFluid(
        latent_heat=(HEXANE_LATENT_HEAT if fluid.latent_heat is None
                     else fluid.latent_heat),
        relieving_temperature=(HEXANE_RELIEVING_TEMPERATURE if fluid.relieving_temperature is None
                               else fluid.relieving_temperature),
        molecular_mass=(HEXANE_MOLECULAR_MASS if fluid.molecular_mass is None
                        else fluid.molecular_mass),
        tag=REFERENCE_FLUID_HEXANE if all_blank else REFERENCE_FLUID_USER,
    )


def calc_general_vent_rate(
    heat_input: float,
    environmental_factor: float,
    latent_heat: float,
    relieving_temperature: float,
    molecular_mass: float
) -> float:
    """
    General emergency vent rate [Nm³/h of air].

    Args:
        heat_input: Q [W]
        environmental_factor: F [-]
        latent_heat: L [kJ/kg]
        relieving_temperature: T_r [°C]
        molecular_mass: M [g/mol]
    """
    return float(
        GENERAL_FORMULA_CONSTANT * heat_input * environmental_factor / (1000 * latent_heat)
        * np.sqrt((relieving_temperature + 273.15) / molecular_mass)
    )


def calc_hexane_vent_rate(
    wetted_area_m2: float,
    design_pressure_kpag: float,
    environmental_factor: float
) -> float:
    """
    Simplified Hexane vent rate for wetted areas >= 260 m² [Nm³/h].

        DP <= 7: V = F * 19 910
        DP > 7:  V = 208.2 * F * A^0.82
    """
    if design_pressure_kpag <= EMERGENCY_VENT_PRESSURE_THRESHOLD:
        return environmental_factor * HEXANE_LOW_PRESSURE_VENT_RATE
    return float(
        HEXANE_HIGH_PRESSURE_CONSTANT * environmental_factor
        * wetted_area_m2 ** HEXANE_HIGH_PRESSURE_EXPONENT
    )


# =============================================================================
# VENT RATE METHODS
# =============================================================================

class HexaneSimplifiedMethod(EmergencyVentMethod):
    """
    Table below 260 m², simplified Hexane formulas above (default).

        A < 260                  -> F * table(A)
        A >= 260, user fluid     -> general formula
        A >= 260, Hexane         -> simplified Hexane formula
    """

    @property
    def name(self) -> str:
        return "Table / Hexane simplified"

    def select_coefficients(self, wetted_area, design_pressure, edition):
        return select_heat_input_coefficients(wetted_area, design_pressure)

    def vent_rate(self, wetted_area, design_pressure, edition,
                  heat_input, environmental_factor, fluid):
        if wetted_area < EMERGENCY_TABLE_MAX_AREA_M2:
            return environmental_factor * emergency_vent_table_lookup(wetted_area)
        if fluid.tag == REFERENCE_FLUID_USER:
            return calc_general_vent_rate(
                heat_input, environmental_factor,
                fluid.latent_heat, fluid.relieving_temperature, fluid.molecular_mass,
            )
        return calc_hexane_vent_rate(wetted_area, design_pressure, environmental_factor)


class TableOrFormulaMethod(EmergencyVentMethod):
    """
    Alternate revision: table for A <= 260 m² outside the 7th edition,
    general formula otherwise. The 7th edition keeps the 93-260 m²
    coefficient row for every area >= 93 m².
    """

    @property
    def name(self) -> str:
        return "Table / general formula"

    def select_coefficients(self, wetted_area, design_pressure, edition):
        return select_heat_input_coefficients(
            wetted_area, design_pressure,
            unbounded_mid_row=ApiEdition.parse(edition) is ApiEdition.SEVENTH,
        )

    def vent_rate(self, wetted_area, design_pressure, edition,
                  heat_input, environmental_factor, fluid):
        if (wetted_area <= EMERGENCY_TABLE_MAX_AREA_M2
                and ApiEdition.parse(edition) is not ApiEdition.SEVENTH):
            return environmental_factor * emergency_vent_table_lookup(wetted_area)
        return calc_general_vent_rate(
            heat_input, environmental_factor,
            fluid.latent_heat, fluid.relieving_temperature, fluid.molecular_mass,
        )


DEFAULT_EMERGENCY_METHOD = HexaneSimplifiedMethod()


# =============================================================================
# MAIN COMPUTATION
# =============================================================================

def compute_emergency_venting(
    case: CalculationInput,
    derived: DerivedGeometry,
    method: Optional[EmergencyVentMethod] = None
) -> EmergencyVentingResult:
    """
    Compute emergency venting for fire exposure.

    Args:
        case: Calculation input
        derived: Derived geometry (wetted area)
        method: Vent rate method, defaults to HexaneSimplifiedMethod

    Returns:
        EmergencyVentingResult

    Raises:
        MissingParameterError: insulated configuration without insulation data
    """
    method = method or DEFAULT_EMERGENCY_METHOD
    area = derived.wetted_area

    fluid = resolve_reference_fluid(case.fluid)

    ins = case.insulation
    environmental_factor = get_environmental_factor(
        case.tank_configuration,
        ins.conductivity if ins is not None else None,
        ins.thickness_mm if ins is not None else None,
    )

    coefficients = method.select_coefficients(area, case.design_pressure, case.api_edition)
    heat_input = calc_heat_input(coefficients, area)

    vent = method.vent_rate(
        area, case.design_pressure, case.api_edition,
        heat_input, environmental_factor, fluid,
    )

    logger.debug(
        f"{method.name}: A_wet={area:.2f} m², a={coefficients.a}, n={coefficients.n}, "
        f"Q={heat_input:.0f} W, F={environmental_factor}, V={vent:.1f} Nm³/h ({fluid.tag})"
    )

    return EmergencyVentingResult(
        heat_input=heat_input,
        environmental_factor=float(environmental_factor),
        emergency_vent_required=float(vent),
        coefficients=coefficients,
        reference_fluid=fluid.tag,
    )
