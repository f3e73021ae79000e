"""
Normal venting (process + thermal outbreathing and inbreathing).

Stream direction is taken from the tank's point of view:
- incoming streams fill the tank and displace vapour -> OUTBREATHING
- outgoing streams empty the tank and draw in air   -> INBREATHING

Edition rules:
    5TH  process out = 1.01x (low-vol) / 2.02x incoming, process in = 0.94x outgoing,
         thermal from the normal vent table, total = max(process, thermal)
    6TH  process out = incoming, process in = outgoing,
         thermal = Y * V^0.9 * R / C * V^0.7 * R, total = process + thermal
    7TH  as 6TH but process out = 2.0x incoming when VP > 5.0 kPa

The reduction factor R applies to thermal venting in every edition.
"""
import logging
from types import MappingProxyType
from typing import Iterable, Optional

from tankvent.core.config import CalculationInput, ApiEdition
from tankvent.core.constants import (
    FIFTH_EDITION_INBREATHING_FACTOR,
    FIFTH_EDITION_LOW_VOL_OUTBREATHING,
    FIFTH_EDITION_OTHER_OUTBREATHING,
    SEVENTH_EDITION_VOLATILE_OUTBREATHING,
    SEVENTH_EDITION_NON_VOLATILE_OUTBREATHING,
    THERMAL_OUTBREATHING_EXPONENT,
    THERMAL_INBREATHING_EXPONENT,
    VOLATILE_VAPOUR_PRESSURE,
)
from tankvent.core.interfaces import NormalVentingRules
from tankvent.core.results import (
    DerivedGeometry,
    InbreathingResult,
    NormalVentingResult,
    OutbreathingResult,
)
from tankvent.lookups.c_factor import get_c_factor, is_low_volatility
from tankvent.lookups.normal_vent_table import normal_vent_inbreathing, normal_vent_outbreathing
from tankvent.lookups.y_factor import get_y_factor

logger = logging.getLogger(__name__)


def sum_flowrates(streams: Iterable) -> float:
    """Total flowrate of a stream collection [m³/h]."""
    return sum((s.flowrate for s in streams), 0.0)


# =============================================================================
# EDITION RULES
# =============================================================================

class FifthEditionRules(NormalVentingRules):
    """API 2000 5th edition: tabulated thermal venting, governing maximum."""

    @property
    def name(self) -> str:
        return "API 2000 5th edition"

    def process_outbreathing(self, incoming_total, case, low_volatility):
        factor = (FIFTH_EDITION_LOW_VOL_OUTBREATHING if low_volatility
                  else FIFTH_EDITION_OTHER_OUTBREATHING)
        return factor * incoming_total

    def process_inbreathing(self, outgoing_total, case):
        return FIFTH_EDITION_INBREATHING_FACTOR * outgoing_total

    def thermal_outbreathing(self, case, derived, low_volatility):
        table = normal_vent_outbreathing(derived.max_tank_volume, low_volatility)
        return 1.0, table * derived.reduction_factor

    def thermal_inbreathing(self, case, derived):
        table = normal_vent_inbreathing(derived.max_tank_volume)
        return 1.0, table * derived.reduction_factor

    def combine(self, process, thermal):
        return max(process, thermal)


class SixthEditionRules(NormalVentingRules):
    """API 2000 6th edition: Y/C formulas, process and thermal summed."""

    @property
    def name(self) -> str:
        return "API 2000 6th edition"

    def process_outbreathing(self, incoming_total, case, low_volatility):
        return 1.0 * incoming_total

    def process_inbreathing(self, outgoing_total, case):
        return 1.0 * outgoing_total

    def thermal_outbreathing(self, case, derived, low_volatility):
        y_factor = get_y_factor(case.latitude)
        thermal = (y_factor * derived.max_tank_volume ** THERMAL_OUTBREATHING_EXPONENT
                   * derived.reduction_factor)
        return y_factor, thermal

    def thermal_inbreathing(self, case, derived):
        c_factor = get_c_factor(
            case.latitude,
            case.fluid.flash_boiling_point_type,
            case.fluid.flash_boiling_point,
            derived.max_tank_volume,
        )
        thermal = (c_factor * derived.max_tank_volume ** THERMAL_INBREATHING_EXPONENT
                   * derived.reduction_factor)
        return c_factor, thermal

    def combine(self, process, thermal):
        return process + thermal


class SeventhEditionRules(SixthEditionRules):
    """API 2000 7th edition: 6th edition with vapour-pressure weighted outbreathing."""

    @property
    def name(self) -> str:
        return "API 2000 7th edition"

    def process_outbreathing(self, incoming_total, case, low_volatility):
        if case.fluid.vapour_pressure > VOLATILE_VAPOUR_PRESSURE:
            return SEVENTH_EDITION_VOLATILE_OUTBREATHING * incoming_total
        return SEVENTH_EDITION_NON_VOLATILE_OUTBREATHING * incoming_total


class PlainProcessRules(NormalVentingRules):
    """
    Earlier formula revision: process terms are the plain stream sums.

    Thermal terms and the combine rule are delegated to the wrapped edition.
    """

    def __init__(self, base: NormalVentingRules):
        self.base = base

    @property
    def name(self) -> str:
        return f"{self.base.name} (plain process sums)"

    def process_outbreathing(self, incoming_total, case, low_volatility):
        return incoming_total

    def process_inbreathing(self, outgoing_total, case):
        return outgoing_total

    def thermal_outbreathing(self, case, derived, low_volatility):
        return self.base.thermal_outbreathing(case, derived, low_volatility)

    def thermal_inbreathing(self, case, derived):
        return self.base.thermal_inbreathing(case, derived)

    def combine(self, process, thermal):
        return self.base.combine(process, thermal)


EDITION_RULES = MappingProxyType({
    ApiEdition.FIFTH: FifthEditionRules(),
    ApiEdition.SIXTH: SixthEditionRules(),
    ApiEdition.SEVENTH: SeventhEditionRules(),
})


def rules_for_edition(edition: ApiEdition) -> NormalVentingRules:
    """Default rule set for an edition."""
    return EDITION_RULES[ApiEdition.parse(edition)]


# =============================================================================
# MAIN COMPUTATION
# =============================================================================

def compute_normal_venting(
    case: CalculationInput,
    derived: DerivedGeometry,
    rules: Optional[NormalVentingRules] = None
) -> NormalVentingResult:
    """
    Compute normal outbreathing and inbreathing.

    Args:
        case: Calculation input
        derived: Derived geometry (volume, reduction factor)
        rules: Rule set override, defaults to the case's edition

    Returns:
        NormalVentingResult
    """
    rules = rules or rules_for_edition(case.api_edition)

    incoming_total = sum_flowrates(case.incoming_streams)
    outgoing_total = sum_flowrates(case.outgoing_streams)
    low_vol = is_low_volatility(
        case.fluid.flash_boiling_point_type,
        case.fluid.flash_boiling_point,
    )

    process_out = rules.process_outbreathing(incoming_total, case, low_vol)
    process_in = rules.process_inbreathing(outgoing_total, case)
    y_factor, thermal_out = rules.thermal_outbreathing(case, derived, low_vol)
    c_factor, thermal_in = rules.thermal_inbreathing(case, derived)

    logger.debug(
        f"{rules.name}: process out={process_out:.2f}, thermal out={thermal_out:.2f}, "
        f"process in={process_in:.2f}, thermal in={thermal_in:.2f} Nm³/h"
    )

    return NormalVentingResult(
        outbreathing=OutbreathingResult(
            process_flowrate=float(process_out),
            y_factor=float(y_factor),
            reduction_factor=float(derived.reduction_factor),
            thermal_outbreathing=float(thermal_out),
            total=float(rules.combine(process_out, thermal_out)),
        ),
        inbreathing=InbreathingResult(
            process_flowrate=float(process_in),
            c_factor=float(c_factor),
            reduction_factor=float(derived.reduction_factor),
            thermal_inbreathing=float(thermal_in),
            total=float(rules.combine(process_in, thermal_in)),
        ),
    )

