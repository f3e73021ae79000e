"""
Venting calculation orchestrator for TANKVENT.

This is the primary entry point: it runs geometry, normal venting,
emergency venting and the drain check, then assembles the governing
design values and warnings.
"""
import logging
import warnings
from datetime import datetime, timezone
from typing import Optional

from tankvent.calculations.drain import compute_drain_inbreathing
from tankvent.calculations.emergency_venting import compute_emergency_venting
from tankvent.calculations.geometry import compute_derived_geometry
from tankvent.calculations.normal_venting import compute_normal_venting
from tankvent.core.config import CalculationInput
from tankvent.core.constants import CAPACITY_WARNING_M3
from tankvent.core.exceptions import CapacityWarning
from tankvent.core.interfaces import NormalVentingRules, EmergencyVentMethod
from tankvent.core.results import (
    CalculationResult,
    CalculationWarnings,
    VentingSummary,
)

logger = logging.getLogger(__name__)


def calculate(
    case: CalculationInput,
    *,
    normal_rules: Optional[NormalVentingRules] = None,
    emergency_method: Optional[EmergencyVentMethod] = None,
    calculated_at: Optional[str] = None
) -> CalculationResult:
    """
    Run the full venting calculation for one tank.

    Steps:
        1. Derived geometry (volume, areas, reduction factor)
        2. Normal venting per the selected API edition
        3. Emergency venting (fire exposure)
        4. Drain inbreathing, only when drain data is present
        5. Summary and warnings

    Args:
        case: Calculation input
        normal_rules: Optional normal venting rule override
        emergency_method: Optional emergency vent method override
        calculated_at: Optional ISO-8601 timestamp, defaults to now (UTC)

    Returns:
        CalculationResult

    Raises:
        TankVentError subclasses from geometry and lookups, unchanged
    """
    logger.debug(
        f"Calculating {case.tank_number}: D={case.diameter} mm, H={case.height} mm, "
        f"edition={case.api_edition.value}, config={case.tank_configuration.name}"
    )

    # Step 1: Geometry
    derived = compute_derived_geometry(case)

    # Step 2: Normal venting
    normal = compute_normal_venting(case, derived, normal_rules)

    # Step 3: Emergency venting
    emergency = compute_emergency_venting(case, derived, emergency_method)

    # Step 4: Drain
    drain_inbreathing = None
    if case.drain is not None:
        drain_inbreathing = compute_drain_inbreathing(
            case.drain.line_size_mm,
            case.drain.max_height_above_drain_mm,
        )

    # Step 5: Summary
    summary = VentingSummary(
        design_outbreathing=normal.outbreathing.total,
        design_inbreathing=max(
            normal.inbreathing.total,
            drain_inbreathing if drain_inbreathing is not None else 0.0,
        ),
        emergency_venting=emergency.emergency_vent_required,
    )

    flags = CalculationWarnings(
        capacity_exceeds_table=derived.max_tank_volume > CAPACITY_WARNING_M3,
        underground_tank=emergency.environmental_factor == 0,
        hexane_defaults=case.fluid.uses_hexane_defaults,
    )
    for msg in flags.messages():
        logger.warning(f"{case.tank_number}: {msg}")

    result = CalculationResult(
        derived=derived,
        normal_venting=normal,
        emergency_venting=emergency,
        summary=summary,
        warnings=flags,
        api_edition=case.api_edition,
        calculated_at=calculated_at or datetime.now(timezone.utc).isoformat(),
        drain_inbreathing=drain_inbreathing,
    )

    logger.info(
        f"{case.tank_number}: out={summary.design_outbreathing:.1f}, "
        f"in={summary.design_inbreathing:.1f}, "
        f"emergency={summary.emergency_venting:.1f} Nm³/h"
    )
    return result


class VentingCalculator:
    """
    Calculator with a fixed set of edition strategies.

    Example:
        >>> from tankvent import VentingCalculator, reference_case
        >>> from tankvent.calculations import TableOrFormulaMethod
        >>>
        >>> calc = VentingCalculator(emergency_method=TableOrFormulaMethod())
        >>> result = calc.run(reference_case())
        >>> print(f"{result.summary.emergency_venting:.0f} Nm³/h")
    """

    def __init__(
        self,
        normal_rules: Optional[NormalVentingRules] = None,
        emergency_method: Optional[EmergencyVentMethod] = None,
        validate: bool = True
    ):
        """
        Args:
            normal_rules: Normal venting rules used for every case
            emergency_method: Emergency vent method used for every case
            validate: Validate each case before calculating
        """
        self.normal_rules = normal_rules
        self.emergency_method = emergency_method
        self.validate = validate

    def run(self, case: CalculationInput) -> CalculationResult:
        """
        Validate (optionally) and calculate one case.

        Raises:
            ConfigurationError: if validation is enabled and fails
        """
        if self.validate:
            validation = case.validate_or_raise()
            for warning in validation.warnings:
                logger.warning(warning)

        result = calculate(
            case,
            normal_rules=self.normal_rules,
            emergency_method=self.emergency_method,
        )

        if result.warnings.capacity_exceeds_table:
            warnings.warn(
                f"{case.tank_number}: capacity {result.derived.max_tank_volume:.0f} m³ "
                "is outside the normal venting table",
                CapacityWarning,
                stacklevel=2,
            )
        return result
