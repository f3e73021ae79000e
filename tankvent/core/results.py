"""
Result dataclasses for TANKVENT.
All calculation results are immutable dataclasses with clear structure.
"""
from dataclasses import dataclass, asdict
from typing import Dict, Optional, List, Any
import json

from tankvent.core.config import ApiEdition


# =============================================================================
# GEOMETRY
# =============================================================================

@dataclass(frozen=True)
class DerivedGeometry:
    """Geometry derived from the tank dimensions and insulation."""
    max_tank_volume: float      # [m³]
    shell_surface_area: float   # [m²] cylindrical shell only
    cone_roof_area: float       # [m²]
    total_surface_area: float   # [m²] shell + cone roof
    wetted_area: float          # [m²] shell capped at 9144 mm height
    reduction_factor: float     # R_in / R_inp, 1.0 when not insulated


# =============================================================================
# NORMAL VENTING
# =============================================================================

@dataclass(frozen=True)
class OutbreathingResult:
    process_flowrate: float         # [Nm³/h]
    y_factor: float
    reduction_factor: float
    thermal_outbreathing: float     # [Nm³/h]
    total: float                    # [Nm³/h]


@dataclass(frozen=True)
class InbreathingResult:
    process_flowrate: float         # [Nm³/h]
    c_factor: float
    reduction_factor: float
    thermal_inbreathing: float      # [Nm³/h]
    total: float                    # [Nm³/h]


@dataclass(frozen=True)
class NormalVentingResult:
    outbreathing: OutbreathingResult
    inbreathing: InbreathingResult

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'NormalVentingResult':
        return cls(
            outbreathing=OutbreathingResult(**data['outbreathing']),
            inbreathing=InbreathingResult(**data['inbreathing']),
        )


# =============================================================================
# EMERGENCY VENTING
# =============================================================================

@dataclass(frozen=True)
class HeatInputCoefficients:
    """Coefficients of Q = a * A^n."""
    a: float
    n: float


@dataclass(frozen=True)
class EmergencyVentingResult:
    """Fire-exposure venting result."""
    heat_input: float                   # [W]
    environmental_factor: float         # F
    emergency_vent_required: float      # [Nm³/h of air]
    coefficients: HeatInputCoefficients
    reference_fluid: str                # "Hexane" or "User-defined"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'EmergencyVentingResult':
        values = dict(data)
        values['coefficients'] = HeatInputCoefficients(**values['coefficients'])
        return cls(**values)


# =============================================================================
# SUMMARY
# =============================================================================

@dataclass(frozen=True)
class VentingSummary:
    """Governing design values for the venting devices."""
    design_outbreathing: float      # [Nm³/h]
    design_inbreathing: float       # [Nm³/h]
    emergency_venting: float        # [Nm³/h]


@dataclass(frozen=True)
class CalculationWarnings:
    capacity_exceeds_table: bool = False    # capacity > 30 000 m³
    underground_tank: bool = False          # F = 0, emergency vent = 0
    hexane_defaults: bool = False           # L / T_r / M defaulted to Hexane

    @property
    def raised(self) -> bool:
        return self.capacity_exceeds_table or self.underground_tank or self.hexane_defaults

    def messages(self) -> List[str]:
        """Human-readable text for every raised flag."""
        msgs = []
        if self.capacity_exceeds_table:
            msgs.append("Tank capacity exceeds 30,000 m³ normal venting table range")
        if self.underground_tank:
            msgs.append("Underground storage: environmental factor is 0, no emergency venting")
        if self.hexane_defaults:
            msgs.append("Hexane reference properties used for unspecified fluid data")
        return msgs


# =============================================================================
# CALCULATION RESULT
# =============================================================================

@dataclass(frozen=True)
class CalculationResult:
    """Complete result of one venting calculation."""
    derived: DerivedGeometry
    normal_venting: NormalVentingResult
    emergency_venting: EmergencyVentingResult
    summary: VentingSummary
    warnings: CalculationWarnings
    api_edition: ApiEdition
    calculated_at: str                          # ISO-8601 timestamp
    drain_inbreathing: Optional[float] = None   # [Nm³/h] only with drain data

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data['api_edition'] = self.api_edition.value
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'CalculationResult':
        return cls(
            derived=DerivedGeometry(**data['derived']),
            normal_venting=NormalVentingResult.from_dict(data['normal_venting']),
            emergency_venting=EmergencyVentingResult.from_dict(data['emergency_venting']),
            summary=VentingSummary(**data['summary']),
            warnings=CalculationWarnings(**data['warnings']),
            api_edition=ApiEdition.parse(data['api_edition']),
            calculated_at=data['calculated_at'],
            drain_inbreathing=data.get('drain_inbreathing'),
        )

    def to_json(self, indent: Optional[int] = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_json(cls, text: str) -> 'CalculationResult':
        return cls.from_dict(json.loads(text))

    def summary_dict(self) -> Dict[str, str]:
        """Return key metrics as dictionary for display."""
        out = self.normal_venting.outbreathing
        inb = self.normal_venting.inbreathing
        em = self.emergency_venting
        return {
            "API Edition": self.api_edition.value,
            "Tank Capacity": f"{self.derived.max_tank_volume:.2f} m³",
            "Wetted Area": f"{self.derived.wetted_area:.2f} m²",
            "Reduction Factor": f"{self.derived.reduction_factor:.4f}",
            "Outbreathing (Process)": f"{out.process_flowrate:.2f} Nm³/h",
            "Outbreathing (Thermal)": f"{out.thermal_outbreathing:.2f} Nm³/h",
            "Inbreathing (Process)": f"{inb.process_flowrate:.2f} Nm³/h",
            "Inbreathing (Thermal)": f"{inb.thermal_inbreathing:.2f} Nm³/h",
            "Drain Inbreathing": (
                f"{self.drain_inbreathing:.2f} Nm³/h"
                if self.drain_inbreathing is not None else "N/A"
            ),
            "Heat Input": f"{em.heat_input:.0f} W",
            "Environmental Factor": f"{em.environmental_factor:.4f}",
            "Reference Fluid": em.reference_fluid,
            "Design Outbreathing": f"{self.summary.design_outbreathing:.2f} Nm³/h",
            "Design Inbreathing": f"{self.summary.design_inbreathing:.2f} Nm³/h",
            "Emergency Venting": f"{self.summary.emergency_venting:.2f} Nm³/h",
        }
