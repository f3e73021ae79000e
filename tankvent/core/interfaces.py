"""
Core interfaces for TANKVENT.

These define the contracts for the edition-dependent parts of the
calculation, enabling:
- One rule object per API 2000 edition
- Restoring an alternate formula revision without touching the pipeline
- Dependency injection for testing
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, Any, Tuple

from tankvent.core.config import CalculationInput, ApiEdition
from tankvent.core.results import DerivedGeometry, HeatInputCoefficients


@dataclass(frozen=True)
class ReferenceFluid:
    """Fluid properties used by the emergency venting formulas."""
    latent_heat: float              # [kJ/kg]
    relieving_temperature: float    # [°C]
    molecular_mass: float           # [g/mol]
    tag: str                        # "Hexane" or "User-defined"


# =============================================================================
# NORMAL VENTING
# =============================================================================

class NormalVentingRules(ABC):
    """
    Edition-specific normal venting rules.

    Process terms act on the summed stream flowrates; thermal terms return
    the factor actually used (Y or C, 1.0 when not applicable) together with
    the thermal flow.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable rule set name."""
        pass

    @abstractmethod
    def process_outbreathing(self, incoming_total: float, case: CalculationInput,
                             low_volatility: bool) -> float:
        """Outbreathing from liquid entering the tank [Nm³/h]."""
        pass

    @abstractmethod
    def process_inbreathing(self, outgoing_total: float, case: CalculationInput) -> float:
        """Inbreathing from liquid leaving the tank [Nm³/h]."""
        pass

    @abstractmethod
    def thermal_outbreathing(self, case: CalculationInput, derived: DerivedGeometry,
                             low_volatility: bool) -> Tuple[float, float]:
        """Return (Y-factor, thermal outbreathing [Nm³/h])."""
        pass

    @abstractmethod
    def thermal_inbreathing(self, case: CalculationInput,
                            derived: DerivedGeometry) -> Tuple[float, float]:
        """Return (C-factor, thermal inbreathing [Nm³/h])."""
        pass

    @abstractmethod
    def combine(self, process: float, thermal: float) -> float:
        """Combine process and thermal contributions into the total."""
        pass

    def get_info(self) -> Dict[str, Any]:
        """Return rule metadata for logging/debugging."""
        return {
            "name": self.name,
            "class": self.__class__.__name__,
            "module": self.__class__.__module__,
        }


# =============================================================================
# EMERGENCY VENTING
# =============================================================================

class EmergencyVentMethod(ABC):
    """Selection of heat input coefficients and vent rate formula."""

    @property
    @abstractmethod
    def name(self) -> str:
        pass

    @abstractmethod
    def select_coefficients(self, wetted_area: float, design_pressure: float,
                            edition: ApiEdition) -> HeatInputCoefficients:
        """Coefficients (a, n) of Q = a * A^n."""
        pass

    @abstractmethod
    def vent_rate(self, wetted_area: float, design_pressure: float, edition: ApiEdition,
                  heat_input: float, environmental_factor: float,
                  fluid: ReferenceFluid) -> float:
        """Emergency vent rate [Nm³/h of air]."""
        pass

    def get_info(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "class": self.__class__.__name__,
            "module": self.__class__.__module__,
        }
