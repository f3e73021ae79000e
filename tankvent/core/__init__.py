"""
Core domain models and interfaces for TANKVENT.

This module provides the foundational classes for:
- Calculation input with validation and YAML/JSON support
- Immutable calculation results
- Edition rule and emergency method contracts
- The error taxonomy and engineering constants
"""

from tankvent.core.config import (
    CalculationInput,
    ValidationResult,
    TankConfiguration,
    ApiEdition,
    FlashBoilingPointType,
    Stream,
    Insulation,
    FluidProperties,
    DrainSystem,
    reference_case,
)
from tankvent.core.results import (
    DerivedGeometry,
    OutbreathingResult,
    InbreathingResult,
    NormalVentingResult,
    HeatInputCoefficients,
    EmergencyVentingResult,
    VentingSummary,
    CalculationWarnings,
    CalculationResult,
)
from tankvent.core.interfaces import (
    ReferenceFluid,
    NormalVentingRules,
    EmergencyVentMethod,
)
from tankvent.core.exceptions import (
    TankVentError,
    ConfigurationError,
    InvalidTableError,
    MissingInsulationParamsError,
    MissingPartialAreaError,
    MissingParameterError,
    DivisionByZeroError,
    TankVentWarning,
    CapacityWarning,
)

__all__ = [
    # Configuration
    "CalculationInput",
    "ValidationResult",
    "TankConfiguration",
    "ApiEdition",
    "FlashBoilingPointType",
    "Stream",
    "Insulation",
    "FluidProperties",
    "DrainSystem",
    "reference_case",
    # Results
    "DerivedGeometry",
    "OutbreathingResult",
    "InbreathingResult",
    "NormalVentingResult",
    "HeatInputCoefficients",
    "EmergencyVentingResult",
    "VentingSummary",
    "CalculationWarnings",
    "CalculationResult",
    # Interfaces
    "ReferenceFluid",
    "NormalVentingRules",
    "EmergencyVentMethod",
    # Exceptions
    "TankVentError",
    "ConfigurationError",
    "InvalidTableError",
    "MissingInsulationParamsError",
    "MissingPartialAreaError",
    "MissingParameterError",
    "DivisionByZeroError",
    "TankVentWarning",
    "CapacityWarning",
]
