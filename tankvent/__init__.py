"""
TANKVENT - API 2000 Tank Venting Calculations
==============================================

Normal and emergency venting requirements for atmospheric and low-pressure
storage tanks per API 2000 (5th, 6th and 7th edition).

Package Structure:
------------------
- core: Input configuration, results, interfaces, exceptions, orchestrator
- lookups: Interpolated API 2000 tables (Y, C, F factors, vent tables)
- calculations: Geometry, normal venting, emergency venting, drain
- cli: Command line entry point

Quick Start:
------------
>>> from tankvent import calculate, CalculationInput, Stream
>>>
>>> case = CalculationInput(
...     tank_number="TK-3120",
...     diameter=24000,
...     height=17500,
...     latitude=12.7,
...     design_pressure=101.32,
...     outgoing_streams=[Stream("S-1", 368.9)],
...     api_edition="7TH"
... )
>>>
>>> result = calculate(case)
>>> print(f"Emergency: {result.summary.emergency_venting:.0f} Nm³/h")
>>>
>>> # From the command line:
>>> # tankvent run case.yaml

Features:
---------
- Process and thermal outbreathing / inbreathing per edition
- Full and partial insulation reduction factors
- Fire-exposure emergency venting with Hexane or user-defined fluid
- Drain system inbreathing check
- YAML / JSON case files and JSON results

License: MIT
Version: 1.0.0
"""

__version__ = "1.0.0"

# Core imports
from tankvent.core import (
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
    CalculationResult,
    TankVentError,
    ConfigurationError,
)

# Orchestrator
from tankvent.core.calculator import calculate, VentingCalculator

__all__ = [
    "__version__",
    "calculate",
    "VentingCalculator",
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
    "CalculationResult",
    "TankVentError",
    "ConfigurationError",
]
