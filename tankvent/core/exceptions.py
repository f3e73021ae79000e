"""
Exception hierarchy for TANKVENT.

Every error raised by the calculation engine derives from TankVentError so
callers can reject a computation with a single except clause. Errors are
raised where the offending value is consumed and are never caught inside
the engine.
"""
from typing import List, Optional


class TankVentError(Exception):
    """Base class for all TANKVENT errors."""


class ConfigurationError(TankVentError):
    """Input case failed validation."""

    def __init__(self, message: str, errors: Optional[List[str]] = None):
        super().__init__(message)
        self.errors = list(errors or [])


class InvalidTableError(TankVentError):
    """An interpolation table is empty or malformed."""


class MissingInsulationParamsError(TankVentError):
    """Insulated configuration without conductivity, thickness or inside coefficient."""


class MissingPartialAreaError(MissingInsulationParamsError):
    """Partially insulated configuration without insulated surface area."""


class MissingParameterError(TankVentError):
    """A lookup was requested without the parameters it depends on."""


class DivisionByZeroError(TankVentError, ZeroDivisionError):
    """A ratio was requested against a zero reference quantity."""


# =============================================================================
# WARNING CATEGORIES
# =============================================================================

class TankVentWarning(UserWarning):
    """Base warning category for TANKVENT."""


class CapacityWarning(TankVentWarning):
    """Tank capacity lies outside the tabulated normal venting range."""
