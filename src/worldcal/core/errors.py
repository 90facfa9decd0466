from __future__ import annotations

from typing import List, Optional


class WorldcalError(Exception):
    """Base error."""


class DefinitionInvalid(WorldcalError, ValueError):
    """Raised when a calendar definition fails load-time validation."""

    def __init__(self, message: str, errors: Optional[List[str]] = None):
        self.errors = list(errors or [])
        super().__init__(message)

    def __str__(self) -> str:
        if self.errors:
            return f"{self.args[0]}\n" + "\n".join(f"  - {e}" for e in self.errors)
        return self.args[0]


class DateOutOfRange(WorldcalError, ValueError):
    """Raised when a caller-supplied date does not exist in its year."""


class ConversionOverflow(WorldcalError, OverflowError):
    """Raised when a conversion would walk past the configured year budget."""
