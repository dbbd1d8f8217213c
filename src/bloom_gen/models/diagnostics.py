"""Validation diagnostics recorded while parsing a book."""

from enum import Enum

from pydantic import BaseModel


class Severity(str, Enum):
    """Severity of a diagnostic. Only errors fail a conversion."""

    ERROR = "error"
    WARNING = "warning"


class ValidationError(BaseModel):
    """A single error or warning found in the source document."""

    type: Severity
    message: str
    line: int | None = None

    def format(self) -> str:
        """Render as ``ERROR: message`` / ``WARNING: message``."""
        return f"{self.type.value.upper()}: {self.message}"
