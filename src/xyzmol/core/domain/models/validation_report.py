"""Domain model for the outcome of validating one XYZ file."""

from dataclasses import dataclass
from typing import Optional

from .molecule import Molecule


@dataclass(frozen=True)
class ValidationReport:
    """Contains the result of parsing a single file."""

    path: str
    molecule: Optional[Molecule] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def error_message(self) -> str:
        return "" if self.error is None else str(self.error)
