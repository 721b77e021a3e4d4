#!/usr/bin/env python3
# src/xyzmol/core/domain/models/atom.py

"""
Domain model representing an atom read from an XYZ file.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Atom:
    """Represents a single atom: element label plus Cartesian position."""

    element: str
    x: float
    y: float
    z: float

    @property
    def coordinates(self) -> Tuple[float, float, float]:
        """Position as an (x, y, z) tuple."""
        return (self.x, self.y, self.z)
