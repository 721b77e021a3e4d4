#!/usr/bin/env python3
# src/xyzmol/core/domain/models/element_style.py

"""
Display properties of elements used when drawing atoms as spheres.
"""

from dataclasses import dataclass
from typing import Dict, Tuple

RGB = Tuple[float, float, float]

# CPK colors
ELEMENT_COLORS: Dict[str, RGB] = {
    "H": (1.0, 1.0, 1.0),
    "C": (0.3, 0.3, 0.3),
    "N": (0.2, 0.2, 1.0),
    "O": (1.0, 0.2, 0.2),
    "S": (1.0, 1.0, 0.2),
    "P": (1.0, 0.5, 0.0),
    "F": (0.2, 1.0, 0.2),
    "CL": (0.2, 1.0, 0.2),
    "BR": (0.6, 0.1, 0.1),
    "I": (0.4, 0.0, 0.7),
    "FE": (0.9, 0.5, 0.0),
    "CA": (0.2, 0.8, 0.2),
    "MG": (0.0, 0.5, 0.0),
    "ZN": (0.5, 0.5, 0.6),
}

# Van der Waals radii in Angstroms
VDW_RADII: Dict[str, float] = {
    "H": 1.20,
    "C": 1.70,
    "N": 1.55,
    "O": 1.52,
    "S": 1.80,
    "P": 1.80,
    "F": 1.47,
    "CL": 1.75,
    "BR": 1.85,
    "I": 1.98,
    "FE": 2.00,
    "CA": 2.31,
    "MG": 1.73,
    "ZN": 1.39,
}

DEFAULT_COLOR: RGB = (1.0, 0.5, 1.0)
DEFAULT_VDW_RADIUS = 1.50
RADIUS_SCALE = 0.4


@dataclass(frozen=True)
class ElementStyle:
    """Color and sphere radius for one element."""

    color: RGB
    radius: float


def element_style(element: str) -> ElementStyle:
    """
    Look up the display style for an element label.

    Args:
        element: Element label as read from the file (case-insensitive)

    Returns:
        ElementStyle with CPK color and scaled van der Waals radius; unknown
        labels fall back to pink and a 1.5 Angstrom radius
    """
    key = element.upper()
    color = ELEMENT_COLORS.get(key, DEFAULT_COLOR)
    radius = VDW_RADII.get(key, DEFAULT_VDW_RADIUS) * RADIUS_SCALE
    return ElementStyle(color=color, radius=radius)
