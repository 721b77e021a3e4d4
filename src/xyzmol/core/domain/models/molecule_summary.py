"""Domain model summarizing a parsed molecule for display."""

from dataclasses import dataclass
from typing import Dict, Tuple

from .element_style import ElementStyle


@dataclass(frozen=True)
class MoleculeSummary:
    """Composition, center and per-element display style of a molecule."""

    comment: str
    num_atoms: int
    element_counts: Dict[str, int]
    center: Tuple[float, float, float]
    styles: Dict[str, ElementStyle]
