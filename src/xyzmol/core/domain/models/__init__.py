"""Domain model classes."""

from .atom import Atom
from .molecule import Molecule
from .element_style import ElementStyle, element_style
from .molecule_summary import MoleculeSummary
from .validation_report import ValidationReport

__all__ = [
    "Atom",
    "Molecule",
    "ElementStyle",
    "element_style",
    "MoleculeSummary",
    "ValidationReport",
]
