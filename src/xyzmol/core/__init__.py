"""Core domain models, interfaces and services for XYZ structures."""

from .domain.errors import (
    AtomCountMismatchError,
    EmptyFileError,
    InvalidAtomCountError,
    InvalidAtomLineError,
    InvalidCoordinateError,
    MissingCommentLineError,
    ParseError,
)
from .domain.models.atom import Atom
from .domain.models.molecule import Molecule
from .domain.interfaces.structure_parser import StructureParser
from .domain.implementations.xyz_parser import XYZParser, parse_xyz, parse_xyz_str
from .services.molecule_service import MoleculeService

__all__ = [
    "Atom",
    "Molecule",
    "ParseError",
    "EmptyFileError",
    "InvalidAtomCountError",
    "MissingCommentLineError",
    "InvalidAtomLineError",
    "InvalidCoordinateError",
    "AtomCountMismatchError",
    "StructureParser",
    "XYZParser",
    "parse_xyz",
    "parse_xyz_str",
    "MoleculeService",
]
