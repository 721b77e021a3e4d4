"""Strict reader for XYZ molecular coordinate files."""

from .core import (
    Atom,
    AtomCountMismatchError,
    EmptyFileError,
    InvalidAtomCountError,
    InvalidAtomLineError,
    InvalidCoordinateError,
    MissingCommentLineError,
    Molecule,
    MoleculeService,
    ParseError,
    XYZParser,
    parse_xyz,
    parse_xyz_str,
)
from .infrastructure import MoleculeRepository

__version__ = "0.1.0"

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
    "XYZParser",
    "parse_xyz",
    "parse_xyz_str",
    "MoleculeService",
    "MoleculeRepository",
]
