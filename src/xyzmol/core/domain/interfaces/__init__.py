"""Abstract interfaces of the domain layer."""

from .structure_parser import StructureParser

__all__ = ["StructureParser"]
