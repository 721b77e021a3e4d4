"""Repository implementations."""

from .molecule_repository import MoleculeRepository

__all__ = ["MoleculeRepository"]
