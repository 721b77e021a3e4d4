"""Infrastructure implementations of core interfaces."""

from .repositories.molecule_repository import MoleculeRepository

__all__ = [
    "MoleculeRepository",
]
