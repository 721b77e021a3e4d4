"""Core business logic services."""

from .base_service import BaseService
from .molecule_service import MoleculeService

__all__ = [
    "BaseService",
    "MoleculeService",
]
