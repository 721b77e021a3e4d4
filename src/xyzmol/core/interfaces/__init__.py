"""Abstract interfaces shared across layers."""

from .repository import Repository

__all__ = ["Repository"]
