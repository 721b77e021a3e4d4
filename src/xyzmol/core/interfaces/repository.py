"""Abstract base class for repositories following the Repository Pattern."""

from abc import ABC, abstractmethod
from typing import Dict, Generic, List, Optional, TypeVar

T = TypeVar("T")


class Repository(ABC, Generic[T]):
    """
    Generic repository interface keyed by string identifiers.

    Read access is required; write operations may be left unsupported.
    """

    @abstractmethod
    def get(self, id: str) -> Optional[T]:
        """Retrieve an entity by ID."""
        pass

    @abstractmethod
    def ids(self) -> List[str]:
        """List identifiers of all stored entities."""
        pass

    @abstractmethod
    def list(self) -> Dict[str, T]:
        """Map every identifier to its entity."""
        pass

    def create(self, id: str, entity: T) -> T:
        """Create a new entity."""
        raise NotImplementedError("Creation not supported")

    def update(self, id: str, entity: T) -> T:
        """Update an existing entity."""
        raise NotImplementedError("Updates not supported")

    def delete(self, id: str) -> None:
        """Delete an entity by ID."""
        raise NotImplementedError("Deletion not supported")
