"""Base service class implementing common business logic patterns."""

from typing import Generic, Optional, TypeVar
from ..interfaces.repository import Repository

T = TypeVar("T")


class BaseService(Generic[T]):
    """
    Base service class providing common lookup operations.

    Implements the Service Layer pattern; the repository is injected and may
    be omitted by services that only work on explicit paths.
    """

    def __init__(self, repository: Optional[Repository[T]] = None):
        """Initialize service with repository dependency."""
        self._repository = repository

    def get_by_id(self, id: str) -> T:
        """
        Retrieve entity by ID with business logic validation.

        Args:
            id: Entity identifier

        Returns:
            Entity instance

        Raises:
            ValueError: If no repository is configured or entity not found
        """
        if self._repository is None:
            raise ValueError("No repository configured")
        entity = self._repository.get(id)
        if entity is None:
            raise ValueError(f"Entity with id {id} not found")
        return entity
