"""Catalog browsing use cases."""

from __future__ import annotations

from typing import Protocol

from runeplan.catalog import CatalogGoal
from runeplan.goal import GoalType


class CatalogNotFoundError(LookupError):
    """Raised when a catalog goal does not exist."""

    def __init__(self, message: str = "catalog: goal not found") -> None:
        super().__init__(message)


class CatalogRepository(Protocol):
    """Persistence interface for catalog goals."""

    def list_all(self) -> list[CatalogGoal]: ...

    def list_by_type(self, goal_type: GoalType) -> list[CatalogGoal]: ...

    def get_by_id(self, goal_id: str) -> CatalogGoal:
        """Return the goal, raising CatalogNotFoundError if it does not exist."""
        ...


class CatalogService:
    """Browses the catalog through a repository."""

    def __init__(self, repo: CatalogRepository) -> None:
        self._repo = repo

    def list_all(self) -> list[CatalogGoal]:
        return self._repo.list_all()

    def list_by_type(self, goal_type: GoalType) -> list[CatalogGoal]:
        return self._repo.list_by_type(goal_type)

    def get_by_id(self, goal_id: str) -> CatalogGoal:
        return self._repo.get_by_id(goal_id)