"""Goal planning use cases."""

from __future__ import annotations

from typing import Protocol

from runeplan.goal import Goal


class GoalNotFoundError(LookupError):
    """Raised when a goal or one of its requirements does not exist."""

    def __init__(self, message: str = "goal: not found") -> None:
        super().__init__(message)


class GoalRepository(Protocol):
    """Persistence interface for per-account goals."""

    def list_by_rsn(self, rsn_id: str) -> list[Goal]: ...

    def activate(self, rsn_id: str, catalog_id: str) -> Goal: ...

    def complete(self, goal_id: str) -> None: ...

    def toggle_requirement(self, goal_id: str, requirement_id: str) -> bool:
        """Flip a requirement and return its new completed state."""
        ...


class GoalService:
    """Plans goals through a repository."""

    def __init__(self, repo: GoalRepository) -> None:
        self._repo = repo

    def list(self, rsn_id: str) -> list[Goal]:
        return self._repo.list_by_rsn(rsn_id)

    def activate(self, rsn_id: str, catalog_id: str) -> Goal:
        return self._repo.activate(rsn_id, catalog_id)

    def complete(self, goal_id: str) -> None:
        self._repo.complete(goal_id)

    def toggle_requirement(self, goal_id: str, requirement_id: str) -> bool:
        return self._repo.toggle_requirement(goal_id, requirement_id)