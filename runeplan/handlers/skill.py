"""Request handler for the skill requirement fragment."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol

from werkzeug.wrappers import Request, Response

from runeplan.catalog import CatalogGoal
from runeplan.goal import Goal
from runeplan.templates.layout import error_panel, render
from runeplan.templates.skill import grid
from runeplan.thresholds import aggregate_thresholds
from runeplan.user import get_user

Handler = Callable[..., Response]


class GoalLoader(Protocol):
    """Loads the goals of a linked account."""

    def list_by_rsn(self, rsn_id: str) -> list[Goal]: ...


class CatalogLoader(Protocol):
    """Loads catalog goals by id."""

    def get_by_id(self, goal_id: str) -> CatalogGoal: ...


def skills_handler(goal_loader: GoalLoader, catalog_loader: CatalogLoader) -> Handler:
    """Return a handler rendering the aggregated skill grid for the current account."""

    def handle(request: Request, **params: Any) -> Response:
        user = get_user(request.environ)
        if user is None:
            return Response(status=401)
        rsn = user.active_rsn()
        if rsn is None:
            return render(200, grid(None))
        try:
            goals = goal_loader.list_by_rsn(rsn.id)
        except Exception:
            return render(500, error_panel("Failed to load goals"))

        def catalog_for(goal: Goal) -> CatalogGoal | None:
            if goal.catalog_id is None:
                return None
            try:
                return catalog_loader.get_by_id(goal.catalog_id)
            except Exception:
                return None

        catalog_goals = [catalog_for(g) for g in goals]
        thresholds = aggregate_thresholds(goals, catalog_goals, rsn.skill_levels)
        return render(200, grid(thresholds))

    return handle