"""Request handlers for browsing the catalog."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from werkzeug.wrappers import Request, Response

from runeplan.catalog_service import CatalogService
from runeplan.goal import GoalType, is_valid_goal_type
from runeplan.templates.browse import browse, goal_list
from runeplan.templates.detail import detail
from runeplan.templates.layout import error_panel, render

Handler = Callable[..., Response]


def browse_handler(service: CatalogService) -> Handler:
    """Return a handler for the browse page; HTMX requests get only the goal list."""

    def handle(request: Request, **params: Any) -> Response:
        type_param = request.args.get("type", "")
        goal_type = GoalType(type_param) if is_valid_goal_type(type_param) else GoalType.QUEST
        try:
            goals = service.list_by_type(goal_type)
        except Exception:
            return render(500, error_panel("Failed to load goals"))
        if request.headers.get("HX-Request") == "true":
            return render(200, goal_list(goals))
        return render(200, browse(goal_type, goals))

    return handle


def catalog_detail_handler(service: CatalogService) -> Handler:
    """Return a handler for the detail page of the goal named by the ``id`` route value."""

    def handle(request: Request, **params: Any) -> Response:
        goal_id = params.get("id", "")
        try:
            goal = service.get_by_id(goal_id)
        except Exception:
            return render(404, error_panel("Goal not found"))
        return render(200, detail(goal))

    return handle