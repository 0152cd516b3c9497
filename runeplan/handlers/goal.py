"""Request handlers for the planner page and goal actions."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from werkzeug.exceptions import HTTPException
from werkzeug.utils import redirect
from werkzeug.wrappers import Request, Response

from runeplan.goal import RequirementProgress
from runeplan.goal_service import GoalService
from runeplan.templates.goal import goal_card, planner, requirement_row
from runeplan.templates.layout import error_panel, render
from runeplan.user import get_user

Handler = Callable[..., Response]


def _form_value(request: Request, key: str) -> str:
    """Return a form field, preferring the body over the query string."""
    value = request.form.get(key)
    if value is None:
        value = request.args.get(key, "")
    return value


def _parse_form(request: Request) -> bool:
    try:
        _ = request.form
    except HTTPException:
        return False
    return True


def planner_handler(service: GoalService) -> Handler:
    """Return a handler rendering the planner page for the current account."""

    def handle(request: Request, **params: Any) -> Response:
        user = get_user(request.environ)
        if user is None:
            return redirect("/", code=302)
        rsn = user.active_rsn()
        if rsn is None:
            return render(200, planner(None))
        try:
            goals = service.list(rsn.id)
        except Exception:
            return render(500, error_panel("Failed to load goals"))
        return render(200, planner(goals))

    return handle


def activate_goal_handler(service: GoalService) -> Handler:
    """Return a handler activating the posted catalog goal for the current account."""

    def handle(request: Request, **params: Any) -> Response:
        user = get_user(request.environ)
        if user is None:
            response = Response(status=401)
            response.headers["HX-Redirect"] = "/"
            return response
        rsn = user.active_rsn()
        if rsn is None:
            return render(400, error_panel("No RSN linked"))
        if not _parse_form(request):
            return render(400, error_panel("Invalid request"))
        catalog_id = _form_value(request, "catalog_id")
        try:
            goal = service.activate(rsn.id, catalog_id)
        except Exception:
            return render(500, error_panel("Failed to activate goal"))
        return render(200, goal_card(goal))

    return handle


def complete_goal_handler(service: GoalService) -> Handler:
    """Return a handler completing the goal named by the ``id`` route value."""

    def handle(request: Request, **params: Any) -> Response:
        goal_id = params.get("id", "")
        try:
            service.complete(goal_id)
        except Exception:
            return render(500, error_panel("Failed to complete goal"))
        user = get_user(request.environ)
        rsn = user.active_rsn() if user is not None else None
        if rsn is None:
            return Response(status=200)
        try:
            goals = service.list(rsn.id)
        except Exception:
            goals = []
        for goal in goals:
            if goal.id == goal_id:
                return render(200, goal_card(goal))
        return Response(status=200)

    return handle


def toggle_requirement_handler(service: GoalService) -> Handler:
    """Return a handler toggling the requirement named by the ``id`` route value."""

    def handle(request: Request, **params: Any) -> Response:
        requirement_id = params.get("id", "")
        if not _parse_form(request):
            return render(400, error_panel("Invalid request"))
        goal_id = _form_value(request, "goal_id")
        try:
            completed = service.toggle_requirement(goal_id, requirement_id)
        except Exception:
            return render(500, error_panel("Failed to toggle"))
        row = requirement_row(
            RequirementProgress(
                goal_id=goal_id, requirement_id=requirement_id, completed=completed
            )
        )
        return render(200, row)

    return handle