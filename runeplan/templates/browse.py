"""HTML for browsing the catalog: the tabbed page, the goal list and goal cards."""

from __future__ import annotations

from collections.abc import Iterable

from runeplan.catalog import CatalogGoal
from runeplan.goal import GoalType
from runeplan.templates.layout import base

_ESCAPES = str.maketrans(
    {"&": "&amp;", "'": "&#39;", "<": "&lt;", ">": "&gt;", '"': "&#34;"}
)

TABS: tuple[tuple[str, GoalType], ...] = (
    ("Quests", GoalType.QUEST),
    ("Diaries", GoalType.DIARY),
    ("Skills", GoalType.SKILL),
    ("Custom", GoalType.CUSTOM),
)


def _escape(text: str) -> str:
    return str(text).translate(_ESCAPES)


def _type_value(goal_type: GoalType | str) -> str:
    return str(getattr(goal_type, "value", goal_type))


def goal_card(goal: CatalogGoal) -> str:
    """Render one catalog goal with a link to its detail page and an add button."""
    parts = [
        '<div class="bg-stone-800 border border-stone-700 rounded p-4 flex justify-between items-start">'
        f'<div><a href="{_escape("/browse/catalog/" + goal.id)}"'
        f' class="font-semibold text-yellow-300 hover:underline">{_escape(goal.title)}</a> '
    ]
    if goal.description:
        parts.append(f'<p class="text-stone-400 text-sm mt-1">{_escape(goal.description)}</p>')
    vals = '{"catalog_id":"' + goal.id + '"}'
    parts.append(
        '</div><button class="ml-4 shrink-0 px-3 py-1 bg-green-700 hover:bg-green-600 rounded text-sm"'
        ' hx-post="/htmx/goals/activate"'
        f' hx-vals="{_escape(vals)}"'
        ' hx-swap="none"'
        " hx-on:htmx:after-request=\"if(event.detail.successful) window.location='/planner'\">"
        "+ Add</button></div>"
    )
    return "".join(parts)


def goal_list(goals: Iterable[CatalogGoal] | None) -> str:
    """Render the catalog goals as a grid, or a notice when there are none."""
    cards = [goal_card(g) for g in goals or ()]
    if not cards:
        return '<p class="text-stone-400">No goals found.</p>'
    return '<div class="grid gap-3">' + "".join(cards) + "</div>"


def _tab(label: str, goal_type: GoalType, active: GoalType | str) -> str:
    if _type_value(goal_type) == _type_value(active):
        return (
            '<button class="px-4 py-2 rounded bg-yellow-600 text-stone-900 font-semibold">'
            f"{_escape(label)}</button>"
        )
    return (
        '<button class="px-4 py-2 rounded bg-stone-700 hover:bg-stone-600"'
        f' hx-get="{_escape("/browse?type=" + _type_value(goal_type))}"'
        ' hx-target="#goal-list" hx-push-url="true">'
        f"{_escape(label)}</button>"
    )


def browse(active: GoalType | str, goals: Iterable[CatalogGoal] | None) -> str:
    """Render the full browse page with ``active`` as the selected tab."""
    tabs = "".join(_tab(label, goal_type, active) for label, goal_type in TABS)
    body = (
        f'<div class="mb-6 flex gap-2">{tabs}</div>'
        f'<div id="goal-list">{goal_list(goals)}</div>'
    )
    return base("Browse", body)