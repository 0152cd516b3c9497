"""HTML fragments for the planner: goal cards, requirement rows and the page."""

from __future__ import annotations

from collections.abc import Iterable

from runeplan.goal import Goal, RequirementProgress
from runeplan.templates.layout import base

_ESCAPES = str.maketrans(
    {"&": "&amp;", "'": "&#39;", "<": "&lt;", ">": "&gt;", '"': "&#34;"}
)


def _escape(text: str) -> str:
    return str(text).translate(_ESCAPES)


def _type_name(goal: Goal) -> str:
    return str(getattr(goal.type, "value", goal.type))


def requirement_row(requirement: RequirementProgress) -> str:
    """Render one requirement as a checkbox list item that toggles itself."""
    rid = requirement.requirement_id
    checked = " checked" if requirement.completed else ""
    span_class = "line-through text-stone-500" if requirement.completed else ""
    vals = '{"goal_id":"' + requirement.goal_id + '"}'
    return (
        f'<li id="{_escape("req-" + rid)}" class="flex items-center gap-2 text-sm">'
        f'<input type="checkbox"{checked}'
        f' hx-post="{_escape("/htmx/requirements/" + rid + "/toggle")}"'
        f' hx-vals="{_escape(vals)}"'
        f' hx-target="{_escape("#req-" + rid)}"'
        ' hx-swap="outerHTML" class="accent-yellow-400"> '
        f'<span class="{_escape(span_class)}">{_escape(requirement.description)}</span></li>'
    )


def goal_card(goal: Goal) -> str:
    """Render a goal card with its completion control and requirement list."""
    parts = [
        f'<div id="{_escape("goal-" + goal.id)}" class="bg-stone-800 border border-stone-700 rounded p-4">'
        '<div class="flex justify-between items-start mb-3"><div>'
        f'<span class="font-semibold text-yellow-300">{_escape(goal.title)}</span> '
        f'<span class="ml-2 text-xs text-stone-400 uppercase">{_escape(_type_name(goal))}</span></div>'
    ]
    if goal.completed:
        parts.append('<span class="text-xs text-green-400">Completed</span>')
    else:
        parts.append(
            '<button class="text-xs px-2 py-1 bg-green-800 hover:bg-green-700 rounded"'
            f' hx-post="{_escape("/htmx/goals/" + goal.id + "/complete")}"'
            f' hx-target="{_escape("#goal-" + goal.id)}"'
            ' hx-swap="outerHTML">Complete</button>'
        )
    parts.append("</div>")
    if goal.requirements:
        parts.append('<ul class="space-y-1">')
        parts.extend(requirement_row(req) for req in goal.requirements)
        parts.append("</ul>")
    parts.append("</div>")
    return "".join(parts)


def planner(goals: Iterable[Goal] | None) -> str:
    """Render the full planner page listing ``goals``."""
    cards = "".join(goal_card(g) for g in goals or ())
    body = (
        '<div class="flex justify-between items-center mb-6">'
        '<h1 class="text-2xl font-bold">My Planner</h1>'
        '<a href="/browse" class="px-3 py-1 bg-stone-700 hover:bg-stone-600 rounded text-sm">'
        "+ Browse Goals</a></div>"
        '<div id="skills-fragment" hx-get="/htmx/skills" hx-trigger="load" class="mb-8"></div>'
        f'<div id="planner-list" class="space-y-4">{cards}</div>'
    )
    return base("Planner", body)