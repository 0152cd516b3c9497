"""HTML for the catalog goal detail page."""

from __future__ import annotations

from runeplan.catalog import CatalogGoal
from runeplan.templates.layout import base

_ESCAPES = str.maketrans(
    {"&": "&amp;", "'": "&#39;", "<": "&lt;", ">": "&gt;", '"': "&#34;"}
)


def _escape(text: str) -> str:
    return str(text).translate(_ESCAPES)


def _skill_name(skill: object) -> str:
    return str(getattr(skill, "value", skill))


def _skill_section(goal: CatalogGoal) -> str:
    if not goal.skill_reqs:
        return ""
    items = "".join(
        '<li class="flex gap-2 text-sm">'
        f'<span class="capitalize text-stone-300">{_escape(_skill_name(req.skill))}</span> '
        f'<span class="text-yellow-400">{req.level.value}</span></li>'
        for req in goal.skill_reqs
    )
    return (
        '<section class="mb-6"><h2 class="text-lg font-semibold mb-2">Skill Requirements</h2>'
        f'<ul class="space-y-1">{items}</ul></section>'
    )


def _requirement_section(goal: CatalogGoal) -> str:
    if not goal.requirements:
        return ""
    items = "".join(f"<li>{_escape(req.description)}</li>" for req in goal.requirements)
    return (
        '<section class="mb-6"><h2 class="text-lg font-semibold mb-2">Requirements</h2>'
        f'<ul class="space-y-1 list-disc list-inside text-stone-300">{items}</ul></section>'
    )


def detail(goal: CatalogGoal) -> str:
    """Render the full detail page for one catalog goal."""
    description = (
        f'<p class="text-stone-300 mb-6">{_escape(goal.description)}</p>'
        if goal.description
        else ""
    )
    vals = '{"catalog_id":"' + goal.id + '"}'
    body = (
        '<div class="mb-4"><a href="/browse" class="text-stone-400 hover:text-stone-200 text-sm">'
        "&larr; Back to Browse</a></div>"
        f'<h1 class="text-2xl font-bold text-yellow-300 mb-2">{_escape(goal.title)}</h1>'
        f"{description} {_skill_section(goal)} {_requirement_section(goal)} "
        '<button class="px-4 py-2 bg-green-700 hover:bg-green-600 rounded font-semibold"'
        ' hx-post="/htmx/goals/activate"'
        f' hx-vals="{_escape(vals)}"'
        ' hx-target="#planner-list">Add to Planner</button>'
    )
    return base(goal.title, body)