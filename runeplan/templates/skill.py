"""HTML for the skill requirement grid."""

from __future__ import annotations

from collections.abc import Mapping

from runeplan.skill import ALL_SKILLS, Skill
from runeplan.thresholds import Threshold

_ESCAPES = str.maketrans(
    {"&": "&amp;", "'": "&#39;", "<": "&lt;", ">": "&gt;", '"': "&#34;"}
)

_BASE_CLASSES = "rounded p-2 text-xs border"
_SATISFIED_CLASSES = "bg-green-900 border-green-700 text-green-100"
_UNSATISFIED_CLASSES = "bg-red-900 border-red-700 text-red-100"


def _escape(text: str) -> str:
    return str(text).translate(_ESCAPES)


def skill_row(threshold: Threshold) -> str:
    """Render one skill's current and required level, with the XP still needed."""
    state = _SATISFIED_CLASSES if threshold.satisfied else _UNSATISFIED_CLASSES
    skill_name = str(getattr(threshold.skill, "value", threshold.skill))
    parts = [
        f'<div class="{_escape(_BASE_CLASSES + " " + state)}">'
        f'<div class="font-semibold capitalize">{_escape(skill_name)}</div>'
        f"<div>{threshold.current.value} / {threshold.required.value}</div>"
    ]
    if not threshold.satisfied:
        parts.append(f'<div class="text-xs opacity-75">{threshold.xp_needed} XP</div>')
    parts.append("</div>")
    return "".join(parts)


def grid(thresholds: Mapping[Skill, Threshold] | None) -> str:
    """Render the grid of thresholds in canonical skill order."""
    thresholds = thresholds or {}
    parts = [
        '<div id="skills-fragment" class="bg-stone-800 border border-stone-700 rounded p-4 mb-6">'
        '<h2 class="text-lg font-semibold mb-3">Skill Requirements</h2>'
    ]
    if not thresholds:
        parts.append('<p class="text-stone-400 text-sm">No skill requirements across active goals.</p>')
    else:
        parts.append('<div class="grid grid-cols-2 sm:grid-cols-3 md:grid-cols-4 gap-2">')
        parts.extend(skill_row(thresholds[s]) for s in ALL_SKILLS if s in thresholds)
        parts.append("</div>")
    parts.append("</div>")
    return "".join(parts)