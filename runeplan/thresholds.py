"""Aggregation of skill requirements across an account's active goals."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from runeplan.catalog import CatalogGoal
from runeplan.goal import Goal
from runeplan.skill import XP, Level, Skill


@dataclass(frozen=True)
class Threshold:
    """The highest level required in a skill and how the account measures up."""

    skill: Skill
    required: Level
    current: Level
    current_xp: XP
    xp_needed: int
    satisfied: bool


def aggregate_thresholds(
    goals: Iterable[Goal],
    catalog_goals: Iterable[CatalogGoal | None],
    current: Mapping[Skill, XP],
) -> dict[Skill, Threshold]:
    """Return the per-skill maximum required level over the incomplete goals.

    ``goals`` and ``catalog_goals`` are parallel: each goal is paired with the
    catalog goal at the same position. Goals without a partner (or whose
    partner is None) contribute nothing. Skills absent from ``current`` count
    as 0 XP.
    """
    max_level: dict[Skill, Level] = {}
    for goal, catalog_goal in zip(goals, catalog_goals):
        if goal.completed or catalog_goal is None:
            continue
        for req in catalog_goal.skill_reqs:
            existing = max_level.get(req.skill)
            if existing is None or req.level.value > existing.value:
                max_level[req.skill] = req.level

    thresholds: dict[Skill, Threshold] = {}
    for skill, required in max_level.items():
        current_xp = current.get(skill, XP(0))
        xp_needed = current_xp.xp_remaining(required)
        thresholds[skill] = Threshold(
            skill=skill,
            required=required,
            current=current_xp.to_level(),
            current_xp=current_xp,
            xp_needed=xp_needed,
            satisfied=xp_needed == 0,
        )
    return thresholds