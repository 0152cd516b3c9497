"""Per-account goals and their requirement progress."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from runeplan.skill import (
    XP,
    InvalidSkillError,
    Level,
    Skill,
    is_valid_skill,
    xp_range_for_level,
)


class GoalType(str, Enum):
    """What kind of achievement a goal represents."""

    QUEST = "quest"
    DIARY = "diary"
    SKILL = "skill"
    BOSS_KC = "boss_kc"
    ITEM = "item"
    CUSTOM = "custom"


def is_valid_goal_type(value: str) -> bool:
    """Return True if ``value`` names a goal type."""
    try:
        GoalType(value)
    except ValueError:
        return False
    return True


@dataclass(frozen=True)
class SkillThreshold:
    """The minimum level (and its XP) required in a skill."""

    skill: Skill
    xp: XP
    level: Level

    def is_satisfied_by_level(self, current: Level) -> bool:
        return current.value >= self.level.value

    def is_satisfied_by_xp(self, current: XP) -> bool:
        return current.value >= self.xp.value


def new_skill_level_threshold(skill: Skill | str, level: int) -> SkillThreshold:
    """Build a threshold for ``level`` in ``skill``.

    Raises InvalidSkillError or InvalidLevelError on bad input.
    """
    if not is_valid_skill(skill):
        raise InvalidSkillError()
    lvl = Level(level)
    min_xp, _ = xp_range_for_level(level)
    return SkillThreshold(skill=Skill(skill), xp=XP(min_xp), level=lvl)


@dataclass
class RequirementProgress:
    """A user's completion state for one catalog requirement."""

    goal_id: str = ""
    requirement_id: str = ""
    description: str = ""
    completed: bool = False
    completed_at: datetime | None = None


@dataclass
class CustomRequirement:
    """A freeform requirement a user added to a goal."""

    id: str = ""
    goal_id: str = ""
    description: str = ""
    completed: bool = False
    completed_at: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass
class Goal:
    """A goal activated for one account, optionally tied to a catalog goal."""

    id: str = ""
    rsn_id: str = ""
    catalog_id: str | None = None
    title: str = ""
    type: GoalType = GoalType.CUSTOM
    notes: str = ""
    completed: bool = False
    completed_at: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    requirements: list[RequirementProgress] = field(default_factory=list)
    custom_requirements: list[CustomRequirement] = field(default_factory=list)

    def complete(self, at: datetime) -> None:
        """Mark the goal completed at ``at``."""
        self.completed = True
        self.completed_at = at
        self.updated_at = at