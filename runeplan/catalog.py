"""Pre-seeded canonical goals (quests, diaries and so on) and their requirements."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from runeplan.goal import GoalType
from runeplan.skill import Level, Skill


@dataclass
class CatalogRequirement:
    """A freeform checklist item on a catalog goal."""

    id: str = ""
    catalog_goal_id: str = ""
    description: str = ""
    created_at: datetime | None = None


@dataclass
class SkillRequirement:
    """A minimum skill level required by a catalog goal."""

    skill: Skill
    level: Level
    catalog_goal_id: str = ""


@dataclass
class ItemRequirement:
    """An item quantity required by a catalog goal."""

    id: str = ""
    catalog_goal_id: str = ""
    item_name: str = ""
    quantity: int = 0


@dataclass
class BossRequirement:
    """A minimum kill count required by a catalog goal."""

    id: str = ""
    catalog_goal_id: str = ""
    boss_name: str = ""
    kc: int = 0


@dataclass
class CatalogGoal:
    """A canonical goal that accounts can activate."""

    id: str = ""
    canonical_key: str = ""
    title: str = ""
    type: GoalType = GoalType.CUSTOM
    description: str = ""
    created_at: datetime | None = None
    requirements: list[CatalogRequirement] = field(default_factory=list)
    skill_reqs: list[SkillRequirement] = field(default_factory=list)
    item_reqs: list[ItemRequirement] = field(default_factory=list)
    boss_reqs: list[BossRequirement] = field(default_factory=list)
    prerequisite_ids: list[str] = field(default_factory=list)