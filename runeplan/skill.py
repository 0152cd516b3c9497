"""Skills, experience points and levels, with the experience table."""

from __future__ import annotations

import math
from bisect import bisect_right
from dataclasses import dataclass
from enum import Enum


class InvalidXPError(ValueError):
    """Raised for a negative experience value."""

    def __init__(self, message: str = "xp cannot be negative") -> None:
        super().__init__(message)


class InvalidLevelError(ValueError):
    """Raised for a level outside the supported range."""

    def __init__(self, message: str = "level must be between 1 and 99") -> None:
        super().__init__(message)


class InvalidSkillError(ValueError):
    """Raised for an unrecognised skill name."""

    def __init__(self, message: str = "invalid skill name") -> None:
        super().__init__(message)


class Skill(str, Enum):
    """A skill, valued by its lower-case name. Definition order is canonical."""

    ATTACK = "attack"
    STRENGTH = "strength"
    DEFENCE = "defence"
    RANGED = "ranged"
    PRAYER = "prayer"
    MAGIC = "magic"
    RUNECRAFT = "runecraft"
    HITPOINTS = "hitpoints"
    CRAFTING = "crafting"
    MINING = "mining"
    SMITHING = "smithing"
    FISHING = "fishing"
    COOKING = "cooking"
    FIREMAKING = "firemaking"
    WOODCUTTING = "woodcutting"
    AGILITY = "agility"
    HERBLORE = "herblore"
    THIEVING = "thieving"
    FLETCHING = "fletching"
    SLAYER = "slayer"
    FARMING = "farming"
    CONSTRUCTION = "construction"
    HUNTER = "hunter"
    SAILING = "sailing"

    def is_valid(self) -> bool:
        """Return True if this is a recognised skill."""
        return self.value in _SKILL_NAMES

    def __str__(self) -> str:
        return self.value


ALL_SKILLS: tuple[Skill, ...] = tuple(Skill)
_SKILL_NAMES = frozenset(s.value for s in ALL_SKILLS)


def is_valid_skill(name: str) -> bool:
    """Return True if ``name`` (a string or Skill) names a recognised skill."""
    return isinstance(name, str) and str(name) in _SKILL_NAMES


MAX_XP = 200_000_000
MAX_LEVEL = 126

# Minimum XP for each level; the index is the level, index 0 is a placeholder.
_XP_TABLE: tuple[int, ...] = (
    0,
    0, 83, 174, 276, 388, 512, 650, 801, 969, 1154,
    1358, 1584, 1833, 2107, 2411, 2746, 3115, 3523, 3973, 4470,
    5018, 5624, 6291, 7028, 7842, 8740, 9730, 10824, 12031, 13363,
    14833, 16456, 18247, 20224, 22406, 24815, 27473, 30408, 33648, 37224,
    41171, 45529, 50339, 55649, 61512, 67983, 75127, 83014, 91721, 101333,
    111945, 123660, 136594, 150872, 166636, 184040, 203254, 224466, 247886, 273742,
    302288, 333804, 368599, 407015, 449428, 496254, 547953, 605032, 668051, 737627,
    814445, 899257, 992895, 1096278, 1210421, 1336443, 1475581, 1629200, 1798808, 1986068,
    2192818, 2421087, 2673114, 2951373, 3258594, 3597792, 3972294, 4385776, 4842295, 5346332,
    5902831, 6517253, 7195629, 7944614, 8771558, 9684577, 10692629, 11805606, 13034431,
    # Virtual levels 100-126
    14391160, 15889109, 17542976, 19368992, 21385073, 23611006, 26068632, 28782069,
    31777943, 35085654, 38737661, 42769801, 47221641, 52136869, 57563718, 63555443,
    70170840, 77474828, 85539082, 94442737, 104273167, 115126838, 127110260,
    140341028, 154948977, 171077457, 188884740,
)


def level_for_xp(xp: int) -> int:
    """Return the (virtual) level for ``xp``: negatives count as 0, capped at 126."""
    xp = max(xp, 0)
    if xp >= MAX_XP:
        return MAX_LEVEL
    return bisect_right(_XP_TABLE, xp, 1, MAX_LEVEL + 1) - 1


def xp_range_for_level(level: int) -> tuple[int, int]:
    """Return the inclusive (min, max) XP of ``level``.

    The maximum of level 126 is the XP cap. Raises InvalidLevelError for a
    level outside 1..126.
    """
    if level < 1 or level > MAX_LEVEL:
        raise InvalidLevelError()
    low = _XP_TABLE[level]
    high = MAX_XP if level == MAX_LEVEL else _XP_TABLE[level + 1] - 1
    return low, high


def xp_for_level_formula(level: int) -> int:
    """Minimum XP for ``level`` by the closed formula the table is built from."""
    total = sum(math.floor(l + 300.0 * 2.0 ** (l / 7.0)) for l in range(1, level))
    return math.floor(total / 4.0)


@dataclass(frozen=True, order=True)
class Level:
    """A skill level between 1 and 126 (levels above 99 are virtual)."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 1 or self.value > MAX_LEVEL:
            raise InvalidLevelError()

    def to_xp(self) -> XP:
        """Return the minimum XP needed to reach this level."""
        if self.value <= 1:
            return XP(0)
        return XP(_XP_TABLE[self.value])


@dataclass(frozen=True, order=True)
class XP:
    """A non-negative amount of experience points."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise InvalidXPError()

    def to_level(self) -> Level:
        """Return the highest level whose threshold this XP reaches."""
        return Level(level_for_xp(self.value))

    def xp_remaining(self, target: Level) -> int:
        """XP still needed to reach ``target``; 0 if already there."""
        return max(target.to_xp().value - self.value, 0)