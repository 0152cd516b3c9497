"""Accounts, their linked game names, and the request-context user slot."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from runeplan.skill import XP, Skill

_USER_KEY = "runeplan.user"


@dataclass
class RSN:
    """A linked game account; skill XP is keyed by skill."""

    id: str = ""
    user_id: str = ""
    rsn: str = ""
    skill_levels: dict[Skill, XP] = field(default_factory=dict)
    synced_at: datetime | None = None
    created_at: datetime | None = None


@dataclass
class User:
    """An account with zero or more linked game accounts."""

    id: str = ""
    rsns: list[RSN] = field(default_factory=list)
    created_at: datetime | None = None

    def active_rsn(self) -> RSN | None:
        """Return the first linked account, or None if there is none."""
        return self.rsns[0] if self.rsns else None


def set_user(context: Mapping[str, Any], user: User) -> dict[str, Any]:
    """Return a copy of ``context`` carrying ``user``."""
    return {**context, _USER_KEY: user}


def get_user(context: Mapping[str, Any]) -> User | None:
    """Return the user stored in ``context``, or None if absent."""
    value = context.get(_USER_KEY)
    return value if isinstance(value, User) else None