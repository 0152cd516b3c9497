"""Client for the hiscores lite CSV endpoint."""

from __future__ import annotations

import re
from collections.abc import Iterable
from datetime import timedelta

import requests

from runeplan.skill import XP, Skill

# The order the hiscores endpoint lists skills in, one line each.
HISCORE_SKILL_ORDER: tuple[Skill, ...] = (
    Skill.ATTACK, Skill.DEFENCE, Skill.STRENGTH, Skill.HITPOINTS,
    Skill.RANGED, Skill.PRAYER, Skill.MAGIC, Skill.COOKING,
    Skill.WOODCUTTING, Skill.FLETCHING, Skill.FISHING, Skill.FIREMAKING,
    Skill.CRAFTING, Skill.SMITHING, Skill.MINING, Skill.HERBLORE,
    Skill.AGILITY, Skill.THIEVING, Skill.SLAYER, Skill.FARMING,
    Skill.RUNECRAFT, Skill.HUNTER, Skill.CONSTRUCTION, Skill.SAILING,
)

DEFAULT_TIMEOUT = 10.0

_INTEGER = re.compile(r"[+-]?[0-9]+")


class HiscoresError(RuntimeError):
    """Raised when the hiscores cannot be fetched."""

    def __init__(self, message: str, status: int | None = None) -> None:
        super().__init__(message)
        self.status = status


def parse_hiscores(lines: Iterable[str]) -> dict[Skill, XP]:
    """Map ``rank,level,xp`` lines onto skills in hiscore order.

    Lines that are short, non-numeric or negative are skipped but still
    consume their skill's position; lines past the last skill are ignored.
    """
    result: dict[Skill, XP] = {}
    for skill, line in zip(HISCORE_SKILL_ORDER, lines):
        parts = line.rstrip("\r\n").split(",")
        if len(parts) < 3 or not _INTEGER.fullmatch(parts[2]):
            continue
        value = int(parts[2])
        if value < 0:
            continue
        result[skill] = XP(value)
    return result


class HiscoresClient:
    """Fetches skill XP from a hiscores endpoint."""

    def __init__(self, base_url: str, timeout: float | timedelta = 0) -> None:
        if isinstance(timeout, timedelta):
            timeout = timeout.total_seconds()
        self.base_url = base_url
        self.timeout = float(timeout) if timeout else DEFAULT_TIMEOUT

    def fetch(self, rsn: str) -> dict[Skill, XP]:
        """Return XP per skill for ``rsn``; raise HiscoresError on failure."""
        url = f"{self.base_url}?player={rsn}"
        try:
            response = requests.get(url, timeout=self.timeout)
        except requests.RequestException as err:
            raise HiscoresError(f'hiscores: fetch "{rsn}": {err}') from err
        with response:
            if response.status_code != 200:
                raise HiscoresError(
                    f'hiscores: fetch "{rsn}": HTTP {response.status_code}',
                    status=response.status_code,
                )
            return parse_hiscores(response.text.splitlines())