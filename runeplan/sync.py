"""Synchronising an account's skill XP from the hiscores."""

from __future__ import annotations

from typing import Protocol

from runeplan.skill import XP, Skill


class SyncError(RuntimeError):
    """Raised when fetching or persisting hiscore data fails."""


class HiscoresSource(Protocol):
    """Fetches skill XP for a player name."""

    def fetch(self, rsn: str) -> dict[Skill, XP]: ...


class RSNRepository(Protocol):
    """Persists skill data for a linked account."""

    def update_skill_levels(self, rsn_id: str, levels: dict[Skill, XP]) -> None: ...


class SyncService:
    """Fetches the latest hiscore data and stores it."""

    def __init__(self, hiscores: HiscoresSource, repo: RSNRepository) -> None:
        self._hiscores = hiscores
        self._repo = repo

    def sync_hiscores(self, rsn_id: str, rsn_name: str) -> dict[Skill, XP]:
        """Fetch XP for ``rsn_name``, persist it under ``rsn_id`` and return it."""
        try:
            levels = self._hiscores.fetch(rsn_name)
        except Exception as err:
            raise SyncError(f"sync hiscores: {err}") from err
        try:
            self._repo.update_skill_levels(rsn_id, levels)
        except Exception as err:
            raise SyncError(f"sync hiscores: persist: {err}") from err
        return levels