"""Shared type definitions for RingBot."""

from __future__ import annotations

from enum import Enum


class DaoRole(Enum):
    """DAO membership tiers, each with its own ring decoration."""

    FRENS = "frens"
    REGULARS = "regulars"
    DAOISTS = "daoists"

    @property
    def label(self) -> str:
        return _ROLE_LABELS[self]


_ROLE_LABELS = {
    DaoRole.FRENS: "Fren",
    DaoRole.REGULARS: "Regular",
    DaoRole.DAOISTS: "DAOist",
}

# Highest tier first; a member holding several roles gets the best ring.
ROLE_PRIORITY = (DaoRole.DAOISTS, DaoRole.REGULARS, DaoRole.FRENS)


__all__ = ["DaoRole", "ROLE_PRIORITY"]
