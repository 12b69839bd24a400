"""Map a guild member onto the DAO tier that decides their ring."""

from __future__ import annotations

import logging
from typing import Mapping, Set

from .errors import UserRecoverableError
from .models import ROLE_PRIORITY, DaoRole

logger = logging.getLogger("ringbot.roles")


def member_role_ids(member: object) -> Set[int]:
    return {role.id for role in getattr(member, "roles", None) or []}


def resolve_dao_role(member: object, role_ids: Mapping[DaoRole, int]) -> DaoRole:
    """Return the highest DAO tier the member holds."""
    held = member_role_ids(member)
    for role in ROLE_PRIORITY:
        role_id = role_ids.get(role)
        if role_id is not None and role_id in held:
            return role
    logger.info("Member %s holds no DAO role", getattr(member, "id", "unknown"))
    raise UserRecoverableError("User is not a DAOist, regular or fren")


__all__ = ["member_role_ids", "resolve_dao_role"]
