"""Environment-backed settings for the ring command."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Mapping, Optional

from .errors import ConfigurationError
from .models import DaoRole
from .utils import parse_snowflake, path_from_env, require_env

RING_PATH_VARIABLES: Dict[DaoRole, str] = {
    DaoRole.FRENS: "CHAOSRING_FRENS",
    DaoRole.REGULARS: "CHAOSRING_REGULARS",
    DaoRole.DAOISTS: "CHAOSRING_DAOISTS",
}

ROLE_ID_VARIABLES: Dict[DaoRole, str] = {
    DaoRole.FRENS: "DAO_ROLE_FREN",
    DaoRole.REGULARS: "DAO_ROLE_REGULAR",
    DaoRole.DAOISTS: "DAO_ROLE_DAOIST",
}


@dataclass(frozen=True)
class RingSettings:
    ring_paths: Mapping[DaoRole, Path]
    role_ids: Mapping[DaoRole, int]

    def ring_path_for(self, role: DaoRole) -> Path:
        return self.ring_paths[role]


def load_ring_settings(environ: Optional[Mapping[str, str]] = None) -> RingSettings:
    """Read ring asset paths and DAO role ids from the environment.

    Raises ``ConfigurationError`` on the first missing or malformed value.
    """
    role_ids = {
        role: parse_snowflake(variable, require_env(variable, environ))
        for role, variable in ROLE_ID_VARIABLES.items()
    }
    ring_paths: Dict[DaoRole, Path] = {}
    for role, variable in RING_PATH_VARIABLES.items():
        path = path_from_env(variable, environ)
        if path is None:
            raise ConfigurationError(f"No variable with name {variable} found in the environment")
        ring_paths[role] = path
    return RingSettings(ring_paths=ring_paths, role_ids=role_ids)


__all__ = [
    "RING_PATH_VARIABLES",
    "ROLE_ID_VARIABLES",
    "RingSettings",
    "load_ring_settings",
]
