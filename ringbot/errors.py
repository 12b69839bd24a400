"""Exception types raised while preparing a ringed avatar."""

from __future__ import annotations


class RingError(Exception):
    """Base class for every failure reported back by the ring command."""


class UserRecoverableError(RingError):
    """Raised when the member can fix the problem themselves."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(reason)

    def __str__(self) -> str:
        return f"Error while preparing an avatar: {self.reason}"


class RingCompositionError(RingError):
    """Raised when the compositor receives images it cannot combine."""


class ConfigurationError(RingError):
    """Raised when the environment is missing a required value."""


__all__ = [
    "ConfigurationError",
    "RingCompositionError",
    "RingError",
    "UserRecoverableError",
]
