"""RingBot package providing the ring compositor and the ``/ring`` command."""

from . import commands, compositor, downloads, errors, interactions, models, rendering, roles, settings, utils  # noqa: F401

__all__ = [
    "commands",
    "compositor",
    "downloads",
    "errors",
    "interactions",
    "models",
    "rendering",
    "roles",
    "settings",
    "utils",
]
