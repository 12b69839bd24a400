"""Command logic behind ``/ring``; the slash registration lives in ``bot.py``."""

from __future__ import annotations

import asyncio
import logging

import discord

from .compositor import overlay_ring
from .downloads import fetch_attachment_bytes
from .errors import ConfigurationError, RingError, UserRecoverableError
from .interactions import RingInteractionResponder
from .rendering import build_avatar_file, decode_avatar, load_ring_asset
from .roles import resolve_dao_role
from .settings import RingSettings, load_ring_settings

logger = logging.getLogger("ringbot.commands")

RING_COMMAND_NAME = "ring"
RING_COMMAND_DESCRIPTION = "Overlay a ChaosDAO ring to an avatar"
AVATAR_OPTION_DESCRIPTION = "A square profile picture"

GENERIC_FAILURE_MESSAGE = "Something went wrong while preparing your avatar. Please try again later."
GUILD_ONLY_MESSAGE = "This command can only be used inside a server."


async def run_ring_command(
    member: object,
    avatar_bytes: bytes,
    settings: RingSettings,
) -> discord.File:
    """Build the ringed ``avatar.png`` for ``member`` from their upload."""
    role = resolve_dao_role(member, settings.role_ids)
    logger.info("Preparing %s ring for member %s", role.label, getattr(member, "id", "unknown"))
    ring = load_ring_asset(settings.ring_path_for(role))
    avatar = decode_avatar(avatar_bytes)
    composed = await asyncio.to_thread(overlay_ring, avatar, ring)
    return build_avatar_file(composed)


def describe_failure(exc: BaseException) -> str:
    """Return the text shown to the member for a failed ``/ring`` call."""
    if isinstance(exc, UserRecoverableError):
        return str(exc)
    if isinstance(exc, ConfigurationError):
        return "The ring command is not configured correctly. Please contact staff."
    if isinstance(exc, RingError):
        return f"Error while preparing an avatar: {exc}"
    return GENERIC_FAILURE_MESSAGE


async def handle_ring_interaction(interaction: discord.Interaction, avatar: discord.Attachment) -> None:
    """Acknowledge, build the ringed avatar and reply with it or with the failure."""
    responder = RingInteractionResponder(interaction)
    await responder.acknowledge()

    member = interaction.user
    if interaction.guild is None or member is None:
        logger.info("No member info found for ring interaction %s", getattr(interaction, "id", None))
        await responder.send_failure(GUILD_ONLY_MESSAGE)
        return

    try:
        avatar_bytes = await fetch_attachment_bytes(avatar.url)
        if avatar_bytes is None:
            raise UserRecoverableError("The attachment could not be downloaded")
        settings = load_ring_settings()
        avatar_file = await run_ring_command(member, avatar_bytes, settings)
    except RingError as exc:
        logger.warning("Failed to create avatar for %s: %s", member.id, exc)
        await responder.send_failure(describe_failure(exc))
        return
    except Exception as exc:
        logger.exception("Unexpected failure while creating avatar for %s", member.id)
        await responder.send_failure(describe_failure(exc))
        return

    await responder.send_attachment(avatar_file)


__all__ = [
    "AVATAR_OPTION_DESCRIPTION",
    "GENERIC_FAILURE_MESSAGE",
    "GUILD_ONLY_MESSAGE",
    "RING_COMMAND_DESCRIPTION",
    "RING_COMMAND_NAME",
    "describe_failure",
    "handle_ring_interaction",
    "run_ring_command",
]
