"""Ephemeral replies for the ring slash command."""

from __future__ import annotations

import logging

import discord

logger = logging.getLogger("ringbot.interactions")

PREPARING_MESSAGE = "Preparing your avatar..."


class RingInteractionResponder:
    """Acknowledge a slash interaction, then deliver the result as a follow-up.

    Every message is ephemeral. Delivery failures are logged, not raised.
    """

    def __init__(self, interaction: discord.Interaction):
        self.interaction = interaction
        self._acknowledged = False

    @property
    def acknowledged(self) -> bool:
        return self._acknowledged or self.interaction.response.is_done()

    async def acknowledge(self, content: str = PREPARING_MESSAGE) -> None:
        if self.acknowledged:
            return
        try:
            await self.interaction.response.send_message(content, ephemeral=True)
            self._acknowledged = True
        except discord.HTTPException as exc:
            logger.warning("Cannot respond to slash command: %s", exc)

    async def send_attachment(self, file: discord.File) -> None:
        try:
            await self.interaction.followup.send(file=file, ephemeral=True)
        except discord.HTTPException as exc:
            logger.warning("Cannot send back an updated avatar: %s", exc)

    async def send_failure(self, content: str) -> None:
        try:
            await self.interaction.followup.send(content, ephemeral=True)
        except discord.HTTPException as exc:
            logger.warning("Cannot report ring failure: %s", exc)

    def __repr__(self) -> str:
        return (
            f"<RingInteractionResponder guild={getattr(self.interaction.guild, 'id', None)} "
            f"user={getattr(self.interaction.user, 'id', None)}>"
        )


__all__ = ["PREPARING_MESSAGE", "RingInteractionResponder"]
