"""Decode uploaded avatars and ring assets, encode the finished PNG."""

from __future__ import annotations

import io
import logging
from pathlib import Path

import discord
from PIL import Image

from .errors import ConfigurationError, UserRecoverableError

logger = logging.getLogger("ringbot.rendering")

AVATAR_FILENAME = "avatar.png"


def decode_avatar(data: bytes) -> Image.Image:
    try:
        with Image.open(io.BytesIO(data)) as img:
            return img.convert("RGBA")
    except OSError as exc:
        logger.info("Rejected avatar upload of %s bytes: %s", len(data), exc)
        raise UserRecoverableError("The attachment is not a readable image") from exc


def load_ring_asset(path: Path) -> Image.Image:
    try:
        with Image.open(path) as img:
            return img.convert("RGBA")
    except OSError as exc:
        logger.warning("Failed to load ring asset %s: %s", path, exc)
        raise ConfigurationError(f"Ring asset {path} could not be loaded") from exc


def encode_png(image: Image.Image) -> bytes:
    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()


def build_avatar_file(image: Image.Image, filename: str = AVATAR_FILENAME) -> discord.File:
    """Wrap the composed avatar as a Discord attachment."""
    return discord.File(io.BytesIO(encode_png(image)), filename=filename)


__all__ = [
    "AVATAR_FILENAME",
    "build_avatar_file",
    "decode_avatar",
    "encode_png",
    "load_ring_asset",
]
