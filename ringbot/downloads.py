"""Fetch uploaded attachments from Discord's CDN."""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

import aiohttp

from .utils import int_from_env

logger = logging.getLogger("ringbot.downloads")

DOWNLOAD_TIMEOUT_SECONDS = int_from_env("RINGBOT_DOWNLOAD_TIMEOUT", 10)


async def fetch_attachment_bytes(url: str, *, timeout: Optional[float] = None) -> Optional[bytes]:
    if not url:
        return None
    total = DOWNLOAD_TIMEOUT_SECONDS if timeout is None else timeout
    try:
        async with aiohttp.ClientSession() as session:
            async with session.get(url, timeout=aiohttp.ClientTimeout(total=total)) as resp:
                if resp.status != 200:
                    logger.warning("Attachment fetch failed (%s): %s", resp.status, url)
                    return None
                return await resp.read()
    except asyncio.TimeoutError:
        logger.warning("Attachment fetch timed out after %ss: %s", total, url)
        return None
    except aiohttp.ClientError as exc:
        logger.warning("Attachment fetch error for %s: %s", url, exc)
        return None


__all__ = ["DOWNLOAD_TIMEOUT_SECONDS", "fetch_attachment_bytes"]
