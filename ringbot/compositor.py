"""Compose an avatar inside a ring decoration and clip the result to a disc.

All helpers operate on Pillow ``RGBA`` images and are side-effect free apart
from logging, except :func:`mask_outside_circle` which edits its canvas in place.
Images are expected to be square; one side is enough to describe them.
"""

from __future__ import annotations

import logging
import math
from typing import Tuple

from PIL import Image, ImageChops, ImageOps

from .errors import RingCompositionError

logger = logging.getLogger("ringbot.compositor")


def normalize_ring(ring: Image.Image, avatar_side: int) -> Image.Image:
    """Shrink the ring to the avatar size; smaller rings are returned as-is."""
    if ring.width <= avatar_side:
        return ring
    return ImageOps.fit(ring, (avatar_side, avatar_side), Image.NEAREST)


def detect_ring_width(ring: Image.Image) -> int:
    """Count opaque pixels on the centre column of the ring's top half."""
    alpha = ring.getchannel("A")
    x = ring.width // 2
    return sum(1 for y in range(ring.height // 2) if alpha.getpixel((x, y)) != 0)


def opening_side(ring_side: int, width: int) -> int:
    """Return the side of the ring's inner opening."""
    if width <= 0:
        raise RingCompositionError("No opaque ring band found; the ring image looks malformed.")
    if 2 * width >= ring_side:
        raise RingCompositionError(
            f"Ring band of {width}px leaves no opening in a {ring_side}px ring."
        )
    return ring_side - 2 * width


def fit_avatar(avatar: Image.Image, side: int) -> Image.Image:
    if side <= 0:
        raise RingCompositionError(f"Cannot fit the avatar into a {side}px opening.")
    return ImageOps.fit(avatar, (side, side), Image.NEAREST, centering=(0.5, 0.5))


def compose(ring: Image.Image, fitted_avatar: Image.Image, width: int) -> Image.Image:
    """Paste the avatar at ``(width, width)`` and lay the ring's opaque pixels over it.

    Opaque ring pixels replace whatever is underneath; there is no blending.
    """
    side = ring.width
    if width < 0 or width + fitted_avatar.width > side or width + fitted_avatar.height > side:
        raise RingCompositionError(
            f"Avatar of {fitted_avatar.width}x{fitted_avatar.height} at offset {width} "
            f"does not fit a {side}px canvas."
        )
    canvas = Image.new("RGBA", (side, side), (0, 0, 0, 0))
    canvas.paste(fitted_avatar, (width, width))
    ring_mask = ring.getchannel("A").point(lambda value: 255 if value else 0)
    canvas.paste(ring, (0, 0), ring_mask)
    return canvas


def _row_span(width: int, radius: int, cx: float, dy: float) -> Tuple[int, int]:
    """Return the first and last column of a row lying within ``radius``."""
    reach = int(math.sqrt(radius * radius - dy * dy))
    left = int(cx) - reach
    right = int(cx) + reach
    # Settle the float estimate against the exact hypot rule.
    while left > 0 and math.hypot(left - 1 - cx, dy) <= radius:
        left -= 1
    while math.hypot(left - cx, dy) > radius:
        left += 1
    while right < width - 1 and math.hypot(right + 1 - cx, dy) <= radius:
        right += 1
    while math.hypot(right - cx, dy) > radius:
        right -= 1
    return max(left, 0), min(right, width - 1)


def disc_mask(width: int, height: int) -> Image.Image:
    """``L`` mask that is 255 within ``width // 2`` of the centre and 0 beyond it."""
    radius = width // 2
    cx = float(width // 2)
    cy = float(height // 2)
    mask = Image.new("L", (width, height), 0)
    for y in range(height):
        dy = y - cy
        if abs(dy) > radius:
            continue
        left, right = _row_span(width, radius, cx, dy)
        if left <= right:
            mask.paste(255, (left, y, right + 1, y + 1))
    return mask


def mask_outside_circle(canvas: Image.Image) -> Image.Image:
    """Zero the alpha of every pixel outside the inscribed circle, in place."""
    mask = disc_mask(canvas.width, canvas.height)
    canvas.putalpha(ImageChops.darker(canvas.getchannel("A"), mask))
    return canvas


def _require_square(label: str, image: Image.Image) -> None:
    if image.width != image.height:
        raise RingCompositionError(
            f"The {label} must be square, got {image.width}x{image.height}."
        )


def overlay_ring(avatar: Image.Image, ring: Image.Image) -> Image.Image:
    """Return a new disc-shaped image of ``avatar`` framed by ``ring``.

    Raises:
        RingCompositionError: if an input is not square or the ring has no
            usable opening.
    """
    avatar = avatar.convert("RGBA")
    ring = ring.convert("RGBA")
    logger.info(
        "Compositing avatar %sx%s with ring %sx%s",
        avatar.width,
        avatar.height,
        ring.width,
        ring.height,
    )
    _require_square("avatar", avatar)
    _require_square("ring", ring)

    ring = normalize_ring(ring, avatar.width)
    width = detect_ring_width(ring)
    fitted = fit_avatar(avatar, opening_side(ring.width, width))
    canvas = compose(ring, fitted, width)
    logger.debug("Ring width %spx, avatar fitted to %spx", width, fitted.width)
    return mask_outside_circle(canvas)


__all__ = [
    "compose",
    "detect_ring_width",
    "disc_mask",
    "fit_avatar",
    "mask_outside_circle",
    "normalize_ring",
    "opening_side",
    "overlay_ring",
]
