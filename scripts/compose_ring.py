"""Compose an avatar and a ring image on disk, without Discord.

Handy for checking new ring art before pointing CHAOSRING_* at it:

    python scripts/compose_ring.py avatar.png assets/ring_daoists.png -o out.png
"""

import argparse
import logging
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parent.parent
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from ringbot.compositor import detect_ring_width, normalize_ring, overlay_ring  # noqa: E402
from ringbot.errors import RingError  # noqa: E402
from ringbot.rendering import decode_avatar, encode_png, load_ring_asset  # noqa: E402


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Overlay a ring decoration onto a square avatar.")
    parser.add_argument("avatar", type=Path, help="Square avatar image")
    parser.add_argument("ring", type=Path, help="Square ring image with a transparent centre")
    parser.add_argument("-o", "--output", type=Path, default=Path("avatar.png"), help="Where to write the PNG")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log compositor details")
    return parser.parse_args(argv)


def main(argv=None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    if not args.avatar.exists():
        raise SystemExit(f"{args.avatar} not found.")

    try:
        avatar = decode_avatar(args.avatar.read_bytes())
        ring = load_ring_asset(args.ring)
        width = detect_ring_width(normalize_ring(ring, avatar.width))
        composed = overlay_ring(avatar, ring)
    except RingError as exc:
        raise SystemExit(str(exc))

    args.output.write_bytes(encode_png(composed))
    print(f"Ring width {width}px, wrote {composed.width}x{composed.height} image to {args.output}")


if __name__ == "__main__":
    main()
