#!/usr/bin/env python3
"""
Base card compositor for cardforge.

Lays the illustration over the template at a fixed offset. Text is drawn
afterwards by cardforge.cards.render on the same in-memory image.
"""
import argparse
import logging
import sys
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from cardforge.config import ILLUSTRATION_OFFSET
from cardforge.errors import CardForgeError, CardIOError, InvalidImageFormatError, PathNotFoundError

logger = logging.getLogger(__name__)

# zlib level used for every card written to disk
PNG_COMPRESS_LEVEL = 9


def load_png(path: Path | str) -> Image.Image:
    """Fully decode a PNG file into an RGBA image."""
    path = Path(path)
    if not path.exists():
        raise PathNotFoundError(f"Failed to open: {path}")
    try:
        with Image.open(path) as im:
            if im.format != "PNG":
                raise InvalidImageFormatError(f"{path.name} is not a PNG file (found {im.format})")
            return im.convert("RGBA")
    except (UnidentifiedImageError, OSError) as e:
        raise InvalidImageFormatError(f"Failed to decode {path}: {e}") from e


def compose_card(
    template: Image.Image,
    illustration: Image.Image,
    offset: tuple[int, int] = ILLUSTRATION_OFFSET,
) -> Image.Image:
    """
    Composite an illustration onto a template.

    Args:
        template: Background template; sets the card size
        illustration: Artwork drawn "over" the template using its alpha
        offset: Top-left position of the illustration on the card

    Returns:
        New RGBA image the size of the template. No scaling is applied;
        illustration pixels past the template edge are clipped.
    """
    card = Image.new("RGBA", template.size)
    # Template replaces the empty canvas outright
    card.paste(template.convert("RGBA"), (0, 0))
    card.alpha_composite(illustration.convert("RGBA"), dest=offset)
    return card


def save_card(card: Image.Image, out_path: Path | str) -> Path:
    """Write a card as PNG at maximum compression."""
    out_path = Path(out_path)
    try:
        out_path.parent.mkdir(parents=True, exist_ok=True)
        card.save(out_path, "PNG", compress_level=PNG_COMPRESS_LEVEL)
    except (OSError, ValueError) as e:
        raise CardIOError(f"Failed to write {out_path}: {e}") from e
    return out_path


def main() -> int:
    parser = argparse.ArgumentParser(description="Composite an illustration onto a card template")
    parser.add_argument("--template", required=True, help="Path to template PNG")
    parser.add_argument("--art", required=True, help="Path to illustration PNG")
    parser.add_argument("--out", required=True, help="Output path for the base card PNG")

    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
    try:
        card = compose_card(load_png(args.template), load_png(args.art))
        save_card(card, args.out)
    except CardForgeError as e:
        logger.error(str(e))
        return 1

    print(f"Generated: {args.out}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
