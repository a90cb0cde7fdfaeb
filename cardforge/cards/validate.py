#!/usr/bin/env python3
"""
Cardforge Image Validator

Checks that every file in a directory is a PNG with the expected pixel
dimensions. Only image headers are read.

Usage:
    python -m cardforge.cards.validate <directory> [--kind illustration|card]
"""

import argparse
import logging
import sys
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from cardforge.config import CARD_DIMS, ILLUSTRATION_DIMS, ImageDimensions
from cardforge.errors import (
    CardForgeError,
    DimensionMismatchError,
    InvalidImageFormatError,
    PathNotFoundError,
)

logger = logging.getLogger(__name__)

DIMS_BY_KIND = {
    "illustration": ILLUSTRATION_DIMS,
    "card": CARD_DIMS,
}


def read_dimensions(path: Path) -> tuple[int, int]:
    """Decode only the PNG header and return (width, height)."""
    try:
        with Image.open(path) as im:
            if im.format != "PNG":
                raise InvalidImageFormatError(f"{path.name} is not a PNG file (found {im.format})")
            return im.size
    except (UnidentifiedImageError, OSError) as e:
        raise InvalidImageFormatError(f"{path.name}: {e}") from e


def validate_images(directory: Path | str, dims: ImageDimensions) -> None:
    """Validate every entry of a directory, failing on the first bad one.

    Raises:
        PathNotFoundError: directory does not exist
        InvalidImageFormatError: entry is not a decodable PNG
        DimensionMismatchError: width or height differs from dims
    """
    directory = Path(directory)
    if not directory.is_dir():
        raise PathNotFoundError(f"Directory does not exist: {directory}")

    for entry in sorted(directory.iterdir()):
        if not entry.name.endswith(".png"):
            raise InvalidImageFormatError(
                f"All images in '{directory}' must be valid PNG files: {entry.name}"
            )

        width, height = read_dimensions(entry)
        if (width, height) != dims.as_tuple():
            raise DimensionMismatchError(entry, dims, (width, height))

    logger.info(f"All images in '{directory}' are PNG and satisfy dims ({dims.width} x {dims.height} px)")


def main() -> int:
    parser = argparse.ArgumentParser(description="Validate a directory of PNG images")
    parser.add_argument("directory", help="Directory to validate")
    parser.add_argument("--kind", choices=sorted(DIMS_BY_KIND), default="card",
                        help="Expected image category")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
    try:
        validate_images(Path(args.directory), DIMS_BY_KIND[args.kind])
    except CardForgeError as e:
        logger.error(str(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
