"""Font discovery and loading.

FontIndex scans the OS font directories; FontResolver turns a font name
into parsed FreeType data the renderer can draw with.
"""

import io
import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path

from PIL import ImageFont

from cardforge.config import extra_font_dirs
from cardforge.errors import FontNotFoundError, FontUnparsableError, FontUnreadableError

logger = logging.getLogger(__name__)

# Ordered by preference when several files share a base name
FONT_EXTENSIONS = (".ttf", ".otf", ".ttc")


def system_font_dirs() -> list[Path]:
    """Per-platform user and system font directories."""
    home = Path.home()
    if sys.platform.startswith("win"):
        dirs = [Path(os.environ.get("WINDIR", r"C:\Windows")) / "Fonts"]
        local = os.environ.get("LOCALAPPDATA")
        if local:
            dirs.append(Path(local) / "Microsoft" / "Windows" / "Fonts")
        return dirs
    if sys.platform == "darwin":
        return [
            home / "Library" / "Fonts",
            Path("/Library/Fonts"),
            Path("/System/Library/Fonts"),
        ]
    return [
        home / ".fonts",
        home / ".local" / "share" / "fonts",
        Path("/usr/local/share/fonts"),
        Path("/usr/share/fonts"),
    ]


class FontIndex:
    """Font discovery over a list of directories (searched recursively)."""

    def __init__(self, directories: list[Path] | None = None):
        if directories is None:
            directories = extra_font_dirs() + system_font_dirs()
        self.directories = [Path(d) for d in directories]

    def list(self) -> list[Path]:
        """Return every font file found, in directory order."""
        fonts = []
        for directory in self.directories:
            if not directory.is_dir():
                continue
            for path in sorted(directory.rglob("*")):
                if path.suffix.lower() in FONT_EXTENSIONS and path.is_file():
                    fonts.append(path)
        return fonts

    def find(self, name: str) -> Path:
        """Locate a font by file name, with or without extension.

        An existing path is returned unchanged. Otherwise an exact
        (case-insensitive) file-name match wins, then a match on the name
        without extension, preferring .ttf over .otf over .ttc.
        """
        if not name:
            raise FontNotFoundError("Empty font name")

        direct = Path(name).expanduser()
        if direct.is_file():
            return direct

        needle = Path(name).name.lower()
        fonts = self.list()

        for path in fonts:
            if path.name.lower() == needle:
                return path

        candidates = [p for p in fonts if p.stem.lower() == needle]
        if candidates:
            candidates.sort(key=lambda p: FONT_EXTENSIONS.index(p.suffix.lower()))
            return candidates[0]

        raise FontNotFoundError(f"Could not find {name} font in the system")


@dataclass(frozen=True)
class ResolvedFont:
    """A located and parsed font file."""
    name: str
    path: Path
    data: bytes

    def at_size(self, size: float) -> ImageFont.FreeTypeFont:
        return ImageFont.truetype(io.BytesIO(self.data), size)


class FontResolver:
    """Resolve font names through a FontIndex."""

    def __init__(self, index: FontIndex | None = None):
        self.index = index or FontIndex()

    def resolve(self, name: str) -> ResolvedFont:
        path = self.index.find(name)
        logger.info(f"Found '{name}' in '{path}'")

        try:
            data = path.read_bytes()
        except OSError as e:
            raise FontUnreadableError(f"Could not read {name} font: {e}") from e

        try:
            ImageFont.truetype(io.BytesIO(data), 10)
        except OSError as e:
            raise FontUnparsableError(f"Could not parse truetype {name} font: {e}") from e

        return ResolvedFont(name=name, path=path, data=data)

    def list_available_fonts(self) -> list[str]:
        """Font names for the selection menu: file names without extension."""
        names = {}
        for path in self.index.list():
            names.setdefault(path.stem.lower(), path.stem)
        return sorted(names.values(), key=str.lower)
