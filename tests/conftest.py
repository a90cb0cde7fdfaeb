"""Shared fixtures: synthetic PNGs, a test font and a card workspace."""

from pathlib import Path

import pytest
from PIL import Image, ImageFont

from cardforge.config import CARD_DIMS, ILLUSTRATION_DIMS
from cardforge.fonts import FontIndex, FontResolver, ResolvedFont

WHITE = (255, 255, 255, 255)
RED = (200, 30, 30, 255)

TEST_FONT = "CardSans"


def make_png(path: Path, size, color=WHITE) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    Image.new("RGBA", tuple(size), color).save(path, "PNG")
    return path


@pytest.fixture(scope="session")
def font_bytes() -> bytes:
    """Bytes of Pillow's bundled FreeType font."""
    font = ImageFont.load_default(size=12)
    data = getattr(font, "font_bytes", None)
    if not data:
        pytest.skip("Pillow was built without FreeType support")
    return data


@pytest.fixture
def font_dir(tmp_path, font_bytes) -> Path:
    fonts = tmp_path / "fonts"
    fonts.mkdir()
    (fonts / f"{TEST_FONT}.ttf").write_bytes(font_bytes)
    return fonts


@pytest.fixture
def resolver(font_dir) -> FontResolver:
    return FontResolver(FontIndex([font_dir]))


class MemoryFontResolver:
    """Resolver over a fixed in-memory font set."""

    def __init__(self, fonts: dict[str, bytes]):
        self.fonts = fonts
        self.calls = []

    def resolve(self, name):
        self.calls.append(name)
        return ResolvedFont(name=name, path=Path(name), data=self.fonts[name])


@pytest.fixture
def memory_resolver(font_bytes) -> MemoryFontResolver:
    return MemoryFontResolver({TEST_FONT: font_bytes, "Other": font_bytes})


@pytest.fixture
def workspace(tmp_path) -> Path:
    """Root directory with one template, one illustration and its text file."""
    root = tmp_path / "cards"
    make_png(root / "templates" / "card_bg.png", CARD_DIMS.as_tuple(), WHITE)
    make_png(root / "images" / "hero.png", ILLUSTRATION_DIMS.as_tuple(), RED)
    texts = root / "texts"
    texts.mkdir(parents=True)
    (texts / "hero.txt").write_text("header=Hero Name\ntitle=Rare\nbody=A brave hero.\n", encoding="utf-8")
    (root / "outputs").mkdir()
    return root
