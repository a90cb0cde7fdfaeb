"""Text overlay for cards.

Draws word-wrapped, centered text blocks onto a card. Each block is
positioned by an anchor point (x, y) and a fractional anchor (ax, ay):
(0.5, 0.5) centers the block on the point.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from PIL import Image, ImageDraw

from cardforge.cards.composite import save_card

logger = logging.getLogger(__name__)

# Text colour for all card fields
INK = "#000000"

# (field, font size, vertical offset below the card's centre line)
FIELD_LAYOUT = (
    ("header", 14, 20),
    ("title", 12, 50),
    ("body", 10, 80),
)
# Horizontal room left for text: card width minus this margin
WRAP_MARGIN = 10


@dataclass(frozen=True)
class TextRenderSpec:
    """Layout of one text block on a card."""
    label: str
    font: str
    font_size: float
    width: float
    x: float
    y: float
    ax: float = 0.5
    ay: float = 0.5
    spacing: float = 1.0
    output: Path | None = None
    fill: str = INK


def build_text_specs(
    size: tuple[int, int],
    fonts: dict[str, str],
    text: dict[str, str],
    output: Path | None = None,
) -> list[TextRenderSpec]:
    """Header, title and body specs for a card of the given size, in drawing order."""
    width, height = size
    specs = []
    for field, font_size, y_offset in FIELD_LAYOUT:
        specs.append(TextRenderSpec(
            label=text.get(field, ""),
            font=fonts[field],
            font_size=font_size,
            width=width - WRAP_MARGIN,
            x=width // 2,
            y=height // 2 + y_offset,
            output=output,
        ))
    return specs


def wrap_text(text: str, measure, max_width: float) -> list[str]:
    """Greedy word wrap.

    Lines are broken on spaces so no line measures wider than max_width;
    a single word wider than max_width keeps a line of its own. Explicit
    newlines always start a new line.
    """
    lines = []
    for paragraph in text.split("\n"):
        current = ""
        for word in paragraph.split():
            candidate = f"{current} {word}" if current else word
            if current and measure(candidate) > max_width:
                lines.append(current)
                current = word
            else:
                current = candidate
        if current:
            lines.append(current)
    return lines


class TextOverlayRenderer:
    """Draw text blocks onto card images using fonts from a resolver.

    The resolver is anything with a `resolve(name)` method returning an
    object with `at_size(size)` (see cardforge.fonts.FontResolver).
    Fonts are resolved again on every draw.
    """

    def __init__(self, resolver):
        self.resolver = resolver

    def draw_text(self, card: Image.Image, spec: TextRenderSpec) -> Image.Image:
        """Draw one text block onto card in place and return it."""
        font = self.resolver.resolve(spec.font).at_size(spec.font_size)
        draw = ImageDraw.Draw(card)

        lines = wrap_text(spec.label, lambda s: draw.textlength(s, font=font), spec.width)
        if not lines:
            return card

        ascent, descent = font.getmetrics()
        line_height = ascent + descent
        block_height = len(lines) * line_height * spec.spacing - (spec.spacing - 1) * line_height

        left = spec.x - spec.ax * spec.width
        top = spec.y - spec.ay * block_height
        center_x = left + spec.width / 2

        for i, line in enumerate(lines):
            y = top + i * line_height * spec.spacing
            draw.text((center_x, y), line, font=font, fill=spec.fill, anchor="ma")

        logger.debug(f"Drew {len(lines)} line(s) of '{spec.font}' at ({spec.x}, {spec.y})")
        return card

    def apply(self, card: Image.Image, specs: list[TextRenderSpec]) -> Image.Image:
        """Draw several text blocks in order; later blocks paint over earlier ones."""
        for spec in specs:
            self.draw_text(card, spec)
        return card

    def render_to_file(self, source: Image.Image, spec: TextRenderSpec) -> Path:
        """Draw onto a copy of source and write the result to spec.output."""
        if spec.output is None:
            raise ValueError("TextRenderSpec.output is required to render to a file")
        card = source.convert("RGBA")
        self.draw_text(card, spec)
        return save_card(card, spec.output)
