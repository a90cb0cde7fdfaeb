"""Card pipeline.

For every illustration in the images directory:
1. Compose the template and illustration into a base card
2. Read texts/<name>.txt
3. Draw header, title and body, in that order, onto the same card
4. Write outputs/card_<name>.png once

The first failure aborts the run. Cards written before it stay on disk.
"""

import logging
from pathlib import Path

from cardforge.cards.composite import compose_card, load_png, save_card
from cardforge.cards.content import parse_text_file
from cardforge.cards.render import TextOverlayRenderer, build_text_specs
from cardforge.config import ILLUSTRATION_OFFSET, CardConfig
from cardforge.errors import PathNotFoundError

logger = logging.getLogger(__name__)


def card_output_path(config: CardConfig, name: str) -> Path:
    return config.outputs_path / f"card_{name}.png"


def card_text_path(config: CardConfig, name: str) -> Path:
    return config.texts_path / f"{name}.txt"


class CardPipeline:
    """Render one card per illustration using an injected font resolver."""

    def __init__(self, resolver):
        self.renderer = TextOverlayRenderer(resolver)

    def process_image(self, config: CardConfig, image_path: Path) -> Path:
        """Build and write the card for a single illustration."""
        name = image_path.stem
        output_path = card_output_path(config, name)

        template = load_png(config.template)
        illustration = load_png(image_path)
        card = compose_card(template, illustration, ILLUSTRATION_OFFSET)

        texts = parse_text_file(card_text_path(config, name))
        fonts = {
            "header": config.header_font,
            "title": config.title_font,
            "body": config.body_font,
        }
        specs = build_text_specs(card.size, fonts, texts, output=output_path)
        self.renderer.apply(card, specs)

        save_card(card, output_path)
        logger.info(f"Card written: {output_path}")
        return output_path

    def run(self, config: CardConfig) -> list[Path]:
        """Process every entry of the images directory in name order."""
        if not config.images_path.is_dir():
            raise PathNotFoundError(f"Images directory does not exist: {config.images_path}")

        images = sorted(config.images_path.iterdir())
        logger.info(f"Processing {len(images)} image(s) from {config.images_path}")

        return [self.process_image(config, image_path) for image_path in images]
