#!/usr/bin/env python3
"""Cardforge CLI - build printable cards from templates, illustrations and text."""

import logging
import sys
from pathlib import Path

import click

from cardforge import __version__
from cardforge.cards.validate import DIMS_BY_KIND, validate_images
from cardforge.config import CARD_DIMS, ILLUSTRATION_DIMS, CardConfig, default_root, load_settings, log_level
from cardforge.errors import CardForgeError, NoFontsFoundError, NoTemplatesFoundError
from cardforge.fonts import FontResolver
from cardforge.pipeline import CardPipeline
from cardforge.prompts import prompt_path, prompt_select

logger = logging.getLogger("cardforge")


def _fail(error: CardForgeError) -> None:
    logger.error(str(error))
    sys.exit(1)


def _template_names(templates_path: Path) -> list[str]:
    return sorted(p.name for p in templates_path.iterdir() if p.name.endswith(".png"))


def _prompt_font(resolver: FontResolver, font_type: str, preferred: str) -> str:
    fonts = resolver.list_available_fonts()
    if not fonts:
        raise NoFontsFoundError("There are no TrueType fonts in the system")
    return prompt_select(f"Select {font_type} Font", fonts, default=preferred)


@click.group()
@click.version_option(version=__version__)
@click.option("-v", "--verbose", is_flag=True, help="Show debug logging")
def cli(verbose):
    """Cardforge - composite card templates, illustrations and text into PNG cards.

    Run `cardforge make` and answer the prompts.
    """
    logging.basicConfig(
        level=log_level(verbose),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
    logging.getLogger("cardforge").setLevel(log_level(verbose))


@cli.command()
def make():
    """Interactively choose directories, template and fonts, then build all cards."""
    try:
        root = prompt_path("root directory", default_root())
        settings = load_settings(root)

        images_path = prompt_path("images directory", root / settings.images_dir)
        validate_images(images_path, ILLUSTRATION_DIMS)

        templates_path = prompt_path("templates directory", root / settings.templates_dir)
        validate_images(templates_path, CARD_DIMS)
        templates = _template_names(templates_path)
        if not templates:
            raise NoTemplatesFoundError(f"There are no templates in {templates_path}")
        template = prompt_select("Select Template", templates)

        texts_path = prompt_path("texts directory", root / settings.texts_dir)
        outputs_path = prompt_path("output directory", root / settings.outputs_dir)

        resolver = FontResolver()
        header_font = _prompt_font(resolver, "Header", settings.header_font)
        body_font = _prompt_font(resolver, "Title and Body", settings.body_font)

        config = CardConfig(
            images_path=images_path,
            texts_path=texts_path,
            outputs_path=outputs_path,
            templates_path=templates_path,
            template=templates_path / template,
            header_font=header_font,
            title_font=body_font,
            body_font=body_font,
        )

        written = CardPipeline(resolver).run(config)
        validate_images(outputs_path, CARD_DIMS)
    except CardForgeError as e:
        _fail(e)

    click.echo(f"Done: {len(written)} card(s) in {outputs_path}")


@cli.command()
@click.argument("directory", type=click.Path(exists=True, file_okay=False, path_type=Path))
@click.option("--kind", type=click.Choice(sorted(DIMS_BY_KIND)), default="card",
              help="Image category: illustration (196x157) or card (243x340)")
def validate(directory, kind):
    """Check that every file in DIRECTORY is a PNG of the expected size."""
    try:
        validate_images(directory, DIMS_BY_KIND[kind])
    except CardForgeError as e:
        _fail(e)
    click.echo(f"OK: {directory}")


@cli.command()
def fonts():
    """List the font names offered by `cardforge make`."""
    names = FontResolver().list_available_fonts()
    if not names:
        _fail(NoFontsFoundError("There are no TrueType fonts in the system"))
    for name in names:
        click.echo(name)


if __name__ == "__main__":
    cli()
