"""Card production pipeline for cardforge."""

from cardforge.pipeline.cards import CardPipeline, card_output_path, card_text_path

__all__ = [
    "CardPipeline",
    "card_output_path",
    "card_text_path",
]
