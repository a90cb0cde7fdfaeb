"""Card validation, composition and text rendering for cardforge.

Exports are lazily loaded to avoid import conflicts when running
submodules directly with `python -m cardforge.cards.<module>`.
"""

__all__ = [
    # composite.py
    "compose_card",
    "load_png",
    "save_card",
    # content.py
    "parse_text_file",
    "DEFAULT_CARD_TEXT",
    # render.py
    "TextOverlayRenderer",
    "TextRenderSpec",
    "build_text_specs",
    "wrap_text",
    # validate.py
    "validate_images",
]


def __getattr__(name: str):
    """Lazy import for module exports."""
    if name in ("compose_card", "load_png", "save_card"):
        from cardforge.cards import composite
        return getattr(composite, name)
    elif name in ("parse_text_file", "DEFAULT_CARD_TEXT"):
        from cardforge.cards import content
        return getattr(content, name)
    elif name in ("TextOverlayRenderer", "TextRenderSpec", "build_text_specs", "wrap_text"):
        from cardforge.cards import render
        return getattr(render, name)
    elif name == "validate_images":
        from cardforge.cards import validate
        return getattr(validate, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
