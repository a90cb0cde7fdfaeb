"""Cardforge - composite templates, illustrations and text into card PNGs."""

__version__ = "0.1.0"
