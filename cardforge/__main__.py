"""Entry point for python -m cardforge

Usage:
  python -m cardforge make
  python -m cardforge validate outputs --kind card
  python -m cardforge fonts
"""

from cardforge.cli import cli


if __name__ == "__main__":
    cli(prog_name="cardforge")
