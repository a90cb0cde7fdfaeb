"""Per-card text files.

A text file holds `key=value` lines, e.g.:

    header=Hero Name
    title=Rare
    body=A brave hero.
"""

from pathlib import Path

from cardforge.errors import MissingTextFileError

DEFAULT_CARD_TEXT = {
    "header": "HEADER",
    "title": "TITLE",
    "body": "BODY",
}


def parse_text_file(path: Path | str) -> dict[str, str]:
    """Parse a card text file into a field -> text mapping.

    Missing fields keep their defaults. Unknown keys are kept, the last
    occurrence of a key wins, and lines without '=' are ignored.
    """
    if not path or not str(path).strip():
        raise MissingTextFileError("Text file path is empty")

    card = dict(DEFAULT_CARD_TEXT)

    try:
        with open(path, "r", encoding="utf-8") as f:
            for line in f:
                key, sep, value = line.partition("=")
                if not sep:
                    continue
                key = key.strip()
                if key:
                    card[key] = value.strip()
    except (OSError, UnicodeDecodeError) as e:
        raise MissingTextFileError(f"Cannot open text file {path}: {e}") from e

    return card
