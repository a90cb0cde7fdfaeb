"""Error types raised by cardforge.

Every error is fatal: library code raises, and the CLI logs the message
and exits non-zero.
"""


class CardForgeError(Exception):
    """Base class for all cardforge errors."""
    pass


class PathNotFoundError(CardForgeError):
    """A file or directory does not exist."""
    pass


class InvalidImageFormatError(CardForgeError):
    """A file is not a PNG or cannot be decoded."""
    pass


class DimensionMismatchError(CardForgeError):
    """An image does not have the expected pixel dimensions."""

    def __init__(self, path, expected, actual):
        self.path = path
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"{path.name} does not match dimensions ({expected.width} x {expected.height} pixels): "
            f"got {actual[0]} x {actual[1]}"
        )


class FontError(CardForgeError):
    """A font could not be used."""
    pass


class FontNotFoundError(FontError):
    pass


class FontUnreadableError(FontError):
    pass


class FontUnparsableError(FontError):
    pass


class MissingTextFileError(CardForgeError):
    """A card text file path is empty or the file cannot be read."""
    pass


class NoTemplatesFoundError(CardForgeError):
    pass


class NoFontsFoundError(CardForgeError):
    pass


class PromptAbortedError(CardForgeError):
    """The user aborted an interactive prompt."""
    pass


class CardIOError(CardForgeError):
    """Creating, encoding or writing an output file failed."""
    pass


class SettingsError(CardForgeError):
    """cardforge.yml is malformed."""
    pass
