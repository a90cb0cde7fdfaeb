"""Run configuration, image dimensions and user settings."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

import yaml
from dotenv import load_dotenv

from cardforge.errors import SettingsError

# Load .env from the working directory if present
load_dotenv(Path.cwd() / ".env")

logger = logging.getLogger(__name__)

SETTINGS_FILE = "cardforge.yml"


@dataclass(frozen=True)
class ImageDimensions:
    width: int
    height: int

    def as_tuple(self) -> tuple[int, int]:
        return (self.width, self.height)


# Source illustrations
ILLUSTRATION_DIMS = ImageDimensions(196, 157)
# Templates and finished cards
CARD_DIMS = ImageDimensions(243, 340)

# Where the illustration lands on the template
ILLUSTRATION_OFFSET = (22, 22)


@dataclass(frozen=True)
class CardConfig:
    """Per-run configuration built once from the user's selections."""
    images_path: Path
    texts_path: Path
    outputs_path: Path
    templates_path: Path
    template: Path
    header_font: str
    title_font: str
    body_font: str


@dataclass(frozen=True)
class Settings:
    """Prompt defaults, optionally overridden by cardforge.yml in the root directory."""
    images_dir: str = "images"
    templates_dir: str = "templates"
    texts_dir: str = "texts"
    outputs_dir: str = "outputs"
    header_font: str = "Adventure"
    body_font: str = "Arial"


def default_root() -> Path:
    """Root directory offered at startup: CARDFORGE_ROOT or the user's home."""
    env_root = os.environ.get("CARDFORGE_ROOT")
    if env_root:
        return Path(env_root).expanduser()
    return Path.home()


def extra_font_dirs() -> list[Path]:
    """Font directories listed in CARDFORGE_FONT_DIRS."""
    raw = os.environ.get("CARDFORGE_FONT_DIRS", "")
    return [Path(p).expanduser() for p in raw.split(os.pathsep) if p.strip()]


def log_level(verbose: bool = False) -> int:
    if verbose:
        return logging.DEBUG
    name = os.environ.get("CARDFORGE_LOG_LEVEL", "INFO").upper()
    level = getattr(logging, name, None)
    if not isinstance(level, int):
        return logging.INFO
    return level


def load_settings(root: Path) -> Settings:
    """Load cardforge.yml from root, falling back to defaults for missing keys.

    Unknown keys are ignored. Raises SettingsError if the file cannot be
    read or is not a YAML mapping.
    """
    settings_path = root / SETTINGS_FILE
    if not settings_path.exists():
        return Settings()

    try:
        with open(settings_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise SettingsError(f"Cannot parse {settings_path}: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise SettingsError(f"Cannot read {settings_path}: {e}") from e

    if not isinstance(data, dict):
        raise SettingsError(f"{settings_path} must contain a mapping, got {type(data).__name__}")

    known = Settings.__dataclass_fields__
    values = {k: str(v) for k, v in data.items() if k in known and v is not None}
    ignored = sorted(set(data) - set(known), key=str)
    if ignored:
        logger.warning(f"Ignoring unknown keys in {settings_path}: {', '.join(map(str, ignored))}")

    logger.info(f"Loaded settings from {settings_path}")
    return Settings(**values)
