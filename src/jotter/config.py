"""Configuration management for jotter."""

import logging
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path

logger = logging.getLogger(__name__)

JOTTER_HOME = Path(os.environ.get("JOTTER_HOME", Path.home() / ".config" / "jotter"))
CONFIG_FILE = JOTTER_HOME / "jotter.conf"
JOURNAL_FOLDER = "jrnl_folder"

_TRUE = {"true", "yes", "on", "1"}
_FALSE = {"false", "no", "off", "0"}


@dataclass(frozen=True)
class Config:
    """jotter configuration, loaded once and never re-read."""

    add_weekday: bool = True
    add_food_column: bool = False
    add_timestamp: bool = False
    editor: str = "nano"
    pager: str = "less"
    max_rows: int = 5
    when_pager: str = "default"  # always, never or default
    default_path: str = "."
    approx_variation: int = 1

    @property
    def journal_root(self) -> Path:
        """Directory holding the ``{year}/{year}_{MM}.md`` files."""
        return Path(self.default_path).expanduser() / JOURNAL_FOLDER

    def rows(self) -> list[tuple[str, str]]:
        """Human-readable (setting, value) pairs."""
        return [
            ("Add weekday", str(self.add_weekday).lower()),
            ("Add food column", str(self.add_food_column).lower()),
            ("Add timestamp", str(self.add_timestamp).lower()),
            ("Default editor", self.editor),
            ("Default pager", self.pager),
            ("Max rows to display for tags", str(self.max_rows)),
            ("When to use pager", self.when_pager),
            ("Default path", self.default_path),
            ("Approximation sensitivity", str(self.approx_variation)),
        ]


def _parse_bool(key: str, value: str) -> bool | None:
    lowered = value.lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    logger.warning(f"Ignoring {key.upper()}: expected true/false, got {value!r}")
    return None


def _parse_int(key: str, value: str) -> int | None:
    try:
        number = int(value)
    except ValueError:
        logger.warning(f"Ignoring {key.upper()}: expected a number, got {value!r}")
        return None
    if number < 0:
        logger.warning(f"Ignoring {key.upper()}: must not be negative, got {number}")
        return None
    return number


def _unquote(value: str) -> str:
    # Handle quoted values with inline comments: "value" # comment
    if value.startswith('"') or value.startswith("'"):
        quote = value[0]
        end_quote = value.find(quote, 1)
        if end_quote != -1:
            return value[1:end_quote]
        return value[1:]
    # Unquoted: strip inline comments
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def load_config(path: Path | None = None) -> Config:
    """Load configuration from jotter.conf, falling back to defaults."""
    config_file = path or CONFIG_FILE
    config = Config()

    if not config_file.exists():
        logger.debug(f"No config file at {config_file}, using defaults")
        return config

    known = {f.name for f in fields(Config)}
    values: dict[str, object] = {}

    for line in config_file.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _unquote(value.strip())

        if key not in known:
            logger.warning(f"Unknown config key {key.upper()} in {config_file}")
            continue

        match key:
            case "add_weekday" | "add_food_column" | "add_timestamp":
                parsed = _parse_bool(key, value)
            case "max_rows" | "approx_variation":
                parsed = _parse_int(key, value)
            case "when_pager":
                parsed = value.lower()
                if parsed not in ("always", "never", "default"):
                    logger.warning(f"Ignoring WHEN_PAGER: expected always/never/default, got {value!r}")
                    parsed = None
            case _:
                parsed = value or None

        if parsed is not None:
            values[key] = parsed

    return replace(config, **values)
