"""Schema and helpers for user-configurable vector formatting settings."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from . import config

logger = logging.getLogger(__name__)


@dataclass
class FormatSettings:
    separator: str = config.DEFAULT_SEPARATOR
    float_format: str = config.DEFAULT_FLOAT_FORMAT
    open_bracket: str = config.DEFAULT_OPEN_BRACKET
    close_bracket: str = config.DEFAULT_CLOSE_BRACKET

    def format_value(self, value: float) -> str:
        return format(value, self.float_format)

    def to_json(self) -> dict[str, Any]:
        return {
            "separator": self.separator,
            "float_format": self.float_format,
            "open_bracket": self.open_bracket,
            "close_bracket": self.close_bracket,
        }

    @classmethod
    def from_json(cls, payload: dict[str, Any]) -> "FormatSettings":
        return cls(
            separator=str(payload.get("separator", config.DEFAULT_SEPARATOR)),
            float_format=str(payload.get("float_format", config.DEFAULT_FLOAT_FORMAT)),
            open_bracket=str(payload.get("open_bracket", config.DEFAULT_OPEN_BRACKET)),
            close_bracket=str(payload.get("close_bracket", config.DEFAULT_CLOSE_BRACKET)),
        )


def load_last_used(path: Path | None = None) -> FormatSettings:
    settings_path = path or config.DEFAULT_SETTINGS_PATH
    try:
        data = json.loads(settings_path.read_text())
    except FileNotFoundError:
        return FormatSettings()
    except (json.JSONDecodeError, UnicodeDecodeError):
        logger.debug("Ignoring unreadable settings file %s", settings_path)
        return FormatSettings()
    logger.debug("Loaded format settings from %s", settings_path)
    return FormatSettings.from_json(data if isinstance(data, dict) else {})


def save_last_used(settings: FormatSettings, path: Path | None = None) -> Path:
    settings_path = path or config.DEFAULT_SETTINGS_PATH
    settings_path.write_text(json.dumps(settings.to_json(), indent=2, sort_keys=True))
    return settings_path
