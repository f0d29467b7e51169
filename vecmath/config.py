"""Default configuration values for vector formatting and algebra."""

from __future__ import annotations

from pathlib import Path

DEFAULT_SEPARATOR = "\t"
DEFAULT_FLOAT_FORMAT = "g"
DEFAULT_OPEN_BRACKET = "["
DEFAULT_CLOSE_BRACKET = "]"

CROSS_DIMENSION = 3

DEFAULT_SETTINGS_PATH = Path.home() / ".vecmath_settings.json"
