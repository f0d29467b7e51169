"""Dense real-valued vectors with dimension-checked arithmetic."""

from .errors import DimensionMismatchError, OutOfRangeError, UnsupportedDimensionError, VectorError
from .settings_schema import FormatSettings
from .vector import Vector

__all__ = [
    "DimensionMismatchError",
    "FormatSettings",
    "OutOfRangeError",
    "UnsupportedDimensionError",
    "Vector",
    "VectorError",
]
