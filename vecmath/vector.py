"""Dense real-valued vector with dimension-checked arithmetic."""

from __future__ import annotations

import logging
import math
import operator
from numbers import Real
from typing import Any, Callable, Iterable, Iterator, TextIO

from . import config
from .errors import DimensionMismatchError, OutOfRangeError, UnsupportedDimensionError
from .settings_schema import FormatSettings

logger = logging.getLogger(__name__)


def _as_scalar(value: Any) -> float:
    if isinstance(value, Vector) or not isinstance(value, Real):
        raise TypeError(f"Expected a real scalar, got {type(value).__name__}.")
    return float(value)


def _is_odd_integer(value: float) -> bool:
    return value.is_integer() and math.fmod(value, 2.0) != 0.0


def _ieee_div(numerator: float, denominator: float) -> float:
    """Divide with IEEE-754 results (inf/nan) instead of ZeroDivisionError."""
    if denominator != 0.0:
        return numerator / denominator
    if numerator == 0.0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def _real_pow(base: float, exponent: float) -> float:
    """Raise base to exponent, mapping math domain/range errors to C ``pow`` results."""
    try:
        return math.pow(base, exponent)
    except OverflowError:
        return -math.inf if base < 0.0 and _is_odd_integer(exponent) else math.inf
    except ValueError:
        if base == 0.0:
            # Pole: zero raised to a negative power.
            return math.copysign(math.inf, base) if _is_odd_integer(exponent) else math.inf
        return math.nan


def _fill_components(dimension: int, value: float) -> list[float]:
    size = operator.index(dimension)
    if size < 0:
        raise ValueError(f"Vector dimension must be non-negative (got {size}).")
    return [float(value)] * size


def _range_components(start: float, stop: float, step: float) -> list[float]:
    """Values are computed as ``start + k*step`` (no accumulated drift), so ``(0, 1, 0.1)`` gives 10 values."""
    start, stop, step = float(start), float(stop), float(step)
    if not (math.isfinite(start) and math.isfinite(stop)):
        raise ValueError(f"Range bounds must be finite (got start={start}, stop={stop}).")
    if not (math.isfinite(step) and step > 0.0):
        raise ValueError(f"Range step must be a positive finite number (got {step}).")
    components: list[float] = []
    count = 0
    value = start
    while value < stop:
        components.append(value)
        count += 1
        value = start + count * step
    return components


class Vector:
    """Fixed-size dense vector of floats.

    Construction dispatches on the arguments:

    - ``Vector()`` empty vector.
    - ``Vector(other)`` independent copy of another Vector.
    - ``Vector(values)`` components copied from any iterable of reals.
    - ``Vector(dimension, value)`` ``dimension`` components equal to ``value``.
    - ``Vector(start, stop, step)`` ``start + k*step`` while strictly below ``stop``.

    ``Vector * Vector`` is the dot product, not an elementwise product.
    """

    __slots__ = ("_components",)
    __hash__ = None  # mutable value type

    def __init__(self, *args: Any) -> None:
        if not args:
            self._components: list[float] = []
        elif len(args) == 1:
            self._components = self._copy_source(args[0])
        elif len(args) == 2:
            self._components = _fill_components(*args)
        elif len(args) == 3:
            self._components = _range_components(*args)
        else:
            raise TypeError(f"Vector() takes at most 3 arguments ({len(args)} given).")

    @staticmethod
    def _copy_source(source: Any) -> list[float]:
        if isinstance(source, Vector):
            return list(source._components)
        if isinstance(source, (str, bytes)):
            raise TypeError("Vector components cannot be built from a string.")
        try:
            values = iter(source)
        except TypeError as exc:
            raise TypeError(f"Cannot build a Vector from {type(source).__name__}.") from exc
        return [float(value) for value in values]

    @classmethod
    def from_values(cls, values: Iterable[float]) -> "Vector":
        return cls(list(values))

    @classmethod
    def filled(cls, dimension: int, value: float = 0.0) -> "Vector":
        return cls(dimension, value)

    @classmethod
    def arange(cls, start: float, stop: float, step: float = 1.0) -> "Vector":
        """Values are ``start + k*step`` rather than a running sum, so ``arange(0, 1, 0.1)`` has 10 elements."""
        return cls(start, stop, step)

    @classmethod
    def copy_of(cls, other: "Vector") -> "Vector":
        if not isinstance(other, Vector):
            raise TypeError(f"Expected a Vector, got {type(other).__name__}.")
        return cls(other)

    def copy(self) -> "Vector":
        return Vector(self)

    def __copy__(self) -> "Vector":
        return Vector(self)

    def __deepcopy__(self, memo: dict[int, Any]) -> "Vector":
        return Vector(self)

    def assign(self, other: "Vector") -> "Vector":
        """Replace this vector's contents with an independent copy of ``other``."""
        if other is self:
            return self
        if not isinstance(other, Vector):
            raise TypeError(f"Cannot assign {type(other).__name__} to a Vector.")
        self._components = list(other._components)
        return self

    # Inspection

    @property
    def dimension(self) -> int:
        return len(self._components)

    def get_dimension(self) -> int:
        return len(self._components)

    def __len__(self) -> int:
        return len(self._components)

    def __iter__(self) -> Iterator[float]:
        return iter(self._components)

    def to_list(self) -> list[float]:
        return list(self._components)

    def to_string(self, settings: FormatSettings | None = None) -> str:
        if settings is None:
            settings = FormatSettings()
        body = settings.separator.join(settings.format_value(value) for value in self._components)
        return f"{settings.open_bracket}{body}{settings.close_bracket}"

    def show(self, file: TextIO | None = None, settings: FormatSettings | None = None) -> None:
        print(self.to_string(settings), file=file)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Vector({self._components!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._components == other._components

    # Indexed access

    def _checked_index(self, index: Any) -> int:
        if isinstance(index, slice):
            raise TypeError("Vector indices must be integers, not slices.")
        position = operator.index(index)
        if not 0 <= position < len(self._components):
            logger.debug("Rejected index %d for dimension %d", position, len(self._components))
            raise OutOfRangeError(position, len(self._components))
        return position

    def __getitem__(self, index: int) -> float:
        return self._components[self._checked_index(index)]

    def __setitem__(self, index: int, value: float) -> None:
        self._components[self._checked_index(index)] = float(value)

    def get(self, index: int) -> float:
        return self[index]

    def set(self, index: int, value: float) -> None:
        self[index] = value

    # Elementwise helpers

    def _require_same_dimension(self, other: "Vector", operation: str) -> None:
        if len(self._components) != len(other._components):
            logger.debug(
                "Rejected %s between dimensions %d and %d",
                operation,
                len(self._components),
                len(other._components),
            )
            raise DimensionMismatchError(len(self._components), len(other._components), operation)

    def _combine(self, other: "Vector", op: Callable[[float, float], float], operation: str) -> "Vector":
        self._require_same_dimension(other, operation)
        return Vector([op(a, b) for a, b in zip(self._components, other._components)])

    def _apply(self, op: Callable[[float, float], float], scalar: float) -> "Vector":
        return Vector([op(value, scalar) for value in self._components])

    # Named arithmetic

    def add(self, other: "Vector | float") -> "Vector":
        if isinstance(other, Vector):
            return self._combine(other, operator.add, "addition")
        return self._apply(operator.add, _as_scalar(other))

    def subtract(self, other: "Vector | float") -> "Vector":
        if isinstance(other, Vector):
            return self._combine(other, operator.sub, "subtraction")
        return self._apply(operator.sub, _as_scalar(other))

    def scale(self, factor: float) -> "Vector":
        return self._apply(operator.mul, _as_scalar(factor))

    def divide(self, divisor: float) -> "Vector":
        """Divide every component by ``divisor``; zero yields inf/nan components, not an error."""
        return self._apply(_ieee_div, _as_scalar(divisor))

    # Operators

    def __add__(self, other: object) -> "Vector":
        if not isinstance(other, (Vector, Real)):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other: object) -> "Vector":
        if not isinstance(other, Real):
            return NotImplemented
        return self.add(other)

    def __iadd__(self, other: object) -> "Vector":
        if not isinstance(other, (Vector, Real)):
            return NotImplemented
        return self.assign(self.add(other))

    def __sub__(self, other: object) -> "Vector":
        if not isinstance(other, (Vector, Real)):
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other: object) -> "Vector":
        if not isinstance(other, Real):
            return NotImplemented
        scalar = float(other)
        return Vector([scalar - value for value in self._components])

    def __isub__(self, other: object) -> "Vector":
        if not isinstance(other, (Vector, Real)):
            return NotImplemented
        return self.assign(self.subtract(other))

    def __mul__(self, other: object) -> "Vector | float":
        if isinstance(other, Vector):
            return self.dot(other)
        if not isinstance(other, Real):
            return NotImplemented
        return self.scale(other)

    def __rmul__(self, other: object) -> "Vector":
        if not isinstance(other, Real):
            return NotImplemented
        return self.scale(other)

    def __imul__(self, other: object) -> "Vector":
        if isinstance(other, Vector):
            raise TypeError("In-place multiplication by a Vector is not defined; use dot().")
        if not isinstance(other, Real):
            return NotImplemented
        return self.assign(self.scale(other))

    def __truediv__(self, other: object) -> "Vector":
        if isinstance(other, Vector) or not isinstance(other, Real):
            return NotImplemented
        return self.divide(other)

    def __itruediv__(self, other: object) -> "Vector":
        if isinstance(other, Vector) or not isinstance(other, Real):
            return NotImplemented
        return self.assign(self.divide(other))

    def __pow__(self, exponent: object, modulo: object = None) -> "Vector":
        if modulo is not None or isinstance(exponent, Vector) or not isinstance(exponent, Real):
            return NotImplemented
        return self.pow(exponent)

    def __neg__(self) -> "Vector":
        return Vector([-value for value in self._components])

    def __pos__(self) -> "Vector":
        return Vector(self)

    def __abs__(self) -> float:
        return self.norm()

    # Reductions

    def dot(self, other: "Vector") -> float:
        if not isinstance(other, Vector):
            raise TypeError(f"Dot product requires a Vector, got {type(other).__name__}.")
        self._require_same_dimension(other, "dot product")
        total = 0.0
        for a, b in zip(self._components, other._components):
            total += a * b
        return total

    def cross(self, other: "Vector") -> "Vector":
        """3D cross product ``self x other`` (right-handed, anti-commutative)."""
        if not isinstance(other, Vector):
            raise TypeError(f"Cross product requires a Vector, got {type(other).__name__}.")
        for operand in (self, other):
            if len(operand._components) != config.CROSS_DIMENSION:
                logger.debug("Rejected cross product on a %dD vector", len(operand._components))
                raise UnsupportedDimensionError(
                    len(operand._components), config.CROSS_DIMENSION, "Cross product"
                )
        a0, a1, a2 = self._components
        b0, b1, b2 = other._components
        return Vector([
            a1 * b2 - a2 * b1,
            a2 * b0 - a0 * b2,
            a0 * b1 - a1 * b0,
        ])

    def pow(self, exponent: float) -> "Vector":
        """Raise each component to ``exponent``; invalid real powers become nan/inf."""
        return self._apply(_real_pow, _as_scalar(exponent))

    def sum(self) -> float:
        total = 0.0
        for value in self._components:
            total += value
        return total

    def prod(self) -> float:
        return math.prod(self._components, start=1.0)

    def norm(self) -> float:
        return math.sqrt(self.dot(self))

    def normalize(self) -> "Vector":
        magnitude = self.norm()
        if magnitude == 0:
            raise ValueError("Cannot normalize a zero-length vector.")
        return self / magnitude
