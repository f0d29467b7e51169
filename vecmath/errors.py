"""Errors raised by Vector operations."""

from __future__ import annotations


class VectorError(Exception):
    """Base class for vector contract violations."""


class OutOfRangeError(VectorError, IndexError):
    def __init__(self, index: int, dimension: int) -> None:
        self.index = index
        self.dimension = dimension
        super().__init__(f"Index {index} is out of range for a vector of dimension {dimension}.")


class DimensionMismatchError(VectorError, ValueError):
    def __init__(self, left: int, right: int, operation: str) -> None:
        self.left = left
        self.right = right
        self.operation = operation
        super().__init__(f"Dimensions do not match for {operation} ({left} vs {right}).")


class UnsupportedDimensionError(VectorError, ValueError):
    def __init__(self, dimension: int, expected: int, operation: str) -> None:
        self.dimension = dimension
        self.expected = expected
        self.operation = operation
        super().__init__(f"{operation} is only defined for {expected}D vectors (got {dimension}).")
