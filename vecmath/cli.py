"""Command-line front end for quick vector calculations."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from . import config
from . import settings_schema
from .errors import VectorError
from .vector import Vector

logger = logging.getLogger(__name__)

VECTOR_OPS = ("add", "sub", "mul", "div", "pow")
BINARY_OPS = ("dot", "cross")
UNARY_OPS = ("show", "norm", "sum", "prod")


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="vecmath", description="Evaluate a vector operation and print the result.")
    parser.add_argument("op", choices=UNARY_OPS + VECTOR_OPS + BINARY_OPS, help="Operation to evaluate.")
    parser.add_argument("left", help='Left operand as comma-separated components, e.g. "1,2,3" (or "5," for one component).')
    parser.add_argument("right", nargs="?", default=None, help="Right operand: a vector, or a scalar where allowed.")
    parser.add_argument(
        "--settings",
        type=str,
        default=str(config.DEFAULT_SETTINGS_PATH),
        help="Path to formatting settings JSON.",
    )
    parser.add_argument("--separator", type=str, default=None, help="Component separator for printed vectors.")
    parser.add_argument("--format", dest="float_format", type=str, default=None, help="Format spec for components.")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    return parser.parse_args(argv)


def _parse_vector(text: str) -> Vector:
    text = text.strip()
    if not text:
        return Vector()
    parts = text.split(",")
    # A single trailing comma marks a one-component vector, e.g. "5,".
    if len(parts) > 1 and not parts[-1].strip():
        parts.pop()
    try:
        return Vector([float(part) for part in parts])
    except ValueError as exc:
        raise ValueError(f"Invalid vector: {text!r}") from exc


def _parse_operand(text: str) -> Vector | float:
    if "," not in text:
        try:
            return float(text)
        except ValueError:
            pass
    return _parse_vector(text)


def _resolve_settings(args: argparse.Namespace) -> settings_schema.FormatSettings:
    settings = settings_schema.load_last_used(Path(args.settings))
    if args.separator is not None:
        settings.separator = args.separator.replace("\\t", "\t").replace("\\n", "\n")
    if args.float_format is not None:
        settings.float_format = args.float_format
    try:
        settings.format_value(0.0)
    except ValueError as exc:
        raise ValueError(f"Invalid float format: {settings.float_format!r}") from exc
    return settings


def evaluate(op: str, left: Vector, right: Vector | float | None) -> Vector | float:
    if op in UNARY_OPS:
        if op == "show":
            return left
        return getattr(left, op)()
    if right is None:
        raise ValueError(f"Operation {op!r} needs a right operand.")
    if op in BINARY_OPS:
        if not isinstance(right, Vector):
            raise ValueError(f"Operation {op!r} needs a vector right operand.")
        return getattr(left, op)(right)
    if op == "add":
        return left + right
    if op == "sub":
        return left - right
    if op == "mul":
        return left * right
    if op == "div":
        if isinstance(right, Vector):
            raise ValueError("div needs a scalar divisor.")
        return left / right
    if isinstance(right, Vector):
        raise ValueError("pow needs a scalar exponent.")
    return left.pow(right)


def run(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        settings = _resolve_settings(args)
        left = _parse_vector(args.left)
        right = _parse_operand(args.right) if args.right is not None else None
        result = evaluate(args.op, left, right)
    except (VectorError, ValueError) as exc:
        logger.debug("Operation %s failed", args.op, exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if isinstance(result, Vector):
        result.show(settings=settings)
    else:
        print(settings.format_value(result))
    return 0


def main() -> None:
    raise SystemExit(run())


if __name__ == "__main__":
    main()
