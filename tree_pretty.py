"""Command line demo rendering a binary tree with document combinators.

The script builds the sample tree
``Branch(Branch(Leaf(1), Branch(Leaf(2), Leaf(3))), Leaf(4))`` and prints it
through ``tasks.pretty_printing`` at a width of 30 columns with two spaces of
indentation per nesting level.  Width, indentation and the tree itself can be
overridden from the command line or from a JSON/YAML configuration file::

    width: 20
    indent: 4
    tree: [[1, [2, 3]], 4]

Nothing runs at import time; ``main`` is the single entry point.
"""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any, Mapping, Optional, Sequence

import yaml

from tasks.pretty_printing import Branch, Leaf, Tree, TreeTypeError, tree_from_data

logger = logging.getLogger(__name__)

DEFAULT_WIDTH = 30
DEFAULT_INDENT = 2
_CONFIG_KEYS = frozenset({"width", "indent", "tree"})


class TreeConfigError(ValueError):
    """Raised when a configuration file cannot be used."""


def build_sample_tree() -> Tree:
    return Branch(Branch(Leaf(1), Branch(Leaf(2), Leaf(3))), Leaf(4))


def _positive_int(raw: str) -> int:
    value = int(raw)
    if value < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {raw}")
    return value


def _non_negative_int(raw: str) -> int:
    value = int(raw)
    if value < 0:
        raise argparse.ArgumentTypeError(f"expected a non-negative integer, got {raw}")
    return value


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def load_config(path: Path) -> Mapping[str, Any]:
    """Load and validate a JSON or YAML configuration mapping from *path*.

    Files ending in ``.json`` are parsed as JSON; everything else goes through
    ``yaml.safe_load``.  An empty YAML document yields an empty mapping.
    """

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise TreeConfigError(f"Failed to read configuration {path}: {exc}") from exc

    try:
        if path.suffix.lower() == ".json":
            payload = json.loads(raw)
        else:
            payload = yaml.safe_load(raw)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise TreeConfigError(f"Failed to parse configuration {path}: {exc}") from exc

    if payload is None:
        payload = {}
    if not isinstance(payload, Mapping):
        raise TreeConfigError(f"Configuration {path} must contain a mapping")

    if not all(isinstance(key, str) for key in payload):
        raise TreeConfigError(f"Configuration {path} keys must be strings")
    unknown = sorted(set(payload) - _CONFIG_KEYS)
    if unknown:
        raise TreeConfigError(f"Unknown configuration keys: {', '.join(unknown)}")
    if "width" in payload and (not _is_int(payload["width"]) or payload["width"] < 1):
        raise TreeConfigError("Configuration 'width' must be a positive integer")
    if "indent" in payload and (not _is_int(payload["indent"]) or payload["indent"] < 0):
        raise TreeConfigError("Configuration 'indent' must be a non-negative integer")

    logger.info("Loaded configuration from %s", path)
    return payload


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument(
        "--width",
        type=_positive_int,
        default=None,
        help=f"Maximum line width (default: {DEFAULT_WIDTH}).",
    )
    parser.add_argument(
        "--indent",
        type=_non_negative_int,
        default=None,
        help=f"Indentation added per nesting level (default: {DEFAULT_INDENT}).",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Optional JSON or YAML file providing width, indent and tree.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        help="Logging verbosity for diagnostic output.",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Render the configured tree to stdout and return the exit status."""

    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level))

    config: Mapping[str, Any] = {}
    try:
        if args.config is not None:
            config = load_config(args.config)
        tree = tree_from_data(config["tree"]) if "tree" in config else build_sample_tree()
    except (TreeConfigError, TreeTypeError, RecursionError) as exc:
        logger.error("Failed to prepare tree: %s", exc)
        return 1

    width = args.width if args.width is not None else config.get("width", DEFAULT_WIDTH)
    indent = args.indent if args.indent is not None else config.get("indent", DEFAULT_INDENT)

    try:
        rendered = tree.to_string(width, indent)
    except RecursionError as exc:
        logger.error("Failed to render tree: %s", exc)
        return 1

    print(rendered)
    return 0


__all__ = [
    "DEFAULT_INDENT",
    "DEFAULT_WIDTH",
    "TreeConfigError",
    "build_sample_tree",
    "load_config",
    "main",
]


if __name__ == "__main__":  # pragma: no cover - CLI entry
    raise SystemExit(main())
