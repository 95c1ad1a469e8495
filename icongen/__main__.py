#!/usr/bin/env python3
# SPDX-License-Identifier: GPL-3.0-or-later
"""
Generate the Icon enum from icon records.

Reads a YAML or JSON list of icon records from stdin and prints the enum
definition followed by the AsClasses implementation.

Usage:
    python3 -m icongen < icons.json > src/icon/generated.rs
"""

import argparse
import logging
import sys
from typing import Any

import yaml

from .generator import Generator, UnknownIconStyle


def load_icons(text: str) -> list[Any]:
    """
    Decode the icon records document.

    Args:
        text: YAML (or JSON) document holding a list of records

    Returns:
        List of records, possibly nested
    """
    data = yaml.safe_load(text)
    if data is None:
        return []
    if isinstance(data, dict):
        return [data]
    if not isinstance(data, list):
        raise ValueError(f"Expected a list of icon records, got {type(data).__name__}")
    return data


def main(argv=None):
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Generate the Icon enum from icon records on stdin"
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log skipped records and totals to stderr",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        icons = load_icons(sys.stdin.read())
    except (yaml.YAMLError, ValueError) as e:
        print(f"ERROR: Failed to read icon records: {e}", file=sys.stderr)
        return 1

    try:
        Generator().run(icons)
    except UnknownIconStyle as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
