"""Common CLI argument registration utilities."""
from __future__ import annotations

import argparse


def add_json_flag(parser: argparse.ArgumentParser) -> None:
    """Add --json flag for JSON output mode."""
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON",
    )


def add_spin_file_arg(parser: argparse.ArgumentParser) -> None:
    """Add the positional `.spin` file argument."""
    parser.add_argument(
        "spin_file",
        help="Path to the image specification (.spin file)",
    )


def add_standard_flags(parser: argparse.ArgumentParser) -> None:
    """Add the flags shared by every command."""
    add_spin_file_arg(parser)
    add_json_flag(parser)


__all__ = ["add_json_flag", "add_spin_file_arg", "add_standard_flags"]
