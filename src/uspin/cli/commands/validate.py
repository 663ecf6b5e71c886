"""USpin validate command.

SUMMARY: Validate a .spin image specification and its package list.
"""

from __future__ import annotations

import argparse
from collections import Counter

from uspin.cli import OutputFormatter, add_standard_flags
from uspin.core import UspinError, load_image_spec

SUMMARY = "Validate a .spin file and its package list"


def register_args(parser: argparse.ArgumentParser) -> None:
    add_standard_flags(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))

    try:
        spec = load_image_spec(args.spin_file)
    except UspinError as e:
        formatter.error(e)
        return 1

    counts = Counter(op.kind.value for op in spec.stack.operations)
    formatter.success(
        {
            "spin_file": args.spin_file,
            "name": spec.config.name,
            "base_dir": str(spec.base_dir),
            "packages_file": str(spec.packages_path),
            "blocks": len(spec.stack),
            "operations": dict(counts),
        },
        f"✅ {args.spin_file} is valid "
        f"({counts['repo']} repos, {counts['group']} groups, {counts['package']} packages "
        f"in {len(spec.stack)} blocks)",
    )
    return 0
