"""USpin plan command.

SUMMARY: Show the package manager calls a .spin file would produce.

Nothing is installed: the stack is applied to a recording package manager.
"""

from __future__ import annotations

import argparse

from uspin.cli import OutputFormatter, add_standard_flags
from uspin.core import PlanRecorder, UspinError, apply_stack, load_image_spec

SUMMARY = "Show the batched package manager calls for a .spin file (dry run)"


def register_args(parser: argparse.ArgumentParser) -> None:
    add_standard_flags(parser)


def _format_call(name: str, args: dict) -> str:
    if name == "add_repo":
        return f"add-repo {args['name']} {args['uri']}"
    verb = "install-groups" if name == "install_groups" else "install-packages"
    flag = " --ignore-safety" if args["ignore_safety"] else ""
    return f"{verb}{flag} {' '.join(args['names'])}"


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))

    try:
        spec = load_image_spec(args.spin_file)
        recorder = PlanRecorder()
        apply_stack(recorder, spec.stack)
    except UspinError as e:
        formatter.error(e)
        return 1

    if formatter.json_mode:
        formatter.success({"spin_file": args.spin_file, "calls": recorder.to_dict()}, "")
        return 0

    for index, (name, call_args) in enumerate(recorder.calls, start=1):
        formatter.text(f"{index:>3}. {_format_call(name, call_args)}")
    return 0
