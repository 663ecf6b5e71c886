"""
USpin CLI package.

Provides the command-line interface with auto-discovery of commands from
``uspin/cli/commands``.

Framework utilities for building CLI commands:
- _output: Output formatting (JSON/text modes)
- _args: Common argument registration helpers
"""
from ._args import add_json_flag, add_spin_file_arg, add_standard_flags
from ._output import OutputFormatter

__all__ = [
    "OutputFormatter",
    "add_json_flag",
    "add_spin_file_arg",
    "add_standard_flags",
]
