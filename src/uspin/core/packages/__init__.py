"""Package list model and parser.

This package stays dependency-lite (no dispatcher imports) so the operation
types can be shared by the parser, the dispatcher and the CLI.
"""

from .model import (
    OPERATION_TYPES,
    GroupOp,
    Operation,
    OperationKind,
    OpStack,
    PackageOp,
    RepoOp,
)
from .parser import build_stack, parse_packages_file

__all__ = [
    "OperationKind",
    "RepoOp",
    "GroupOp",
    "PackageOp",
    "Operation",
    "OPERATION_TYPES",
    "OpStack",
    "build_stack",
    "parse_packages_file",
]
