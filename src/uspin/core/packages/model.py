from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, List, Sequence, Tuple, Union


class OperationKind(str, Enum):
    REPO = "repo"
    GROUP = "group"
    PACKAGE = "package"


@dataclass(frozen=True)
class RepoOp:
    """Add a package repository."""

    name: str
    uri: str

    kind = OperationKind.REPO


@dataclass(frozen=True)
class GroupOp:
    """Install a package group (component)."""

    name: str
    ignore_safety: bool = False

    kind = OperationKind.GROUP


@dataclass(frozen=True)
class PackageOp:
    """Install a single package."""

    name: str
    ignore_safety: bool = False

    kind = OperationKind.PACKAGE


Operation = Union[RepoOp, GroupOp, PackageOp]

OPERATION_TYPES = (RepoOp, GroupOp, PackageOp)


def _same_block(block: Sequence[Operation], op: Operation) -> bool:
    head = block[0]
    if type(head) is not type(op):
        return False
    if isinstance(op, RepoOp):
        return True
    return head.ignore_safety == op.ignore_safety


@dataclass(frozen=True)
class OpStack:
    """Ordered blocks of operations, each block safe to batch in one call.

    Every block holds operations of a single kind; group and package blocks
    additionally share one ``ignore_safety`` value. Blocks are tuples, so a
    stack cannot change once built.
    """

    blocks: Tuple[Tuple[Operation, ...], ...] = ()

    @classmethod
    def from_operations(cls, ops: Iterable[Operation]) -> "OpStack":
        """Group ``ops`` into blocks, keeping their order."""
        blocks: List[List[Operation]] = []
        for op in ops:
            if blocks and _same_block(blocks[-1], op):
                blocks[-1].append(op)
            else:
                blocks.append([op])
        return cls(blocks=tuple(tuple(block) for block in blocks))

    @property
    def operations(self) -> Tuple[Operation, ...]:
        return tuple(op for block in self.blocks for op in block)

    def __iter__(self) -> Iterator[Tuple[Operation, ...]]:
        return iter(self.blocks)

    def __len__(self) -> int:
        return len(self.blocks)


__all__ = [
    "OperationKind",
    "RepoOp",
    "GroupOp",
    "PackageOp",
    "Operation",
    "OPERATION_TYPES",
    "OpStack",
]
