"""Apply package list operations against a package manager.

Repositories are added one at a time; groups and packages go in bulk, one
call per block.
"""
from __future__ import annotations

import logging
from typing import Iterable, Sequence

from uspin.core.exceptions import (
    EmptyOperationListError,
    MixedOperationKindsError,
    UnsupportedOperationError,
)
from uspin.core.package_manager import PackageManager
from uspin.core.packages import OPERATION_TYPES, GroupOp, Operation, PackageOp, RepoOp

logger = logging.getLogger(__name__)


def _check_homogeneous(ops: Sequence[Operation]) -> None:
    head_type = type(ops[0])
    for index, op in enumerate(ops[1:], start=1):
        if type(op) is not head_type:
            raise MixedOperationKindsError(
                f"Cannot batch {type(op).__name__} at position {index} "
                f"with {head_type.__name__} operations",
                context={"index": index, "expected": head_type.__name__, "got": type(op).__name__},
            )


def apply_operations(manager: PackageManager, ops: Sequence[Operation]) -> None:
    """Apply ``ops`` against ``manager``.

    The first operation decides the kind of the whole list. Every operation
    must share that kind; the ``ignore_safety`` flag of the first group or
    package applies to the whole batch.

    Raises:
        EmptyOperationListError: If ``ops`` is empty.
        UnsupportedOperationError: If the first operation is of unknown kind.
        MixedOperationKindsError: If ``ops`` mixes operation kinds.
    """
    if len(ops) == 0:
        raise EmptyOperationListError()

    head = ops[0]
    if not isinstance(head, OPERATION_TYPES):
        raise UnsupportedOperationError(
            context={"operation": type(head).__name__},
        )
    _check_homogeneous(ops)

    if isinstance(head, RepoOp):
        # Insert one repo at a time
        for repo in ops:
            logger.debug("Adding repository %s (%s)", repo.name, repo.uri)
            manager.add_repo(repo.name, repo.uri)
        return

    names = [op.name for op in ops]
    if isinstance(head, GroupOp):
        logger.debug("Installing %d groups (ignore_safety=%s)", len(names), head.ignore_safety)
        manager.install_groups(head.ignore_safety, names)
        return

    if isinstance(head, PackageOp):
        logger.debug("Installing %d packages (ignore_safety=%s)", len(names), head.ignore_safety)
        manager.install_packages(head.ignore_safety, names)
        return

    raise UnsupportedOperationError(context={"operation": type(head).__name__})


def apply_stack(manager: PackageManager, blocks: Iterable[Sequence[Operation]]) -> None:
    """Apply every block of an operation stack in order, stopping at the first failure."""
    for index, block in enumerate(blocks):
        logger.debug("Applying block %d (%d operations)", index, len(block))
        apply_operations(manager, block)


__all__ = ["apply_operations", "apply_stack"]
