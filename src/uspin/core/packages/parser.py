"""Package list parser.

A package list is a YAML sequence, applied top to bottom::

    - repo: Solus
      uri: https://mirrors.rit.edu/solus/packages/shannon/eopkg-index.xml.xz
    - group: system.base
    - group: [desktop.budgie, desktop.core]
      ignore_safety: true
    - package: nano

Each entry expands into one operation per name. Consecutive operations of the
same kind (and, for groups/packages, the same ``ignore_safety``) share a block
of the resulting :class:`OpStack`.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Union

import yaml

from uspin.core.exceptions import PackageListParseError
from uspin.core.schemas import SchemaValidationError, validate_payload
from uspin.core.utils.io import read_yaml

from .model import GroupOp, Operation, OpStack, PackageOp, RepoOp

logger = logging.getLogger(__name__)

PACKAGES_SCHEMA = "packages.schema.yaml"


def _as_names(value: Union[str, List[str]]) -> List[str]:
    if isinstance(value, str):
        return [value]
    return list(value)


def _expand_entry(entry: Dict[str, Any]) -> List[Operation]:
    if "repo" in entry:
        return [RepoOp(name=entry["repo"], uri=entry["uri"])]
    ignore_safety = bool(entry.get("ignore_safety", False))
    if "group" in entry:
        return [GroupOp(name=n, ignore_safety=ignore_safety) for n in _as_names(entry["group"])]
    return [PackageOp(name=n, ignore_safety=ignore_safety) for n in _as_names(entry["package"])]


def build_stack(entries: List[Dict[str, Any]]) -> OpStack:
    """Build an :class:`OpStack` from already validated package list entries."""
    return OpStack.from_operations(op for entry in entries for op in _expand_entry(entry))


def parse_packages_file(path: Union[str, Path]) -> OpStack:
    """Parse the package list at ``path`` into an operation stack.

    Raises:
        PackageListParseError: If the file is missing, is not valid YAML,
            is empty, or does not satisfy the package list schema.
    """
    source = Path(path)
    ctx = {"path": str(source)}

    try:
        data = read_yaml(source)
    except FileNotFoundError as exc:
        raise PackageListParseError(f"Package list not found: {source}", context=ctx) from exc
    except yaml.YAMLError as exc:
        raise PackageListParseError(f"Invalid YAML in {source}: {exc}", context=ctx) from exc
    except OSError as exc:
        raise PackageListParseError(f"Cannot read {source}: {exc}", context=ctx) from exc

    if data is None:
        raise PackageListParseError(f"Package list is empty: {source}", context=ctx)

    try:
        validate_payload(data, PACKAGES_SCHEMA)
    except SchemaValidationError as exc:
        raise PackageListParseError(f"Invalid package list {source}: {exc}", context=ctx) from exc

    stack = build_stack(data)
    logger.debug(
        "Parsed %d operations in %d blocks from %s",
        len(stack.operations),
        len(stack),
        source,
    )
    return stack


__all__ = ["parse_packages_file", "build_stack", "PACKAGES_SCHEMA"]
