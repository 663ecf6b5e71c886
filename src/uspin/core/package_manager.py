"""Package manager interface and the dry-run plan recorder.

USpin never installs anything itself; it drives an injected
:class:`PackageManager`. Failures are signalled by raising.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Protocol, Sequence, Tuple, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class PackageManager(Protocol):
    """Protocol for package managers driven by the operation dispatcher."""

    def add_repo(self, name: str, uri: str) -> None:
        ...

    def install_groups(self, ignore_safety: bool, names: Sequence[str]) -> None:
        ...

    def install_packages(self, ignore_safety: bool, names: Sequence[str]) -> None:
        ...


@dataclass
class PlanRecorder:
    """PackageManager that records calls instead of performing them.

    Used for dry runs: the recorded calls are exactly the batches a real
    package manager would receive.
    """

    calls: List[Tuple[str, Dict[str, Any]]] = field(default_factory=list)

    def add_repo(self, name: str, uri: str) -> None:
        logger.info("add-repo %s %s", name, uri)
        self.calls.append(("add_repo", {"name": name, "uri": uri}))

    def install_groups(self, ignore_safety: bool, names: Sequence[str]) -> None:
        logger.info("install-groups ignore_safety=%s %s", ignore_safety, " ".join(names))
        self.calls.append(
            ("install_groups", {"ignore_safety": ignore_safety, "names": list(names)})
        )

    def install_packages(self, ignore_safety: bool, names: Sequence[str]) -> None:
        logger.info("install-packages ignore_safety=%s %s", ignore_safety, " ".join(names))
        self.calls.append(
            ("install_packages", {"ignore_safety": ignore_safety, "names": list(names)})
        )

    def to_dict(self) -> List[Dict[str, Any]]:
        return [{"call": name, **args} for name, args in self.calls]


__all__ = ["PackageManager", "PlanRecorder"]
