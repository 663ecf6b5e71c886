from __future__ import annotations

from typing import Any, Dict, Mapping


class UspinError(Exception):
    """Base exception for USpin."""

    context: Dict[str, Any]

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        if context is not None:
            # Store a shallow copy to avoid accidental mutation.
            self.context = dict(context)
        else:
            self.context = {}

    def to_json_error(self) -> Dict[str, Any]:
        """Return a JSON-serializable error payload."""
        return {
            "message": str(self),
            "code": self.__class__.__name__,
            "context": self.context,
        }


class InvalidInputError(UspinError, ValueError):
    """Raised when a path handed to the loader is not a `.spin` file."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        UspinError.__init__(self, message, context=context)
        ValueError.__init__(self, message)


class ConfigLoadError(UspinError):
    """Raised when a `.spin` configuration cannot be read or validated."""


class PathResolutionError(UspinError, OSError):
    """Raised when the base directory of a `.spin` file cannot be resolved."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        UspinError.__init__(self, message, context=context)
        OSError.__init__(self, message)


class PackageListParseError(UspinError):
    """Raised when a package list cannot be read, validated, or is empty."""


class EmptyOperationListError(UspinError, RuntimeError):
    """Internal error: an empty operation list reached the dispatcher."""

    def __init__(
        self,
        message: str = "Internal error: 0 operations passed to apply_operations",
        *,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        UspinError.__init__(self, message, context=context)
        RuntimeError.__init__(self, message)


class UnsupportedOperationError(UspinError, TypeError):
    """Raised when the dispatcher does not know how to handle an operation."""

    def __init__(
        self,
        message: str = "Unknown or unsupported operation requested",
        *,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        UspinError.__init__(self, message, context=context)
        TypeError.__init__(self, message)


class MixedOperationKindsError(UnsupportedOperationError):
    """Raised when an operation list mixes more than one operation kind."""


__all__ = [
    "UspinError",
    "InvalidInputError",
    "ConfigLoadError",
    "PathResolutionError",
    "PackageListParseError",
    "EmptyOperationListError",
    "UnsupportedOperationError",
    "MixedOperationKindsError",
]
