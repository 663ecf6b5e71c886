"""USpin core: image spec loading and operation dispatch."""
from __future__ import annotations

from .exceptions import (
    ConfigLoadError,
    EmptyOperationListError,
    InvalidInputError,
    MixedOperationKindsError,
    PackageListParseError,
    PathResolutionError,
    UnsupportedOperationError,
    UspinError,
)
from .image_spec import SPIN_SUFFIX, ImageSpec, load_image_spec
from .operations import apply_operations, apply_stack
from .package_manager import PackageManager, PlanRecorder

__all__ = [
    "ImageSpec",
    "SPIN_SUFFIX",
    "load_image_spec",
    "apply_operations",
    "apply_stack",
    "PackageManager",
    "PlanRecorder",
    "UspinError",
    "InvalidInputError",
    "ConfigLoadError",
    "PathResolutionError",
    "PackageListParseError",
    "EmptyOperationListError",
    "UnsupportedOperationError",
    "MixedOperationKindsError",
]
