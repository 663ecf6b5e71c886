"""JSON Schema validation for USpin input files."""
from __future__ import annotations

from .validation import (
    SchemaValidationError,
    load_schema,
    validate_payload,
)

__all__ = [
    "load_schema",
    "validate_payload",
    "SchemaValidationError",
]
