"""Shared schema validation utilities.

USpin validates `.spin` configurations and package lists using JSON Schema.
Schemas are stored as YAML files (human-readable) under ``uspin.data/schemas/``
and loaded in a single, consistent way across the codebase.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Any, Dict

import jsonschema

from uspin.core.utils.io import read_yaml
from uspin.data import get_data_path


class SchemaValidationError(ValueError):
    """Raised when schema validation fails."""

    pass


@lru_cache(maxsize=16)
def load_schema(schema_name: str) -> Dict[str, Any]:
    """Load a bundled schema dict.

    Canonical schema serialization format is YAML (JSON Schema expressed in YAML).
    Automatically appends ``.yaml`` if no extension is present.

    Args:
        schema_name: Schema file name under the bundled schemas root
            (e.g., "packages.schema.yaml" or "image-config.schema").

    Returns:
        Parsed schema dictionary.

    Raises:
        FileNotFoundError: If schema file doesn't exist.
        ValueError: If schema is not a YAML mapping.
    """
    lowered = schema_name.lower()
    if not (lowered.endswith(".yaml") or lowered.endswith(".yml")):
        schema_name = f"{schema_name}.yaml"

    schema_path = get_data_path("schemas", schema_name)
    if not schema_path.exists():
        raise FileNotFoundError(f"Schema not found: {schema_name} (searched {schema_path.parent})")

    schema = read_yaml(schema_path)
    if not isinstance(schema, dict):
        raise ValueError(f"Schema must be a YAML mapping, got {type(schema).__name__}")
    return schema


def validate_payload(payload: Any, schema_name: str) -> None:
    """Validate a payload against a bundled JSON schema.

    Args:
        payload: Data to validate.
        schema_name: Name of schema to validate against.

    Raises:
        SchemaValidationError: If validation fails.
        FileNotFoundError: If schema doesn't exist.
    """
    schema = load_schema(schema_name)

    try:
        jsonschema.validate(instance=payload, schema=schema)
    except jsonschema.ValidationError as exc:
        path_str = ".".join(str(p) for p in exc.absolute_path)
        where = f" at '{path_str}'" if path_str else ""
        raise SchemaValidationError(
            f"Validation failed against schema '{schema_name}'{where}: {exc.message}"
        ) from exc


__all__ = [
    "load_schema",
    "validate_payload",
    "SchemaValidationError",
]
