"""
Image configuration loading (YAML-only).

A `.spin` file is a YAML mapping with an ``image`` section::

    image:
      name: solus-budgie
      packages: budgie.packages

``image.packages`` is resolved relative to the directory holding the `.spin`
file by the image spec loader; this module only reads and validates it.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping, Optional, Union

import yaml

from uspin.core.exceptions import ConfigLoadError
from uspin.core.schemas import SchemaValidationError, validate_payload
from uspin.core.utils.io import read_yaml

logger = logging.getLogger(__name__)

CONFIG_SCHEMA = "image-config.schema.yaml"


@dataclass(frozen=True)
class ImageConfiguration:
    """Validated contents of a `.spin` file."""

    packages: str
    source: Path
    name: Optional[str] = None
    raw: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}), compare=False)


def _freeze(value: Any) -> Any:
    if isinstance(value, dict):
        return MappingProxyType({k: _freeze(v) for k, v in value.items()})
    if isinstance(value, list):
        return tuple(_freeze(v) for v in value)
    return value


def load_image_config(path: Union[str, Path]) -> ImageConfiguration:
    """Read and validate the `.spin` configuration at ``path``.

    Raises:
        ConfigLoadError: If the file is missing, is not valid YAML, or does
            not satisfy the image configuration schema.
    """
    source = Path(path)
    ctx = {"path": str(source)}

    try:
        data = read_yaml(source)
    except FileNotFoundError as exc:
        raise ConfigLoadError(f"Configuration file not found: {source}", context=ctx) from exc
    except yaml.YAMLError as exc:
        raise ConfigLoadError(f"Invalid YAML in {source}: {exc}", context=ctx) from exc
    except OSError as exc:
        raise ConfigLoadError(f"Cannot read {source}: {exc}", context=ctx) from exc

    if data is None:
        raise ConfigLoadError(f"Configuration file is empty: {source}", context=ctx)

    try:
        validate_payload(data, CONFIG_SCHEMA)
    except SchemaValidationError as exc:
        raise ConfigLoadError(f"Invalid configuration {source}: {exc}", context=ctx) from exc

    image = data["image"]
    if os.path.isabs(image["packages"]):
        raise ConfigLoadError(
            f"image.packages must be relative to {source.name}, got {image['packages']}",
            context=ctx,
        )

    logger.debug("Loaded image configuration from %s", source)
    return ImageConfiguration(
        packages=image["packages"],
        name=image.get("name"),
        source=source,
        raw=_freeze(data),
    )


__all__ = ["ImageConfiguration", "load_image_config", "CONFIG_SCHEMA"]
