"""
ImageSpec: a validated, loaded `.spin` image specification.

The `.spin` file is loaded first; its ``image.packages`` entry names the
package list, relative to the directory containing the `.spin` file.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Union

from uspin.core.config import ImageConfiguration, load_image_config
from uspin.core.exceptions import InvalidInputError, PathResolutionError
from uspin.core.packages import OpStack, parse_packages_file

logger = logging.getLogger(__name__)

SPIN_SUFFIX = ".spin"

ConfigParser = Callable[[Path], ImageConfiguration]
StackParser = Callable[[Path], OpStack]


@dataclass(frozen=True)
class ImageSpec:
    """A validated image configuration ready for building."""

    stack: OpStack
    config: ImageConfiguration
    base_dir: Path

    @property
    def packages_path(self) -> Path:
        return resolve_packages_path(self.base_dir, self.config)


def resolve_packages_path(base_dir: Path, config: ImageConfiguration) -> Path:
    """Join the package list named by ``config`` onto ``base_dir``, collapsing ``..`` segments."""
    return Path(os.path.normpath(base_dir / config.packages))


def _base_dir(spin_file: Path) -> Path:
    try:
        return Path(os.path.abspath(spin_file.parent))
    except OSError as exc:
        raise PathResolutionError(
            f"Cannot resolve directory of {spin_file}: {exc}",
            context={"path": str(spin_file)},
        ) from exc


def load_image_spec(
    path: Union[str, Path],
    *,
    config_parser: ConfigParser = load_image_config,
    stack_parser: StackParser = parse_packages_file,
) -> ImageSpec:
    """Load a `.spin` file with its package list prepped into a usable stack.

    Errors raised by ``config_parser`` and ``stack_parser`` propagate unchanged.

    Raises:
        InvalidInputError: If ``path`` does not end with ``.spin``.
        PathResolutionError: If the `.spin` file's directory cannot be resolved.
    """
    if not str(path).endswith(SPIN_SUFFIX):
        raise InvalidInputError(f"Not a {SPIN_SUFFIX} file: {path}", context={"path": str(path)})

    spin_file = Path(path)
    config = config_parser(spin_file)
    base_dir = _base_dir(spin_file)

    pkgs_file = resolve_packages_path(base_dir, config)
    logger.debug("Loading package list %s", pkgs_file)
    stack = stack_parser(pkgs_file)

    logger.info(
        "Loaded %s: %d operations in %d blocks",
        spin_file.name,
        len(stack.operations),
        len(stack),
    )
    return ImageSpec(stack=stack, config=config, base_dir=base_dir)


__all__ = [
    "ImageSpec",
    "SPIN_SUFFIX",
    "load_image_spec",
    "resolve_packages_path",
]
