"""USpin image configuration (`.spin` files)."""
from __future__ import annotations

from .image import ImageConfiguration, load_image_config

__all__ = ["ImageConfiguration", "load_image_config"]
