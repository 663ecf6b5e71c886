"""
USpin - image specification loader

USpin reads a `.spin` image specification and its package list, and turns
them into batched package-manager operations for building an OS image.
"""

__version__ = "1.0.0"
__all__ = ["__version__"]
