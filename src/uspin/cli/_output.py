"""CLI output for USpin commands.

Results go to stdout and errors to stderr, either as text or, with
``--json``, as one JSON document per stream.
"""
from __future__ import annotations

import json
import sys
from typing import Any, Dict

from uspin.core.exceptions import UspinError


class OutputFormatter:
    """Render command results in text or JSON mode."""

    def __init__(self, json_mode: bool = False, indent: int = 2):
        self.json_mode = json_mode
        self.indent = indent

    def _dump(self, payload: Dict[str, Any], stream=None) -> None:
        print(json.dumps(payload, indent=self.indent, default=str), file=stream or sys.stdout)

    def success(self, data: Dict[str, Any], message: str) -> None:
        """Print ``data`` as a JSON result, or ``message`` in text mode."""
        if self.json_mode:
            self._dump({"status": "success", **data})
        else:
            print(message)

    def error(self, error: UspinError) -> None:
        """Report ``error`` on stderr, keyed by its class name in JSON mode."""
        if self.json_mode:
            payload = error.to_json_error()
            out: Dict[str, Any] = {"error": payload["code"], "message": payload["message"]}
            if payload["context"]:
                out["context"] = payload["context"]
            self._dump(out, sys.stderr)
        else:
            print(f"Error: {error}", file=sys.stderr)

    def text(self, message: str) -> None:
        if not self.json_mode:
            print(message)


__all__ = ["OutputFormatter"]
