"""JSON display - one JSON document per line on stdout."""

import json
from typing import Any

from .base import Display


class JSONDisplay(Display):
    """Machine-readable display for scripts and CI jobs.

    The comparison itself is a single ``json_output`` document. Failures that
    stop the comparison before it produces one are emitted as
    ``{"type": "error", ...}`` records so a consumer always gets JSON.
    """

    def _record(self, kind: str, message: str, **fields: Any) -> None:
        record = {"type": kind, "message": message, **fields}
        print(json.dumps(record), flush=True)

    def success(self, message: str, **kwargs) -> None:
        self._record("success", message, **kwargs)

    def error(self, message: str, **kwargs) -> None:
        self._record("error", message, **kwargs)

    def info(self, message: str, **kwargs) -> None:
        self._record("info", message)

    def json_output(self, data: Any, **kwargs) -> None:
        print(json.dumps(data, indent=kwargs.get("indent")), flush=True)
