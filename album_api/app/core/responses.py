"""
JSON response classes.

Album responses are pretty-printed with four-space indentation, the
way the original album server rendered them.  The indentation is
cosmetic; clients parse the body as ordinary JSON.
"""

import json
from typing import Any

from fastapi.responses import JSONResponse


class IndentedJSONResponse(JSONResponse):
    """``JSONResponse`` that renders indented, human-readable JSON."""

    indent = 4

    def render(self, content: Any) -> bytes:
        return json.dumps(
            content,
            ensure_ascii=False,
            allow_nan=False,
            indent=self.indent,
            separators=(",", ": "),
        ).encode("utf-8")


def response_class_for(indent_json: bool) -> type:
    """Return the response class matching the ``indent_json`` setting."""
    return IndentedJSONResponse if indent_json else JSONResponse
