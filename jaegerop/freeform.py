"""Free-form options that keep their hierarchical JSON structure."""

from __future__ import annotations

import json
from typing import Any, Mapping

_HTML_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def _marshal(obj: Any) -> str:
    text = json.dumps(obj, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    for char, escaped in _HTML_ESCAPES.items():
        text = text.replace(char, escaped)
    return text


class FreeForm:
    """Options stored as raw JSON, preserving nesting."""

    __slots__ = ("_json",)

    def __init__(self, mapping: Mapping[str, Any] | None = None) -> None:
        self._json = "" if mapping is None else _marshal(dict(mapping))

    @classmethod
    def from_json(cls, data: str | bytes) -> "FreeForm":
        """Keep the given JSON text as it is."""
        if isinstance(data, (bytes, bytearray)):
            data = data.decode("utf-8")
        form = cls()
        form._json = data
        return form

    def to_json(self) -> str:
        """Return the JSON text, ``{}`` when nothing is set."""
        return self._json or "{}"

    def is_empty(self) -> bool:
        return self._json in ("", "{}")

    def get_map(self) -> dict[str, Any]:
        """Decode the JSON text into a dictionary."""
        if not self._json:
            raise ValueError("unexpected end of JSON input")
        result = json.loads(self._json)
        if not isinstance(result, dict):
            raise ValueError(
                f"cannot read a JSON {type(result).__name__} as a mapping"
            )
        return result

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FreeForm):
            return NotImplemented
        return self._json == other._json

    def __repr__(self) -> str:
        return f"FreeForm({self._json!r})"