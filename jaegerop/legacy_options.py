"""Options and free-form settings for the legacy ``io.jaegertracing/v1alpha1`` resource."""

from __future__ import annotations

import json
from typing import Any, Mapping

from .freeform import FreeForm as _FreeForm
from .options import Options as _Options


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON value {name!r}")


class Options(_Options):
    """Flattened option entries as read by the legacy resource.

    Numbers are read as floating point values, and JSON that cannot be read
    as an object leaves the options empty instead of failing.
    """

    __slots__ = ()

    def __init__(self, entries: Mapping[str, Any] | None = None) -> None:
        super().__init__(entries)

    @classmethod
    def from_json(cls, data: str | bytes) -> "Options":
        """Parse a JSON object; unreadable input gives empty options."""
        try:
            if isinstance(data, (bytes, bytearray)):
                data = data.decode("utf-8")
            entries = json.loads(
                data, parse_int=float, parse_constant=_reject_constant
            )
        except ValueError:
            return cls()
        if not isinstance(entries, dict):
            return cls()
        return cls(entries)

    def to_json(self) -> str:
        """Return the flattened entries as a JSON object."""
        return super().to_json()

    def filter(self, prefix: str) -> "Options":
        """Keep only the entries under ``prefix`` or ``prefix-archive``."""
        return Options(super().filter(prefix).as_dict())

    def to_args(self) -> list[str]:
        """Render the entries as ``--key=value`` command-line arguments."""
        return super().to_args()

    def as_dict(self) -> dict[str, str]:
        """Return the flattened entries keyed by dotted names."""
        return super().as_dict()


class FreeForm(_FreeForm):
    """Options stored as raw JSON, preserving nesting."""

    __slots__ = ()

    def __init__(self, mapping: Mapping[str, Any] | None = None) -> None:
        super().__init__(mapping)

    @classmethod
    def from_json(cls, data: str | bytes) -> "FreeForm":
        """Keep the given JSON text as it is."""
        form = super().from_json(data)
        return form  # type: ignore[return-value]

    def to_json(self) -> str:
        """Return the JSON text, ``{}`` when nothing is set."""
        return super().to_json()

    def is_empty(self) -> bool:
        return super().is_empty()