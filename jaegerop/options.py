"""Flattened command-line options for Jaeger components."""

from __future__ import annotations

import json
import math
from decimal import Decimal
from typing import Any, Iterator, Mapping

_HTML_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def _marshal(obj: Any) -> str:
    """Encode compactly with sorted keys and HTML-safe escaping."""
    text = json.dumps(obj, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    for char, escaped in _HTML_ESCAPES.items():
        text = text.replace(char, escaped)
    return text


def _format_float(value: float) -> str:
    """Render a float the shortest way, switching to exponent form like %g."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    sign = "-" if math.copysign(1.0, value) < 0 else ""
    if value == 0:
        return sign + "0"

    _, digit_tuple, exponent = Decimal(repr(abs(value))).as_tuple()
    digits = "".join(str(d) for d in digit_tuple).lstrip("0")
    stripped = digits.rstrip("0")
    exponent += len(digits) - len(stripped)
    digits = stripped
    point = len(digits) + exponent
    exp10 = point - 1

    if exp10 < -4 or exp10 >= 6:
        mantissa = digits[0] + ("." + digits[1:] if len(digits) > 1 else "")
        exp_sign = "-" if exp10 < 0 else "+"
        return f"{sign}{mantissa}e{exp_sign}{abs(exp10):02d}"
    if point <= 0:
        return f"{sign}0.{'0' * -point}{digits}"
    if point >= len(digits):
        return sign + digits + "0" * (point - len(digits))
    return f"{sign}{digits[:point]}.{digits[point:]}"


def _format_value(value: Any) -> str:
    if value is None:
        return "<nil>"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _format_float(value)
    if isinstance(value, Mapping):
        inner = " ".join(f"{k}:{_format_value(v)}" for k, v in sorted(value.items()))
        return f"map[{inner}]"
    if isinstance(value, (list, tuple)):
        return "[" + " ".join(_format_value(v) for v in value) + "]"
    return str(value)


def _flatten(entries: dict[str, str], key: str, value: Any) -> None:
    if isinstance(value, Mapping):
        for sub_key, sub_value in value.items():
            _flatten(entries, f"{key}.{sub_key}", sub_value)
    elif value is not None:
        entries[key] = _format_value(value)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON value {name!r}")


class Options:
    """Option entries flattened into dot-separated keys with string values."""

    __slots__ = ("_opts",)

    def __init__(self, entries: Mapping[str, Any] | None = None) -> None:
        self._opts: dict[str, str] = {}
        for key, value in (entries or {}).items():
            _flatten(self._opts, str(key), value)

    @classmethod
    def _from_flat(cls, flat: Mapping[str, str]) -> "Options":
        options = cls()
        options._opts = dict(flat)
        return options

    @classmethod
    def from_json(cls, data: str | bytes) -> "Options":
        """Parse a JSON object, keeping numbers exactly as written."""
        if isinstance(data, (bytes, bytearray)):
            data = data.decode("utf-8")
        entries = json.loads(
            data,
            parse_int=str,
            parse_float=str,
            parse_constant=_reject_constant,
        )
        if entries is not None and not isinstance(entries, dict):
            raise ValueError(
                f"cannot read options from a JSON {type(entries).__name__}"
            )
        return cls(entries)

    def to_json(self) -> str:
        """Encode the flattened entries as a JSON object."""
        return _marshal(self._opts)

    def filter(self, prefix: str) -> "Options":
        """Keep only entries under ``prefix.`` or ``prefix-archive.``."""
        prefixes = (prefix + ".", prefix + "-archive.")
        return self._from_flat(
            {k: v for k, v in self._opts.items() if k.startswith(prefixes)}
        )

    def to_args(self) -> list[str]:
        """Return the entries as ``--key=value`` container arguments."""
        return [f"--{key}={value}" for key, value in self._opts.items()]

    def as_dict(self) -> dict[str, str]:
        """Return a copy of the flattened entries."""
        return dict(self._opts)

    def __len__(self) -> int:
        return len(self._opts)

    def __iter__(self) -> Iterator[str]:
        return iter(self._opts)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Options):
            return NotImplemented
        return self._opts == other._opts

    def __repr__(self) -> str:
        return f"Options({self._opts!r})"