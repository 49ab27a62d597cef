"""Compact JSON output and the scalar formatting it shares with other writers.

JSON values are plain Python objects: ``None``, ``bool``, ``int``, ``float``,
``str``, lists or tuples for arrays and dicts with string keys for objects.
Object members are written in sorted key order.
"""

from typing import Any, List

_SPECIAL_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


def _is_control_character(ch: str) -> bool:
    return 0 < ord(ch) <= 0x1F


def _format_real(value: float) -> str:
    text = "%#.16g" % value
    if not text.endswith("0"):
        return text
    pos = len(text) - 1
    while pos > 0 and text[pos] == "0":
        pos -= 1
    last_nonzero = pos
    while pos >= 0:
        ch = text[pos]
        if ch.isdigit():
            pos -= 1
            continue
        if ch == ".":
            # Drop the run of trailing zeros, but keep one of them.
            return text[: last_nonzero + 2]
        return text
    return text


def value_to_string(value: Any) -> str:
    """Format a boolean, integer or real number as JSON text."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _format_real(value)
    raise TypeError(f"cannot format {type(value).__name__} as a JSON scalar")


def value_to_quoted_string(value: str) -> str:
    """Return ``value`` as a quoted JSON string with special characters escaped.

    The text ends at the first NUL character, as a C string would.
    """
    if not isinstance(value, str):
        raise TypeError(f"expected str, got {type(value).__name__}")
    value = value.split("\x00", 1)[0]
    parts = ['"']
    for ch in value:
        escaped = _SPECIAL_ESCAPES.get(ch)
        if escaped is not None:
            parts.append(escaped)
        elif _is_control_character(ch):
            parts.append("\\u%04X" % ord(ch))
        else:
            parts.append(ch)
    parts.append('"')
    return "".join(parts)


def _member_names(obj: dict) -> List[str]:
    for key in obj:
        if not isinstance(key, str):
            raise TypeError(f"object member names must be str, got {type(key).__name__}")
    return sorted(obj)


class FastWriter:
    """Writes a JSON value on a single line with no extra whitespace."""

    def __init__(self) -> None:
        self._yaml_compatible = False

    def enable_yaml_compatibility(self) -> None:
        """Put a space after each member-name colon."""
        self._yaml_compatible = True

    def write(self, root: Any) -> str:
        """Return ``root`` as a one-line JSON document followed by a newline."""
        parts: List[str] = []
        self._write_value(root, parts)
        parts.append("\n")
        return "".join(parts)

    def _write_value(self, value: Any, parts: List[str]) -> None:
        if value is None:
            parts.append("null")
        elif isinstance(value, (bool, int, float)):
            parts.append(value_to_string(value))
        elif isinstance(value, str):
            parts.append(value_to_quoted_string(value))
        elif isinstance(value, (list, tuple)):
            parts.append("[")
            for index, item in enumerate(value):
                if index:
                    parts.append(",")
                self._write_value(item, parts)
            parts.append("]")
        elif isinstance(value, dict):
            separator = ": " if self._yaml_compatible else ":"
            parts.append("{")
            for index, name in enumerate(_member_names(value)):
                if index:
                    parts.append(",")
                parts.append(value_to_quoted_string(name))
                parts.append(separator)
                self._write_value(value[name], parts)
            parts.append("}")
        else:
            raise TypeError(f"cannot write {type(value).__name__} as JSON")