"""Human-readable JSON output, to a string or to a text stream.

Layout rules:

* an empty object or array is written as ``{}`` or ``[]``;
* a non-empty object puts one member per line, indented one level;
* an array whose items hold no non-empty array or object, and which fits
  within the right margin, is written on one line as ``[ a, b, c ]``;
  any other array puts one item per line.

Values are plain Python objects as accepted by :mod:`gcommon.jsonformat`.
"""

from abc import ABC, abstractmethod
from typing import Any, List, TextIO

from gcommon.jsonformat import _member_names, value_to_quoted_string, value_to_string

RIGHT_MARGIN = 74


def _is_container(value: Any) -> bool:
    return isinstance(value, (list, tuple, dict))


class _StyledFormatter(ABC):
    """Layout logic shared by the styled writers."""

    def __init__(self, indentation: str) -> None:
        self._indentation = indentation
        self._right_margin = RIGHT_MARGIN
        self._indent_string = ""
        self._child_values: List[str] = []
        self._add_child_values = False

    @abstractmethod
    def _put(self, text: str) -> None:
        """Append text to the document being written."""

    @abstractmethod
    def _write_indent(self) -> None:
        """Start a new line at the current indentation."""

    def _reset(self) -> None:
        self._indent_string = ""
        self._child_values = []
        self._add_child_values = False

    def _push_value(self, text: str) -> None:
        if self._add_child_values:
            self._child_values.append(text)
        else:
            self._put(text)

    def _write_with_indent(self, text: str) -> None:
        self._write_indent()
        self._put(text)

    def _indent(self) -> None:
        self._indent_string += self._indentation

    def _unindent(self) -> None:
        if self._indentation:
            self._indent_string = self._indent_string[: -len(self._indentation)]

    def _write_value(self, value: Any) -> None:
        if value is None:
            self._push_value("null")
        elif isinstance(value, (bool, int, float)):
            self._push_value(value_to_string(value))
        elif isinstance(value, str):
            self._push_value(value_to_quoted_string(value))
        elif isinstance(value, (list, tuple)):
            self._write_array_value(value)
        elif isinstance(value, dict):
            self._write_object_value(value)
        else:
            raise TypeError(f"cannot write {type(value).__name__} as JSON")

    def _write_object_value(self, value: dict) -> None:
        names = _member_names(value)
        if not names:
            self._push_value("{}")
            return
        self._write_with_indent("{")
        self._indent()
        last = len(names) - 1
        for position, name in enumerate(names):
            self._write_with_indent(value_to_quoted_string(name))
            self._put(" : ")
            self._write_value(value[name])
            if position != last:
                self._put(",")
        self._unindent()
        self._write_with_indent("}")

    def _write_array_value(self, value: Any) -> None:
        if not value:
            self._push_value("[]")
            return
        if self._is_multiline_array(value):
            self._write_with_indent("[")
            self._indent()
            rendered = list(self._child_values)
            last = len(value) - 1
            for position, child in enumerate(value):
                if rendered:
                    self._write_with_indent(rendered[position])
                else:
                    self._write_indent()
                    self._write_value(child)
                if position != last:
                    self._put(",")
            self._unindent()
            self._write_with_indent("]")
        else:
            self._put("[ " + ", ".join(self._child_values) + " ]")

    def _is_multiline_array(self, value: Any) -> bool:
        size = len(value)
        self._child_values = []
        multiline = size * 3 >= self._right_margin or any(
            _is_container(child) and len(child) > 0 for child in value
        )
        if not multiline:
            self._add_child_values = True
            try:
                for child in value:
                    self._write_value(child)
            finally:
                self._add_child_values = False
            line_length = 4 + (size - 1) * 2 + sum(len(text) for text in self._child_values)
            multiline = line_length >= self._right_margin
        return multiline


class StyledWriter(_StyledFormatter):
    """Writes a JSON value as an indented, human-friendly string."""

    def __init__(self) -> None:
        super().__init__(" " * 3)
        self._document: List[str] = []

    def write(self, root: Any) -> str:
        """Return ``root`` as a styled JSON document followed by a newline."""
        self._document = []
        self._reset()
        self._write_value(root)
        self._put("\n")
        return "".join(self._document)

    def _put(self, text: str) -> None:
        if text:
            self._document.append(text)

    def _write_indent(self) -> None:
        if self._document:
            last = self._document[-1][-1]
            if last == " ":
                return
            if last != "\n":
                self._put("\n")
        self._put(self._indent_string)


class StyledStreamWriter(_StyledFormatter):
    """Writes a JSON value in styled form to a text stream."""

    def __init__(self, indentation: str = "\t") -> None:
        super().__init__(indentation)
        self._out: TextIO | None = None

    def write(self, out: TextIO, root: Any) -> None:
        """Write ``root`` to ``out`` as a styled JSON document followed by a newline."""
        self._out = out
        self._reset()
        try:
            self._write_value(root)
            self._put("\n")
        finally:
            self._out = None

    def _put(self, text: str) -> None:
        assert self._out is not None
        self._out.write(text)

    def _write_indent(self) -> None:
        self._put("\n" + self._indent_string)