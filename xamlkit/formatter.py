"""Helpers that turn XAML attribute values into generated C++ statements."""

from __future__ import annotations

import re

__all__ = [
    "FormatterError",
    "get_name",
    "get_height",
    "get_fill",
    "get_width",
    "get_horizontal_alignment",
    "get_vertical_alignment",
    "get_text_wrapping",
    "get_text_alignment",
    "get_font_family",
    "get_font_size",
    "get_text",
    "get_placeholder_text",
    "get_click_signature",
    "get_click_call",
    "format_string",
    "get_grid_row",
    "get_grid_column",
    "get_visibility",
    "get_margin",
]


class FormatterError(ValueError):
    """Raised when an attribute value cannot be turned into code."""


_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_HEX_PREFIX = re.compile(r"\s*(?:0[xX])?([0-9a-fA-F]+)")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_UINT_MAX = 2**32 - 1

_ESCAPES = {
    "'": "\\'",
    '"': '\\"',
    "?": "\\?",
    "\\": "\\\\",
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
}


def _parse_int(value: str) -> int:
    """Parse the leading integer of ``value`` as a 32-bit signed number."""
    match = _INT_PREFIX.match(value)
    if match is None:
        raise FormatterError(f"not an integer: {value!r}")
    number = int(match.group(1))
    if not _INT_MIN <= number <= _INT_MAX:
        raise FormatterError(f"integer out of range: {value!r}")
    return number


def _parse_hex(text: str) -> int:
    """Parse a leading hexadecimal number as a 32-bit unsigned value."""
    match = _HEX_PREFIX.match(text)
    if match is None:
        return 0
    return min(int(match.group(1), 16), _UINT_MAX)


def _prefixed(call: str, root: bool) -> str:
    return call if root else "%name%->" + call


def get_name(value: str, root: bool = False) -> str:
    """Statement that sets an element's name."""
    if root:
        return "setName(" + value + ");\n"
    return '%name%->setName("' + value + '");\n'


def get_height(value: str, root: bool = False) -> str:
    """Statement that sets an element's height."""
    return _prefixed(f"setHeight({_parse_int(value)});\n", root)


def get_width(value: str, root: bool = False) -> str:
    """Statement that sets an element's width."""
    return _prefixed(f"setWidth({_parse_int(value)});\n", root)


def get_fill(value: str, root: bool = False) -> str:
    """Statement that sets a fill colour given as ``#AARRGGBB``."""
    if not value:
        raise FormatterError("empty fill value")
    return _prefixed(f"setFill({_parse_hex(value[1:])});\n", root)


def _choose(value: str, options: dict[str, str], what: str) -> str:
    try:
        return options[value]
    except KeyError:
        raise FormatterError(f"unknown {what}: {value!r}") from None


def get_horizontal_alignment(value: str) -> str:
    """Statement that sets horizontal alignment."""
    options = {
        name: f"%name%->setHorizontalAlignment(OpenXaml::HorizontalAlignment::{name});\n"
        for name in ("Right", "Left", "Center", "Stretch")
    }
    return _choose(value, options, "horizontal alignment")


def get_vertical_alignment(value: str) -> str:
    """Statement that sets vertical alignment."""
    options = {
        name: f"%name%->setVerticalAlignment(OpenXaml::VerticalAlignment::{name});\n"
        for name in ("Top", "Bottom", "Center", "Stretch")
    }
    return _choose(value, options, "vertical alignment")


def get_text_wrapping(value: str) -> str:
    """Statement that sets text wrapping."""
    options = {
        name: f"%name%->setTextWrapping(OpenXaml::TextWrapping::{name});\n"
        for name in ("None", "Wrap", "WrapWholeWords")
    }
    return _choose(value, options, "text wrapping")


def get_text_alignment(value: str) -> str:
    """Statement that sets text alignment."""
    options = {
        name: f"%name%->setTextAlignment(TextAlignment::{name});\n"
        for name in ("Left", "Right", "Center")
    }
    return _choose(value, options, "text alignment")


def get_font_family(value: str) -> str:
    """Statement that sets the font family."""
    return '%name%->setFontFamily("' + value + '");\n'


def get_font_size(value: str) -> str:
    """Statement that sets the font size."""
    return "%name%->setFontSize(" + value + ");\n"


def get_text(value: str) -> str:
    """Statement that sets text, escaped as a C string literal."""
    return '%name%->setText("' + format_string(value) + '");\n'


def get_placeholder_text(value: str) -> str:
    """Statement that sets placeholder text, escaped as a C string literal."""
    return '%name%->setPlaceholderText("' + format_string(value) + '");\n'


def get_click_signature(value: str) -> str:
    """Declaration of the click handler method named by ``value``."""
    return "void " + value + "(std::shared_ptr<OpenXaml::Objects::XamlObject> sender);\n"


def get_click_call(value: str) -> str:
    """Statement that binds the click handler named by ``value``."""
    return "%name%->setOnClick(std::bind(&%master%::" + value + ", this, %name%));\n"


def format_string(value: str) -> str:
    """Escape ``value`` for use inside a C string literal."""
    return "".join(_ESCAPES.get(ch, ch) for ch in value)


def get_grid_row(value: str) -> str:
    """Statement that sets the grid row."""
    return "%name%->setRow(" + value + ");\n"


def get_grid_column(value: str) -> str:
    """Statement that sets the grid column."""
    return "%name%->setColumn(" + value + ");\n"


def get_visibility(value: str) -> str:
    """Statement that sets visibility."""
    return "%name%->setVisibility(OpenXaml::Visibility::" + value + ");\n"


def get_margin(value: str) -> str:
    """Statement that sets the margin from one or four comma-separated widths."""
    return "%name%->Margin = Thickness(" + value + ");\n"