"""Compile a XAML document into the source text of a C++ class."""

from __future__ import annotations

import os
import xml.etree.ElementTree as ET
from pathlib import Path

from xamlkit.elements import UidSource, XamlElement, build_element

__all__ = ["XamlParseError", "XamlClass", "tab_over"]

_MASTER = "%master%"
_DEFAULT_TERMINATOR = "XamlObject::~XamlObject();\n"
_HEADER = (
    "#include <OpenXaml/XamlObjects/XamlObjects.h>\n"
    "#include <functional>\n"
    "#include <memory>\n"
)


class XamlParseError(ValueError):
    """Raised when a XAML document cannot be read or parsed."""

    def __init__(self, message: str, line: int | None = None, column: int | None = None) -> None:
        self.message = message
        self.line = line
        self.column = column
        if line is None:
            text = f"Error: {message}."
        else:
            text = f"Error: {message}, Line: {line}, Column: {column}."
        super().__init__(text)


def tab_over(text: str, count: int) -> str:
    """Indent every line of ``text`` by ``count`` tabs."""
    tabs = "\t" * count
    if not text:
        return tabs
    return tabs + text.replace("\n", "\n" + tabs).rstrip("\t")


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _parse(data: str | bytes) -> ET.Element:
    try:
        return ET.fromstring(data)
    except ET.ParseError as exc:
        line, column = exc.position
        raise XamlParseError(str(exc), line, column) from None


class XamlClass:
    """The C++ class generated from one XAML document."""

    def __init__(self, root_element: ET.Element) -> None:
        self.function_signatures = ""
        self.public_interfaces = ""
        self.private_interfaces = ""
        self.initializer = ""
        self.terminator = _DEFAULT_TERMINATOR
        self.name = root_element.get("Class", "")
        root = build_element(root_element, True, UidSource())
        self._add_element(root)
        self.root_type = _local_name(root_element.tag)

    @classmethod
    def from_string(cls, text: str | bytes) -> XamlClass:
        """Build a class from XAML source text."""
        return cls(_parse(text))

    @classmethod
    def from_file(cls, path: str | os.PathLike[str]) -> XamlClass:
        """Build a class from a XAML file."""
        try:
            data = Path(path).read_bytes()
        except OSError as exc:
            raise XamlParseError(f"unable to read {os.fspath(path)}: {exc.strerror}") from None
        return cls(_parse(data))

    def _master(self, text: str) -> str:
        return text.replace(_MASTER, self.name)

    def _add_element(self, element: XamlElement) -> None:
        declaration = self._master(element.initializer)
        if element.public:
            self.public_interfaces += declaration
        else:
            self.private_interfaces += declaration
        self.initializer += element.body_initializer
        self.initializer += self._master(element.body)
        self.terminator += self._master(element.terminator)
        for child in element.children:
            self._add_element(child)
        self.initializer += self._master(element.child_enumerator)
        self.function_signatures += self._master(element.external_functions)

    def to_string(self) -> str:
        """Return the generated header text."""
        parts = [_HEADER]
        parts.append(f"class {self.name} : public OpenXaml::Objects::{self.root_type}\n")
        parts.append("{\n")
        if self.private_interfaces:
            parts.append("private:\n")
            parts.append(tab_over(self.private_interfaces, 1))
        parts.append("public:\n")
        parts.append(tab_over(self.function_signatures, 1))
        if self.public_interfaces:
            parts.append(tab_over(self.public_interfaces, 1))
        parts.append(f"\t{self.name}()\n\t{{\n")
        parts.append(tab_over(self.initializer, 2) + "\t}\n")
        parts.append(f"\t~{self.name}()\n\t{{\n")
        parts.append(tab_over(self.terminator, 2) + "\t}\n")
        parts.append("};")
        return "".join(parts)

    def __str__(self) -> str:
        return self.to_string()

    def write_to_file(self, path: str | os.PathLike[str]) -> None:
        """Write the generated header text to ``path``."""
        with open(path, "w", encoding="utf-8", newline="") as handle:
            handle.write(self.to_string())