"""Elements of a XAML tree and the C++ code fragments each one produces."""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from xml.etree.ElementTree import Element

from xamlkit import formatter

__all__ = [
    "ElementType",
    "UnknownElementError",
    "UidSource",
    "XamlElement",
    "build_element",
]


class ElementType(Enum):
    """The kinds of XAML element the generator understands."""

    NONE = "None"
    FRAME = "Frame"
    BUTTON = "Button"
    RECTANGLE = "Rectangle"
    TEXT_BLOCK = "TextBlock"
    GRID = "Grid"
    ROW_DEFINITION = "RowDefinition"
    COLUMN_DEFINITION = "ColumnDefinition"
    ROW_DEFINITION_COLLECTION = "RowDefinitionCollection"
    COLUMN_DEFINITION_COLLECTION = "ColumnDefinitionCollection"
    TEXT_BOX = "TextBox"


class UnknownElementError(ValueError):
    """Raised for a tag that names no known element."""


class UidSource:
    """A counter that hands out unique numbers for generated variable names."""

    def __init__(self, start: int = 0) -> None:
        self._value = start

    def next(self) -> int:
        """Return the current number and advance the counter."""
        value = self._value
        self._value += 1
        return value


_SHARED_UIDS = UidSource()


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _text_content(element: Element) -> str:
    return "".join(element.itertext())


def _declare(class_name: str) -> tuple[str, str]:
    return (
        f"std::shared_ptr<OpenXaml::Objects::{class_name}> %name%;\n",
        f"%name% = std::make_shared<OpenXaml::Objects::{class_name}>();\n",
    )


class XamlElement:
    """One element of a XAML document, with the code that builds it."""

    def __init__(
        self,
        element: Element,
        root: bool = False,
        element_type: ElementType = ElementType.NONE,
        uids: UidSource | None = None,
    ) -> None:
        uids = uids if uids is not None else _SHARED_UIDS
        self.element_type = element_type
        self.root = root
        self.public = False
        self.children: list[XamlElement] = []
        self.initializer = ""
        self.body = ""
        self.terminator = ""
        self.child_enumerator = ""
        self.external_functions = ""
        self.body_initializer = ""

        self._init = ""
        self._term = ""
        self._body = ""
        self._ext = ""
        self._body_init = ""

        name_value = element.get("Name")
        if name_value is not None:
            self._body += formatter.get_name(name_value, root)
            name = name_value
            self.public = True
        else:
            name = f"var_{uids.next()}"

        if (value := element.get("Height")) is not None:
            self._body += formatter.get_height(value, root)
        if (value := element.get("Width")) is not None:
            self._body += formatter.get_width(value, root)
        if (value := element.get("HorizontalAlignment")) is not None:
            self._body += formatter.get_horizontal_alignment(value)
        if (value := element.get("VerticalAlignment")) is not None:
            self._body += formatter.get_vertical_alignment(value)
        if (value := element.get("Grid.Row")) is not None:
            self._body += formatter.get_grid_row(value)
        if (value := element.get("Grid.Column")) is not None:
            self._body += formatter.get_grid_column(value)
        if (value := element.get("Visibility")) is not None:
            self._body += formatter.get_visibility(value)
        if (value := element.get("OnClick")) is not None:
            self._ext += formatter.get_click_signature(value)
            self._body += formatter.get_click_call(value)
        if (value := element.get("Margin")) is not None:
            self._body += formatter.get_margin(value)

        self.name = name

        for child in element:
            child_element = build_element(child, False, uids)
            self.child_enumerator += self._enumerate_child(child_element)
            self.children.append(child_element)

        _TYPE_SETUP.get(element_type, _setup_none)(self, element, root)

    def _enumerate_child(self, child: XamlElement) -> str:
        if self.root:
            return f"Children.push_back({child.name});\n"
        if self.element_type is ElementType.GRID:
            if child.element_type is ElementType.COLUMN_DEFINITION_COLLECTION:
                return f"{self.name}->ColumnDefinitions = {child.name};\n"
            if child.element_type is ElementType.ROW_DEFINITION_COLLECTION:
                return f"{self.name}->RowDefinitions = {child.name};\n"
        return f"{self.name}->Children.push_back({child.name});\n"

    def set_content(self) -> None:
        """Fill in the element's name and publish its code fragments."""
        self._init = self._init.replace("%name%", self.name)
        self._body = self._body.replace("%name%", self.name)
        self._term = self._term.replace("%name%", self.name)
        self._body_init = self._body_init.replace("%name%", self.name)
        self.initializer = self._init
        self.body = self._body
        self.body_initializer = self._body_init
        self.terminator = self._term
        self.external_functions = self._ext


def _setup_none(item: XamlElement, element: Element, root: bool) -> None:
    return None


def _add_fill(item: XamlElement, element: Element, root: bool) -> None:
    if (value := element.get("Fill")) is not None:
        item._body += formatter.get_fill(value, root)


def _simple(class_name: str) -> Callable[[XamlElement, Element, bool], None]:
    def setup(item: XamlElement, element: Element, root: bool) -> None:
        init, body_init = _declare(class_name)
        item._init += init
        item._body_init += body_init

    return setup


def _setup_frame(item: XamlElement, element: Element, root: bool) -> None:
    if not root:
        item._init += "std::shared_ptr<OpenXaml::Objects::Frame> %name%;\n"
        item._body_init += "%name% = std::make_shared<OpenXaml::Objects::Frame()>;\n"
    _add_fill(item, element, root)


def _setup_button(item: XamlElement, element: Element, root: bool) -> None:
    _simple("Button")(item, element, root)
    _add_fill(item, element, root)
    text = element.get("Text")
    item._body += formatter.get_text(text if text is not None else _text_content(element))


def _setup_rectangle(item: XamlElement, element: Element, root: bool) -> None:
    _simple("Rectangle")(item, element, root)
    _add_fill(item, element, root)


def _setup_text_block(item: XamlElement, element: Element, root: bool) -> None:
    _simple("TextBlock")(item, element, root)
    _add_fill(item, element, root)
    if (value := element.get("TextAlignment")) is not None:
        item._body += formatter.get_text_alignment(value)
    if (value := element.get("FontSize")) is not None:
        item._body += formatter.get_font_size(value)
    if (value := element.get("FontFamily")) is not None:
        item._body += formatter.get_font_family(value)
    if (value := element.get("TextWrapping")) is not None:
        item._body += formatter.get_text_wrapping(value)
    text = element.get("Text")
    item._body += formatter.get_text(text if text is not None else _text_content(element))


def _setup_text_box(item: XamlElement, element: Element, root: bool) -> None:
    _simple("TextBox")(item, element, root)
    if (value := element.get("Text")) is not None:
        item._body += formatter.get_text(value)
    if (value := element.get("PlaceholderText")) is not None:
        item._body += formatter.get_placeholder_text(value)


_TYPE_SETUP: dict[ElementType, Callable[[XamlElement, Element, bool], None]] = {
    ElementType.FRAME: _setup_frame,
    ElementType.GRID: _simple("Grid"),
    ElementType.ROW_DEFINITION_COLLECTION: _simple("RowDefinitionCollection"),
    ElementType.ROW_DEFINITION: _simple("RowDefinition"),
    ElementType.COLUMN_DEFINITION_COLLECTION: _simple("ColumnDefinitionCollection"),
    ElementType.COLUMN_DEFINITION: _simple("ColumnDefinition"),
    ElementType.BUTTON: _setup_button,
    ElementType.RECTANGLE: _setup_rectangle,
    ElementType.TEXT_BLOCK: _setup_text_block,
    ElementType.TEXT_BOX: _setup_text_box,
}

_TAGS = {kind.value: kind for kind in ElementType if kind is not ElementType.NONE}


def build_element(
    element: Element, root: bool = False, uids: UidSource | None = None
) -> XamlElement:
    """Build the element tree rooted at ``element`` with its code filled in."""
    tag = _local_name(element.tag)
    try:
        element_type = _TAGS[tag]
    except KeyError:
        raise UnknownElementError(f"unknown element: {tag!r}") from None
    result = XamlElement(element, root, element_type, uids)
    result.set_content()
    return result