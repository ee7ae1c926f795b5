# xamlkit

xamlkit reads XAML page descriptions and turns them into C++ class headers.
It also has a small model of XAML elements in Python: property types such as
alignment and margins, a layout pass for frames, rectangles and grids, a
click/text event dispatcher and a timed animation scheduler.

It has no dependencies outside the standard library.

## Installing

```
pip install xamlkit
```

To run the test suite:

```
pip install "xamlkit[test]"
pytest
```

## Compiling a XAML file

```
xamlkit -i MainPage.xaml -o MainPage.hpp
```

`-i`/`--input` names the XAML file to read and `-o`/`--output` the header to
write. `-h`/`--header` is accepted as a flag and has no effect; there is no
help option. When the input cannot be read or parsed, holds an element that
is not supported, or has an attribute value that cannot be turned into code,
the command prints the problem to standard error followed by `Failed1`
(reading or parsing) or `Failed2` (content), and exits with a non-zero
status. A failure to write the output is reported the same way.

A page looks like this:

```xml
<Frame Class="MainPage" Fill="#FFFFFFFF">
    <Button Name="PushButton" OnClick="Test" HorizontalAlignment="Center"
            VerticalAlignment="Center">Push me</Button>
</Frame>
```

- The root element's `Class` attribute names the generated class, and the
  root's tag is its base class in `OpenXaml::Objects`.
- Elements with a `Name` attribute become public members under that name;
  the others become private members named `var_0`, `var_1`, … in document
  order.
- Every `OnClick` value is declared as a member function
  `void <name>(std::shared_ptr<OpenXaml::Objects::XamlObject> sender);` for
  you to define, and bound as the element's click handler.
- Children are attached to their parent in the constructor; inside a `Grid`,
  `ColumnDefinitionCollection` and `RowDefinitionCollection` children become
  the grid's column and row definitions.

Supported elements are `Frame`, `Grid`, `RowDefinitionCollection`,
`RowDefinition`, `ColumnDefinitionCollection`, `ColumnDefinition`, `Button`,
`Rectangle`, `TextBlock` and `TextBox`. Namespace prefixes on tags are
ignored.

Attributes understood on every element: `Name`, `Height`, `Width`
(integers), `HorizontalAlignment` (`Left`, `Right`, `Center`, `Stretch`),
`VerticalAlignment` (`Top`, `Bottom`, `Center`, `Stretch`), `Grid.Row`,
`Grid.Column`, `Visibility`, `OnClick` and `Margin`. In addition:

- `Frame`, `Rectangle`, `Button`, `TextBlock`: `Fill` as `#AARRGGBB`.
- `Button`: `Text`, or the element's text content.
- `TextBlock`: `TextAlignment` (`Left`, `Right`, `Center`), `FontSize`,
  `FontFamily`, `TextWrapping` (`None`, `Wrap`, `WrapWholeWords`), and
  `Text` or the element's text content.
- `TextBox`: `Text` and `PlaceholderText`.

Text values are escaped as C string literals. `Grid.Row`, `Grid.Column`,
`Visibility`, `FontSize` and `Margin` are copied into the code as written.

## Compiling from Python

```python
from xamlkit.xamlclass import XamlClass

page = XamlClass.from_file("MainPage.xaml")
print(page.to_string())
page.write_to_file("MainPage.hpp")
```

`XamlClass.from_string` does the same for XAML held in a string or bytes, and
`XamlClass(element)` takes an already parsed `xml.etree.ElementTree.Element`.
A file that cannot be read or is not well-formed XML raises
`XamlParseError`, which carries `message`, `line` and `column`. An
unsupported element raises `UnknownElementError` from `xamlkit.elements`,
and an invalid attribute value raises `FormatterError` from
`xamlkit.formatter`.

The lower layers can be used on their own:

- `xamlkit.elements.build_element(element, root, uids)` builds the
  `XamlElement` tree for one element, with its code fragments filled in.
  `UidSource` is the counter used for generated names.
- `xamlkit.formatter` holds one function per attribute (`get_fill`,
  `get_horizontal_alignment`, `get_text`, …) returning the C++ statement,
  and `format_string`, which escapes a value for a C++ string literal.
- `xamlkit.xamlclass.tab_over(text, count)` indents every line of a block
  by `count` tabs.

## Layout and properties

`xamlkit.properties` holds the value types shared by all elements:
`HorizontalAlignment`, `VerticalAlignment`, `TextAlignment`, `TextWrapping`,
`Visibility`, `Vec2` and `Thickness`.

```python
from xamlkit.properties import Thickness

margin = Thickness.uniform(3)
```

Adding two `Thickness` values sums them side by side, except that the summed
right widths are stored as the top and the summed top widths as the right.

Elements derive from `XamlObject` in `xamlkit.xamlobject`, laid out inside a
`Window` (a width and a height). Give an element a bounding box with
`set_bounding_box(minimum, maximum)`; `update()` applies the margin, and
`min_rendered()` / `max_rendered()` return the corners of the area it covers,
taking its derived elements into account. The y axis points upwards: the
margin's top is taken from the upper edge.

- `Rectangle` (`xamlkit.rectangle`) places itself by its alignment, width and
  height, and keeps its four corners in `vertices`. `color_components(fill)`
  splits an `0xAARRGGBB` colour into red, green, blue and alpha in [0, 1].
- `Frame` (`xamlkit.frame`) is a page root; `initialize()` gives it the whole
  window as its bounding box and initializes its children.
- `Grid` (`xamlkit.grid`) places each child in the cell given by its `row`
  and `column`, using the `RowDefinition` heights (stacked downwards from the
  top) and `ColumnDefinition` widths (rightwards from the left) of its
  `row_definitions` and `column_definitions`. A child naming a row or column
  the grid does not define raises `IndexError`.

## Events and animation

`EventDispatcher` in `xamlkit.events` keeps the objects listening for each
`EventType`. Register with `add` (or by setting an object's `on_click` when
it was created with the dispatcher), queue `ClickEvent` and `TextEvent`
objects with `post`, and call `handle_events` to deliver them oldest first:

- a click reaches every click listener whose rendered area strictly contains
  the point; the dispatcher makes it the `active_element` and calls its
  `click()`;
- text is passed to `text_update(text)` on every text listener;
- a `KeyDownEvent` raises `UnhandledEventError`.

`AnimationScheduler` in `xamlkit.animation` runs a background thread that
releases each `AnimationEvent` once its time has come, calling the optional
`wake` callback each time. Use it as a context manager (or `start()` /
`stop()`), schedule events with `add_timeout_event(AnimationEvent.after(target,
seconds))`, and call `process_pending()` from your main loop; it calls
`animation_update(argument)` on each released event's target and returns the
events.

## What xamlkit does not do

- It draws nothing. There is no window, no graphics output and no font or
  text shaping; `draw()` only walks the element tree, and `Frame` and
  `Rectangle` expose their colour and corner positions for a renderer to use.
- There are no Python objects for `Button`, `TextBlock` or `TextBox`; those
  exist only as elements the compiler turns into C++.
- XAML documents are checked for well-formed XML and supported elements and
  values, not validated against a schema.
- It does not build the generated headers; that is left to your C++ build.