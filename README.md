# ui2qml

`ui2qml` reads the XML elements of Qt Designer `.ui` files into a tree of
nodes and writes that tree out as declarative QML widget code.

## Modules

* `ui2qml.values` – typed property values (`EnumValue`, `FontValue`,
  `IdValue`, `PixmapValue`, `SetValue`, `Rect`, `Size`, `Margins`),
  `parse_property_value()` and the `UiParseError` exception.
* `ui2qml.visitor` – `UiNodeVisitor`, whose default `visit_*` methods walk
  into every node's children, and `VisitationContext`, the state shared by
  all passes over one document (registered QML imports and the ids known
  for object names).
* `ui2qml.nodes` – `UiNode` and the basic node types: `UiTopNode`,
  `UiObjectNode`, `UiPropertyNode`, `UiActionNode`, `UiAddActionNode`.
* `ui2qml.objectnodes` – `UiWidgetNode`, `UiLayoutNode`,
  `UiLayoutItemNode` (with `row`, `column`, `row_span`, `col_span`, `-1`
  when unset) and `parse_object()`.
* `ui2qml.spacer` – `UiSpacerNode`.
* `ui2qml.connections` – `UiConnectionNode` for `<connection>` elements.
* `ui2qml.tabstops` – `UiTabStopsNode` and `TabStopsNodeVisitor`, which
  replaces tab stop object names by their ids from the context and moves
  top-level tab stop nodes under the first widget.
* `ui2qml.qmlwriter` – `QmlWriter`, the property writers and `render()`.

## What it understands

* `<widget>`, `<layout>` and `<item>` elements, including grid positions
  and spans
* `<spacer>` elements; when written, a `Qt::Horizontal` or `Qt::Vertical`
  `orientation` property is replaced by `horizontalSizePolicy` and
  `verticalSizePolicy` properties
* `<action>` elements and `<addaction>` references
* properties of type `bool`, `cstring`, `double`, `enum`, `font`, `number`,
  `pixmap`, `rect`, `set`, `size` and `string`; fonts and margins are
  written as grouped blocks
* `<connection>` elements, written as `Connections` blocks from the
  `QtQuick` import registered in the context
* `<tabstops>`, written as a `TabStops` element

Structural errors, such as a widget without a `class` attribute, a
property without a `name` or a `rect` without one of its parts, raise
`ui2qml.values.UiParseError`. Unsupported elements and property types are
skipped and logged.

## Usage

```python
import xml.etree.ElementTree as ET

from ui2qml.nodes import UiTopNode
from ui2qml.objectnodes import UiWidgetNode
from ui2qml.qmlwriter import render
from ui2qml.visitor import VisitationContext

element = ET.fromstring(
    '<widget class="QLabel" name="label">'
    '<property name="text"><string>Hello</string></property>'
    "</widget>"
)

widget = UiWidgetNode.parse(element)
widget.id = "label"

top = UiTopNode()
top.append_child(widget)

print(render(top, VisitationContext()))
```

`QmlWriter(stream, context).write(top)` does the same writing to any text
stream. The output starts with `import QtWidgets 1.0`, followed by one
`import <module> <version> as <alias>` line for each import registered in
the context; aliases are built from the module and version names, such as
`QtQuick1_0`.

## What it does not do

* There is no command-line tool; the package is used as a library.
* It parses individual elements, not a whole `.ui` file: building the
  `UiTopNode` from the document's root element is left to the caller.
* It does not assign QML ids. Object nodes and spacers are written with
  whatever `id` they carry, and tab stops are resolved only through ids
  recorded with `VisitationContext.insert_id_for_object_name()`.
* It does not derive the `signal_handler`, `slot_name` or
  `argument_types` of a `UiConnectionNode` from its signal and slot
  signatures; these must be set before writing.

## Running the tests

Install the package with its `test` extra and run `pytest`.