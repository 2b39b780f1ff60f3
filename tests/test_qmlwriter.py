import io

import pytest

from ui2qml.connections import UiConnectionNode
from ui2qml.nodes import UiAddActionNode, UiPropertyNode, UiTopNode
from ui2qml.objectnodes import UiWidgetNode
from ui2qml.qmlwriter import (
    FontPropertyWriter,
    MarginsPropertyWriter,
    PropertyWriter,
    QmlWriter,
    render,
)
from ui2qml.spacer import UiSpacerNode
from ui2qml.tabstops import UiTabStopsNode
from ui2qml.values import (
    EnumValue,
    FontValue,
    IdValue,
    Margins,
    PixmapValue,
    Rect,
    SetValue,
    Size,
)
from ui2qml.visitor import VisitationContext


def _write(value, name="prop", indent=""):
    out = io.StringIO()
    PropertyWriter().write(out, indent, name, value)
    return out.getvalue()


@pytest.mark.parametrize(
    "value, expected",
    [
        (True, "prop: true\n"),
        (False, "prop: false\n"),
        (42, "prop: 42\n"),
        (1.5, "prop: 1.5\n"),
        (Rect(1, 2, 3, 4), "prop: Qt.rect(1, 2, 3, 4)\n"),
        (Size(5, 6), "prop: Qt.size(5, 6)\n"),
        (EnumValue.from_string("Qt::AlignLeft"), "prop: Qt.AlignLeft\n"),
        (IdValue("button"), "prop: button\n"),
        (PixmapValue("icon.png"), 'prop: Pixmap.fromFileName("icon.png")\n'),
        ("hello", 'prop: "hello"\n'),
    ],
)
def test_property_writer_values(value, expected):
    assert _write(value) == expected


def test_set_value_joined_with_pipes():
    value = SetValue((EnumValue.from_string("Qt::A"), EnumValue.from_string("Qt::B")))
    assert _write(value) == "prop: Qt.A | Qt.B\n"


def test_string_quotes_are_escaped():
    assert _write('say "hi"') == 'prop: "say \\"hi\\""\n'


def test_indent_is_prefixed():
    assert _write(7, indent="    ") == "    prop: 7\n"


def test_font_writer_orders_preferred_names_first():
    out = io.StringIO()
    font = FontValue({"weight": 75, "bold": True, "family": "Sans"})
    FontPropertyWriter().write(out, "", "font", font)
    assert out.getvalue() == 'font {\n  family: "Sans"\n  bold: true\n  weight: 75\n}\n'


def test_font_writer_rejects_other_values():
    with pytest.raises(TypeError):
        FontPropertyWriter().write(io.StringIO(), "", "font", 3)


def test_margins_writer():
    out = io.StringIO()
    MarginsPropertyWriter().write(out, "  ", "contentsMargins", Margins(1, 2, 3, 4))
    assert out.getvalue() == (
        "  contentsMargins {\n"
        "    left: 1\n"
        "    top: 2\n"
        "    right: 3\n"
        "    bottom: 4\n"
        "  }\n"
    )


def test_empty_document_has_only_widgets_import():
    assert render(UiTopNode(), VisitationContext()) == "import QtWidgets 1.0\n\n"


def test_registered_imports_are_written_after_header():
    context = VisitationContext()
    alias = context.register_import("QtQuick", "1.0")
    text = render(UiTopNode(), context)
    assert text == f"import QtWidgets 1.0\n\nimport QtQuick 1.0 as {alias}\n\n"


def test_widget_tree_output():
    top = UiTopNode()
    widget = UiWidgetNode("Form")
    widget.class_name = ["Ns", "QWidget"]
    widget.id = "form"
    widget.append_child(UiPropertyNode("enabled", True))
    top.append_child(widget)
    assert render(top) == (
        "import QtWidgets 1.0\n\n"
        "\nQWidget {\n"
        "  id: form\n"
        '  objectName: "form"\n'
        "  enabled: true\n"
        "}\n"
    )


def test_nested_widgets_are_indented():
    top = UiTopNode()
    outer = UiWidgetNode()
    outer.class_name = ["QWidget"]
    inner = UiWidgetNode()
    inner.class_name = ["QLabel"]
    inner.append_child(UiPropertyNode("text", "x"))
    outer.append_child(inner)
    top.append_child(outer)
    lines = render(top).splitlines()
    assert "  QLabel {" in lines
    assert '    text: "x"' in lines
    assert lines[-1] == "}"


def test_font_property_uses_grouped_writer_in_document():
    top = UiTopNode()
    widget = UiWidgetNode()
    widget.class_name = ["QWidget"]
    widget.append_child(UiPropertyNode("font", FontValue({"bold": True})))
    top.append_child(widget)
    assert "  font {\n    bold: true\n  }\n" in render(top)


def test_add_action_output():
    top = UiTopNode()
    top.append_child(UiAddActionNode("actionQuit"))
    assert render(top).endswith("\nActionItem {\n  action: actionQuit\n}\n")


def test_connection_without_arguments():
    context = VisitationContext()
    node = UiConnectionNode("button", "clicked()", "dialog", "close()")
    node.signal_handler = "onClicked"
    node.slot_name = "close"
    top = UiTopNode()
    top.append_child(node)
    text = render(top, context)
    alias = context.register_import("QtQuick", "1.0")
    assert text.endswith(
        f"\n{alias}.Connections {{\n"
        "  target: button\n"
        "  onClicked: dialog.close()\n"
        "}\n"
    )


def test_connection_with_arguments():
    node = UiConnectionNode("slider", "valueChanged(int,bool)", "dialog", "setValue(int,bool)")
    node.signal_handler = "onValueChanged"
    node.slot_name = "setValue"
    node.argument_types = ["int", "bool"]
    top = UiTopNode()
    top.append_child(node)
    lines = render(top).splitlines()
    assert "  onValueChanged: {" in lines
    assert '    // arg0 is of type "int"' in lines
    assert '    // arg1 is of type "bool"' in lines
    assert "    dialog.setValue(arg0, arg1)" in lines
    assert lines[-2:] == ["  }", "}"]


def _spacer(orientation):
    spacer = UiSpacerNode("horizontalSpacer")
    spacer.id = "spacer1"
    spacer.append_child(UiPropertyNode("orientation", EnumValue.from_string(orientation)))
    return spacer


def test_horizontal_spacer_maps_orientation():
    spacer = _spacer("Qt::Horizontal")
    top = UiTopNode()
    top.append_child(spacer)
    lines = render(top).splitlines()
    assert "Spacer {" in lines
    assert "  id: spacer1" in lines
    assert '  objectName: "spacer1"' in lines
    assert "  horizontalSizePolicy: Spacer.Expanding" in lines
    assert "  verticalSizePolicy: Spacer.Minimum" in lines
    assert [child.name for child in spacer] == ["horizontalSizePolicy", "verticalSizePolicy"]


def test_vertical_spacer_maps_orientation():
    spacer = _spacer("Qt::Vertical")
    top = UiTopNode()
    top.append_child(spacer)
    lines = render(top).splitlines()
    assert "  horizontalSizePolicy: Spacer.Minimum" in lines
    assert "  verticalSizePolicy: Spacer.Expanding" in lines
    assert not any("orientation" in line for line in lines)


def test_unknown_spacer_orientation_is_kept():
    spacer = _spacer("Foo::Horizontal")
    top = UiTopNode()
    top.append_child(spacer)
    lines = render(top).splitlines()
    assert "  orientation: Foo.Horizontal" in lines
    assert len(spacer) == 1


def test_tab_stops_output():
    top = UiTopNode()
    top.append_child(UiTabStopsNode(["first", "second"]))
    assert render(top).endswith("\nTabStops {\n  tabStops: [ first, second ]\n}\n")


def test_empty_tab_stops_write_nothing():
    top = UiTopNode()
    top.append_child(UiTabStopsNode())
    assert render(top) == render(UiTopNode())


def test_qml_writer_writes_to_given_stream():
    stream = io.StringIO()
    top = UiTopNode()
    top.append_child(UiAddActionNode("act"))
    QmlWriter(stream, VisitationContext()).write(top)
    assert stream.getvalue() == render(top)