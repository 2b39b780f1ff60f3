"""Writes a UI node tree as a declarative QML document."""

from __future__ import annotations

import io
import logging
from typing import Any, Optional, TextIO

from .nodes import UiAddActionNode, UiObjectNode, UiPropertyNode, UiTopNode
from .values import (
    EnumValue,
    FontValue,
    IdValue,
    Margins,
    PixmapValue,
    Rect,
    SetValue,
    Size,
)
from .visitor import UiNodeVisitor, VisitationContext

logger = logging.getLogger(__name__)

_OFFSET_INDENT = "  "
_ARGUMENT_NAMES_HINT = (
    "// TODO: find names of signal arguments or respective properties to pass to the slot"
)


def _format_enum(value: EnumValue) -> str:
    return ".".join(value.name_parts)


def _format_value(value: Any) -> str:
    """Render a property value as a QML expression."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return f"{value:g}"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, Rect):
        return f"Qt.rect({value.x}, {value.y}, {value.width}, {value.height})"
    if isinstance(value, Size):
        return f"Qt.size({value.width}, {value.height})"
    if isinstance(value, EnumValue):
        return _format_enum(value)
    if isinstance(value, IdValue):
        return value.id
    if isinstance(value, PixmapValue):
        return f'Pixmap.fromFileName("{value.file_name}")'
    if isinstance(value, SetValue):
        return " | ".join(_format_enum(flag) for flag in value.flags)
    text = "" if value is None else str(value)
    return '"' + text.replace('"', '\\"') + '"'


class PropertyWriter:
    """Writes a property as a single ``name: value`` line."""

    def write(self, out: TextIO, indent: str, name: str, value: Any) -> None:
        self._write_begin(out, indent, name)
        self._write_value(out, indent, value)
        self._write_end(out, indent)

    def _write_begin(self, out: TextIO, indent: str, name: str) -> None:
        out.write(f"{indent}{name}: ")

    def _write_end(self, out: TextIO, indent: str) -> None:
        out.write("\n")

    def _write_value(self, out: TextIO, indent: str, value: Any) -> None:
        out.write(_format_value(value))


class GroupedPropertyWriter(PropertyWriter):
    """Writes a property as a ``name { ... }`` block of sub properties."""

    offset_indent = _OFFSET_INDENT

    def _write_begin(self, out: TextIO, indent: str, name: str) -> None:
        out.write(f"{indent}{name} {{\n")

    def _write_end(self, out: TextIO, indent: str) -> None:
        out.write(f"{indent}}}\n")


class FontPropertyWriter(GroupedPropertyWriter):
    """Writes a font value, preferred sub properties first."""

    ordered_names = ("family", "pointSize", "bold", "italic", "underline", "strikeout")

    def __init__(self) -> None:
        self._sub_writer = PropertyWriter()

    def _write_value(self, out: TextIO, indent: str, value: Any) -> None:
        if not isinstance(value, FontValue):
            raise TypeError("font property writer needs a FontValue")
        sub_indent = indent + self.offset_indent
        remaining = dict(value.properties)
        for name in self.ordered_names:
            if name in remaining:
                self._sub_writer.write(out, sub_indent, name, remaining.pop(name))
        for name, sub_value in remaining.items():
            self._sub_writer.write(out, sub_indent, name, sub_value)


class MarginsPropertyWriter(GroupedPropertyWriter):
    """Writes margins as left, top, right and bottom sub properties."""

    def __init__(self) -> None:
        self._sub_writer = PropertyWriter()

    def _write_value(self, out: TextIO, indent: str, value: Any) -> None:
        if not isinstance(value, Margins):
            raise TypeError("margins property writer needs a Margins value")
        sub_indent = indent + self.offset_indent
        for name in ("left", "top", "right", "bottom"):
            self._sub_writer.write(out, sub_indent, name, getattr(value, name))


def _policy_node(name: str, policy: str) -> UiPropertyNode:
    return UiPropertyNode(name, EnumValue(("Spacer", policy)))


_ORIENTATION_POLICIES = {
    "Horizontal": ("Expanding", "Minimum"),
    "Vertical": ("Minimum", "Expanding"),
}


class QmlWriter(UiNodeVisitor):
    """Visitor that writes the visited tree as QML to a text stream."""

    def __init__(self, stream: TextIO, context: VisitationContext) -> None:
        super().__init__(context)
        self._out = stream
        self._indent = 0
        self._property_writer = PropertyWriter()
        self._user_writers: dict[type, PropertyWriter] = {
            FontValue: FontPropertyWriter(),
            Margins: MarginsPropertyWriter(),
        }

    @property
    def _prefix(self) -> str:
        return " " * self._indent

    def write(self, top_node: UiTopNode) -> None:
        """Write the whole document rooted at ``top_node``."""
        top_node.accept(self)

    def visit_add_action(self, node: UiAddActionNode) -> None:
        indent = self._prefix
        out = self._out
        out.write("\n")
        out.write(f"{indent}ActionItem {{\n")
        out.write(f"{indent}{_OFFSET_INDENT}action: {node.name}\n")
        out.write(f"{indent}}}\n")

    def visit_connection(self, node: Any) -> None:
        indent = self._prefix
        inner = indent + _OFFSET_INDENT
        body = inner + _OFFSET_INDENT
        out = self._out
        alias = self.context.register_import("QtQuick", "1.0")

        out.write("\n")
        out.write(f"{indent}{alias}.Connections {{\n")
        out.write(f"{inner}target: {node.sender}\n")
        out.write(f"{inner}{node.signal_handler}: ")

        argument_types = list(node.argument_types)
        if not argument_types:
            out.write(f"{node.receiver}.{node.slot_name}()\n")
        else:
            out.write("{\n")
            out.write(f"{body}{_ARGUMENT_NAMES_HINT}\n")
            args = [f"arg{i}" for i in range(len(argument_types))]
            for arg, arg_type in zip(args, argument_types):
                out.write(f'{body}// {arg} is of type "{arg_type}"\n')
            out.write("\n")
            out.write(f"{body}{node.receiver}.{node.slot_name}({', '.join(args)})\n")
            out.write(f"{inner}}}\n")

        out.write(f"{indent}}}\n")

    def visit_property(self, node: UiPropertyNode) -> None:
        writer = self._user_writers.get(type(node.value), self._property_writer)
        writer.write(self._out, self._prefix, node.name, node.value)

    def visit_object(self, node: UiObjectNode) -> None:
        indent = self._prefix
        out = self._out
        out.write("\n")
        out.write(f"{indent}{node.class_name[-1]} {{\n")
        if node.id:
            out.write(f"{indent}{_OFFSET_INDENT}id: {node.id}\n")
        if node.name:
            out.write(f'{indent}{_OFFSET_INDENT}objectName: "{node.id}"\n')

        self._indent += 2
        node.accept_children(self)
        self._indent -= 2

        out.write(f"{indent}}}\n")

    def visit_spacer(self, node: Any) -> None:
        indent = self._prefix
        out = self._out
        out.write("\n")
        out.write(f"{indent}Spacer {{\n")
        out.write(f"{indent}{_OFFSET_INDENT}id: {node.id}\n")
        out.write(f'{indent}{_OFFSET_INDENT}objectName: "{node.id}"\n')

        self._apply_spacer_orientation(node)

        self._indent += 2
        node.accept_children(self)
        self._indent -= 2

        out.write(f"{indent}}}\n")

    @staticmethod
    def _apply_spacer_orientation(node: Any) -> None:
        """Replace an ``orientation`` property by the matching size policies."""
        for index, child in enumerate(node):
            if child.name != "orientation":
                continue
            if not isinstance(child, UiPropertyNode):
                logger.warning("Spacer orientation child node is not a property node")
                continue
            value = child.value
            name_parts = value.name_parts if isinstance(value, EnumValue) else ()
            policies = None
            if len(name_parts) == 2 and name_parts[0] == "Qt":
                policies = _ORIENTATION_POLICIES.get(name_parts[1])
            if policies is None:
                logger.warning(
                    "Spacer orientation is neither Qt::Vertical nor Qt::Horizontal: %s",
                    "::".join(name_parts),
                )
                continue
            horizontal, vertical = policies
            node.append_child(_policy_node("horizontalSizePolicy", horizontal))
            node.append_child(_policy_node("verticalSizePolicy", vertical))
            node.take_child_at(index)
            break

    def visit_tab_stops(self, node: Any) -> None:
        if not node.tab_stops:
            return
        indent = self._prefix
        out = self._out
        out.write("\n")
        out.write(f"{indent}TabStops {{\n")
        out.write(f"{indent}{_OFFSET_INDENT}tabStops: [ {', '.join(node.tab_stops)} ]\n")
        out.write(f"{indent}}}\n")

    def visit_top(self, node: UiTopNode) -> None:
        out = self._out
        out.write("import QtWidgets 1.0\n")
        out.write("\n")
        import_lines = self.context.generate_import_lines()
        if import_lines:
            for line in import_lines:
                out.write(f"{line}\n")
            out.write("\n")
        node.accept_children(self)


def render(top_node: UiTopNode, context: Optional[VisitationContext] = None) -> str:
    """Return the QML text for the document rooted at ``top_node``."""
    stream = io.StringIO()
    QmlWriter(stream, context if context is not None else VisitationContext()).write(top_node)
    return stream.getvalue()