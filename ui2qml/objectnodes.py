"""Widgets, layouts and layout items, and the shared object element parser."""

from __future__ import annotations

import logging
from typing import Optional, TypeVar
from xml.etree.ElementTree import Element

from .nodes import UiActionNode, UiAddActionNode, UiNode, UiObjectNode, UiPropertyNode
from .spacer import UiSpacerNode
from .values import UiParseError
from .visitor import UiNodeVisitor

logger = logging.getLogger(__name__)

_ObjectT = TypeVar("_ObjectT", bound=UiObjectNode)


def _parse_optional_int(text: Optional[str]) -> Optional[int]:
    if text is None:
        return None
    try:
        return int(text.strip())
    except ValueError:
        return None


def parse_object(target: _ObjectT, element: Element) -> _ObjectT:
    """Fill ``target`` from an object element such as ``widget`` or ``layout``.

    Reads the ``class`` and ``name`` attributes and the supported child
    elements; raises :class:`UiParseError` when the class attribute or an
    ``addaction`` name is missing.
    """
    class_name = element.get("class", "")
    if not class_name:
        raise UiParseError(f"{target.element_name} element is missing the class attribute")

    object_name = element.get("name")
    if object_name is not None:
        if object_name:
            target.name = object_name
        else:
            logger.warning("%s element has an empty name attribute", target.element_name)

    target.class_name = class_name.split("::")

    for child in element:
        tag = child.tag.lower()
        node: Optional[UiNode]
        if tag == "widget":
            node = UiWidgetNode.parse(child)
        elif tag == "layout":
            node = UiLayoutNode.parse(child)
        elif tag == "property":
            node = UiPropertyNode.parse(child)
        elif tag == "action":
            node = UiActionNode.parse(child)
        elif tag == "addaction":
            action_name = child.get("name", "")
            if not action_name:
                raise UiParseError("addaction element is missing the name attribute")
            node = UiAddActionNode(action_name)
        elif tag == "item":
            node = UiLayoutItemNode.parse(child)
            node.name = class_name
        else:
            logger.debug(
                "Skipping unsupported %s sub element of %s element %s",
                child.tag,
                target.element_name,
                object_name or "",
            )
            continue
        if node is not None:
            target.append_child(node)

    return target


class UiWidgetNode(UiObjectNode):
    """A ``widget`` element."""

    def __init__(self, name: str = "") -> None:
        super().__init__("widget", name)

    @classmethod
    def parse(cls, element: Element) -> "UiWidgetNode":
        """Parse a ``widget`` element and everything nested in it."""
        return parse_object(cls(), element)

    def accept(self, visitor: UiNodeVisitor) -> None:
        visitor.visit_widget(self)


class UiLayoutNode(UiObjectNode):
    """A ``layout`` element."""

    def __init__(self, name: str = "") -> None:
        super().__init__("layout", name)

    @classmethod
    def parse(cls, element: Element) -> "UiLayoutNode":
        """Parse a ``layout`` element and everything nested in it."""
        return parse_object(cls(), element)

    def accept(self, visitor: UiNodeVisitor) -> None:
        visitor.visit_layout(self)


class UiLayoutItemNode(UiNode):
    """A layout cell holding a widget, layout or spacer; unset positions are -1."""

    def __init__(
        self,
        name: str = "",
        row: int = -1,
        column: int = -1,
        row_span: int = -1,
        col_span: int = -1,
    ) -> None:
        super().__init__(name)
        self.row = row
        self.column = column
        self.row_span = row_span
        self.col_span = col_span

    @classmethod
    def parse(cls, element: Element) -> "UiLayoutItemNode":
        """Parse an ``item`` element with its grid position and content."""
        target = cls()
        for attribute, field_name in (
            ("row", "row"),
            ("column", "column"),
            ("rowspan", "row_span"),
            ("colspan", "col_span"),
        ):
            value = _parse_optional_int(element.get(attribute))
            if value is not None:
                setattr(target, field_name, value)

        for child in element:
            tag = child.tag.lower()
            node: Optional[UiNode]
            if tag == "widget":
                node = UiWidgetNode.parse(child)
            elif tag == "layout":
                node = UiLayoutNode.parse(child)
            elif tag == "spacer":
                node = UiSpacerNode.parse(child)
            else:
                logger.debug("Skipping unsupported %s sub element of item element", child.tag)
                continue
            if node is not None:
                target.append_child(node)
        return target

    def accept(self, visitor: UiNodeVisitor) -> None:
        visitor.visit_layout_item(self)