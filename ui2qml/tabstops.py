"""Tab order declarations and the pass that resolves and relocates them."""

from __future__ import annotations

from typing import Optional
from xml.etree.ElementTree import Element

from .nodes import UiNode
from .values import UiParseError
from .visitor import UiNodeVisitor, VisitationContext


class UiTabStopsNode(UiNode):
    """The keyboard focus order, as a list of object names or ids."""

    def __init__(self, tab_stops: Optional[list[str]] = None) -> None:
        super().__init__()
        self.tab_stops: list[str] = list(tab_stops) if tab_stops else []

    @classmethod
    def parse(cls, element: Element) -> "UiTabStopsNode":
        """Parse a ``tabstops`` element made of ``tabstop`` children."""
        target = cls()
        for child in element:
            if child.tag.lower() != "tabstop":
                raise UiParseError(f"unsupported tabstops child element {child.tag}")
            target.tab_stops.append(child.text or "")
        return target

    def accept(self, visitor: UiNodeVisitor) -> None:
        visitor.visit_tab_stops(self)


class TabStopsNodeVisitor(UiNodeVisitor):
    """Maps tab stop object names to ids and moves top-level tab stops into the first widget."""

    def __init__(self, context: VisitationContext) -> None:
        super().__init__(context)
        self._widget_node: Optional[UiNode] = None
        self._tab_stops_nodes: list[UiTabStopsNode] = []

    def _is_tracked(self, node: UiNode) -> bool:
        return any(node is tracked for tracked in self._tab_stops_nodes)

    def visit_tab_stops(self, node: UiTabStopsNode) -> None:
        node.tab_stops = [self.context.id_for_object_name(name) for name in node.tab_stops]
        self._tab_stops_nodes.append(node)

    def visit_top(self, node: UiNode) -> None:
        super().visit_top(node)
        widget = self._widget_node
        if widget is None:
            return
        for child in [child for child in node if self._is_tracked(child)]:
            index = next(i for i, candidate in enumerate(node) if candidate is child)
            widget.append_child(node.take_child_at(index))

    def visit_widget(self, node: UiNode) -> None:
        if self._widget_node is None:
            self._widget_node = node
        super().visit_widget(node)