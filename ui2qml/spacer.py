"""Spacer items placed in layouts."""

from __future__ import annotations

import logging
from xml.etree.ElementTree import Element

from .nodes import UiNode, UiPropertyNode
from .values import UiParseError
from .visitor import UiNodeVisitor

logger = logging.getLogger(__name__)


class UiSpacerNode(UiNode):
    """A named spacer carrying property children and an optional QML id."""

    def __init__(self, name: str = "") -> None:
        super().__init__(name)
        self.id = ""

    @classmethod
    def parse(cls, element: Element) -> "UiSpacerNode":
        """Parse a ``spacer`` element and its property children."""
        name = element.get("name", "")
        if not name:
            raise UiParseError("spacer element is missing the name attribute")
        target = cls(name)
        for child in element:
            if child.tag.lower() == "property":
                node = UiPropertyNode.parse(child)
                if node is not None:
                    target.append_child(node)
            else:
                logger.debug(
                    "Skipping unsupported %s sub element of spacer element %s",
                    child.tag,
                    name,
                )
        return target

    def accept(self, visitor: UiNodeVisitor) -> None:
        visitor.visit_spacer(self)