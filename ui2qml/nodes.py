"""Core node types of the UI document tree."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Iterator, Optional
from xml.etree.ElementTree import Element

from .values import UiParseError, parse_property_value
from .visitor import UiNodeVisitor

logger = logging.getLogger(__name__)


class UiNode(ABC):
    """A node of the UI tree holding a name and an ordered list of children."""

    def __init__(self, name: str = "") -> None:
        self.name = name
        self._children: list[UiNode] = []

    @abstractmethod
    def accept(self, visitor: UiNodeVisitor) -> None:
        """Dispatch to the visitor method matching this node type."""

    def accept_children(self, visitor: UiNodeVisitor) -> None:
        """Let the visitor visit every child.

        Iterates over a snapshot, so visitors may add or remove children
        while they are being visited.
        """
        for child in tuple(self._children):
            child.accept(visitor)

    def append_child(self, node: UiNode) -> None:
        self._children.append(node)

    def prepend_child(self, node: UiNode) -> None:
        self._children.insert(0, node)

    def take_child_at(self, index: int) -> UiNode:
        """Remove the child at ``index`` and return it."""
        return self._children.pop(index)

    def __len__(self) -> int:
        return len(self._children)

    def __iter__(self) -> Iterator[UiNode]:
        return iter(tuple(self._children))

    def __getitem__(self, index: int) -> UiNode:
        return self._children[index]


class UiPropertyNode(UiNode):
    """A named property with a typed value."""

    def __init__(self, name: str = "", value: Any = None) -> None:
        super().__init__(name)
        self.value = value

    @classmethod
    def parse(cls, element: Element) -> Optional["UiPropertyNode"]:
        """Parse a ``property`` element.

        Returns ``None`` when the value type is unsupported or invalid.
        """
        name = element.get("name", "")
        if not name:
            raise UiParseError("property element is missing the name attribute")
        value_element = next(iter(element), None)
        if value_element is None:
            raise UiParseError("propery element does not contain child value element")
        value = parse_property_value(value_element)
        if value is None:
            return None
        return cls(name, value)

    def accept(self, visitor: UiNodeVisitor) -> None:
        visitor.visit_property(self)


class UiAddActionNode(UiNode):
    """A reference adding a named action to its parent."""

    def accept(self, visitor: UiNodeVisitor) -> None:
        visitor.visit_add_action(self)


class UiTopNode(UiNode):
    """The root of a UI document."""

    def __init__(self, name: str = "", class_name: Optional[list[str]] = None) -> None:
        super().__init__(name)
        self.class_name: list[str] = list(class_name) if class_name else []

    def accept(self, visitor: UiNodeVisitor) -> None:
        visitor.visit_top(self)


class UiObjectNode(UiNode):
    """An object element with a scoped class name and an optional QML id."""

    def __init__(self, element_name: str, name: str = "") -> None:
        super().__init__(name)
        self.element_name = element_name
        self.class_name: list[str] = []
        self.id = ""

    def accept(self, visitor: UiNodeVisitor) -> None:
        visitor.visit_object(self)


class UiActionNode(UiObjectNode):
    """An ``action`` element; always of class ``Action``."""

    def __init__(self, name: str = "") -> None:
        super().__init__("action", name)
        self.class_name = ["Action"]

    @classmethod
    def parse(cls, element: Element) -> "UiActionNode":
        """Parse an ``action`` element and its property children."""
        name = element.get("name", "")
        if not name:
            raise UiParseError("action element is missing the name attribute")
        target = cls(name)
        for child in element:
            if child.tag.lower() == "property":
                node = UiPropertyNode.parse(child)
                if node is not None:
                    target.append_child(node)
            else:
                logger.debug(
                    "Skipping unsupported %s sub element of %s element %s",
                    child.tag,
                    target.element_name,
                    name,
                )
        return target

    def accept(self, visitor: UiNodeVisitor) -> None:
        visitor.visit_action(self)