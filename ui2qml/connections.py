"""Signal/slot connections declared in a UI document."""

from __future__ import annotations

from typing import Iterator, Optional
from xml.etree.ElementTree import Element

from .nodes import UiNode
from .values import UiParseError
from .visitor import UiNodeVisitor


def _read_string_element(children: Iterator[Element], tag: str) -> str:
    """Advance ``children`` to the next element named ``tag`` and return its text."""
    for child in children:
        if child.tag == tag:
            text = child.text or ""
            if not text:
                raise UiParseError(
                    f"connection element does have an empty {tag} element"
                )
            return text
    raise UiParseError(f"connection element does not have a {tag} element")


class UiConnectionNode(UiNode):
    """A connection from a sender's signal to a receiver's slot."""

    def __init__(
        self,
        sender: str = "",
        signal_signature: str = "",
        receiver: str = "",
        slot_signature: str = "",
    ) -> None:
        super().__init__()
        self.sender = sender
        self.signal_signature = signal_signature
        self.receiver = receiver
        self.slot_signature = slot_signature
        self.signal_handler = ""
        self.slot_name = ""
        self.argument_types: list[str] = []

    @classmethod
    def parse(cls, element: Element) -> "UiConnectionNode":
        """Parse a ``connection`` element.

        The ``sender``, ``signal``, ``receiver`` and ``slot`` children are
        read in that order; any further children are ignored.
        """
        children: Iterator[Element] = iter(element)
        sender = _read_string_element(children, "sender")
        signal_signature = _read_string_element(children, "signal")
        receiver = _read_string_element(children, "receiver")
        slot_signature = _read_string_element(children, "slot")
        return cls(sender, signal_signature, receiver, slot_signature)

    def accept(self, visitor: UiNodeVisitor) -> None:
        visitor.visit_connection(self)


def parse_connection(element: Element) -> Optional[UiConnectionNode]:
    """Convenience alias for :meth:`UiConnectionNode.parse`."""
    return UiConnectionNode.parse(element)