"""Typed property values found in Designer UI files and the parsers that read them."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Any, Callable, Optional
from xml.etree.ElementTree import Element

logger = logging.getLogger(__name__)

_INT_RE = re.compile(r"[+-]?\d+")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


class UiParseError(ValueError):
    """Raised when a UI document is structurally invalid."""


@dataclass(frozen=True)
class EnumValue:
    """An enumerator, stored as its scope-separated name parts."""

    name_parts: tuple[str, ...]

    @classmethod
    def from_string(cls, text: str) -> "EnumValue":
        """Split a ``Scope::Name`` string into an enum value."""
        return cls(tuple(text.split("::")))


@dataclass
class FontValue:
    """A font described by its named sub properties."""

    properties: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class IdValue:
    """A reference to another object by its QML id."""

    id: str


@dataclass(frozen=True)
class PixmapValue:
    """A pixmap loaded from a file, optionally through a resource."""

    file_name: str
    resource: str = ""


@dataclass(frozen=True)
class SetValue:
    """A combination of enum flags."""

    flags: tuple[EnumValue, ...] = ()


@dataclass(frozen=True)
class Rect:
    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0


@dataclass(frozen=True)
class Size:
    width: int = 0
    height: int = 0


@dataclass(frozen=True)
class Margins:
    left: int = 0
    top: int = 0
    right: int = 0
    bottom: int = 0


def _text(element: Element) -> str:
    return element.text or ""


def _to_int(text: str) -> Optional[int]:
    stripped = text.strip()
    if not _INT_RE.fullmatch(stripped):
        return None
    value = int(stripped)
    if not _INT_MIN <= value <= _INT_MAX:
        return None
    return value


def _to_double(text: str) -> Optional[float]:
    stripped = text.strip()
    if not stripped or "_" in stripped:
        return None
    try:
        return float(stripped)
    except ValueError:
        return None


def _parse_bool(element: Element) -> Optional[bool]:
    text = _text(element).lower()
    if text == "true":
        return True
    if text == "false":
        return False
    return None


def _parse_double(element: Element) -> Optional[float]:
    return _to_double(_text(element))


def _parse_enum(element: Element) -> EnumValue:
    return EnumValue.from_string(_text(element))


def _parse_number(element: Element) -> Optional[int]:
    return _to_int(_text(element))


def _parse_pixmap(element: Element) -> PixmapValue:
    return PixmapValue(file_name=_text(element), resource=element.get("resource", ""))


def _parse_string(element: Element) -> str:
    return _text(element)


def _required_int(element: Element, parent: str, child: str, article: str) -> int:
    sub = element.find(child)
    if sub is None:
        raise UiParseError(
            f"{parent} property element does not have {article} {child} element"
        )
    value = _to_int(_text(sub))
    return 0 if value is None else value


def _parse_rect(element: Element) -> Rect:
    return Rect(
        x=_required_int(element, "rect", "x", "an"),
        y=_required_int(element, "rect", "y", "a"),
        width=_required_int(element, "rect", "width", "a"),
        height=_required_int(element, "rect", "height", "a"),
    )


def _parse_set(element: Element) -> SetValue:
    return SetValue(tuple(EnumValue.from_string(flag) for flag in _text(element).split("|")))


def _parse_size(element: Element) -> Size:
    return Size(
        width=_required_int(element, "size", "width", "a"),
        height=_required_int(element, "size", "height", "a"),
    )


_FONT_PARSERS: dict[str, Callable[[Element], Any]] = {
    "bold": _parse_bool,
    "family": _parse_string,
    "italic": _parse_bool,
    "kerning": _parse_bool,
    "pointsize": _parse_number,
    "strikeout": _parse_bool,
    "underline": _parse_bool,
    "weight": _parse_number,
    "stylestrategy": _parse_enum,
}


def _parse_font(element: Element) -> Optional[FontValue]:
    font = FontValue()
    for child in element:
        parser = _FONT_PARSERS.get(child.tag)
        value = parser(child) if parser is not None else None
        if value is None:
            logger.warning("skipping unsupported font property type %s", child.tag)
            continue
        font.properties[child.tag] = value
    if font.properties:
        return font
    logger.warning("font property without any supported sub properties")
    return None


_VALUE_PARSERS: dict[str, Callable[[Element], Any]] = {
    "bool": _parse_bool,
    "cstring": _parse_string,
    "double": _parse_double,
    "enum": _parse_enum,
    "font": _parse_font,
    "number": _parse_number,
    "pixmap": _parse_pixmap,
    "rect": _parse_rect,
    "set": _parse_set,
    "size": _parse_size,
    "string": _parse_string,
}


def parse_property_value(element: Element) -> Any:
    """Parse a property's value element.

    Returns ``None`` when the value type is unsupported or its content is
    invalid; raises :class:`UiParseError` when a required part is missing.
    """
    parser = _VALUE_PARSERS.get(element.tag)
    if parser is None:
        logger.warning("skipping unsupported property type %s", element.tag)
        return None
    value = parser(element)
    if value is None:
        logger.warning("skipping unsupported property type %s", element.tag)
    return value