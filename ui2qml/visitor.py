"""Base visitor over the UI node tree and the context shared between passes."""

from __future__ import annotations

from typing import Any


def _clean_version(version: str) -> str:
    return "_".join(version.split("."))


def _clean_module(module: str) -> str:
    return "".join(part[:1].upper() + part[1:] for part in module.split("."))


class VisitationContext:
    """State shared by all visitors working on one document."""

    def __init__(self) -> None:
        self._imports: dict[str, dict[str, str]] = {}
        self._aliases: set[str] = set()
        self._ids_by_object_name: dict[str, str] = {}

    def register_import(self, module: str, version: str) -> str:
        """Register a QML import and return the unique alias it is imported as."""
        versions = self._imports.setdefault(module, {})
        alias = versions.get(version, "")
        if not alias:
            base = _clean_module(module) + _clean_version(version)
            alias = base
            count = 1
            while alias in self._aliases:
                count += 1
                alias = f"{base}_{count}"
            self._aliases.add(alias)
            versions[version] = alias
        return alias

    def generate_import_lines(self) -> list[str]:
        """Return import statements for every registered import, sorted by module and version."""
        return [
            f"import {module} {version} as {alias}"
            for module, versions in sorted(self._imports.items())
            for version, alias in sorted(versions.items())
        ]

    def insert_id_for_object_name(self, object_name: str, id_: str) -> None:
        self._ids_by_object_name[object_name] = id_

    def id_for_object_name(self, object_name: str) -> str:
        """Return the id recorded for an object name, or an empty string."""
        return self._ids_by_object_name.get(object_name, "")


class UiNodeVisitor:
    """Visitor whose default behaviour walks into every node's children."""

    def __init__(self, context: VisitationContext) -> None:
        self.context = context

    def visit_action(self, node: Any) -> None:
        self.visit_object(node)

    def visit_add_action(self, node: Any) -> None:
        self.visit_node(node)

    def visit_connection(self, node: Any) -> None:
        self.visit_node(node)

    def visit_layout_item(self, node: Any) -> None:
        self.visit_node(node)

    def visit_node(self, node: Any) -> None:
        node.accept_children(self)

    def visit_layout(self, node: Any) -> None:
        self.visit_object(node)

    def visit_property(self, node: Any) -> None:
        self.visit_node(node)

    def visit_object(self, node: Any) -> None:
        self.visit_node(node)

    def visit_spacer(self, node: Any) -> None:
        self.visit_node(node)

    def visit_tab_stops(self, node: Any) -> None:
        self.visit_node(node)

    def visit_top(self, node: Any) -> None:
        self.visit_node(node)

    def visit_widget(self, node: Any) -> None:
        self.visit_object(node)