"""ComponentService - single entry point for the API layer and graph engine."""

from __future__ import annotations

from typing import Any, Sequence

from .catalog import CatalogView, ComponentCatalog, ComponentDef, ComponentKey
from .graph import NodeDef, is_reserved_data_source_node
from .i18n import LocaleBundle, LocaleMerger


class ComponentService:
    """Wires the component catalog, locale merger and node classifier."""

    def __init__(self, catalog: ComponentCatalog, locales: LocaleMerger):
        self.catalog = catalog
        self.locales = locales

    def list_components(self) -> dict[str, CatalogView]:
        return self.catalog.list_components()

    def get_component(self, key: ComponentKey) -> ComponentDef:
        return self.catalog.get_component(key)

    def batch_get_component(self, keys: Sequence[ComponentKey]) -> list[ComponentDef]:
        return self.catalog.batch_get_component(keys)

    def get_hidden_component(self, name: str) -> ComponentDef:
        return self.catalog.get_hidden_component(name)

    def list_component_i18n(self) -> LocaleBundle:
        return self.locales.list_component_i18n()

    def is_secretpad_component(self, node: NodeDef | Any) -> bool:
        return is_reserved_data_source_node(node)
