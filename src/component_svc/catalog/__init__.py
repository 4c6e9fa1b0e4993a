"""Catalog system - component definitions aggregated from registered sources."""

from .types import CatalogView, ComponentDef, ComponentKey, ComponentSource, ComponentSummary
from .registry import HiddenComponentRegistry
from .component_catalog import ComponentCatalog
from .loader import ComponentSourceLoader, load_sources

__all__ = [
    "CatalogView",
    "ComponentDef",
    "ComponentKey",
    "ComponentSource",
    "ComponentSummary",
    "HiddenComponentRegistry",
    "ComponentCatalog",
    "ComponentSourceLoader",
    "load_sources",
]
