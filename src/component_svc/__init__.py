"""Component catalog service."""

from .catalog import ComponentCatalog, ComponentDef, ComponentKey, ComponentSource, HiddenComponentRegistry
from .errors import (
    ComponentNotFound,
    ComponentServiceError,
    ComponentSourceError,
    LocaleLoadError,
    SchemaDecodeError,
)
from .graph import NodeDef, is_reserved_data_source_node
from .i18n import LocaleMerger
from .policy import VisibilityPolicy
from .service import ComponentService

__all__ = [
    "ComponentCatalog",
    "ComponentDef",
    "ComponentKey",
    "ComponentSource",
    "HiddenComponentRegistry",
    "ComponentNotFound",
    "ComponentServiceError",
    "ComponentSourceError",
    "LocaleLoadError",
    "SchemaDecodeError",
    "NodeDef",
    "is_reserved_data_source_node",
    "LocaleMerger",
    "VisibilityPolicy",
    "ComponentService",
]
