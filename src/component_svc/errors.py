"""Typed failures raised by the component service."""

from __future__ import annotations

from pathlib import Path
from typing import Any, TYPE_CHECKING

if TYPE_CHECKING:
    from .catalog.types import ComponentKey


class ComponentServiceError(Exception):
    """Base class for component service errors."""


class ComponentNotFound(ComponentServiceError):
    """A requested component is absent from the lookup index."""

    def __init__(self, key: ComponentKey | str):
        self.key = str(key)
        super().__init__(f"Component not found: {self.key}")


class LocaleLoadError(ComponentServiceError):
    """The locale directory (or a file inside it) could not be read."""

    def __init__(self, path: str | Path, reason: str | None = None):
        self.path = str(path)
        self.reason = reason
        message = f"Failed to load component i18n from {self.path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class SchemaDecodeError(ComponentServiceError):
    """An untyped node definition does not match the node schema."""

    def __init__(self, payload: Any, reason: str):
        self.payload = payload
        self.reason = reason
        super().__init__(f"Invalid node definition: {reason}")


class ComponentSourceError(ComponentServiceError):
    """A component source definition is structurally unusable."""
