"""Hidden component registry - side table written while filtering the catalog."""

from __future__ import annotations

import logging
import threading

from .types import ComponentDef


logger = logging.getLogger(__name__)


class HiddenComponentRegistry:
    """
    Thread-safe map of hidden components, keyed by component name.

    The catalog records every component it filters out of the display
    view so that callers holding only a name can still recover the full
    definition. Pass one instance to every catalog that should share it.
    """

    def __init__(self):
        self._components: dict[str, ComponentDef] = {}
        self._lock = threading.RLock()

    def record(self, component: ComponentDef) -> None:
        """Record a hidden component. A later record with the same name wins."""
        with self._lock:
            self._components[component.name] = component
        logger.debug("Recorded hidden component: %s", component.name)

    def get(self, name: str) -> ComponentDef | None:
        with self._lock:
            return self._components.get(name)

    def names(self) -> list[str]:
        with self._lock:
            return sorted(self._components)

    def all(self) -> list[ComponentDef]:
        with self._lock:
            return list(self._components.values())

    def clear(self) -> None:
        with self._lock:
            self._components.clear()

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._components

    def __len__(self) -> int:
        with self._lock:
            return len(self._components)
