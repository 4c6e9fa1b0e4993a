"""Component catalog - unified display view and lookup over all sources."""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

from ..constants import SECRETPAD
from ..errors import ComponentNotFound
from ..policy import VisibilityPolicy
from .registry import HiddenComponentRegistry
from .types import CatalogView, ComponentDef, ComponentKey, ComponentSource


logger = logging.getLogger(__name__)


class ComponentCatalog:
    """
    Aggregates component definitions from every registered source.

    Sources and policy are fixed at construction. The display view
    applies the visibility policy; direct lookup ignores it, so callers
    holding an exact key can still resolve hidden components.
    """

    def __init__(
        self,
        sources: Iterable[ComponentSource],
        policy: VisibilityPolicy | None = None,
        hidden_registry: HiddenComponentRegistry | None = None,
    ):
        self._sources: tuple[ComponentSource, ...] = tuple(sources)
        self._policy = policy or VisibilityPolicy()
        self._hidden = hidden_registry if hidden_registry is not None else HiddenComponentRegistry()

    @property
    def sources(self) -> tuple[ComponentSource, ...]:
        return self._sources

    @property
    def policy(self) -> VisibilityPolicy:
        return self._policy

    @property
    def hidden_registry(self) -> HiddenComponentRegistry:
        return self._hidden

    def list_components(self) -> dict[str, CatalogView]:
        """
        Build the display view, grouped by source name.

        Hidden components are left out of the view and recorded into the
        hidden registry. Sources without components are skipped and the
        internal ``secretpad`` source is never returned.
        """
        views: dict[str, CatalogView] = {}
        for source in self._sources:
            if not source.components:
                continue

            view = CatalogView(
                name=source.name,
                version=source.version,
                description=source.description,
            )
            for component in source.components:
                hide = source.hide_identity(component)
                if self._policy.is_hidden(hide):
                    logger.info("hide %s", hide)
                    self._hidden.record(component)
                    continue
                view.entries.append(component.summary())
            views[view.name] = view

        views.pop(SECRETPAD, None)
        return views

    def get_component(self, key: ComponentKey) -> ComponentDef:
        return self.batch_get_component([key])[0]

    def batch_get_component(self, keys: Sequence[ComponentKey]) -> list[ComponentDef]:
        """
        Resolve keys in input order.

        Raises:
            ComponentNotFound: on the first key missing from the index;
                no partial result is returned.
        """
        index = self._build_index()
        result = []
        for key in keys or ():
            component = index.get(key)
            if component is None:
                raise ComponentNotFound(key)
            result.append(component)
        return result

    def get_hidden_component(self, name: str) -> ComponentDef:
        """Recover a component hidden from the display view by its name."""
        component = self._hidden.get(name)
        if component is None:
            raise ComponentNotFound(name)
        return component

    def _build_index(self) -> dict[ComponentKey, ComponentDef]:
        # last write wins, in registration order
        index: dict[ComponentKey, ComponentDef] = {}
        for source in self._sources:
            for component in source.components:
                index[source.key_for(component)] = component
        return index
