"""Catalog types - component definitions, sources, keys and display views."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class ComponentKey:
    """
    Lookup identity of a component.

    Version is deliberately not part of the key: a later definition with
    the same source/domain/name replaces an earlier one in the index.
    """
    source: str
    domain: str
    name: str

    def __str__(self) -> str:
        return f"{self.source}/{self.domain}/{self.name}"


@dataclass(frozen=True, slots=True)
class ComponentDef:
    """A single component definition contributed by a source."""
    domain: str
    name: str
    version: str = ""
    description: str = ""

    # Remaining definition (attrs, inputs, outputs, ...), kept opaque
    extras: dict[str, Any] = field(default_factory=dict, hash=False)

    def summary(self) -> ComponentSummary:
        return ComponentSummary(
            domain=self.domain,
            name=self.name,
            version=self.version,
            description=self.description,
        )

    def to_dict(self) -> dict[str, Any]:
        data = dict(self.extras)
        data.update(
            domain=self.domain,
            name=self.name,
            version=self.version,
            description=self.description,
        )
        return data


@dataclass(frozen=True, slots=True)
class ComponentSource:
    """
    A named, versioned collection of component definitions.

    Sources are contributed independently at startup and are immutable
    afterwards. Registration order decides lookup collisions.
    """
    name: str
    version: str = ""
    description: str = ""
    components: tuple[ComponentDef, ...] = ()

    def hide_identity(self, component: ComponentDef) -> str:
        """Fully-qualified identity used by the visibility policy."""
        # source/domain/name:version
        return f"{self.name}/{component.domain}/{component.name}:{component.version}"

    def key_for(self, component: ComponentDef) -> ComponentKey:
        return ComponentKey(self.name, component.domain, component.name)


@dataclass(frozen=True, slots=True)
class ComponentSummary:
    """Display form of a component."""
    domain: str
    name: str
    version: str = ""
    description: str = ""

    def to_dict(self) -> dict[str, str]:
        return {
            "domain": self.domain,
            "name": self.name,
            "version": self.version,
            "description": self.description,
        }


@dataclass(slots=True)
class CatalogView:
    """Display view of one source, with hidden entries removed."""
    name: str
    version: str = ""
    description: str = ""
    entries: list[ComponentSummary] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "version": self.version,
            "description": self.description,
            "components": [entry.to_dict() for entry in self.entries],
        }
