"""Component source loader - loads component lists from YAML/JSON files."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable

import yaml

from ..errors import ComponentSourceError
from .types import ComponentDef, ComponentSource


logger = logging.getLogger(__name__)

_COMPONENT_FIELDS = ("domain", "name", "version", "desc", "description")


class ComponentSourceLoader:
    """
    Loads component sources from YAML or JSON files.

    File format:
    ```yaml
    name: secretflow
    version: 1.0.0
    desc: First-party components
    comps:
      - domain: ml.train
        name: ss_sgd_train
        version: 0.0.1
        desc: Train a linear model with SS-SGD
        attrs: [...]
        inputs: [...]
        outputs: [...]
    ```

    ``description`` and ``components`` are accepted as long-form keys.
    """

    def load_file(self, path: str | Path) -> ComponentSource:
        """Load a single source from a YAML or JSON file."""
        path = Path(path)

        if not path.exists():
            raise FileNotFoundError(f"Component source file not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            if path.suffix in (".yaml", ".yml"):
                data = yaml.safe_load(f)
            else:
                data = json.load(f)

        if not isinstance(data, dict):
            raise ComponentSourceError(f"Component source must be a mapping: {path}")
        return self.load_dict(data)

    def load_dict(self, data: dict[str, Any]) -> ComponentSource:
        """Load a source from a dictionary."""
        name = data.get("name")
        if not name:
            raise ComponentSourceError("Component source is missing a name")

        raw_components = data.get("comps", data.get("components")) or []
        components = tuple(self._parse_component(name, c) for c in raw_components)

        source = ComponentSource(
            name=name,
            version=str(data.get("version", "")),
            description=data.get("desc", data.get("description", "")) or "",
            components=components,
        )
        logger.debug(f"Loaded component source {name} ({len(components)} components)")
        return source

    def _parse_component(self, source_name: str, data: dict[str, Any]) -> ComponentDef:
        """Parse a single component definition from dictionary."""
        if not isinstance(data, dict):
            raise ComponentSourceError(
                f"Component entries of source '{source_name}' must be mappings"
            )

        extras = {k: v for k, v in data.items() if k not in _COMPONENT_FIELDS}
        return ComponentDef(
            domain=data.get("domain", ""),
            name=data.get("name", ""),
            version=str(data.get("version", "")),
            description=data.get("desc", data.get("description", "")) or "",
            extras=extras,
        )

    def load_directory(self, directory: str | Path) -> list[ComponentSource]:
        """
        Load every YAML/JSON source in a directory.

        Files are loaded in alphabetical order, which is also the
        registration order used for lookup collisions.
        """
        directory = Path(directory)

        if not directory.is_dir():
            raise NotADirectoryError(f"Not a directory: {directory}")

        files = sorted(
            p for p in directory.iterdir()
            if p.is_file() and p.suffix in (".yaml", ".yml", ".json")
        )

        sources = []
        for file_path in files:
            logger.info(f"Loading component source: {file_path}")
            sources.append(self.load_file(file_path))
        return sources


def load_sources(source: str | Path | dict | Iterable[str | Path | dict]) -> list[ComponentSource]:
    """
    Convenience function to load component sources.

    Args:
        source: File path, directory path, dictionary, or a list of these

    Returns:
        Sources in registration order
    """
    loader = ComponentSourceLoader()

    if isinstance(source, dict):
        return [loader.load_dict(source)]

    if isinstance(source, (str, Path)):
        path = Path(source)
        if path.is_dir():
            return loader.load_directory(path)
        return [loader.load_file(path)]

    sources: list[ComponentSource] = []
    for item in source:
        sources.extend(load_sources(item))
    return sources
