"""Service configuration dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

from .constants import DEFAULT_I18N_LOCATION
from .policy import VisibilityPolicy


@dataclass
class ComponentConfig:
    """Component catalog configuration."""
    # Entries hidden from display, e.g. "secretflow/ml.train/ss_sgd_train:0.0.1"
    # or "secretflow/ss_sgd_train.desc" for locale keys
    hide: list[str] = field(default_factory=list)
    i18n_location: str = DEFAULT_I18N_LOCATION

    # Component source files, loaded in order
    sources: list[str] = field(default_factory=list)
    # Optional directory of source files, loaded after ``sources``
    sources_dir: str | None = None

    @classmethod
    def from_dict(cls, data: dict) -> ComponentConfig:
        """Create config from dictionary."""
        return cls(
            hide=list(data.get("hide") or []),
            i18n_location=data.get("i18n_location") or DEFAULT_I18N_LOCATION,
            sources=list(data.get("sources") or []),
            sources_dir=data.get("sources_dir"),
        )

    def visibility_policy(self) -> VisibilityPolicy:
        return VisibilityPolicy.from_iterable(self.hide)


@dataclass
class ServerConfig:
    """HTTP server configuration."""
    host: str = "0.0.0.0"
    port: int = 8060


@dataclass
class Config:
    """Main service configuration."""
    component: ComponentConfig = field(default_factory=ComponentConfig)
    server: ServerConfig = field(default_factory=ServerConfig)

    # Directory relative paths are resolved against
    base_dir: Path = field(default_factory=Path.cwd)

    @classmethod
    def from_dict(cls, data: dict, base_dir: str | Path | None = None) -> Config:
        """Create config from dictionary."""
        return cls(
            component=ComponentConfig.from_dict(data.get("component") or {}),
            server=ServerConfig(**(data.get("server") or {})),
            base_dir=Path(base_dir) if base_dir is not None else Path.cwd(),
        )

    @classmethod
    def from_yaml(cls, path: str | Path) -> Config:
        """Load config from a YAML file."""
        path = Path(path)
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        return cls.from_dict(data, base_dir=path.parent.resolve())

    def resolve_path(self, value: str | Path) -> Path:
        """Resolve a configured path against the config file's directory."""
        path = Path(value)
        if path.is_absolute():
            return path
        return (self.base_dir / path).resolve()
