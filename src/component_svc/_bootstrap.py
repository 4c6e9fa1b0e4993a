"""Shared initialisation helpers used by the app lifespan.

Each function constructs exactly one component from the service stack.
Sources, policy and the hidden registry are built once at startup;
picking up configuration changes requires a restart.
"""
from __future__ import annotations

import logging
import os
from pathlib import Path

from .catalog import ComponentCatalog, ComponentSource, HiddenComponentRegistry, load_sources
from .config import Config
from .i18n import LocaleMerger
from .policy import VisibilityPolicy
from .service import ComponentService

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------------

def load_config(config_path: str | None = None) -> tuple[Config, str]:
    """Load config from file or fall back to defaults.

    Returns ``(config, resolved_config_path)`` where *resolved_config_path*
    is the string that was actually used.
    """
    config_path = config_path or os.environ.get("COMPONENT_SVC_CONFIG", "config.yaml")
    if Path(config_path).exists():
        config = Config.from_yaml(config_path)
        logger.info("Loaded config from %s", config_path)
    else:
        config = Config()
        logger.info("Using default config (no file at %s)", config_path)
    return config, config_path


# ---------------------------------------------------------------------------
# Visibility policy
# ---------------------------------------------------------------------------

def build_visibility_policy(config: Config) -> VisibilityPolicy:
    policy = config.component.visibility_policy()
    logger.info("Visibility policy hides %d entries", len(policy))
    return policy


# ---------------------------------------------------------------------------
# Component sources
# ---------------------------------------------------------------------------

def build_component_sources(config: Config) -> list[ComponentSource]:
    """Load configured component sources in registration order."""
    sources: list[ComponentSource] = []
    for source_file in config.component.sources:
        sources.extend(load_sources(config.resolve_path(source_file)))

    if config.component.sources_dir:
        sources.extend(load_sources(config.resolve_path(config.component.sources_dir)))

    logger.info(
        "Registered component sources: %s",
        [f"{s.name}({len(s.components)})" for s in sources],
    )
    return sources


# ---------------------------------------------------------------------------
# ComponentService
# ---------------------------------------------------------------------------

def build_service(
    config: Config,
    sources: list[ComponentSource] | None = None,
    hidden_registry: HiddenComponentRegistry | None = None,
) -> ComponentService:
    """Construct and return the ComponentService."""
    policy = build_visibility_policy(config)
    if sources is None:
        sources = build_component_sources(config)

    catalog = ComponentCatalog(
        sources=sources,
        policy=policy,
        hidden_registry=hidden_registry if hidden_registry is not None else HiddenComponentRegistry(),
    )
    i18n_location = config.resolve_path(config.component.i18n_location)
    logger.info("Component i18n location: %s", i18n_location)
    locales = LocaleMerger(location=i18n_location, policy=policy)
    return ComponentService(catalog=catalog, locales=locales)
