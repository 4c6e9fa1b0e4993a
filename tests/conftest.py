"""Shared fixtures for component service tests."""

import json

import pytest

from component_svc.catalog import (
    ComponentCatalog,
    ComponentDef,
    ComponentSource,
    HiddenComponentRegistry,
)
from component_svc.policy import VisibilityPolicy


def make_source(name, *components, version="1.0.0", description=""):
    return ComponentSource(
        name=name,
        version=version,
        description=description or f"{name} components",
        components=tuple(components),
    )


@pytest.fixture
def secretflow():
    return make_source(
        "secretflow",
        ComponentDef("ml.train", "ss_sgd_train", "0.0.1", "SS-SGD training"),
        ComponentDef("ml.train", "ss_xgb_train", "0.0.1", "SS-XGB training"),
        ComponentDef("preprocessing", "psi", "0.0.1", "PSI"),
    )


@pytest.fixture
def secretpad_source():
    return make_source(
        "secretpad",
        ComponentDef("read-data", "data-table", "0.0.1", "Read data table"),
        ComponentDef("read-data", "internal", "0.0.1", "Internal reader"),
    )


@pytest.fixture
def hidden_registry():
    return HiddenComponentRegistry()


@pytest.fixture
def catalog(secretflow, secretpad_source, hidden_registry):
    policy = VisibilityPolicy.from_iterable([
        "secretflow/ml.train/ss_xgb_train:0.0.1",
        "secretpad/read-data/internal:0.0.1",
    ])
    return ComponentCatalog(
        sources=[secretflow, secretpad_source],
        policy=policy,
        hidden_registry=hidden_registry,
    )


@pytest.fixture
def write_locales(tmp_path):
    """Write ``{app: translations}`` as JSON files and return the directory."""

    def _write(bundles, directory=None):
        directory = directory or tmp_path / "i18n"
        directory.mkdir(parents=True, exist_ok=True)
        for app, content in bundles.items():
            (directory / f"{app}.json").write_text(json.dumps(content), encoding="utf-8")
        return directory

    return _write
