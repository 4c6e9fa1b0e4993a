"""Tests for component_svc.catalog — display view, lookup and hidden registry."""

import threading

import pytest

from component_svc.catalog import (
    ComponentCatalog,
    ComponentDef,
    ComponentKey,
    HiddenComponentRegistry,
)
from component_svc.errors import ComponentNotFound
from component_svc.policy import VisibilityPolicy
from tests.conftest import make_source


class TestListComponents:

    def test_hidden_component_left_out_of_view(self, catalog):
        views = catalog.list_components()
        names = [e.name for e in views["secretflow"].entries]
        assert names == ["ss_sgd_train", "psi"]

    def test_hidden_component_still_resolvable(self, catalog):
        catalog.list_components()
        component = catalog.get_component(ComponentKey("secretflow", "ml.train", "ss_xgb_train"))
        assert component.description == "SS-XGB training"

    def test_view_carries_source_metadata(self, catalog):
        view = catalog.list_components()["secretflow"]
        assert view.name == "secretflow"
        assert view.version == "1.0.0"
        assert view.description == "secretflow components"
        assert view.entries[0].to_dict() == {
            "domain": "ml.train",
            "name": "ss_sgd_train",
            "version": "0.0.1",
            "description": "SS-SGD training",
        }

    def test_secretpad_source_excluded(self, catalog):
        assert "secretpad" not in catalog.list_components()

    def test_secretpad_hidden_entries_still_recorded(self, catalog, hidden_registry):
        catalog.list_components()
        assert "internal" in hidden_registry
        assert "ss_xgb_train" in hidden_registry

    def test_hide_identity_includes_version(self):
        source = make_source("secretflow", ComponentDef("ml.train", "ss_sgd_train", "0.0.2"))
        policy = VisibilityPolicy.from_iterable(["secretflow/ml.train/ss_sgd_train:0.0.1"])
        catalog = ComponentCatalog([source], policy)
        entries = catalog.list_components()["secretflow"].entries
        assert [e.version for e in entries] == ["0.0.2"]

    def test_empty_source_omitted(self, secretflow):
        catalog = ComponentCatalog([secretflow, make_source("empty")])
        assert set(catalog.list_components()) == {"secretflow"}

    def test_all_hidden_source_yields_empty_view(self):
        source = make_source("spu", ComponentDef("ml.eval", "biclassification_eval", "0.0.1"))
        policy = VisibilityPolicy.from_iterable(["spu/ml.eval/biclassification_eval:0.0.1"])
        views = ComponentCatalog([source], policy).list_components()
        assert views["spu"].entries == []

    def test_view_serializes(self, catalog):
        data = catalog.list_components()["secretflow"].to_dict()
        assert data["name"] == "secretflow"
        assert len(data["components"]) == 2


class TestBatchGetComponent:

    def test_resolves_in_input_order(self, catalog):
        keys = [
            ComponentKey("secretflow", "preprocessing", "psi"),
            ComponentKey("secretpad", "read-data", "data-table"),
            ComponentKey("secretflow", "ml.train", "ss_sgd_train"),
        ]
        result = catalog.batch_get_component(keys)
        assert [c.name for c in result] == ["psi", "data-table", "ss_sgd_train"]

    def test_missing_key_fails_whole_batch(self, catalog):
        keys = [
            ComponentKey("secretflow", "preprocessing", "psi"),
            ComponentKey("secretflow", "ml.train", "nope"),
        ]
        with pytest.raises(ComponentNotFound) as exc_info:
            catalog.batch_get_component(keys)
        assert exc_info.value.key == "secretflow/ml.train/nope"

    def test_source_is_part_of_identity(self, catalog):
        with pytest.raises(ComponentNotFound):
            catalog.get_component(ComponentKey("other", "preprocessing", "psi"))

    def test_empty_keys(self, catalog):
        assert catalog.batch_get_component([]) == []

    def test_later_source_wins_on_collision(self):
        first = make_source("secretflow", ComponentDef("ml.train", "ss_sgd_train", "0.0.1", "old"))
        second = make_source("secretflow", ComponentDef("ml.train", "ss_sgd_train", "0.0.2", "new"))
        catalog = ComponentCatalog([first, second])
        component = catalog.get_component(ComponentKey("secretflow", "ml.train", "ss_sgd_train"))
        assert (component.version, component.description) == ("0.0.2", "new")

    def test_later_entry_within_source_wins(self):
        source = make_source(
            "secretflow",
            ComponentDef("ml.train", "ss_sgd_train", "0.0.1", "old"),
            ComponentDef("ml.train", "ss_sgd_train", "0.0.3", "newest"),
        )
        component = ComponentCatalog([source]).get_component(
            ComponentKey("secretflow", "ml.train", "ss_sgd_train")
        )
        assert component.version == "0.0.3"

    def test_key_string_form(self):
        key = ComponentKey("secretflow", "ml.train", "x")
        assert str(key) == "secretflow/ml.train/x"


class TestHiddenComponents:

    def test_get_hidden_component_by_name(self, catalog):
        catalog.list_components()
        component = catalog.get_hidden_component("ss_xgb_train")
        assert component.domain == "ml.train"

    def test_unknown_hidden_component(self, catalog):
        catalog.list_components()
        with pytest.raises(ComponentNotFound):
            catalog.get_hidden_component("ss_sgd_train")

    def test_registry_empty_before_listing(self, catalog, hidden_registry):
        assert len(hidden_registry) == 0
        with pytest.raises(ComponentNotFound):
            catalog.get_hidden_component("ss_xgb_train")

    def test_catalogs_do_not_share_default_registry(self, secretflow):
        policy = VisibilityPolicy.from_iterable(["secretflow/ml.train/ss_xgb_train:0.0.1"])
        first = ComponentCatalog([secretflow], policy)
        second = ComponentCatalog([secretflow], policy)
        first.list_components()
        assert "ss_xgb_train" in first.hidden_registry
        assert "ss_xgb_train" not in second.hidden_registry

    def test_concurrent_listing(self, catalog, hidden_registry):
        errors = []

        def worker():
            try:
                for _ in range(50):
                    views = catalog.list_components()
                    assert len(views["secretflow"].entries) == 2
            except Exception as e:  # noqa: BLE001
                errors.append(e)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert errors == []
        assert hidden_registry.names() == ["internal", "ss_xgb_train"]


class TestHiddenComponentRegistry:

    def test_record_and_get(self):
        registry = HiddenComponentRegistry()
        component = ComponentDef("ml.train", "ss_sgd_train", "0.0.1")
        registry.record(component)
        assert registry.get("ss_sgd_train") == component
        assert registry.all() == [component]

    def test_later_record_wins(self):
        registry = HiddenComponentRegistry()
        registry.record(ComponentDef("ml.train", "x", "0.0.1"))
        registry.record(ComponentDef("ml.eval", "x", "0.0.2"))
        assert registry.get("x").domain == "ml.eval"
        assert len(registry) == 1

    def test_clear(self):
        registry = HiddenComponentRegistry()
        registry.record(ComponentDef("ml.train", "x"))
        registry.clear()
        assert registry.get("x") is None
