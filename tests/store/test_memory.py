"""Tests for MemoryResourceStore."""

import pytest

from resource_provisioner.exceptions import PersistenceError, ResourceConflictError
from resource_provisioner.properties import RESOURCE_TYPE_FOLDER, RESOURCE_TYPE_JOB
from resource_provisioner.store import MemoryResourceStore, Resource, ResourceStore


class TestProtocolCompliance:
    def test_satisfies_resource_store_protocol(self):
        assert isinstance(MemoryResourceStore(), ResourceStore)


class TestResolve:
    def test_root_always_present(self, store: MemoryResourceStore):
        root = store.resolve(())
        assert root is not None
        assert root.resource_type == RESOURCE_TYPE_FOLDER
        assert root.name == ""

    def test_absent_path(self, store: MemoryResourceStore):
        assert store.resolve(("var",)) is None


class TestCreateOrGet:
    def test_creates_leaf_and_intermediates(self, store: MemoryResourceStore):
        created = store.create_or_get(("var", "jobs", "j1"), RESOURCE_TYPE_JOB, {"title": "t"}, RESOURCE_TYPE_FOLDER)
        assert created.resource_type == RESOURCE_TYPE_JOB
        assert created.properties["title"] == "t"
        assert created.path_string == "/var/jobs/j1"
        assert store.resolve(("var",)).resource_type == RESOURCE_TYPE_FOLDER
        assert store.resolve(("var", "jobs")).resource_type == RESOURCE_TYPE_FOLDER
        assert store.paths() == ["/var", "/var/jobs", "/var/jobs/j1"]

    def test_existing_returned_unchanged(self, store: MemoryResourceStore):
        first = store.create_or_get(("a",), RESOURCE_TYPE_JOB, {"v": 1}, RESOURCE_TYPE_FOLDER)
        second = store.create_or_get(("a",), RESOURCE_TYPE_FOLDER, {"v": 2}, RESOURCE_TYPE_FOLDER)
        assert second is first
        assert second.properties["v"] == 1
        assert store.create_calls == 1

    def test_none_properties(self, store: MemoryResourceStore):
        created = store.create_or_get(("a",), RESOURCE_TYPE_FOLDER, None, RESOURCE_TYPE_FOLDER)
        assert dict(created.properties) == {}

    def test_lost_race_raises_conflict(self):
        class _RacedStore(MemoryResourceStore):
            def _before_create(self, path):
                # another writer gets there first
                if path == ("a",) and self.resolve(path) is None:
                    self._create(Resource(path=path, resource_type=RESOURCE_TYPE_FOLDER))

        store = _RacedStore()
        with pytest.raises(ResourceConflictError) as exc_info:
            store.create_or_get(("a",), RESOURCE_TYPE_FOLDER, None, RESOURCE_TYPE_FOLDER)
        assert isinstance(exc_info.value, PersistenceError)
        assert store.conflicts == 1
        # the retry sees the winner's resource
        assert store.create_or_get(("a",), RESOURCE_TYPE_FOLDER, None, RESOURCE_TYPE_FOLDER) is not None


class TestResource:
    def test_properties_read_only(self):
        resource = Resource(path=("a",), resource_type=RESOURCE_TYPE_FOLDER, properties={"x": 1})
        with pytest.raises(TypeError):
            resource.properties["x"] = 2  # type: ignore[index]

    def test_properties_copied(self):
        props = {"x": 1}
        resource = Resource(path=("a",), resource_type=RESOURCE_TYPE_FOLDER, properties=props)
        props["x"] = 2
        assert resource.properties["x"] == 1

    def test_name(self):
        assert Resource(path=("a", "b"), resource_type=RESOURCE_TYPE_FOLDER).name == "b"
