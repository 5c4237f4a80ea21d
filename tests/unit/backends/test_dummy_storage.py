import pytest

from rocci.backend.api import StorageApi
from rocci.backends.dummy.storage import DummyStorage
from rocci.exceptions import BackendNotImplementedError, IdentifierConflictError, IdentifierNotValidError
from rocci.resource.base import STORAGE_KIND, ActionInstance, Mixin, Storage
from rocci.resource.store import ResourceStore

SCHEME = "http://example.org/occi/mixins#"
SSD = Mixin(scheme=SCHEME, term="ssd")
HDD = Mixin(scheme=SCHEME, term="hdd")
TAPE = Mixin(scheme=SCHEME, term="tape")


@pytest.fixture
def storage():
    return DummyStorage(ResourceStore("storage"))


@pytest.fixture
def populated(storage):
    storage.create(Storage(id="s1", mixins={SSD}))
    storage.create(Storage(id="s2", mixins={HDD}))
    storage.create(Storage(id="s3", mixins={SSD, HDD}))
    storage.create(Storage(id="s4"))
    return storage


def test_implements_the_storage_interface(storage):
    assert isinstance(storage, StorageApi)
    assert storage.supported_actions() == frozenset()


def test_create_get_delete_scenario(storage):
    assert storage.create(Storage(id="a")) == "a"

    with pytest.raises(IdentifierConflictError):
        storage.create(Storage(id="a"))

    assert storage.delete("a") is True
    assert storage.get("a") is None


def test_get_returns_created_resource(storage):
    volume = Storage(id="vol-1", title="data", mixins={SSD}, attributes={"occi.storage.size": 10.0})

    storage.create(volume)

    assert storage.get("vol-1") == volume
    assert "vol-1" in storage.list_ids()


def test_create_assigns_id_when_missing(storage):
    new_id = storage.create(Storage(title="no id"))

    assert new_id
    assert storage.list_ids() == {new_id}
    assert storage.get(new_id).title == "no id"


def test_conflict_is_by_id_only(storage):
    storage.create(Storage(id="a", attributes={"size": 1}))
    storage.create(Storage(id="b", attributes={"size": 1}))

    with pytest.raises(IdentifierConflictError):
        storage.create(Storage(id="a", attributes={"size": 2}))

    assert storage.list_ids() == {"a", "b"}
    assert storage.get("a").attributes == {"size": 1}


def test_update(storage):
    storage.create(Storage(id="a", title="before"))

    updated = Storage(id="a", title="after", mixins={HDD})
    assert storage.update(updated) is True
    assert storage.get("a") == updated


def test_update_missing_id_leaves_store_unchanged(populated):
    before = populated.list()

    with pytest.raises(IdentifierNotValidError):
        populated.update(Storage(id="nope"))

    assert populated.list() == before


def test_delete_is_idempotent(populated):
    assert populated.delete("s1") is True
    assert populated.delete("s1") is True
    assert populated.delete("never-existed") is True
    assert "s1" not in populated.list_ids()


def test_list_filters_by_intersection(populated):
    assert [r.id for r in populated.list()] == ["s1", "s2", "s3", "s4"]
    assert [r.id for r in populated.list(None)] == ["s1", "s2", "s3", "s4"]
    assert [r.id for r in populated.list([SSD])] == ["s1", "s3"]
    assert [r.id for r in populated.list([SSD, HDD])] == ["s1", "s2", "s3"]
    assert populated.list([TAPE]) == []

    everything = populated.list()
    assert populated.list([HDD]) == [r for r in everything if HDD in r.mixins]


def test_delete_all_without_filter_empties_store(populated):
    assert populated.delete_all() is True
    assert populated.list_ids() == set()


def test_delete_all_on_empty_store_returns_true(storage):
    assert storage.delete_all() is True
    assert storage.delete_all([]) is True


def test_delete_all_with_filter_reports_change(populated):
    assert populated.delete_all([TAPE]) is False
    assert len(populated.list()) == 4

    assert populated.delete_all([HDD]) is True
    assert populated.list_ids() == {"s1", "s4"}

    assert populated.delete_all([HDD]) is False


def test_actions_are_stubs(populated):
    action = ActionInstance(action=STORAGE_KIND.actions[0])

    with pytest.raises(BackendNotImplementedError):
        populated.trigger_action("s1", action)
    with pytest.raises(BackendNotImplementedError):
        populated.trigger_action_on_all(action)
    with pytest.raises(BackendNotImplementedError):
        populated.trigger_action_on_all(action, [SSD])
