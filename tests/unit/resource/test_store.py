import threading

import pytest

from rocci.exceptions import IdentifierConflictError, IdentifierNotValidError
from rocci.resource.base import Mixin, Storage
from rocci.resource.store import ResourceStore, ResourceStores

SCHEME = "http://example.org/occi/mixins#"
FAST = Mixin(scheme=SCHEME, term="fast")
SLOW = Mixin(scheme=SCHEME, term="slow")


@pytest.fixture
def store():
    return ResourceStore("storage")


def test_add_and_get(store):
    assert store.add(Storage(id="a", mixins={FAST})) == "a"

    assert "a" in store
    assert len(store) == 1
    assert store.get("a") == Storage(id="a", mixins={FAST})
    assert store.get("missing") is None
    assert store.ids() == {"a"}


def test_add_requires_id(store):
    with pytest.raises(ValueError):
        store.add(Storage())


def test_add_conflict_leaves_store_unchanged(store):
    store.add(Storage(id="a", title="first"))

    with pytest.raises(IdentifierConflictError):
        store.add(Storage(id="a", title="second"))

    assert len(store) == 1
    assert store.get("a").title == "first"


def test_returned_resources_are_copies(store):
    store.add(Storage(id="a", attributes={"size": 1}))

    fetched = store.get("a")
    fetched.attributes["size"] = 100

    assert store.get("a").attributes == {"size": 1}


def test_replace(store):
    store.add(Storage(id="a", title="old"))
    store.replace(Storage(id="a", title="new"))
    assert store.get("a").title == "new"

    with pytest.raises(IdentifierNotValidError):
        store.replace(Storage(id="b"))
    assert store.ids() == {"a"}


def test_list_preserves_order_and_filters(store):
    for resource_id, mixins in (("a", {FAST}), ("b", {SLOW}), ("c", {FAST, SLOW}), ("d", set())):
        store.add(Storage(id=resource_id, mixins=mixins))

    assert [r.id for r in store.list()] == ["a", "b", "c", "d"]
    assert [r.id for r in store.list([FAST])] == ["a", "c"]
    assert [r.id for r in store.list([SLOW, FAST])] == ["a", "b", "c"]
    assert [r.id for r in store] == ["a", "b", "c", "d"]


def test_remove_and_remove_matching(store):
    for resource_id, mixins in (("a", {FAST}), ("b", {SLOW}), ("c", {FAST})):
        store.add(Storage(id=resource_id, mixins=mixins))

    assert store.remove("b") is True
    assert store.remove("b") is False
    assert store.remove_matching([FAST]) == 2
    assert store.remove_matching([]) == 0
    assert len(store) == 0


def test_concurrent_adds_keep_ids_unique(store):
    errors = []

    def worker():
        for i in range(50):
            try:
                store.add(Storage(id=f"r-{i}"))
            except IdentifierConflictError:
                errors.append(i)

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert store.ids() == {f"r-{i}" for i in range(50)}
    assert len(store) == 50
    assert len(errors) == 150


def test_resource_stores():
    stores = ResourceStores()

    assert set(stores.kinds()) == {"compute", "network", "storage", "os_tpl", "resource_tpl"}
    assert "storage" in stores
    stores["storage"].add(Storage(id="a"))
    stores.clear()
    assert len(stores["storage"]) == 0

    with pytest.raises(ValueError):
        stores["volumes"]
