"""In-memory, lock-guarded resource collections."""

import threading
from typing import Dict, Iterable, Iterator, List, Optional, Set

from rocci.exceptions import IdentifierConflictError, IdentifierNotValidError
from rocci.resource.base import KINDS, Mixin, Resource, normalize_filter
from rocci.utils.log import log_debug


class ResourceStore:
    """Ordered, duplicate-free (by id) collection of resources of one kind.

    Every read and every mutation runs under the same re-entrant lock, so a store
    shared between concurrent callers behaves as a single mutual-exclusion domain.
    Resources are copied on the way in and on the way out; the store keeps the
    canonical instance.
    """

    def __init__(self, kind: str):
        self.kind = kind
        self._resources: List[Resource] = []
        self._lock = threading.RLock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._resources)

    def __contains__(self, resource_id: object) -> bool:
        with self._lock:
            return self._index_of(resource_id) is not None

    def __iter__(self) -> Iterator[Resource]:
        return iter(self.list())

    @property
    def lock(self) -> threading.RLock:
        """The store's lock, for callers that need several operations to be atomic."""
        return self._lock

    def _index_of(self, resource_id: object) -> Optional[int]:
        for index, resource in enumerate(self._resources):
            if resource.id == resource_id:
                return index
        return None

    def ids(self) -> Set[str]:
        with self._lock:
            return {r.id for r in self._resources if r.id is not None}

    def list(self, mixins: Optional[Iterable[Mixin]] = None) -> List[Resource]:
        mixin_filter = normalize_filter(mixins)
        with self._lock:
            return [r.model_copy(deep=True) for r in self._resources if r.matches(mixin_filter)]

    def get(self, resource_id: str) -> Optional[Resource]:
        with self._lock:
            index = self._index_of(resource_id)
            if index is None:
                return None
            return self._resources[index].model_copy(deep=True)

    def add(self, resource: Resource) -> str:
        """Append a resource that must carry an id not yet present."""
        if resource.id is None:
            raise ValueError("Resources must have an id before they are stored")
        with self._lock:
            if self._index_of(resource.id) is not None:
                raise IdentifierConflictError(f"Instance with ID {resource.id} already exists!")
            self._resources.append(resource.model_copy(deep=True))
            log_debug(f"[{self.kind}] stored {resource.id} ({len(self._resources)} total)")
            return resource.id

    def replace(self, resource: Resource) -> None:
        with self._lock:
            index = self._index_of(resource.id)
            if index is None:
                raise IdentifierNotValidError(f"Instance with ID {resource.id} does not exist!")
            self._resources[index] = resource.model_copy(deep=True)

    def remove(self, resource_id: str) -> bool:
        """Remove a resource; returns True when it was present."""
        with self._lock:
            index = self._index_of(resource_id)
            if index is None:
                return False
            del self._resources[index]
            return True

    def remove_matching(self, mixins: Iterable[Mixin]) -> int:
        """Remove every resource intersecting ``mixins``; returns how many were removed."""
        mixin_filter = normalize_filter(mixins)
        if mixin_filter is None:
            return 0
        with self._lock:
            kept = [r for r in self._resources if not r.matches(mixin_filter)]
            removed = len(self._resources) - len(kept)
            self._resources = kept
            return removed

    def clear(self) -> None:
        with self._lock:
            self._resources = []


class ResourceStores:
    """One ResourceStore per resource kind.

    Whoever creates an instance owns its lifetime: a backend creates a fresh one
    when none is passed to it, or shares the one it was given with every other
    backend instance that received the same object.
    """

    def __init__(self, kinds: Optional[Iterable[str]] = None):
        self._stores: Dict[str, ResourceStore] = {
            kind: ResourceStore(kind) for kind in (kinds if kinds is not None else KINDS)
        }

    def __getitem__(self, kind: str) -> ResourceStore:
        try:
            return self._stores[kind]
        except KeyError:
            raise ValueError(f"No store for resource kind: {kind}") from None

    def __contains__(self, kind: object) -> bool:
        return kind in self._stores

    def kinds(self) -> List[str]:
        return list(self._stores)

    def clear(self) -> None:
        for store in self._stores.values():
            store.clear()
