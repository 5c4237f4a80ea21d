"""
In-memory resource handling shared by the dummy backend parts.
"""

from typing import ClassVar, Dict, FrozenSet, Iterable, List, Optional, Set
from uuid import uuid4

from rocci.exceptions import BackendNotImplementedError, IdentifierNotValidError
from rocci.resource.base import ActionInstance, Mixin, Resource, normalize_filter
from rocci.resource.store import ResourceStore
from rocci.utils.log import log_debug


class DummyReader:
    """Read access to one kind's ResourceStore."""

    def __init__(self, store: ResourceStore):
        self.store = store

    def list_ids(self) -> Set[str]:
        """Get all instance ids, no details, no duplicates.

        Returned ids match the ``id`` field of the stored resources.

        Example:
            storage.list_ids()  # -> set()
            storage.list_ids()  # -> {"65d4f65a-...", "9bd4a1c2-..."}
        """
        return self.store.ids()

    def list(self, mixins: Optional[Iterable[Mixin]] = None) -> List[Resource]:
        """Get all instances, or only those whose mixins intersect ``mixins``.

        Args:
            mixins: Optional filter; None or empty returns everything

        Returns:
            Copies of the matching resources, in insertion order
        """
        return self.store.list(mixins)

    def get(self, resource_id: str) -> Optional[Resource]:
        """Get the instance whose ``id`` is exactly ``resource_id``, or None."""
        return self.store.get(resource_id)


class DummyKindApi(DummyReader):
    """Full CRUD on one kind's ResourceStore; actions are not supported."""

    def create(self, resource: Resource) -> str:
        """Store a new instance.

        The ``id`` of ``resource`` is optional, a UUID4 is assigned when missing.

        Args:
            resource: Instance to store

        Returns:
            The final id of the new instance

        Raises:
            IdentifierConflictError: If an instance with the same id already exists
        """
        if not resource.id:
            resource = resource.model_copy(update={"id": str(uuid4())})
        return self.store.add(resource)

    def update(self, resource: Resource) -> bool:
        """Replace the instance with the same ``id`` as ``resource``.

        Returns:
            Whether the stored instance now equals ``resource``

        Raises:
            IdentifierNotValidError: If no instance with that id exists
        """
        with self.store.lock:
            self.store.replace(resource)
            return self.store.get(resource.id) == resource  # type: ignore[arg-type]

    def delete(self, resource_id: str) -> bool:
        """Delete the instance with ``resource_id``.

        Deleting an id that is not present is not an error.

        Returns:
            Whether no instance with ``resource_id`` remains
        """
        with self.store.lock:
            self.store.remove(resource_id)
            return resource_id not in self.store

    def delete_all(self, mixins: Optional[Iterable[Mixin]] = None) -> bool:
        """Delete all instances, or only those whose mixins intersect ``mixins``.

        Returns:
            Without a filter, whether the store is now empty. With a filter,
            whether anything was removed.
        """
        mixin_filter = normalize_filter(mixins)
        with self.store.lock:
            if mixin_filter is None:
                self.store.clear()
                return len(self.store) == 0
            old_count = len(self.store)
            self.store.remove_matching(mixin_filter)
            return old_count != len(self.store)

    def trigger_action(self, resource_id: str, action_instance: ActionInstance) -> bool:
        raise BackendNotImplementedError(f"{self.store.kind}_trigger_action is just a stub!")

    def trigger_action_on_all(self, action_instance: ActionInstance, mixins: Optional[Iterable[Mixin]] = None) -> bool:
        raise BackendNotImplementedError(f"{self.store.kind}_trigger_action_on_all is just a stub!")


class StatefulDummyKindApi(DummyKindApi):
    """CRUD plus actions that only move a state attribute.

    Subclasses set ``state_attribute`` and map each supported action term to the
    state it leaves the resource in.
    """

    state_attribute: ClassVar[str] = ""
    action_states: ClassVar[Dict[str, str]] = {}

    def supported_actions(self) -> FrozenSet[str]:
        return frozenset(self.action_states)

    def _next_state(self, action_instance: ActionInstance) -> str:
        state = self.action_states.get(action_instance.term)
        if state is None:
            raise BackendNotImplementedError(
                f"Action '{action_instance.term}' is not implemented for {self.store.kind}"
            )
        return state

    def _apply(self, resource: Resource, state: str) -> Resource:
        attributes = dict(resource.attributes)
        attributes[self.state_attribute] = state
        return resource.model_copy(update={"attributes": attributes})

    def trigger_action(self, resource_id: str, action_instance: ActionInstance) -> bool:
        state = self._next_state(action_instance)
        with self.store.lock:
            resource = self.store.get(resource_id)
            if resource is None:
                raise IdentifierNotValidError(f"Instance with ID {resource_id} does not exist!")
            self.store.replace(self._apply(resource, state))
        log_debug(f"[{self.store.kind}] {resource_id} is now {state}")
        return True

    def trigger_action_on_all(self, action_instance: ActionInstance, mixins: Optional[Iterable[Mixin]] = None) -> bool:
        state = self._next_state(action_instance)
        with self.store.lock:
            for resource in self.store.list(mixins):
                self.store.replace(self._apply(resource, state))
        return True
