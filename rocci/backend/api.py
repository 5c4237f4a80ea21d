"""
Capability interfaces, one per resource kind.

Every kind shares the same CRUD+action contract. A backend part that subclasses the
kind's interface implements all of it; anything else is wrapped in
``PartialKindApi``, which turns each missing operation into
``MethodNotImplementedError``.
"""

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Dict, FrozenSet, Iterable, List, Optional, Set, Type

from rocci.exceptions import MethodNotImplementedError
from rocci.resource.base import ActionInstance, Mixin, Resource
from rocci.utils.log import log_debug

OPERATIONS = (
    "list_ids",
    "list",
    "get",
    "create",
    "update",
    "delete",
    "delete_all",
    "trigger_action",
    "trigger_action_on_all",
)


class ResourceKindApi(ABC):
    """The contract every backend satisfies for one resource kind."""

    kind: ClassVar[str] = ""

    @abstractmethod
    def list_ids(self) -> Set[str]:
        """Get all resource ids of this kind, no details, no duplicates."""

    @abstractmethod
    def list(self, mixins: Optional[Iterable[Mixin]] = None) -> List[Resource]:
        """Get all resources, or only those carrying any of ``mixins``."""

    @abstractmethod
    def get(self, resource_id: str) -> Optional[Resource]:
        """Get the resource with exactly this id, or None."""

    @abstractmethod
    def create(self, resource: Resource) -> str:
        """Create a resource and return its final id.

        Raises:
            IdentifierConflictError: If a resource with the same id exists.
        """

    @abstractmethod
    def update(self, resource: Resource) -> bool:
        """Replace the stored resource with the same id.

        Returns:
            Whether the stored value now equals ``resource``.

        Raises:
            IdentifierNotValidError: If no resource with that id exists.
        """

    @abstractmethod
    def delete(self, resource_id: str) -> bool:
        """Delete a resource; returns whether no resource with that id remains."""

    @abstractmethod
    def delete_all(self, mixins: Optional[Iterable[Mixin]] = None) -> bool:
        """Delete every resource, or only those carrying any of ``mixins``.

        Returns:
            Without a filter: whether the collection is now empty.
            With a filter: whether the number of resources changed.
        """

    @abstractmethod
    def trigger_action(self, resource_id: str, action_instance: ActionInstance) -> bool:
        """Trigger an action on one resource.

        Raises:
            BackendNotImplementedError: If the backend does not support the action.
        """

    @abstractmethod
    def trigger_action_on_all(self, action_instance: ActionInstance, mixins: Optional[Iterable[Mixin]] = None) -> bool:
        """Trigger an action on every resource, or only those carrying any of ``mixins``.

        Raises:
            BackendNotImplementedError: If the backend does not support the action.
        """

    def supported_actions(self) -> FrozenSet[str]:
        """Action terms this backend can trigger for the kind."""
        return frozenset()


class ComputeApi(ResourceKindApi):
    kind: ClassVar[str] = "compute"


class NetworkApi(ResourceKindApi):
    kind: ClassVar[str] = "network"


class StorageApi(ResourceKindApi):
    kind: ClassVar[str] = "storage"


class OsTplApi(ResourceKindApi):
    kind: ClassVar[str] = "os_tpl"


class ResourceTplApi(ResourceKindApi):
    kind: ClassVar[str] = "resource_tpl"


KIND_APIS: Dict[str, Type[ResourceKindApi]] = {
    api.kind: api for api in (ComputeApi, NetworkApi, StorageApi, OsTplApi, ResourceTplApi)
}


class PartialKindApi(ResourceKindApi):
    """Wraps a backend part that implements only some of the kind's operations."""

    def __init__(self, kind: str, delegate: Optional[Any] = None):
        self._kind = kind
        self.delegate = delegate

    @property
    def kind_name(self) -> str:
        return self._kind

    def _operation(self, operation: str):
        method = getattr(self.delegate, operation, None) if self.delegate is not None else None
        if method is None or not callable(method):
            log_debug(f"[{self._kind}] {operation} is not implemented by {type(self.delegate).__name__}")
            raise MethodNotImplementedError(
                f"Method is not implemented in the backend model! [{self._kind}_{operation}]",
                kind=self._kind,
                method=operation,
            )
        return method

    def implemented_operations(self) -> List[str]:
        if self.delegate is None:
            return []
        return [op for op in OPERATIONS if callable(getattr(self.delegate, op, None))]

    def list_ids(self) -> Set[str]:
        return self._operation("list_ids")()

    def list(self, mixins: Optional[Iterable[Mixin]] = None) -> List[Resource]:
        return self._operation("list")(mixins)

    def get(self, resource_id: str) -> Optional[Resource]:
        return self._operation("get")(resource_id)

    def create(self, resource: Resource) -> str:
        return self._operation("create")(resource)

    def update(self, resource: Resource) -> bool:
        return self._operation("update")(resource)

    def delete(self, resource_id: str) -> bool:
        return self._operation("delete")(resource_id)

    def delete_all(self, mixins: Optional[Iterable[Mixin]] = None) -> bool:
        return self._operation("delete_all")(mixins)

    def trigger_action(self, resource_id: str, action_instance: ActionInstance) -> bool:
        return self._operation("trigger_action")(resource_id, action_instance)

    def trigger_action_on_all(self, action_instance: ActionInstance, mixins: Optional[Iterable[Mixin]] = None) -> bool:
        return self._operation("trigger_action_on_all")(action_instance, mixins)

    def supported_actions(self) -> FrozenSet[str]:
        supported_actions = getattr(self.delegate, "supported_actions", None)
        if supported_actions is None:
            return frozenset()
        return frozenset(supported_actions())


def as_kind_api(kind: str, part: Optional[Any]) -> ResourceKindApi:
    """Return ``part`` if it implements the full interface for ``kind``, else wrap it."""
    if kind not in KIND_APIS:
        raise ValueError(f"Unknown resource kind: {kind}")
    if isinstance(part, KIND_APIS[kind]):
        return part
    return PartialKindApi(kind, part)


def implemented_operations(api: ResourceKindApi) -> List[str]:
    if isinstance(api, PartialKindApi):
        return api.implemented_operations()
    return list(OPERATIONS)
