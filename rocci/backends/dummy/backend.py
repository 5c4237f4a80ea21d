from typing import Any, Dict, List, Mapping, Optional
from uuid import uuid4

from rocci.backend.base import Backend
from rocci.backend.registry import register_backend
from rocci.backends.dummy.compute import DummyCompute
from rocci.backends.dummy.network import DummyNetwork
from rocci.backends.dummy.storage import DummyStorage
from rocci.backends.dummy.templates import DummyOsTpl, DummyResourceTpl
from rocci.resource.base import RESOURCE_CLASSES
from rocci.resource.store import ResourceStores
from rocci.utils.log import log_debug

API_VERSION = "1.0.0"


@register_backend("dummy")
class DummyBackend(Backend):
    """Reference backend keeping every resource in memory.

    Options:
        fixtures: Mapping of kind name to a list of resource dicts loaded into the
            stores on construction. Fixtures whose id is already stored are skipped,
            so instances sharing stores can be built with the same options.
    """

    api_version = API_VERSION
    description = "In-memory reference backend"

    def __init__(
        self,
        delegated_user: Optional[Any] = None,
        options: Optional[Mapping[str, Any]] = None,
        server_properties: Optional[Mapping[str, Any]] = None,
        stores: Optional[ResourceStores] = None,
    ):
        super().__init__(delegated_user, options, server_properties, stores)

        self.compute = DummyCompute(self.stores["compute"])
        self.network = DummyNetwork(self.stores["network"])
        self.storage = DummyStorage(self.stores["storage"])
        self.os_tpl = DummyOsTpl(self.stores["os_tpl"])
        self.resource_tpl = DummyResourceTpl(self.stores["resource_tpl"])

        fixtures = self.options.get("fixtures")
        if fixtures:
            self.load_fixtures(fixtures)

    def load_fixtures(self, fixtures: Mapping[str, List[Dict[str, Any]]]) -> int:
        """Load resource dicts into the stores; returns how many were added."""
        loaded = 0
        for kind, items in fixtures.items():
            resource_class = RESOURCE_CLASSES.get(kind)
            if resource_class is None:
                raise ValueError(f"Unknown resource kind in fixtures: {kind}")
            store = self.stores[kind]
            for item in items or []:
                resource = resource_class(**item)
                if resource.id is None:
                    resource = resource.model_copy(update={"id": str(uuid4())})
                with store.lock:
                    if resource.id in store:
                        continue
                    store.add(resource)
                loaded += 1
        log_debug(f"Loaded {loaded} fixture(s) into the dummy backend")
        return loaded
