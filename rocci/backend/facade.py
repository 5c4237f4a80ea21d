"""
Per-request access to the configured backend.

The facade resolves and version-checks the backend class, instantiates it and
exposes its five kind parts as full interfaces. After construction it only
delegates.
"""

from types import MappingProxyType
from typing import Any, Dict, Iterable, Mapping, Optional, Type

from rocci.backend.api import (
    ComputeApi,
    NetworkApi,
    OsTplApi,
    ResourceKindApi,
    ResourceTplApi,
    StorageApi,
    as_kind_api,
)
from rocci.backend.base import Backend
from rocci.backend.dispatcher import ActionDispatcher
from rocci.backend.loader import BackendLoader
from rocci.config import BackendConfig, ServerConfig
from rocci.resource.base import KINDS, ActionInstance, Mixin
from rocci.resource.store import ResourceStores
from rocci.utils.log import log_debug


class BackendFacade:
    """Delegates every resource operation to one backend instance.

    Args:
        delegated_user: Identity the backend acts on behalf of
        backend_name: Registered backend name, defaults to ``common.backend``
        options: Backend options, default to ``backends.<backend_name>``
        server_properties: Server-wide properties, default to ``common``
        server_config: Configuration used for the defaults above, loaded with
            ``ServerConfig.load()`` when needed and not given
        loader: Loader used to resolve and check the backend class
        stores: Stores handed to the backend; shared stores outlive the facade
    """

    def __init__(
        self,
        delegated_user: Optional[Any] = None,
        backend_name: Optional[str] = None,
        options: Optional[Mapping[str, Any]] = None,
        server_properties: Optional[Mapping[str, Any]] = None,
        server_config: Optional[ServerConfig] = None,
        loader: Optional[BackendLoader] = None,
        stores: Optional[ResourceStores] = None,
    ):
        if backend_name is None or options is None or server_properties is None:
            server_config = server_config or ServerConfig.load()

        self.backend_name: str = backend_name or server_config.common.backend  # type: ignore[union-attr]
        self.loader = loader or BackendLoader()
        self.backend_class: Type[Backend] = self.loader.load(self.backend_name)
        if options is None:
            options = server_config.backend_options(self.backend_name)  # type: ignore[union-attr]
        if server_properties is None:
            server_properties = server_config.server_properties()  # type: ignore[union-attr]
        self.config = BackendConfig(
            name=self.backend_name, options=dict(options), server_properties=dict(server_properties)
        )
        # Read-only views of the config; the caller's mappings are never shared with the backend
        self.options: Mapping[str, Any] = MappingProxyType(self.config.options)
        self.server_properties: Mapping[str, Any] = MappingProxyType(self.config.server_properties)

        log_debug(
            f"[{self.__class__.__name__}] Instantiating {self.backend_class.__qualname__} "
            f"for delegated_user={delegated_user!r} "
            f"with options={self.config.options} and server_properties={self.config.server_properties}"
        )
        self.backend: Backend = self.backend_class(delegated_user, self.options, self.server_properties, stores)

        parts = self.backend.parts()
        self.compute: ComputeApi = as_kind_api("compute", parts["compute"])  # type: ignore[assignment]
        self.network: NetworkApi = as_kind_api("network", parts["network"])  # type: ignore[assignment]
        self.storage: StorageApi = as_kind_api("storage", parts["storage"])  # type: ignore[assignment]
        self.os_tpl: OsTplApi = as_kind_api("os_tpl", parts["os_tpl"])  # type: ignore[assignment]
        self.resource_tpl: ResourceTplApi = as_kind_api("resource_tpl", parts["resource_tpl"])  # type: ignore[assignment]

        self.dispatcher = ActionDispatcher()

    @property
    def delegated_user(self) -> Optional[Any]:
        return self.backend.delegated_user

    def kind_apis(self) -> Dict[str, ResourceKindApi]:
        return {
            "compute": self.compute,
            "network": self.network,
            "storage": self.storage,
            "os_tpl": self.os_tpl,
            "resource_tpl": self.resource_tpl,
        }

    def kind_api(self, kind: str) -> ResourceKindApi:
        if kind not in KINDS:
            raise ValueError(f"Unknown resource kind: {kind}")
        return self.kind_apis()[kind]

    def trigger_action(self, kind: str, resource_id: str, action_instance: ActionInstance) -> bool:
        return self.dispatcher.trigger_action(kind, self.kind_api(kind), resource_id, action_instance)

    def trigger_action_on_all(
        self, kind: str, action_instance: ActionInstance, mixins: Optional[Iterable[Mixin]] = None
    ) -> bool:
        return self.dispatcher.trigger_action_on_all(kind, self.kind_api(kind), action_instance, mixins)
