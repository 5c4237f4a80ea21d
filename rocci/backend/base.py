"""
Backend base class.

A backend is the provider-specific implementation of every resource kind. It is
constructed once per facade with the delegated user, its own options and the
server-wide properties, and exposes one part per kind:

```python
from rocci.backend import Backend, StorageApi, register_backend


class MyStorage(StorageApi):
    ...


@register_backend("my_cloud")
class MyCloud(Backend):
    api_version = "1.0.0"

    def __init__(self, delegated_user=None, options=None, server_properties=None, stores=None):
        super().__init__(delegated_user, options, server_properties, stores)
        self.storage = MyStorage(self.options["endpoint"])
```

Parts left as ``None`` (or parts implementing only some operations) are reported
by the facade as ``MethodNotImplementedError``.
"""

import logging
from typing import Any, ClassVar, Dict, Mapping, Optional

from rocci.resource.store import ResourceStores
from rocci.utils.log import logger as rocci_logger


class Backend:
    """Base class for backend implementations.

    Class attributes:
        name: Registry name, set by ``register_backend``
        api_version: Backend API version the implementation was written against.
            Left as None the backend cannot be loaded.
        description: Human readable description
    """

    name: ClassVar[Optional[str]] = None
    api_version: ClassVar[Optional[str]] = None
    description: ClassVar[str] = ""

    def __init__(
        self,
        delegated_user: Optional[Any] = None,
        options: Optional[Mapping[str, Any]] = None,
        server_properties: Optional[Mapping[str, Any]] = None,
        stores: Optional[ResourceStores] = None,
    ):
        self.delegated_user = delegated_user
        self.options: Mapping[str, Any] = options if options is not None else {}
        self.server_properties: Mapping[str, Any] = server_properties if server_properties is not None else {}
        self.stores: ResourceStores = stores if stores is not None else ResourceStores()
        self.logger: logging.Logger = rocci_logger

        self.compute: Optional[Any] = None
        self.network: Optional[Any] = None
        self.storage: Optional[Any] = None
        self.os_tpl: Optional[Any] = None
        self.resource_tpl: Optional[Any] = None

    def parts(self) -> Dict[str, Optional[Any]]:
        """The backend part for each resource kind."""
        return {
            "compute": self.compute,
            "network": self.network,
            "storage": self.storage,
            "os_tpl": self.os_tpl,
            "resource_tpl": self.resource_tpl,
        }

    @classmethod
    def get_info(cls) -> Dict[str, Any]:
        return {
            "name": cls.name,
            "api_version": cls.api_version,
            "description": cls.description,
            "class": f"{cls.__module__}.{cls.__qualname__}",
        }
