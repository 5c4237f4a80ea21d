from rocci.resource.base import (
    COMPUTE_KIND,
    KINDS,
    NETWORK_KIND,
    OS_TPL_KIND,
    RESOURCE_CLASSES,
    RESOURCE_TPL_KIND,
    STORAGE_KIND,
    Action,
    ActionInstance,
    Category,
    Compute,
    Kind,
    Mixin,
    Network,
    OsTpl,
    Resource,
    ResourceTpl,
    Storage,
)
from rocci.resource.store import ResourceStore, ResourceStores

__all__ = [
    "COMPUTE_KIND",
    "KINDS",
    "NETWORK_KIND",
    "OS_TPL_KIND",
    "RESOURCE_CLASSES",
    "RESOURCE_TPL_KIND",
    "STORAGE_KIND",
    "Action",
    "ActionInstance",
    "Category",
    "Compute",
    "Kind",
    "Mixin",
    "Network",
    "OsTpl",
    "Resource",
    "ResourceStore",
    "ResourceStores",
    "ResourceTpl",
    "Storage",
]
