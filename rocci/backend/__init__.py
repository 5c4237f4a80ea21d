from rocci.backend.api import (
    KIND_APIS,
    OPERATIONS,
    ComputeApi,
    NetworkApi,
    OsTplApi,
    PartialKindApi,
    ResourceKindApi,
    ResourceTplApi,
    StorageApi,
    as_kind_api,
    implemented_operations,
)
from rocci.backend.base import Backend
from rocci.backend.dispatcher import ActionDispatcher
from rocci.backend.facade import BackendFacade
from rocci.backend.loader import SERVER_API_VERSION, BackendLoader
from rocci.backend.registry import BackendRegistry, backend_registry, get_backend_registry, register_backend

__all__ = [
    "KIND_APIS",
    "OPERATIONS",
    "SERVER_API_VERSION",
    "ActionDispatcher",
    "Backend",
    "BackendFacade",
    "BackendLoader",
    "BackendRegistry",
    "ComputeApi",
    "NetworkApi",
    "OsTplApi",
    "PartialKindApi",
    "ResourceKindApi",
    "ResourceTplApi",
    "StorageApi",
    "as_kind_api",
    "backend_registry",
    "get_backend_registry",
    "implemented_operations",
    "register_backend",
]
