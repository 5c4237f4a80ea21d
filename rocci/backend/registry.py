from typing import Callable, Dict, List, Optional, Type, TypeVar

from rocci.backend.base import Backend
from rocci.exceptions import BackendNotFoundError
from rocci.utils.log import log_debug

BackendT = TypeVar("BackendT", bound=Type[Backend])


def normalize_backend_name(name: str) -> str:
    if not name or not isinstance(name, str):
        raise ValueError(f"Backend name must be a non-empty string, got: {name!r}")
    normalized = name.strip().lower()
    if not normalized:
        raise ValueError(f"Backend name must be a non-empty string, got: {name!r}")
    return normalized


class BackendRegistry:
    """Maps backend names to backend classes."""

    def __init__(self):
        self._backends: Dict[str, Type[Backend]] = {}

    def register(self, name: str, backend_class: Type[Backend], replace: bool = False) -> None:
        key = normalize_backend_name(name)
        existing = self._backends.get(key)
        if existing is not None and existing is not backend_class and not replace:
            raise ValueError(f"Backend '{key}' is already registered to {existing.__qualname__}")
        self._backends[key] = backend_class
        if "name" not in vars(backend_class) or backend_class.name is None:
            backend_class.name = key
        log_debug(f"Registered backend '{key}' -> {backend_class.__qualname__}")

    def unregister(self, name: str) -> Optional[Type[Backend]]:
        return self._backends.pop(normalize_backend_name(name), None)

    def resolve(self, name: str) -> Type[Backend]:
        key = normalize_backend_name(name)
        backend_class = self._backends.get(key)
        if backend_class is None:
            raise BackendNotFoundError(f"There is no such backend available! [{key}]", backend_name=key)
        return backend_class

    def names(self) -> List[str]:
        return sorted(self._backends)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.strip().lower() in self._backends

    def __len__(self) -> int:
        return len(self._backends)


backend_registry = BackendRegistry()


def register_backend(name: str, registry: Optional[BackendRegistry] = None) -> Callable[[BackendT], BackendT]:
    """Class decorator registering a backend under ``name``."""

    def decorator(backend_class: BackendT) -> BackendT:
        (registry if registry is not None else backend_registry).register(name, backend_class)
        return backend_class

    return decorator


def get_backend_registry() -> BackendRegistry:
    """The process-wide registry, with the built-in backends registered."""
    import rocci.backends  # noqa: F401

    return backend_registry
