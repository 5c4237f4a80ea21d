from typing import Optional, Type

from packaging.version import InvalidVersion, Version

from rocci.backend.base import Backend
from rocci.backend.registry import BackendRegistry, get_backend_registry
from rocci.exceptions import BackendApiVersionMismatchError, BackendApiVersionMissingError, BackendNotFoundError
from rocci.utils.log import log_error, log_info, log_warning

# Version of the backend API this server exposes
SERVER_API_VERSION = "1.0.0"


def parse_api_version(value: str) -> Version:
    return Version(str(value).strip())


def parse_server_api_version(value: str) -> Version:
    try:
        return parse_api_version(value)
    except InvalidVersion:
        raise ValueError(f"Invalid server api_version: {value!r}") from None


class BackendLoader:
    """Resolves backend names to classes and checks their API version."""

    def __init__(self, registry: Optional[BackendRegistry] = None, server_api_version: str = SERVER_API_VERSION):
        parse_server_api_version(server_api_version)
        self.registry = registry if registry is not None else get_backend_registry()
        self.server_api_version = server_api_version

    def resolve(self, name: str) -> Type[Backend]:
        """Match a backend name with the registered backend class.

        Raises:
            BackendNotFoundError: If no backend is registered under ``name``
        """
        log_info(f"[{self.__class__.__name__}] Loading backend '{name}'")
        try:
            return self.registry.resolve(name)
        except BackendNotFoundError as e:
            log_error(f"[{self.__class__.__name__}] {e}")
            raise

    def check_version(self, backend_class: Type[Backend], server_version: Optional[str] = None) -> bool:
        """Check a backend's declared API version against the server's.

        A differing major version fails the check. A differing minor version is
        only logged.

        Raises:
            BackendApiVersionMissingError: If the backend declares no API version
            BackendApiVersionMismatchError: If the major versions differ
            ValueError: If the server version itself is not a valid version
        """
        server_version = server_version or self.server_api_version
        s_version = parse_server_api_version(server_version)
        backend_version = getattr(backend_class, "api_version", None)

        if not backend_version:
            message = f"{backend_class.__qualname__} does not expose api_version and cannot be loaded"
            log_error(f"[{self.__class__.__name__}] {message}")
            raise BackendApiVersionMissingError(message)

        mismatch_message = (
            f"{backend_class.__qualname__} reports api_version={backend_version} and cannot be loaded "
            f"=> server api_version={server_version}"
        )
        try:
            b_version = parse_api_version(backend_version)
        except InvalidVersion:
            log_error(f"[{self.__class__.__name__}] {mismatch_message}")
            raise BackendApiVersionMismatchError(
                mismatch_message, backend_version=str(backend_version), server_version=server_version
            ) from None

        if b_version.major != s_version.major:
            log_error(f"[{self.__class__.__name__}] {mismatch_message}")
            raise BackendApiVersionMismatchError(
                mismatch_message, backend_version=str(backend_version), server_version=server_version
            )

        if b_version.minor != s_version.minor:
            log_warning(
                f"[{self.__class__.__name__}] {backend_class.__qualname__} reports api_version={backend_version} "
                f"and server api_version={server_version}"
            )

        return True

    def load(self, name: str) -> Type[Backend]:
        backend_class = self.resolve(name)
        self.check_version(backend_class)
        return backend_class
