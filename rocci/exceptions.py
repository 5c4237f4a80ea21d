from typing import Optional


class RocciError(Exception):
    """Base class for every error raised by the backend layer."""

    status_code: int = 500

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def __str__(self) -> str:
        return str(self.message)


class IdentifierConflictError(RocciError):
    """Exception raised when creating a resource with an id that already exists."""

    status_code = 409


class IdentifierNotValidError(RocciError):
    """Exception raised when a resource id does not exist."""

    status_code = 404


class BackendNotImplementedError(RocciError, NotImplementedError):
    """Exception raised when a backend deliberately does not support an operation."""

    status_code = 501


class ActionNotSupportedError(BackendNotImplementedError):
    """Exception raised when an action term cannot be triggered on the target."""

    def __init__(self, message: str, term: Optional[str] = None):
        super().__init__(message)
        self.term = term


class MethodNotImplementedError(BackendNotImplementedError):
    """Exception raised by the facade when a backend lacks a capability entirely."""

    def __init__(self, message: str, kind: Optional[str] = None, method: Optional[str] = None):
        super().__init__(message)
        self.kind = kind
        self.method = method


class BackendNotFoundError(RocciError):
    """Exception raised when no backend is registered under a name."""

    def __init__(self, message: str, backend_name: Optional[str] = None):
        super().__init__(message)
        self.backend_name = backend_name


class BackendApiVersionMissingError(RocciError):
    """Exception raised when a backend does not declare its API version."""

    pass


class BackendApiVersionMismatchError(RocciError):
    """Exception raised when a backend's major API version differs from the server's."""

    def __init__(self, message: str, backend_version: Optional[str] = None, server_version: Optional[str] = None):
        super().__init__(message)
        self.backend_version = backend_version
        self.server_version = server_version
