from rocci.backend.api import StorageApi
from rocci.backends.dummy.base import DummyKindApi


class DummyStorage(DummyKindApi, StorageApi):
    """Storage instances kept in memory.

    Every storage action (online, offline, backup, snapshot, resize) is a stub and
    raises BackendNotImplementedError.
    """
