from rocci.backends.dummy.backend import DummyBackend
from rocci.backends.dummy.compute import DummyCompute
from rocci.backends.dummy.network import DummyNetwork
from rocci.backends.dummy.storage import DummyStorage
from rocci.backends.dummy.templates import DummyOsTpl, DummyResourceTpl

__all__ = ["DummyBackend", "DummyCompute", "DummyNetwork", "DummyOsTpl", "DummyResourceTpl", "DummyStorage"]
