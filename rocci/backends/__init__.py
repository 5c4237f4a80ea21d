"""Built-in backends. Importing this package registers them."""

from rocci.backends.dummy import DummyBackend

__all__ = ["DummyBackend"]
