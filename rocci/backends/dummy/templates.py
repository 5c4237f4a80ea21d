from rocci.backends.dummy.base import DummyReader


class DummyOsTpl(DummyReader):
    """Read-only OS templates, seeded from the ``fixtures`` option."""


class DummyResourceTpl(DummyReader):
    """Read-only resource templates, seeded from the ``fixtures`` option."""
