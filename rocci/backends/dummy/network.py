from typing import ClassVar, Dict

from rocci.backend.api import NetworkApi
from rocci.backends.dummy.base import StatefulDummyKindApi

NETWORK_STATE = "occi.network.state"


class DummyNetwork(StatefulDummyKindApi, NetworkApi):
    state_attribute: ClassVar[str] = NETWORK_STATE
    action_states: ClassVar[Dict[str, str]] = {
        "up": "active",
        "down": "inactive",
    }
