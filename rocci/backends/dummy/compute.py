from typing import ClassVar, Dict

from rocci.backend.api import ComputeApi
from rocci.backends.dummy.base import StatefulDummyKindApi

COMPUTE_STATE = "occi.compute.state"


class DummyCompute(StatefulDummyKindApi, ComputeApi):
    """Compute instances kept in memory. Actions only change ``occi.compute.state``."""

    state_attribute: ClassVar[str] = COMPUTE_STATE
    action_states: ClassVar[Dict[str, str]] = {
        "start": "active",
        "stop": "inactive",
        "restart": "active",
        "suspend": "suspended",
    }
