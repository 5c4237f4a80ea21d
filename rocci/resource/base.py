"""
Resource model shared by every backend.

Categories (kinds, mixins, actions) are identified by ``scheme + term``. A resource
carries exactly one kind and any number of mixins; mixins are the only thing used
for filtering.
"""

from typing import Any, ClassVar, Dict, FrozenSet, Iterable, Optional, Set, Tuple

from pydantic import BaseModel, ConfigDict, Field

INFRASTRUCTURE_SCHEME = "http://schemas.ogf.org/occi/infrastructure#"
COMPUTE_ACTION_SCHEME = "http://schemas.ogf.org/occi/infrastructure/compute/action#"
NETWORK_ACTION_SCHEME = "http://schemas.ogf.org/occi/infrastructure/network/action#"
STORAGE_ACTION_SCHEME = "http://schemas.ogf.org/occi/infrastructure/storage/action#"


class Category(BaseModel):
    """A typed tag identified by its scheme and term."""

    model_config = ConfigDict(frozen=True)

    scheme: str
    term: str
    title: Optional[str] = None

    @property
    def type_identifier(self) -> str:
        return f"{self.scheme}{self.term}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Category):
            return NotImplemented
        return self.type_identifier == other.type_identifier

    def __hash__(self) -> int:
        return hash(self.type_identifier)

    def __str__(self) -> str:
        return self.type_identifier


class Action(Category):
    pass


class Kind(Category):
    actions: Tuple[Action, ...] = ()

    def action_terms(self) -> FrozenSet[str]:
        return frozenset(a.term for a in self.actions)


class Mixin(Category):
    actions: Tuple[Action, ...] = ()

    def action_terms(self) -> FrozenSet[str]:
        return frozenset(a.term for a in self.actions)


def _action(scheme: str, term: str) -> Action:
    return Action(scheme=scheme, term=term, title=f"{term} action")


COMPUTE_KIND = Kind(
    scheme=INFRASTRUCTURE_SCHEME,
    term="compute",
    title="compute resource",
    actions=tuple(_action(COMPUTE_ACTION_SCHEME, t) for t in ("start", "stop", "restart", "suspend")),
)
NETWORK_KIND = Kind(
    scheme=INFRASTRUCTURE_SCHEME,
    term="network",
    title="network resource",
    actions=tuple(_action(NETWORK_ACTION_SCHEME, t) for t in ("up", "down")),
)
STORAGE_KIND = Kind(
    scheme=INFRASTRUCTURE_SCHEME,
    term="storage",
    title="storage resource",
    actions=tuple(
        _action(STORAGE_ACTION_SCHEME, t) for t in ("online", "offline", "backup", "snapshot", "resize")
    ),
)
OS_TPL_KIND = Kind(scheme=INFRASTRUCTURE_SCHEME, term="os_tpl", title="OS template")
RESOURCE_TPL_KIND = Kind(scheme=INFRASTRUCTURE_SCHEME, term="resource_tpl", title="resource template")

KINDS: Dict[str, Kind] = {k.term: k for k in (COMPUTE_KIND, NETWORK_KIND, STORAGE_KIND, OS_TPL_KIND, RESOURCE_TPL_KIND)}


class ActionInstance(BaseModel):
    """A request to run ``action`` with action-specific attributes."""

    action: Action
    attributes: Dict[str, Any] = Field(default_factory=dict)

    @property
    def term(self) -> str:
        return self.action.term


class Resource(BaseModel):
    """One infrastructure object of a kind.

    ``id`` may be left empty before creation, in which case the backend assigns one.
    Equality compares every field, which is what ``update`` relies on to verify
    that the stored value matches the supplied one.
    """

    default_kind: ClassVar[Optional[Kind]] = None

    id: Optional[str] = None
    kind: Kind
    mixins: Set[Mixin] = Field(default_factory=set)
    title: Optional[str] = None
    summary: Optional[str] = None
    attributes: Dict[str, Any] = Field(default_factory=dict)

    def __init__(self, **data: Any):
        if data.get("kind") is None:
            default_kind = type(self).default_kind
            if default_kind is None:
                raise ValueError(f"{type(self).__name__} requires a kind")
            data["kind"] = default_kind
        super().__init__(**data)

    def matches(self, mixins: Optional[Iterable[Mixin]]) -> bool:
        """True when this resource carries any of the given mixins."""
        if not mixins:
            return True
        return not self.mixins.isdisjoint(mixins)

    def declared_action_terms(self) -> FrozenSet[str]:
        """Action terms declared by this resource's kind and mixins."""
        terms = set(self.kind.action_terms())
        for mixin in self.mixins:
            terms.update(mixin.action_terms())
        return frozenset(terms)


class Compute(Resource):
    default_kind: ClassVar[Optional[Kind]] = COMPUTE_KIND


class Network(Resource):
    default_kind: ClassVar[Optional[Kind]] = NETWORK_KIND


class Storage(Resource):
    default_kind: ClassVar[Optional[Kind]] = STORAGE_KIND


class OsTpl(Resource):
    default_kind: ClassVar[Optional[Kind]] = OS_TPL_KIND


class ResourceTpl(Resource):
    default_kind: ClassVar[Optional[Kind]] = RESOURCE_TPL_KIND


RESOURCE_CLASSES: Dict[str, type] = {
    "compute": Compute,
    "network": Network,
    "storage": Storage,
    "os_tpl": OsTpl,
    "resource_tpl": ResourceTpl,
}


def normalize_filter(mixins: Optional[Iterable[Mixin]]) -> Optional[FrozenSet[Mixin]]:
    """Turn a mixin filter into a frozenset, or None when it does not filter."""
    if mixins is None:
        return None
    normalized = frozenset(mixins)
    return normalized or None
