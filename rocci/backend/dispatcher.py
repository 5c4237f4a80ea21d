from typing import FrozenSet, Iterable, Optional

from rocci.backend.api import ResourceKindApi
from rocci.exceptions import ActionNotSupportedError, BackendNotImplementedError, IdentifierNotValidError
from rocci.resource.base import KINDS, ActionInstance, Mixin, normalize_filter
from rocci.utils.log import log_debug


class ActionDispatcher:
    """Validates action requests before handing them to a backend part.

    An action is dispatched only if the backend advertises it for the kind and the
    targets declare it, through their kind or one of their mixins.
    """

    def _advertised(self, kind: str, api: ResourceKindApi) -> FrozenSet[str]:
        advertised = api.supported_actions()
        if not advertised:
            raise BackendNotImplementedError(f"Backend does not implement any {kind} actions")
        return advertised

    def _check_term(self, kind: str, term: str, declared: FrozenSet[str], advertised: FrozenSet[str]) -> None:
        if term not in declared:
            raise ActionNotSupportedError(f"Action '{term}' is not defined for {kind}", term=term)
        if term not in advertised:
            raise ActionNotSupportedError(f"Action '{term}' is not implemented for {kind}", term=term)

    def trigger_action(self, kind: str, api: ResourceKindApi, resource_id: str, action_instance: ActionInstance) -> bool:
        advertised = self._advertised(kind, api)

        resource = api.get(resource_id)
        if resource is None:
            raise IdentifierNotValidError(f"Instance with ID {resource_id} does not exist!")

        self._check_term(kind, action_instance.term, resource.declared_action_terms(), advertised)
        log_debug(f"Triggering {kind} action '{action_instance.term}' on {resource_id}")
        return api.trigger_action(resource_id, action_instance)

    def trigger_action_on_all(
        self,
        kind: str,
        api: ResourceKindApi,
        action_instance: ActionInstance,
        mixins: Optional[Iterable[Mixin]] = None,
    ) -> bool:
        advertised = self._advertised(kind, api)

        mixin_filter = normalize_filter(mixins)
        declared = set(KINDS[kind].action_terms())
        for mixin in mixin_filter or ():
            declared.update(mixin.action_terms())

        self._check_term(kind, action_instance.term, frozenset(declared), advertised)
        log_debug(f"Triggering {kind} action '{action_instance.term}' on all matching resources")
        return api.trigger_action_on_all(action_instance, mixin_filter)
