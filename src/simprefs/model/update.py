"""
Dependency Update Engine
========================
Keeps related preferences consistent when one of them changes.

The rules are data: a read-only table maps the key of a source preference to
the handlers that adjust its dependents. New dependency pairs are added by
decorating a handler with ``_depends_on``; call sites stay untouched.

Propagation is exactly one hop. A handler never notifies again for the items
it changed, so chains (A -> B -> C) are not followed and no cycle detection
is needed.
"""
from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Callable, Mapping, Optional

from simprefs.model.container import ValueItemContainer
from simprefs.model.defaults import DefaultsProvider
from simprefs.model.keys import PreferenceKey, resolve
from simprefs.model.value_item import ValueItem

logger = logging.getLogger(__name__)

DependencyHandler = Callable[[ValueItem, ValueItemContainer, DefaultsProvider], None]

_RULES: dict[PreferenceKey, list[DependencyHandler]] = {}


def _depends_on(source: PreferenceKey) -> Callable[[DependencyHandler], DependencyHandler]:
    """Decorator to register a handler for changes of ``source``."""
    def decorator(handler: DependencyHandler) -> DependencyHandler:
        _RULES.setdefault(source, []).append(handler)
        return handler
    return decorator


# ------------------------------------------------------------------------------
# Handlers
# NOTE: Handlers must NOT notify for the items they change.
# ------------------------------------------------------------------------------
@_depends_on(PreferenceKey.NUMBER_OF_SLICES)
def update_first_slice_index(
    number_of_slices: ValueItem,
    container: ValueItemContainer,
    defaults: DefaultsProvider,
) -> None:
    """
    The first slice index must address one of the slices per view.

    Sets the maximum of FIRST_SLICE_INDEX to ``n - 1``. A value above the new
    maximum is replaced by the session default, not by the maximum.
    """
    n = number_of_slices.value_as_int()
    first_slice_index = container.get(PreferenceKey.FIRST_SLICE_INDEX.representation)
    if first_slice_index is None:
        return

    first_slice_index.type_format.set_maximum_value(n - 1)
    logger.debug(f"Maximum of {first_slice_index.name} set to {n - 1}.")

    if first_slice_index.value_as_int() > n - 1:
        default = defaults.default_first_slice_index()
        logger.debug(
            f"{first_slice_index.name} = {first_slice_index.value} exceeds {n - 1}, "
            f"reset to default {default}."
        )
        first_slice_index.set_value(str(default))


# Built once at import, read-only afterwards
DEPENDENCY_RULES: Mapping[PreferenceKey, tuple[DependencyHandler, ...]] = MappingProxyType(
    {key: tuple(handlers) for key, handlers in _RULES.items()}
)


class PreferenceUpdateNotifier:
    """
    Applies the dependency rules for a changed preference.

    The notifier itself is stateless apart from its defaults and rule table,
    so one instance may be shared by every container of a session. It is
    handed to containers explicitly (see ``simprefs.model.editable``).

    Args:
        defaults: Provider of the session default values used on reset.
        rules: Rule table, ``DEPENDENCY_RULES`` unless given.
    """

    def __init__(
        self,
        defaults: DefaultsProvider,
        rules: Mapping[PreferenceKey, tuple[DependencyHandler, ...]] = DEPENDENCY_RULES,
    ) -> None:
        self._defaults = defaults
        self._rules = rules

    @property
    def defaults(self) -> DefaultsProvider:
        return self._defaults

    def has_dependents(self, name: Optional[str]) -> bool:
        return bool(self._rules.get(resolve(name)))

    def notify_changed(self, item: Optional[ValueItem]) -> None:
        """
        Update the items that depend on ``item`` within its container.

        Does nothing for a missing item, a detached item or an item without
        rules. A FormatError raised while reading a value propagates; the
        caller decides whether to roll the edit back.
        """
        if item is None:
            return
        container = item.container
        if container is None:
            return

        handlers = self._rules.get(resolve(item.name))
        if not handlers:
            return

        for handler in handlers:
            handler(item, container, self._defaults)

    # Name used by ValueItemContainer
    notify_dependent_value_items_for_update = notify_changed
