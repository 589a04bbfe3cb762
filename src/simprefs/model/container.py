"""
Value Item Container
====================
An ordered collection of value items, unique by name. It is the unit of
lookup and of dependency resolution: when one of its items changes, the
container hands the item to its update notifier, which may adjust other
items of the same container.

Lookups of absent names return None; they are not errors.
"""
from __future__ import annotations

import logging
from typing import Iterable, Iterator, Optional, Protocol

from simprefs.model.value_item import ValueItem

logger = logging.getLogger(__name__)


class ValueItemUpdateNotifier(Protocol):
    """Updates the items that depend on a changed item of the same container."""

    def notify_dependent_value_items_for_update(self, item: Optional[ValueItem]) -> None:
        ...


class ValueItemContainer:
    """
    Name -> ValueItem mapping in insertion order.

    Args:
        update_notifier: Optional notifier invoked for dependency updates.
        items: Optional initial items (added in order, duplicates skipped).
    """

    def __init__(
        self,
        update_notifier: Optional[ValueItemUpdateNotifier] = None,
        items: Optional[Iterable[ValueItem]] = None,
    ) -> None:
        self._items: dict[str, ValueItem] = {}
        self.update_notifier = update_notifier
        for item in items or ():
            self.add(item)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[ValueItem]:
        return iter(list(self._items.values()))

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name in self._items

    def __repr__(self) -> str:
        return f"ValueItemContainer({list(self._items)!r})"

    # ------------------------------------------------------------------
    # Add / remove
    # ------------------------------------------------------------------
    def add(self, item: Optional[ValueItem]) -> bool:
        """
        Add an item and make this container its owner.

        Returns:
            False if ``item`` is None or its name is already taken.
        """
        if item is None:
            return False
        if item.name in self._items:
            logger.debug(f"Value item '{item.name}' already exists, not added.")
            return False
        item._attach(self)
        self._items[item.name] = item
        return True

    def remove(self, name: str) -> bool:
        item = self._items.pop(name, None) if name else None
        if item is None:
            return False
        item._detach()
        return True

    def clear(self) -> None:
        for item in self._items.values():
            item._detach()
        self._items.clear()

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------
    def get(self, name: Optional[str]) -> Optional[ValueItem]:
        """Item with ``name`` or None. Never raises."""
        if not name:
            return None
        return self._items.get(name)

    def has(self, name: Optional[str]) -> bool:
        return self.get(name) is not None

    def value_of(self, name: Optional[str]) -> Optional[str]:
        item = self.get(name)
        return item.value if item is not None else None

    def names(self) -> list[str]:
        return list(self._items.keys())

    def items_with_prefix(self, *prefixes: str) -> list[ValueItem]:
        """Items whose name starts with any of ``prefixes``, in insertion order."""
        if not prefixes:
            return []
        return [item for item in self._items.values() if item.name.startswith(prefixes)]

    def items_of_block(self, block_name: str) -> list[ValueItem]:
        return [item for item in self._items.values() if item.block_name == block_name]

    def invalid_items(self) -> list[ValueItem]:
        """Items whose current value is not allowed by their type format."""
        return [item for item in self._items.values() if not item.is_valid()]

    def has_error(self) -> bool:
        return any(not item.is_valid() for item in self._items.values())

    # ------------------------------------------------------------------
    # Update
    # ------------------------------------------------------------------
    def set_value_of(self, name: Optional[str], text: str) -> bool:
        """
        Set the value of an item and, if it changed, update its dependents.

        Returns:
            False if no item with ``name`` exists, True otherwise.
        """
        item = self.get(name)
        if item is None:
            return False
        if item.set_value(text):
            self.notify_dependent_value_items_for_update(item)
        return True

    def notify_dependent_value_items_for_update(self, item: Optional[ValueItem]) -> None:
        if item is None or self.update_notifier is None:
            return
        self.update_notifier.notify_dependent_value_items_for_update(item)
