"""
Value Items
===========
A value item is a single named, typed, bounded and mutable preference
setting. Its value is always stored as text and converted on demand.

Setting a value does NOT validate it and does NOT update dependent items.
Both are the responsibility of the owner of the container (see
``simprefs.model.update``).
"""
from __future__ import annotations

import weakref
from typing import Optional, TYPE_CHECKING

from simprefs.model.type_format import (
    FormatError,
    ValueItemTypeFormat,
    parse_flag,
    parse_float,
    parse_int,
)

if TYPE_CHECKING:
    from simprefs.model.container import ValueItemContainer

__all__ = ["FormatError", "ValueItem"]


class ValueItem:
    """
    Named preference setting.

    Args:
        name: Unique name within the owning container (kept verbatim).
        type_format: Type, bounds and default. Defaults to free text.
        value: Initial value text. Defaults to the type format default.
        display_name: Label for hosting UIs.
        description: Longer help text for hosting UIs.
        block_name: Name of the display block the item belongs to.
    """

    def __init__(
        self,
        name: str,
        type_format: Optional[ValueItemTypeFormat] = None,
        value: Optional[str] = None,
        display_name: str = "",
        description: str = "",
        block_name: str = "",
    ) -> None:
        if not name:
            raise ValueError("Value item name must not be empty.")
        self._name = name
        self.type_format = type_format if type_format is not None else ValueItemTypeFormat.text()
        self._value = self.type_format.default_value if value is None else value
        self.display_name = display_name or name
        self.description = description
        self.block_name = block_name
        # Non-owning: the container owns its items, never the other way round
        self._container_ref: Optional[weakref.ref[ValueItemContainer]] = None

    def __repr__(self) -> str:
        return f"ValueItem(name={self._name!r}, value={self._value!r})"

    @property
    def name(self) -> str:
        return self._name

    @property
    def value(self) -> str:
        return self._value

    @property
    def default_value(self) -> str:
        return self.type_format.default_value

    @property
    def container(self) -> Optional[ValueItemContainer]:
        """Owning container, or None if the item is detached."""
        if self._container_ref is None:
            return None
        return self._container_ref()

    def _attach(self, container: ValueItemContainer) -> None:
        self._container_ref = weakref.ref(container)

    def _detach(self) -> None:
        self._container_ref = None

    # ------------------------------------------------------------------
    # Value
    # ------------------------------------------------------------------
    def set_value(self, text: str) -> bool:
        """
        Store ``text`` as the new value.

        Returns:
            True if the stored value changed, False otherwise (also for None).
        """
        if text is None:
            return False
        if text == self._value:
            return False
        self._value = text
        return True

    def reset_to_default(self) -> bool:
        return self.set_value(self.type_format.default_value)

    def value_as_int(self) -> int:
        """Value as integer. Raises FormatError if the text is not an integer."""
        return parse_int(self._value)

    def value_as_float(self) -> float:
        """Value as float. Raises FormatError if the text is not numeric."""
        return parse_float(self._value)

    def value_as_bool(self) -> bool:
        return parse_flag(self._value)

    def is_valid(self) -> bool:
        """True if the current value is allowed by the type format."""
        return self.type_format.is_value_allowed(self._value)

    # ------------------------------------------------------------------
    # Bounds
    # ------------------------------------------------------------------
    @property
    def minimum_value(self) -> float:
        return self.type_format.minimum_value

    @property
    def maximum_value(self) -> float:
        return self.type_format.maximum_value

    def set_bounds(self, minimum_value: float, maximum_value: float) -> None:
        """Update the bounds in place. The current value is not clamped."""
        self.type_format.set_bounds(minimum_value, maximum_value)

    def is_value_in_bounds(self) -> bool:
        """Raises FormatError if the value is not numeric."""
        return self.type_format.is_in_bounds(self.value_as_float())

    # ------------------------------------------------------------------
    # Update notification
    # ------------------------------------------------------------------
    def notify_dependent_value_items_for_update(self) -> None:
        """Ask the owning container to update the items that depend on this one."""
        container = self.container
        if container is None:
            return
        container.notify_dependent_value_items_for_update(self)
