from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QObject, Signal

from simprefs.model.container import ValueItemContainer
from simprefs.model.defaults import SessionDefaults
from simprefs.model.editable import create_slicer_preferences
from simprefs.model.update import PreferenceUpdateNotifier

logger = logging.getLogger(__name__)

# name -> (value, minimum, maximum)
_Snapshot = dict[str, tuple[str, float, float]]


class PreferencesStore(QObject):
    """Owner of the editable preferences. Routes UI edits through the update engine."""
    value_changed = Signal(str)
    bounds_changed = Signal(str)

    def __init__(self, container: ValueItemContainer, notifier: PreferenceUpdateNotifier) -> None:
        super().__init__()
        self._container = container
        self._notifier = notifier

    @classmethod
    def create(cls, defaults: Optional[SessionDefaults] = None) -> PreferencesStore:
        """Wire defaults, notifier and the slicer preferences together."""
        defaults = defaults or SessionDefaults()
        notifier = PreferenceUpdateNotifier(defaults)
        container = create_slicer_preferences(defaults, notifier)
        return cls(container, notifier)

    @property
    def container(self) -> ValueItemContainer:
        return self._container

    def value(self, name: str) -> Optional[str]:
        return self._container.value_of(name)

    def edit(self, name: str, text: str) -> bool:
        """
        Apply a user edit and update the dependent preferences.

        Emits ``value_changed`` for the edited item and ``bounds_changed`` for
        every other item the update engine adjusted. If the update fails with
        a ValueError (a FormatError for unparseable text, or bounds that
        cannot be applied), all items are restored and the error is re-raised.

        Returns:
            False if no preference with ``name`` exists.
        """
        item = self._container.get(name)
        if item is None:
            logger.debug(f"Edit of unknown preference '{name}' ignored.")
            return False

        snapshot = self._snapshot()
        if not item.set_value(text):
            return True

        try:
            self._notifier.notify_changed(item)
        except ValueError as e:
            logger.warning(f"Edit of '{name}' to '{text}' rolled back: {e}")
            self._restore(snapshot)
            raise

        self.value_changed.emit(name)
        for other in self._container:
            if other.name == name:
                continue
            if snapshot[other.name] != (other.value, other.minimum_value, other.maximum_value):
                self.bounds_changed.emit(other.name)
        return True

    def _snapshot(self) -> _Snapshot:
        return {
            item.name: (item.value, item.minimum_value, item.maximum_value)
            for item in self._container
        }

    def _restore(self, snapshot: _Snapshot) -> None:
        for item in self._container:
            value, minimum, maximum = snapshot[item.name]
            item.set_value(value)
            item.type_format.minimum_value = minimum
            item.type_format.maximum_value = maximum
