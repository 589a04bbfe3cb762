"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from simprefs.model.container import ValueItemContainer
from simprefs.model.defaults import SessionDefaults
from simprefs.model.editable import create_slicer_preferences
from simprefs.model.type_format import ValueItemTypeFormat
from simprefs.model.update import PreferenceUpdateNotifier
from simprefs.model.value_item import ValueItem


@pytest.fixture
def defaults() -> SessionDefaults:
    """Return the session defaults (100 slices, first slice index 0)."""

    return SessionDefaults()


@pytest.fixture
def notifier(defaults: SessionDefaults) -> PreferenceUpdateNotifier:
    """Return an update notifier using the session defaults."""

    return PreferenceUpdateNotifier(defaults)


@pytest.fixture
def slice_container(notifier: PreferenceUpdateNotifier) -> ValueItemContainer:
    """Return a container with NUMBER_OF_SLICES = 100 and FIRST_SLICE_INDEX = 50."""

    number_of_slices = ValueItem(
        "NUMBER_OF_SLICES",
        ValueItemTypeFormat.numeric(100, minimum_value=10, maximum_value=1000),
    )
    first_slice_index = ValueItem(
        "FIRST_SLICE_INDEX",
        ValueItemTypeFormat.numeric(0, minimum_value=0, maximum_value=99),
        value="50",
    )
    return ValueItemContainer(notifier, [number_of_slices, first_slice_index])


@pytest.fixture
def slicer_preferences(defaults: SessionDefaults, notifier: PreferenceUpdateNotifier) -> ValueItemContainer:
    """Return the complete slicer preference container."""

    return create_slicer_preferences(defaults, notifier)
