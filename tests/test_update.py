"""Unit tests for the dependency update engine."""

from __future__ import annotations

import logging

import pytest

from simprefs.model.container import ValueItemContainer
from simprefs.model.defaults import SessionDefaults
from simprefs.model.keys import PreferenceKey
from simprefs.model.type_format import FormatError, ValueItemTypeFormat
from simprefs.model.update import (
    DEPENDENCY_RULES,
    PreferenceUpdateNotifier,
    update_first_slice_index,
)
from simprefs.model.value_item import ValueItem


def _change(container: ValueItemContainer, notifier: PreferenceUpdateNotifier, name: str, text: str) -> None:
    item = container.get(name)
    item.set_value(text)
    notifier.notify_changed(item)


@pytest.mark.parametrize("n", [10, 11, 30, 51, 100, 999, 1000])
def test_maximum_of_first_slice_index_follows_number_of_slices(slice_container, notifier, n):
    _change(slice_container, notifier, "NUMBER_OF_SLICES", str(n))

    assert slice_container.get("FIRST_SLICE_INDEX").maximum_value == n - 1


@pytest.mark.parametrize("n", [10, 30, 50])
def test_out_of_bounds_first_slice_index_is_reset_to_default(slice_container, notifier, n):
    # FIRST_SLICE_INDEX holds 50 > n - 1
    _change(slice_container, notifier, "NUMBER_OF_SLICES", str(n))

    first_slice_index = slice_container.get("FIRST_SLICE_INDEX")
    assert first_slice_index.value == "0"
    assert first_slice_index.value != str(n - 1)


@pytest.mark.parametrize("n", [51, 60, 1000])
def test_in_bounds_first_slice_index_is_unchanged(slice_container, notifier, n):
    _change(slice_container, notifier, "NUMBER_OF_SLICES", str(n))

    first_slice_index = slice_container.get("FIRST_SLICE_INDEX")
    assert first_slice_index.value == "50"
    assert first_slice_index.maximum_value == n - 1


def test_minimum_bound_is_left_unchanged(slice_container, notifier):
    _change(slice_container, notifier, "NUMBER_OF_SLICES", "30")

    assert slice_container.get("FIRST_SLICE_INDEX").minimum_value == 0


def test_reset_uses_provider_default(slice_container):
    notifier = PreferenceUpdateNotifier(SessionDefaults(first_slice_index=3))

    _change(slice_container, notifier, "NUMBER_OF_SLICES", "20")

    assert slice_container.get("FIRST_SLICE_INDEX").value == "3"


def test_end_to_end_scenario(slice_container, notifier):
    first_slice_index = slice_container.get("FIRST_SLICE_INDEX")
    assert slice_container.value_of("NUMBER_OF_SLICES") == "100"
    assert first_slice_index.value == "50"

    _change(slice_container, notifier, "NUMBER_OF_SLICES", "30")
    assert first_slice_index.maximum_value == 29
    assert first_slice_index.value == "0"

    _change(slice_container, notifier, "NUMBER_OF_SLICES", "40")
    assert first_slice_index.maximum_value == 39
    assert first_slice_index.value == "0"


def test_notify_changed_none_is_noop(notifier):
    notifier.notify_changed(None)


def test_notify_changed_detached_item_is_noop(notifier):
    item = ValueItem("NUMBER_OF_SLICES", ValueItemTypeFormat.numeric(100), value="not a number")

    notifier.notify_changed(item)

    assert item.value == "not a number"


def test_notify_changed_detached_item_leaves_other_containers_unchanged(slice_container, notifier):
    detached = ValueItem("NUMBER_OF_SLICES", ValueItemTypeFormat.numeric(100), value="20")

    notifier.notify_changed(detached)

    first_slice_index = slice_container.get("FIRST_SLICE_INDEX")
    assert first_slice_index.maximum_value == 99
    assert first_slice_index.value == "50"


def test_item_without_rule_has_no_effect(slice_container, notifier):
    other = ValueItem("NUMBER_OF_FRAME_POINTS_SLICER", ValueItemTypeFormat.numeric(1000))
    slice_container.add(other)

    _change(slice_container, notifier, "NUMBER_OF_FRAME_POINTS_SLICER", "5")
    _change(slice_container, notifier, "FIRST_SLICE_INDEX", "70")

    first_slice_index = slice_container.get("FIRST_SLICE_INDEX")
    assert first_slice_index.maximum_value == 99
    assert first_slice_index.value == "70"


def test_unknown_name_has_no_effect(notifier):
    item = ValueItem("totally_unknown_key", value="1")
    container = ValueItemContainer(notifier, [item])

    notifier.notify_changed(item)

    assert container.value_of("totally_unknown_key") == "1"


def test_missing_dependent_is_noop(notifier):
    number_of_slices = ValueItem("NUMBER_OF_SLICES", ValueItemTypeFormat.numeric(100), value="20")
    container = ValueItemContainer(notifier, [number_of_slices])

    notifier.notify_changed(number_of_slices)

    assert container.names() == ["NUMBER_OF_SLICES"]


def test_malformed_source_raises_format_error(slice_container, notifier):
    number_of_slices = slice_container.get("NUMBER_OF_SLICES")
    number_of_slices.set_value("lots")

    with pytest.raises(FormatError):
        notifier.notify_changed(number_of_slices)

    first_slice_index = slice_container.get("FIRST_SLICE_INDEX")
    assert first_slice_index.maximum_value == 99
    assert first_slice_index.value == "50"


def test_malformed_dependent_raises_format_error(slice_container, notifier):
    slice_container.get("FIRST_SLICE_INDEX").set_value("first")

    with pytest.raises(FormatError):
        _change(slice_container, notifier, "NUMBER_OF_SLICES", "30")

    assert slice_container.value_of("NUMBER_OF_SLICES") == "30"


def test_propagation_is_single_hop(defaults):
    calls: list[str] = []

    def record_first_slice_index_handler(item, container, provider):
        calls.append(item.name)

    rules = {
        PreferenceKey.NUMBER_OF_SLICES: (update_first_slice_index,),
        PreferenceKey.FIRST_SLICE_INDEX: (record_first_slice_index_handler,),
    }
    notifier = PreferenceUpdateNotifier(defaults, rules)
    number_of_slices = ValueItem("NUMBER_OF_SLICES", ValueItemTypeFormat.numeric(100), value="20")
    first_slice_index = ValueItem("FIRST_SLICE_INDEX", ValueItemTypeFormat.numeric(0, minimum_value=0), value="50")
    container = ValueItemContainer(notifier, [number_of_slices, first_slice_index])

    notifier.notify_changed(number_of_slices)

    assert container.value_of("FIRST_SLICE_INDEX") == "0"
    assert calls == []


def test_container_set_value_of_runs_engine(slice_container):
    assert slice_container.set_value_of("NUMBER_OF_SLICES", "30")

    first_slice_index = slice_container.get("FIRST_SLICE_INDEX")
    assert first_slice_index.maximum_value == 29
    assert first_slice_index.value == "0"


def test_rule_table_is_read_only():
    assert PreferenceKey.NUMBER_OF_SLICES in DEPENDENCY_RULES
    assert DEPENDENCY_RULES[PreferenceKey.NUMBER_OF_SLICES] == (update_first_slice_index,)
    with pytest.raises(TypeError):
        DEPENDENCY_RULES[PreferenceKey.FIRST_SLICE_INDEX] = ()


def test_has_dependents(notifier):
    assert notifier.has_dependents("NUMBER_OF_SLICES")
    assert not notifier.has_dependents("FIRST_SLICE_INDEX")
    assert not notifier.has_dependents("totally_unknown_key")


def test_reset_is_logged(slice_container, notifier, caplog):
    with caplog.at_level(logging.DEBUG, logger="simprefs"):
        _change(slice_container, notifier, "NUMBER_OF_SLICES", "30")

    assert "reset to default 0" in caplog.text
