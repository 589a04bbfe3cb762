"""Unit tests for the editable preference key registry."""

from __future__ import annotations

import pytest

from simprefs.model.keys import (
    MOLECULE_DISPLAY_SETTINGS_VALUE_ITEM_PREFIX,
    PreferenceKey,
    is_defined,
    representations,
    resolve,
)


def test_resolve_known_name():
    """Known names resolve to their key."""

    assert resolve("NUMBER_OF_SLICES") is PreferenceKey.NUMBER_OF_SLICES
    assert resolve("FIRST_SLICE_INDEX") is PreferenceKey.FIRST_SLICE_INDEX


@pytest.mark.parametrize("name", ["totally_unknown_key", "", "UNDEFINED", None, 42])
def test_resolve_unknown_name_is_undefined(name):
    assert resolve(name) is PreferenceKey.UNDEFINED


def test_resolve_is_idempotent():
    first = resolve("NUMBER_OF_SLICES")
    second = resolve("NUMBER_OF_SLICES")
    assert first is second
    assert resolve("totally_unknown_key") is resolve("totally_unknown_key")


@pytest.mark.parametrize("name", ["number_of_slices", " NUMBER_OF_SLICES", "NUMBER_OF_SLICES ", "Number_Of_Slices"])
def test_resolve_does_not_normalize_names(name):
    assert resolve(name) is PreferenceKey.UNDEFINED


def test_particle_color_display_mode_uses_prefixed_representation():
    prefixed = MOLECULE_DISPLAY_SETTINGS_VALUE_ITEM_PREFIX + "PARTICLE_COLOR_DISPLAY_MODE"

    assert PreferenceKey.PARTICLE_COLOR_DISPLAY_MODE.representation == prefixed
    assert resolve(prefixed) is PreferenceKey.PARTICLE_COLOR_DISPLAY_MODE
    assert resolve("PARTICLE_COLOR_DISPLAY_MODE") is PreferenceKey.UNDEFINED


def test_every_key_except_undefined_resolves_from_its_representation():
    for key in PreferenceKey:
        if key is PreferenceKey.UNDEFINED:
            continue
        assert resolve(key.representation) is key


def test_representations_exclude_undefined():
    names = representations()
    assert len(names) == len(PreferenceKey) - 1
    assert "UNDEFINED" not in names
    assert names[0] == "JPEG_IMAGE_QUALITY"


def test_is_defined():
    assert is_defined("NUMBER_OF_SLICES")
    assert not is_defined("NOT_A_PREFERENCE")
