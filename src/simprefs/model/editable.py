"""
Editable Slicer Preferences
===========================
Factory for the container of user-editable simulation box slicer
preferences, with the bounds and defaults of the session.
"""
from __future__ import annotations

import logging
from typing import Optional

from simprefs import config
from simprefs.model.container import ValueItemContainer
from simprefs.model.defaults import SessionDefaults
from simprefs.model.keys import PreferenceKey
from simprefs.model.type_format import ValueItemTypeFormat
from simprefs.model.update import PreferenceUpdateNotifier
from simprefs.model.value_item import ValueItem

logger = logging.getLogger(__name__)

SLICER_BLOCK = "Simulation box slicer"


def create_slicer_preferences(
    defaults: Optional[SessionDefaults] = None,
    notifier: Optional[PreferenceUpdateNotifier] = None,
) -> ValueItemContainer:
    """
    Build the slicer preference container.

    Args:
        defaults: Session defaults for bounds and initial values. If omitted,
            taken from ``notifier.defaults`` when that is a ``SessionDefaults``,
            else a fresh ``SessionDefaults``.
        notifier: Update notifier for the container. Created from ``defaults``
            if omitted. Values reset by the update engine always come from
            the notifier's provider, even if ``defaults`` differs.

    Returns:
        Container whose FIRST_SLICE_INDEX maximum already follows
        NUMBER_OF_SLICES.
    """
    if defaults is None:
        if notifier is not None and isinstance(notifier.defaults, SessionDefaults):
            defaults = notifier.defaults
        else:
            defaults = SessionDefaults()
    notifier = notifier or PreferenceUpdateNotifier(defaults)

    number_of_slices = ValueItem(
        PreferenceKey.NUMBER_OF_SLICES.representation,
        ValueItemTypeFormat.numeric(
            defaults.number_of_slices,
            minimum_value=config.MINIMUM_NUMBER_OF_SLICES,
            maximum_value=config.MAXIMUM_NUMBER_OF_SLICES,
        ),
        display_name="Number of slices per view",
        block_name=SLICER_BLOCK,
    )
    first_slice_index = ValueItem(
        PreferenceKey.FIRST_SLICE_INDEX.representation,
        ValueItemTypeFormat.numeric(
            defaults.first_slice_index,
            minimum_value=config.MINIMUM_FIRST_SLICE_INDEX,
            maximum_value=defaults.number_of_slices - 1,
        ),
        display_name="Index of first slice",
        block_name=SLICER_BLOCK,
    )
    frame_points = ValueItem(
        PreferenceKey.NUMBER_OF_FRAME_POINTS_SLICER.representation,
        ValueItemTypeFormat.numeric(
            defaults.number_of_frame_points_slicer,
            minimum_value=config.MINIMUM_NUMBER_OF_FRAME_POINTS_SLICER,
        ),
        display_name="Number of frame points",
        block_name=SLICER_BLOCK,
    )
    time_step_display = ValueItem(
        PreferenceKey.TIME_STEP_DISPLAY_SLICER.representation,
        ValueItemTypeFormat.numeric(
            defaults.time_step_display_slicer,
            minimum_value=config.MINIMUM_TIME_STEP_DISPLAY_SLICER,
            maximum_value=config.MAXIMUM_TIME_STEP_DISPLAY_SLICER,
        ),
        display_name="Time step display",
        block_name=SLICER_BLOCK,
    )
    single_slice_display = ValueItem(
        PreferenceKey.IS_SINGLE_SLICE_DISPLAY.representation,
        ValueItemTypeFormat.flag(defaults.single_slice_display),
        display_name="Single slice display",
        description="A slice only displays its own particles, not the slices behind it.",
        block_name=SLICER_BLOCK,
    )
    frame_display = ValueItem(
        PreferenceKey.IS_FRAME_DISPLAY_SLICER.representation,
        ValueItemTypeFormat.flag(defaults.frame_display_slicer),
        display_name="Simulation box frame display",
        block_name=SLICER_BLOCK,
    )
    magnification = ValueItem(
        PreferenceKey.SIMULATION_BOX_MAGNIFICATION_PERCENTAGE.representation,
        ValueItemTypeFormat.numeric(
            defaults.simulation_box_magnification_percentage,
            minimum_value=config.MINIMUM_SIMULATION_BOX_MAGNIFICATION_PERCENTAGE,
            maximum_value=config.MAXIMUM_SIMULATION_BOX_MAGNIFICATION_PERCENTAGE,
        ),
        display_name="Simulation box magnification (%)",
        block_name=SLICER_BLOCK,
    )
    box_view = ValueItem(
        PreferenceKey.BOX_VIEW_DISPLAY.representation,
        ValueItemTypeFormat.selection(defaults.box_view_display, config.BOX_VIEW_SELECTION_TEXTS),
        display_name="Box view",
        block_name=SLICER_BLOCK,
    )

    container = ValueItemContainer(
        update_notifier=notifier,
        items=[
            number_of_slices,
            first_slice_index,
            frame_points,
            time_step_display,
            single_slice_display,
            frame_display,
            magnification,
            box_view,
        ],
    )
    # Align dependent bounds with the initial values
    notifier.notify_changed(number_of_slices)
    logger.debug(f"Slicer preferences created with {len(container)} value items.")
    return container
