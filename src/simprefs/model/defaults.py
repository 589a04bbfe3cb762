"""
Session Defaults
================
Known-good fallback values used when a dependent preference must be reset
because it was driven out of its newly computed bounds.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol

from simprefs import config
from simprefs.model.keys import PreferenceKey


class DefaultsProvider(Protocol):
    """Source of default preference values for the running session."""

    def default_first_slice_index(self) -> int:
        ...

    def default_value_for(self, key: PreferenceKey) -> Optional[str]:
        ...


@dataclass
class SessionDefaults:
    """
    Default values of the current session. Seeded from ``simprefs.config``;
    a host application may override single values at startup.
    """
    number_of_slices: int = config.DEFAULT_NUMBER_OF_SLICES
    first_slice_index: int = config.DEFAULT_FIRST_SLICE_INDEX
    number_of_frame_points_slicer: int = config.DEFAULT_NUMBER_OF_FRAME_POINTS_SLICER
    time_step_display_slicer: int = config.DEFAULT_TIME_STEP_DISPLAY_SLICER
    single_slice_display: bool = config.DEFAULT_SINGLE_SLICE_DISPLAY
    frame_display_slicer: bool = config.DEFAULT_FRAME_DISPLAY_SLICER
    simulation_box_magnification_percentage: int = config.DEFAULT_SIMULATION_BOX_MAGNIFICATION_PERCENTAGE
    box_view_display: str = config.DEFAULT_BOX_VIEW_DISPLAY

    def default_first_slice_index(self) -> int:
        return self.first_slice_index

    def default_value_for(self, key: PreferenceKey) -> Optional[str]:
        """Default as value text, or None if the session has no default for ``key``."""
        match key:
            case PreferenceKey.NUMBER_OF_SLICES:
                return str(self.number_of_slices)
            case PreferenceKey.FIRST_SLICE_INDEX:
                return str(self.first_slice_index)
            case PreferenceKey.NUMBER_OF_FRAME_POINTS_SLICER:
                return str(self.number_of_frame_points_slicer)
            case PreferenceKey.TIME_STEP_DISPLAY_SLICER:
                return str(self.time_step_display_slicer)
            case PreferenceKey.IS_SINGLE_SLICE_DISPLAY:
                return _flag(self.single_slice_display)
            case PreferenceKey.IS_FRAME_DISPLAY_SLICER:
                return _flag(self.frame_display_slicer)
            case PreferenceKey.SIMULATION_BOX_MAGNIFICATION_PERCENTAGE:
                return str(self.simulation_box_magnification_percentage)
            case PreferenceKey.BOX_VIEW_DISPLAY:
                return self.box_view_display
            case _:
                return None


def _flag(value: bool) -> str:
    return config.TRUE_REPRESENTATION if value else config.FALSE_REPRESENTATION
