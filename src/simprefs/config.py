"""
Configuration & Default Values
==============================
This module serves as the central registry for the default values and limits
of the editable slicer preferences.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (e.g. 100 slices, 1000 frame points)
   from being scattered throughout the model code.
2. Consistency: The defaults provider, the preference factory and the tests
   all read the same constants, so a change here propagates everywhere.

Exports:
    DEFAULT_NUMBER_OF_SLICES (int): Default number of slices per view.
    DEFAULT_FIRST_SLICE_INDEX (int): Default index of the first slice.
    MINIMUM_NUMBER_OF_SLICES / MAXIMUM_NUMBER_OF_SLICES (int): Slice count limits.
"""
from __future__ import annotations

import sys

# Unbounded sides of a numeric type format
UNDEFINED_MINIMUM: float = -sys.float_info.max
UNDEFINED_MAXIMUM: float = sys.float_info.max

# Representation of an unbounded side
NOT_DEFINED_REPRESENTATION: str = "Not defined"

# Flag values
TRUE_REPRESENTATION: str = "true"
FALSE_REPRESENTATION: str = "false"

# ------------------------------------------------------------------------------
# Simulation box slicer
# ------------------------------------------------------------------------------
DEFAULT_NUMBER_OF_SLICES: int = 100
MINIMUM_NUMBER_OF_SLICES: int = 10
# Must correspond to the number of decimals used for graphics coordinates
MAXIMUM_NUMBER_OF_SLICES: int = 1000

DEFAULT_FIRST_SLICE_INDEX: int = 0
MINIMUM_FIRST_SLICE_INDEX: int = 0

DEFAULT_NUMBER_OF_FRAME_POINTS_SLICER: int = 1000
MINIMUM_NUMBER_OF_FRAME_POINTS_SLICER: int = 2

DEFAULT_TIME_STEP_DISPLAY_SLICER: int = 1
# Must be 1, slicer step arithmetic assumes it
MINIMUM_TIME_STEP_DISPLAY_SLICER: int = 1
MAXIMUM_TIME_STEP_DISPLAY_SLICER: int = 100

DEFAULT_SINGLE_SLICE_DISPLAY: bool = False
DEFAULT_FRAME_DISPLAY_SLICER: bool = True

DEFAULT_SIMULATION_BOX_MAGNIFICATION_PERCENTAGE: int = -3
MINIMUM_SIMULATION_BOX_MAGNIFICATION_PERCENTAGE: int = -500
# Must be smaller than 100
MAXIMUM_SIMULATION_BOX_MAGNIFICATION_PERCENTAGE: int = 99

BOX_VIEW_SELECTION_TEXTS: tuple[str, ...] = (
    "XZ_FRONT",
    "XZ_BACK",
    "YZ_LEFT",
    "YZ_RIGHT",
    "XY_TOP",
    "XY_BOTTOM",
)
DEFAULT_BOX_VIEW_DISPLAY: str = "XZ_FRONT"
