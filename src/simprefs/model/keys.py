"""
Editable Preference Keys
========================
The closed set of preference names a user may edit, and the lookup from a
persisted name to its key.

The value of each key is its persisted representation. Names are opaque: they
are never stripped, normalized or case-folded, since preference files written
by earlier sessions must resolve to the same keys.
"""
from __future__ import annotations

from enum import StrEnum
from types import MappingProxyType
from typing import Mapping, Optional

# Prefix of value items in the molecule display settings block
MOLECULE_DISPLAY_SETTINGS_VALUE_ITEM_PREFIX = "MOLECULE_DISPLAY_SETTINGS_"


class PreferenceKey(StrEnum):
    """Editable preferences. The value is the persisted representation."""
    JPEG_IMAGE_QUALITY = "JPEG_IMAGE_QUALITY"
    COLOR_TRANSPARENCY_COMPARTMENT = "COLOR_TRANSPARENCY_COMPARTMENT"
    COLOR_GRADIENT_ATTENUATION_COMPARTMENT = "COLOR_GRADIENT_ATTENUATION_COMPARTMENT"
    COLOR_GRADIENT_ATTENUATION_SLICER = "COLOR_GRADIENT_ATTENUATION_SLICER"
    SPECULAR_WHITE_ATTENUATION_SLICER = "SPECULAR_WHITE_ATTENUATION_SLICER"
    COLOR_SHAPE_ATTENUATION_COMPARTMENT = "COLOR_SHAPE_ATTENUATION_COMPARTMENT"
    COMPARTMENT_BODY_CHANGE_RESPONSE_FACTOR = "COMPARTMENT_BODY_CHANGE_RESPONSE_FACTOR"
    MAX_SELECTED_MOLECULE_NUMBER_SLICER = "MAX_SELECTED_MOLECULE_NUMBER_SLICER"
    DEPTH_ATTENUATION_SLICER = "DEPTH_ATTENUATION_SLICER"
    SHIFTS_SLICER = "SHIFTS_SLICER"
    CUSTOM_DIALOG_SIZE = "CUSTOM_DIALOG_SIZE"
    ROTATION_ANGLES = "ROTATION_ANGLES"
    PARTICLE_SHIFTS = "PARTICLE_SHIFTS"
    STEP_INFO_ARRAY_SLICER = "STEP_INFO_ARRAY_SLICER"
    RADIAL_GRADIENT_PAINT_RADIUS_MAGNIFICATION = "RADIAL_GRADIENT_PAINT_RADIUS_MAGNIFICATION"
    SPECULAR_WHITE_SIZE_SLICER = "SPECULAR_WHITE_SIZE_SLICER"
    RADIAL_GRADIENT_PAINT_FOCUS_FACTORS = "RADIAL_GRADIENT_PAINT_FOCUS_FACTORS"
    DELAY_FOR_FILES_IN_MILLISECONDS = "DELAY_FOR_FILES_IN_MILLISECONDS"
    DELAY_FOR_JOB_START_IN_MILLISECONDS = "DELAY_FOR_JOB_START_IN_MILLISECONDS"
    INTERNAL_MFSIM_JOB_PATH = "INTERNAL_MFSIM_JOB_PATH"
    INTERNAL_TEMP_PATH = "INTERNAL_TEMP_PATH"
    CURRENT_PARTICLE_SET_FILENAME = "CURRENT_PARTICLE_SET_FILENAME"
    FIRST_SLICE_INDEX = "FIRST_SLICE_INDEX"
    NUMBER_OF_ZOOM_VOLUME_BINS = "NUMBER_OF_ZOOM_VOLUME_BINS"
    NUMBER_OF_FRAME_POINTS_SLICER = "NUMBER_OF_FRAME_POINTS_SLICER"
    TIME_STEP_DISPLAY_SLICER = "TIME_STEP_DISPLAY_SLICER"
    IS_JOB_RESULT_ARCHIVE_STEP_FILE_INCLUSION = "IS_JOB_RESULT_ARCHIVE_STEP_FILE_INCLUSION"
    IS_VOLUME_SCALING_FOR_CONCENTRATION_CALCULATION = "IS_VOLUME_SCALING_FOR_CONCENTRATION_CALCULATION"
    IS_JOB_INPUT_INCLUSION = "IS_JOB_INPUT_INCLUSION"
    IS_PARTICLE_DISTRICUTION_INCLUSION = "IS_PARTICLE_DISTRICUTION_INCLUSION"
    IS_SIMULATION_STEP_INCLUSION = "IS_SIMULATION_STEP_INCLUSION"
    IS_NEAREST_NEIGHBOR_EVALUATION_INCLUSION = "IS_NEAREST_NEIGHBOR_EVALUATION_INCLUSION"
    IS_JOB_RESULT_ARCHIVE_PROCESS_PARALLEL_IN_BACKGROUND = "IS_JOB_RESULT_ARCHIVE_PROCESS_PARALLEL_IN_BACKGROUND"
    IS_JOB_RESULT_ARCHIVE_FILE_UNCOMPRESSED = "IS_JOB_RESULT_ARCHIVE_FILE_UNCOMPRESSED"
    IS_JDPD_KERNEL_DOUBLE_PRECISION = "IS_JDPD_KERNEL_DOUBLE_PRECISION"
    IS_JDPD_LOG_LEVEL_EXCEPTION = "IS_JDPD_LOG_LEVEL_EXCEPTION"
    IS_CONSTANT_COMPARTMENT_BODY_VOLUME = "IS_CONSTANT_COMPARTMENT_BODY_VOLUME"
    IS_SIMULATION_BOX_SLICER = "IS_SIMULATION_BOX_SLICER"
    IS_MOLECULE_DISPLAY_WITH_STANDARD_PARTICLE_SIZE = "IS_MOLECULE_DISPLAY_WITH_STANDARD_PARTICLE_SIZE"
    IS_SINGLE_SLICE_DISPLAY = "IS_SINGLE_SLICE_DISPLAY"
    SLICER_GRAPHICS_MODE = "SLICER_GRAPHICS_MODE"
    SIMULATION_BOX_BACKGROUND_COLOR_SLICER = "SIMULATION_BOX_BACKGROUND_COLOR_SLICER"
    MEASUREMENT_COLOR_SLICER = "MEASUREMENT_COLOR_SLICER"
    MOLECULE_SELECTION_COLOR_SLICER = "MOLECULE_SELECTION_COLOR_SLICER"
    FRAME_COLOR_SLICER = "FRAME_COLOR_SLICER"
    JMOL_SIMULATION_BOX_BACKGROUND_COLOR = "JMOL_SIMULATION_BOX_BACKGROUND_COLOR"
    PROTEIN_VIEWER_BACKGROUND_COLOR = "PROTEIN_VIEWER_BACKGROUND_COLOR"
    IMAGE_STORAGE_MODE = "IMAGE_STORAGE_MODE"
    # Lives in the molecule display settings block, hence the prefix
    PARTICLE_COLOR_DISPLAY_MODE = MOLECULE_DISPLAY_SETTINGS_VALUE_ITEM_PREFIX + "PARTICLE_COLOR_DISPLAY_MODE"
    BOX_VIEW_DISPLAY = "BOX_VIEW_DISPLAY"
    IS_FRAME_DISPLAY_SLICER = "IS_FRAME_DISPLAY_SLICER"
    JOB_INPUT_FILTER_AFTER_TIMESTAMP = "JOB_INPUT_FILTER_AFTER_TIMESTAMP"
    JOB_INPUT_FILTER_BEFORE_TIMESTAMP = "JOB_INPUT_FILTER_BEFORE_TIMESTAMP"
    JOB_INPUT_FILTER_CONTAINS_PHRASE = "JOB_INPUT_FILTER_CONTAINS_PHRASE"
    JOB_RESULT_FILTER_AFTER_TIMESTAMP = "JOB_RESULT_FILTER_AFTER_TIMESTAMP"
    JOB_RESULT_FILTER_BEFORE_TIMESTAMP = "JOB_RESULT_FILTER_BEFORE_TIMESTAMP"
    JOB_RESULT_FILTER_CONTAINS_PHRASE = "JOB_RESULT_FILTER_CONTAINS_PHRASE"
    NUMBER_OF_SLICES = "NUMBER_OF_SLICES"
    JMOL_SHADE_POWER = "JMOL_SHADE_POWER"
    JMOL_AMBIENT_LIGHT_PERCENTAGE = "JMOL_AMBIENT_LIGHT_PERCENTAGE"
    JMOL_DIFFUSE_LIGHT_PERCENTAGE = "JMOL_DIFFUSE_LIGHT_PERCENTAGE"
    JMOL_SPECULAR_REFLECTION_EXPONENT = "JMOL_SPECULAR_REFLECTION_EXPONENT"
    JMOL_SPECULAR_REFLECTION_PERCENTAGE = "JMOL_SPECULAR_REFLECTION_PERCENTAGE"
    JMOL_SPECULAR_REFLECTION_POWER = "JMOL_SPECULAR_REFLECTION_POWER"
    NUMBER_OF_PARALLEL_SIMULATIONS = "NUMBER_OF_PARALLEL_SIMULATIONS"
    NUMBER_OF_PARALLEL_SLICERS = "NUMBER_OF_PARALLEL_SLICERS"
    NUMBER_OF_PARALLEL_CALCULATORS = "NUMBER_OF_PARALLEL_CALCULATORS"
    NUMBER_OF_PARALLEL_PARTICLE_POSITION_WRITERS = "NUMBER_OF_PARALLEL_PARTICLE_POSITION_WRITERS"
    NUMBER_OF_AFTER_DECIMAL_SEPARATOR_DIGITS_FOR_PARTICLE_POSITIONS = "NUMBER_OF_AFTER_DECIMAL_SEPARATOR_DIGITS_FOR_PARTICLE_POSITIONS"
    MAXIMUM_NUMBER_OF_POSITION_CORRECTION_TRIALS = "MAXIMUM_NUMBER_OF_POSITION_CORRECTION_TRIALS"
    MOVIE_QUALITY = "MOVIE_QUALITY"
    TIMER_INTERVALL_IN_MILLISECONDS = "TIMER_INTERVALL_IN_MILLISECONDS"
    MINIMUM_BOND_LENGTH_DPD = "MINIMUM_BOND_LENGTH_DPD"
    MAXIMUM_NUMBER_OF_PARTICLES_FOR_GRAPHICAL_DISPLAY = "MAXIMUM_NUMBER_OF_PARTICLES_FOR_GRAPHICAL_DISPLAY"
    NUMBER_OF_STEPS_FOR_RDF_CALCULATION = "NUMBER_OF_STEPS_FOR_RDF_CALCULATION"
    NUMBER_OF_TRIALS_FOR_COMPARTMENT = "NUMBER_OF_TRIALS_FOR_COMPARTMENT"
    ANIMATION_SPEED = "ANIMATION_SPEED"
    NUMBER_OF_SIMULATION_BOX_CELLS_FOR_PARALLELIZATION = "NUMBER_OF_SIMULATION_BOX_CELLS_FOR_PARALLELIZATION"
    NUMBER_OF_BONDS_FOR_PARALLELIZATION = "NUMBER_OF_BONDS_FOR_PARALLELIZATION"
    NUMBER_OF_STEPS_FOR_JOB_RESTART = "NUMBER_OF_STEPS_FOR_JOB_RESTART"
    SIMULATION_BOX_MAGNIFICATION_PERCENTAGE = "SIMULATION_BOX_MAGNIFICATION_PERCENTAGE"
    NUMBER_OF_SPIN_STEPS = "NUMBER_OF_SPIN_STEPS"
    SIMULATION_MOVIE_IMAGE_PATH = "SIMULATION_MOVIE_IMAGE_PATH"
    CHART_MOVIE_IMAGE_PATH = "CHART_MOVIE_IMAGE_PATH"
    UNDEFINED = "UNDEFINED"

    @property
    def representation(self) -> str:
        """Name under which the preference is persisted."""
        return self.value


# Built once at import, read-only afterwards. UNDEFINED has no representation.
_REPRESENTATION_TO_KEY: Mapping[str, PreferenceKey] = MappingProxyType({
    key.value: key for key in PreferenceKey if key is not PreferenceKey.UNDEFINED
})


def resolve(name: Optional[str]) -> PreferenceKey:
    """Return the key persisted as ``name``, or UNDEFINED for anything else."""
    if not isinstance(name, str):
        return PreferenceKey.UNDEFINED
    return _REPRESENTATION_TO_KEY.get(name, PreferenceKey.UNDEFINED)


def is_defined(name: Optional[str]) -> bool:
    return resolve(name) is not PreferenceKey.UNDEFINED


def representations() -> list[str]:
    """All persisted names in declaration order."""
    return list(_REPRESENTATION_TO_KEY.keys())
