"""
Value Item Type Formats
=======================
Describes WHAT a value item may hold: its data type, the numeric bounds and
precision, the default value and, for selections, the allowed texts.

A type format never touches the value of its item. Tightening a bound leaves
an out-of-range value in place; correcting it is the job of the update engine.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, replace
from enum import StrEnum

import numpy as np

from simprefs.config import (
    FALSE_REPRESENTATION,
    NOT_DEFINED_REPRESENTATION,
    TRUE_REPRESENTATION,
    UNDEFINED_MAXIMUM,
    UNDEFINED_MINIMUM,
)

_INTEGER_PATTERN = re.compile(r"\s*[+-]?[0-9]+\s*")


class FormatError(ValueError):
    """Stored text cannot be read as the requested type."""


class ValueItemDataType(StrEnum):
    NUMERIC = "numeric"
    TEXT = "text"
    SELECTION_TEXT = "selection_text"
    FLAG = "flag"


def round_value(value: float, number_of_decimals: int) -> float:
    """Round to the given decimals. Unbounded sides are kept as they are."""
    if value <= UNDEFINED_MINIMUM or value >= UNDEFINED_MAXIMUM:
        return value
    return float(np.round(value, number_of_decimals))


def parse_int(text: str) -> int:
    """Plain signed ASCII decimal only; digit separators are rejected."""
    if not isinstance(text, str) or _INTEGER_PATTERN.fullmatch(text) is None:
        raise FormatError(f"'{text}' is not an integer value.")
    return int(text)


def parse_float(text: str) -> float:
    try:
        return float(text)
    except (TypeError, ValueError) as e:
        raise FormatError(f"'{text}' is not a numeric value.") from e


def parse_flag(text: str) -> bool:
    if isinstance(text, str):
        lowered = text.lower()
        if lowered == TRUE_REPRESENTATION:
            return True
        if lowered == FALSE_REPRESENTATION:
            return False
    raise FormatError(f"'{text}' is not a flag value.")


@dataclass
class ValueItemTypeFormat:
    """
    Type, bounds and default of a single value item.

    Numeric bounds are rounded to ``number_of_decimals``. A side that was never
    set is "not defined" and represented by the largest finite float.
    """
    data_type: ValueItemDataType = ValueItemDataType.TEXT
    default_value: str = ""
    number_of_decimals: int = 0
    minimum_value: float = UNDEFINED_MINIMUM
    maximum_value: float = UNDEFINED_MAXIMUM
    selection_texts: tuple[str, ...] = ()
    is_editable: bool = True

    def __post_init__(self) -> None:
        if self.number_of_decimals < 0:
            raise ValueError(f"Number of decimals must not be negative: {self.number_of_decimals}")

        match self.data_type:
            case ValueItemDataType.NUMERIC:
                self.minimum_value = round_value(self.minimum_value, self.number_of_decimals)
                self.maximum_value = round_value(self.maximum_value, self.number_of_decimals)
                if self.maximum_value < self.minimum_value:
                    raise ValueError("Maximum value is smaller than minimum value.")
                default = parse_float(self.default_value)
                if not self.minimum_value <= default <= self.maximum_value:
                    raise ValueError(
                        f"Default value '{self.default_value}' is outside of "
                        f"[{self.minimum_value_representation}, {self.maximum_value_representation}]."
                    )
                self.default_value = self.format_value(self.default_value)
            case ValueItemDataType.SELECTION_TEXT:
                self.selection_texts = tuple(self.selection_texts)
                if not self.selection_texts:
                    raise ValueError("Selection type format requires selection texts.")
                if not self.default_value:
                    self.default_value = self.selection_texts[0]
                if self.default_value not in self.selection_texts:
                    raise ValueError(f"Default value '{self.default_value}' is not a selection text.")
            case ValueItemDataType.FLAG:
                flag = parse_flag(self.default_value) if self.default_value else False
                self.default_value = TRUE_REPRESENTATION if flag else FALSE_REPRESENTATION

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------
    @classmethod
    def numeric(
        cls,
        default_value: float | int | str,
        number_of_decimals: int = 0,
        minimum_value: float = UNDEFINED_MINIMUM,
        maximum_value: float = UNDEFINED_MAXIMUM,
        is_editable: bool = True,
    ) -> ValueItemTypeFormat:
        return cls(
            data_type=ValueItemDataType.NUMERIC,
            default_value=str(default_value),
            number_of_decimals=number_of_decimals,
            minimum_value=minimum_value,
            maximum_value=maximum_value,
            is_editable=is_editable,
        )

    @classmethod
    def text(cls, default_value: str = "", is_editable: bool = True) -> ValueItemTypeFormat:
        return cls(data_type=ValueItemDataType.TEXT, default_value=default_value, is_editable=is_editable)

    @classmethod
    def selection(cls, default_value: str, selection_texts: tuple[str, ...] | list[str]) -> ValueItemTypeFormat:
        return cls(
            data_type=ValueItemDataType.SELECTION_TEXT,
            default_value=default_value,
            selection_texts=tuple(selection_texts),
        )

    @classmethod
    def flag(cls, default_value: bool = False) -> ValueItemTypeFormat:
        return cls(
            data_type=ValueItemDataType.FLAG,
            default_value=TRUE_REPRESENTATION if default_value else FALSE_REPRESENTATION,
        )

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------
    @property
    def is_numeric(self) -> bool:
        return self.data_type == ValueItemDataType.NUMERIC

    @property
    def is_integer_number(self) -> bool:
        return self.is_numeric and self.number_of_decimals == 0

    @property
    def has_minimum(self) -> bool:
        return self.minimum_value > UNDEFINED_MINIMUM

    @property
    def has_maximum(self) -> bool:
        return self.maximum_value < UNDEFINED_MAXIMUM

    @property
    def minimum_value_representation(self) -> str:
        if not self.has_minimum:
            return NOT_DEFINED_REPRESENTATION
        return f"{self.minimum_value:.{self.number_of_decimals}f}"

    @property
    def maximum_value_representation(self) -> str:
        if not self.has_maximum:
            return NOT_DEFINED_REPRESENTATION
        return f"{self.maximum_value:.{self.number_of_decimals}f}"

    # ------------------------------------------------------------------
    # Bounds
    # ------------------------------------------------------------------
    def set_minimum_value(self, minimum_value: float) -> None:
        """Set the minimum (rounded first). Raises ValueError above the maximum."""
        rounded = round_value(minimum_value, self.number_of_decimals)
        if rounded > self.maximum_value:
            raise ValueError(
                f"Minimum value '{minimum_value}' must be less/equal than/to "
                f"maximum value '{self.maximum_value_representation}'."
            )
        self.minimum_value = rounded

    def set_maximum_value(self, maximum_value: float) -> None:
        """Set the maximum (rounded first). Raises ValueError below the minimum."""
        rounded = round_value(maximum_value, self.number_of_decimals)
        if rounded < self.minimum_value:
            raise ValueError(
                f"Maximum value '{maximum_value}' must be greater/equal than/to "
                f"minimum value '{self.minimum_value_representation}'."
            )
        self.maximum_value = rounded

    def set_bounds(self, minimum_value: float, maximum_value: float) -> None:
        minimum = round_value(minimum_value, self.number_of_decimals)
        maximum = round_value(maximum_value, self.number_of_decimals)
        if maximum < minimum:
            raise ValueError(f"Maximum value '{maximum_value}' is smaller than minimum value '{minimum_value}'.")
        self.minimum_value = minimum
        self.maximum_value = maximum

    def set_min_max_default(self, minimum_value: float, maximum_value: float, default_value: str) -> None:
        """Replace bounds and default together; the default must lie inside the new bounds."""
        if maximum_value < minimum_value:
            raise ValueError("Maximum value is smaller than minimum value.")
        default = parse_float(default_value)
        if default < minimum_value:
            raise ValueError("Default value is smaller than minimum value.")
        if default > maximum_value:
            raise ValueError("Default value is greater than maximum value.")
        self.set_bounds(minimum_value, maximum_value)
        self.default_value = self.format_value(default_value)

    # ------------------------------------------------------------------
    # Values
    # ------------------------------------------------------------------
    def format_value(self, text: str) -> str:
        """Canonical text of a value. Numeric text is rounded to the decimals."""
        if not self.is_numeric:
            return text
        value = round_value(parse_float(text), self.number_of_decimals)
        return f"{value:.{self.number_of_decimals}f}"

    def is_in_bounds(self, value: float) -> bool:
        return self.minimum_value <= value <= self.maximum_value

    def is_value_allowed(self, text: str) -> bool:
        """True if ``text`` is a valid value for this type format."""
        if text is None:
            return False
        try:
            match self.data_type:
                case ValueItemDataType.NUMERIC:
                    value = parse_int(text) if self.is_integer_number else parse_float(text)
                    return self.is_in_bounds(value)
                case ValueItemDataType.SELECTION_TEXT:
                    return text in self.selection_texts
                case ValueItemDataType.FLAG:
                    parse_flag(text)
                    return True
                case _:
                    return True
        except FormatError:
            return False

    def copy(self) -> ValueItemTypeFormat:
        return replace(self)
