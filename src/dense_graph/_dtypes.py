from __future__ import annotations

import re
from typing import Any

import numpy as np

# Define valid base types
VALID_BASE_TYPES = {
    # Floating-point types
    "float": "float32",
    "float32": "float32",
    "double": "float64",
    "float64": "float64",
    # Fixed-width integer types
    "int8": "int8",
    "int16": "int16",
    "int32": "int32",
    "int64": "int64",
    "uint8": "uint8",
    "uint16": "uint16",
    "uint32": "uint32",
    "uint64": "uint64",
    # Platform-dependent types mapped to fixed-width equivalents
    "int": "int64",
    "uint": "uint64",
    "bool": "bool",
}

# Regex pattern for dtype validation and extraction
DTYPE_PATTERN = r"^({})(?:\[(\d+)\])?$".format("|".join(VALID_BASE_TYPES))
DTYPE_REGEX = re.compile(DTYPE_PATTERN)


class DType:
    """A class to represent the data type of a vertex or edge attribute.

    Parameters
    ----------
    dtype_str : str
        The data type string in the format "base_type[size]". The base_type must
        be one of the valid base types defined in VALID_BASE_TYPES, and size is
        optional.
    """

    def __init__(self, dtype_str: str) -> None:
        self.as_string = dtype_str
        self.base, self.size = self.__parse_array_dtype(dtype_str)
        self.is_array = self.size is not None
        self.shape = (self.size,) if self.is_array else ()

    def __parse_array_dtype(self, dtype_str: str) -> tuple[str, int | None]:
        """Parse the array dtype string into base type and size."""

        if not (match := DTYPE_REGEX.match(dtype_str)):
            raise ValueError(
                f"Invalid dtype string: {dtype_str!r}. Must have base type of "
                f"{list(VALID_BASE_TYPES)!r} and optional size in square brackets."
            )

        base = match.group(1)
        size = int(match.group(2)) if match.group(2) else None

        if base not in VALID_BASE_TYPES:  # pragma: no cover
            raise ValueError(f"Invalid base type: {base}")

        return base, size

    def __repr__(self) -> str:
        return f"DType({self.as_string!r})"

    @property
    def base_numpy_type(self) -> np.dtype:
        """Convert the base of this DType into the equivalent numpy dtype."""
        return np.dtype(VALID_BASE_TYPES[self.base])

    def coerce(self, value: Any) -> Any:
        """Convert ``value`` into a numpy scalar or array of this dtype.

        Array dtypes always produce a fresh array, so the result never aliases
        the caller's buffer.

        Raises
        ------
        ValueError
            If an array value does not have the declared shape.
        """
        if self.is_array:
            array = np.array(value, dtype=self.base_numpy_type)
            if array.shape != self.shape:
                raise ValueError(
                    f"Expected value of shape {self.shape} for dtype "
                    f"{self.as_string!r}, got shape {array.shape}"
                )
            return array
        return self.base_numpy_type.type(value)

    def zero(self) -> Any:
        """The default value of an attribute of this dtype."""
        if self.is_array:
            return np.zeros(self.shape, dtype=self.base_numpy_type)
        return self.base_numpy_type.type(0)

    def copy_value(self, value: Any) -> Any:
        if self.is_array:
            return value.copy()
        return value

    def empty(self, num_items: int) -> np.ndarray:
        """Allocate an uninitialized array holding ``num_items`` values."""
        return np.empty((num_items,) + self.shape, dtype=self.base_numpy_type)
