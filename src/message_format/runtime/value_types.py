"""Core value types for the render runtime.

Defines the tagged union of argument values:
    - Number: 64-bit signed integer, used by plural formats
    - Str: Text, used by select formats
    - Value: Union of both variants

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from message_format.constants import INT64_MAX, INT64_MIN, UINT64_MAX

__all__ = [
    "Number",
    "Str",
    "Value",
    "as_value",
]


@dataclass(frozen=True, slots=True)
class Number:
    """Integer argument value.

    Attributes:
        value: Signed integer in the 64-bit range

    Example:
        >>> str(Number(3))
        '3'
    """

    value: int

    def __post_init__(self) -> None:
        """Validate the value is an int in the signed 64-bit range."""
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            msg = f"Number requires int, got {type(self.value).__name__}"
            raise TypeError(msg)
        if not INT64_MIN <= self.value <= INT64_MAX:
            msg = f"Number value {self.value} outside the signed 64-bit range"
            raise ValueError(msg)

    def __str__(self) -> str:
        """Return display form used in rendered output."""
        return str(self.value)


@dataclass(frozen=True, slots=True)
class Str:
    """Text argument value.

    Attributes:
        value: The text

    Example:
        >>> str(Str("Berlin"))
        'Berlin'
    """

    value: str

    def __post_init__(self) -> None:
        """Validate the value is a str."""
        if not isinstance(self.value, str):
            msg = f"Str requires str, got {type(self.value).__name__}"
            raise TypeError(msg)

    def __str__(self) -> str:
        """Return display form used in rendered output."""
        return self.value


type Value = Number | Str
"""Any value an argument can hold."""


def as_value(obj: int | str | Value) -> Value:
    """Convert a Python object into a Value.

    Accepted inputs:
        - Number / Str: returned unchanged
        - int (not bool): widened to Number; unsigned inputs up to 2**64-1
          are accepted only while they fit the signed 64-bit range
        - str: wrapped in Str

    Args:
        obj: Object to convert

    Returns:
        The wrapping Value

    Raises:
        TypeError: If obj is of any other type (bool included)
        ValueError: If an int does not fit the signed 64-bit range

    Example:
        >>> as_value(5)
        Number(value=5)
        >>> as_value("five")
        Str(value='five')
    """
    match obj:
        case Number() | Str():
            return obj
        case bool():
            msg = "bool is not a valid argument value; pass an int or a str"
            raise TypeError(msg)
        case int():
            if INT64_MAX < obj <= UINT64_MAX:
                msg = f"Unsigned value {obj} does not fit the signed 64-bit range"
                raise ValueError(msg)
            return Number(obj)
        case str():
            return Str(obj)
        case _:
            msg = f"Unsupported argument type: {type(obj).__name__}"
            raise TypeError(msg)
