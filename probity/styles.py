"""Display styles, comparison flags, float traits and array modes used by assertions."""

from __future__ import annotations

import enum

_WIDTH_MASK = 0x0F
_RANGE_INT = 0x10
_RANGE_UINT = 0x20
_RANGE_HEX = 0x40
_RANGE_CHAR = 0x80


class DisplayStyle(enum.IntEnum):
    """How an integer is interpreted and shown; the low nibble is its width in bytes."""

    INT8 = 1 | _RANGE_INT
    INT16 = 2 | _RANGE_INT
    INT32 = 4 | _RANGE_INT
    INT64 = 8 | _RANGE_INT
    UINT8 = 1 | _RANGE_UINT
    UINT16 = 2 | _RANGE_UINT
    UINT32 = 4 | _RANGE_UINT
    UINT64 = 8 | _RANGE_UINT
    HEX8 = 1 | _RANGE_HEX
    HEX16 = 2 | _RANGE_HEX
    HEX32 = 4 | _RANGE_HEX
    HEX64 = 8 | _RANGE_HEX
    CHAR = 1 | _RANGE_CHAR | _RANGE_INT
    # Aliases for the native integer width.
    INT = 4 | _RANGE_INT
    UINT = 4 | _RANGE_UINT

    def width(self) -> int:
        """Width of the value in bytes."""
        return int(self) & _WIDTH_MASK

    def is_signed(self) -> bool:
        """True for signed integer styles, including CHAR."""
        return (int(self) & _RANGE_INT) == _RANGE_INT

    def is_unsigned(self) -> bool:
        """True for unsigned decimal styles."""
        return (int(self) & _RANGE_UINT) == _RANGE_UINT

    def is_hex(self) -> bool:
        """True for styles shown in hexadecimal."""
        return (int(self) & _RANGE_HEX) == _RANGE_HEX


class Comparison(enum.IntFlag):
    """Relation that a threshold comparison expects."""

    NOT_EQUAL = 0
    GREATER_THAN = 0x1
    SMALLER_THAN = 0x2
    EQUAL_TO = 0x4
    GREATER_OR_EQUAL = 0x5
    SMALLER_OR_EQUAL = 0x6


class FloatTrait(enum.IntEnum):
    """A special floating-point property; the low bit says whether it is expected."""

    IS_NOT_INF = 0
    IS_INF = 1
    IS_NOT_NEG_INF = 2
    IS_NEG_INF = 3
    IS_NOT_NAN = 4
    IS_NAN = 5
    IS_NOT_DET = 6
    IS_DET = 7
    INVALID = 8

    def expects_trait(self) -> bool:
        """True if the value should have the trait, False if it should not."""
        return bool(int(self) & 1)


class ArrayMode(enum.Enum):
    """Whether an array is compared with another array or with a single value."""

    ARRAY_TO_VAL = 0
    ARRAY_TO_ARRAY = 1