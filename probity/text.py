"""Assertions on strings, string arrays and raw memory."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Optional, Union

from probity.formatting import escape_text, format_by_style, format_unsigned
from probity.numbers import (
    STR_ELEMENT,
    STR_EXPECTED,
    STR_POINTLESS,
    STR_WAS,
    _arrays_settled,
)
from probity.runner import TestFailed
from probity.styles import ArrayMode, DisplayStyle

STR_NULL = "NULL"
STR_BYTE = " Byte "
STR_MEMORY = " Memory Mismatch."

Text = Optional[Union[str, bytes]]
BytesLike = Union[bytes, bytearray, memoryview]


def _terminated(text: Union[str, bytes]) -> bytes:
    data = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    return data.split(b"\0", 1)[0]


def _quoted(text: Text, length: Optional[int]) -> str:
    if text is None:
        return STR_NULL
    return "'" + escape_text(text, length) + "'"


def _expected_was(expected: Text, actual: Text, length: Optional[int] = None) -> str:
    return STR_EXPECTED + _quoted(expected, length) + STR_WAS + _quoted(actual, length)


def _strings_equal(expected: Text, actual: Text, length: Optional[int] = None) -> bool:
    if expected is None or actual is None:
        return expected is actual
    exp = _terminated(expected)
    act = _terminated(actual)
    if length is not None:
        exp = exp[: max(length, 0)]
        act = act[: max(length, 0)]
    return exp == act


def assert_equal_string(
    expected: Text,
    actual: Text,
    msg: Optional[str] = None,
    line: Optional[int] = None,
) -> None:
    """Check that two strings are equal up to their terminating NUL."""
    if not _strings_equal(expected, actual):
        raise TestFailed(_expected_was(expected, actual), msg, line)


def assert_equal_string_len(
    expected: Text,
    actual: Text,
    length: int,
    msg: Optional[str] = None,
    line: Optional[int] = None,
) -> None:
    """Check that two strings agree in their first ``length`` bytes."""
    if not _strings_equal(expected, actual, length):
        raise TestFailed(_expected_was(expected, actual, length), msg, line)


def assert_equal_string_array(
    expected: Optional[Union[Sequence[Text], str, bytes]],
    actual: Optional[Sequence[Text]],
    num_elements: int,
    mode: Union[ArrayMode, int] = ArrayMode.ARRAY_TO_ARRAY,
    msg: Optional[str] = None,
    line: Optional[int] = None,
) -> None:
    """Check each string of ``actual`` against an array of strings or one string."""
    mode = ArrayMode(mode)
    if _arrays_settled(expected, actual, num_elements, msg, line):
        return
    assert expected is not None and actual is not None
    if len(actual) < num_elements:
        raise ValueError(f"actual holds fewer than {num_elements} elements")
    if mode is ArrayMode.ARRAY_TO_ARRAY:
        if isinstance(expected, (str, bytes)):
            raise TypeError("expected must be a sequence of strings when comparing arrays")
        if len(expected) < num_elements:
            raise ValueError(f"expected holds fewer than {num_elements} elements")
    for index, act in enumerate(actual[:num_elements]):
        exp = expected[index] if mode is ArrayMode.ARRAY_TO_ARRAY else expected
        if not _strings_equal(exp, act):
            detail = ""
            if num_elements > 1:
                detail += STR_ELEMENT + format_unsigned(index)
            raise TestFailed(detail + _expected_was(exp, act), msg, line)


def assert_equal_memory(
    expected: Optional[BytesLike],
    actual: Optional[BytesLike],
    length: int,
    num_elements: int = 1,
    mode: Union[ArrayMode, int] = ArrayMode.ARRAY_TO_ARRAY,
    msg: Optional[str] = None,
    line: Optional[int] = None,
) -> None:
    """Check ``num_elements`` blocks of ``length`` bytes against expected memory."""
    mode = ArrayMode(mode)
    if length == 0:
        raise TestFailed(STR_POINTLESS, msg, line)
    if _arrays_settled(expected, actual, num_elements, msg, line):
        return
    assert expected is not None and actual is not None
    exp_bytes = bytes(expected)
    act_bytes = bytes(actual)
    total = length * num_elements
    if len(act_bytes) < total:
        raise ValueError(f"actual holds fewer than {total} bytes")
    needed = length if mode is ArrayMode.ARRAY_TO_VAL else total
    if len(exp_bytes) < needed:
        raise ValueError(f"expected holds fewer than {needed} bytes")

    for element in range(num_elements):
        act_base = element * length
        exp_base = 0 if mode is ArrayMode.ARRAY_TO_VAL else act_base
        for offset in range(length):
            exp = exp_bytes[exp_base + offset]
            act = act_bytes[act_base + offset]
            if exp != act:
                detail = STR_MEMORY
                if num_elements > 1:
                    detail += STR_ELEMENT + format_unsigned(element)
                detail += (
                    STR_BYTE
                    + format_unsigned(offset)
                    + STR_EXPECTED
                    + format_by_style(exp, DisplayStyle.HEX8)
                    + STR_WAS
                    + format_by_style(act, DisplayStyle.HEX8)
                )
                raise TestFailed(detail, msg, line)