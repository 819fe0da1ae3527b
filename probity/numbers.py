"""Assertions on integers, bit masks and integer arrays."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Optional, Union

from probity.formatting import format_by_style, format_mask, format_unsigned
from probity.runner import TestFailed
from probity.styles import ArrayMode, Comparison, DisplayStyle

STR_EXPECTED = " Expected "
STR_WAS = " Was "
STR_GT = " to be greater than "
STR_LT = " to be less than "
STR_OR_EQUAL = "or equal to "
STR_NOT_EQUAL = " to be not equal to "
STR_ELEMENT = " Element "
STR_DELTA = " Values Not Within Delta "
STR_POINTLESS = " You Asked Me To Compare Nothing, Which Was Pointless."
STR_NULL_EXPECTED = " Expected pointer to be NULL"
STR_NULL_ACTUAL = " Actual pointer was NULL"

_UINT_MASK = (1 << 64) - 1

IntArray = Optional[Union[Sequence[int], int]]


def _width(style: DisplayStyle) -> int:
    width = style.width()
    return width if width in (1, 2, 8) else 4


def _normalize(value: int, style: DisplayStyle) -> int:
    """Reinterpret ``value`` as an integer of the style's width and signedness."""
    bits = _width(style) * 8
    result = int(value) & ((1 << bits) - 1)
    if style.is_signed() and result >= 1 << (bits - 1):
        result -= 1 << bits
    return result


def _show(value: int, style: DisplayStyle) -> str:
    return format_by_style(value, style)


def _arrays_settled(
    expected: IntArray,
    actual: Optional[Sequence[int]],
    num_elements: int,
    msg: Optional[str],
    line: Optional[int],
) -> bool:
    """Raise for pointless or NULL arrays; True if nothing is left to compare."""
    if num_elements == 0:
        raise TestFailed(STR_POINTLESS, msg, line)
    if expected is actual:
        return True
    if expected is None:
        raise TestFailed(STR_NULL_EXPECTED, msg, line)
    if actual is None:
        raise TestFailed(STR_NULL_ACTUAL, msg, line)
    return False


def _element_pairs(
    expected: Union[Sequence[int], int],
    actual: Sequence[int],
    num_elements: int,
    mode: ArrayMode,
    style: DisplayStyle,
) -> Iterator[tuple[int, int, int]]:
    if len(actual) < num_elements:
        raise ValueError(f"actual holds fewer than {num_elements} elements")
    if mode is ArrayMode.ARRAY_TO_ARRAY:
        if not isinstance(expected, Sequence):
            raise TypeError("expected must be a sequence when comparing array to array")
        if len(expected) < num_elements:
            raise ValueError(f"expected holds fewer than {num_elements} elements")
        expected_values: Sequence[int] = expected
    else:
        single = expected[0] if isinstance(expected, Sequence) else expected
        expected_values = [single] * num_elements
    for index, (exp, act) in enumerate(zip(expected_values, actual[:num_elements])):
        yield index, _normalize(exp, style), _normalize(act, style)


def assert_bits(
    mask: int,
    expected: int,
    actual: int,
    msg: Optional[str] = None,
    line: Optional[int] = None,
) -> None:
    """Check that ``expected`` and ``actual`` agree on every bit set in ``mask``."""
    if (mask & expected) != (mask & actual):
        raise TestFailed(
            STR_EXPECTED
            + format_mask(mask, expected)
            + STR_WAS
            + format_mask(mask, actual),
            msg,
            line,
        )


def assert_equal_number(
    expected: int,
    actual: int,
    style: Union[DisplayStyle, int] = DisplayStyle.INT,
    msg: Optional[str] = None,
    line: Optional[int] = None,
) -> None:
    """Check that two integers are equal when read in ``style``."""
    style = DisplayStyle(style)
    exp = _normalize(expected, style)
    act = _normalize(actual, style)
    if exp != act:
        raise TestFailed(
            STR_EXPECTED + _show(exp, style) + STR_WAS + _show(act, style), msg, line
        )


def assert_compare(
    threshold: int,
    actual: int,
    compare: Union[Comparison, int],
    style: Union[DisplayStyle, int] = DisplayStyle.INT,
    msg: Optional[str] = None,
    line: Optional[int] = None,
) -> None:
    """Check that ``actual`` stands in relation ``compare`` to ``threshold``."""
    style = DisplayStyle(style)
    compare = Comparison(compare)
    thr = _normalize(threshold, style)
    act = _normalize(actual, style)

    if thr == act and compare & Comparison.EQUAL_TO:
        return
    failed = thr == act
    if act > thr and compare & Comparison.SMALLER_THAN:
        failed = True
    if act < thr and compare & Comparison.GREATER_THAN:
        failed = True
    if not failed:
        return

    detail = STR_EXPECTED + _show(act, style)
    if compare & Comparison.GREATER_THAN:
        detail += STR_GT
    if compare & Comparison.SMALLER_THAN:
        detail += STR_LT
    if compare & Comparison.EQUAL_TO:
        detail += STR_OR_EQUAL
    if compare == Comparison.NOT_EQUAL:
        detail += STR_NOT_EQUAL
    detail += _show(thr, style)
    raise TestFailed(detail, msg, line)


def assert_within(
    delta: int,
    expected: int,
    actual: int,
    style: Union[DisplayStyle, int] = DisplayStyle.INT,
    msg: Optional[str] = None,
    line: Optional[int] = None,
) -> None:
    """Check that ``actual`` differs from ``expected`` by at most ``delta``."""
    style = DisplayStyle(style)
    delta = int(delta) & _UINT_MASK
    exp = _normalize(expected, style)
    act = _normalize(actual, style)
    if abs(act - exp) > delta:
        raise TestFailed(
            STR_DELTA
            + _show(delta, style)
            + STR_EXPECTED
            + _show(exp, style)
            + STR_WAS
            + _show(act, style),
            msg,
            line,
        )


def assert_equal_int_array(
    expected: IntArray,
    actual: Optional[Sequence[int]],
    num_elements: int,
    style: Union[DisplayStyle, int] = DisplayStyle.INT,
    mode: Union[ArrayMode, int] = ArrayMode.ARRAY_TO_ARRAY,
    msg: Optional[str] = None,
    line: Optional[int] = None,
) -> None:
    """Check the first ``num_elements`` of ``actual`` against an array or one value."""
    style = DisplayStyle(style)
    mode = ArrayMode(mode)
    if _arrays_settled(expected, actual, num_elements, msg, line):
        return
    assert actual is not None and expected is not None
    for index, exp, act in _element_pairs(expected, actual, num_elements, mode, style):
        if exp != act:
            raise TestFailed(
                STR_ELEMENT
                + format_unsigned(index)
                + STR_EXPECTED
                + _show(exp, style)
                + STR_WAS
                + _show(act, style),
                msg,
                line,
            )


def assert_array_within(
    delta: int,
    expected: IntArray,
    actual: Optional[Sequence[int]],
    num_elements: int,
    style: Union[DisplayStyle, int] = DisplayStyle.INT,
    mode: Union[ArrayMode, int] = ArrayMode.ARRAY_TO_ARRAY,
    msg: Optional[str] = None,
    line: Optional[int] = None,
) -> None:
    """Check that each element of ``actual`` is within ``delta`` of its expected value."""
    style = DisplayStyle(style)
    mode = ArrayMode(mode)
    delta = int(delta) & _UINT_MASK
    if _arrays_settled(expected, actual, num_elements, msg, line):
        return
    assert actual is not None and expected is not None
    for index, exp, act in _element_pairs(expected, actual, num_elements, mode, style):
        if abs(act - exp) > delta:
            raise TestFailed(
                STR_DELTA
                + _show(delta, style)
                + STR_ELEMENT
                + format_unsigned(index)
                + STR_EXPECTED
                + _show(exp, style)
                + STR_WAS
                + _show(act, style),
                msg,
                line,
            )