"""Assertions on floating-point values, float arrays and special float traits."""

from __future__ import annotations

import math
import struct
from collections.abc import Iterator, Sequence
from typing import Optional, Union

from probity.formatting import format_float, format_unsigned
from probity.numbers import STR_ELEMENT, STR_EXPECTED, STR_WAS, _arrays_settled
from probity.runner import TestFailed
from probity.styles import ArrayMode, FloatTrait

FLOAT_PRECISION = 0.00001
DOUBLE_PRECISION = 1e-12

STR_NOT = "Not "
STR_INF = "Infinity"
STR_NEG_INF = "Negative Infinity"
STR_NAN = "NaN"
STR_DET = "Determinate"
STR_INVALID_TRAIT = "Invalid Float Trait"

_TRAIT_NAMES = (STR_INF, STR_NEG_INF, STR_NAN, STR_DET)

FloatArray = Optional[Union[Sequence[float], float]]


def _to_single(value: float) -> float:
    """Round a value to the nearest single-precision float."""
    value = float(value)
    if math.isnan(value) or math.isinf(value):
        return value
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _coerce(value: float, double: bool) -> float:
    return float(value) if double else _to_single(value)


def _expected_was(expected: float, actual: float, double: bool) -> str:
    return (
        STR_EXPECTED
        + format_float(expected, double)
        + STR_WAS
        + format_float(actual, double)
    )


def floats_within(
    delta: float, expected: float, actual: float, nan_equal: bool = True
) -> bool:
    """True if ``actual`` is within ``delta`` of ``expected``.

    Infinities of the same sign match, and so do two NaNs when ``nan_equal``.
    """
    expected = float(expected)
    actual = float(actual)
    if (
        math.isinf(expected)
        and math.isinf(actual)
        and (expected < 0) == (actual < 0)
    ):
        return True
    if nan_equal and math.isnan(expected) and math.isnan(actual):
        return True
    diff = abs(actual - expected)
    delta = abs(float(delta))
    return not (math.isnan(diff) or math.isinf(diff) or diff > delta)


def assert_floats_within(
    delta: float,
    expected: float,
    actual: float,
    msg: Optional[str] = None,
    line: Optional[int] = None,
    double: bool = False,
) -> None:
    """Check that two floats differ by at most ``delta``."""
    exp = _coerce(expected, double)
    act = _coerce(actual, double)
    if not floats_within(_coerce(delta, double), exp, act):
        raise TestFailed(_expected_was(exp, act, double), msg, line)


def _float_pairs(
    expected: Union[Sequence[float], float],
    actual: Sequence[float],
    num_elements: int,
    mode: ArrayMode,
) -> Iterator[tuple[int, float, float]]:
    if len(actual) < num_elements:
        raise ValueError(f"actual holds fewer than {num_elements} elements")
    if mode is ArrayMode.ARRAY_TO_ARRAY:
        if not isinstance(expected, Sequence):
            raise TypeError("expected must be a sequence when comparing array to array")
        if len(expected) < num_elements:
            raise ValueError(f"expected holds fewer than {num_elements} elements")
        expected_values: Sequence[float] = expected
    else:
        single = expected[0] if isinstance(expected, Sequence) else expected
        expected_values = [single] * num_elements
    yield from zip(range(num_elements), expected_values, actual)


def assert_equal_float_array(
    expected: FloatArray,
    actual: Optional[Sequence[float]],
    num_elements: int,
    mode: Union[ArrayMode, int] = ArrayMode.ARRAY_TO_ARRAY,
    msg: Optional[str] = None,
    line: Optional[int] = None,
    double: bool = False,
) -> None:
    """Check each element against its expected value within a relative precision."""
    mode = ArrayMode(mode)
    if _arrays_settled(expected, actual, num_elements, msg, line):
        return
    assert expected is not None and actual is not None
    precision = DOUBLE_PRECISION if double else FLOAT_PRECISION
    for index, raw_exp, raw_act in _float_pairs(expected, actual, num_elements, mode):
        exp = _coerce(raw_exp, double)
        act = _coerce(raw_act, double)
        delta = _coerce(exp * precision, double)
        if not floats_within(delta, exp, act):
            raise TestFailed(
                STR_ELEMENT + format_unsigned(index) + _expected_was(exp, act, double),
                msg,
                line,
            )


def assert_float_special(
    actual: float,
    trait: Union[FloatTrait, int],
    msg: Optional[str] = None,
    line: Optional[int] = None,
    double: bool = False,
) -> None:
    """Check that ``actual`` has (or lacks) a special property such as NaN or infinity."""
    code = int(trait)
    should_be_trait = bool(code & 1)
    trait_name: str
    value = _coerce(actual, double)

    if code in (FloatTrait.IS_INF, FloatTrait.IS_NOT_INF):
        is_trait = math.isinf(value) and value > 0
    elif code in (FloatTrait.IS_NEG_INF, FloatTrait.IS_NOT_NEG_INF):
        is_trait = math.isinf(value) and value < 0
    elif code in (FloatTrait.IS_NAN, FloatTrait.IS_NOT_NAN):
        is_trait = math.isnan(value)
    elif code in (FloatTrait.IS_DET, FloatTrait.IS_NOT_DET):
        is_trait = not math.isinf(value) and not math.isnan(value)
    else:
        is_trait = not should_be_trait
        trait_name = STR_INVALID_TRAIT
        code = -1

    if code >= 0:
        trait_name = _TRAIT_NAMES[code >> 1]

    if is_trait != should_be_trait:
        detail = STR_EXPECTED
        if not should_be_trait:
            detail += STR_NOT
        detail += trait_name + STR_WAS + format_float(value, double)
        raise TestFailed(detail, msg, line)