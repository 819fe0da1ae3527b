import math

import pytest

from probity.floats import (
    assert_equal_float_array,
    assert_float_special,
    assert_floats_within,
    floats_within,
)
from probity.runner import TestFailed
from probity.styles import ArrayMode, FloatTrait

POINTLESS = " You Asked Me To Compare Nothing, Which Was Pointless."


def test_floats_within_inside_and_outside():
    assert floats_within(0.5, 1.0, 1.25) is True
    assert floats_within(0.5, 1.0, 1.75) is False


def test_floats_within_negative_delta_uses_magnitude():
    assert floats_within(-0.5, 1.0, 1.25) is True


def test_floats_within_infinities():
    assert floats_within(0.0, math.inf, math.inf) is True
    assert floats_within(0.0, -math.inf, -math.inf) is True
    assert floats_within(1e30, math.inf, -math.inf) is False
    assert floats_within(1e30, 1.0, math.inf) is False


def test_floats_within_nan_handling():
    assert floats_within(1.0, math.nan, math.nan) is True
    assert floats_within(1.0, math.nan, math.nan, nan_equal=False) is False
    assert floats_within(1.0, math.nan, 1.0) is False


def test_assert_floats_within_passes_and_fails():
    assert_floats_within(0.5, 2.0, 2.25)
    with pytest.raises(TestFailed) as info:
        assert_floats_within(0.5, 2.0, 3.0, "Custom Message.", 12)
    assert info.value.detail.startswith(" Expected ")
    assert " Was " in info.value.detail
    assert info.value.msg == "Custom Message."
    assert info.value.line == 12


def test_single_precision_hides_tiny_difference():
    assert_floats_within(0.0, 1.0, 1.00000001)
    with pytest.raises(TestFailed):
        assert_floats_within(0.0, 1.0, 1.00000001, double=True)


def test_equal_float_array_passes():
    values = [1.5, -2.25, 1000.0]
    assert_equal_float_array(values, list(values), 3)
    assert_equal_float_array(values, [1.5, -2.25, 999.0], 2)


def test_equal_float_array_reports_element():
    with pytest.raises(TestFailed) as info:
        assert_equal_float_array([1.0, 2.0, 3.0], [1.0, 2.0, 4.0], 3)
    assert info.value.detail.startswith(" Element 2 Expected ")


def test_equal_float_array_pointless_and_nulls():
    with pytest.raises(TestFailed) as info:
        assert_equal_float_array([1.0], [1.0], 0)
    assert info.value.detail == POINTLESS
    with pytest.raises(TestFailed) as info:
        assert_equal_float_array(None, [1.0], 1)
    assert info.value.detail == " Expected pointer to be NULL"
    with pytest.raises(TestFailed) as info:
        assert_equal_float_array([1.0], None, 1)
    assert info.value.detail == " Actual pointer was NULL"


def test_equal_float_array_same_object_skips_compare():
    values = [math.nan, 1.0]
    assert_equal_float_array(values, values, 2) is None
    with pytest.raises(TestFailed):
        assert_equal_float_array([0.0, 1.0], values, 2)


def test_equal_float_array_to_value():
    assert_equal_float_array(3.5, [3.5, 3.5, 3.5], 3, ArrayMode.ARRAY_TO_VAL)
    with pytest.raises(TestFailed) as info:
        assert_equal_float_array(3.5, [3.5, 4.5], 2, ArrayMode.ARRAY_TO_VAL)
    assert info.value.detail.startswith(" Element 1")


def test_equal_float_array_double_precision():
    assert_equal_float_array([1.0], [1.0 + 1e-13], 1, double=True)
    with pytest.raises(TestFailed):
        assert_equal_float_array([1.0], [1.0 + 1e-9], 1, double=True)


@pytest.mark.parametrize(
    "value, trait",
    [
        (math.inf, FloatTrait.IS_INF),
        (-math.inf, FloatTrait.IS_NEG_INF),
        (math.nan, FloatTrait.IS_NAN),
        (1.0, FloatTrait.IS_DET),
        (1.0, FloatTrait.IS_NOT_INF),
        (math.inf, FloatTrait.IS_NOT_NEG_INF),
        (1.0, FloatTrait.IS_NOT_NAN),
        (math.nan, FloatTrait.IS_NOT_DET),
    ],
)
def test_float_special_holds(value, trait):
    assert assert_float_special(value, trait) is None


@pytest.mark.parametrize(
    "value, trait, name",
    [
        (1.0, FloatTrait.IS_INF, "Infinity"),
        (math.inf, FloatTrait.IS_NEG_INF, "Negative Infinity"),
        (2.0, FloatTrait.IS_NAN, "NaN"),
        (math.nan, FloatTrait.IS_DET, "Determinate"),
    ],
)
def test_float_special_missing_trait(value, trait, name):
    with pytest.raises(TestFailed) as info:
        assert_float_special(value, trait)
    assert info.value.detail.startswith(" Expected " + name + " Was ")


def test_float_special_unwanted_trait_says_not():
    with pytest.raises(TestFailed) as info:
        assert_float_special(math.nan, FloatTrait.IS_NOT_NAN, double=True)
    assert info.value.detail == " Expected Not NaN Was nan"


def test_float_special_invalid_trait_always_fails():
    with pytest.raises(TestFailed) as info:
        assert_float_special(1.0, FloatTrait.INVALID)
    assert "Invalid Float Trait" in info.value.detail