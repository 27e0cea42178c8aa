#!/usr/bin/env python3
"""
Crontab Expander - Field Parser Property Tests
字段解析器属性测试

使用hypothesis进行属性测试，验证字段解析器的正确性。
每个属性测试配置运行100次迭代。
"""

import sys
import os

# 确保可以导入模块
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

import pytest
from hypothesis import given, strategies as st, settings, assume

from field_parser import FieldParser, expand_field, parse_value
from models import FieldSpec, DEFAULT_FIELD_SPECS
from exceptions import (
    FieldValueError,
    NumberFormatError,
    RangeOrderError,
    RangeViolationError,
    StepValueError,
)


# ============================================================================
# Custom Strategies
# ============================================================================

labels = st.sampled_from([spec.label for spec in DEFAULT_FIELD_SPECS])
max_values = st.integers(min_value=0, max_value=100)


@st.composite
def bounded_range_strategy(draw):
    """生成 (max_value, start, end)，满足 0 <= start <= end <= max_value"""
    max_value = draw(max_values)
    start = draw(st.integers(min_value=0, max_value=max_value))
    end = draw(st.integers(min_value=start, max_value=max_value))
    return max_value, start, end


@st.composite
def in_bounds_list_strategy(draw):
    """生成 (max_value, values)，所有值都在范围内"""
    max_value = draw(max_values)
    values = draw(st.lists(
        st.integers(min_value=0, max_value=max_value),
        min_size=1,
        max_size=10
    ))
    return max_value, values


def expected_line(label, values):
    return f"{label}:" + "".join(f" {v}" for v in values)


# ============================================================================
# Wildcard
# ============================================================================

@settings(max_examples=100)
@given(label=labels, max_value=max_values)
def test_wildcard_expands_to_every_value(label: str, max_value: int):
    result = parse_value(label, "*", max_value)
    assert result == expected_line(label, range(max_value + 1))


def test_wildcard_for_month_and_weekday():
    assert parse_value("Month", "*", 11) == "Month: 0 1 2 3 4 5 6 7 8 9 10 11"
    assert parse_value("Day of the week", "*", 6) == "Day of the week: 0 1 2 3 4 5 6"


# ============================================================================
# Lists and single values
# ============================================================================

@settings(max_examples=100)
@given(label=labels, data=in_bounds_list_strategy())
def test_list_preserves_order_and_duplicates(label: str, data):
    max_value, values = data
    expression = ",".join(str(v) for v in values)
    assert parse_value(label, expression, max_value) == expected_line(label, values)


@pytest.mark.parametrize("label, expression, max_value, expected", [
    ("Minute", "19", 59, "Minute: 19"),
    ("Hour", "12", 23, "Hour: 12"),
    ("Day of the month", "28", 30, "Day of the month: 28"),
    ("Month", "2", 11, "Month: 2"),
    ("Day of the week", "6", 6, "Day of the week: 6"),
    ("Minute", "7,10", 59, "Minute: 7 10"),
    ("Hour", "1,12,22", 23, "Hour: 1 12 22"),
    ("Month", "2,3,4,11", 11, "Month: 2 3 4 11"),
    ("Day of the week", "0,1,2,5,6", 6, "Day of the week: 0 1 2 5 6"),
    ("Minute", "5,5", 59, "Minute: 5 5"),
    ("Minute", "+5", 59, "Minute: 5"),
])
def test_list_examples(label, expression, max_value, expected):
    assert parse_value(label, expression, max_value) == expected


@settings(max_examples=100)
@given(label=labels, max_value=max_values, data=st.data())
def test_list_value_above_bound_is_rejected(label: str, max_value: int, data):
    bad = data.draw(st.integers(min_value=max_value + 1, max_value=max_value + 1000))
    good = data.draw(st.lists(st.integers(min_value=0, max_value=max_value), max_size=3))
    expression = ",".join(str(v) for v in good + [bad])

    with pytest.raises(RangeViolationError) as exc_info:
        parse_value(label, expression, max_value)

    assert exc_info.value.message == f"{label} value must be between 0-{max_value}"
    assert exc_info.value.value == bad


def test_single_value_above_hour_bound():
    with pytest.raises(RangeViolationError) as exc_info:
        parse_value("Hour", "28", 23)
    assert exc_info.value.message == "Hour value must be between 0-23"


# ============================================================================
# Ranges
# ============================================================================

@settings(max_examples=100)
@given(label=labels, data=bounded_range_strategy())
def test_range_is_contiguous_and_inclusive(label: str, data):
    max_value, start, end = data
    result = parse_value(label, f"{start}-{end}", max_value)
    assert result == expected_line(label, range(start, end + 1))


@settings(max_examples=100)
@given(label=labels, data=bounded_range_strategy(), step=st.integers(min_value=1, max_value=30))
def test_stepped_range_spacing(label: str, data, step: int):
    max_value, start, end = data
    expansion = expand_field(FieldSpec(label, max_value), f"{start}-{end}/{step}")

    assert expansion.ok
    assert expansion.values[0] == start
    assert all(v <= end for v in expansion.values)
    assert all(b - a == step for a, b in zip(expansion.values, expansion.values[1:]))
    assert expansion.values[-1] + step > end


@pytest.mark.parametrize("label, expression, max_value, expected", [
    ("Minute", "7-10", 59, "Minute: 7 8 9 10"),
    ("Hour", "1-2", 23, "Hour: 1 2"),
    ("Day of the month", "20-28", 30, "Day of the month: 20 21 22 23 24 25 26 27 28"),
    ("Month", "2-4", 11, "Month: 2 3 4"),
    ("Day of the week", "0-6", 6, "Day of the week: 0 1 2 3 4 5 6"),
    ("Minute", "7-10/2", 59, "Minute: 7 9"),
    ("Hour", "1-2/3", 23, "Hour: 1"),
    ("Day of the month", "20-28/4", 30, "Day of the month: 20 24 28"),
    ("Month", "2-4/2", 11, "Month: 2 4"),
    ("Day of the week", "0-6/5", 6, "Day of the week: 0 5"),
    ("Minute", "5-5", 59, "Minute: 5"),
])
def test_range_examples(label, expression, max_value, expected):
    assert parse_value(label, expression, max_value) == expected


@settings(max_examples=100)
@given(label=labels, max_value=max_values, data=st.data())
def test_backwards_range_is_rejected(label: str, max_value: int, data):
    assume(max_value >= 1)
    end = data.draw(st.integers(min_value=0, max_value=max_value - 1))
    start = data.draw(st.integers(min_value=end + 1, max_value=max_value))

    with pytest.raises(RangeOrderError) as exc_info:
        parse_value(label, f"{start}-{end}", max_value)

    assert exc_info.value.message == (
        f"{label} value: Beginning of range cannot be larger than the ending"
    )


def test_backwards_hour_range():
    with pytest.raises(RangeOrderError):
        parse_value("Hour", "3-1", 23)


@pytest.mark.parametrize("expression", ["0-60", "60-61", "0-60/5", "70-1"])
def test_range_endpoint_out_of_bounds(expression):
    with pytest.raises(RangeViolationError) as exc_info:
        parse_value("Minute", expression, 59)
    assert exc_info.value.message == "Minute value must be between 0-59"


@settings(max_examples=100)
@given(label=labels, max_value=max_values, value=st.integers(min_value=1, max_value=1000))
def test_negative_value_is_below_lower_bound(label: str, max_value: int, value: int):
    with pytest.raises(RangeViolationError) as exc_info:
        parse_value(label, f"-{value}", max_value)

    assert exc_info.value.message == f"{label} value must be between 0-{max_value}"
    assert exc_info.value.value == -value


@pytest.mark.parametrize("expression", ["-5", "-5/2", "-1-5", "1,-5", "0-5,7", "1,3-5"])
def test_negative_or_mixed_range_is_out_of_bounds(expression):
    with pytest.raises(RangeViolationError) as exc_info:
        parse_value("Minute", expression, 59)
    assert exc_info.value.message == "Minute value must be between 0-59"


# ============================================================================
# Steps
# ============================================================================

@settings(max_examples=100)
@given(step=st.integers(min_value=-50, max_value=0))
def test_non_positive_step_is_rejected(step: int):
    with pytest.raises(StepValueError) as exc_info:
        parse_value("Minute", f"0-10/{step}", 59)
    assert exc_info.value.message == "Minute value: Step must be a positive integer"
    assert exc_info.value.step == step


def test_bound_and_order_errors_take_precedence_over_step():
    with pytest.raises(RangeViolationError):
        parse_value("Minute", "0-70/0", 59)
    with pytest.raises(RangeOrderError):
        parse_value("Minute", "5-1/0", 59)


# ============================================================================
# Malformed integers
# ============================================================================

@pytest.mark.parametrize("expression, token", [
    ("a", "a"),
    ("1,,2", ""),
    ("1,2,", ""),
    ("*/5", "*/5"),
    ("1.5", "1.5"),
    (" 7", " 7"),
    ("1_0", "1_0"),
    ("٣", "٣"),
    ("5-", ""),
    ("-", ""),
    ("1-2-3", "2-3"),
    ("1-5/", ""),
    ("1-5/x", "x"),
    ("a-5", "a"),
])
def test_malformed_integer_is_rejected(expression, token):
    with pytest.raises(NumberFormatError) as exc_info:
        parse_value("Minute", expression, 59)
    assert exc_info.value.token == token
    assert exc_info.value.message == f"Minute value: '{token}' is not a valid integer"


# ============================================================================
# Result form
# ============================================================================

def test_expand_field_carries_error_instead_of_raising():
    expansion = expand_field(FieldSpec("Minute", 59), "67")

    assert not expansion.ok
    assert expansion.values == []
    assert isinstance(expansion.error, FieldValueError)
    assert expansion.error.message == "Minute value must be between 0-59"


def test_expand_field_success_has_no_error():
    expansion = FieldParser.expand(FieldSpec("Hour", 23), "1,2")

    assert expansion.ok
    assert expansion.error is None
    assert expansion.format() == "Hour: 1 2"
    assert expansion.to_dict() == {"label": "Hour", "expression": "1,2", "values": [1, 2]}


def test_error_str_includes_field_context():
    with pytest.raises(RangeViolationError) as exc_info:
        parse_value("Hour", "24", 23)
    assert str(exc_info.value) == "[Hour] Hour value must be between 0-23"
