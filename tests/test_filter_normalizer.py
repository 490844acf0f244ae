"""
Tests for filter normalization and parsing.
"""

from src.map_filter_editor.core.settings import DEFAULT_FILTER
from src.map_filter_editor.models.filter_state import (
    CombinatorFilter,
    ExpressionFilter,
    MalformedFilter,
)
from src.map_filter_editor.tools.filter_normalizer import normalize, parse_filter


def test_absent_filter_defaults_to_all():
    assert normalize(None) == ["all"]
    assert normalize() == ["all"]


def test_default_filter_is_not_shared():
    result = normalize()
    result.append(["==", "a", 1])
    assert DEFAULT_FILTER == ["all"]
    assert normalize() == ["all"]


def test_single_condition_is_wrapped_in_all():
    assert normalize(["==", "a", 1]) == ["all", ["==", "a", 1]]


def test_combinator_is_kept():
    f1 = ["==", "a", 1]
    f2 = ["has", "b"]
    original = ["any", f1, f2]

    result = normalize(original)

    assert result == original
    assert result is not original
    assert result[1] is not f1


def test_every_combining_operator_is_recognized():
    for op in ["all", "any", "none"]:
        assert normalize([op, ["has", "a"]]) == [op, ["has", "a"]]


def test_input_is_not_mutated():
    original = ["==", "a", 1]
    normalize(original)
    assert original == ["==", "a", 1]


def test_non_array_values_pass_through():
    assert normalize(True) is True
    assert normalize("class") == "class"
    assert normalize({"a": 1}) == {"a": 1}


def test_empty_array_is_wrapped():
    assert normalize([]) == ["all", []]


def test_expression_is_wrapped_like_any_other_array():
    assert normalize(["step", ["get", "x"], 0, 1]) == ["all", ["step", ["get", "x"], 0, 1]]


def test_parse_filter_returns_combinator_for_arrays():
    parsed = parse_filter(["==", "a", 1])
    assert parsed == CombinatorFilter(operator="all", operands=[["==", "a", 1]])
    assert parsed.to_json() == ["all", ["==", "a", 1]]


def test_parse_filter_absent_value():
    assert parse_filter(None) == CombinatorFilter(operator="all", operands=[])


def test_parse_filter_booleans_are_expressions():
    assert parse_filter(False) == ExpressionFilter(value=False)


def test_parse_filter_other_values_are_malformed():
    parsed = parse_filter("class")
    assert isinstance(parsed, MalformedFilter)
    assert parsed.to_json() == "class"
