"""
Tests for filter classification.
"""

from src.map_filter_editor.models.filter_state import FilterClassification
from src.map_filter_editor.tools.filter_classifier import (
    FilterClassifier,
    classify,
    filter_errors,
    has_combining_operator,
    has_nested_combining_operator,
    is_simple,
    operand_errors,
)


def test_flat_legacy_combinator_is_simple():
    assert is_simple(["all", ["==", "a", 1], ["==", "b", 2]])


def test_nested_combinator_is_simple_but_nested(nested_filter):
    assert is_simple(nested_filter)
    assert has_nested_combining_operator(nested_filter)
    assert classify(nested_filter) == FilterClassification.NESTED_UNSUPPORTED


def test_expression_is_not_simple():
    assert not is_simple(["step", ["get", "x"], 0, 1])


def test_combinator_over_expressions_is_not_simple():
    assert not is_simple(["all", ["==", ["get", "a"], 1]])


def test_is_simple_requires_a_combinator():
    assert not is_simple(["==", "a", 1])
    assert not is_simple(None)
    assert not is_simple(True)
    assert not is_simple([])


def test_none_combinator_is_simple():
    assert is_simple(["none", ["has", "a"], ["in", "class", "park", "forest"]])


def test_has_combining_operator():
    assert has_combining_operator(["all"])
    assert has_combining_operator(["none", ["has", "a"]])
    assert not has_combining_operator(["==", "a", 1])
    assert not has_combining_operator("all")
    assert not has_combining_operator(None)
    assert not has_combining_operator([])
    assert not has_combining_operator({"all": []})


def test_has_nested_combining_operator():
    assert not has_nested_combining_operator(["all", ["==", "a", 1]])
    assert not has_nested_combining_operator(["==", "a", 1])
    assert has_nested_combining_operator(["any", ["==", "a", 1], ["none", ["has", "b"]]])


def test_classify_simple_values(simple_filter):
    assert classify(simple_filter) == FilterClassification.SIMPLE
    assert classify(None) == FilterClassification.SIMPLE
    assert classify(["==", "a", 1]) == FilterClassification.SIMPLE


def test_classify_expressions(expression_filter):
    assert classify(expression_filter) == FilterClassification.EXPRESSION
    assert classify(True) == FilterClassification.EXPRESSION
    assert classify(["step", ["get", "x"], 0, 1]) == FilterClassification.EXPRESSION


def test_probe_uses_none_operator(recording_validator):
    classifier = FilterClassifier(validator=recording_validator)

    assert classifier.is_simple(["any", ["==", "a", 1]])

    document = recording_validator.documents[0]
    assert document["version"] == 8
    assert document["layers"][0]["filter"] == ["none", ["==", "a", 1]]


def test_validator_errors_make_filter_not_simple(failing_validator):
    classifier = FilterClassifier(validator=failing_validator)

    assert not classifier.is_simple(["all", ["==", "a", 1]])
    assert classifier.classify(["all", ["==", "a", 1]]) == FilterClassification.EXPRESSION


def test_validator_is_not_called_without_combinator(recording_validator):
    classifier = FilterClassifier(validator=recording_validator)

    assert not classifier.is_simple(["==", "a", 1])
    assert recording_validator.documents == []


def test_operand_errors_keyed_by_position():
    errors = operand_errors(["all", ["==", "a", 1], ["==", "b"]])
    assert errors == {2: 'filter array for operator "==" must have 3 elements'}


def test_operand_errors_for_nested_values():
    errors = operand_errors(["all", ["==", "a", {"x": 1}]])
    assert errors == {1: "string, number, or boolean expected, object found"}


def test_operand_errors_empty_for_valid_filter(simple_filter, classifier):
    assert classifier.operand_errors(simple_filter) == {}


def test_filter_errors_keep_raw_paths():
    errors = filter_errors(["==", "a", {"x": 1}])
    assert errors == {"filter[2]": "string, number, or boolean expected, object found"}


def test_filter_errors_for_nested_condition():
    errors = filter_errors(["any", ["none", ["has", 1]]])
    assert errors == {"filter[1][1][1]": "string expected, number found"}


def test_filter_errors_empty_for_absent_filter(classifier):
    assert classifier.filter_errors(None) == {}


def test_operand_errors_on_whole_filter():
    errors = operand_errors("class")
    assert errors == {0: "array expected, string found"}
