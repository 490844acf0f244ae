"""
Tests for combinator edits.
"""

import pytest

from src.map_filter_editor.core.exceptions import FilterIndexError, UnsupportedOperatorError
from src.map_filter_editor.tools.filter_manager import (
    add_sub_filter,
    delete_sub_filter,
    set_operator,
    set_sub_filter,
)


def test_set_operator(simple_filter):
    result = set_operator(simple_filter, "any")
    assert result == ["any", ["==", "class", "park"], ["!=", "rank", 2]]
    assert simple_filter[0] == "all"


def test_set_operator_normalizes_first():
    assert set_operator(["==", "a", 1], "none") == ["none", ["==", "a", 1]]
    assert set_operator(None, "any") == ["any"]


def test_set_operator_rejects_unknown_operator(simple_filter):
    with pytest.raises(UnsupportedOperatorError):
        set_operator(simple_filter, "==")

    with pytest.raises(ValueError):
        set_operator(simple_filter, "xor")


def test_set_operator_on_non_array():
    with pytest.raises(FilterIndexError):
        set_operator(True, "all")


def test_set_sub_filter(simple_filter):
    result = set_sub_filter(simple_filter, 2, ["has", "rank"])
    assert result == ["all", ["==", "class", "park"], ["has", "rank"]]
    assert simple_filter[2] == ["!=", "rank", 2]


def test_set_sub_filter_copies_value():
    sub_filter = ["has", "a"]
    result = set_sub_filter(["all", ["has", "b"]], 1, sub_filter)
    sub_filter.append("extra")
    assert result == ["all", ["has", "a"]]


@pytest.mark.parametrize("index", [0, 3, -1, 10])
def test_set_sub_filter_out_of_range(simple_filter, index):
    with pytest.raises(FilterIndexError):
        set_sub_filter(simple_filter, index, ["has", "a"])


def test_index_errors_are_index_errors(simple_filter):
    with pytest.raises(IndexError):
        delete_sub_filter(simple_filter, 5)


def test_boolean_index_is_rejected(simple_filter):
    with pytest.raises(FilterIndexError):
        delete_sub_filter(simple_filter, True)


def test_delete_sub_filter(simple_filter):
    assert delete_sub_filter(simple_filter, 1) == ["all", ["!=", "rank", 2]]
    assert len(simple_filter) == 3


def test_delete_last_sub_filter():
    assert delete_sub_filter(["==", "a", 1], 1) == ["all"]


def test_delete_from_empty_combinator():
    with pytest.raises(FilterIndexError):
        delete_sub_filter(["all"], 1)


def test_add_sub_filter_appends_default_condition():
    assert add_sub_filter(["all"]) == ["all", ["==", "name", ""]]
    assert add_sub_filter(None) == ["all", ["==", "name", ""]]


def test_add_sub_filter_with_value(simple_filter):
    result = add_sub_filter(simple_filter, ["has", "name"])
    assert result[-1] == ["has", "name"]
    assert len(simple_filter) == 3


def test_added_default_conditions_are_independent():
    result = add_sub_filter(add_sub_filter(["all"]))
    result[1][2] = "park"
    assert result[2] == ["==", "name", ""]
    assert add_sub_filter(["all"]) == ["all", ["==", "name", ""]]


def test_add_then_delete_restores_filter(simple_filter):
    added = add_sub_filter(simple_filter)
    assert delete_sub_filter(added, len(added) - 1) == simple_filter
