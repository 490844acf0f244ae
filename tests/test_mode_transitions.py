"""
Tests for editor mode transitions.
"""

from src.map_filter_editor.editor.mode_transitions import (
    mode_for_classification,
    next_mode,
    should_offer_filter_editor,
)
from src.map_filter_editor.models.filter_state import (
    EditorMode,
    FilterClassification,
    UserAction,
)
from src.map_filter_editor.tools.filter_classifier import classify


SIMPLE = FilterClassification.SIMPLE
NESTED = FilterClassification.NESTED_UNSUPPORTED
EXPRESSION = FilterClassification.EXPRESSION


def test_first_display_follows_classification():
    assert next_mode(None, SIMPLE) == EditorMode.SIMPLE
    assert next_mode(None, NESTED) == EditorMode.NESTED_UNSUPPORTED
    assert next_mode(None, EXPRESSION) == EditorMode.EXPRESSION


def test_upgrade_is_automatic():
    assert next_mode(EditorMode.SIMPLE, EXPRESSION) == EditorMode.EXPRESSION
    assert next_mode(EditorMode.NESTED_UNSUPPORTED, EXPRESSION) == EditorMode.EXPRESSION


def test_simple_and_nested_follow_the_value():
    assert next_mode(EditorMode.SIMPLE, NESTED) == EditorMode.NESTED_UNSUPPORTED
    assert next_mode(EditorMode.NESTED_UNSUPPORTED, SIMPLE) == EditorMode.SIMPLE


def test_no_automatic_downgrade():
    assert next_mode(EditorMode.EXPRESSION, SIMPLE) == EditorMode.EXPRESSION
    assert next_mode(EditorMode.EXPRESSION, NESTED) == EditorMode.EXPRESSION


def test_switch_to_filter_editor():
    action = UserAction.SWITCH_TO_FILTER_EDITOR
    assert next_mode(EditorMode.EXPRESSION, SIMPLE, action) == EditorMode.SIMPLE
    assert next_mode(EditorMode.EXPRESSION, NESTED, action) == EditorMode.NESTED_UNSUPPORTED


def test_switch_is_refused_for_expressions():
    action = UserAction.SWITCH_TO_FILTER_EDITOR
    assert next_mode(EditorMode.EXPRESSION, EXPRESSION, action) == EditorMode.EXPRESSION


def test_upgrade_to_expression():
    action = UserAction.UPGRADE_TO_EXPRESSION
    assert next_mode(EditorMode.SIMPLE, SIMPLE, action) == EditorMode.EXPRESSION
    assert next_mode(EditorMode.NESTED_UNSUPPORTED, NESTED, action) == EditorMode.EXPRESSION


def test_mode_sequence_never_downgrades():
    values = [
        ["all", ["==", "a", 1]],
        ["==", ["get", "a"], 1],
        ["all", ["==", "a", 1]],
    ]

    modes = []
    mode = None
    for value in values:
        mode = next_mode(mode, classify(value))
        modes.append(mode)

    assert modes == [EditorMode.SIMPLE, EditorMode.EXPRESSION, EditorMode.EXPRESSION]

    mode = next_mode(mode, classify(values[-1]), UserAction.SWITCH_TO_FILTER_EDITOR)
    assert mode == EditorMode.SIMPLE


def test_mode_for_classification():
    assert mode_for_classification(SIMPLE) == EditorMode.SIMPLE
    assert mode_for_classification(EXPRESSION) == EditorMode.EXPRESSION


def test_should_offer_filter_editor():
    assert should_offer_filter_editor(EditorMode.EXPRESSION, SIMPLE)
    assert should_offer_filter_editor(EditorMode.EXPRESSION, NESTED)
    assert not should_offer_filter_editor(EditorMode.EXPRESSION, EXPRESSION)
    assert not should_offer_filter_editor(EditorMode.SIMPLE, SIMPLE)
