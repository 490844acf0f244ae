"""
Map Filter Editor - filter classification and editing for map styles.

This module provides the logic behind a map-style filter editor: filter
normalization, simple/nested/expression classification, legacy filter
migration, combinator edits and the editor mode state machine.
"""

from src.map_filter_editor.models.filter_state import (
    FilterClassification,
    EditorMode,
    UserAction,
    CombinatorFilter,
    ExpressionFilter,
    MalformedFilter,
    EditorView
)
from src.map_filter_editor.tools.filter_normalizer import normalize, parse_filter
from src.map_filter_editor.tools.filter_classifier import (
    FilterClassifier,
    has_combining_operator,
    has_nested_combining_operator,
    is_simple,
    classify,
    operand_errors,
    filter_errors
)
from src.map_filter_editor.tools.filter_manager import (
    set_operator,
    set_sub_filter,
    delete_sub_filter,
    add_sub_filter
)
from src.map_filter_editor.tools.filter_migrator import (
    FilterMigrator,
    create_style_from_filter,
    migrate_filter
)
from src.map_filter_editor.editor.mode_transitions import next_mode
from src.map_filter_editor.editor.session import FilterEditorSession

__all__ = [
    # Models
    "FilterClassification",
    "EditorMode",
    "UserAction",
    "CombinatorFilter",
    "ExpressionFilter",
    "MalformedFilter",
    "EditorView",
    # Tools
    "normalize",
    "parse_filter",
    "FilterClassifier",
    "has_combining_operator",
    "has_nested_combining_operator",
    "is_simple",
    "classify",
    "operand_errors",
    "filter_errors",
    "set_operator",
    "set_sub_filter",
    "delete_sub_filter",
    "add_sub_filter",
    "FilterMigrator",
    "create_style_from_filter",
    "migrate_filter",
    # Editor
    "next_mode",
    "FilterEditorSession",
]
