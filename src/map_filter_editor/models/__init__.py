"""Data models and state definitions for map_filter_editor."""

from src.map_filter_editor.models.filter_state import (
    FilterClassification,
    EditorMode,
    UserAction,
    CombinatorFilter,
    ExpressionFilter,
    MalformedFilter,
    ParsedFilter,
    EditorView
)

__all__ = [
    "FilterClassification",
    "EditorMode",
    "UserAction",
    "CombinatorFilter",
    "ExpressionFilter",
    "MalformedFilter",
    "ParsedFilter",
    "EditorView",
]
