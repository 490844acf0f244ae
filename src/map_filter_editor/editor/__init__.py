"""Editor state: mode transitions and editor sessions."""

from src.map_filter_editor.editor.mode_transitions import (
    mode_for_classification,
    next_mode,
    should_offer_filter_editor
)
from src.map_filter_editor.editor.session import FilterEditorSession

__all__ = [
    "mode_for_classification",
    "next_mode",
    "should_offer_filter_editor",
    "FilterEditorSession",
]
