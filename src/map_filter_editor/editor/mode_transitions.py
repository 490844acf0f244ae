"""
Editor mode transitions.

The editor upgrades automatically but never downgrades automatically:
once a value is shown in the expression editor it stays there, even if it
becomes a simple filter again, until the user asks for the filter editor.
"""

import logging
from typing import Optional

from src.map_filter_editor.models.filter_state import (
    EditorMode,
    FilterClassification,
    UserAction,
)

logger = logging.getLogger(__name__)


def mode_for_classification(classification: FilterClassification) -> EditorMode:
    """Editor that shows a value of the given classification."""
    return EditorMode(classification.value)


def next_mode(
    previous: Optional[EditorMode],
    classification: FilterClassification,
    action: UserAction = UserAction.NONE
) -> EditorMode:
    """
    Compute the editor mode after a value refresh or a user action.

    Args:
        previous: Mode currently displayed, None on first display
        classification: Classification of the (new) value
        action: Explicit user request, if any

    Returns:
        Mode to display

    Examples:
        >>> next_mode(EditorMode.EXPRESSION, FilterClassification.SIMPLE)
        <EditorMode.EXPRESSION: 'expression'>
        >>> next_mode(EditorMode.EXPRESSION, FilterClassification.SIMPLE,
        ...           UserAction.SWITCH_TO_FILTER_EDITOR)
        <EditorMode.SIMPLE: 'simple'>
    """
    target = mode_for_classification(classification)

    if action == UserAction.UPGRADE_TO_EXPRESSION:
        mode = EditorMode.EXPRESSION
    elif action == UserAction.SWITCH_TO_FILTER_EDITOR:
        if classification == FilterClassification.EXPRESSION:
            logger.warning("[next_mode] Value cannot be shown in the filter editor, staying in expression mode")
        mode = target
    elif previous is None:
        mode = target
    elif previous == EditorMode.EXPRESSION:
        mode = EditorMode.EXPRESSION
    else:
        mode = target

    if mode != previous:
        logger.debug(f"[next_mode] {previous} -> {mode.value} ({action.value})")
    return mode


def should_offer_filter_editor(mode: EditorMode, classification: FilterClassification) -> bool:
    """
    Check whether to suggest switching back to the filter editor.

    True when the expression editor shows a value written in the legacy
    syntax.
    """
    return mode == EditorMode.EXPRESSION and classification != FilterClassification.EXPRESSION
