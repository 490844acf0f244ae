"""Core configuration and settings for map_filter_editor."""

from src.map_filter_editor.core.settings import (
    LOG_LEVEL,
    LOG_FILE,
    COMBINING_FILTER_OPS,
    DEFAULT_FILTER,
    DEFAULT_SUB_FILTER,
    STYLE_SPEC_VERSION,
    validate_settings
)
from src.map_filter_editor.core.exceptions import (
    MapFilterEditorError,
    FilterIndexError,
    UnsupportedOperatorError,
    EditorModeError,
    MigrationError
)

__all__ = [
    "LOG_LEVEL",
    "LOG_FILE",
    "COMBINING_FILTER_OPS",
    "DEFAULT_FILTER",
    "DEFAULT_SUB_FILTER",
    "STYLE_SPEC_VERSION",
    "validate_settings",
    "MapFilterEditorError",
    "FilterIndexError",
    "UnsupportedOperatorError",
    "EditorModeError",
    "MigrationError",
]
