"""
Exceptions raised by map_filter_editor.

Validator findings are returned as values; these exceptions cover
programming errors on the editing side and migrator failures.
"""

from typing import Optional


class MapFilterEditorError(Exception):
    """Base class for all map_filter_editor errors."""

    pass


class FilterIndexError(MapFilterEditorError, IndexError):
    """
    Exception raised when a sub-filter position is out of range.

    Positions are 1-based indexes into the normalized filter, so the valid
    range is ``[1, len(filter) - 1]``.
    """

    def __init__(self, index: int, length: int):
        self.index = index
        self.length = length
        super().__init__(
            f"Sub-filter position {index} out of range "
            f"(filter has {max(length - 1, 0)} sub-filters)"
        )


class UnsupportedOperatorError(MapFilterEditorError, ValueError):
    """Exception raised when a combinator is set to an unknown operator."""

    pass


class EditorModeError(MapFilterEditorError):
    """Exception raised when an edit is not allowed in the current editor mode."""

    pass


class MigrationError(MapFilterEditorError):
    """
    Exception raised when a style document or filter cannot be migrated.

    This exception is raised when:
    - The document version is not supported by the migrator
    - A layer filter is neither an array nor a boolean
    """

    def __init__(self, message: str, field: Optional[str] = None):
        self.message = message
        self.field = field
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context."""
        if self.field:
            return f"[{self.field}] {self.message}"
        return self.message
