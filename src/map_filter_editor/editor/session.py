"""
Filter editor session.

This module provides the FilterEditorSession class, the state behind one
filter editor: the current value, the displayed mode and the change
callback. It holds no rendering code; ``view()`` describes what an editor
should show.
"""

import logging
from typing import Any, Callable, Optional

from src.map_filter_editor.core.exceptions import EditorModeError
from src.map_filter_editor.core.settings import DEFAULT_FILTER, FILTER_DOC, OPERATOR_OPTIONS
from src.map_filter_editor.editor.mode_transitions import next_mode, should_offer_filter_editor
from src.map_filter_editor.models.filter_state import (
    CombinatorFilter,
    EditorMode,
    EditorView,
    FilterClassification,
    UserAction,
)
from src.map_filter_editor.tools import filter_manager
from src.map_filter_editor.tools.filter_classifier import FilterClassifier
from src.map_filter_editor.tools.filter_migrator import FilterMigrator
from src.map_filter_editor.tools.filter_normalizer import normalize, parse_filter

logger = logging.getLogger(__name__)


class FilterEditorSession:
    """
    State of a single filter editor.

    The filter value belongs to the caller. Edits are reported through
    ``on_change`` and then applied to the session as if the caller had
    passed the new value back with ``receive``.

    Attributes:
        on_change: Called with every new filter value produced by an edit
        classifier: FilterClassifier used to classify values
        migrator: FilterMigrator used by ``upgrade_to_expression``

    Example:
        ```python
        session = FilterEditorSession(["==", "class", "park"])
        session.mode                    # EditorMode.SIMPLE
        session.add_sub_filter()
        session.filter                  # ['all', ['==', 'class', 'park'], ['==', 'name', '']]
        session.upgrade_to_expression()
        session.mode                    # EditorMode.EXPRESSION
        ```
    """

    def __init__(
        self,
        filter: Any = None,
        on_change: Optional[Callable[[Any], None]] = None,
        classifier: Optional[FilterClassifier] = None,
        migrator: Optional[FilterMigrator] = None
    ):
        """
        Initialize the session.

        Args:
            filter: Initial filter value (None when the layer has no filter)
            on_change: Callback receiving new filter values
            classifier: Classifier to use (defaults to the built-in validator)
            migrator: Migrator to use (defaults to the built-in migrator)
        """
        self.on_change = on_change
        self.classifier = classifier or FilterClassifier()
        self.migrator = migrator or FilterMigrator()

        self._filter = filter
        self._classification = self.classifier.classify(filter)
        self._mode = next_mode(None, self._classification)

        logger.info(f"[FilterEditorSession] Initialized in {self._mode.value} mode")

    @property
    def filter(self) -> Any:
        return self._filter

    @property
    def mode(self) -> EditorMode:
        return self._mode

    @property
    def classification(self) -> FilterClassification:
        return self._classification

    # ------------------------------------------------------------------
    # Value refresh
    # ------------------------------------------------------------------

    def receive(self, filter: Any) -> EditorMode:
        """
        Take a new value from the owner of the filter.

        Args:
            filter: New filter value

        Returns:
            Mode displayed for the new value
        """
        self._filter = filter
        self._classification = self.classifier.classify(filter)
        return self._apply(UserAction.NONE)

    def _apply(self, action: UserAction) -> EditorMode:
        previous = self._mode
        self._mode = next_mode(previous, self._classification, action)
        if self._mode != previous:
            logger.info(f"[FilterEditorSession] Mode changed: {previous.value} -> {self._mode.value}")
        return self._mode

    def _commit(self, filter: Any) -> None:
        logger.debug(f"[FilterEditorSession] New value: {filter}")
        if self.on_change is not None:
            self.on_change(filter)
        self.receive(filter)

    def _require_simple_mode(self, operation: str) -> None:
        if self._mode != EditorMode.SIMPLE:
            raise EditorModeError(f"Cannot {operation} in {self._mode.value} mode")

    # ------------------------------------------------------------------
    # Combinator edits
    # ------------------------------------------------------------------

    def change_operator(self, new_op: str) -> None:
        self._require_simple_mode("change the operator")
        self._commit(filter_manager.set_operator(self._filter, new_op))

    def change_sub_filter(self, index: int, sub_filter: Any) -> None:
        self._require_simple_mode("change a sub-filter")
        self._commit(filter_manager.set_sub_filter(self._filter, index, sub_filter))

    def delete_sub_filter(self, index: int) -> None:
        self._require_simple_mode("delete a sub-filter")
        self._commit(filter_manager.delete_sub_filter(self._filter, index))

    def add_sub_filter(self, sub_filter: Optional[Any] = None) -> None:
        self._require_simple_mode("add a sub-filter")
        self._commit(filter_manager.add_sub_filter(self._filter, sub_filter))

    # ------------------------------------------------------------------
    # Mode requests
    # ------------------------------------------------------------------

    def upgrade_to_expression(self) -> None:
        """
        Migrate the value to the expression syntax and show the expression editor.

        Raises:
            MigrationError: Propagated from the migrator
        """
        migrated = self.migrator.migrate_filter(normalize(self._filter))
        self._commit(migrated)
        self._apply(UserAction.UPGRADE_TO_EXPRESSION)

    def switch_to_filter_editor(self) -> EditorMode:
        """Ask for the filter editor; only honoured for legacy values."""
        return self._apply(UserAction.SWITCH_TO_FILTER_EDITOR)

    def clear_expression(self) -> None:
        """Drop the expression and start over with an empty filter."""
        self._commit(list(DEFAULT_FILTER))
        self._apply(UserAction.SWITCH_TO_FILTER_EDITOR)

    # ------------------------------------------------------------------
    # View
    # ------------------------------------------------------------------

    def view(self) -> EditorView:
        """
        Describe what the editor should display.

        Returns:
            EditorView for the current value and mode
        """
        view = EditorView(
            mode=self._mode,
            value=self._filter,
            offer_filter_editor=should_offer_filter_editor(self._mode, self._classification),
            operator_options=OPERATOR_OPTIONS,
            doc=FILTER_DOC,
        )

        if self._mode != EditorMode.SIMPLE:
            view.filter_errors = self.classifier.filter_errors(self._filter)
            return view

        parsed = parse_filter(self._filter)
        if not isinstance(parsed, CombinatorFilter):
            raise EditorModeError(f"Simple mode cannot show {type(parsed).__name__}")

        view.combining_operator = parsed.operator
        view.operands = parsed.operands
        view.operand_errors = self.classifier.operand_errors(self._filter)
        return view
