"""
Filter Classifier for deciding which editor can show a filter.

This module provides the FilterClassifier class responsible for the
three-way classification used by the filter editor:

- SIMPLE: a flat combinator over legacy conditions
- NESTED_UNSUPPORTED: a legacy combinator containing combinators
- EXPRESSION: anything else
"""

import logging
import re
from typing import Any, Dict, Optional

from src.map_filter_editor.core.settings import COMBINING_FILTER_OPS
from src.map_filter_editor.models.filter_state import FilterClassification
from src.map_filter_editor.style_spec.base import BaseSpecValidator
from src.map_filter_editor.style_spec.validator import StyleValidator
from src.map_filter_editor.tools.filter_migrator import create_style_from_filter
from src.map_filter_editor.tools.filter_normalizer import normalize

logger = logging.getLogger(__name__)

OPERAND_KEY_PATTERN = re.compile(r"^layers\[0\]\.filter\[(\d+)\]")
FILTER_KEY_PATTERN = re.compile(r"^layers\[0\]\.filter")


def has_combining_operator(filter: Any) -> bool:
    """
    Check whether a filter starts with a combining operator.

    Examples:
        >>> has_combining_operator(["any", ["==", "a", 1]])
        True
        >>> has_combining_operator(["==", "a", 1])
        False
    """
    return isinstance(filter, list) and len(filter) > 0 and filter[0] in COMBINING_FILTER_OPS


def has_nested_combining_operator(filter: Any) -> bool:
    """
    Check whether a combinator has a combinator among its sub-filters.

    Examples:
        >>> has_nested_combining_operator(["all", ["any", ["==", "a", 1]]])
        True
        >>> has_nested_combining_operator(["all", ["==", "a", 1]])
        False
    """
    if not has_combining_operator(filter):
        return False
    return any(has_combining_operator(sub_filter) for sub_filter in filter[1:])


class FilterClassifier:
    """
    Classifies filters against a style spec validator.

    The validator only checks whole documents, so filters are probed
    through a single-layer document. The probe swaps the operator for
    "none": legacy filters validate with it, expression filters do not.
    """

    def __init__(self, validator: Optional[BaseSpecValidator] = None):
        """
        Initialize the FilterClassifier.

        Args:
            validator: Spec validator to use (defaults to StyleValidator)
        """
        self.validator = validator or StyleValidator()
        logger.debug(f"[FilterClassifier] Initialized with {type(self.validator).__name__}")

    def is_simple(self, filter: Any) -> bool:
        """
        Check whether a combinator filter is written in the legacy syntax.

        Nested combinators still count as simple here; use
        ``has_nested_combining_operator`` to detect them.

        Args:
            filter: Filter value, usually normalized

        Returns:
            True if the filter can be edited as a legacy combinator

        Examples:
            >>> FilterClassifier().is_simple(["all", ["==", "a", 1]])
            True
            >>> FilterClassifier().is_simple(["all", ["==", ["get", "a"], 1]])
            False
        """
        if not has_combining_operator(filter):
            return False

        probe = ["none", *filter[1:]]
        errors = self.validator.validate(create_style_from_filter(probe))

        if errors:
            logger.debug(f"[FilterClassifier] Not simple ({len(errors)} errors): {errors[0]}")
        return len(errors) == 0

    def has_combining_operator(self, filter: Any) -> bool:
        return has_combining_operator(filter)

    def has_nested_combining_operator(self, filter: Any) -> bool:
        return has_nested_combining_operator(filter)

    def classify(self, filter: Any) -> FilterClassification:
        """
        Classify a filter for the editor.

        Args:
            filter: Filter value as stored on the layer (None if absent)

        Returns:
            FilterClassification of the normalized filter
        """
        normalized = normalize(filter)

        if not self.is_simple(normalized):
            classification = FilterClassification.EXPRESSION
        elif has_nested_combining_operator(normalized):
            classification = FilterClassification.NESTED_UNSUPPORTED
        else:
            classification = FilterClassification.SIMPLE

        logger.debug(f"[FilterClassifier] {filter} classified as {classification.value}")
        return classification

    def operand_errors(self, filter: Any) -> Dict[int, str]:
        """
        Validate a filter and group the messages by sub-filter.

        Args:
            filter: Filter value as stored on the layer (None if absent)

        Returns:
            Mapping of 1-based operand position to the first message for that
            operand; errors on the filter as a whole are keyed 0
        """
        document = create_style_from_filter(normalize(filter))
        errors: Dict[int, str] = {}

        for error in self.validator.validate(document):
            match = OPERAND_KEY_PATTERN.match(error.key)
            position = int(match.group(1)) if match else 0
            errors.setdefault(position, error.message)

        if errors:
            logger.info(f"[FilterClassifier] Filter has errors on operands {sorted(errors)}")
        return errors

    def filter_errors(self, filter: Any) -> Dict[str, str]:
        """
        Validate a filter as written, without normalizing it.

        Args:
            filter: Filter value as stored on the layer (None if absent)

        Returns:
            Mapping of path inside the value (``filter``, ``filter[2]``) to
            the first message for that path

        Examples:
            >>> FilterClassifier().filter_errors(["==", "a", {"x": 1}])
            {'filter[2]': 'string, number, or boolean expected, object found'}
        """
        if filter is None:
            return {}

        document = create_style_from_filter(filter)
        errors: Dict[str, str] = {}

        for error in self.validator.validate(document):
            path = FILTER_KEY_PATTERN.sub("filter", error.key, count=1)
            errors.setdefault(path, error.message)

        if errors:
            logger.info(f"[FilterClassifier] Filter has errors at {sorted(errors)}")
        return errors


_default_classifier = FilterClassifier()


def is_simple(filter: Any) -> bool:
    """Check a filter with the built-in style validator."""
    return _default_classifier.is_simple(filter)


def classify(filter: Any) -> FilterClassification:
    """Classify a filter with the built-in style validator."""
    return _default_classifier.classify(filter)


def operand_errors(filter: Any) -> Dict[int, str]:
    """Per-operand validation messages from the built-in style validator."""
    return _default_classifier.operand_errors(filter)


def filter_errors(filter: Any) -> Dict[str, str]:
    """Validation messages by path inside the value, from the built-in style validator."""
    return _default_classifier.filter_errors(filter)
