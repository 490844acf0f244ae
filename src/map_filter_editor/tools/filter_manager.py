"""
Filter Manager for editing combinator filters.

This module provides the mutation helpers behind the combinator editor:
change the operator, replace, delete or add a sub-filter. Every helper
works on the normalized filter, returns a new list and leaves its input
untouched. Results are not validated; the editor reclassifies them on the
next refresh.

Sub-filters are addressed by their 1-based position in the normalized
filter (position 0 is the operator).
"""

import logging
from copy import deepcopy
from typing import Any, List, Optional

from src.map_filter_editor.core.exceptions import FilterIndexError, UnsupportedOperatorError
from src.map_filter_editor.core.settings import COMBINING_FILTER_OPS, DEFAULT_SUB_FILTER
from src.map_filter_editor.tools.filter_normalizer import normalize

logger = logging.getLogger(__name__)


def _normalized_list(filter: Any) -> List[Any]:
    normalized = normalize(filter)
    if not isinstance(normalized, list):
        raise FilterIndexError(0, 0)
    return normalized


def _check_position(index: int, normalized: List[Any]) -> None:
    if isinstance(index, bool) or not isinstance(index, int) or not 1 <= index < len(normalized):
        raise FilterIndexError(index, len(normalized))


def set_operator(filter: Any, new_op: str) -> List[Any]:
    """
    Replace the combining operator.

    Args:
        filter: Current filter
        new_op: New combining operator

    Returns:
        Normalized filter with the new operator

    Raises:
        UnsupportedOperatorError: If new_op is not a combining operator
        FilterIndexError: If the filter is not an array

    Examples:
        >>> set_operator(["all", ["==", "a", 1]], "any")
        ['any', ['==', 'a', 1]]
    """
    if new_op not in COMBINING_FILTER_OPS:
        raise UnsupportedOperatorError(
            f"Unsupported combining operator {new_op!r}, expected one of {COMBINING_FILTER_OPS}"
        )

    result = _normalized_list(filter)
    result[0] = new_op
    logger.debug(f"[FilterManager] Operator set to {new_op}")
    return result


def set_sub_filter(filter: Any, index: int, sub_filter: Any) -> List[Any]:
    """
    Replace the sub-filter at a 1-based position.

    Raises:
        FilterIndexError: If index is outside ``[1, len(filter) - 1]``

    Examples:
        >>> set_sub_filter(["all", ["==", "a", 1]], 1, ["has", "b"])
        ['all', ['has', 'b']]
    """
    result = _normalized_list(filter)
    _check_position(index, result)
    result[index] = deepcopy(sub_filter)
    logger.debug(f"[FilterManager] Sub-filter {index} set to {sub_filter}")
    return result


def delete_sub_filter(filter: Any, index: int) -> List[Any]:
    """
    Remove the sub-filter at a 1-based position.

    Raises:
        FilterIndexError: If index is outside ``[1, len(filter) - 1]``

    Examples:
        >>> delete_sub_filter(["all", ["==", "a", 1], ["has", "b"]], 1)
        ['all', ['has', 'b']]
    """
    result = _normalized_list(filter)
    _check_position(index, result)
    removed = result.pop(index)
    logger.debug(f"[FilterManager] Removed sub-filter {index} (was {removed})")
    return result


def add_sub_filter(filter: Any, sub_filter: Optional[Any] = None) -> List[Any]:
    """
    Append a sub-filter, ``["==", "name", ""]`` by default.

    Examples:
        >>> add_sub_filter(["all"])
        ['all', ['==', 'name', '']]
    """
    result = _normalized_list(filter)
    result.append(deepcopy(sub_filter if sub_filter is not None else DEFAULT_SUB_FILTER))
    logger.debug(f"[FilterManager] Added sub-filter at position {len(result) - 1}")
    return result
