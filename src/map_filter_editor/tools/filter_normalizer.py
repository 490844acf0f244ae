"""
Filter Normalizer for coercing filter values into combinator form.

The combinator editor always works on ``[operator, *sub_filters]``. A single
condition such as ``["==", "class", "park"]`` is shown as the only
sub-filter of an implicit ``"all"``.
"""

import logging
from copy import deepcopy
from typing import Any

from src.map_filter_editor.core.settings import COMBINING_FILTER_OPS, DEFAULT_FILTER
from src.map_filter_editor.models.filter_state import (
    CombinatorFilter,
    ExpressionFilter,
    MalformedFilter,
    ParsedFilter,
)

logger = logging.getLogger(__name__)


def normalize(filter: Any = None) -> Any:
    """
    Coerce a filter into canonical combinator form.

    The input is never modified; lists are always returned as new lists.

    Args:
        filter: Filter value, or None when the layer has no filter

    Returns:
        ``[operator, *sub_filters]`` for list input, the input itself for
        any other value

    Examples:
        >>> normalize()
        ['all']
        >>> normalize(["==", "a", 1])
        ['all', ['==', 'a', 1]]
        >>> normalize(["any", ["has", "a"]])
        ['any', ['has', 'a']]
    """
    if filter is None:
        return list(DEFAULT_FILTER)

    if not isinstance(filter, list):
        return filter

    if filter and filter[0] in COMBINING_FILTER_OPS:
        return [filter[0], *deepcopy(filter[1:])]

    logger.debug(f"[normalize] Wrapping non-combinator filter in 'all': {filter}")
    return ["all", deepcopy(filter)]


def parse_filter(filter: Any = None) -> ParsedFilter:
    """
    Parse a filter value into one of the filter variants.

    Args:
        filter: Filter value, or None

    Returns:
        CombinatorFilter for lists (after normalization), ExpressionFilter
        for literal booleans, MalformedFilter for anything else

    Examples:
        >>> parse_filter(["==", "a", 1])
        CombinatorFilter(operator='all', operands=[['==', 'a', 1]])
        >>> parse_filter(True)
        ExpressionFilter(value=True)
    """
    normalized = normalize(filter)

    if isinstance(normalized, list):
        return CombinatorFilter(operator=normalized[0], operands=normalized[1:])

    if isinstance(normalized, bool):
        return ExpressionFilter(value=normalized)

    logger.warning(f"[parse_filter] Malformed filter value: {normalized!r}")
    return MalformedFilter(value=deepcopy(normalized))
