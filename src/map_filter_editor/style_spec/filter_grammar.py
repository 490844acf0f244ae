"""
Filter grammar checks.

Two syntaxes share the ``filter`` property of a layer:

- the legacy array syntax, e.g. ``["==", "class", "park"]`` or
  ``["none", ["has", "name"]]``
- the expression syntax, e.g. ``["==", ["get", "class"], "park"]``

``is_expression_filter`` tells them apart the same way the style spec does.
``validate_legacy_filter`` checks the legacy grammar and
``validate_expression_filter`` performs the structural checks on
expressions.
"""

import json
import logging
from typing import Any, List

from src.map_filter_editor.core.settings import (
    COMBINING_FILTER_OPS,
    COMPARISON_OPERATORS,
    FILTER_OPERATORS,
    GEOMETRY_TYPES,
)
from src.map_filter_editor.style_spec.base import ValidationError

logger = logging.getLogger(__name__)

ORDERING_OPERATORS = ["<", "<=", ">", ">="]
MEMBERSHIP_OPERATORS = ["in", "!in"]
PRESENCE_OPERATORS = ["has", "!has"]


def get_type(value: Any) -> str:
    """Return the JSON type name of a value."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    return "object"


def is_expression_filter(filter: Any) -> bool:
    """
    Check whether a filter is written in the expression syntax.

    Args:
        filter: Filter value

    Returns:
        True for expression filters, False for legacy filters and
        non-array values

    Examples:
        >>> is_expression_filter(["==", "class", "park"])
        False
        >>> is_expression_filter(["==", ["get", "class"], "park"])
        True
    """
    if filter is True or filter is False:
        return True
    if not isinstance(filter, list) or len(filter) == 0:
        return False

    op = filter[0]
    if op == "has":
        return len(filter) >= 2 and filter[1] != "$id" and filter[1] != "$type"
    if op == "in":
        return len(filter) >= 3 and (
            not isinstance(filter[1], str) or isinstance(filter[2], list)
        )
    if op in ("!in", "!has", "none"):
        return False
    if op in COMPARISON_OPERATORS:
        return len(filter) != 3 or isinstance(filter[1], list) or isinstance(filter[2], list)
    if op in ("any", "all"):
        for sub_filter in filter[1:]:
            if not is_expression_filter(sub_filter) and not isinstance(sub_filter, bool):
                return False
        return True
    return True


def _validate_enum(key: str, value: Any, values: List[str]) -> List[ValidationError]:
    if isinstance(value, str) and value in values:
        return []
    return [ValidationError(key, f"expected one of [{', '.join(values)}], {json.dumps(value)} found")]


def validate_legacy_filter(key: str, value: Any) -> List[ValidationError]:
    """
    Validate a filter against the legacy filter grammar.

    Errors on operands carry the operand index in their key
    (``filter[2]``), so callers can attach them to the right sub-filter.

    Args:
        key: Key of the filter inside the document (``layers[0].filter``)
        value: Filter value

    Returns:
        List of validation errors
    """
    value_type = get_type(value)
    if value_type != "array":
        return [ValidationError(key, f"array expected, {value_type} found")]

    if len(value) < 1:
        return [ValidationError(key, "filter array must have at least 1 element")]

    errors = _validate_enum(f"{key}[0]", value[0], FILTER_OPERATORS)
    op = value[0]

    if op in ORDERING_OPERATORS and len(value) >= 2 and value[1] == "$type":
        errors.append(ValidationError(key, f'"$type" cannot be use with operator "{op}"'))

    if op in COMPARISON_OPERATORS and len(value) != 3:
        errors.append(ValidationError(key, f'filter array for operator "{op}" must have 3 elements'))

    if op in COMPARISON_OPERATORS or op in MEMBERSHIP_OPERATORS:
        if len(value) >= 2:
            key_type = get_type(value[1])
            if key_type != "string":
                errors.append(ValidationError(f"{key}[1]", f"string expected, {key_type} found"))
        for i in range(2, len(value)):
            if value[1] == "$type":
                errors.extend(_validate_enum(f"{key}[{i}]", value[i], GEOMETRY_TYPES))
                continue
            operand_type = get_type(value[i])
            if operand_type not in ("string", "number", "boolean"):
                errors.append(ValidationError(
                    f"{key}[{i}]",
                    f"string, number, or boolean expected, {operand_type} found"
                ))

    elif op in COMBINING_FILTER_OPS:
        for i in range(1, len(value)):
            errors.extend(validate_legacy_filter(f"{key}[{i}]", value[i]))

    elif op in PRESENCE_OPERATORS:
        if len(value) != 2:
            errors.append(ValidationError(key, f'filter array for "{op}" operator must have 2 elements'))
        else:
            key_type = get_type(value[1])
            if key_type != "string":
                errors.append(ValidationError(f"{key}[1]", f"string expected, {key_type} found"))

    elif op == "within":
        if len(value) != 2:
            errors.append(ValidationError(key, f'filter array for "{op}" operator must have 2 elements'))
        else:
            geometry_type = get_type(value[1])
            if geometry_type != "object":
                errors.append(ValidationError(f"{key}[1]", f"object expected, {geometry_type} found"))

    return errors


def validate_expression_filter(key: str, value: Any) -> List[ValidationError]:
    """
    Structural checks for an expression filter.

    Only the shape is checked (literal booleans, or arrays headed by an
    expression name); type checking of expressions is left to a full
    style spec engine.
    """
    if isinstance(value, bool):
        return []
    if not isinstance(value, list) or len(value) == 0:
        return [ValidationError(key, f"array expected, {get_type(value)} found")]
    if not isinstance(value[0], str):
        return [ValidationError(
            f"{key}[0]",
            f"Expression name must be a string, but found {get_type(value[0])} instead. "
            'If you wanted a literal array, use ["literal", [...]].'
        )]
    return []


def validate_filter(key: str, value: Any) -> List[ValidationError]:
    """Validate a layer filter in whichever syntax it is written."""
    if is_expression_filter(value):
        logger.debug(f"[validate_filter] {key} is an expression filter")
        return validate_expression_filter(key, value)
    return validate_legacy_filter(key, value)
