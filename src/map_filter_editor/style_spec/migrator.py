"""
Built-in style document migrator.

This module provides the StyleMigrator class and ``convert_filter``, which
rewrites legacy filters into the expression syntax:

    ["==", "class", "park"]      -> ["==", ["get", "class"], "park"]
    ["in", "$type", "Point"]     -> ["match", ["geometry-type"], ["Point"], True, False]
    ["none", f1, f2]             -> ["!", ["any", f1', f2']]

Filters that already are expressions are left untouched.
"""

import logging
from copy import deepcopy
from typing import Any, Dict, List

from src.map_filter_editor.core.exceptions import MigrationError
from src.map_filter_editor.core.settings import COMPARISON_OPERATORS, STYLE_SPEC_VERSION
from src.map_filter_editor.style_spec.base import BaseSpecMigrator
from src.map_filter_editor.style_spec.filter_grammar import get_type, is_expression_filter

logger = logging.getLogger(__name__)


def _value_type(value: Any) -> str:
    # Runtime type names as reported by the "typeof" expression
    value_type = get_type(value)
    if value_type in ("array", "null"):
        return "object"
    return value_type


def _property_getter(prop: Any) -> List[Any]:
    if prop == "$type":
        return ["geometry-type"]
    if prop == "$id":
        return ["id"]
    return ["get", prop]


def _runtime_type_checks(expected_types: Dict[str, str]) -> Any:
    conditions = []
    for prop, value_type in expected_types.items():
        getter = ["id"] if prop == "$id" else ["get", prop]
        conditions.append(["==", ["typeof", getter], value_type])

    if not conditions:
        return True
    if len(conditions) == 1:
        return conditions[0]
    return ["all", *conditions]


def _convert_comparison(prop: Any, value: Any, op: str, expected_types: Dict[str, str]) -> List[Any]:
    if prop == "$type":
        return [op, ["geometry-type"], value]

    getter = ["id"] if prop == "$id" else ["get", prop]

    if value is not None and isinstance(prop, str):
        expected_types[prop] = _value_type(value)

    # A missing property is not equal to null in legacy filters
    if op == "==" and prop != "$id" and value is None:
        return ["all", ["has", prop], ["==", getter, None]]
    if op == "!=" and prop != "$id" and value is None:
        return ["any", ["!", ["has", prop]], ["!=", getter, None]]

    return [op, getter, value]


def _convert_membership(prop: Any, values: List[Any], negate: bool = False) -> Any:
    if not values:
        return negate

    getter = _property_getter(prop)

    value_type = _value_type(values[0])
    uniform = all(_value_type(v) == value_type for v in values)

    if uniform and value_type in ("string", "number"):
        # match labels must be unique
        unique_values = []
        for v in sorted(values):
            if not unique_values or unique_values[-1] != v:
                unique_values.append(v)
        return ["match", getter, unique_values, not negate, negate]

    if negate:
        return ["all", *[["!=", getter, v] for v in values]]
    return ["any", *[["==", getter, v] for v in values]]


def _convert_presence(prop: Any) -> Any:
    if prop == "$type":
        return True
    if prop == "$id":
        return ["!=", ["id"], None]
    return ["has", prop]


def _convert(filter: Any, expected_types: Dict[str, str]) -> Any:
    if is_expression_filter(filter):
        return deepcopy(filter)
    if filter is None:
        return True
    if not isinstance(filter, list):
        raise MigrationError(f"filter must be an array or a boolean, {get_type(filter)} found")

    op = filter[0] if filter else None
    if len(filter) <= 1:
        return op != "any"

    if op in COMPARISON_OPERATORS:
        return _convert_comparison(filter[1], deepcopy(filter[2]), op, expected_types)

    if op == "any":
        children = []
        for sub_filter in filter[1:]:
            types: Dict[str, str] = {}
            child = _convert(sub_filter, types)
            checks = _runtime_type_checks(types)
            children.append(child if checks is True else ["case", checks, child, False])
        return ["any", *children]

    if op == "all":
        children = [_convert(sub_filter, expected_types) for sub_filter in filter[1:]]
        if len(children) > 1:
            return ["all", *children]
        child = children[0]
        return child if isinstance(child, list) else [child]

    if op == "none":
        return ["!", _convert(["any", *filter[1:]], {})]

    if op == "in":
        return _convert_membership(filter[1], deepcopy(filter[2:]))

    if op == "!in":
        return _convert_membership(filter[1], deepcopy(filter[2:]), negate=True)

    if op == "has":
        return _convert_presence(filter[1])

    if op == "!has":
        return ["!", _convert_presence(filter[1])]

    return True


def convert_filter(filter: Any) -> Any:
    """
    Convert a legacy filter into an expression filter.

    Args:
        filter: Legacy filter (expression filters are returned unchanged)

    Returns:
        Equivalent expression filter

    Raises:
        MigrationError: If the filter is not an array or a boolean

    Examples:
        >>> convert_filter(["==", "class", "park"])
        ['==', ['get', 'class'], 'park']
        >>> convert_filter(["none"])
        True
    """
    return _convert(filter, {})


class StyleMigrator(BaseSpecMigrator):
    """
    Migrates style documents to the expression syntax.

    Every layer filter is converted with ``convert_filter``; layers without
    a filter keep it absent and the rest of the document is copied unchanged.
    """

    def __init__(self):
        """Initialize the migrator."""
        logger.debug("[StyleMigrator] Initialized")

    def migrate(self, document: Dict[str, Any]) -> Dict[str, Any]:
        """
        Migrate a style document.

        Args:
            document: Style document (not modified)

        Returns:
            Migrated copy of the document

        Raises:
            MigrationError: On unsupported versions or unconvertible filters
        """
        if not isinstance(document, dict):
            raise MigrationError(f"object expected, {get_type(document)} found")

        version = document.get("version")
        if version != STYLE_SPEC_VERSION:
            raise MigrationError(f"unsupported style version {version!r}", field="version")

        migrated = deepcopy(document)
        for i, layer in enumerate(migrated.get("layers", [])):
            if not isinstance(layer, dict) or layer.get("filter") is None:
                continue
            try:
                layer["filter"] = convert_filter(layer["filter"])
            except MigrationError as e:
                raise MigrationError(e.message, field=f"layers[{i}].filter") from e
            logger.debug(f"[StyleMigrator] Migrated filter of layer {layer.get('id')!r}")

        return migrated
