"""Core tools for filter normalization, classification, editing and migration."""

from src.map_filter_editor.tools.filter_normalizer import normalize, parse_filter
from src.map_filter_editor.tools.filter_classifier import (
    FilterClassifier,
    has_combining_operator,
    has_nested_combining_operator,
    is_simple,
    classify,
    operand_errors,
    filter_errors
)
from src.map_filter_editor.tools.filter_manager import (
    set_operator,
    set_sub_filter,
    delete_sub_filter,
    add_sub_filter
)
from src.map_filter_editor.tools.filter_migrator import (
    FilterMigrator,
    create_style_from_filter,
    migrate_filter
)

__all__ = [
    "normalize",
    "parse_filter",
    "FilterClassifier",
    "has_combining_operator",
    "has_nested_combining_operator",
    "is_simple",
    "classify",
    "operand_errors",
    "filter_errors",
    "set_operator",
    "set_sub_filter",
    "delete_sub_filter",
    "add_sub_filter",
    "FilterMigrator",
    "create_style_from_filter",
    "migrate_filter",
]
