"""Style spec adapter: document validation and migration."""

from src.map_filter_editor.style_spec.base import (
    BaseSpecValidator,
    BaseSpecMigrator,
    ValidationError
)
from src.map_filter_editor.style_spec.document import StyleDocument, StyleLayer, StyleSource
from src.map_filter_editor.style_spec.filter_grammar import (
    is_expression_filter,
    validate_filter,
    validate_legacy_filter
)
from src.map_filter_editor.style_spec.validator import StyleValidator
from src.map_filter_editor.style_spec.migrator import StyleMigrator, convert_filter

__all__ = [
    "BaseSpecValidator",
    "BaseSpecMigrator",
    "ValidationError",
    "StyleDocument",
    "StyleLayer",
    "StyleSource",
    "is_expression_filter",
    "validate_filter",
    "validate_legacy_filter",
    "StyleValidator",
    "StyleMigrator",
    "convert_filter",
]
