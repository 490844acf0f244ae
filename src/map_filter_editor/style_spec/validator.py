"""
Built-in style document validator.

This module provides the StyleValidator class, a validator for the minimal
documents used to host filters: the document structure is checked with the
Pydantic schemas, then layer ids, source references and layer filters.
"""

import logging
from typing import Any, Dict, List

from pydantic import ValidationError as PydanticValidationError

from src.map_filter_editor.style_spec.base import BaseSpecValidator, ValidationError
from src.map_filter_editor.style_spec.document import StyleDocument, format_location
from src.map_filter_editor.style_spec.filter_grammar import get_type, validate_filter

logger = logging.getLogger(__name__)


class StyleValidator(BaseSpecValidator):
    """
    Validates style documents that carry filters.

    Validation runs in two passes:
    - Structure: version, sources and layers (Pydantic schemas)
    - Semantics: unique layer ids, existing sources, filter grammar

    Structural errors stop validation, since the semantic checks rely on a
    well-formed document.
    """

    def __init__(self):
        """Initialize the validator."""
        logger.debug("[StyleValidator] Initialized")

    def validate(self, document: Dict[str, Any]) -> List[ValidationError]:
        """
        Validate a style document.

        Args:
            document: Style document

        Returns:
            List of validation errors, empty when valid

        Examples:
            >>> validator = StyleValidator()
            >>> validator.validate(create_style_from_filter(["==", "a", 1]))
            []
        """
        if not isinstance(document, dict):
            return [ValidationError("", f"object expected, {get_type(document)} found")]

        errors = self._validate_structure(document)
        if errors:
            logger.debug(f"[StyleValidator] {len(errors)} structural errors")
            return errors

        errors.extend(self._validate_layer_ids(document["layers"]))
        errors.extend(self._validate_sources(document["layers"], document.get("sources", {})))
        errors.extend(self._validate_filters(document["layers"]))

        logger.debug(f"[StyleValidator] Validation finished with {len(errors)} errors")
        return errors

    def _validate_structure(self, document: Dict[str, Any]) -> List[ValidationError]:
        try:
            StyleDocument.model_validate(document)
        except PydanticValidationError as e:
            return [
                ValidationError(format_location(err["loc"]), err["msg"])
                for err in e.errors()
            ]
        return []

    def _validate_layer_ids(self, layers: List[Dict[str, Any]]) -> List[ValidationError]:
        errors = []
        seen = set()
        for i, layer in enumerate(layers):
            layer_id = layer["id"]
            if layer_id in seen:
                errors.append(ValidationError(f"layers[{i}].id", f'duplicate layer id "{layer_id}"'))
            seen.add(layer_id)
        return errors

    def _validate_sources(
        self,
        layers: List[Dict[str, Any]],
        sources: Dict[str, Any]
    ) -> List[ValidationError]:
        errors = []
        for i, layer in enumerate(layers):
            if layer["type"] == "background":
                continue

            source = layer.get("source")
            if source is None:
                errors.append(ValidationError(f"layers[{i}]", 'missing required property "source"'))
            elif source not in sources:
                errors.append(ValidationError(f"layers[{i}].source", f'source "{source}" not found'))
        return errors

    def _validate_filters(self, layers: List[Dict[str, Any]]) -> List[ValidationError]:
        errors = []
        for i, layer in enumerate(layers):
            if "filter" in layer:
                errors.extend(validate_filter(f"layers[{i}].filter", layer["filter"]))
        return errors
