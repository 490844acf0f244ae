"""
Filter state models and Pydantic schemas for map_filter_editor.

This module defines:
- FilterClassification / EditorMode / UserAction: editor state enums
- CombinatorFilter / ExpressionFilter / MalformedFilter: parsed filter variants
- EditorView: what the editor should display for the current value
"""

from copy import deepcopy
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field


# ============================================================================
# ENUMS
# ============================================================================


class FilterClassification(str, Enum):
    """How a filter value can be edited."""

    SIMPLE = "simple"
    NESTED_UNSUPPORTED = "nested_unsupported"
    EXPRESSION = "expression"


class EditorMode(str, Enum):
    """Which editor is displayed for a filter."""

    SIMPLE = "simple"
    NESTED_UNSUPPORTED = "nested_unsupported"
    EXPRESSION = "expression"


class UserAction(str, Enum):
    """Explicit mode requests made by the user."""

    NONE = "none"
    SWITCH_TO_FILTER_EDITOR = "switch_to_filter_editor"
    UPGRADE_TO_EXPRESSION = "upgrade_to_expression"


# ============================================================================
# PARSED FILTER VARIANTS
# ============================================================================


@dataclass(frozen=True)
class CombinatorFilter:
    """
    A filter in canonical combinator form.

    Attributes:
        operator: One of the combining operators ("all", "any", "none")
        operands: Sub-filters, in order
    """

    operator: str
    operands: List[Any] = field(default_factory=list)

    def to_json(self) -> List[Any]:
        return [self.operator, *deepcopy(self.operands)]


@dataclass(frozen=True)
class ExpressionFilter:
    """A filter that only the expression editor can represent."""

    value: Any

    def to_json(self) -> Any:
        return deepcopy(self.value)


@dataclass(frozen=True)
class MalformedFilter:
    """A filter value that is neither an array nor a boolean."""

    value: Any

    def to_json(self) -> Any:
        return deepcopy(self.value)


ParsedFilter = Union[CombinatorFilter, ExpressionFilter, MalformedFilter]


# ============================================================================
# PYDANTIC SCHEMAS
# ============================================================================


class EditorView(BaseModel):
    """
    Everything the filter editor needs to render the current value.

    ``combining_operator``, ``operands`` and ``operand_errors`` are only set
    in simple mode; ``operand_errors`` is keyed by 1-based operand position.
    The other modes report ``filter_errors`` keyed by path inside ``value``.
    """

    mode: EditorMode = Field(..., description="Editor currently displayed")

    value: Any = Field(default=None, description="Filter value as owned by the caller")

    combining_operator: Optional[str] = Field(
        default=None, description="Operator shown in the combinator select"
    )

    operands: List[Any] = Field(
        default_factory=list, description="Sub-filters shown as single filter editors"
    )

    operand_errors: Dict[int, str] = Field(
        default_factory=dict, description="Validation messages by operand position"
    )

    filter_errors: Dict[str, str] = Field(
        default_factory=dict, description="Validation messages by path inside the raw value"
    )

    offer_filter_editor: bool = Field(
        default=False,
        description="Expression mode holds a value the filter editor could show",
    )

    operator_options: List[List[str]] = Field(
        default_factory=list, description="[operator, label] pairs for the select"
    )

    doc: str = Field(default="", description="Documentation for the filter field")

    class Config:
        """Pydantic configuration."""

        json_schema_extra = {
            "examples": [
                {
                    "mode": "simple",
                    "value": ["all", ["==", "class", "park"]],
                    "combining_operator": "all",
                    "operands": [["==", "class", "park"]],
                    "operand_errors": {},
                    "filter_errors": {},
                    "offer_filter_editor": False,
                },
                {
                    "mode": "expression",
                    "value": ["==", ["get", "class"], "park"],
                    "combining_operator": None,
                    "operands": [],
                    "operand_errors": {},
                    "filter_errors": {},
                    "offer_filter_editor": False,
                },
            ]
        }
