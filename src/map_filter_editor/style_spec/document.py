"""
Pydantic schemas for the minimal style documents handled by the adapter.

Only the parts of a style needed to host a filter are modelled: the
version, the sources and the layers. Anything else is accepted as is.
"""

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field, field_validator

from src.map_filter_editor.core.settings import LAYER_TYPES, SOURCE_TYPES


class StyleSource(BaseModel):
    """A style source; only its type is checked."""

    type: str = Field(..., description="Source type")

    @field_validator("type")
    @classmethod
    def check_type(cls, value: str) -> str:
        if value not in SOURCE_TYPES:
            raise ValueError(f"expected one of [{', '.join(SOURCE_TYPES)}], \"{value}\" found")
        return value

    class Config:
        """Pydantic configuration."""

        extra = "allow"


class StyleLayer(BaseModel):
    """A style layer, possibly carrying a filter."""

    id: str = Field(..., min_length=1, description="Unique layer id")

    type: str = Field(..., description="Layer type")

    source: Optional[str] = Field(default=None, description="Name of the layer's source")

    filter: Any = Field(default=None, description="Legacy filter or filter expression")

    @field_validator("type")
    @classmethod
    def check_type(cls, value: str) -> str:
        if value not in LAYER_TYPES:
            raise ValueError(f"expected one of [{', '.join(LAYER_TYPES)}], \"{value}\" found")
        return value

    class Config:
        """Pydantic configuration."""

        extra = "allow"


class StyleDocument(BaseModel):
    """Root of a style document."""

    version: Literal[8] = Field(..., description="Style spec version")

    name: Optional[str] = Field(default=None, description="Style name")

    sources: Dict[str, StyleSource] = Field(default_factory=dict, description="Sources by name")

    layers: List[StyleLayer] = Field(default_factory=list, description="Layers, bottom to top")

    class Config:
        """Pydantic configuration."""

        extra = "allow"
        json_schema_extra = {
            "examples": [
                {
                    "version": 8,
                    "name": "Empty Style",
                    "sources": {"tmp": {"type": "geojson", "data": {}}},
                    "layers": [
                        {"id": "tmp", "type": "fill", "source": "tmp", "filter": ["all"]}
                    ],
                }
            ]
        }


def format_location(loc) -> str:
    """
    Format a pydantic error location as a style spec key.

    Examples:
        >>> format_location(("layers", 0, "type"))
        'layers[0].type'
    """
    key = ""
    for part in loc:
        if isinstance(part, int):
            key += f"[{part}]"
        elif key:
            key += f".{part}"
        else:
            key = str(part)
    return key
