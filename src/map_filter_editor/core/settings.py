"""
Environment settings and configuration for map_filter_editor.

This module loads environment variables and defines the filter grammar
constants shared by the normalizer, classifier and style spec adapter.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Project root directory
PROJECT_ROOT = Path(__file__).parent.parent.parent.parent

# Logging Configuration
LOG_LEVEL: str = os.getenv("MAP_FILTER_LOG_LEVEL", "INFO")
LOG_FILE: str = os.getenv(
    "MAP_FILTER_LOG_FILE",
    str(PROJECT_ROOT / "logs" / "map_filter_editor.log")
)

# Probe document assets
GLYPHS_URL: str = os.getenv(
    "MAP_FILTER_GLYPHS_URL",
    "https://orangemug.github.io/font-glyphs/glyphs/{fontstack}/{range}.pbf"
)
SPRITE_URL: str = os.getenv("MAP_FILTER_SPRITE_URL", "")

# Style spec version understood by the validator and migrator
STYLE_SPEC_VERSION = 8

# Combining operators recognized by the filter editor
COMBINING_FILTER_OPS = ["all", "any", "none"]

# Default filter when the layer has none
DEFAULT_FILTER = ["all"]

# Condition appended by "Add filter"
DEFAULT_SUB_FILTER = ["==", "name", ""]

# Legacy filter grammar
COMPARISON_OPERATORS = ["==", "!=", "<", "<=", ">", ">="]
FILTER_OPERATORS = COMPARISON_OPERATORS + [
    "in", "!in", "all", "any", "none", "has", "!has", "within"
]
GEOMETRY_TYPES = ["Point", "LineString", "Polygon"]

SOURCE_TYPES = ["vector", "raster", "raster-dem", "geojson", "image", "video"]
LAYER_TYPES = [
    "fill", "line", "symbol", "circle", "heatmap",
    "fill-extrusion", "raster", "hillshade", "background", "sky",
]

# Operator choices shown next to the combinator select
OPERATOR_OPTIONS = [
    ["all", "every filter matches"],
    ["none", "no filter matches"],
    ["any", "any filter matches"],
]

FILTER_DOC: str = (
    "A expression specifying conditions on source features. Only features "
    "that match the filter are displayed. Combine multiple filters together "
    "by using a compound filter."
)

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def validate_settings() -> bool:
    """
    Validate that all critical settings are properly configured.

    Returns:
        bool: True if all settings are valid

    Raises:
        ValueError: If settings are invalid
    """
    if LOG_LEVEL.upper() not in VALID_LOG_LEVELS:
        raise ValueError(f"MAP_FILTER_LOG_LEVEL must be one of {VALID_LOG_LEVELS}, got: {LOG_LEVEL}")

    if not set(COMBINING_FILTER_OPS).issubset(FILTER_OPERATORS):
        raise ValueError(f"COMBINING_FILTER_OPS must be filter operators, got: {COMBINING_FILTER_OPS}")

    if DEFAULT_FILTER[0] not in COMBINING_FILTER_OPS:
        raise ValueError(f"DEFAULT_FILTER must start with a combining operator, got: {DEFAULT_FILTER}")

    return True
