"""
Filter Migrator adapter.

Style spec engines only migrate whole documents, so a filter is wrapped in
a single-layer document, migrated, and read back from the layer.
"""

import logging
from typing import Any, Dict, Optional

from src.map_filter_editor.core.settings import GLYPHS_URL, SPRITE_URL, STYLE_SPEC_VERSION
from src.map_filter_editor.style_spec.base import BaseSpecMigrator
from src.map_filter_editor.style_spec.migrator import StyleMigrator

logger = logging.getLogger(__name__)

PROBE_ID = "tmp"


def create_style_from_filter(filter: Any) -> Dict[str, Any]:
    """
    Build a minimal style document with one layer carrying ``filter``.

    Args:
        filter: Filter to place on the layer (used as is, not copied)

    Returns:
        Style document with a single geojson source and fill layer
    """
    return {
        "id": PROBE_ID,
        "version": STYLE_SPEC_VERSION,
        "name": "Empty Style",
        "metadata": {"map_filter_editor:probe": True},
        "sources": {
            PROBE_ID: {
                "type": "geojson",
                "data": {},
            }
        },
        "sprite": SPRITE_URL,
        "glyphs": GLYPHS_URL,
        "layers": [
            {
                "id": PROBE_ID,
                "type": "fill",
                "source": PROBE_ID,
                "filter": filter,
            }
        ],
    }


class FilterMigrator:
    """
    Upgrades legacy filters to the expression syntax.

    Errors raised by the underlying spec migrator are not caught.
    """

    def __init__(self, migrator: Optional[BaseSpecMigrator] = None):
        """
        Initialize the FilterMigrator.

        Args:
            migrator: Spec migrator to use (defaults to StyleMigrator)
        """
        self.migrator = migrator or StyleMigrator()
        logger.debug(f"[FilterMigrator] Initialized with {type(self.migrator).__name__}")

    def migrate_filter(self, filter: Any) -> Any:
        """
        Migrate a single filter.

        Args:
            filter: Legacy or expression filter

        Returns:
            The migrated filter

        Examples:
            >>> FilterMigrator().migrate_filter(["==", "a", 1])
            ['==', ['get', 'a'], 1]
        """
        migrated = self.migrator.migrate(create_style_from_filter(filter))
        result = migrated["layers"][0]["filter"]
        logger.info(f"[FilterMigrator] Migrated {filter} -> {result}")
        return result


_default_migrator = FilterMigrator()


def migrate_filter(filter: Any) -> Any:
    """Migrate a filter with the built-in style migrator."""
    return _default_migrator.migrate_filter(filter)
