"""
Map Filter Editor - logic behind the layer filter editor of a map style editor.

Architecture:
    src/
    └── map_filter_editor/
        ├── core/         # Settings and exceptions
        ├── models/       # Enums, filter variants, editor view
        ├── style_spec/   # Style document validation and migration
        ├── tools/        # Normalizer, classifier, migrator adapter, edits
        ├── editor/       # Mode state machine and editor session
        └── utils/        # Logging setup
"""

__version__ = "0.1.0"

from src.map_filter_editor import FilterClassifier, FilterEditorSession

__all__ = [
    "FilterClassifier",
    "FilterEditorSession",
]
