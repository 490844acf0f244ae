"""
Shared fixtures for map_filter_editor tests.
"""

import pytest

from src.map_filter_editor.style_spec.base import BaseSpecValidator, ValidationError
from src.map_filter_editor.tools.filter_classifier import FilterClassifier


class RecordingValidator(BaseSpecValidator):
    """Validator returning canned errors and remembering what it saw."""

    def __init__(self, errors=None):
        self.errors = errors or []
        self.documents = []

    def validate(self, document):
        self.documents.append(document)
        return list(self.errors)


@pytest.fixture
def classifier():
    return FilterClassifier()


@pytest.fixture
def recording_validator():
    return RecordingValidator()


@pytest.fixture
def failing_validator():
    return RecordingValidator([ValidationError("layers[0].filter", "always fails")])


@pytest.fixture
def simple_filter():
    return ["all", ["==", "class", "park"], ["!=", "rank", 2]]


@pytest.fixture
def nested_filter():
    return ["all", ["any", ["==", "a", 1]]]


@pytest.fixture
def expression_filter():
    return ["==", ["get", "class"], "park"]
