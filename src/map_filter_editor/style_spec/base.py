"""
Base interfaces for style spec validation and migration.

The classifier and migrator adapter only talk to these interfaces, so a
caller can plug in another style spec engine. Built-in implementations
live in ``validator`` and ``migrator``.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, List


@dataclass(frozen=True)
class ValidationError:
    """
    A single problem reported by a spec validator.

    Attributes:
        key: Dotted/indexed path of the offending value (``layers[0].filter[1]``)
        message: Human readable description
    """

    key: str
    message: str

    def __str__(self) -> str:
        if self.key:
            return f"{self.key}: {self.message}"
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a dictionary."""
        return {"key": self.key, "message": self.message}


class BaseSpecValidator(ABC):
    """Validates whole style documents."""

    @abstractmethod
    def validate(self, document: Dict[str, Any]) -> List[ValidationError]:
        """
        Validate a style document.

        Args:
            document: Style document (version, sources, layers)

        Returns:
            List of validation errors, empty when the document is valid
        """
        raise NotImplementedError


class BaseSpecMigrator(ABC):
    """Upgrades style documents to the current syntax."""

    @abstractmethod
    def migrate(self, document: Dict[str, Any]) -> Dict[str, Any]:
        """
        Migrate a style document.

        Args:
            document: Style document to migrate (not modified)

        Returns:
            New, migrated document

        Raises:
            MigrationError: If the document cannot be migrated
        """
        raise NotImplementedError
