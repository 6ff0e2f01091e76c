"""
Data models for reference documents.

Three document shapes are supported: class descriptions (flat, two levels),
class features (class -> "Class Features"/subclass -> feature) and races
(``Races`` -> race -> traits section -> subrace). Documents are read-only
snapshots; resolvers never write to them.
"""

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger("refcodex")

# A content-bearing node: plain text, a list of paragraphs, or an object
# with a ``content`` field (see ContentBlock).
ContentNode = str | list[Any] | dict[str, Any]

CLASS_FEATURES_KEY = "Class Features"
RACES_KEY = "Races"


class ContentBlock(BaseModel):
    """Object form of a content-bearing node.

    Attributes:
        content: Text or list of paragraphs (other types are treated as missing)
        table: Tabular data attached to the entry, never rendered as text

    Any other field is kept as an extra and rendered as ``"key: value"``
    when no usable ``content`` is present.
    """
    model_config = ConfigDict(extra="allow", frozen=True)

    content: Any = Field(default=None, description="Text or list of paragraphs")
    table: Any = Field(default=None, description="Optional tabular data")

    @property
    def extra_fields(self) -> dict[str, Any]:
        """Fields other than ``content`` and ``table``, in document order."""
        return dict(self.model_extra or {})


class ClassDescriptionDocument(BaseModel):
    """Class display name -> entry title -> description text."""
    model_config = ConfigDict(frozen=True)

    classes: dict[str, dict[str, str]] = Field(default_factory=dict)

    @classmethod
    def from_mapping(cls, data: Any) -> "ClassDescriptionDocument":
        """Build from raw JSON-shaped data, skipping malformed entries."""
        if not isinstance(data, dict):
            logger.warning("Class description document is not an object, ignoring it")
            return cls()

        classes: dict[str, dict[str, str]] = {}
        for class_name, entries in data.items():
            if not isinstance(entries, dict):
                logger.warning(f"Invalid class description section '{class_name}': expected an object")
                continue
            text_entries = {str(title): text for title, text in entries.items() if isinstance(text, str)}
            skipped = len(entries) - len(text_entries)
            if skipped:
                logger.warning(f"Skipped {skipped} non-text entries in class description section '{class_name}'")
            classes[str(class_name)] = text_entries
        return cls(classes=classes)


class ClassFeatureDocument(BaseModel):
    """Class display name -> class node.

    A class node holds a ``"Class Features"`` mapping (feature title ->
    content node) and may hold subclass mappings next to it.
    """
    model_config = ConfigDict(frozen=True)

    classes: dict[str, dict[str, Any]] = Field(default_factory=dict)

    @classmethod
    def from_mapping(cls, data: Any) -> "ClassFeatureDocument":
        """Build from raw JSON-shaped data, skipping malformed class nodes."""
        if not isinstance(data, dict):
            logger.warning("Class feature document is not an object, ignoring it")
            return cls()

        classes: dict[str, dict[str, Any]] = {}
        for class_name, node in data.items():
            if not isinstance(node, dict):
                logger.warning(f"Invalid class feature node '{class_name}': expected an object")
                continue
            classes[str(class_name)] = {str(key): value for key, value in node.items()}
        return cls(classes=classes)


class RaceDocument(BaseModel):
    """Race display name -> race node, taken from the root ``Races`` mapping.

    A race node may hold a traits section (any key containing "traits")
    whose ``content`` lists the trait paragraphs, with subrace sub-nodes
    keyed by subrace display name inside the same section.
    """
    model_config = ConfigDict(frozen=True)

    races: dict[str, dict[str, Any]] = Field(default_factory=dict)

    @classmethod
    def from_mapping(cls, data: Any) -> "RaceDocument":
        """Build from the raw document root, skipping malformed race nodes."""
        races_data = data.get(RACES_KEY) if isinstance(data, dict) else None
        if not isinstance(races_data, dict):
            logger.warning(f"Race document has no '{RACES_KEY}' object, ignoring it")
            return cls()

        races: dict[str, dict[str, Any]] = {}
        for race_name, node in races_data.items():
            if not isinstance(node, dict):
                logger.warning(f"Invalid race node '{race_name}': expected an object")
                continue
            races[str(race_name)] = {str(key): value for key, value in node.items()}
        return cls(races=races)


__all__ = [
    "ContentNode",
    "ContentBlock",
    "ClassDescriptionDocument",
    "ClassFeatureDocument",
    "RaceDocument",
    "CLASS_FEATURES_KEY",
    "RACES_KEY",
]
