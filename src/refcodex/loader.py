"""
Loading of reference documents from local JSON/YAML files.

Documents are read once at startup and handed to the resolvers; nothing in
the resolution path touches the file system.
"""

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from .models import ClassDescriptionDocument, ClassFeatureDocument, RaceDocument

logger = logging.getLogger("refcodex")

# File suffix -> parser for the raw text
_PARSERS = {
    ".json": json.loads,
    ".yaml": yaml.safe_load,
    ".yml": yaml.safe_load,
}
SUPPORTED_EXTENSIONS = set(_PARSERS)


class DocumentLoadError(Exception):
    """Error reading or parsing a reference document file."""
    pass


def read_document_file(path: Path | str) -> dict[str, Any]:
    """Read a JSON or YAML reference document.

    Args:
        path: Path to a .json, .yaml or .yml file

    Returns:
        The parsed top-level object

    Raises:
        DocumentLoadError: If the file is missing, has an unsupported
            extension, cannot be read or parsed, or is not an object
    """
    path = Path(path)
    parser = _PARSERS.get(path.suffix.lower())
    if parser is None:
        raise DocumentLoadError(
            f"Cannot load {path.name}: expected one of {', '.join(sorted(SUPPORTED_EXTENSIONS))}"
        )

    try:
        data = parser(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise DocumentLoadError(f"Reference document not found: {path}") from e
    except OSError as e:
        raise DocumentLoadError(f"Could not read {path}: {e}") from e
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise DocumentLoadError(f"Failed to parse {path.name}: {e}") from e

    if not isinstance(data, dict):
        raise DocumentLoadError(f"{path.name} must hold an object at the top level, got {type(data).__name__}")
    return data


def load_class_descriptions(path: Path | str) -> ClassDescriptionDocument:
    """Load a class description document (class -> title -> text)."""
    document = ClassDescriptionDocument.from_mapping(read_document_file(path))
    logger.info(f"Loaded class descriptions from {path}: {len(document.classes)} classes")
    return document


def load_class_features(path: Path | str) -> ClassFeatureDocument:
    """Load a class feature document (class -> "Class Features"/subclasses)."""
    document = ClassFeatureDocument.from_mapping(read_document_file(path))
    logger.info(f"Loaded class features from {path}: {len(document.classes)} classes")
    return document


def load_races(path: Path | str) -> RaceDocument:
    """Load a race document (root ``Races`` object)."""
    document = RaceDocument.from_mapping(read_document_file(path))
    logger.info(f"Loaded races from {path}: {len(document.races)} races")
    return document


__all__ = [
    "DocumentLoadError",
    "read_document_file",
    "load_class_descriptions",
    "load_class_features",
    "load_races",
    "SUPPORTED_EXTENSIONS",
]
