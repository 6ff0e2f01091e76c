"""
refcodex - reference description resolution for class, feature and race compendia.

Resolves loosely-formatted identifiers ("barbarian > rage", "Halfling
(Lightfoot)") against semi-structured reference documents and returns the
matching description text, or None.
"""

from .descriptions import ClassDescriptionResolver
from .engine import ReferenceEngine
from .features import ClassFeatureResolver, find_key_ci, stringify_content
from .loader import DocumentLoadError
from .models import ClassDescriptionDocument, ClassFeatureDocument, ContentBlock, RaceDocument
from .normalize import normalize_feature_title, normalize_key, slugify
from .races import RaceFeatureResolver
from .traits import extract_traits

from importlib.metadata import PackageNotFoundError, version as _get_version

try:
    __version__ = _get_version("refcodex")
except PackageNotFoundError:
    __version__ = "0.1.0"  # Fallback if metadata unavailable

__all__ = [
    "ReferenceEngine",
    "ClassDescriptionResolver",
    "ClassFeatureResolver",
    "RaceFeatureResolver",
    "ClassDescriptionDocument",
    "ClassFeatureDocument",
    "RaceDocument",
    "ContentBlock",
    "DocumentLoadError",
    "extract_traits",
    "find_key_ci",
    "stringify_content",
    "normalize_key",
    "slugify",
    "normalize_feature_title",
]
