"""
ReferenceEngine - single entry point for all description lookups.

Bundles the class description, class feature and race resolvers. Any
document may be missing; its lookups then return None.
"""

import logging

from .config import ReferenceConfig
from .descriptions import ClassDescriptionResolver
from .features import ClassFeatureResolver
from .loader import load_class_descriptions, load_class_features, load_races
from .models import ClassDescriptionDocument, ClassFeatureDocument, RaceDocument
from .normalize import normalize_feature_title
from .races import RaceFeatureResolver

logger = logging.getLogger("refcodex")


class ReferenceEngine:
    """Read-only lookup facade over the three reference documents.

    Safe to share between threads: resolution never writes shared state.

    Example:
        >>> engine = ReferenceEngine(features=ClassFeatureDocument.from_mapping(data))
        >>> engine.resolve_feature("Fighter", "Second Wind")
        'You have a limited well of stamina...'
    """

    def __init__(
        self,
        classes: ClassDescriptionDocument | None = None,
        features: ClassFeatureDocument | None = None,
        races: RaceDocument | None = None,
    ) -> None:
        self._descriptions = ClassDescriptionResolver(classes) if classes is not None else None
        self._features = ClassFeatureResolver(features) if features is not None else None
        self._races = RaceFeatureResolver(races) if races is not None else None

    @classmethod
    def from_config(cls, config: ReferenceConfig) -> "ReferenceEngine":
        """Load every configured document and build an engine over them.

        Raises:
            DocumentLoadError: If a configured document cannot be loaded
        """
        classes = load_class_descriptions(config.classes_path) if config.classes_path else None
        features = load_class_features(config.features_path) if config.features_path else None
        races = load_races(config.races_path) if config.races_path else None

        for name, document in (("class descriptions", classes), ("class features", features), ("races", races)):
            if document is None:
                logger.warning(f"No {name} document configured; those lookups will return nothing")

        return cls(classes=classes, features=features, races=races)

    @property
    def has_class_descriptions(self) -> bool:
        return self._descriptions is not None

    @property
    def has_class_features(self) -> bool:
        return self._features is not None

    @property
    def has_races(self) -> bool:
        return self._races is not None

    def resolve_path(self, path: str) -> str | None:
        """Resolve a ``"class > subclass > feature"`` reference path."""
        if self._descriptions is None:
            return None
        return self._descriptions.resolve_path(path)

    def resolve_by_class_and_feature(self, class_name: str, feature_name: str | None = None) -> str | None:
        """Resolve a class description entry by class and feature name."""
        if self._descriptions is None:
            return None
        return self._descriptions.resolve_by_class_and_feature(class_name, feature_name)

    def resolve_feature(
        self,
        class_name: str,
        feature_name: str,
        subclass_name: str | None = None,
    ) -> str | None:
        """Resolve a class or subclass feature description."""
        if self._features is None:
            return None
        return self._features.resolve_feature(class_name, feature_name, subclass_name)

    def resolve_race_feature(self, race_text: str, feature_name: str) -> str | None:
        """Resolve a racial or subracial trait description."""
        if self._races is None:
            return None
        return self._races.resolve_race_feature(race_text, feature_name)

    @staticmethod
    def normalize_feature_title(raw_text: str) -> str:
        """Strip page references, parentheticals and ordinal hints from a title."""
        return normalize_feature_title(raw_text)


__all__ = ["ReferenceEngine"]
