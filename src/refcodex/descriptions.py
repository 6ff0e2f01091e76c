"""
Resolve class descriptions from slugged reference paths.

Paths look like ``"barbarian > rage"`` or
``"paladin > oath-of-devotion > channel-divinity-turn-the-unholy"``. The first
segment names the class, the last one the entry; intermediate segments only
document where the entry lives and are not used for matching.
"""

import logging

from .models import ClassDescriptionDocument
from .normalize import slugify

logger = logging.getLogger("refcodex")

PATH_DELIMITER = ">"


class ClassDescriptionResolver:
    """Resolves class description text by slug against a class description document.

    Entry titles are matched by slug; when no title matches exactly, the
    longest title whose slug is a prefix of the requested slug is used, so
    ``"channel-divinity-turn-the-unholy"`` still finds ``"Channel Divinity"``.

    Example:
        >>> resolver = ClassDescriptionResolver(document)
        >>> resolver.resolve_path("Barbarian > Rage")
        'In battle, you fight with primal ferocity...'
    """

    def __init__(self, document: ClassDescriptionDocument) -> None:
        self._document = document

    @property
    def document(self) -> ClassDescriptionDocument:
        return self._document

    def _find_class_key(self, class_slug: str) -> str | None:
        for key in self._document.classes:
            if slugify(key) == class_slug:
                return key
        return None

    @staticmethod
    def _find_entry_key(entries: dict[str, str], entry_slug: str) -> str | None:
        best_prefix: str | None = None
        best_len = -1

        for key in entries:
            key_slug = slugify(key)
            if key_slug == entry_slug:
                return key
            if key_slug and entry_slug.startswith(key_slug) and len(key_slug) > best_len:
                best_prefix = key
                best_len = len(key_slug)

        return best_prefix

    @staticmethod
    def _introduction(class_key: str, entries: dict[str, str]) -> str | None:
        for candidate in (f"The {class_key}", class_key):
            if entries.get(candidate):
                return entries[candidate]
        return None

    def _resolve(self, class_name: str, feature_name: str | None) -> str | None:
        class_key = self._find_class_key(slugify(class_name))
        if class_key is None:
            logger.debug(f"No class matches '{class_name}'")
            return None

        entries = self._document.classes[class_key]
        if not feature_name:
            return self._introduction(class_key, entries)

        entry_key = self._find_entry_key(entries, slugify(feature_name))
        if entry_key is None:
            logger.debug(f"No entry matches '{feature_name}' in class '{class_key}'")
            return None
        return entries[entry_key]

    def resolve_path(self, path: str) -> str | None:
        """Resolve a ``>``-delimited reference path to its description text.

        A single-segment path returns the class introduction (``"The <Class>"``
        or ``"<Class>"`` entry).

        Args:
            path: Reference path such as ``"barbarian > path-of-the-berserker > frenzy"``

        Returns:
            Description text, or None when nothing matches
        """
        if not path:
            return None
        segments = [segment.strip() for segment in path.split(PATH_DELIMITER)]
        segments = [segment for segment in segments if segment]
        if not segments:
            return None

        feature_name = segments[-1] if len(segments) > 1 else None
        return self._resolve(segments[0], feature_name)

    def resolve_by_class_and_feature(self, class_name: str, feature_name: str | None = None) -> str | None:
        """Resolve by class and feature names directly, in any casing."""
        if not class_name:
            return None
        return self._resolve(class_name, feature_name)


__all__ = [
    "ClassDescriptionResolver",
    "PATH_DELIMITER",
]
