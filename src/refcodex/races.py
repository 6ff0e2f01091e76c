"""
Resolve race and subrace trait descriptions from a race document.

Race text arrives in several forms: a base race (``"Dwarf"``), a base race
with a parenthetical subrace (``"Halfling (Lightfoot)"``) or a bare subrace
name (``"Hill Dwarf"``). Traits are parsed out of the bolded-header
paragraphs of the race's traits section, then subrace traits are layered on
top of the base race traits.
"""

import logging
import re
from typing import Any

from .models import RaceDocument
from .normalize import normalize_key
from .traits import extract_traits

logger = logging.getLogger("refcodex")

TRAITS_MARKER = "traits"
CONTENT_KEY = "content"

_PARENTHETICAL_RE = re.compile(r"\(([^)]+)\)")


def find_key_loose(mapping: Any, target: str, skip: tuple[str, ...] = ()) -> str | None:
    """Find a key by normalized equality, then by containment in either direction.

    Args:
        mapping: Mapping to search (anything that is not a dict never matches)
        target: Name to look for
        skip: Keys never considered a match

    Returns:
        The first matching key, or None
    """
    if not isinstance(mapping, dict):
        return None
    norm_target = normalize_key(target)
    if not norm_target:
        return None

    candidates = [(key, normalize_key(key)) for key in mapping if key not in skip]
    for key, norm_key in candidates:
        if norm_key == norm_target:
            return key
    for key, norm_key in candidates:
        if norm_key and (norm_target in norm_key or norm_key in norm_target):
            return key
    return None


def find_traits_section(race_node: dict[str, Any]) -> dict[str, Any] | None:
    """Return the race node's traits section (e.g. ``"Dwarf Traits"``), if any."""
    for key, value in race_node.items():
        if TRAITS_MARKER in key.lower() and isinstance(value, dict):
            return value
    return None


def subrace_label(race_text: str, base_key: str) -> str | None:
    """Work out which subrace the caller's race text refers to.

    Example:
        >>> subrace_label("Halfling (Lightfoot)", "Halfling")
        'Lightfoot'
        >>> subrace_label("Hill Dwarf", "Dwarf")
        'Hill Dwarf'
        >>> subrace_label("dwarf", "Dwarf") is None
        True
    """
    match = _PARENTHETICAL_RE.search(race_text)
    if match:
        return match.group(1).strip()
    if normalize_key(race_text) == normalize_key(base_key):
        return None
    return race_text.strip()


class RaceFeatureResolver:
    """Resolves race and subrace trait descriptions.

    Example:
        >>> resolver = RaceFeatureResolver(document)
        >>> resolver.resolve_race_feature("Halfling (Lightfoot)", "Naturally Stealthy")
        'You can attempt to hide even when you are obscured...'
    """

    def __init__(self, document: RaceDocument) -> None:
        self._document = document

    @property
    def document(self) -> RaceDocument:
        return self._document

    def _find_base_race(self, race_text: str) -> str | None:
        races = self._document.races

        base_key = find_key_loose(races, race_text)
        if base_key is not None:
            return base_key

        # "Halfling (Lightfoot)" -> "Halfling"
        before_paren = race_text.split("(")[0].strip()
        if before_paren and before_paren != race_text:
            base_key = find_key_loose(races, before_paren)
            if base_key is not None:
                return base_key

        # Bare subrace names only appear inside a base race's traits section
        for key, node in races.items():
            traits_section = find_traits_section(node)
            if find_key_loose(traits_section, race_text, skip=(CONTENT_KEY,)) is not None:
                return key
        return None

    def build_trait_index(self, base_key: str, subrace: str | None = None) -> dict[str, str]:
        """Merge base race traits with subrace traits; subrace entries win."""
        index: dict[str, str] = {}
        traits_section = find_traits_section(self._document.races.get(base_key, {}))
        if traits_section is None:
            return index

        index.update(extract_traits(traits_section.get(CONTENT_KEY)))

        if subrace:
            sub_key = find_key_loose(traits_section, subrace, skip=(CONTENT_KEY,))
            sub_node = traits_section.get(sub_key) if sub_key else None
            if isinstance(sub_node, dict):
                index.update(extract_traits(sub_node.get(CONTENT_KEY)))
            else:
                logger.debug(f"No subrace '{subrace}' under race '{base_key}'")
        return index

    def resolve_race_feature(self, race_text: str, feature_name: str) -> str | None:
        """Resolve a racial trait to its description text.

        Args:
            race_text: Race as displayed, e.g. "Halfling (Lightfoot)" or "Hill Dwarf"
            feature_name: Trait name, e.g. "Naturally Stealthy"

        Returns:
            Description text, or None when nothing matches
        """
        if not race_text or not feature_name:
            return None

        base_key = self._find_base_race(race_text)
        if base_key is None:
            logger.debug(f"No race matches '{race_text}'")
            return None

        index = self.build_trait_index(base_key, subrace_label(race_text, base_key))

        norm_target = normalize_key(feature_name.removesuffix("."))
        if not norm_target:
            return None

        normalized = [(name, normalize_key(name.removesuffix("."))) for name in index]
        for name, norm_name in normalized:
            if norm_name == norm_target:
                return index[name]
        for name, norm_name in normalized:
            if norm_name and (norm_target in norm_name or norm_name in norm_target):
                return index[name]

        logger.debug(f"No trait '{feature_name}' for race '{race_text}'")
        return None


__all__ = [
    "RaceFeatureResolver",
    "find_key_loose",
    "find_traits_section",
    "subrace_label",
]
