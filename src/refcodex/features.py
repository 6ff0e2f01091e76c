"""
Resolve class and subclass feature descriptions from a class feature document.

Tolerates minor name variations between callers and the document: page
references, parenthetical suffixes and punctuation differences.
"""

import json
import logging
from typing import Any

from pydantic import ValidationError

from .models import CLASS_FEATURES_KEY, ClassFeatureDocument, ContentBlock, ContentNode
from .normalize import normalize_feature_title, normalize_key

logger = logging.getLogger("refcodex")

# Shortest common prefix accepted when no key matches exactly
MIN_PREFIX_SCORE = 4

CHANNEL_DIVINITY_PREFIX = "Channel Divinity: "


def _common_prefix_length(a: str, b: str) -> int:
    length = 0
    for left, right in zip(a, b):
        if left != right:
            break
        length += 1
    return length


def find_key_ci(mapping: dict[str, Any] | None, target: str) -> str | None:
    """Find the key of ``mapping`` that best matches ``target``.

    Keys are compared by normalized form. An exact match wins; otherwise the
    key sharing the longest common prefix with the target is accepted if that
    prefix is at least MIN_PREFIX_SCORE characters long.

    Args:
        mapping: Mapping to search (anything that is not a dict never matches)
        target: Name to look for

    Returns:
        The matching key as it appears in the mapping, or None

    Example:
        >>> find_key_ci({"Rage (p.48)": "..."}, "rage")
        'Rage (p.48)'
        >>> find_key_ci({"Sentinel": "..."}, "Second Wind") is None
        True
    """
    if not isinstance(mapping, dict):
        return None

    norm_target = normalize_key(target)
    best_key: str | None = None
    best_score = -1

    for key in mapping:
        norm_key = normalize_key(key)
        if norm_key == norm_target:
            return key
        score = _common_prefix_length(norm_key, norm_target)
        if score > best_score:
            best_key, best_score = key, score

    if best_key is not None and best_score >= MIN_PREFIX_SCORE:
        return best_key
    return None


def _join_paragraphs(items: list[Any]) -> str:
    return "\n".join(item if isinstance(item, str) else json.dumps(item, ensure_ascii=False) for item in items)


def stringify_content(value: ContentNode | Any) -> str | None:
    """Render a content-bearing node as text.

    Strings are returned unchanged and lists are joined with newlines
    (non-string items JSON-encoded). Objects use their ``content`` field when
    it is text or a list; otherwise every other field except ``table`` is
    rendered recursively as ``"key: value"`` lines.

    Returns:
        The rendered text, or None when the node holds no text
    """
    if value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, list):
        return _join_paragraphs(value)
    if not isinstance(value, dict):
        return None

    try:
        block = ContentBlock.model_validate(value)
    except ValidationError:
        # Non-string keys; nothing addressable as content
        return None

    if isinstance(block.content, str):
        return block.content
    if isinstance(block.content, list):
        return _join_paragraphs(block.content)

    parts: list[str] = []
    for key, field_value in block.extra_fields.items():
        text = stringify_content(field_value)
        if text:
            parts.append(f"{key}: {text}")
    return "\n".join(parts) if parts else None


class ClassFeatureResolver:
    """Resolves feature descriptions for a class, optionally within a subclass.

    Subclass features take precedence over base class features with the same
    title. Feature names are also tried with the ``"Channel Divinity: "``
    prefix used by cleric and paladin feature titles.

    Example:
        >>> resolver = ClassFeatureResolver(document)
        >>> resolver.resolve_feature("Barbarian", "Frenzy", "Path of the Berserker")
        'Starting when you choose this path at 3rd level...'
    """

    def __init__(self, document: ClassFeatureDocument) -> None:
        self._document = document

    @property
    def document(self) -> ClassFeatureDocument:
        return self._document

    def _class_node(self, class_name: str) -> dict[str, Any] | None:
        class_key = find_key_ci(self._document.classes, class_name)
        if class_key is None:
            return None
        return self._document.classes[class_key]

    @staticmethod
    def _feature_bucket(class_node: dict[str, Any]) -> dict[str, Any]:
        class_features = class_node.get(CLASS_FEATURES_KEY)
        if isinstance(class_features, dict):
            return class_features
        return class_node

    @staticmethod
    def _lookup(bucket: Any, feature_name: str) -> str | None:
        """Look a feature up in a single bucket, with the Channel Divinity retry."""
        if not isinstance(bucket, dict):
            return None

        key = find_key_ci(bucket, feature_name)
        if key is not None:
            return stringify_content(bucket[key])

        key = find_key_ci(bucket, f"{CHANNEL_DIVINITY_PREFIX}{feature_name}")
        if key is not None:
            return stringify_content(bucket[key])
        return None

    def _lookup_subclass(
        self,
        class_node: dict[str, Any],
        bucket: dict[str, Any],
        subclass_name: str,
        feature_name: str,
    ) -> str | None:
        # Subclasses live in the feature bucket or next to it in the class node
        containers = [bucket] if bucket is class_node else [bucket, class_node]
        for container in containers:
            subclass_key = find_key_ci(container, subclass_name)
            if subclass_key is None:
                continue
            hit = self._lookup(container[subclass_key], feature_name)
            if hit:
                return hit
        return None

    def resolve_feature(
        self,
        class_name: str,
        feature_name: str,
        subclass_name: str | None = None,
    ) -> str | None:
        """Resolve a class or subclass feature to its description text.

        Args:
            class_name: Class display name in any casing (e.g., "fighter")
            feature_name: Feature title (e.g., "Second Wind (p.72)")
            subclass_name: Active subclass, searched before the base class

        Returns:
            Description text, or None when nothing matches
        """
        if not class_name or not feature_name:
            return None

        class_node = self._class_node(class_name)
        if class_node is None:
            logger.debug(f"No class matches '{class_name}'")
            return None
        bucket = self._feature_bucket(class_node)

        if subclass_name:
            hit = self._lookup_subclass(class_node, bucket, subclass_name, feature_name)
            if hit:
                return hit

        result = self._lookup(bucket, feature_name)
        if result is None:
            logger.debug(f"No feature matches '{feature_name}' for class '{class_name}'")
        return result

    @staticmethod
    def normalize_feature_title(raw_text: str) -> str:
        """Strip page references, parentheticals and ordinal hints from a title."""
        return normalize_feature_title(raw_text)


__all__ = [
    "ClassFeatureResolver",
    "find_key_ci",
    "stringify_content",
    "MIN_PREFIX_SCORE",
    "CHANNEL_DIVINITY_PREFIX",
]
