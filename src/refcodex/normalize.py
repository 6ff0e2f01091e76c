"""
Key normalization for reference document lookups.

Reference documents are converted from tabular/markup sources, so their keys
carry page references, smart quotes and inconsistent casing. Every resolver
compares keys through the functions in this module instead of raw strings.
"""

import re

# Trailing parenthetical such as " (p.109)" or " (1 die)"
_TRAILING_PAREN_RE = re.compile(r"\s*\([^)]*\)\s*$")
# Apostrophes, backticks, straight/curly double quotes, colon, hyphen, em-dash
_PUNCTUATION_RE = re.compile(r"[\u2019'`\"\u201c\u201d:\-\u2014]")
_WHITESPACE_RE = re.compile(r"\s+")
_NON_SLUG_RE = re.compile(r"[^a-z0-9]+")

_PAGE_MARKER_RE = re.compile(r"\bpp?\.?\s*\d+$")
_ORDINAL_RE = re.compile(r"\b\d+(st|nd|rd|th)\b")
_INNER_PAREN_RE = re.compile(r"\b\(.*?\)\b")


def _normalize_once(text: str) -> str:
    text = text.lower()
    text = _TRAILING_PAREN_RE.sub("", text)
    text = _PUNCTUATION_RE.sub("", text)
    return _WHITESPACE_RE.sub(" ", text).strip()


def normalize_key(text: str | None) -> str:
    """Normalize text for case- and punctuation-insensitive key comparison.

    Lower-cases, strips a trailing parenthetical group, removes quote-like
    punctuation, colons and dashes, and collapses whitespace. The pass is
    repeated until the output is stable, so the function is idempotent even
    for keys like ``"Feature (a) (b)"``.

    Args:
        text: Raw key or identifier

    Returns:
        Normalized key, ``""`` for empty or missing input

    Example:
        >>> normalize_key("Rage (p.48)")
        'rage'
        >>> normalize_key("Channel Divinity: Turn Undead")
        'channel divinity turn undead'
    """
    if not text:
        return ""
    previous = text
    current = _normalize_once(text)
    while current != previous:
        previous, current = current, _normalize_once(current)
    return current


def slugify(text: str | None) -> str:
    """Convert text to a hyphen-joined slug for path segment matching.

    Example:
        >>> slugify("Path of the Berserker")
        'path-of-the-berserker'
    """
    if not text:
        return ""
    return _NON_SLUG_RE.sub("-", text.lower()).strip("-")


def normalize_feature_title(text: str | None) -> str:
    """Reduce a feature's display title to its base title.

    Strips page references, parenthetical suffixes and ordinal hints
    (``"2nd"``, ``"3rd"``) so the result can serve as a lookup key or a
    display label.

    Example:
        >>> normalize_feature_title("Extra Attack (p.49)")
        'extra attack'
    """
    title = normalize_key(text)
    title = _PAGE_MARKER_RE.sub("", title).strip()
    title = _ORDINAL_RE.sub("", title).strip()
    title = _INNER_PAREN_RE.sub("", title)
    return _WHITESPACE_RE.sub(" ", title).strip()


__all__ = [
    "normalize_key",
    "slugify",
    "normalize_feature_title",
]
