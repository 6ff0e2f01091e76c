"""
Trait extraction from race trait paragraphs.

Race documents store traits as prose paragraphs that open with a bolded
header, e.g. ``"***Darkvision.*** You can see in dim light..."``. This module
turns such a paragraph list into a trait name -> description mapping.
"""

import re
from typing import Any

# ***Header.*** Description; the description may span several lines
_BOLD_HEADER_RE = re.compile(r"^\*\*\*(.+?)\.?\*\*\*\s*([\s\S]*)$")


def parse_trait_paragraph(text: str) -> tuple[str, str] | None:
    """Split a bolded-header paragraph into (name, description).

    Returns None for paragraphs without a leading bolded header. An empty
    description falls back to the whole paragraph.

    Example:
        >>> parse_trait_paragraph("***Darkvision.*** You can see in the dark.")
        ('Darkvision', 'You can see in the dark.')
    """
    match = _BOLD_HEADER_RE.match(text)
    if not match:
        return None
    name = match.group(1).strip()
    description = match.group(2).strip()
    return name, description or text.strip()


def extract_traits(content: Any) -> dict[str, str]:
    """Build a trait name -> description mapping from a traits section's content.

    Entries are handled by shape:
    - strings are parsed as bolded-header paragraphs; connective prose
      without a header is skipped
    - nested lists have their string members joined with newlines first
    - anything else (tables, objects) is ignored

    Args:
        content: The ``content`` value of a traits section, usually a list

    Returns:
        Mapping in document order; later duplicates replace earlier ones
    """
    traits: dict[str, str] = {}
    if not content:
        return traits

    items = content if isinstance(content, list) else [content]
    for item in items:
        if isinstance(item, str):
            text = item
        elif isinstance(item, list):
            text = "\n".join(part for part in item if isinstance(part, str))
        else:
            continue

        parsed = parse_trait_paragraph(text)
        if parsed:
            name, description = parsed
            traits[name] = description
    return traits


__all__ = [
    "extract_traits",
    "parse_trait_paragraph",
]
