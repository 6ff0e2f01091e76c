"""
refcodex MCP server
Exposes reference description lookups as FastMCP tools.
"""

import logging
from typing import Annotated

from fastmcp import FastMCP
from pydantic import Field

from .config import ReferenceConfig
from .engine import ReferenceEngine
from .loader import DocumentLoadError

logger = logging.getLogger("refcodex")


def _build_engine(config: ReferenceConfig) -> ReferenceEngine:
    """Load the configured documents; the server still starts if that fails."""
    try:
        return ReferenceEngine.from_config(config)
    except DocumentLoadError as e:
        logger.error(f"❌ Failed to load reference documents: {e}")
        return ReferenceEngine()


config = ReferenceConfig.from_env()

logging.basicConfig(
    level=getattr(logging, config.log_level, logging.INFO),
    )

engine = _build_engine(config)
logger.debug("✅ Reference engine initialized")

mcp = FastMCP(
    name="refcodex"
)


def format_description(subject: str, description: str | None) -> str:
    """Render a lookup result for tool output."""
    if not description:
        return f"No description found for {subject}."
    return f"**{subject}**\n\n{description}"


def _describe_path_logic(reference_engine: ReferenceEngine, path: str) -> str:
    return format_description(path, reference_engine.resolve_path(path))


def _describe_class_feature_logic(
    reference_engine: ReferenceEngine,
    class_name: str,
    feature_name: str,
    subclass_name: str | None = None,
) -> str:
    """Feature document first, then the class description document."""
    description = reference_engine.resolve_feature(class_name, feature_name, subclass_name)
    if description is None:
        description = reference_engine.resolve_by_class_and_feature(class_name, feature_name)
    return format_description(f"{class_name}: {feature_name}", description)


def _describe_race_feature_logic(reference_engine: ReferenceEngine, race: str, feature_name: str) -> str:
    return format_description(f"{race}: {feature_name}", reference_engine.resolve_race_feature(race, feature_name))


@mcp.tool
def describe_path(
    path: Annotated[str, Field(description="Reference path, e.g. 'barbarian > path-of-the-berserker > frenzy'")]
) -> str:
    """Look up class description text by reference path."""
    return _describe_path_logic(engine, path)


@mcp.tool
def describe_class_feature(
    class_name: Annotated[str, Field(description="Class name, e.g. 'Fighter'")],
    feature_name: Annotated[str, Field(description="Feature title, e.g. 'Second Wind'")],
    subclass_name: Annotated[str | None, Field(description="Active subclass, searched first")] = None,
) -> str:
    """Look up a class or subclass feature description."""
    return _describe_class_feature_logic(engine, class_name, feature_name, subclass_name)


@mcp.tool
def describe_race_feature(
    race: Annotated[str, Field(description="Race as displayed, e.g. 'Halfling (Lightfoot)' or 'Hill Dwarf'")],
    feature_name: Annotated[str, Field(description="Trait name, e.g. 'Darkvision'")],
) -> str:
    """Look up a racial or subracial trait description."""
    return _describe_race_feature_logic(engine, race, feature_name)


@mcp.tool
def normalize_title(
    title: Annotated[str, Field(description="Feature title as displayed, e.g. 'Extra Attack (p.49)'")]
) -> str:
    """Strip page references, parentheticals and ordinal hints from a feature title."""
    return ReferenceEngine.normalize_feature_title(title)


def main() -> None:
    """Main entry point for the refcodex MCP server."""
    mcp.run()

if __name__ == "__main__":
    main()
