"""
Configuration for locating reference documents.
"""

import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field

CLASSES_PATH_ENV = "REFCODEX_CLASSES_PATH"
FEATURES_PATH_ENV = "REFCODEX_FEATURES_PATH"
RACES_PATH_ENV = "REFCODEX_RACES_PATH"
LOG_LEVEL_ENV = "REFCODEX_LOG_LEVEL"


class ReferenceConfig(BaseModel):
    """Where the reference documents live and how verbosely to log.

    Attributes:
        classes_path: Class description document (class -> title -> text)
        features_path: Class feature document
        races_path: Race document
        log_level: Logging level name
    """
    classes_path: Path | None = Field(default=None, description="Class description document")
    features_path: Path | None = Field(default=None, description="Class feature document")
    races_path: Path | None = Field(default=None, description="Race document")
    log_level: str = Field(default="INFO", description="Logging level name")

    @classmethod
    def from_env(cls, load_env_file: bool = True) -> "ReferenceConfig":
        """Build configuration from environment variables.

        Args:
            load_env_file: Read a ``.env`` file into the environment first

        Unset or empty variables leave the corresponding document unconfigured.
        """
        if load_env_file:
            load_dotenv()

        def _path(name: str) -> Path | None:
            value = os.getenv(name, "").strip()
            return Path(value) if value else None

        return cls(
            classes_path=_path(CLASSES_PATH_ENV),
            features_path=_path(FEATURES_PATH_ENV),
            races_path=_path(RACES_PATH_ENV),
            log_level=os.getenv(LOG_LEVEL_ENV, "INFO").strip().upper() or "INFO",
        )


__all__ = [
    "ReferenceConfig",
    "CLASSES_PATH_ENV",
    "FEATURES_PATH_ENV",
    "RACES_PATH_ENV",
    "LOG_LEVEL_ENV",
]
