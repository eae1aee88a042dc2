"""Service settings configuration.

(c) Mike Casale 2025.
Licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations as _annotations

# =============================================================================
# Section 1: Imports
# =============================================================================
# Standard library (alphabetical)
from functools import lru_cache
from pathlib import Path
from typing import Final, Literal

# Third-party (alphabetical)
from pydantic import Field, PositiveInt
from pydantic_settings import BaseSettings, SettingsConfigDict

# Local imports (core first, then alphabetical)
from .constants import (
    DEFAULT_ALLOWED_MIME_TYPES,
    DEFAULT_HOST,
    DEFAULT_PORT,
    DEFAULT_UPLOAD_DIR,
    DOCS_URL,
    MAX_UPLOAD_BYTES,
)

# =============================================================================
# Section 2: Module Exports
# =============================================================================
__all__ = ("IntakeSettings", "get_settings", "ENV_PREFIX")

# =============================================================================
# Section 3: Constants
# =============================================================================
ENV_PREFIX: Final[str] = "JURIS_INTAKE_"


# =============================================================================
# Section 11: Classes
# =============================================================================
class IntakeSettings(BaseSettings):
    """Runtime configuration loaded from the environment and ``.env``."""

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_file=".env",
        extra="ignore",
        validate_default=True,
    )

    environment: str = "development"
    host: str = DEFAULT_HOST
    port: PositiveInt = DEFAULT_PORT
    reload: bool = False

    upload_dir: Path = Path(DEFAULT_UPLOAD_DIR)
    max_upload_bytes: PositiveInt = MAX_UPLOAD_BYTES
    allowed_mime_types: frozenset[str] = Field(default=DEFAULT_ALLOWED_MIME_TYPES)

    cors_origins: list[str] = Field(default_factory=lambda: ["*"])
    docs_url: str = DOCS_URL

    send_to_logfire: bool | Literal["if-token-present"] = "if-token-present"


# =============================================================================
# Section 12: Functions
# =============================================================================
@lru_cache(maxsize=1)
def get_settings() -> IntakeSettings:
    """Load settings once per process."""
    return IntakeSettings()
