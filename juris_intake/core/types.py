"""Type aliases for Juris Intake.

(c) Mike Casale 2025.
Licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations as _annotations

# =============================================================================
# Section 1: Imports
# =============================================================================
# Standard library (alphabetical)
from typing import Literal

# Third-party (alphabetical)
from typing_extensions import TypeAliasType

# =============================================================================
# Section 2: Module Exports
# =============================================================================
__all__ = (
    "SubmissionId",
    "ErrorKind",
)

# =============================================================================
# Section 3: Type Aliases
# =============================================================================
type SubmissionId = int

ErrorKind = TypeAliasType(
    "ErrorKind",
    Literal[
        "validation",
        "unsupported_media_type",
        "payload_too_large",
        "not_found",
        "internal",
    ],
)
