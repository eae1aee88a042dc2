"""Core domain types, settings and errors for Juris Intake.

(c) Mike Casale 2025.
Licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations as _annotations

# =============================================================================
# Section 1: Imports
# =============================================================================
# Local imports (core first, then alphabetical)
from .exceptions import (
    AttachmentNotFoundError,
    InternalError,
    JurisIntakeError,
    MalformedFieldError,
    NotFoundError,
    PayloadTooLargeError,
    SubmissionNotFoundError,
    UnsupportedMediaTypeError,
    ValidationError,
    classify_error,
)
from .models import AttachmentRef, ErrorResponse, SubmissionRecord, SubmissionResponse
from .settings import IntakeSettings, get_settings

# =============================================================================
# Section 2: Module Exports
# =============================================================================
__all__ = (
    "AttachmentNotFoundError",
    "AttachmentRef",
    "ErrorResponse",
    "IntakeSettings",
    "InternalError",
    "JurisIntakeError",
    "MalformedFieldError",
    "NotFoundError",
    "PayloadTooLargeError",
    "SubmissionNotFoundError",
    "SubmissionRecord",
    "SubmissionResponse",
    "UnsupportedMediaTypeError",
    "ValidationError",
    "classify_error",
    "get_settings",
)
