"""Record and file stores for Juris Intake.

(c) Mike Casale 2025.
Licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations as _annotations

# =============================================================================
# Section 1: Imports
# =============================================================================
# Local imports (core first, then alphabetical)
from .attachments import AttachmentStore, generate_stored_name, normalize_mime_type
from .submissions import InMemorySubmissionStore, SubmissionStore

# =============================================================================
# Section 2: Module Exports
# =============================================================================
__all__ = (
    "AttachmentStore",
    "InMemorySubmissionStore",
    "SubmissionStore",
    "generate_stored_name",
    "normalize_mime_type",
)
