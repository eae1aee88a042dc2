"""Disk-backed attachment storage.

(c) Mike Casale 2025.
Licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations as _annotations

# =============================================================================
# Section 1: Imports
# =============================================================================
# Standard library (alphabetical)
import re
import secrets
import time
from pathlib import Path, PureWindowsPath
from typing import TYPE_CHECKING, Final

# Third-party (alphabetical)
import logfire

# Local imports (core first, then alphabetical)
from ..core.constants import DEFAULT_ALLOWED_MIME_TYPES, DEFAULT_EXTENSION, MAX_UPLOAD_BYTES, RANDOM_SUFFIX_BYTES
from ..core.exceptions import AttachmentNotFoundError, PayloadTooLargeError, UnsupportedMediaTypeError
from ..core.models import AttachmentRef
from ..infra.instrumentation import Metrics

if TYPE_CHECKING:
    from collections.abc import Mapping

# =============================================================================
# Section 2: Module Exports
# =============================================================================
__all__ = ("AttachmentStore", "generate_stored_name", "normalize_mime_type")

# =============================================================================
# Section 3: Constants
# =============================================================================
_EXTENSION_PATTERN: Final[re.Pattern[str]] = re.compile(r"^\.[a-z0-9]{1,10}$")
_MAX_NAME_ATTEMPTS: Final[int] = 5


# =============================================================================
# Section 11: Classes
# =============================================================================
class AttachmentStore:
    """Persist uploaded files under generated names in one directory.

    Files are written once and never overwritten. The store keeps no index of
    what it holds; records reference files by their generated name.
    """

    def __init__(
        self,
        root: Path | str,
        *,
        max_bytes: int = MAX_UPLOAD_BYTES,
        allowed_mime_types: frozenset[str] = DEFAULT_ALLOWED_MIME_TYPES,
        field_mime_types: Mapping[str, frozenset[str]] | None = None,
    ) -> None:
        self._root = Path(root)
        self.max_bytes = max_bytes
        self._allowed_mime_types = frozenset(normalize_mime_type(m) for m in allowed_mime_types)
        self._field_mime_types = {
            field: frozenset(normalize_mime_type(m) for m in types)
            for field, types in (field_mime_types or {}).items()
        }

    @property
    def root(self) -> Path:
        """Directory holding the stored files."""
        return self._root

    def accepted_types(self, field_name: str) -> frozenset[str]:
        """Return the media types accepted for a field."""
        return self._field_mime_types.get(field_name, self._allowed_mime_types)

    def check(self, field_name: str, original_filename: str, mime_type: str, size: int) -> None:
        """Validate a file part without writing it.

        Raises:
            UnsupportedMediaTypeError: If the media type is not accepted for the field.
            PayloadTooLargeError: If ``size`` exceeds the configured limit.
        """
        accepted = self.accepted_types(field_name)
        if normalize_mime_type(mime_type) not in accepted:
            raise UnsupportedMediaTypeError(field_name, mime_type, accepted)
        if size > self.max_bytes:
            raise PayloadTooLargeError(field_name, size, self.max_bytes)

    def save(self, field_name: str, original_filename: str, mime_type: str, content: bytes) -> AttachmentRef:
        """Write a file part and return its metadata.

        Checks run before the directory is touched, so a rejected part leaves
        nothing on disk.
        """
        self.check(field_name, original_filename, mime_type, len(content))

        with logfire.span("attachments.save", field=field_name, original_name=original_filename):
            self._root.mkdir(parents=True, exist_ok=True)
            path = self._write_new(original_filename, content)

        Metrics.record_attachment(field_name, path.name, len(content))
        return AttachmentRef(
            original_name=original_filename,
            stored_name=path.name,
            mime_type=normalize_mime_type(mime_type),
            size_bytes=len(content),
            storage_path=str(path),
        )

    def resolve(self, stored_name: str) -> Path:
        """Return the path of a stored file for streaming.

        Raises:
            AttachmentNotFoundError: If no such file exists in the store.
        """
        root = self._root.resolve()
        try:
            candidate = (root / stored_name).resolve()
        except (OSError, ValueError):
            raise AttachmentNotFoundError(stored_name) from None
        if candidate.parent != root or not candidate.is_file():
            raise AttachmentNotFoundError(stored_name)
        return candidate

    def _write_new(self, original_filename: str, content: bytes) -> Path:
        for _ in range(_MAX_NAME_ATTEMPTS):
            path = self._root / generate_stored_name(original_filename)
            try:
                with path.open("xb") as handle:
                    handle.write(content)
            except FileExistsError:
                continue
            return path
        raise FileExistsError(f"Could not allocate a unique name for {original_filename!r} in {self._root}")


# =============================================================================
# Section 12: Functions
# =============================================================================
def generate_stored_name(original_filename: str) -> str:
    """Build a ``{timestamp_ms}-{random}{ext}`` name for an upload.

    The extension is taken from the client's filename when it looks sane and
    falls back to ``.pdf`` otherwise.
    """
    timestamp = time.time_ns() // 1_000_000
    suffix = secrets.token_hex(RANDOM_SUFFIX_BYTES)
    return f"{timestamp}-{suffix}{_extension_of(original_filename)}"


def normalize_mime_type(mime_type: str) -> str:
    """Strip parameters and case from a media type."""
    return mime_type.split(";", 1)[0].strip().lower()


def _extension_of(original_filename: str) -> str:
    # Client names may carry Windows paths; PureWindowsPath splits on both separators.
    suffix = PureWindowsPath(original_filename).suffix.lower()
    if _EXTENSION_PATTERN.match(suffix):
        return suffix
    return DEFAULT_EXTENSION
