"""Submission store abstractions.

(c) Mike Casale 2025.
Licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations as _annotations

# Standard library (alphabetical)
from typing import Protocol

# Third-party (alphabetical)
import logfire

# Local imports (core first, then alphabetical)
from ..core.exceptions import SubmissionNotFoundError
from ..core.models import SubmissionRecord
from ..core.types import SubmissionId

__all__ = ("InMemorySubmissionStore", "SubmissionStore")


class SubmissionStore(Protocol):
    """Protocol for append-only submission stores."""

    def append(self, record: SubmissionRecord) -> SubmissionId:
        """Store a record and return its positional identifier."""
        ...

    def list(self) -> tuple[SubmissionRecord, ...]:
        """Return every record in insertion order."""
        ...

    def get_by_index(self, index: SubmissionId) -> SubmissionRecord:
        """Return the record at a positional identifier."""
        ...

    def __len__(self) -> int: ...


class InMemorySubmissionStore:
    """Append-only submission log kept for the lifetime of the process.

    Records are never changed or removed, so a record's position is a stable
    identifier. Readers get deep copies, since the client fields and document
    mappings inside a frozen record are still plain dicts. Nothing is
    persisted; a restart starts from an empty store.
    """

    def __init__(self) -> None:
        self._records: list[SubmissionRecord] = []

    def __len__(self) -> int:
        return len(self._records)

    def append(self, record: SubmissionRecord) -> SubmissionId:
        """Store a record at the end of the log and return its index."""
        self._records.append(record.model_copy(deep=True))
        index = len(self._records) - 1
        logfire.debug("submission_appended", index=index)
        return index

    def list(self) -> tuple[SubmissionRecord, ...]:
        """Return a snapshot of every record in insertion order."""
        return tuple(record.model_copy(deep=True) for record in self._records)

    def get_by_index(self, index: SubmissionId) -> SubmissionRecord:
        """Return the record at ``index``.

        Raises:
            SubmissionNotFoundError: If ``index`` is outside ``[0, len)``.
        """
        if not 0 <= index < len(self._records):
            raise SubmissionNotFoundError(index, len(self._records))
        return self._records[index].model_copy(deep=True)
