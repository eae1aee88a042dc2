"""Submission intake workflow for Juris Intake."""
from __future__ import annotations

from collections import Counter, defaultdict
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from ..core.constants import (
    DOCUMENT_FIELDS,
    MAX_FILES_PER_MULTI_FIELD,
    MULTI_DOCUMENT_FIELDS,
    REQUIRED_CLIENT_FIELDS,
)
from ..core.exceptions import ValidationError
from ..core.models import AttachmentRef, SubmissionRecord
from ..core.types import SubmissionId
from ..infra.instrumentation import Metrics, traced
from ..infra.logging import get_logger
from ..store.attachments import AttachmentStore
from ..store.submissions import SubmissionStore

__all__ = ['FilePart', 'IntakeService', 'missing_client_fields']

logger = get_logger('services.intake')


@dataclass(frozen=True, slots=True)
class FilePart:
    """One uploaded file read from a request."""

    field_name: str
    filename: str
    mime_type: str
    content: bytes = field(repr=False)
    size: int | None = None

    @property
    def declared_size(self) -> int:
        """Size reported by the client, falling back to the bytes read."""
        return self.size if self.size is not None else len(self.content)


class IntakeService:
    """Validate a submission, store its files and append its record.

    A rejected file part aborts the whole submission before anything is
    written, so no record and no file is left behind by a rejection.
    """

    def __init__(
        self,
        submissions: SubmissionStore,
        attachments: AttachmentStore,
        *,
        required_fields: Sequence[str] = REQUIRED_CLIENT_FIELDS,
    ) -> None:
        self.submissions = submissions
        self.attachments = attachments
        self.required_fields = tuple(required_fields)

    @traced('intake.submit')
    def submit(
        self,
        client_fields: Mapping[str, Any],
        files: Sequence[FilePart] = (),
        *,
        origin_ip: str | None = None,
    ) -> tuple[SubmissionId, SubmissionRecord]:
        """Accept one submission and return its identifier and record."""
        missing = missing_client_fields(client_fields, self.required_fields)
        if missing:
            raise ValidationError(
                f'Campos obrigatórios ausentes: {", ".join(missing)}',
                missing_fields=missing,
            )
        self._check_files(files)

        stored: defaultdict[str, list[AttachmentRef]] = defaultdict(list)
        for part in files:
            ref = self.attachments.save(part.field_name, part.filename, part.mime_type, part.content)
            stored[part.field_name].append(ref)

        record = SubmissionRecord(
            client_info=dict(client_fields),
            attachments={name: tuple(refs) for name, refs in stored.items()},
            submitted_at=datetime.now(timezone.utc),
            origin_ip=origin_ip,
        )
        index = self.submissions.append(record)
        Metrics.record_submission(index, record.attachment_count, origin_ip)
        return index, self.submissions.get_by_index(index)

    def list(self) -> tuple[SubmissionRecord, ...]:
        """Return every stored submission in arrival order."""
        return self.submissions.list()

    def get(self, index: SubmissionId) -> SubmissionRecord:
        """Return one submission by positional identifier."""
        return self.submissions.get_by_index(index)

    def _check_files(self, files: Sequence[FilePart]) -> None:
        counts = Counter(part.field_name for part in files)
        for name, count in counts.items():
            if name not in DOCUMENT_FIELDS:
                raise ValidationError(f'Campo de arquivo inesperado: {name}', field=name)
            limit = MAX_FILES_PER_MULTI_FIELD if name in MULTI_DOCUMENT_FIELDS else 1
            if count > limit:
                raise ValidationError(f'Máximo de {limit} arquivo(s) em {name}, recebidos {count}', field=name)

        for part in files:
            self.attachments.check(part.field_name, part.filename, part.mime_type, part.declared_size)
        logger.debug('intake_files_checked', file_count=len(files))


def missing_client_fields(client_fields: Mapping[str, Any], required: Sequence[str]) -> list[str]:
    """Return the required fields that are absent or blank."""
    missing = []
    for name in required:
        value = client_fields.get(name)
        if value is None or (isinstance(value, str) and not value.strip()):
            missing.append(name)
    return missing
