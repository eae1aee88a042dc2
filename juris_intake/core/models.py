"""Core domain models for Juris Intake.

These models represent submitted quote requests and the files attached to
them. Wire names follow the Portuguese keys the frontend already consumes,
exposed as aliases over English attribute names.

All models are immutable (frozen=True) to prevent accidental mutation of
stored records.
"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, computed_field

from .constants import SUCCESS_MESSAGE
from .types import ErrorKind

__all__ = [
    'AttachmentRef',
    'SubmissionRecord',
    'SubmissionResponse',
    'ErrorResponse',
]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# =============================================================================
# Attachment Models
# =============================================================================
class AttachmentRef(BaseModel):
    """Metadata for one uploaded file.

    Embedded by value in its submission. ``storage_path`` is a weak reference
    into the upload directory: removing the file does not touch the record.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        serialize_by_alias=True,
    )

    original_name: str = Field(
        ...,
        alias='nomeOriginal',
        description='Filename supplied by the client',
    )
    stored_name: str = Field(
        ...,
        alias='nomeArquivo',
        min_length=1,
        description='Generated unique filename in the upload directory',
    )
    mime_type: str = Field(
        ...,
        alias='tipo',
        description='Media type declared for the file part',
    )
    size_bytes: int = Field(
        ...,
        alias='tamanho',
        ge=0,
        description='File size in bytes',
    )
    storage_path: str = Field(
        ...,
        alias='caminho',
        description='Location of the stored file',
    )


# =============================================================================
# Submission Models
# =============================================================================
class SubmissionRecord(BaseModel):
    """One client's document package plus metadata.

    Once appended to the submission store a record is never changed; its
    position in the store is its identifier.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        serialize_by_alias=True,
    )

    client_info: dict[str, Any] = Field(
        default_factory=dict,
        alias='dadosCliente',
        description='Free-form client fields (nome, email, telefone, ...)',
    )
    attachments: dict[str, tuple[AttachmentRef, ...]] = Field(
        default_factory=dict,
        alias='documentos',
        description='Stored files grouped by document category',
    )
    submitted_at: datetime = Field(
        default_factory=_utcnow,
        alias='dataEnvio',
        description='When the submission was accepted',
    )
    origin_ip: str | None = Field(
        default=None,
        alias='ip',
        description="Caller's network address",
    )

    @computed_field(alias='totalDocumentos')
    @property
    def attachment_count(self) -> int:
        """Total number of attached files."""
        return sum(len(refs) for refs in self.attachments.values())

    def attachments_for(self, category: str) -> tuple[AttachmentRef, ...]:
        """Return the attachments stored under a category."""
        return self.attachments.get(category, ())


# =============================================================================
# Response Models
# =============================================================================
class SubmissionResponse(BaseModel):
    """Body returned after a successful submission."""

    model_config = ConfigDict(frozen=True)

    message: str = SUCCESS_MESSAGE
    id: int = Field(..., ge=0, description='Positional identifier of the new record')
    data: SubmissionRecord


class ErrorResponse(BaseModel):
    """Body returned for any failed request."""

    model_config = ConfigDict(frozen=True)

    error: ErrorKind
    message: str
    details: dict[str, Any] = Field(default_factory=dict)
