"""Exception hierarchy for Juris Intake.

(c) Mike Casale 2025.
Licensed under the MIT License.
"""

from __future__ import annotations as _annotations

# Standard library (alphabetical)
from typing import TYPE_CHECKING, Any, ClassVar

if TYPE_CHECKING:
    from .types import ErrorKind

__all__ = (
    'JurisIntakeError',
    'ValidationError',
    'UnsupportedMediaTypeError',
    'PayloadTooLargeError',
    'NotFoundError',
    'SubmissionNotFoundError',
    'AttachmentNotFoundError',
    'InternalError',
    'MalformedFieldError',
    'classify_error',
)


class JurisIntakeError(Exception):
    """Base exception for all Juris Intake errors.

    Every subclass carries an error kind and the HTTP status it is reported
    with, so the application boundary can render any of them uniformly.

    Attributes:
        context: Additional context for debugging and error bodies.
        kind: Error kind reported to clients.
        status_code: HTTP status used at the request boundary.
    """

    kind: ClassVar[ErrorKind] = 'internal'
    status_code: ClassVar[int] = 500

    def __init__(self, message: str, *, context: dict[str, Any] | None = None) -> None:
        self.message = message
        self.context = context or {}
        super().__init__(message)


# =============================================================================
# Request Exceptions
# =============================================================================
class ValidationError(JurisIntakeError):
    """Raised when required client fields or file parts are invalid."""

    kind: ClassVar[ErrorKind] = 'validation'
    status_code: ClassVar[int] = 400

    def __init__(self, message: str, *, missing_fields: list[str] | None = None, field: str | None = None) -> None:
        self.missing_fields = missing_fields or []
        self.field = field
        ctx: dict[str, Any] = {}
        if self.missing_fields:
            ctx['missing_fields'] = self.missing_fields
        if field is not None:
            ctx['field'] = field
        super().__init__(message, context=ctx)


class UnsupportedMediaTypeError(JurisIntakeError):
    """Raised when a file's media type is not accepted for its field."""

    kind: ClassVar[ErrorKind] = 'unsupported_media_type'
    status_code: ClassVar[int] = 400

    def __init__(self, field: str, mime_type: str, allowed: frozenset[str]) -> None:
        self.field = field
        self.mime_type = mime_type
        self.allowed = allowed
        super().__init__(
            f'Tipo de arquivo não permitido em {field}: {mime_type}',
            context={'field': field, 'mime_type': mime_type, 'allowed': sorted(allowed)},
        )


class PayloadTooLargeError(JurisIntakeError):
    """Raised when a file exceeds the configured size limit."""

    kind: ClassVar[ErrorKind] = 'payload_too_large'
    status_code: ClassVar[int] = 413

    def __init__(self, field: str, size: int, limit: int) -> None:
        self.field = field
        self.size = size
        self.limit = limit
        super().__init__(
            f'Arquivo em {field} excede o limite de {limit} bytes',
            context={'field': field, 'size': size, 'limit': limit},
        )


# =============================================================================
# Lookup Exceptions
# =============================================================================
class NotFoundError(JurisIntakeError):
    """Base exception for missing records and files."""

    kind: ClassVar[ErrorKind] = 'not_found'
    status_code: ClassVar[int] = 404


class SubmissionNotFoundError(NotFoundError):
    """Raised when a positional identifier is out of range."""

    def __init__(self, index: int | str, size: int) -> None:
        self.index = index
        self.size = size
        super().__init__(f'Orçamento não encontrado: {index}', context={'index': index, 'size': size})


class AttachmentNotFoundError(NotFoundError):
    """Raised when a stored file does not exist."""

    def __init__(self, stored_name: str) -> None:
        self.stored_name = stored_name
        super().__init__(f'Arquivo não encontrado: {stored_name}', context={'stored_name': stored_name})


# =============================================================================
# Internal Exceptions
# =============================================================================
class InternalError(JurisIntakeError):
    """Raised for unexpected failures reported as server errors."""


class MalformedFieldError(InternalError):
    """Raised when a JSON-encoded form field cannot be decoded."""

    def __init__(self, field: str, cause: str) -> None:
        self.field = field
        self.cause = cause
        super().__init__(f'Campo {field} contém JSON inválido', context={'field': field, 'cause': cause})


def classify_error(exc: Exception) -> tuple[ErrorKind, int]:
    """Map an exception to its error kind and HTTP status."""
    if isinstance(exc, JurisIntakeError):
        return exc.kind, exc.status_code
    return 'internal', 500
