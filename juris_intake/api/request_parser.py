"""Request body parsing for submission intake.

Turns an incoming JSON or multipart request into client fields and file
parts for :class:`~juris_intake.services.IntakeService`.
"""
from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from starlette.datastructures import UploadFile

from ..core.constants import CLIENT_INFO_FORM_FIELD, JSON_FORM_FIELDS
from ..core.exceptions import MalformedFieldError, ValidationError
from ..services.intake import FilePart

if TYPE_CHECKING:
    from fastapi import Request

__all__ = ['ParsedSubmission', 'parse_submission', 'parse_json_body', 'parse_form_body']

type ParsedSubmission = tuple[dict[str, Any], list[FilePart]]

_FORM_CONTENT_TYPES = ('multipart/form-data', 'application/x-www-form-urlencoded')
_MAX_FORM_FILES = 64
_MAX_FORM_FIELDS = 256


async def parse_submission(request: Request, *, max_bytes: int) -> ParsedSubmission:
    """Parse a submission request by its content type.

    Form bodies (multipart or urlencoded) may carry files; anything else is
    read as a JSON object and carries none.
    """
    content_type = request.headers.get('content-type', '').lower()
    if content_type.startswith(_FORM_CONTENT_TYPES):
        return await parse_form_body(request, max_bytes=max_bytes)
    return await parse_json_body(request), []


async def parse_json_body(request: Request) -> dict[str, Any]:
    """Read a JSON object body; every key becomes a client field."""
    try:
        body = await request.json()
    except ValueError as exc:
        raise ValidationError(f'Corpo JSON inválido: {exc}') from exc

    if not isinstance(body, dict):
        raise ValidationError('O corpo da requisição deve ser um objeto JSON')
    return body


async def parse_form_body(request: Request, *, max_bytes: int) -> ParsedSubmission:
    """Read a form body into client fields and file parts.

    File contents are read up to one byte past ``max_bytes`` so oversized
    parts are detected without buffering them whole.
    """
    fields: dict[str, Any] = {}
    files: list[FilePart] = []

    form = await request.form(max_files=_MAX_FORM_FILES, max_fields=_MAX_FORM_FIELDS)
    try:
        for name, value in form.multi_items():
            if isinstance(value, UploadFile):
                if not value.filename:
                    continue
                content = await value.read(max_bytes + 1)
                files.append(
                    FilePart(
                        field_name=name,
                        filename=value.filename,
                        mime_type=value.content_type or 'application/octet-stream',
                        content=content,
                        size=value.size,
                    )
                )
            elif name == CLIENT_INFO_FORM_FIELD:
                decoded = _decode_json_field(name, value)
                if not isinstance(decoded, dict):
                    raise ValidationError(f'{name} deve ser um objeto JSON', field=name)
                fields.update(decoded)
            elif name in JSON_FORM_FIELDS:
                fields[name] = _decode_json_field(name, value)
            else:
                fields[name] = value
    finally:
        await form.close()
    return fields, files


def _decode_json_field(name: str, raw: str) -> Any:
    try:
        return json.loads(raw)
    except json.JSONDecodeError as exc:
        raise MalformedFieldError(name, str(exc)) from exc
