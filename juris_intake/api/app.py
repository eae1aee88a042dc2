"""FastAPI application for submission intake.

Exposes quote submissions and their stored files to clients and staff.
"""
from __future__ import annotations

from typing import Any

import logfire
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse

from ..core.constants import API_DESCRIPTION, API_TITLE, DOCUMENT_FIELDS, REQUIRED_CLIENT_FIELDS
from ..core.exceptions import InternalError, JurisIntakeError, SubmissionNotFoundError, classify_error
from ..core.models import ErrorResponse, SubmissionRecord, SubmissionResponse
from ..core.settings import IntakeSettings, get_settings
from ..infra.instrumentation import Metrics
from ..services.intake import IntakeService
from ..store.attachments import AttachmentStore
from ..store.submissions import InMemorySubmissionStore, SubmissionStore
from .._version import __version__
from .request_parser import parse_submission

__all__ = ['create_app']

_ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: {'model': ErrorResponse, 'description': 'Campos obrigatórios ausentes ou tipo de arquivo inválido'},
    413: {'model': ErrorResponse, 'description': 'Arquivo acima do limite de tamanho'},
    500: {'model': ErrorResponse, 'description': 'Erro inesperado'},
}

_CLIENT_FIELDS_SCHEMA: dict[str, Any] = {
    'type': 'object',
    'required': list(REQUIRED_CLIENT_FIELDS),
    'properties': {name: {'type': 'string'} for name in REQUIRED_CLIENT_FIELDS},
    'additionalProperties': True,
}

_SUBMISSION_REQUEST_BODY: dict[str, Any] = {
    'requestBody': {
        'required': True,
        'content': {
            'application/json': {'schema': _CLIENT_FIELDS_SCHEMA},
            'multipart/form-data': {
                'schema': {
                    **_CLIENT_FIELDS_SCHEMA,
                    'properties': {
                        **_CLIENT_FIELDS_SCHEMA['properties'],
                        'testemunhas': {'type': 'string', 'description': 'Lista JSON de {nome, contato}'},
                        **{
                            name: {'type': 'array', 'items': {'type': 'string', 'format': 'binary'}}
                            for name in sorted(DOCUMENT_FIELDS)
                        },
                    },
                },
            },
        },
    },
}


def create_app(
    settings: IntakeSettings | None = None,
    *,
    submissions: SubmissionStore | None = None,
    attachments: AttachmentStore | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Stores are created here unless supplied, and live as long as the app.
    """
    settings = settings or get_settings()
    submissions = submissions if submissions is not None else InMemorySubmissionStore()
    attachments = attachments or AttachmentStore(
        settings.upload_dir,
        max_bytes=settings.max_upload_bytes,
        allowed_mime_types=settings.allowed_mime_types,
    )
    intake = IntakeService(submissions, attachments)

    app = FastAPI(
        title=API_TITLE,
        description=API_DESCRIPTION,
        version=__version__,
        docs_url=settings.docs_url,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=['*'],
        allow_headers=['*'],
    )

    @app.exception_handler(JurisIntakeError)
    async def handle_intake_error(request: Request, exc: JurisIntakeError) -> JSONResponse:
        return _error_response(request, exc)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        logfire.exception('unhandled_request_error', path=request.url.path, error=str(exc), _exc_info=exc)
        return _error_response(request, InternalError('Erro ao processar a requisição', context={'cause': str(exc)}))

    @app.get('/health')
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {'status': 'healthy'}

    @app.post(
        '/orcamento',
        summary='Enviar documentos para análise jurídica',
        response_model=SubmissionResponse,
        responses=_ERROR_RESPONSES,
        openapi_extra=_SUBMISSION_REQUEST_BODY,
    )
    async def submit_quote(request: Request) -> JSONResponse:
        """O usuário envia os dados e documentos necessários para um processo trabalhista.

        Accepts ``application/json`` (client fields only) or
        ``multipart/form-data`` (client fields plus PDF files keyed by
        document category).
        """
        fields, files = await parse_submission(request, max_bytes=attachments.max_bytes)
        origin_ip = request.client.host if request.client else None
        index, record = intake.submit(fields, files, origin_ip=origin_ip)
        return _json(SubmissionResponse(id=index, data=record))

    @app.get(
        '/orcamento',
        summary='Listar todos os documentos enviados',
        response_model=list[SubmissionRecord],
    )
    async def list_quotes() -> JSONResponse:
        """O advogado pode visualizar os documentos cadastrados pelos usuários."""
        return JSONResponse([record.model_dump(mode='json', by_alias=True) for record in intake.list()])

    @app.get(
        '/orcamento/{submission_id}',
        summary='Consultar um envio pelo identificador',
        response_model=SubmissionRecord,
        responses={404: {'model': ErrorResponse, 'description': 'Orçamento não encontrado'}},
    )
    async def get_quote(submission_id: str) -> JSONResponse:
        """Return one submission by its position in arrival order."""
        if not (submission_id.isascii() and submission_id.isdigit()):
            raise SubmissionNotFoundError(submission_id, len(submissions))
        return _json(intake.get(int(submission_id)))

    @app.get(
        '/pdf/{filename}',
        summary='Baixar um arquivo enviado',
        response_class=FileResponse,
        responses={404: {'model': ErrorResponse, 'description': 'Arquivo não encontrado'}},
    )
    async def download_attachment(filename: str) -> FileResponse:
        """Stream a stored file by its generated name."""
        path = attachments.resolve(filename)
        return FileResponse(path)

    return app


def _json(model: SubmissionResponse | SubmissionRecord) -> JSONResponse:
    return JSONResponse(model.model_dump(mode='json', by_alias=True))


def _error_response(request: Request, exc: JurisIntakeError) -> JSONResponse:
    kind, status_code = classify_error(exc)
    Metrics.record_rejection(kind, status_code, request.url.path)
    body = ErrorResponse(error=kind, message=exc.message, details=exc.context)
    return JSONResponse(body.model_dump(mode='json'), status_code=status_code)
