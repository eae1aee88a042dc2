"""Module-level constants for Juris Intake.

All constants are declared with Final type annotation for immutability
and IDE support.
"""
from __future__ import annotations

from typing import Final

# =============================================================================
# Section 1: Module Exports
# =============================================================================
__all__ = [
    # Server
    'DEFAULT_HOST',
    'DEFAULT_PORT',
    'DOCS_URL',
    'SERVICE_NAME',
    'API_TITLE',
    'API_DESCRIPTION',
    # Storage
    'DEFAULT_UPLOAD_DIR',
    'MAX_UPLOAD_BYTES',
    'PDF_MIME_TYPE',
    'DEFAULT_ALLOWED_MIME_TYPES',
    'DEFAULT_EXTENSION',
    'RANDOM_SUFFIX_BYTES',
    # Intake
    'REQUIRED_CLIENT_FIELDS',
    'SINGLE_DOCUMENT_FIELDS',
    'MULTI_DOCUMENT_FIELDS',
    'DOCUMENT_FIELDS',
    'MAX_FILES_PER_MULTI_FIELD',
    'JSON_FORM_FIELDS',
    'CLIENT_INFO_FORM_FIELD',
    'SUCCESS_MESSAGE',
]

# =============================================================================
# Section 2: Server Constants
# =============================================================================
DEFAULT_HOST: Final[str] = '0.0.0.0'
DEFAULT_PORT: Final[int] = 3000
DOCS_URL: Final[str] = '/api-docs'
SERVICE_NAME: Final[str] = 'juris-intake'
API_TITLE: Final[str] = 'API de Orçamentos Jurídicos'
API_DESCRIPTION: Final[str] = 'API para envio e recebimento de orçamentos de processos jurídicos'

# =============================================================================
# Section 3: Storage Constants
# =============================================================================
DEFAULT_UPLOAD_DIR: Final[str] = 'uploads'
MAX_UPLOAD_BYTES: Final[int] = 10 * 1024 * 1024  # 10 MiB
PDF_MIME_TYPE: Final[str] = 'application/pdf'
DEFAULT_ALLOWED_MIME_TYPES: Final[frozenset[str]] = frozenset({PDF_MIME_TYPE})
DEFAULT_EXTENSION: Final[str] = '.pdf'
RANDOM_SUFFIX_BYTES: Final[int] = 6

# =============================================================================
# Section 4: Intake Constants
# =============================================================================
REQUIRED_CLIENT_FIELDS: Final[tuple[str, ...]] = ('nome', 'email', 'telefone')

SINGLE_DOCUMENT_FIELDS: Final[frozenset[str]] = frozenset({
    'identidade_rg',
    'cpf',
    'titulo_eleitor',
    'pis_pasep_nit',
    'comprovante_residencia',
    'carteira_trabalho',
    'contrato_trabalho',
    'comunicacao_demissao',
    'recibos_ferias_13',
    'comprovante_fgts',
    'comprovante_horas_extras',
    'adicional_noturno',
    'avisos_previos',
    'comprovante_desvio_funcao',
})

MULTI_DOCUMENT_FIELDS: Final[frozenset[str]] = frozenset({
    'holerites',
    'comprovantes_pagamento',
    'provas_adicionais',
})

DOCUMENT_FIELDS: Final[frozenset[str]] = SINGLE_DOCUMENT_FIELDS | MULTI_DOCUMENT_FIELDS
MAX_FILES_PER_MULTI_FIELD: Final[int] = 10

# Multipart text parts that carry JSON-encoded values
JSON_FORM_FIELDS: Final[frozenset[str]] = frozenset({'testemunhas', 'dadosCliente'})
CLIENT_INFO_FORM_FIELD: Final[str] = 'dadosCliente'

SUCCESS_MESSAGE: Final[str] = 'Documentos recebidos com sucesso!'
