"""Service layer for Juris Intake."""
from __future__ import annotations

from .intake import FilePart, IntakeService, missing_client_fields

__all__ = ['FilePart', 'IntakeService', 'missing_client_fields']
