"""Shared test fixtures and helpers for Juris Intake tests.

(c) Mike Casale 2025.
Licensed under the MIT License.
"""

from __future__ import annotations as _annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING, Any

import logfire
import pytest
from fastapi.testclient import TestClient

from juris_intake.api import create_app
from juris_intake.core.settings import IntakeSettings
from juris_intake.services import FilePart, IntakeService
from juris_intake.store import AttachmentStore, InMemorySubmissionStore

if TYPE_CHECKING:
    from collections.abc import Iterator

    from fastapi import FastAPI

__all__ = ("TestEnv", "MAX_TEST_UPLOAD_BYTES", "PDF_BYTES")

MAX_TEST_UPLOAD_BYTES = 1024
PDF_BYTES = b"%PDF-1.4\n1 0 obj<<>>endobj\ntrailer<<>>\n%%EOF\n"


class TestEnv:
    """Helper for managing environment variables in tests."""

    __test__ = False  # Prevent pytest from collecting this class

    def __init__(self) -> None:
        self.envars: dict[str, str | None] = {}

    def set(self, name: str, value: str) -> None:
        """Set an environment variable, saving the original value."""
        self.envars.setdefault(name, os.getenv(name))
        os.environ[name] = value

    def remove(self, name: str) -> None:
        """Remove an environment variable, saving the original value."""
        self.envars.setdefault(name, os.getenv(name))
        os.environ.pop(name, None)

    def reset(self) -> None:
        """Reset all modified environment variables to original values."""
        for name, value in self.envars.items():
            if value is None:
                os.environ.pop(name, None)
            else:
                os.environ[name] = value


@pytest.fixture(scope="session", autouse=True)
def _quiet_logfire() -> None:
    """Keep telemetry local and silent during tests."""
    logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture
def env() -> Iterator[TestEnv]:
    """Fixture for managing environment variables in tests."""
    test_env = TestEnv()
    yield test_env
    test_env.reset()


@pytest.fixture(scope="session")
def anyio_backend() -> str:
    """Use asyncio as the async backend."""
    return "asyncio"


# Storage fixtures


@pytest.fixture
def upload_dir(tmp_path: Path) -> Path:
    """Upload directory that does not exist until the first save."""
    return tmp_path / "uploads"


@pytest.fixture
def settings(upload_dir: Path) -> IntakeSettings:
    """Settings isolated from the environment and ``.env`` files."""
    return IntakeSettings(
        _env_file=None,
        upload_dir=upload_dir,
        max_upload_bytes=MAX_TEST_UPLOAD_BYTES,
        environment="test",
    )


@pytest.fixture
def submission_store() -> InMemorySubmissionStore:
    """Provide an empty submission store."""
    return InMemorySubmissionStore()


@pytest.fixture
def attachment_store(upload_dir: Path) -> AttachmentStore:
    """Provide an attachment store writing under a temporary directory."""
    return AttachmentStore(upload_dir, max_bytes=MAX_TEST_UPLOAD_BYTES)


@pytest.fixture
def intake_service(submission_store: InMemorySubmissionStore, attachment_store: AttachmentStore) -> IntakeService:
    """Provide an intake service over the test stores."""
    return IntakeService(submission_store, attachment_store)


@pytest.fixture
def app(
    settings: IntakeSettings,
    submission_store: InMemorySubmissionStore,
    attachment_store: AttachmentStore,
) -> FastAPI:
    """Create the application over the test stores."""
    return create_app(settings, submissions=submission_store, attachments=attachment_store)


@pytest.fixture
def client(app: FastAPI) -> Iterator[TestClient]:
    """Create a test client for the FastAPI app."""
    with TestClient(app) as test_client:
        yield test_client


# Mock data fixtures


@pytest.fixture
def client_fields() -> dict[str, Any]:
    """Minimal valid client fields."""
    return {"nome": "Ana", "email": "a@x.com", "telefone": "123"}


@pytest.fixture
def pdf_part() -> FilePart:
    """A small PDF file part for the identity document field."""
    return FilePart(
        field_name="identidade_rg",
        filename="rg.pdf",
        mime_type="application/pdf",
        content=PDF_BYTES,
    )


@pytest.fixture
def pdf_bytes() -> bytes:
    """Content of a tiny PDF document."""
    return PDF_BYTES


@pytest.fixture
def max_upload_bytes() -> int:
    """Upload size limit used by the test stores."""
    return MAX_TEST_UPLOAD_BYTES
