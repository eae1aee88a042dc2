"""Centralized instrumentation for Juris Intake.

(c) Mike Casale 2025.
Licensed under the MIT License.
"""

from __future__ import annotations as _annotations

# Standard library (alphabetical)
from functools import wraps
from typing import TYPE_CHECKING, ParamSpec, TypeVar

# Third-party (alphabetical)
import logfire

# Local imports (core first, then alphabetical)
from ..core.constants import SERVICE_NAME
from .logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable

    from fastapi import FastAPI

    from ..core.settings import IntakeSettings

P = ParamSpec("P")
"""Parameter specification for traced decorators."""

R = TypeVar("R")
"""Type variable for traced return values."""

__all__ = ("configure_instrumentation", "get_logger", "traced", "Metrics")


class Metrics:
    """Centralized metrics recording.

    Provides methods for recording intake events consistently across the
    application.
    """

    @staticmethod
    def record_submission(submission_id: int, attachment_count: int, origin_ip: str | None) -> None:
        """Record an accepted submission."""
        logfire.info(
            "submission_accepted",
            submission_id=submission_id,
            attachment_count=attachment_count,
            origin_ip=origin_ip,
        )

    @staticmethod
    def record_attachment(field: str, stored_name: str, size_bytes: int) -> None:
        """Record a file written to the attachment store."""
        logfire.info("attachment_stored", field=field, stored_name=stored_name, size_bytes=size_bytes)

    @staticmethod
    def record_rejection(kind: str, status_code: int, path: str) -> None:
        """Record a request rejected at the application boundary."""
        logfire.warn("request_rejected", kind=kind, status_code=status_code, path=path)


def configure_instrumentation(settings: IntakeSettings, *, app: FastAPI | None = None) -> None:
    """Configure global instrumentation settings.

    This function should be called once at application startup.

    Args:
        settings: Service settings providing environment and export mode.
        app: Application to instrument with request spans, when given.
    """
    logfire.configure(
        service_name=SERVICE_NAME,
        environment=settings.environment,
        send_to_logfire=settings.send_to_logfire,
    )
    if app is not None:
        logfire.instrument_fastapi(app)


# =============================================================================
# Span Decorators
# =============================================================================
def traced(name: str | None = None) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Run a function inside a logfire span named ``name``.

    Arguments and results are not recorded. A raised exception is tagged on
    the span and re-raised.
    """

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        span_name = name or f"{func.__module__}.{func.__qualname__}"

        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            with logfire.span(span_name) as span:
                try:
                    return func(*args, **kwargs)
                except Exception as e:
                    span.set_attribute("error_type", type(e).__name__)
                    raise

        return wrapper

    return decorator
