"""Command-line entry point for Juris Intake.

(c) Mike Casale 2025.
Licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations as _annotations

# =============================================================================
# Section 1: Imports
# =============================================================================
# Third-party (alphabetical)
import logfire
import uvicorn

# Local imports (core first, then alphabetical)
from . import __version__
from .api import create_app
from .core.settings import get_settings
from .infra.instrumentation import configure_instrumentation

# =============================================================================
# Section 2: Module Exports
# =============================================================================
__all__ = ("app", "main")

settings = get_settings()
app = create_app(settings)


# =============================================================================
# Section 12: Functions
# =============================================================================
def main() -> None:
    """Run the intake server with settings from the environment."""
    configure_instrumentation(settings, app=app)

    base_url = f"http://{settings.host}:{settings.port}"
    logfire.info("server_starting", version=__version__, url=base_url, docs=f"{base_url}{settings.docs_url}")
    # Reload needs an import string; uvicorn re-imports the module in a worker.
    uvicorn.run(
        "juris_intake.__main__:app" if settings.reload else app,
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
    )


if __name__ == "__main__":
    main()
