"""
Main entrypoint for the Certification Coaching API.

This module assembles the FastAPI application: logging, CORS, the
error envelope handlers, the JSON record store and the ``/api``
routes.  The ``create_app`` function builds and configures the app,
which is then instantiated at module import time as ``app``.
Importing the app here makes it easy to run with uvicorn or another
ASGI server, e.g.::

    uvicorn coaching_api.app.main:app --port 3000

``run.py`` at the project root does the same using the configured
host and port.
"""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.router import router as api_router
from .core.config import Settings, settings as default_settings
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .core.store import InquiryStore, get_data_path

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the module‑level settings
        read from the environment; tests pass their own instance to
        point the store at a temporary file.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.settings = settings
    app.state.store = InquiryStore(get_data_path(settings))

    # Registered first so that CORSMiddleware (added last, outermost) also
    # covers the generic 500 responses.
    register_exception_handlers(app)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(api_router, prefix="/api")

    @app.on_event("startup")
    async def startup_event() -> None:
        # Create the data file on first start so that reads find a valid document.
        app.state.store.initialize()
        logger.info("Inquiries stored in %s", app.state.store.path)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
