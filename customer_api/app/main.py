"""
Main entrypoint for the Customer API.

This module assembles the FastAPI application, sets up logging,
installs the error handlers and includes versioned routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``.  Importing the app here
makes it easy to run with uvicorn or another ASGI server, e.g.::

    uvicorn customer_api.app.main:app --port 8080

The MongoDB client is opened by the startup hook and closed by the
shutdown hook.  A store passed to ``create_app`` is used instead and
left open; the caller owns it.
"""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.concurrency import run_in_threadpool

from .core.config import Settings, settings as default_settings
from .core.db import CustomerStore, open_store
from .core.errors import install_error_handlers
from .core.logging_config import setup_logging
from .api.v1.router import router as v1_router

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[CustomerStore] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the process-wide settings
        read from the environment.
    store : Optional[CustomerStore]
        Pre-built store.  When omitted, a store is opened from
        ``settings`` at startup.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file or None, debug=settings.debug)

    # Without slash redirects ``/customer/`` is a plain 404 instead of a
    # redirect to the POST-only ``/customer`` route.
    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        redirect_slashes=False,
    )
    app.state.settings = settings
    app.state.store = store
    app.state.owns_store = False

    install_error_handlers(app)
    app.include_router(v1_router, prefix=settings.api_prefix)

    @app.on_event("startup")
    async def startup_event() -> None:
        if app.state.store is None:
            app.state.store = await run_in_threadpool(open_store, settings)
            app.state.owns_store = True
        logger.info("%s %s started", settings.project_name, settings.api_version)

    @app.on_event("shutdown")
    async def shutdown_event() -> None:
        if app.state.owns_store and app.state.store is not None:
            await run_in_threadpool(app.state.store.close)
            app.state.store = None
            app.state.owns_store = False

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
