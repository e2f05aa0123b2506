"""
Main entrypoint for the Warranty Checker API.

This module assembles the FastAPI application: it sets up logging,
registers the ajax actions and shortcodes on a ``Dispatcher``, mounts
the generated assets and includes the versioned routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn warranty_checker.app.main:app --reload
"""

from typing import Optional

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from .api.v1.endpoints.warranty import make_check_warranty_handler
from .api.v1.router import router as v1_router
from .core.assets import ensure_assets, get_assets_path
from .core.config import settings
from .core.db import init_db
from .core.hooks import Dispatcher
from .core.logging_config import setup_logging
from .services.form_service import SHORTCODE_TAG, render_warranty_form
from .services.warranty_service import WarrantyService


def register_handlers(dispatcher: Dispatcher, warranty_service: WarrantyService) -> None:
    """Attach the lookup handler and the form renderer to ``dispatcher``."""
    handler = make_check_warranty_handler(warranty_service)
    dispatcher.add_action("check_warranty", handler)
    dispatcher.add_shortcode(SHORTCODE_TAG, render_warranty_form)


def create_app(warranty_service: Optional[WarrantyService] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    warranty_service : Optional[WarrantyService]
        Service used by the lookup handler and the admin routes.  Defaults
        to one backed by the configured SQLite database.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Logging first, so startup registration below is logged.
    setup_logging()

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    app.state.warranty_service = warranty_service or WarrantyService()
    app.state.dispatcher = Dispatcher()
    register_handlers(app.state.dispatcher, app.state.warranty_service)

    app.include_router(v1_router, prefix="/api/v1")
    app.mount(
        "/assets",
        StaticFiles(directory=str(get_assets_path()), check_dir=False),
        name="assets",
    )

    @app.on_event("startup")
    async def startup_event() -> None:
        # Apply migrations and write missing assets.  Both steps are
        # idempotent.
        init_db()
        ensure_assets()

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
