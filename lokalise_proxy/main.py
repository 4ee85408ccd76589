"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (one per bounded context)
- Error handlers (centralized domain-to-HTTP mapping)
- CORS edge middleware
- Logging configuration

No business logic belongs here.
"""

from fastapi import FastAPI

from lokalise_proxy.core.config import Settings, settings as default_settings
from lokalise_proxy.interfaces.lokalise.router import router as lokalise_router
from lokalise_proxy.shared.errors.handlers import register_error_handlers
from lokalise_proxy.shared.logging import configure_logging
from lokalise_proxy.shared.security.cors import CorsEdgeMiddleware


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, and the CORS middleware.
    This is the composition root of the application.

    Args:
        settings: Settings to run with. Defaults to the environment.

    Returns:
        A fully configured FastAPI application instance.
    """
    settings = settings or default_settings
    configure_logging(level=settings.log_level)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_url="/openapi.json" if settings.debug else None,
    )
    app.state.settings = settings

    # --- CORS Middleware ---
    app.add_middleware(CorsEdgeMiddleware, allow_origin=settings.allow_origin)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(lokalise_router)

    return app


app = create_app()
