"""
Main application module for the room SVG export backend.

This file sets up the FastAPI application, configures CORS so browser
based viewers can call the API directly, registers the handler that
turns export errors into client errors and exposes a simple health
check endpoint.

The SVG router is included under the ``/api`` namespace.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .api.routes_svg import router as svg_router
from .services.errors import SvgExportError

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Factory to create and configure the FastAPI application.

    Returns:
        FastAPI: The configured FastAPI application instance.
    """
    app = FastAPI(title="roomsvg")

    # Allow all origins by default.  In production you should restrict
    # this to the domains that are allowed to access your API.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Malformed geometry is the caller's fault; report it as 422 with the
    # concrete error class so clients can tell the cases apart.
    @app.exception_handler(SvgExportError)
    async def export_error_handler(request: Request, exc: SvgExportError) -> JSONResponse:
        logger.warning("SVG export failed for %s: %s", request.url.path, exc)
        return JSONResponse(
            status_code=422,
            content={"detail": str(exc), "error": type(exc).__name__},
        )

    # Health check endpoint for monitoring and deployment probes.
    @app.get("/api/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    app.include_router(svg_router, prefix="/api", tags=["svg"])

    return app


# Create the application instance.  Uvicorn will import this when
# running `uvicorn roomsvg.main:app` from within the backend directory.
app = create_app()
