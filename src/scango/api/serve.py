"""API server for ``scango``.

Builds the FastAPI application (CORS + ``/api/v1/`` routers) and runs it
under uvicorn.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def create_api_app():
    """Build the FastAPI application."""
    from fastapi import FastAPI
    from fastapi.middleware.cors import CORSMiddleware

    from scango import __version__
    from scango.api.v1 import mount_v1_routers
    from scango.config import get_settings

    app = FastAPI(
        title="Scan & Go API",
        description="Shopify install handshake, product lookup, baskets and unpaid orders.",
        version=__version__,
        docs_url="/api/v1/docs",
        redoc_url="/api/v1/redoc",
        openapi_url="/api/v1/openapi.json",
    )

    # Browser pages and the Shopify dev console call the order endpoint.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=get_settings().cors_origins,
        allow_credentials=False,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "x-device-key"],
        max_age=86400,
    )

    mount_v1_routers(app)
    return app


def run_api_server(host: str = "127.0.0.1", port: int = 8000, dev: bool = False) -> None:
    """Start the API server."""
    import uvicorn

    logger.info("Scan & Go API on http://%s:%d/api/v1/docs", host, port)
    if dev:
        import pathlib

        src_dir = str(pathlib.Path(__file__).resolve().parent.parent)
        uvicorn.run(
            "scango.api.serve:create_api_app",
            factory=True,
            host=host,
            port=port,
            reload=True,
            reload_dirs=[src_dir],
            reload_includes=["*.py"],
            log_level="debug",
        )
    else:
        uvicorn.run(create_api_app(), host=host, port=port)
