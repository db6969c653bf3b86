"""FastAPI application entry point with CORS, the demo API and the SPA bundle."""

import logging
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from spa_server.assets import AssetTable
from spa_server.config import settings
from spa_server.routers import frontend, hello

logger = logging.getLogger(__name__)


def create_app(
    assets: Optional[AssetTable] = None,
    index_document: Optional[str] = None,
) -> FastAPI:
    """
    Build the application around an asset table.

    - ``assets`` defaults to the build output in ``settings.ASSETS_DIR``,
      loaded once here and shared read-only by every request.
    - ``index_document`` defaults to ``settings.INDEX_DOCUMENT``.
    """
    if assets is None:
        assets = AssetTable.from_directory(settings.assets_path)
    if index_document is None:
        index_document = settings.INDEX_DOCUMENT

    if len(assets) and index_document not in assets:
        logger.warning(f"Index document {index_document} not in bundle, client routes will 404")

    # Docs routes are disabled: every path except /hello belongs to the bundle
    app = FastAPI(
        title="SPA Server",
        description="Serves a bundled single-page application and a demo JSON endpoint.",
        version="1.0.0",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.assets = assets
    app.state.index_document = index_document

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=settings.CORS_METHODS,
    )

    if "*" in settings.CORS_ORIGINS:
        # CORSMiddleware only answers requests that carry an Origin header
        @app.middleware("http")
        async def allow_any_origin(request: Request, call_next):
            response = await call_next(request)
            response.headers.setdefault("Access-Control-Allow-Origin", "*")
            return response

    # API routes first, the catch-all bundle route last
    app.include_router(hello.router)
    app.include_router(frontend.router)

    return app


app = create_app()


def run() -> None:
    """Serve ``app`` on the configured address until interrupted."""
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info(f"listening on {settings.HOST}:{settings.PORT}")
    # A bind failure is fatal: uvicorn logs it and exits non-zero
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
