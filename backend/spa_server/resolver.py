"""Static path resolution for the single-page application.

Given the request path, decide between a bundled file, the index document
(client-side routes) and a 404.
"""

import logging

from fastapi.responses import PlainTextResponse, Response

from spa_server.assets import AssetTable

logger = logging.getLogger(__name__)

INDEX_MEDIA_TYPE = "text/html"


def not_found() -> Response:
    """The one 404 shape the server produces: plain text ``404``."""
    return PlainTextResponse("404", status_code=404)


def index_document(assets: AssetTable, index_name: str) -> Response:
    """Serve the SPA entry point, or 404 if the bundle has none."""
    entry = assets.get(index_name)
    if entry is None:
        logger.debug(f"Index document {index_name} missing from bundle")
        return not_found()
    return Response(content=entry.data, media_type=INDEX_MEDIA_TYPE)


def looks_like_file(path: str) -> bool:
    """A dotted path is treated as a file request, anything else as a route."""
    return "." in path


def resolve_static(assets: AssetTable, raw_path: str, index_name: str) -> Response:
    """Build the response for a non-API request path."""
    path = raw_path.lstrip("/")

    if not path or path == index_name:
        return index_document(assets, index_name)

    entry = assets.get(path)
    if entry is not None:
        logger.debug(f"Serving asset {path} ({entry.mime_type})")
        return Response(content=entry.data, media_type=entry.mime_type)

    if looks_like_file(path):
        logger.debug(f"No asset for {path}")
        return not_found()

    # Unknown route: let the client-side router handle it
    logger.debug(f"SPA fallback for /{path}")
    return index_document(assets, index_name)
