"""Catch-all route serving the bundled single-page application."""

from fastapi import APIRouter, Depends

from spa_server.assets import AssetTable
from spa_server.dependencies import get_assets, get_index_document
from spa_server.resolver import resolve_static

router = APIRouter(tags=["Frontend"])

# Every method falls through to the bundle, as long as no API route claims it
_ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


@router.api_route("/", methods=_ALL_METHODS, include_in_schema=False)
async def spa_root(
    assets: AssetTable = Depends(get_assets),
    index_name: str = Depends(get_index_document),
):
    return resolve_static(assets, "", index_name)


@router.api_route("/{full_path:path}", methods=_ALL_METHODS, include_in_schema=False)
async def spa_fallback(
    full_path: str,
    assets: AssetTable = Depends(get_assets),
    index_name: str = Depends(get_index_document),
):
    """Bundled file, index document for client-side routes, or 404."""
    return resolve_static(assets, full_path, index_name)
