"""Request dependencies exposing the process-wide asset bundle."""

from fastapi import Request

from spa_server.assets import AssetTable


def get_assets(request: Request) -> AssetTable:
    """Dependency that returns the asset table built at startup."""
    return request.app.state.assets


def get_index_document(request: Request) -> str:
    """Dependency that returns the index document name (e.g. index.html)."""
    return request.app.state.index_document
