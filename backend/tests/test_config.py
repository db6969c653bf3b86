"""Tests for settings defaults and environment overrides."""

from pathlib import Path

from spa_server import config
from spa_server.config import Settings


def test_defaults(monkeypatch):
    for name in ("HOST", "PORT", "ASSETS_DIR", "INDEX_DOCUMENT", "CORS_ORIGINS", "CORS_METHODS"):
        monkeypatch.delenv(f"SPA_{name}", raising=False)
    s = Settings(_env_file=None)
    assert s.HOST == "127.0.0.1"
    assert s.PORT == 3000
    assert s.INDEX_DOCUMENT == "index.html"
    assert s.CORS_ORIGINS == ["*"]
    assert s.CORS_METHODS == ["GET", "POST"]
    assert s.assets_path == Path(s.ASSETS_DIR)
    assert s.assets_path.parts[-2:] == ("frontend", "dist")


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("SPA_PORT", "8080")
    monkeypatch.setenv("SPA_INDEX_DOCUMENT", "app.html")
    s = Settings(_env_file=None)
    assert s.PORT == 8080
    assert s.INDEX_DOCUMENT == "app.html"


def test_relative_assets_dir_is_made_absolute(monkeypatch):
    monkeypatch.setenv("SPA_ASSETS_DIR", "build/public")
    s = config._build_settings()
    assert Path(s.ASSETS_DIR).is_absolute()
    assert s.ASSETS_DIR == str(config._PROJECT_DIR / "build" / "public")
