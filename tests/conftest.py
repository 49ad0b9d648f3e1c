"""
Shared pytest fixtures.
"""

from pathlib import Path
from typing import Generator

import pytest
from fastapi.testclient import TestClient

from deploydemo.config import ServerSettings
from deploydemo.server.app import create_app

INDEX_HTML = "<!doctype html><html><body><div id='root'>spa entry</div></body></html>"


@pytest.fixture
def api_settings() -> ServerSettings:
    return ServerSettings(environment="development")


@pytest.fixture
def static_dir(tmp_path: Path) -> Path:
    root = tmp_path / "static"
    (root / "assets").mkdir(parents=True)
    (root / "index.html").write_text(INDEX_HTML, encoding="utf-8")
    (root / "app.js").write_text("console.log('app');", encoding="utf-8")
    (root / "assets" / "site.css").write_text("body { margin: 0; }", encoding="utf-8")
    (tmp_path / "secret.txt").write_text("outside static dir", encoding="utf-8")
    return root


@pytest.fixture
def combined_settings(static_dir: Path) -> ServerSettings:
    return ServerSettings(environment="production", static_dir=static_dir)


@pytest.fixture
def client(api_settings: ServerSettings) -> Generator[TestClient, None, None]:
    with TestClient(create_app(api_settings)) as c:
        yield c


@pytest.fixture
def combined_client(combined_settings: ServerSettings) -> Generator[TestClient, None, None]:
    with TestClient(create_app(combined_settings)) as c:
        yield c
