"""Tests for serving the built frontend bundle."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from riskcalc.api import system
from riskcalc.main import mount_frontend


@pytest.fixture
def dist(tmp_path):
    root = tmp_path / "dist"
    (root / "assets").mkdir(parents=True)
    (root / "index.html").write_text("<html>calculator</html>")
    (root / "favicon.ico").write_text("icon")
    (root / "assets" / "app.js").write_text("console.log('app')")
    return root


@pytest.fixture
def client(dist):
    app = FastAPI()
    app.include_router(system.router)
    mount_frontend(app, dist)
    return TestClient(app)


def test_assets_are_served(client):
    resp = client.get("/assets/app.js")
    assert resp.status_code == 200
    assert resp.text == "console.log('app')"


def test_root_file_is_served(client):
    assert client.get("/favicon.ico").text == "icon"


def test_unknown_path_falls_back_to_index(client):
    resp = client.get("/history/abc")
    assert resp.status_code == 200
    assert resp.text == "<html>calculator</html>"


def test_api_routes_take_precedence(client):
    assert client.get("/api/system/health").json() == {"status": "ok"}
