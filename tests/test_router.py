"""Tests API — GET /widget/{slug}, /page, /embed-code, /catalog, POST /preview."""
from unittest.mock import MagicMock, patch
import pytest
import requests
from fastapi.testclient import TestClient

from testimania.renderer.html import EMPTY_MESSAGE, LOAD_FAILED_MESSAGE


@pytest.fixture
def client():
    from testimania.api.main import app
    with TestClient(app) as c:
        yield c


def fake_get(payload=None, error=None):
    resp = MagicMock()
    resp.json.return_value = payload
    return MagicMock(return_value=resp, side_effect=error)


# ── Fragment ──────────────────────────────────────────────────────────────────

def test_widget_fragment(client, records):
    with patch("testimania.loader.requests.get", fake_get(records)) as get:
        r = client.get("/widget/acme", params={"layout": "grid", "grid-columns": "2", "max-items": "3"})
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("text/html")
    assert "tm-layout-grid" in r.text
    assert "repeat(2, minmax(0, 1fr))" in r.text
    assert r.text.count('class="tm-card"') == 3
    assert get.call_args.kwargs["params"] == {"slug": "acme"}


def test_widget_fragment_load_failure(client):
    with patch("testimania.loader.requests.get", fake_get(error=requests.ConnectionError("down"))):
        r = client.get("/widget/acme")
    assert r.status_code == 200
    assert LOAD_FAILED_MESSAGE in r.text


def test_widget_fragment_empty(client):
    with patch("testimania.loader.requests.get", fake_get([])):
        r = client.get("/widget/acme")
    assert r.status_code == 200
    assert EMPTY_MESSAGE in r.text


def test_widget_page(client, records):
    with patch("testimania.loader.requests.get", fake_get(records)):
        r = client.get("/widget/acme/page", params={"layout": "carousel"})
    assert r.status_code == 200
    assert r.text.startswith("<!DOCTYPE html>")
    assert "tm-carousel-inner" in r.text


# ── Snippet / catalogue / aperçu ──────────────────────────────────────────────

def test_embed_code(client):
    r = client.get("/widget/acme/embed-code", params={"theme": "dark", "widget_title": "Avis"})
    assert r.status_code == 200
    data = r.json()
    assert 'data-slug="acme"' in data["embed_code"]
    assert 'data-theme="dark"' in data["embed_code"]
    assert data["config"]["widget_title"] == "Avis"


def test_catalog(client):
    r = client.get("/widget/catalog")
    assert r.status_code == 200
    data = r.json()
    assert data["layouts"] == ["list", "grid", "carousel", "single"]
    assert data["shadows"] == ["none", "sm", "md", "lg"]
    assert "collection_id" in data["schema"]["properties"]


def test_preview(client):
    r = client.post("/widget/preview", json={"layout": "single", "theme": "dark", "max_items": 3})
    assert r.status_code == 200
    assert "A Game Changer!" in r.text
    assert "tm-theme-dark" in r.text
    assert r.text.count('class="tm-card"') == 1


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}
