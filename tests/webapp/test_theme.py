"""Tests for the light/dark display preference."""

import pytest

pytestmark = pytest.mark.webapp


def test_default_theme(client):
    """Test the default theme applies with no cookie or hint."""
    response = client.get("/")
    assert b'data-bs-theme="light"' in response.data


def test_cookie_theme(client):
    """Test the stored preference is applied."""
    client.set_cookie("guidebook-theme", "dark")
    response = client.get("/")
    assert b'data-bs-theme="dark"' in response.data
    assert b"bi-moon-fill" in response.data


def test_invalid_cookie_ignored(client):
    client.set_cookie("guidebook-theme", "purple")
    response = client.get("/")
    assert b'data-bs-theme="light"' in response.data


def test_system_hint_used_without_cookie(client):
    """Test the client color scheme hint is the fallback."""
    response = client.get("/", headers={"Sec-CH-Prefers-Color-Scheme": "dark"})
    assert b'data-bs-theme="dark"' in response.data


def test_cookie_beats_system_hint(client):
    client.set_cookie("guidebook-theme", "light")
    response = client.get("/", headers={"Sec-CH-Prefers-Color-Scheme": "dark"})
    assert b'data-bs-theme="light"' in response.data


def test_query_parameter_overrides(client):
    client.set_cookie("guidebook-theme", "light")
    response = client.get("/?theme=dark")
    assert b'data-bs-theme="dark"' in response.data


def test_requests_color_scheme_hint(client):
    response = client.get("/")
    assert response.headers["Accept-CH"] == "Sec-CH-Prefers-Color-Scheme"


def test_toggle_sets_cookie_and_redirects(client):
    """Test toggling from the default persists the opposite theme."""
    response = client.post("/theme/toggle")
    assert response.status_code == 302
    assert response.location.endswith("/")

    cookies = response.headers.getlist("Set-Cookie")
    assert any(c.startswith("guidebook-theme=dark") for c in cookies)
    assert any("Max-Age=31536000" in c for c in cookies)


def test_toggle_persists_across_requests(client):
    client.post("/theme/toggle")
    response = client.get("/")
    assert b'data-bs-theme="dark"' in response.data


def test_toggle_json(client):
    """Test fetch callers get the new theme as JSON."""
    client.set_cookie("guidebook-theme", "dark")
    response = client.post("/theme/toggle", headers={"Accept": "application/json"})
    assert response.status_code == 200
    assert response.get_json() == {"theme": "light"}


def test_toggle_requires_post(client):
    assert client.get("/theme/toggle").status_code == 405
