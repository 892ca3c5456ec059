from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from innespace_site.app import create_app
from innespace_site.locales import MESSAGES


@pytest.fixture()
def client():
    with TestClient(create_app()) as c:
        yield c


def test_root_redirects_permanently_to_english(client: TestClient) -> None:
    r = client.get("/", follow_redirects=False)
    assert r.status_code == 301
    assert r.headers["location"] == "/en"


@pytest.mark.parametrize("code", ["en", "ru", "uk"])
def test_landing_page_renders_locale_strings(client: TestClient, code: str) -> None:
    msg = MESSAGES[code]

    r = client.get(f"/{code}")
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("text/html")
    assert msg.title in r.text
    assert msg.description in r.text
    assert msg.button in r.text
    assert f'href="{msg.blog_url}"' in r.text
    assert f'<html lang="{code}">' in r.text


@pytest.mark.parametrize("token", ["fr", "xx", "123", "healthz"])
def test_unknown_locale_falls_back_to_english_content(client: TestClient, token: str) -> None:
    en = MESSAGES["en"]

    r = client.get(f"/{token}")
    assert r.status_code == 200
    assert en.title in r.text
    assert en.description in r.text
    assert en.button in r.text
    assert en.blog_url in r.text
    # The requested token is still echoed as the current language.
    assert f'<html lang="{token}">' in r.text


@pytest.mark.parametrize("path", ["/en", "/ru", "/uk", "/fr", "/en/portfolio"])
def test_every_page_lists_supported_locales_in_order(client: TestClient, path: str) -> None:
    r = client.get(path)
    assert r.status_code == 200
    assert "en, ru, uk" in r.text
    nav = r.text[r.text.index('class="lang-switcher"') :]
    assert nav.index(">EN<") < nav.index(">RU<") < nav.index(">UK<")


def test_ukrainian_page_end_to_end(client: TestClient) -> None:
    r = client.get("/uk")
    assert r.status_code == 200
    assert "Ласкаво просимо на inne.space!" in r.text
    assert "https://blog.inne.space/uk" in r.text


def test_language_switcher_keeps_current_subpath(client: TestClient) -> None:
    r = client.get("/ru/portfolio")
    assert r.status_code == 200
    assert 'href="/en/portfolio"' in r.text
    assert 'href="/uk/portfolio"' in r.text
    assert 'class="active" aria-current="page">RU<' in r.text


def test_css_is_served_verbatim(client: TestClient) -> None:
    from innespace_site.config import DEFAULT_PUBLIC_DIR

    r = client.get("/css/style.css")
    assert r.status_code == 200
    assert "text/css" in r.headers["content-type"]
    assert r.content == (DEFAULT_PUBLIC_DIR / "css" / "style.css").read_bytes()


def test_language_icon_is_served(client: TestClient) -> None:
    r = client.get("/icons/language.svg")
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("image/svg+xml")
    assert b"<svg" in r.content


@pytest.mark.parametrize("path", ["/css/missing.css", "/icons/other.svg", "/en/unknown/page"])
def test_missing_assets_return_404_page(client: TestClient, path: str) -> None:
    r = client.get(path)
    assert r.status_code == 404
    assert 'data-code="not_found"' in r.text


def test_wrong_method_is_rejected(client: TestClient) -> None:
    r = client.post("/en")
    assert r.status_code == 405
    assert 'data-code="method_not_allowed"' in r.text
