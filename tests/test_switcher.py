from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from innespace_site.app import create_app
from innespace_site.pages.switcher import active_locale_attrs, switch_locale_path


@pytest.mark.parametrize(
    ("path", "lang", "code", "expected"),
    [
        ("/en", "en", "ru", "/ru"),
        ("/ru/portfolio", "ru", "uk", "/uk/portfolio"),
        ("/fr", "fr", "en", "/en"),
        ("/english", "en", "ru", "/ru"),
        ("/css/missing.css", "en", "uk", "/uk"),
        ("/", "", "ru", "/ru"),
    ],
)
def test_switch_locale_path(path: str, lang: str, code: str, expected: str) -> None:
    assert switch_locale_path(path, lang, code) == expected


def test_active_locale_attrs_marks_only_current_code() -> None:
    assert active_locale_attrs("ru", "ru") == ' class="active" aria-current="page"'
    assert active_locale_attrs("en", "ru") == ""
    assert active_locale_attrs("en", "fr") == ""


def test_error_page_switcher_links_to_landing_pages() -> None:
    with TestClient(create_app()) as client:
        r = client.get("/en/unknown/page")
        assert r.status_code == 404
        assert 'href="/ru"' in r.text
        assert 'href="/ru/unknown/page"' not in r.text
