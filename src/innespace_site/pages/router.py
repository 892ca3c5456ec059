from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import FileResponse, HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from innespace_site.locales import DEFAULT_LOCALE, SUPPORTED_LOCALES, resolve_locale
from innespace_site.portfolio import (
    CONTACTS,
    Portfolio,
    format_duration,
    localize_experience,
    localize_projects,
    total_experience_months,
    translate,
)

router = APIRouter(tags=["pages"])


def _get_templates(request: Request) -> Jinja2Templates:
    templates = getattr(request.app.state, "templates", None)
    if templates is None:
        raise HTTPException(status_code=500, detail="Templates not initialized")
    return templates


def _get_portfolio(request: Request) -> Portfolio:
    portfolio = getattr(request.app.state, "portfolio", None)
    if portfolio is None:
        raise HTTPException(status_code=500, detail="Portfolio content not loaded")
    return portfolio


@router.get("/")
async def root() -> RedirectResponse:
    return RedirectResponse(url=f"/{DEFAULT_LOCALE}", status_code=301)


@router.get("/icons/language.svg", include_in_schema=False)
async def language_icon(request: Request) -> FileResponse:
    path = request.app.state.site_config.paths.language_icon_path
    if not path.is_file():
        raise HTTPException(status_code=404, detail="Not Found")
    return FileResponse(path, media_type="image/svg+xml")


@router.get("/{lang}", response_class=HTMLResponse)
async def landing_page(request: Request, lang: str) -> HTMLResponse:
    msg = resolve_locale(lang)
    # Lang echoes the requested token, even when the content fell back to English.
    ctx: dict[str, Any] = {
        "Title": msg.title,
        "Desc": msg.description,
        "Button": msg.button,
        "BlogURL": msg.blog_url,
        "Lang": lang,
        "Supported": list(SUPPORTED_LOCALES),
        "CurPath": request.url.path,
    }
    return _get_templates(request).TemplateResponse(request, "index.html", ctx)


@router.get("/{lang}/portfolio", response_class=HTMLResponse)
async def portfolio_page(request: Request, lang: str) -> HTMLResponse:
    portfolio = _get_portfolio(request)

    labels = {
        key: translate(key, lang)
        for key in (
            "name",
            "intro",
            "projects",
            "experience",
            "totalExperience",
            "contacts",
            "jobSearchStatus",
        )
    }

    total: str | None = None
    if portfolio.experience:
        total = format_duration(total_experience_months(portfolio.experience), lang)

    ctx: dict[str, Any] = {
        "Title": resolve_locale(lang).title,
        "Lang": lang,
        "Supported": list(SUPPORTED_LOCALES),
        "CurPath": request.url.path,
        "Labels": labels,
        "TotalExperience": total,
        "Projects": localize_projects(portfolio.projects, lang),
        "Experience": localize_experience(portfolio.experience, lang),
        "Contacts": CONTACTS,
    }
    return _get_templates(request).TemplateResponse(request, "portfolio.html", ctx)
