from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.staticfiles import StaticFiles

from innespace_site import __version__
from innespace_site.config import SiteConfig, load_site_config
from innespace_site.locales import DEFAULT_LOCALE, SUPPORTED_LOCALES
from innespace_site.pages.router import router as pages_router
from innespace_site.pages.switcher import register_filters
from innespace_site.portfolio import load_portfolio

logger = logging.getLogger(__name__)


def _status_to_code(status_code: int) -> str:
    if status_code == 404:
        return "not_found"
    if status_code == 405:
        return "method_not_allowed"
    if 400 <= status_code < 500:
        return "client_error"
    return "server_error"


def create_app(config: SiteConfig | None = None) -> FastAPI:
    config = config or load_site_config()
    paths = config.paths

    templates = Jinja2Templates(directory=str(paths.templates_dir))
    register_filters(templates)
    portfolio = load_portfolio()

    @asynccontextmanager
    async def _lifespan(app: FastAPI):
        logger.info("inne.space site starting up")
        logger.info(f"Templates directory: {paths.templates_dir}")
        logger.info(f"Public directory: {paths.public_dir}")
        yield
        logger.info("inne.space site shutting down")

    app = FastAPI(
        title="inne.space",
        version=__version__,
        lifespan=_lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.site_config = config
    app.state.templates = templates
    app.state.portfolio = portfolio

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        response = await call_next(request)
        logger.info(f"{request.method} {request.url.path} - {response.status_code}")
        return response

    def _render_error(request: Request, status_code: int, message: str) -> HTMLResponse:
        return templates.TemplateResponse(
            request,
            "error.html",
            {
                "Title": f"{status_code} • inne.space",
                "Status": status_code,
                "Code": _status_to_code(status_code),
                "Message": message,
                "Lang": DEFAULT_LOCALE,
                "Supported": list(SUPPORTED_LOCALES),
                # Error pages switch between landing pages, not the failed path.
                "CurPath": f"/{DEFAULT_LOCALE}",
            },
            status_code=status_code,
        )

    @app.exception_handler(StarletteHTTPException)
    async def _http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> HTMLResponse:
        message = exc.detail if isinstance(exc.detail, str) else "HTTP error"
        return _render_error(request, exc.status_code, message)

    @app.exception_handler(Exception)
    async def _unhandled_error_handler(request: Request, exc: Exception) -> HTMLResponse:
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return _render_error(request, 500, "Internal server error")

    if paths.css_dir.is_dir():
        app.mount("/css", StaticFiles(directory=str(paths.css_dir)), name="css")
    else:
        logger.warning("CSS directory is missing (%s); /css will not be served", paths.css_dir)

    app.include_router(pages_router)

    return app
