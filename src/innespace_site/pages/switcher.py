from __future__ import annotations

from fastapi.templating import Jinja2Templates
from markupsafe import Markup


def switch_locale_path(path: str, lang: str, code: str) -> str:
    """Swap the leading ``/{lang}`` segment of ``path`` for ``/{code}``.

    Paths that do not start with the current locale segment link to the
    target locale's landing page.
    """

    prefix = f"/{lang}"
    if lang and (path == prefix or path.startswith(prefix + "/")):
        return f"/{code}{path[len(prefix):]}"
    return f"/{code}"


def active_locale_attrs(code: str, lang: str) -> Markup:
    if code == lang:
        return Markup(' class="active" aria-current="page"')
    return Markup("")


def register_filters(templates: Jinja2Templates) -> None:
    templates.env.filters["switch_locale"] = switch_locale_path
    templates.env.filters["active_locale"] = active_locale_attrs
