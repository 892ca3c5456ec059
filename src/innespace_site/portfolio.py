from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from innespace_site.locales import DEFAULT_LOCALE, effective_locale

logger = logging.getLogger(__name__)

CONTENT_DIR = Path(__file__).resolve().parent / "content"

LANGUAGE_PLACEHOLDER = "{language}"


class LocalizedText(BaseModel):
    en: str
    ru: str
    uk: str

    def get(self, lang: str) -> str:
        return getattr(self, effective_locale(lang))


class Project(BaseModel):
    id: str
    title: LocalizedText
    description: LocalizedText
    url: str
    icon: str = Field(default="Globe")
    tags: list[str] = Field(default_factory=list)
    disabled: bool = Field(default=False)
    disabled_reason: LocalizedText | None = Field(default=None)


class ExperienceEntry(BaseModel):
    id: str
    company: LocalizedText
    position: LocalizedText
    description: LocalizedText
    start_date: date
    end_date: date | None = Field(default=None, description="None means currently working")
    tags: list[str] = Field(default_factory=list)


class Portfolio(BaseModel):
    projects: list[Project] = Field(default_factory=list)
    experience: list[ExperienceEntry] = Field(default_factory=list)


LABELS: dict[str, dict[str, str]] = {
    "name": {
        "en": "Backend Developer",
        "uk": "Backend Розробник",
        "ru": "Backend Разработчик",
    },
    "intro": {
        "en": (
            "Working on creating and maintaining web services, integrations, and application "
            "optimization. In my free time, I study new technologies, experiment with pet "
            "projects, and take interest in artificial intelligence. It's important to me "
            "that my solutions bring real value to people."
        ),
        "uk": (
            "Працюю над створенням і підтримкою веб-сервісів, інтеграціями та оптимізацією "
            "додатків. У вільний час вивчаю нові технології, експериментую з pet-проєктами і "
            "цікавлюся штучним інтелектом. Для мене важливо, щоб мої рішення приносили "
            "реальну користь людям."
        ),
        "ru": (
            "Работаю над созданием и поддержкой веб-сервисов, интеграциями и оптимизацией "
            "приложений. В свободное время изучаю новые технологии, экспериментирую с "
            "pet-проектами и интересуюсь искусственным интеллектом. Мне важно, чтобы мои "
            "решения приносили реальную пользу людям."
        ),
    },
    "projects": {"en": "Projects", "uk": "Проєкти", "ru": "Проекты"},
    "experience": {"en": "Experience", "uk": "Досвід", "ru": "Опыт"},
    "totalExperience": {
        "en": "Total experience",
        "uk": "Загальний досвід",
        "ru": "Общий опыт",
    },
    "currentlyWorking": {
        "en": "Currently working",
        "uk": "Працюю зараз",
        "ru": "Работаю до сих пор",
    },
    "contacts": {"en": "Contacts", "uk": "Контакти", "ru": "Контакты"},
    "jobSearchStatus": {
        "en": "Looking for new opportunities — reach me via the Contacts section",
        "uk": "Шукаю нові можливості — зв'язатися можна через розділ «Контакти»",
        "ru": "Ищу новые возможности — связаться можно через раздел контактов",
    },
}

CONTACTS: tuple[tuple[str, str], ...] = (
    ("GitHub", "https://github.com/inne-dev"),
    ("Telegram", "https://t.me/inne_dev"),
    ("LinkedIn", "https://www.linkedin.com/in/andy-litvinov-635925289/"),
    ("HH.ru", "https://hh.ru/resume/2e015778ff0be97e8b0039ed1f784254304a57"),
)

MONTH_NAMES: dict[str, tuple[str, ...]] = {
    "en": (
        "January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December",
    ),
    "ru": (
        "январь", "февраль", "март", "апрель", "май", "июнь",
        "июль", "август", "сентябрь", "октябрь", "ноябрь", "декабрь",
    ),
    "uk": (
        "січень", "лютий", "березень", "квітень", "травень", "червень",
        "липень", "серпень", "вересень", "жовтень", "листопад", "грудень",
    ),
}  # fmt: skip

# (one, few, many)
_YEAR_FORMS: dict[str, tuple[str, str, str]] = {
    "ru": ("год", "года", "лет"),
    "uk": ("рік", "роки", "років"),
}
_MONTH_FORMS: dict[str, tuple[str, str, str]] = {
    "ru": ("месяц", "месяца", "месяцев"),
    "uk": ("місяць", "місяці", "місяців"),
}


def translate(key: str, lang: str) -> str:
    """Return the UI label for ``key`` in ``lang``; unknown keys translate to themselves."""

    entry = LABELS.get(key)
    if entry is None:
        return key
    return entry.get(effective_locale(lang)) or key


def _read_json(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


def load_portfolio(content_dir: Path | None = None) -> Portfolio:
    """Load projects.json and experience.json from ``content_dir``.

    - A missing file contributes an empty list.
    - Validation is performed by Pydantic.
    """

    base = CONTENT_DIR if content_dir is None else content_dir
    raw: dict[str, Any] = {}
    for key, filename in (("projects", "projects.json"), ("experience", "experience.json")):
        path = base / filename
        if not path.exists():
            logger.warning("Portfolio content file is missing: %s", path)
            continue
        data = _read_json(path)
        if not isinstance(data, dict):
            raise ValueError(f"Invalid portfolio content format at {path}")
        raw[key] = data.get(key) or []

    return Portfolio.model_validate(raw)


def entry_months(entry: ExperienceEntry, *, today: date | None = None) -> int:
    """Months covered by ``entry``, counting both the start and the end month."""

    end = entry.end_date or today or date.today()
    start = entry.start_date
    return (end.year - start.year) * 12 + (end.month - start.month) + 1


def total_experience_months(
    entries: list[ExperienceEntry], *, today: date | None = None
) -> int:
    return sum(entry_months(e, today=today) for e in entries)


def _slavic_form(count: int, forms: tuple[str, str, str]) -> str:
    one, few, many = forms
    if count == 1:
        return one
    if 1 < count < 5:
        return few
    return many


def format_duration(total_months: int, lang: str) -> str:
    """Render a month count as years and months, e.g. ``2 years 3 months`` or ``1 год``."""

    years, months = divmod(total_months, 12)
    lang = effective_locale(lang)

    if lang in _YEAR_FORMS:
        years_text = f"{years} {_slavic_form(years, _YEAR_FORMS[lang])}"
        months_text = f"{months} {_slavic_form(months, _MONTH_FORMS[lang])}"
    else:
        years_text = f"{years} year{'s' if years > 1 else ''}"
        months_text = f"{months} month{'s' if months > 1 else ''}"

    if years > 0 and months > 0:
        return f"{years_text} {months_text}"
    if years > 0:
        return years_text
    return months_text


def format_month_year(value: date, lang: str) -> str:
    names = MONTH_NAMES.get(effective_locale(lang), MONTH_NAMES[DEFAULT_LOCALE])
    return f"{names[value.month - 1]} {value.year}"


def description_lines(text: str) -> list[str]:
    """Split a multi-line description into bullet lines, dropping blanks and ``- `` markers."""

    out: list[str] = []
    for line in text.split("\n"):
        if not line.strip():
            continue
        if line.startswith("- "):
            line = line[2:]
        out.append(line.strip())
    return out


@dataclass(frozen=True)
class ProjectView:
    title: str
    description: str
    url: str
    icon: str
    tags: list[str]
    disabled: bool
    disabled_reason: str | None


@dataclass(frozen=True)
class ExperienceView:
    position: str
    company: str
    period: str
    tags: list[str]
    lines: list[str]


def localize_projects(projects: list[Project], lang: str) -> list[ProjectView]:
    code = effective_locale(lang)
    out: list[ProjectView] = []
    for p in projects:
        reason = p.disabled_reason.get(code) if p.disabled and p.disabled_reason else None
        out.append(
            ProjectView(
                title=p.title.get(code),
                description=p.description.get(code),
                url=p.url.replace(LANGUAGE_PLACEHOLDER, code),
                icon=p.icon,
                tags=list(p.tags),
                disabled=p.disabled,
                disabled_reason=reason or None,
            )
        )
    return out


def localize_experience(entries: list[ExperienceEntry], lang: str) -> list[ExperienceView]:
    code = effective_locale(lang)
    out: list[ExperienceView] = []
    for e in entries:
        start = format_month_year(e.start_date, code)
        if e.end_date is not None:
            end = format_month_year(e.end_date, code)
        else:
            end = translate("currentlyWorking", code)
        out.append(
            ExperienceView(
                position=e.position.get(code),
                company=e.company.get(code),
                period=f"{start} - {end}",
                tags=list(e.tags),
                lines=description_lines(e.description.get(code)),
            )
        )
    return out
