from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Final


@dataclass(frozen=True)
class LocaleDictionary:
    title: str
    description: str
    button: str
    blog_url: str


DEFAULT_LOCALE: Final[str] = "en"

# Order matters: the language switcher renders in this order.
SUPPORTED_LOCALES: Final[tuple[str, ...]] = ("en", "ru", "uk")

MESSAGES: Final = MappingProxyType(
    {
        "en": LocaleDictionary(
            title="Welcome to inne.space!",
            description="Visit our blog for the latest updates.",
            button="Go to Blog",
            blog_url="https://blog.inne.space/en",
        ),
        "ru": LocaleDictionary(
            title="Добро пожаловать на inne.space!",
            description="Посетите наш блог для последних обновлений.",
            button="Перейти в блог",
            blog_url="https://blog.inne.space/ru",
        ),
        "uk": LocaleDictionary(
            title="Ласкаво просимо на inne.space!",
            description="Відвідайте наш блог для останніх оновлень.",
            button="Перейти до блогу",
            blog_url="https://blog.inne.space/uk",
        ),
    }
)


def is_supported(token: str) -> bool:
    return token in MESSAGES


def effective_locale(token: str) -> str:
    """Return ``token`` if it is a supported locale code, else the default locale."""

    return token if is_supported(token) else DEFAULT_LOCALE


def resolve_locale(token: str) -> LocaleDictionary:
    """Look up the dictionary for ``token``, falling back to English.

    Never raises: any unrecognized token (empty, unknown code, digits) silently
    resolves to the default locale's dictionary.
    """

    return MESSAGES[effective_locale(token)]
