from innespace_site.config import SiteConfig, load_site_config
from innespace_site.locales import (
    DEFAULT_LOCALE,
    MESSAGES,
    SUPPORTED_LOCALES,
    LocaleDictionary,
    resolve_locale,
)

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_LOCALE",
    "MESSAGES",
    "SUPPORTED_LOCALES",
    "LocaleDictionary",
    "SiteConfig",
    "__version__",
    "load_site_config",
    "resolve_locale",
]
