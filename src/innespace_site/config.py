from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

PACKAGE_DIR = Path(__file__).resolve().parent
DEFAULT_PUBLIC_DIR = PACKAGE_DIR / "public"
DEFAULT_TEMPLATES_DIR = PACKAGE_DIR / "templates"


class NetworkConfig(BaseModel):
    bind_host: str = Field(default="0.0.0.0")
    port: int = Field(default=3000, ge=1, le=65535)


class LoggingConfig(BaseModel):
    level: str = Field(default="INFO")
    file: str | None = Field(
        default=None,
        description="Optional log file path; when omitted, logs go to the console only.",
    )
    max_size_mb: int = Field(
        default=10, ge=1, description="Max size of a log file in MB before rolling."
    )
    backup_count: int = Field(default=5, ge=1, description="Number of log archives to keep.")


class PathsConfig(BaseModel):
    public_dir: Path = Field(default=DEFAULT_PUBLIC_DIR)
    templates_dir: Path = Field(default=DEFAULT_TEMPLATES_DIR)

    @property
    def css_dir(self) -> Path:
        return self.public_dir / "css"

    @property
    def language_icon_path(self) -> Path:
        return self.public_dir / "icons" / "language.svg"


class SiteConfig(BaseModel):
    network: NetworkConfig = Field(default_factory=NetworkConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    paths: PathsConfig = Field(default_factory=PathsConfig)


# env var -> (section, field)
_ENV_OVERRIDES: dict[str, tuple[str, str]] = {
    "INNESPACE_BIND": ("network", "bind_host"),
    "INNESPACE_PORT": ("network", "port"),
    "INNESPACE_LOG_LEVEL": ("logging", "level"),
    "INNESPACE_LOG_FILE": ("logging", "file"),
    "INNESPACE_PUBLIC_DIR": ("paths", "public_dir"),
    "INNESPACE_TEMPLATES_DIR": ("paths", "templates_dir"),
}


def load_site_config(environ: dict[str, str] | None = None) -> SiteConfig:
    """Build the site config from defaults plus ``INNESPACE_*`` environment overrides.

    - Blank variables are ignored.
    - Validation is performed by Pydantic.
    """

    env = os.environ if environ is None else environ

    raw: dict[str, dict[str, Any]] = {}
    for name, (section, field) in _ENV_OVERRIDES.items():
        value = (env.get(name) or "").strip()
        if not value:
            continue
        raw.setdefault(section, {})[field] = value

    return SiteConfig.model_validate(raw)
