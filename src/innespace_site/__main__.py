from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

import uvicorn

from innespace_site.app import create_app
from innespace_site.config import SiteConfig, load_site_config


def configure_logging(config: SiteConfig) -> None:
    handlers: list[logging.Handler] = [logging.StreamHandler()]

    log_file = config.logging.file
    if log_file:
        path = Path(log_file).expanduser()
        path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            RotatingFileHandler(
                path,
                maxBytes=config.logging.max_size_mb * 1024 * 1024,
                backupCount=config.logging.backup_count,
                encoding="utf-8",
            )
        )

    logging.basicConfig(
        level=config.logging.level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )


def main() -> None:
    config = load_site_config()
    configure_logging(config)

    uvicorn.run(
        create_app(config),
        host=config.network.bind_host,
        port=config.network.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
