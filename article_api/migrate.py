"""Migration runner — applies or reverts the versioned schema migrations.

Usage:
    article-migrate up      # apply every pending migration
    article-migrate down    # revert every applied migration
"""

import argparse
import logging
import sys
from pathlib import Path

from alembic import command
from alembic.config import Config
from alembic.util.exc import CommandError
from sqlalchemy.exc import SQLAlchemyError

from article_api.config import Settings, get_settings
from article_api.infrastructure.database import to_async_url
from article_api.infrastructure.logging.log_config import setup_logging

logger = logging.getLogger(__name__)

MIGRATIONS_DIR = Path(__file__).resolve().parent / "migrations"


def build_alembic_config(settings: Settings) -> Config:
    """Alembic config pointing at the packaged migrations and the configured database."""
    config = Config()
    config.set_main_option("script_location", str(MIGRATIONS_DIR))
    # configparser interpolation treats '%' specially
    config.set_main_option("sqlalchemy.url", to_async_url(settings.database_url).replace("%", "%%"))
    return config


def run_migrations(direction: str, settings: Settings | None = None) -> None:
    """Apply (``up``) or revert (``down``) every migration."""
    settings = settings or get_settings()
    config = build_alembic_config(settings)

    if direction == "up":
        command.upgrade(config, "head")
    elif direction == "down":
        command.downgrade(config, "base")
    else:
        raise ValueError(f"Unknown migration direction: {direction!r}")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="article-migrate",
        description="Apply or revert the article database migrations.",
    )
    parser.add_argument("command", choices=("up", "down"), help="direction to migrate")
    args = parser.parse_args(argv)

    settings = get_settings()
    setup_logging(settings)

    try:
        run_migrations(args.command, settings)
    except (CommandError, SQLAlchemyError, OSError) as e:
        logger.error("Migration %s failed: %s", args.command, e)
        return 1

    logger.info("Migration %s finished", args.command)
    return 0


if __name__ == "__main__":
    sys.exit(main())
