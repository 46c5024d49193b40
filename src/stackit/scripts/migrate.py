# src/stackit/scripts/migrate.py
"""Apply Alembic migrations to the configured database."""
from __future__ import annotations

import argparse
import os

from alembic import command
from alembic.config import Config

from stackit.core.settings import settings

MIGRATIONS_DIR = os.path.abspath(
    os.path.join(os.path.dirname(__file__), "..", "migrations")
)


def build_config(url: str | None = None) -> Config:
    """Return an Alembic config pointed at the project migrations."""
    cfg = Config(os.path.join(MIGRATIONS_DIR, "alembic.ini"))
    cfg.set_main_option("script_location", MIGRATIONS_DIR)
    cfg.set_main_option("sqlalchemy.url", url or settings.database_url)
    return cfg


def run_upgrade(revision: str = "head", url: str | None = None) -> None:
    command.upgrade(build_config(url), revision)


def main() -> None:
    parser = argparse.ArgumentParser(description="Upgrade the database schema")
    parser.add_argument("revision", nargs="?", default="head", help="Target revision")
    parser.add_argument(
        "--url",
        default=None,
        help="Override database URL (defaults to DATABASE_URL)",
    )
    args = parser.parse_args()
    run_upgrade(args.revision, args.url)


if __name__ == "__main__":
    main()
