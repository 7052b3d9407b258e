#!/usr/bin/env python3
"""Apply alembic migrations.

Usage:
    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py <revision> # upgrade to a specific revision
"""

import sys

import logfire
from alembic import command
from alembic.config import Config

from qanda.config import Settings
from qanda.util.observability import configure_logfire


def main(argv: list[str]) -> int:
    configure_logfire(Settings())
    revision = argv[1] if len(argv) > 1 else "head"

    with logfire.span("Database migration", revision=revision):
        try:
            command.upgrade(Config("alembic.ini"), revision)
        except Exception:
            logfire.exception("Database migration failed", revision=revision)
            # The service must not start on a stale schema
            raise

    logfire.info("Database migrated", revision=revision)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
