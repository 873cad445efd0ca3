#!/usr/bin/env python3
"""Bring the database schema up to date.

Usage:
    python scripts/run_migrations.py                      # upgrade to head
    python scripts/run_migrations.py upgrade <revision>
    python scripts/run_migrations.py downgrade <revision>
"""

import sys
from pathlib import Path

import logfire
from alembic import command
from alembic.config import Config

from hoard.config import Settings
from hoard.util.logging import setup_logging
from hoard.util.observability import configure_logfire

ROOT = Path(__file__).resolve().parent.parent

COMMANDS = {"upgrade": command.upgrade, "downgrade": command.downgrade}


def main(argv: list[str]) -> int:
    """Run one Alembic command, reporting failures to Logfire."""
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    action = argv[1] if len(argv) > 1 else "upgrade"
    if action not in COMMANDS:
        print(__doc__, file=sys.stderr)
        return 2
    if action == "downgrade" and len(argv) < 3:
        print("downgrade needs a target revision", file=sys.stderr)
        return 2
    target = argv[2] if len(argv) > 2 else "head"

    alembic_cfg = Config(str(ROOT / "alembic.ini"))
    alembic_cfg.set_main_option("script_location", str(ROOT / "migrations"))

    # Credentials precede the "@" in the URL
    database = settings.database.url.rsplit("@", 1)[-1]

    with logfire.span(f"migrations.{action}", database=database, target=target):
        try:
            COMMANDS[action](alembic_cfg, target)
        except Exception as e:
            logfire.error(
                "Database migration failed",
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # Re-raise so the deploy stops before the app starts on a bad schema
            raise

    logfire.info("Database migrated", action=action, target=target)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
