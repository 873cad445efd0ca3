"""Standard library logging setup.

Hoard itself logs through logfire. This configures the libraries that use
the `logging` module, so their output lands next to it on stdout.
"""

import logging
import sys

from hoard.config import Settings

# Libraries whose INFO output is per-query or per-connection chatter
CHATTY_LOGGERS = ("sqlalchemy.engine", "sqlalchemy.pool", "asyncpg", "alembic.runtime")


def setup_logging(settings: Settings) -> None:
    """Configure the root logger.

    Debug mode lowers the level to DEBUG for everything except the chatty
    libraries, whose SQL echo is instead controlled by the engine.

    Args:
        settings: Application settings
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )
    for name in CHATTY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    # Migrations report each applied revision at INFO
    logging.getLogger("alembic.runtime.migration").setLevel(logging.INFO)
