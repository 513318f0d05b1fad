"""
Logging configuration for the application.

One stdout handler for every logger. Passwords and hashes are never
passed to a logger; SQL statement echo is off unless ``sql_echo`` is
set, since bound parameters would include password hashes.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

QUIET_LOGGERS = ("uvicorn.access", "uvicorn.error", "sqlalchemy.pool")


def configure_logging(level: str = "INFO", sql_echo: bool = False) -> None:
    """Configure application logging.

    Args:
        level: The log level string (DEBUG, INFO, WARNING, ERROR).
        sql_echo: Log every SQL statement issued by SQLAlchemy.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if sql_echo else logging.WARNING
    )
