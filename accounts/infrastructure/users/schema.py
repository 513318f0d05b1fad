"""
Database schema bootstrap for the users table.

``init_schema`` is idempotent and runs at application startup.
"""

import logging

from sqlalchemy import text
from sqlalchemy.engine import Engine

logger = logging.getLogger(__name__)

CREATE_USERS_TABLE = """
CREATE TABLE IF NOT EXISTS users (
    id VARCHAR(32) PRIMARY KEY,
    name VARCHAR(255) NOT NULL,
    email VARCHAR(255) NOT NULL UNIQUE,
    password VARCHAR(255) NOT NULL,
    created_at VARCHAR(40) NOT NULL
)
"""


def init_schema(engine: Engine) -> None:
    """Create the users table if it does not exist."""
    with engine.begin() as conn:
        conn.execute(text(CREATE_USERS_TABLE))
    logger.info("Users schema ready")
