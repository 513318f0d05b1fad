"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here, no scattered magic strings.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode (exposes /docs). Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        sql_echo: Log SQL statements (never enable in production).
        host: Interface the server binds to.
        port: Port the server listens on.
        rate_limit_enabled: Toggle the request rate limiter.
        rate_limit_default: Default rate limit for all endpoints.
        database_url: SQLAlchemy URL of the users database.
        use_in_memory_store: Keep users in process memory instead of SQL.
        password_hash_iterations: PBKDF2 work factor for new hashes.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "Accounts"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    sql_echo: bool = False
    host: str = "0.0.0.0"
    port: int = 8000
    rate_limit_enabled: bool = True
    rate_limit_default: str = "60/minute"

    database_url: str = "sqlite:///./accounts.db"
    use_in_memory_store: bool = False

    password_hash_iterations: int = 260_000

    def is_sqlite(self) -> bool:
        """Return True when the configured database is SQLite."""
        return self.database_url.startswith("sqlite")


settings = Settings()
