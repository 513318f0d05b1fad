"""
Serve the Accounts API with Uvicorn.

Host and port come from ``Settings`` (``HOST`` / ``PORT`` environment
variables). Usage::

    python -m accounts
"""

from uvicorn import Config, Server

from accounts.core.config import settings
from accounts.main import app


def main() -> None:
    """Run the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    Server(config).run()


if __name__ == "__main__":
    main()
