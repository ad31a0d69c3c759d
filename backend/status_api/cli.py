import logging
import sys

import uvicorn

from status_api.core.logging import configure_logging
from status_api.core.settings import ConfigError, get_settings

logger = logging.getLogger("status_api")


def main() -> None:
    """Validate configuration, then serve until terminated.

    A missing database variable stops the process with exit code 1 before any
    socket is bound.
    """
    configure_logging()
    try:
        settings = get_settings()
    except ConfigError as exc:
        logger.error("[config] %s", exc)
        sys.exit(1)

    from status_api.main import create_app

    logger.info("Server is listening on %s:%s", settings.server.host, settings.server.port)
    uvicorn.run(
        create_app(settings),
        host=settings.server.host,
        port=settings.server.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
