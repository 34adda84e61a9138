import logging
import sys

import uvicorn

from nodeloom.config import configure_logging, get_settings
from nodeloom.domain.errors import ConfigurationError

if __name__ == "__main__":
    settings = get_settings()
    configure_logging(settings)
    logger = logging.getLogger("nodeloom")

    try:
        settings.require_remote_store()
    except ConfigurationError as exc:
        logger.critical(f"Invalid configuration: {exc}")
        sys.exit(1)

    # Start the API server
    logger.info(f"Starting NodeLoom API on {settings.API_HOST}:{settings.API_PORT}...")
    uvicorn.run(
        "nodeloom.main:create_app",
        factory=True,
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.debug,
        log_level="debug" if settings.debug else settings.LOG_LEVEL.lower(),
    )
