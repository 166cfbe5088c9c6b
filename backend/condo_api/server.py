"""Process entry point: load settings, configure logging, serve with uvicorn.

Invariants:
    - Missing or empty API_KEY aborts with exit status 1 before binding a socket
"""

import logging

import uvicorn
from pydantic import ValidationError

from condo_api.config import Settings, get_settings
from condo_api.infrastructure.observability import setup_logging
from condo_api.main import create_app

logger = logging.getLogger(__name__)


def load_settings_or_exit() -> Settings:
    try:
        return get_settings()
    except ValidationError as e:
        setup_logging()
        missing = ", ".join(
            ".".join(str(p) for p in err["loc"]).upper() for err in e.errors()
        )
        logger.critical(f"Invalid configuration, cannot start: {missing}")
        raise SystemExit(1) from e


def run() -> None:
    settings = load_settings_or_exit()
    setup_logging(settings.log_level, settings.log_format)
    app = create_app(settings)
    logger.info(f"Server is running on port: {settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
