# gemini_gateway/__main__.py
import logging

import uvicorn

from gemini_gateway.core.config import settings
from gemini_gateway.core.logging_config import build_logging_config, configure_logging

logger = logging.getLogger("gemini_gateway")


def run() -> None:
    """Serve the app on HOST:PORT."""
    configure_logging(settings.LOG_LEVEL)
    base = f"http://localhost:{settings.PORT}"
    logger.info("Server running on %s", base)
    logger.info("Health check: %s/health", base)

    uvicorn.run(
        "gemini_gateway.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_config=build_logging_config(settings.LOG_LEVEL),
    )


if __name__ == "__main__":
    run()
