"""Run the MedAdvisor API under uvicorn.

Host, port and log level come from settings (HOST, PORT, LOG_LEVEL).
"""
import logging
import signal
import sys

import uvicorn

from medadvisor.core.config import settings
from medadvisor.core.logging_config import configure_logging

logger = logging.getLogger("medadvisor.server")


def handle_signal(sig, frame):
    logger.info(f"[Server] Received signal {sig}, shutting down")
    sys.exit(0)


if __name__ == "__main__":
    configure_logging()
    signal.signal(signal.SIGINT, handle_signal)
    signal.signal(signal.SIGTERM, handle_signal)

    logger.info(
        f"[Server] Starting MedAdvisor ({settings.ENVIRONMENT}) on {settings.HOST}:{settings.PORT}, "
        f"recommendation limit {settings.RECOMMENDATION_LIMIT or 'none'}"
    )
    uvicorn.run(
        "medadvisor.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
        reload=settings.DEBUG and settings.RELOAD,
    )
