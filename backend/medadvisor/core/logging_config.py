"""Root logger setup. Called once from the app lifespan and run_server.py."""
import logging

from medadvisor.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def configure_logging(level: str | None = None) -> None:
    level_name = (level or settings.LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format=LOG_FORMAT,
    )
    # Audit lines are JSON; keep them at INFO even when the app runs quieter
    logging.getLogger("audit").setLevel(logging.INFO)
