import logging
import sys

from afv.core.config import settings


def setup_logging(level: str | None = None) -> None:
    """
    Logging estándar a stdout. Se llama una vez al arrancar la app.
    """
    logging.basicConfig(
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        stream=sys.stdout,
        level=(level or settings.LOG_LEVEL).upper(),
    )
