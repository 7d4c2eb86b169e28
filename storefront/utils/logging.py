# storefront/utils/logging.py
import logging

from storefront.utils.settings import LOG_LEVEL

_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

# library code stays silent until an entry point configures logging
logging.getLogger("storefront").addHandler(logging.NullHandler())


def configure_logging(level: str = LOG_LEVEL) -> None:
    logging.basicConfig(level=level, format=_FORMAT)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
