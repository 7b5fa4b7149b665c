"""Package logger; level from GRADEBOOK_LOG_LEVEL."""
import logging
import sys
from .utils import LOG_LEVEL

_FORMAT = "%(asctime)s %(levelname)-7s gradebook.%(module)s: %(message)s"

_logger = logging.getLogger("gradebook")
if not _logger.handlers:
    _logger.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(_FORMAT, datefmt="%H:%M:%S"))
    _logger.addHandler(handler)


def get_logger(name: str | None = None) -> logging.Logger:
    """Child of the package logger, e.g. get_logger("ingest") -> gradebook.ingest."""
    return _logger.getChild(name) if name else _logger
