import logging
from app.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

def _configure() -> logging.Logger:
    log = logging.getLogger("receipts")
    if not log.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        log.addHandler(handler)
    log.setLevel(settings.LOG_LEVEL.upper())
    return log

logger = _configure()
