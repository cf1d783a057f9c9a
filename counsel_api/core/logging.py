# counsel_api/core/logging.py
import logging
from counsel_api.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

def setup_logging(level: str | None = None) -> None:
    root = logging.getLogger()
    root.setLevel(level or settings.LOG_LEVEL)
    # o uvicorn pode já ter instalado handlers
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
