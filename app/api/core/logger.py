import logging
import logging.config
from pathlib import Path

from config import settings

LOG_DIR = Path(__file__).resolve().parents[3] / "logs"
LOG_DIR.mkdir(exist_ok=True)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s %(module)s:%(lineno)d - %(message)s"
APP_LOG_LEVEL = "DEBUG" if settings.DEBUG else "INFO"

LOG_CONFIG = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "default": {
            "format": LOG_FORMAT,
        }
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "default",
            "level": APP_LOG_LEVEL,
        },
        "file": {
            "class": "logging.handlers.RotatingFileHandler",
            "formatter": "default",
            "filename": str(LOG_DIR / "app.log"),
            "maxBytes": 10485760,
            "backupCount": 5,
            "level": APP_LOG_LEVEL,
        },
    },
    "loggers": {
        "uvicorn": {"handlers": ["console", "file"], "level": "INFO", "propagate": False},
        "uvicorn.error": {"handlers": ["console", "file"], "level": "INFO", "propagate": False},
        "uvicorn.access": {"handlers": ["console", "file"], "level": "INFO", "propagate": False},
        "httpx": {"handlers": ["file"], "level": "WARNING", "propagate": False},
        "watchfiles.main": {"handlers": [], "level": "WARNING", "propagate": False},
        "app": {
            "handlers": ["console", "file"],
            "level": APP_LOG_LEVEL,
            "propagate": False,
        },
    },
    "root": {
        "handlers": ["console"],
        "level": "WARNING",
    },
}

logger = logging.getLogger("app")


def setup_logging():
    """Configure application logging."""
    logging.config.dictConfig(LOG_CONFIG)
