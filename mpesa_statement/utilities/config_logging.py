# mpesa_statement/utilities/config_logging.py
from __future__ import annotations

import copy
import logging.config
from pathlib import Path
from typing import Any, Dict, Optional

LOG_DIR = Path("logs")
LOG_FILE_NAME = "mpesa_statement.log"

LOGGING: Dict[str, Any] = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(levelname)s %(name)s: %(message)s"},
        "verbose": {
            "format": "%(asctime)s %(levelname)s %(name)s "
            "[%(process)d:%(threadName)s] %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "level": "INFO",
            "formatter": "simple",
        },
        "file": {
            "class": "logging.handlers.RotatingFileHandler",
            "level": "DEBUG",
            "formatter": "verbose",
            "filename": f"{LOG_DIR}/{LOG_FILE_NAME}",
            "maxBytes": 5_000_000,
            "backupCount": 5,
            "encoding": "utf-8",
        },
    },
    "loggers": {
        # root logger
        "": {
            "level": "DEBUG",
            "handlers": ["console", "file"],
        },
        # openpyxl chatters about styles and data validation on every load
        "openpyxl": {"level": "WARNING", "propagate": True},
    },
}


def configure_logging(
    log_dir: Optional[Path] = None, level: Optional[str] = None
) -> Dict[str, Any]:
    """Apply `LOGGING` with the file handler pointed at `log_dir`.

    The directory is created first because RotatingFileHandler will not.
    `level` overrides the console handler level (e.g. "DEBUG" for -v).
    Returns the dict that was applied.
    """
    config = copy.deepcopy(LOGGING)
    target = Path(log_dir) if log_dir is not None else LOG_DIR
    target.mkdir(parents=True, exist_ok=True)
    config["handlers"]["file"]["filename"] = str(target / LOG_FILE_NAME)
    if level:
        config["handlers"]["console"]["level"] = level.upper()
    logging.config.dictConfig(config)
    return config
