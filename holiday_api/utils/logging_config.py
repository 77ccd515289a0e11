"""
Centralized logging configuration for the application.
Logs to the console, and to a rotating file when LOG_FILE is set.
"""
import logging
import sys
from pathlib import Path
from logging.handlers import RotatingFileHandler
from typing import Optional

MAX_BYTES = 5 * 1024 * 1024  # 5 MB
BACKUP_COUNT = 5

FORMAT_CONSOLE = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"
FORMAT_FILE = "%(asctime)s | %(levelname)-7s | %(name)s | %(filename)s:%(lineno)d | %(message)s"
DATE_FMT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """Configure root logger with a console handler and an optional rotating file handler."""
    level_value = getattr(logging, level.upper(), logging.INFO)
    root = logging.getLogger()
    root.setLevel(level_value)

    # Avoid duplicate handlers on warm starts and reloads
    if root.handlers:
        return

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(level_value)
    console.setFormatter(logging.Formatter(FORMAT_CONSOLE, datefmt=DATE_FMT))
    root.addHandler(console)

    if log_file:
        try:
            log_path = Path(log_file)
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = RotatingFileHandler(
                log_path,
                maxBytes=MAX_BYTES,
                backupCount=BACKUP_COUNT,
                encoding="utf-8",
            )
            file_handler.setLevel(level_value)
            file_handler.setFormatter(logging.Formatter(FORMAT_FILE, datefmt=DATE_FMT))
            root.addHandler(file_handler)
        except OSError:
            root.warning("Could not create log file %s; file logging disabled", log_file)

    # Reduce noise from third-party loggers
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("pymongo").setLevel(logging.WARNING)
