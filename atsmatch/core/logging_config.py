"""
Logging configuration for the ATS Match service.

Console output for the operator, rotating file output for later inspection.
"""
import logging
import sys
from pathlib import Path
from logging.handlers import RotatingFileHandler

from atsmatch.core import config

LOG_FILE_NAME = "atsmatch.log"
LOG_FILE_MAX_BYTES = 10 * 1024 * 1024
LOG_FILE_BACKUPS = 5

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
CONSOLE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s"

QUIET_LOGGERS = ("uvicorn", "uvicorn.access", "uvicorn.error")


def _with_format(handler: logging.Handler, level: int, fmt: str) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt, datefmt=DATE_FORMAT))
    return handler


def setup_logging(log_level: str = config.LOG_LEVEL, log_dir: str = config.LOG_DIR) -> Path:
    """
    Route all service logging to stdout and to a rotating atsmatch.log.

    Replaces whatever handlers the root logger already had. Unknown level
    names fall back to INFO.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_dir: Directory that receives atsmatch.log and its backups

    Returns:
        Path of the active log file
    """
    level = getattr(logging, log_level.upper(), logging.INFO)

    log_file = Path(log_dir) / LOG_FILE_NAME
    log_file.parent.mkdir(parents=True, exist_ok=True)

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()
    root.addHandler(_with_format(logging.StreamHandler(sys.stdout), level, CONSOLE_FORMAT))
    root.addHandler(_with_format(
        RotatingFileHandler(
            log_file,
            maxBytes=LOG_FILE_MAX_BYTES,
            backupCount=LOG_FILE_BACKUPS,
            encoding="utf-8",
        ),
        level,
        FILE_FORMAT,
    ))

    # uvicorn's per-request chatter drowns out the pipeline output
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return log_file
