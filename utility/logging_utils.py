# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-11-07
# Updated: 2026-10-19
# Description: logging_utils.py
# -----------------------------------------------------------------------------
import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

import colorlog

BASE_NAME = "caselist_llm"


def _ensure_parent_dir(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)


def _console_handler() -> logging.Handler:
    handler = logging.StreamHandler()
    handler.setFormatter(
        colorlog.ColoredFormatter(
            fmt=(
                "%(log_color)s%(asctime)s [%(levelname)s] "
                "%(name)s:%(lineno)d:%(reset)s %(message_log_color)s%(message)s"
            ),
            datefmt="%Y-%m-%d %H:%M:%S",
            log_colors={
                "DEBUG": "cyan",
                "INFO": "green",
                "WARNING": "yellow",
                "ERROR": "red",
                "CRITICAL": "bold_red",
            },
            secondary_log_colors={
                "message": {
                    "INFO": "white",
                    "WARNING": "yellow",
                    "ERROR": "light_red",
                    "CRITICAL": "red",
                }
            },
            style="%",
        )
    )
    return handler


def _file_handler(log_file: str) -> logging.Handler:
    log_path = Path(log_file)
    _ensure_parent_dir(log_path)

    # Rotating file keeps the UI log tail bounded
    max_bytes = int(os.getenv("CASELIST_LOG_MAX_BYTES", str(5 * 1024 * 1024)))  # 5MB
    backup_count = int(os.getenv("CASELIST_LOG_BACKUP_COUNT", "5"))

    handler = RotatingFileHandler(
        filename=str(log_path),
        maxBytes=max_bytes,
        backupCount=backup_count,
        encoding="utf-8",
    )
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s [%(levelname)s] %(name)s:%(lineno)d: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    return handler


def _create_logger(full_name: str) -> logging.Logger:
    """
    Internal helper to create/configure a logger with a given full name.
    Handlers are attached once per logger name.
    """
    logger = logging.getLogger(full_name)

    if not logger.handlers:
        logger.addHandler(_console_handler())

        log_to_file = os.getenv("CASELIST_LOG_TO_FILE", "1").lower() in ("1", "true", "yes", "y")
        if log_to_file:
            logger.addHandler(_file_handler(os.getenv("CASELIST_LOG_FILE", "./logs/caselist.log")))

        level_name = os.getenv("CASELIST_LOG_LEVEL", "INFO").upper()
        logger.setLevel(getattr(logging, level_name, logging.INFO))
        logger.propagate = False

    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Generic logger that does not include a class name.
    """
    full_name = f"{BASE_NAME}.{name}" if name else BASE_NAME
    return _create_logger(full_name)


def get_class_logger(cls: type) -> logging.Logger:
    """
    Returns a logger whose name includes module + class, e.g.:

      caselist_llm.embedding.SolarEmbedder.SolarEmbedder
      caselist_llm.services.ListIngestService.ListIngestService
    """
    module = getattr(cls, "__module__", "unknown_module")
    classname = getattr(cls, "__name__", "UnknownClass")
    return _create_logger(f"{BASE_NAME}.{module}.{classname}")
