import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOG_FORMAT = "%(asctime)s [%(levelname)s] [%(name)s] - %(message)s"
# Production format drops the component name
LOG_FORMAT_PROD = "%(asctime)s [%(levelname)s] - %(message)s"
LOG_MAX_BYTES = 5 * 1024 * 1024
LOG_BACKUP_COUNT = 3


def _get_environment() -> str:
    """Returns the normalized runtime environment ("dev" or "prod")."""
    env = (os.getenv("ENV") or "dev").strip().lower()
    if env in {"prod", "production"}:
        return "prod"
    return "dev"


def _log_file() -> Path:
    log_dir = Path(os.getenv("TIP_LOG_DIR") or "logs")
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir / "app.log"


def get_logger(name: str) -> logging.Logger:
    """
    Returns a logger configured for the current environment.

    In production the level is WARNING and records omit the component
    name. In development the level is INFO and the component name is
    included. Records go to stderr and to a rotating ``app.log`` file.

    Args:
        name: Component name (e.g. "TipService")

    Returns:
        The configured logger; repeated calls reuse its handlers.
    """
    logger = logging.getLogger(name)
    if getattr(logger, "_configured", False):
        return logger

    is_prod = _get_environment() == "prod"
    formatter = logging.Formatter(LOG_FORMAT_PROD if is_prod else LOG_FORMAT)

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)

    file_handler = RotatingFileHandler(
        _log_file(),
        maxBytes=LOG_MAX_BYTES,
        backupCount=LOG_BACKUP_COUNT,
        encoding="utf-8",
    )
    file_handler.setFormatter(formatter)

    logger.setLevel(logging.WARNING if is_prod else logging.INFO)
    logger.addHandler(stream_handler)
    logger.addHandler(file_handler)
    logger.propagate = False
    logger._configured = True
    return logger
