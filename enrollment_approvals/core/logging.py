"""Logging setup for the API process.

Configures the root logger once with a console handler and ISO 8601
timestamps. Modules just call ``logging.getLogger(__name__)``.
"""
import logging
from typing import Optional

from enrollment_approvals.core.config import settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"

def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """Configure the root logger.

    Args:
        level: Logging level name; defaults to ``settings.LOG_LEVEL``.

    Returns:
        The configured root logger.
    """
    level_upper = (level or settings.LOG_LEVEL).upper()
    if not hasattr(logging, level_upper):
        raise ValueError(
            f"Invalid log level: {level_upper}. "
            f"Must be one of: DEBUG, INFO, WARNING, ERROR, CRITICAL"
        )

    root = logging.getLogger()
    root.setLevel(getattr(logging, level_upper))

    # evita handlers duplicados em reload
    if not any(getattr(h, "_enrollment_approvals", False) for h in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        handler._enrollment_approvals = True  # type: ignore[attr-defined]
        root.addHandler(handler)

    # SQL só em DEBUG
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if level_upper == "DEBUG" else logging.WARNING
    )
    return root
