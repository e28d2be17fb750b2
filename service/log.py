import logging
import sys

from .config import LOG_LEVELS


def setup_logging(level: str = "INFO") -> None:
    """Send every logger to stdout at `level`; unknown level names are rejected."""
    level = level.upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"unknown log level {level!r}")
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )
