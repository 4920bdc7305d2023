"""Process-wide logging setup for the API server and CLI scripts."""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
LOG_DATEFMT = "%Y-%m-%dT%H:%M:%SZ"


def configure_logging(level: str = "INFO") -> None:
    """Install a stdout handler on the root logger (no-op if one is configured)."""
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
    )
