"""Logging setup shared by the API and the CLI."""

import logging

from riskcalc.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def setup_logging(level: str | None = None):
    """Configure the root logger once, using settings.log_level by default."""
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format=LOG_FORMAT,
    )
    # Uvicorn's access log duplicates our request handling logs
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
