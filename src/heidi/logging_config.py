"""Logging configuration.

Library modules only create `logging.getLogger(__name__)` loggers; the
root logger is configured once by the application (the CLI) through
`setup_logging`. Idempotent, guarded by a module-level flag.
"""

import logging

LOG_FORMAT = "%(asctime)s - %(levelname)s - [%(name)s] - %(message)s"
LOG_DATEFMT = "%Y-%m-%dT%H:%M:%S"

_configured = False


def setup_logging(level: str = "WARNING") -> None:
    """Configure the root logger. Second and later calls only adjust the level."""
    global _configured  # noqa: PLW0603
    numeric_level = getattr(logging, level.upper())

    if _configured:
        logging.getLogger().setLevel(numeric_level)
        return
    _configured = True

    logging.basicConfig(
        level=numeric_level,
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
    )
