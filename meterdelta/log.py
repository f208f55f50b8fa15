from __future__ import annotations
import logging
import sys

import structlog

# Events go through stdlib logging, so nothing is emitted until the
# application configures a handler (see setup_logging).
_PROCESSORS = [
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso", utc=True),
    structlog.processors.KeyValueRenderer(sort_keys=True, key_order=["event"]),
]


def setup_logging(level: str = "WARNING") -> None:
    """Configure stdlib logging for command line use."""
    lvl = getattr(logging, level.upper(), logging.WARNING)
    logging.basicConfig(level=lvl, format="%(message)s", stream=sys.stderr)
    logging.getLogger("meterdelta").setLevel(lvl)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=_PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
    )
