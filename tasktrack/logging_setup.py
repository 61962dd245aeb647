"""Logging configuration for the tasktrack command line.

Library modules only create loggers with ``logging.getLogger(__name__)``;
handlers are installed here, once, by the entry point.
"""

import logging
import sys
from pathlib import Path

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def parse_level(level: str | int) -> int:
    """Turn a level name such as "info" into a logging level number."""
    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.strip().upper())
    return value if isinstance(value, int) else logging.WARNING


def setup_logging(
    level: str | int = logging.WARNING,
    log_file: str | Path | None = None,
) -> None:
    """Configure the root logger.

    - Console handler on stderr at the requested level
    - Optional file handler that records everything from DEBUG up

    Args:
        level: Console level, as a number or a name.
        log_file: Optional path of a log file to append to.
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    # Remove any pre-existing handlers to avoid duplicates.
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(parse_level(level))
    ch.setFormatter(fmt)
    root.addHandler(ch)

    if log_file:
        log_path = Path(log_file).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(str(log_path), encoding="utf-8")
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(fmt)
        root.addHandler(fh)

    logging.captureWarnings(True)
