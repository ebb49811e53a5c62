"""Logging setup for the geo domain generator."""

import logging
import sys
from pathlib import Path
from typing import Optional, Union

APP_LOGGER = "geo_domains"

_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def _resolve_level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logger(
    name: str = APP_LOGGER,
    level: Union[int, str] = logging.INFO,
    log_file: Optional[Path] = None,
) -> logging.Logger:
    """
    Configure and return a logger. Handlers are attached once; later calls
    return the already configured logger unchanged (Streamlit reruns the
    script on every interaction).

    Args:
        name: Logger name.
        level: Logging level, as int or name ("DEBUG", "INFO", ...).
        log_file: Optional path to log file. If None, logs to stderr only.
    """
    log = logging.getLogger(name)
    if log.handlers:
        return log

    log.setLevel(_resolve_level(level))
    fmt = logging.Formatter(_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    stream = logging.StreamHandler(sys.stderr)
    stream.setFormatter(fmt)
    log.addHandler(stream)

    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setFormatter(fmt)
        log.addHandler(fh)

    return log


def setup_from_config() -> logging.Logger:
    """Configure the app logger from LOG_LEVEL / LOG_FILE."""
    from geodomain.utils.config import log_file, log_level

    return setup_logger(APP_LOGGER, level=log_level(), log_file=log_file())


def get_logger(name: str = APP_LOGGER) -> logging.Logger:
    """Return the application logger. Use after setup_logger has been called."""
    return logging.getLogger(name)
