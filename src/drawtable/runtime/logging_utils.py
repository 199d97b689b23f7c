"""
Run logging helpers.

A run logger writes INFO and above (WARNING and above when ``quiet``) to a
timestamped file and echoes warnings to stderr.
"""

import logging
from datetime import datetime
from pathlib import Path

from ..schema.defaults import DEFAULT_LOG_LEVEL, LOG_LEVELS

_LOGGER = logging.getLogger(__name__)

_FILE_FORMAT = "%(asctime)s %(levelname)s %(message)s"
_STREAM_FORMAT = "%(levelname)s %(message)s"


def _resolve_log_dir(log_dir) -> Path:
    text = "" if log_dir is None else str(log_dir).strip()
    if not text:
        return Path.cwd() / "logs"
    return Path(text).expanduser()


def _resolve_file_level(log_level) -> int:
    level_name = str(log_level).strip().lower()
    if level_name not in LOG_LEVELS:
        raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
    return logging.INFO if level_name == "info" else logging.WARNING


def _detach_handlers(logger) -> None:
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        try:
            handler.close()
        except (OSError, RuntimeError, ValueError):
            _LOGGER.debug(
                "Could not close %r on logger %s", handler, logger.name, exc_info=True
            )


def setup_run_logger(log_dir=None, name="drawtable", log_level=DEFAULT_LOG_LEVEL):
    """Configure ``name`` for one sampling run.

    Returns the logger and the path of its log file. Handlers left on the
    logger by an earlier run are detached first.
    """
    file_level = _resolve_file_level(log_level)
    resolved_log_dir = _resolve_log_dir(log_dir)
    resolved_log_dir.mkdir(parents=True, exist_ok=True)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_path = resolved_log_dir / f"{name}_{timestamp}.log"

    logger = logging.getLogger(name)
    logger.setLevel(file_level)
    logger.propagate = False
    _detach_handlers(logger)

    file_handler = logging.FileHandler(log_path)
    file_handler.setLevel(file_level)
    file_handler.setFormatter(logging.Formatter(_FILE_FORMAT))
    logger.addHandler(file_handler)

    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(logging.WARNING)
    stream_handler.setFormatter(logging.Formatter(_STREAM_FORMAT))
    logger.addHandler(stream_handler)

    return logger, str(log_path)
