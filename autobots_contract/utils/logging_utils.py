import logging
import sys
from typing import Optional, Union

LOG_FORMAT = "%(name)s - %(levelname)s - %(message)s"


class _BelowLevelFilter(logging.Filter):
    """Pass only records strictly below ``threshold``."""

    def __init__(self, threshold: int) -> None:
        super().__init__()
        self._threshold = threshold

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < self._threshold


def resolve_level(level: Union[int, str, None], default: int = logging.INFO) -> int:
    """Turn a level name such as ``"debug"`` (or a numeric level) into an int."""
    if level is None:
        return default
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).strip().upper())
    return resolved if isinstance(resolved, int) else default


def configure_split_stream_logging(
    *,
    level: Union[int, str] = logging.INFO,
    stderr_level: Union[int, str] = logging.WARNING,
    formatter: Optional[logging.Formatter] = None,
) -> None:
    """Configure root logging for the linter CLI.

    Records below ``stderr_level`` go to stdout, the rest to stderr, so a lint
    report piped into a file still leaves problems visible on the terminal.
    """
    level = resolve_level(level)
    stderr_level = max(resolve_level(stderr_level, logging.WARNING), logging.DEBUG)

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level)

    formatter = formatter or logging.Formatter(LOG_FORMAT)

    stdout_handler = logging.StreamHandler(stream=sys.stdout)
    stdout_handler.addFilter(_BelowLevelFilter(stderr_level))
    stderr_handler = logging.StreamHandler(stream=sys.stderr)
    stderr_handler.setLevel(stderr_level)

    for handler in (stdout_handler, stderr_handler):
        handler.setFormatter(formatter)
        root.addHandler(handler)
