"""Logging for phaseconf.

Two kinds of output go through the logging module:
- the debug dump of every assembled phase container (get_logger("phase"))
- the lifecycle's own stdout/stderr, copied into level-scoped writers
  (get_writer_for_level) that the orchestrator attaches to the container

Usage:
    from phaseconf.logging import get_logger, get_writer_for_level
    logger = get_logger("phase")
    stdout = get_writer_for_level(logger, logging.INFO)
    stdout.write("===> DETECTING")

The debug dump is shown with:
    - CLI flag: phaseconf --debug
    - Environment: PHASECONF_DEBUG=1
"""

from __future__ import annotations

import logging
import os
import sys

_loggers: dict[str, logging.Logger] = {}
_initialized = False

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_FORMAT_DEBUG = "%(asctime)s [%(levelname)s] %(name)s:%(lineno)d: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _get_log_level() -> int:
    """WARNING unless PHASECONF_DEBUG asks for the phase dump."""
    if os.environ.get("PHASECONF_DEBUG", "").lower() in ("1", "true", "yes"):
        return logging.DEBUG
    return logging.WARNING


def _init_logging() -> None:
    """Attach a stderr handler to the "phaseconf" logger (once)."""
    global _initialized
    if _initialized:
        return

    level = _get_log_level()
    is_debug = level == logging.DEBUG

    package_logger = logging.getLogger("phaseconf")
    package_logger.setLevel(level)

    # Embedding applications may have configured their own handler
    if not package_logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(level)
        formatter = logging.Formatter(
            LOG_FORMAT_DEBUG if is_debug else LOG_FORMAT,
            datefmt=DATE_FORMAT,
        )
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)

    _initialized = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger in the phaseconf namespace.

    Args:
        name: Component name, e.g. "phase" for the builder's debug dump.
            Names outside the namespace are moved under "phaseconf.".

    Returns:
        Logger that an ExecutionContext can carry.
    """
    _init_logging()

    if not name.startswith("phaseconf"):
        name = f"phaseconf.{name}"

    if name not in _loggers:
        _loggers[name] = logging.getLogger(name)

    return _loggers[name]


def set_debug(enabled: bool = True) -> None:
    """Turn the assembled-phase dump on or off.

    Used by `phaseconf --debug`.
    """
    level = logging.DEBUG if enabled else logging.WARNING
    package_logger = logging.getLogger("phaseconf")
    package_logger.setLevel(level)

    for handler in package_logger.handlers:
        handler.setLevel(level)
        if enabled:
            handler.setFormatter(logging.Formatter(LOG_FORMAT_DEBUG, datefmt=DATE_FORMAT))
        else:
            handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))


class LevelWriter:
    """File-like sink that forwards written text to a logger.

    Every write is logged straight away, one record per line at the writer's
    level. A trailing newline does not produce an empty record. Nothing is
    buffered, so an unterminated last line is never lost.
    """

    def __init__(self, logger: logging.Logger, level: int) -> None:
        self.logger = logger
        self.level = level

    def write(self, data: str) -> int:
        lines = data.split("\n")
        if lines[-1] == "":
            lines.pop()
        for line in lines:
            self.logger.log(self.level, line)
        return len(data)

    def flush(self) -> None:
        pass

    def __repr__(self) -> str:
        return f"LevelWriter({self.logger.name!r}, {logging.getLevelName(self.level)})"


def get_writer_for_level(logger: logging.Logger, level: int) -> LevelWriter:
    """Get a writer that logs everything written to it at the given level.

    Args:
        logger: Logger that receives the written lines.
        level: Logging level (e.g. logging.INFO, logging.ERROR).

    Returns:
        Writer bound to the logger and level.
    """
    return LevelWriter(logger, level)
