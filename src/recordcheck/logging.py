"""Logging setup for the recordcheck CLI.

The root command turns its options into a `LoggingSettings` and hands it to
`configure_logging`, which installs two handlers on the root logger:

- a Rich console handler on stderr whose level follows ``-v`` / ``-q``;
- an optional flight recorder, a memory buffer that captures every record at
  DEBUG and writes the buffer to the log file once a WARNING shows up (or on
  exit when forced).

Per-logger overrides (``-L NAME=LEVEL``) are applied on top, so they bound
both handlers.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from collections.abc import Mapping
from dataclasses import dataclass, field
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

from recordcheck import __version__, config

# pylint: disable=too-few-public-methods

ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]

CONSOLE_FORMAT = "%(prefix)s %(message)s"
DEBUG_CONSOLE_FORMAT = "%(asctime)s %(name)s: %(message)s"
RECORDER_FORMAT = (
    "%(asctime)s %(levelname)-8s [pid %(process)d] %(name)s:%(lineno)d %(message)s"
)


def verbosity_level(verbose_count: int = 0, quiet_count: int = 0) -> int:
    """Map ``-v`` / ``-q`` repetitions to a level, starting from WARNING.

    Each step moves one standard level; the result is clamped to
    DEBUG..CRITICAL.
    """
    level = logging.WARNING + 10 * (quiet_count - verbose_count)
    return max(logging.DEBUG, min(logging.CRITICAL, level))


@dataclass(frozen=True, slots=True)
class LoggingSettings:
    """Logging options collected from the root command line."""

    console_level: int = logging.WARNING
    debug: bool = False
    color: bool = True
    flight_recorder: bool = True
    log_path: Path | None = None
    flight_capacity: int = config.DEFAULT_FLIGHT_RECORDER_CAPACITY
    force_flush: bool = False
    logger_levels: Mapping[str, int] = field(default_factory=dict)

    def resolved_log_path(self) -> Path:
        """The flight recorder file: the explicit path or the user log dir."""
        return self.log_path if self.log_path is not None else config.default_log_path()


class ThirdPartyPrefixFilter(logging.Filter):
    """Tag each record with `prefix`, the top-level package of foreign loggers.

    Records from ``project`` loggers get an empty prefix; anything else gets
    e.g. ``[click_extra]``. Never drops a record.
    """

    def __init__(self, project: str = config.APP_NAME) -> None:
        super().__init__()
        self.project = project

    def filter(self, record: logging.LogRecord) -> bool:
        package = record.name.partition(".")[0]
        record.prefix = "" if package == self.project else f"[{package}]"
        return True


def build_console_handler(
    level: int = logging.INFO, *, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Return a RichHandler writing to stderr.

    In debug mode the level drops to DEBUG and records show their time,
    logger name and source location; otherwise foreign records are prefixed
    with their package name.
    """
    color_system: ColorSystem | None = "auto" if color else None
    handler = RichHandler(
        level=logging.DEBUG if debug_mode else level,
        console=Console(color_system=color_system, stderr=True),
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )
    if debug_mode:
        handler.setFormatter(logging.Formatter(DEBUG_CONSOLE_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        handler.addFilter(ThirdPartyPrefixFilter())
    return handler


def build_flight_recorder(
    path: Path,
    *,
    capacity: int = config.DEFAULT_FLIGHT_RECORDER_CAPACITY,
    flush_level: int = logging.WARNING,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Return a memory buffer of up to `capacity` records backed by `path`.

    The buffer is written when a record at `flush_level` or above arrives,
    when it fills up, and on close if `flush_on_close` is set. The file is
    only created on the first write.
    """
    target = logging.FileHandler(path, mode="w", encoding="utf-8", delay=True)
    target.setLevel(logging.DEBUG)
    target.setFormatter(logging.Formatter(RECORDER_FORMAT))
    return MemoryHandler(
        capacity, flushLevel=flush_level, target=target, flushOnClose=flush_on_close
    )


def configure_logging(settings: LoggingSettings) -> list[logging.Handler]:
    """Install the handlers described by `settings` on the root logger.

    The root logger passes everything (DEBUG); each handler applies its own
    level. Returns the installed handlers.
    """
    handlers: list[logging.Handler] = [
        build_console_handler(
            settings.console_level, debug_mode=settings.debug, color=settings.color
        )
    ]
    if settings.flight_recorder:
        handlers.append(
            build_flight_recorder(
                settings.resolved_log_path(),
                capacity=settings.flight_capacity,
                flush_on_close=settings.force_flush,
            )
        )

    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)
    for name, level in settings.logger_levels.items():
        logging.getLogger(name).setLevel(level)
    return handlers


def log_startup(
    logger: logging.Logger,
    settings: LoggingSettings,
    handlers: list[logging.Handler],
) -> None:
    """Log a one-line INFO banner, then the run's diagnostics at DEBUG."""
    logger.info(
        "RECORDCHECK %s - console=%s, flight-recorder=%s",
        __version__,
        logging.getLevelName(settings.console_level),
        "ON" if settings.flight_recorder else "OFF",
    )

    logger.debug(
        "Python %s on %s %s (pid %s)",
        sys.version.split()[0],
        platform.system(),
        platform.release(),
        os.getpid(),
    )
    logger.debug(
        "Token format: NUMBER%sREMAINDER, NUMBER in [%d, %d]",
        config.SEPARATOR,
        config.NUMBER_MIN,
        config.NUMBER_MAX,
    )
    logger.debug("Handlers: %s", ", ".join(type(h).__name__ for h in handlers))
    if settings.flight_recorder:
        logger.debug(
            "Flight recorder: %s (capacity %d, %s)",
            settings.resolved_log_path(),
            settings.flight_capacity,
            "flushed on exit" if settings.force_flush else "flushed on WARNING",
        )
    overrides = {
        name: logging.getLevelName(level)
        for name, level in settings.logger_levels.items()
    }
    logger.debug("Per-logger overrides: %s", overrides or "<none>")
