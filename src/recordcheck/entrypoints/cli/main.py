"""RECORDCHECK CLI entry point.

Defines the top-level ``recordcheck`` command (via Click-Extra) and registers
its subcommands.

Currently available commands
- ``recordcheck parse``: parse ``<number>_<remainder>`` tokens.
- ``recordcheck designs``: inspect designs served by the design client.

Examples
    $ recordcheck --version
    $ recordcheck parse 1511443755_2 151144375_id
    $ recordcheck -v designs list --json
"""

import logging
from pathlib import Path

import click
import click_extra as clickx

from recordcheck import __version__, config
from recordcheck.logging import (
    LoggingSettings,
    configure_logging,
    log_startup,
    verbosity_level,
)

from .designs import designs as designs_group
from .helpers import parse_log_level
from .parse import parse_cmd

logger = logging.getLogger(__name__)


HELP = """RECORDCHECK command-line interface.

    Parses NUMBER_REMAINDER tokens into structured values and serves the
    sample design records used by the assertion-style examples.
    """


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help=(
        "Increase the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help=(
        "Decrease the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (enables extra developer diagnostics beyond -vvv).",
    default=False,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to the flight recorder log file.  [default: user log dir]",
    default=None,
    envvar="RECORDCHECK_LOG_PATH",
    show_envvar=True,
)
@click.option(
    "--flight-recorder-capacity",
    type=click.IntRange(min=1),
    default=config.DEFAULT_FLIGHT_RECORDER_CAPACITY,
    hidden=True,
    envvar="RECORDCHECK_FLIGHT_RECORDER_CAPACITY",
    show_envvar=True,
    help="Capacity of the flight recorder (in number of log records).",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    help=(
        "Enable the in-memory flight recorder. Keeps the last N log records "
        "at DEBUG granularity (unaffected by -v/-q) and writes them to "
        "--log-path when a WARNING/ERROR occurs, or on exit if --force-flush "
        "is set."
    ),
    default=True,
    envvar="RECORDCHECK_FLIGHT_RECORDER",
    show_envvar=True,
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    is_flag=True,
    help="Force-flush the flight recorder buffer to --log-path on program exit.",
    default=False,
    show_default=True,
    envvar="RECORDCHECK_FORCE_FLUSH_FLIGHT_RECORDER",
    show_envvar=True,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    help=(
        "Set MINIMUM LEVEL for specific LOGGERS (NAME=LEVEL). Applies to BOTH "
        "console and flight-recorder. Repeatable (e.g. -L click_extra=INFO) "
        "or via RECORDCHECK_LOGGER_LEVELS (comma/space list)."
    ),
    default=("click_extra=WARNING",),
    show_default=True,
    envvar="RECORDCHECK_LOGGER_LEVELS",
    show_envvar=True,
)
@clickx.pass_context
def recordcheck(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path | None,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush_flight_recorder: bool,
    logger_levels: dict[str, int],
) -> None:
    """RECORDCHECK command-line interface."""
    settings = LoggingSettings(
        console_level=verbosity_level(verbose_count, quiet_count),
        debug=debug,
        color=ctx.color is not False,  # None or True => allow color
        flight_recorder=flight_recorder,
        log_path=log_path,
        flight_capacity=flight_recorder_capacity,
        force_flush=force_flush_flight_recorder,
        logger_levels=logger_levels,
    )
    handlers = configure_logging(settings)
    log_startup(logger, settings, handlers)

    ctx.call_on_close(logging.shutdown)


recordcheck.add_command(parse_cmd)
recordcheck.add_command(designs_group)
