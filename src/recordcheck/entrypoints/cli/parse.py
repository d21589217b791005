"""RECORDCHECK token parsing command.

Parses ``<number>_<remainder>`` tokens given as arguments (or on stdin with
``-``) and prints one ``number<TAB>remainder`` line per token to **stdout**,
or a JSON array with ``--json``.

Failure modes
- Strict (default): the first malformed token aborts with exit code 1.
- Lenient: malformed tokens are reported on **stderr** and skipped.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Iterator
from typing import TextIO

import click

from recordcheck.domain import MalformedTokenError, Token, parse

from .helpers import error, warn

logger = logging.getLogger(__name__)

STDIN_MARKER = "-"


def _expand(values: Iterable[str], stdin: TextIO) -> Iterator[str]:
    """Yield raw tokens, replacing the stdin marker with stdin's non-empty lines.

    Only line endings are removed; the rest of each line is the token verbatim.
    """
    for value in values:
        if value == STDIN_MARKER:
            yield from (line for line in stdin.read().splitlines() if line)
        else:
            yield value


def _parse_all(values: Iterable[str], lenient: bool) -> list[Token]:
    tokens: list[Token] = []
    for value in values:
        try:
            token = parse(value)
        except MalformedTokenError as e:
            if not lenient:
                error(str(e))
                raise click.exceptions.Exit(1) from e
            warn(f"Skipping: {e}")
            continue
        # parse() only returns None for None input
        assert token is not None
        tokens.append(token)
    logger.info("Parsed %d token(s)", len(tokens))
    return tokens


@click.command("parse")
@click.argument("values", metavar="TOKEN...", nargs=-1, required=True)
@click.option(
    "--lenient/--strict",
    "lenient",
    default=False,
    show_default=True,
    envvar="RECORDCHECK_LENIENT",
    show_envvar=True,
    help="Skip malformed tokens with a warning instead of failing.",
)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Print the parsed tokens as a JSON array.",
)
def parse_cmd(values: tuple[str, ...], lenient: bool, as_json: bool) -> None:
    """Parse NUMBER_REMAINDER tokens. Use - to read tokens from stdin."""
    stdin = click.get_text_stream("stdin")
    tokens = _parse_all(_expand(values, stdin), lenient=lenient)

    if as_json:
        payload = [{"number": t.number, "remainder": t.remainder} for t in tokens]
        click.echo(json.dumps(payload))
        return
    for token in tokens:
        click.echo(f"{token.number}\t{token.remainder}")
