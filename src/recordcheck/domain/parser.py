"""Token parsing.

Converts strings of the form ``<number>_<remainder>`` into `Token` values.

Rules:
  - ``None`` is absent input and yields ``None`` without error.
  - The string must contain exactly one ``_`` separator.
  - The prefix must be an ASCII integer with an optional leading ``-`` and must
    fit in a signed 64-bit integer; there is no truncation.
  - The remainder is kept verbatim and may be empty.

`parse` raises `MalformedTokenError` for present input that breaks these rules;
`try_parse` is the total variant that returns ``None`` instead.
"""

from __future__ import annotations

import logging
import re

from recordcheck.config import NUMBER_MAX, NUMBER_MIN, SEPARATOR

from .errors import MalformedTokenError, TokenOverflowError
from .token import Token

logger = logging.getLogger(__name__)

_NUMBER_RE = re.compile(r"-?[0-9]+")


def parse(value: str | None) -> Token | None:
    """Parse a token string.

    Args:
        value: The raw token, e.g. ``"1511443755_2"``, or None.

    Returns:
        The parsed Token, or None if `value` is None.

    Raises:
        MalformedTokenError: If `value` is missing the separator, has more than
            one, or its prefix is not an integer.
        TokenOverflowError: If the prefix is outside the signed 64-bit range.

    Example:
        >>> parse("151144375_id")
        Token(number=151144375, remainder='id')
    """
    if value is None:
        return None

    separators = value.count(SEPARATOR)
    if separators == 0:
        raise MalformedTokenError(value, f"missing {SEPARATOR!r} separator")
    if separators > 1:
        raise MalformedTokenError(
            value, f"expected one {SEPARATOR!r} separator, found {separators}"
        )

    prefix, remainder = value.split(SEPARATOR, 1)
    if not _NUMBER_RE.fullmatch(prefix):
        raise MalformedTokenError(value, f"prefix {prefix!r} is not an integer")

    number = int(prefix)
    if not NUMBER_MIN <= number <= NUMBER_MAX:
        raise TokenOverflowError(value, number)

    token = Token(number=number, remainder=remainder)
    logger.debug("Parsed %r as %r", value, token)
    return token


def try_parse(value: str | None) -> Token | None:
    """Parse a token string, returning None for absent or malformed input.

    Args:
        value: The raw token or None.

    Returns:
        The parsed Token, or None if `value` is None or malformed.
    """
    try:
        return parse(value)
    except MalformedTokenError as e:
        logger.debug("Rejected token: %s", e)
        return None


def format_token(token: Token) -> str:
    """Format a Token back into its ``<number>_<remainder>`` string.

    The result parses back to an equal Token only if the remainder contains
    no separator.
    """
    return str(token)
