"""Domain layer: token parsing and the value objects it works with."""

from .design import Design
from .errors import DomainError, MalformedTokenError, TokenOverflowError
from .parser import format_token, parse, try_parse
from .token import Token

__all__ = [
    "Design",
    "DomainError",
    "MalformedTokenError",
    "Token",
    "TokenOverflowError",
    "format_token",
    "parse",
    "try_parse",
]
