"""Value object for parsed tokens."""

from dataclasses import dataclass

from recordcheck.config import SEPARATOR


@dataclass(frozen=True, slots=True)
class Token:
    """Immutable result of parsing a ``<number>_<remainder>`` string.

    Conventions:
      - `number` is the integer prefix (signed 64-bit range).
      - `remainder` is the text after the separator, verbatim; it may be
        non-numeric or empty.
    """

    number: int
    remainder: str

    def __str__(self) -> str:
        return f"{self.number}{SEPARATOR}{self.remainder}"
