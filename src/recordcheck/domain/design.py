"""Value object for designs served by the design client."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Design:
    """Immutable design record."""

    id: int  # pylint: disable=invalid-name
    user_id: int
    name: str
