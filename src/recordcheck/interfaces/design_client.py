"""Interface for clients that serve designs."""

from __future__ import annotations

import abc

from recordcheck.domain.design import Design


class DesignClient(abc.ABC):
    """Read-only access to designs."""

    @abc.abstractmethod
    def request_design(self, design_id: int) -> Design:
        """Request a single design.

        Args:
            design_id: Identifier of the design to request.

        Returns:
            The design served for `design_id`.
        """

    @abc.abstractmethod
    def get_all_designs(self) -> list[Design]:
        """Return every design, in the order the client serves them."""
