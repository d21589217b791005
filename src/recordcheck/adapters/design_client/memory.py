"""In-memory DesignClient implementation serving canned data."""

import logging

from recordcheck.domain.design import Design
from recordcheck.interfaces.design_client import DesignClient

logger = logging.getLogger(__name__)

CANNED_DESIGN = Design(id=1, user_id=9, name="Cat")
CANNED_DESIGNS = (
    Design(id=1, user_id=9, name="Cat"),
    Design(id=2, user_id=4, name="Dogggg"),
)


class FakeDesignClient(DesignClient):
    """DesignClient that ignores its inputs and returns fixed designs.

    `request_design` always answers with the same design, whatever id is
    requested, so assertions against a different expectation fail in a
    predictable way.
    """

    def request_design(self, design_id: int) -> Design:
        logger.debug("Requested design %s, serving canned design", design_id)
        return CANNED_DESIGN

    def get_all_designs(self) -> list[Design]:
        return list(CANNED_DESIGNS)
