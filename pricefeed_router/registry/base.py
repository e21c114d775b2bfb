"""
Interface to the upstream price-source registry.

The registry stores raw integer prices keyed by pair identifier. The oracle
only ever reads from it: support checks and price lookups.
"""

from dataclasses import dataclass
from typing import Protocol

STATUS_OK = 200
STATUS_BAD_REQUEST = 400
STATUS_NOT_FOUND = 404


@dataclass(frozen=True)
class RawPrice:
    """
    Price as reported by the registry for one identifier.

    Attributes:
        value: Signed integer magnitude at the feed's own precision
        timestamp: Publication time reported by the registry (unused by the oracle)
        status: 200 when the value can be trusted, anything else means unavailable
    """

    value: int
    timestamp: int
    status: int

    @property
    def ok(self) -> bool:
        return self.status == STATUS_OK


UNAVAILABLE = RawPrice(value=0, timestamp=0, status=STATUS_NOT_FOUND)


class PriceRegistry(Protocol):
    """Read-only capabilities the oracle needs from a price registry."""

    def identifier_for(self, caption: str) -> bytes: ...

    def is_supported(self, pair_id: bytes) -> bool: ...

    def price_for(self, pair_id: bytes) -> RawPrice: ...
