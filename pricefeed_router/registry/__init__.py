"""Upstream price registry boundary: identifiers, protocol and implementations."""

from .base import (
    STATUS_BAD_REQUEST,
    STATUS_NOT_FOUND,
    STATUS_OK,
    UNAVAILABLE,
    PriceRegistry,
    RawPrice,
)
from .errors import RegistryConnectionError, RegistryError
from .identifiers import PAIR_ID_WIDTH, ZERO_PAIR_ID, pair_caption, pair_id, to_erc2362_id
from .memory import InMemoryPriceRegistry
from .witnet_router import WitnetRouterRegistry

__all__ = [
    "STATUS_OK",
    "STATUS_BAD_REQUEST",
    "STATUS_NOT_FOUND",
    "UNAVAILABLE",
    "PriceRegistry",
    "RawPrice",
    "RegistryError",
    "RegistryConnectionError",
    "PAIR_ID_WIDTH",
    "ZERO_PAIR_ID",
    "pair_caption",
    "pair_id",
    "to_erc2362_id",
    "InMemoryPriceRegistry",
    "WitnetRouterRegistry",
]
