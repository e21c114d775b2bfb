"""
Price feed oracle facade.

Exposes route discovery and rate composition through the byte-payload
interface lending protocols use for oracles: the caller obtains an opaque
data parameter once, stores it, and hands it back on every price read.
"""

import logging
from typing import Iterable, Optional, Tuple

from ..config import ConfigManager, get_config
from ..registry.base import PriceRegistry
from ..registry.witnet_router import WitnetRouterRegistry
from .compositor import RateCompositor
from .errors import UnsupportedCurrencyPairError
from .resolver import RouteResolver
from .route_types import RouteDescriptor

DEFAULT_NAME = "Witnet"
DEFAULT_SYMBOL = "WIT"


class PriceFeedOracle:
    """
    Oracle over a price registry with multi-hop routing.

    Args:
        registry: Registry the prices are read from
        intermediaries: Assets used to bridge pairs, highest priority first
        name: Source name reported by name()
        symbol: Source symbol reported by symbol()
    """

    def __init__(
        self,
        registry: PriceRegistry,
        intermediaries: Iterable[str],
        name: str = DEFAULT_NAME,
        symbol: str = DEFAULT_SYMBOL,
    ):
        self.registry = registry
        self.resolver = RouteResolver(registry, intermediaries)
        self.compositor = RateCompositor(registry)
        self._name = name
        self._symbol = symbol
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    @property
    def intermediaries(self) -> Tuple[str, ...]:
        return self.resolver.intermediaries

    def resolve(self, base: str, quote: str, desired_decimals: int) -> Tuple[bool, RouteDescriptor]:
        return self.resolver.resolve(base, quote, desired_decimals)

    def compose(self, descriptor: RouteDescriptor) -> Tuple[bool, int]:
        return self.compositor.compose(descriptor)

    def get_data_parameter(self, base: str, quote: str, decimals: int) -> Tuple[bool, bytes]:
        """Resolve a pair and return its descriptor as an ABI-encoded payload."""
        found, descriptor = self.resolve(base, quote, decimals)
        return found, descriptor.to_bytes()

    def peek(self, data: bytes) -> Tuple[bool, int]:
        """Latest rate for an encoded descriptor; (False, 0) when unavailable."""
        return self.compose(RouteDescriptor.from_bytes(data))

    def peek_spot(self, data: bytes) -> int:
        """Rate only, without the success flag."""
        _, rate = self.peek(data)
        return rate

    def get(self, data: bytes) -> Tuple[bool, int]:
        """
        Strict rate read.

        Same as peek() except that a descriptor pointing at a pair the
        registry does not support is an error rather than a failed read.
        This is how a failed get_data_parameter() result surfaces when a
        caller ignores its found flag.

        Raises:
            UnsupportedCurrencyPairError: If any referenced pair is unsupported
        """
        descriptor = RouteDescriptor.from_bytes(data)
        for pair_id in descriptor.pair_ids:
            if not self.registry.is_supported(pair_id):
                self.logger.error(f"get() on unsupported currency pair 0x{pair_id.hex()}")
                raise UnsupportedCurrencyPairError(pair_id=pair_id)
        return self.compose(descriptor)

    def name(self, data: bytes = b"") -> str:
        return self._name

    def symbol(self, data: bytes = b"") -> str:
        return self._symbol


def build_oracle(config: Optional[ConfigManager] = None) -> PriceFeedOracle:
    """
    Build an oracle reading from the configured on-chain price router.

    Args:
        config: Configuration to use (defaults to get_config())

    Returns:
        PriceFeedOracle connected to the router
    """
    router_config = (config or get_config()).router
    registry = WitnetRouterRegistry.from_rpc_url(
        router_config.RPC_URL,
        router_config.PRICE_ROUTER_ADDRESS,
        timeout=router_config.RPC_TIMEOUT_SECONDS,
    )
    return PriceFeedOracle(
        registry,
        router_config.INTERMEDIARY_ASSETS,
        name=router_config.ORACLE_NAME,
        symbol=router_config.ORACLE_SYMBOL,
    )
