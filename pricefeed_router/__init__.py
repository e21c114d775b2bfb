"""Price feed adapter with multi-hop route discovery and decimal rescaling."""

from .oracle import PriceFeedOracle, RateCompositor, RouteDescriptor, RouteResolver, build_oracle
from .registry import InMemoryPriceRegistry, PriceRegistry, RawPrice, WitnetRouterRegistry

__version__ = "0.1.0"

__all__ = [
    "PriceFeedOracle",
    "RateCompositor",
    "RouteDescriptor",
    "RouteResolver",
    "build_oracle",
    "InMemoryPriceRegistry",
    "PriceRegistry",
    "RawPrice",
    "WitnetRouterRegistry",
]
