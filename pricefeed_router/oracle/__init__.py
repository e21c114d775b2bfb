"""Route discovery, rate composition and the oracle facade."""

from .compositor import RateCompositor
from .errors import DescriptorError, OracleError, ScalingError, UnsupportedCurrencyPairError
from .price_feed_oracle import PriceFeedOracle, build_oracle
from .resolver import NATIVE_PRECISIONS, PRECISION_COMBINATIONS, RouteResolver
from .route_types import RouteDescriptor

__all__ = [
    "RateCompositor",
    "RouteResolver",
    "RouteDescriptor",
    "PriceFeedOracle",
    "build_oracle",
    "NATIVE_PRECISIONS",
    "PRECISION_COMBINATIONS",
    "OracleError",
    "DescriptorError",
    "ScalingError",
    "UnsupportedCurrencyPairError",
]
