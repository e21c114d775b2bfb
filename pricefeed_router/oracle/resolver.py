"""
Route discovery.

Resolves a (base, quote, decimals) request into a RouteDescriptor, either
for a pair the registry publishes natively or for a two-hop route through
one of the configured intermediary assets.
"""

import logging
from typing import Iterable, Optional, Tuple

from ..registry.base import PriceRegistry
from ..registry.identifiers import pair_caption
from .route_types import UINT8_MAX, RouteDescriptor

# The registry only publishes 6 and 9 decimal feeds; 6 is the common one
NATIVE_PRECISIONS = (6, 9)

# (base hop precision, quote hop precision), tried in this order
PRECISION_COMBINATIONS = ((6, 6), (6, 9), (9, 6), (9, 9))


class RouteResolver:
    """
    Finds how a currency pair can be priced from the registry.

    Search order is fixed: native at 6 decimals, native at 9 decimals, then
    each intermediary in configuration order with every precision
    combination. The first match wins. Only read-only support queries are
    made, so resolving is safe to repeat and its result safe to cache.
    """

    def __init__(self, registry: PriceRegistry, intermediaries: Iterable[str]):
        """
        Initialize the resolver.

        Args:
            registry: Price registry answering support queries
            intermediaries: Assets to route through, highest priority first
        """
        self.registry = registry
        self._intermediaries = tuple(intermediaries)
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    @property
    def intermediaries(self) -> Tuple[str, ...]:
        return self._intermediaries

    def resolve(self, base: str, quote: str, desired_decimals: int) -> Tuple[bool, RouteDescriptor]:
        """
        Resolve a currency pair to a route descriptor.

        Args:
            base: Base asset symbol
            quote: Quote asset symbol
            desired_decimals: Decimals the composed rate should carry

        Returns:
            (found, descriptor). When nothing routes the pair, found is False
            and the descriptor is the native 6-decimal one, kept so failures
            can name a concrete identifier. It must not be used for pricing.

        Raises:
            ValueError: If base or quote is empty, or desired_decimals is
                outside [0, 255]
        """
        if not base or not quote:
            raise ValueError(f"base and quote symbols must be non-empty, got {base!r}/{quote!r}")
        if isinstance(desired_decimals, bool) or not isinstance(desired_decimals, int) \
                or not 0 <= desired_decimals <= UINT8_MAX:
            raise ValueError(f"desired_decimals must be an integer in [0, {UINT8_MAX}], got {desired_decimals!r}")

        for precision in NATIVE_PRECISIONS:
            native_id = self._supported_id(base, quote, precision)
            if native_id is not None:
                self.logger.info(f"Resolved {base}/{quote} natively at {precision} decimals")
                return True, RouteDescriptor.native(desired_decimals, precision, native_id)

        for third in self._intermediaries:
            descriptor = self._resolve_through(base, quote, third, desired_decimals)
            if descriptor is not None:
                direction = "reverse" if descriptor.is_quote_inverted else "direct"
                self.logger.info(
                    f"Resolved {base}/{quote} through {third} ({direction}, "
                    f"precisions {descriptor.base_precision}/{descriptor.quote_precision})"
                )
                return True, descriptor

        self.logger.info(f"No route for {base}/{quote} via {list(self._intermediaries)}")
        fallback_id = self.registry.identifier_for(pair_caption(base, quote, NATIVE_PRECISIONS[0]))
        return False, RouteDescriptor.native(desired_decimals, NATIVE_PRECISIONS[0], fallback_id)

    def _resolve_through(
        self, base: str, quote: str, third: str, desired_decimals: int
    ) -> Optional[RouteDescriptor]:
        for base_precision, quote_precision in PRECISION_COMBINATIONS:
            base_id = self._supported_id(base, third, base_precision)
            if base_id is None:
                continue

            quote_id = self._supported_id(third, quote, quote_precision)
            inverted = False
            if quote_id is None:
                quote_id = self._supported_id(quote, third, quote_precision)
                inverted = True
            if quote_id is None:
                continue

            return RouteDescriptor(
                desired_decimals=desired_decimals,
                base_precision=base_precision,
                base_id=base_id,
                quote_precision=quote_precision,
                quote_id=quote_id,
                is_quote_inverted=inverted,
            )
        return None

    def _supported_id(self, base: str, quote: str, precision: int) -> Optional[bytes]:
        caption = pair_caption(base, quote, precision)
        identifier = self.registry.identifier_for(caption)
        supported = self.registry.is_supported(identifier)
        self.logger.debug(f"{caption} (0x{identifier.hex()}) supported={supported}")
        return identifier if supported else None
