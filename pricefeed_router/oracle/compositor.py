"""
Rate composition from a route descriptor.
"""

import logging
from typing import Tuple

from ..registry.base import PriceRegistry, RawPrice
from .rate_math import compose_direct, compose_inverted, rescale
from .route_types import RouteDescriptor


class RateCompositor:
    """
    Fetches the prices a descriptor references and combines them.

    Every call reads live prices; nothing is cached and nothing is retried.
    A price that is not available right now makes the whole composition
    unsuccessful. A partial result is never returned.
    """

    def __init__(self, registry: PriceRegistry):
        self.registry = registry
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def compose(self, descriptor: RouteDescriptor) -> Tuple[bool, int]:
        """
        Compute the rate described by a route descriptor.

        Args:
            descriptor: Result of route discovery

        Returns:
            (success, rate) with rate at descriptor.desired_decimals. The rate
            is meaningless (0) when success is False.

        Raises:
            ScalingError: If the descriptor's precisions and decimals would
                need a negative power of ten
        """
        base_price = self.registry.price_for(descriptor.base_id)

        if descriptor.is_native:
            if not self._usable(descriptor.base_id, base_price):
                return False, 0
            rate = rescale(
                value=base_price.value,
                precision=descriptor.base_precision,
                decimals=descriptor.desired_decimals,
            )
            return True, rate

        quote_price = self.registry.price_for(descriptor.quote_id)
        if not (self._usable(descriptor.base_id, base_price) and self._usable(descriptor.quote_id, quote_price)):
            return False, 0

        combine = compose_inverted if descriptor.is_quote_inverted else compose_direct
        rate = combine(
            base_value=base_price.value,
            base_precision=descriptor.base_precision,
            quote_value=quote_price.value,
            quote_precision=descriptor.quote_precision,
            decimals=descriptor.desired_decimals,
        )
        return True, rate

    def _usable(self, pair_id: bytes, price: RawPrice) -> bool:
        if not price.ok:
            self.logger.warning(f"Price for 0x{pair_id.hex()} unavailable (status {price.status})")
            return False
        # Rates are magnitudes; a non-positive price cannot be one and cannot divide
        if price.value <= 0:
            self.logger.warning(f"Price for 0x{pair_id.hex()} is not positive ({price.value})")
            return False
        return True
