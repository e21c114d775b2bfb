"""
Price router configuration for pricefeed-router.
"""

import re
from dataclasses import dataclass, field
from typing import Tuple

from .base import BaseConfig, ConfigError, env_field

# Witnet price router deployment on Polygon mainnet
DEFAULT_ROUTER_ADDRESS = "0x3806311c7138ddF2bAF2C2093ff3633E5A73AbD4"

_ADDRESS_RE = re.compile(r"^0x[0-9a-fA-F]{40}$")


def _intermediaries_from_env() -> Tuple[str, ...]:
    return tuple(BaseConfig.get_env_list("INTERMEDIARY_ASSETS", ["USD"]))


@dataclass
class RouterConfig(BaseConfig):
    """Upstream price router and route discovery settings."""

    RPC_URL: str = env_field("RPC_URL", "https://polygon-rpc.com")
    PRICE_ROUTER_ADDRESS: str = env_field("PRICE_ROUTER_ADDRESS", DEFAULT_ROUTER_ADDRESS)
    RPC_TIMEOUT_SECONDS: int = field(
        default_factory=lambda: BaseConfig.get_env_int("RPC_TIMEOUT_SECONDS", 30)
    )

    # Search order matters: the first intermediary that connects a pair wins
    INTERMEDIARY_ASSETS: Tuple[str, ...] = field(default_factory=_intermediaries_from_env)

    # Metadata reported by the oracle facade
    ORACLE_NAME: str = env_field("ORACLE_NAME", "Witnet")
    ORACLE_SYMBOL: str = env_field("ORACLE_SYMBOL", "WIT")

    def _validate_config(self):
        super()._validate_config()
        # Lists handed in directly must not stay mutable
        self.INTERMEDIARY_ASSETS = tuple(self.INTERMEDIARY_ASSETS)
        if not self.INTERMEDIARY_ASSETS:
            raise ConfigError("INTERMEDIARY_ASSETS must contain at least one asset")
        if len(set(self.INTERMEDIARY_ASSETS)) != len(self.INTERMEDIARY_ASSETS):
            raise ConfigError(f"Duplicate intermediary assets: {self.INTERMEDIARY_ASSETS}")
        if not _ADDRESS_RE.match(self.PRICE_ROUTER_ADDRESS):
            raise ConfigError(f"Invalid price router address: {self.PRICE_ROUTER_ADDRESS}")
        if not self.RPC_URL.startswith(("http://", "https://")):
            raise ConfigError(f"RPC_URL must be an http(s) endpoint, got: {self.RPC_URL}")
        if self.RPC_TIMEOUT_SECONDS <= 0:
            raise ConfigError("RPC_TIMEOUT_SECONDS must be positive")
