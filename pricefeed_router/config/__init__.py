"""
Configuration management for pricefeed-router.

Example:
    from pricefeed_router.config import get_config

    config = get_config()

    rpc_url = config.router.RPC_URL
    thirds = config.router.INTERMEDIARY_ASSETS
"""

from .base import LOG_FORMAT, BaseConfig, ConfigError
from .manager import ConfigManager, get_config, reload_config
from .router import RouterConfig

__all__ = [
    "LOG_FORMAT",
    "BaseConfig",
    "ConfigError",
    "RouterConfig",
    "ConfigManager",
    "get_config",
    "reload_config",
]
