"""
Configuration manager for pricefeed-router.

Combines the configuration classes into a single object and keeps one
process-wide instance behind get_config().
"""

import logging
from typing import Any, Dict, Optional

from .base import BaseConfig, ConfigError
from .router import RouterConfig

logger = logging.getLogger(__name__)


class ConfigManager:
    """
    Centralized configuration manager.

    Configurations are created and validated eagerly so a bad environment
    fails at startup rather than on the first price request.
    """

    def __init__(self, environment: Optional[str] = None):
        """
        Initialize the configuration manager.

        Args:
            environment: Override the environment (local, dev, staging, production)
        """
        self._environment = environment
        self._base_config = None
        self._router_config = None
        self._initialize_configs()

    def _initialize_configs(self):
        """Initialize all configuration objects."""
        try:
            if self._environment:
                self._base_config = BaseConfig(ENVIRONMENT=self._environment)
                self._router_config = RouterConfig(ENVIRONMENT=self._environment)
            else:
                self._base_config = BaseConfig()
                self._router_config = RouterConfig()
        except ConfigError:
            raise
        except Exception as e:
            logger.error(f"Failed to initialize configuration: {e}")
            raise ConfigError(f"Configuration initialization failed: {e}")

        logger.info(f"Configuration initialized for environment: {self.environment}")

    @property
    def environment(self) -> str:
        """Get current environment."""
        return self._base_config.ENVIRONMENT

    @property
    def base(self) -> BaseConfig:
        """Get base configuration."""
        return self._base_config

    @property
    def router(self) -> RouterConfig:
        """Get price router configuration."""
        return self._router_config

    def to_dict(self) -> Dict[str, Any]:
        """Convert all configurations to dictionary format."""
        return {
            "environment": self.environment,
            "base": self.base.to_dict(),
            "router": self.router.to_dict(),
        }

    def __repr__(self) -> str:
        return f"ConfigManager(environment={self.environment})"


# Global configuration manager instance
_config_manager = None


def get_config(environment: Optional[str] = None, force_reload: bool = False) -> ConfigManager:
    """
    Get the global configuration manager instance.

    Args:
        environment: Override environment
        force_reload: Force reload of configuration

    Returns:
        ConfigManager instance
    """
    global _config_manager

    if _config_manager is None or force_reload:
        _config_manager = ConfigManager(environment=environment)

    return _config_manager


def reload_config(environment: Optional[str] = None) -> ConfigManager:
    """Reload the global configuration manager."""
    return get_config(environment=environment, force_reload=True)
