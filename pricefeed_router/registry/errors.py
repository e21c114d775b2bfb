"""
Exceptions raised while talking to a price registry.
"""


class RegistryError(Exception):
    """Base exception for registry access failures."""
    pass


class RegistryConnectionError(RegistryError):
    """Raised when the registry cannot be reached at all."""
    pass
