"""
Oracle exceptions.

A missing route or an unavailable price is reported through success flags,
not exceptions. These classes cover caller mistakes and the strict get().
"""


class OracleError(Exception):
    """Base exception for oracle operations."""
    pass


class UnsupportedCurrencyPairError(OracleError):
    """Raised by the strict get() when a descriptor references an unsupported pair."""

    def __init__(self, message: str = "unsupported currency pair", pair_id: bytes = b""):
        super().__init__(message)
        self.pair_id = pair_id


class DescriptorError(OracleError, ValueError):
    """Raised when a route descriptor is malformed or cannot be decoded."""
    pass


class ScalingError(OracleError, ValueError):
    """Raised when a rate cannot be rescaled with a non-negative power of ten."""
    pass
