"""
Currency pair captions and identifiers.

The price router addresses each feed by an ERC-2362 style identifier: the
keccak256 hash of a caption such as ``Price-BTC/USD-6``, truncated to its
first four bytes. Captions must be reproduced byte for byte, so symbols are
used exactly as given.
"""

from eth_utils import keccak

PAIR_ID_WIDTH = 4
ZERO_PAIR_ID = bytes(PAIR_ID_WIDTH)

# ERC-2362 valueFor() takes a bytes32 argument
ERC2362_ID_WIDTH = 32


def pair_caption(base: str, quote: str, precision: int) -> str:
    """
    Build the registry caption for a currency pair.

    Args:
        base: Base asset symbol (e.g. "BTC")
        quote: Quote asset symbol (e.g. "USD")
        precision: Decimals the feed is published with, a single digit

    Returns:
        Caption in the form "Price-<BASE>/<QUOTE>-<D>"

    Raises:
        ValueError: If a symbol is empty or the precision is not a single digit
    """
    if not base or not quote:
        raise ValueError("Asset symbols must not be empty")
    if isinstance(precision, bool) or not isinstance(precision, int) or not 0 <= precision <= 9:
        raise ValueError(f"Caption precision must be a single digit, got: {precision!r}")
    return f"Price-{base}/{quote}-{precision}"


def pair_id(caption: str) -> bytes:
    """Deterministic 4-byte identifier for a caption."""
    return keccak(text=caption)[:PAIR_ID_WIDTH]


def to_erc2362_id(identifier: bytes) -> bytes:
    """Left-align a pair identifier into the 32-byte form the router expects."""
    if len(identifier) != PAIR_ID_WIDTH:
        raise ValueError(f"Pair identifier must be {PAIR_ID_WIDTH} bytes, got {len(identifier)}")
    return identifier.ljust(ERC2362_ID_WIDTH, b"\x00")
