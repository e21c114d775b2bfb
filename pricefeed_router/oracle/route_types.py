"""
Route descriptor produced by route discovery.

A descriptor records what to fetch and how to combine it, never the price
itself, so it can be cached by the caller and replayed against live prices.
"""

from dataclasses import dataclass

from eth_abi import decode, encode
from eth_abi.exceptions import DecodingError
from hexbytes import HexBytes

from ..registry.identifiers import PAIR_ID_WIDTH, ZERO_PAIR_ID
from .errors import DescriptorError

# Wire layout of an encoded descriptor, one ABI word per field
DESCRIPTOR_ABI_TYPES = ["uint8", "uint8", "bytes4", "uint8", "bytes4", "bool"]

UINT8_MAX = 255


@dataclass(frozen=True)
class RouteDescriptor:
    """
    Self-contained description of how to obtain a rate.

    Attributes:
        desired_decimals: Precision of the composed rate
        base_precision: Precision of the first (or only) hop
        base_id: Identifier of the first (or only) hop
        quote_precision: Precision of the second hop, 0 for a native pair
        quote_id: Identifier of the second hop, zero bytes for a native pair
        is_quote_inverted: Second hop was found as QUOTE/THIRD and divides the rate
    """

    desired_decimals: int
    base_precision: int
    base_id: bytes
    quote_precision: int = 0
    quote_id: bytes = ZERO_PAIR_ID
    is_quote_inverted: bool = False

    def __post_init__(self):
        for name in ("desired_decimals", "base_precision", "quote_precision"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= UINT8_MAX:
                raise DescriptorError(f"{name} must be an integer in [0, {UINT8_MAX}], got {value!r}")
        for name in ("base_id", "quote_id"):
            value = getattr(self, name)
            if not isinstance(value, (bytes, bytearray)) or len(value) != PAIR_ID_WIDTH:
                raise DescriptorError(f"{name} must be {PAIR_ID_WIDTH} bytes, got {value!r}")
            object.__setattr__(self, name, bytes(value))
        object.__setattr__(self, "is_quote_inverted", bool(self.is_quote_inverted))

    @classmethod
    def native(cls, desired_decimals: int, precision: int, base_id: bytes) -> "RouteDescriptor":
        """Descriptor for a pair published directly under one identifier."""
        return cls(desired_decimals=desired_decimals, base_precision=precision, base_id=base_id)

    @property
    def is_native(self) -> bool:
        # A zero quote precision means single hop, whatever the other quote fields hold
        return self.quote_precision == 0

    @property
    def pair_ids(self) -> tuple:
        """Identifiers the descriptor reads from, in fetch order."""
        if self.is_native:
            return (self.base_id,)
        return (self.base_id, self.quote_id)

    def to_bytes(self) -> bytes:
        return encode(
            DESCRIPTOR_ABI_TYPES,
            [
                self.desired_decimals,
                self.base_precision,
                self.base_id,
                self.quote_precision,
                self.quote_id,
                self.is_quote_inverted,
            ],
        )

    @classmethod
    def from_bytes(cls, data: bytes) -> "RouteDescriptor":
        """
        Decode an ABI-encoded descriptor.

        Raises:
            DescriptorError: If the payload is truncated or not a descriptor
        """
        try:
            fields = decode(DESCRIPTOR_ABI_TYPES, bytes(data))
        except DecodingError as e:
            raise DescriptorError(f"Invalid route descriptor payload: {e}") from e
        return cls(*fields)

    def to_hex(self) -> str:
        return "0x" + self.to_bytes().hex()

    @classmethod
    def from_hex(cls, data: str) -> "RouteDescriptor":
        try:
            raw = HexBytes(data)
        except (ValueError, TypeError) as e:
            raise DescriptorError(f"Invalid route descriptor hex: {e}") from e
        return cls.from_bytes(raw)

    def __str__(self) -> str:
        if self.is_native:
            return (
                f"RouteDescriptor(native 0x{self.base_id.hex()}@{self.base_precision}"
                f" -> {self.desired_decimals} decimals)"
            )
        op = "/" if self.is_quote_inverted else "*"
        return (
            f"RouteDescriptor(0x{self.base_id.hex()}@{self.base_precision} {op} "
            f"0x{self.quote_id.hex()}@{self.quote_precision} -> {self.desired_decimals} decimals)"
        )
