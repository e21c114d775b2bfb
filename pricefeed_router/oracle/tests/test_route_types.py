"""Tests for route descriptors and their wire encoding."""

import pytest

from pricefeed_router.oracle import DescriptorError, RouteDescriptor
from pricefeed_router.registry import ZERO_PAIR_ID

BASE_ID = bytes.fromhex("c5d24601")
QUOTE_ID = bytes.fromhex("0a0b0c0d")


@pytest.fixture
def routed():
    return RouteDescriptor(
        desired_decimals=15,
        base_precision=6,
        base_id=BASE_ID,
        quote_precision=9,
        quote_id=QUOTE_ID,
        is_quote_inverted=True,
    )


class TestRouteDescriptor:
    """Construction and invariants."""

    def test_native_constructor(self):
        descriptor = RouteDescriptor.native(3, 6, BASE_ID)

        assert descriptor.is_native
        assert descriptor.quote_precision == 0
        assert descriptor.quote_id == ZERO_PAIR_ID
        assert descriptor.is_quote_inverted is False
        assert descriptor.pair_ids == (BASE_ID,)

    def test_routed_descriptor(self, routed):
        assert not routed.is_native
        assert routed.pair_ids == (BASE_ID, QUOTE_ID)

    def test_is_immutable(self, routed):
        with pytest.raises(AttributeError):
            routed.desired_decimals = 6

    def test_bytearray_ids_are_frozen(self):
        descriptor = RouteDescriptor.native(6, 6, bytearray(BASE_ID))
        assert isinstance(descriptor.base_id, bytes)

    @pytest.mark.parametrize("kwargs", [
        dict(desired_decimals=-1, base_precision=6, base_id=BASE_ID),
        dict(desired_decimals=256, base_precision=6, base_id=BASE_ID),
        dict(desired_decimals=6, base_precision=6, base_id=b"\x01\x02"),
        dict(desired_decimals=6, base_precision=6, base_id=BASE_ID, quote_id=bytes(32)),
        dict(desired_decimals=6, base_precision="6", base_id=BASE_ID),
    ])
    def test_invalid_fields(self, kwargs):
        with pytest.raises(DescriptorError):
            RouteDescriptor(**kwargs)

    def test_str_mentions_operation(self, routed):
        assert "/" in str(routed).split("->")[0]
        assert "native" in str(RouteDescriptor.native(6, 6, BASE_ID))


class TestDescriptorEncoding:
    """ABI payloads handed to and from callers."""

    def test_encoded_layout(self, routed):
        data = routed.to_bytes()

        # Six static ABI words
        assert len(data) == 6 * 32
        assert data[31] == 15
        assert data[63] == 6
        assert data[64:68] == BASE_ID
        assert data[127] == 9
        assert data[128:132] == QUOTE_ID
        assert data[191] == 1

    def test_round_trip(self, routed):
        assert RouteDescriptor.from_bytes(routed.to_bytes()) == routed

    def test_hex_with_and_without_prefix(self, routed):
        encoded = routed.to_hex()

        assert encoded.startswith("0x")
        assert RouteDescriptor.from_hex(encoded) == routed
        assert RouteDescriptor.from_hex(encoded[2:]) == routed

    def test_truncated_payload(self, routed):
        with pytest.raises(DescriptorError):
            RouteDescriptor.from_bytes(routed.to_bytes()[:100])

    def test_invalid_bool_word(self, routed):
        data = bytearray(routed.to_bytes())
        data[191] = 2
        with pytest.raises(DescriptorError):
            RouteDescriptor.from_bytes(bytes(data))

    def test_invalid_hex(self):
        with pytest.raises(DescriptorError):
            RouteDescriptor.from_hex("0xnothex")
