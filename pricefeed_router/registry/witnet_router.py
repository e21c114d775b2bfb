"""
Witnet price router adapter.

Reads currency pair support and latest values from a deployed
WitnetPriceRouter contract through web3 contract calls. Only the two
read-only ERC-2362 functions the oracle needs are part of the ABI.
"""

import logging
from typing import Optional, Union

from web3 import Web3
from web3.exceptions import ContractLogicError

from .base import STATUS_NOT_FOUND, RawPrice
from .errors import RegistryConnectionError, RegistryError
from .identifiers import pair_id, to_erc2362_id

WITNET_ROUTER_ABI = [
    {
        "inputs": [{"internalType": "bytes32", "name": "_erc2362id", "type": "bytes32"}],
        "name": "supportsCurrencyPair",
        "outputs": [{"internalType": "bool", "name": "", "type": "bool"}],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [{"internalType": "bytes32", "name": "_erc2362id", "type": "bytes32"}],
        "name": "valueFor",
        "outputs": [
            {"internalType": "int256", "name": "", "type": "int256"},
            {"internalType": "uint256", "name": "", "type": "uint256"},
            {"internalType": "uint256", "name": "", "type": "uint256"},
        ],
        "stateMutability": "view",
        "type": "function",
    },
]


class WitnetRouterRegistry:
    """
    PriceRegistry backed by an on-chain Witnet price router.

    Reverts are part of the router's normal vocabulary (an unknown pair
    reverts with "unsupported currency pair") and are mapped to "unsupported"
    or "unavailable". Transport failures are not: they raise RegistryError.
    """

    def __init__(self, web3: Web3, router_address: str, block_identifier: Optional[Union[int, str]] = None):
        """
        Initialize the router adapter.

        Args:
            web3: Web3 instance connected to the router's chain
            router_address: WitnetPriceRouter contract address
            block_identifier: Block to read at (defaults to the node's latest)
        """
        self.web3 = web3
        self.router_address = Web3.to_checksum_address(router_address)
        self.block_identifier = block_identifier if block_identifier is not None else "latest"
        self.contract = web3.eth.contract(address=self.router_address, abi=WITNET_ROUTER_ABI)
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    @classmethod
    def from_rpc_url(cls, rpc_url: str, router_address: str, timeout: int = 30) -> "WitnetRouterRegistry":
        """Connect over HTTP and verify the node answers before returning."""
        web3 = Web3(Web3.HTTPProvider(rpc_url, request_kwargs={"timeout": timeout}))
        if not web3.is_connected():
            raise RegistryConnectionError(f"Cannot connect to RPC endpoint {rpc_url}")
        return cls(web3, router_address)

    def identifier_for(self, caption: str) -> bytes:
        # Same derivation as the router's currencyPairId(), done locally
        return pair_id(caption)

    def is_supported(self, pair_id: bytes) -> bool:
        try:
            return bool(
                self.contract.functions.supportsCurrencyPair(to_erc2362_id(pair_id)).call(
                    block_identifier=self.block_identifier
                )
            )
        except ContractLogicError as e:
            self.logger.debug(f"supportsCurrencyPair(0x{pair_id.hex()}) reverted: {e}")
            return False
        except Exception as e:
            raise RegistryError(f"Failed to query support for 0x{pair_id.hex()}: {e}") from e

    def price_for(self, pair_id: bytes) -> RawPrice:
        try:
            value, timestamp, status = self.contract.functions.valueFor(to_erc2362_id(pair_id)).call(
                block_identifier=self.block_identifier
            )
        except ContractLogicError as e:
            self.logger.warning(f"valueFor(0x{pair_id.hex()}) reverted: {e}")
            return RawPrice(value=0, timestamp=0, status=STATUS_NOT_FOUND)
        except Exception as e:
            raise RegistryError(f"Failed to read value for 0x{pair_id.hex()}: {e}") from e

        return RawPrice(value=int(value), timestamp=int(timestamp), status=int(status))
