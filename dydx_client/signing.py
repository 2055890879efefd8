"""Signing of onboarding actions.

The onboarding client only needs something with a ``sign`` method; see
:class:`OnboardingSigner`. :class:`EthereumOnboardingSigner` is the bundled
implementation for a locally held Ethereum private key, built on eth-account.
"""
from __future__ import annotations

import logging
from typing import Awaitable, Protocol, Union

from eth_account import Account
from eth_account.messages import encode_defunct, encode_typed_data
from eth_utils import keccak

from .constants import NETWORK_ID_MAINNET, OnboardingAction, SigningMethod
from .errors import SigningError

EIP712_DOMAIN_NAME = "dYdX"
EIP712_DOMAIN_VERSION = "1.0"
EIP712_DOMAIN_STRING = "EIP712Domain(string name,string version,uint256 chainId)"
EIP712_ONBOARDING_ACTION_STRUCT_STRING = "dYdX(string action,string onlySignOn)"
EIP712_ONBOARDING_ACTION_STRUCT_STRING_TESTNET = "dYdX(string action)"
ONLY_SIGN_ON_DOMAIN_MAINNET = "https://trade.dydx.exchange"

# Trailing byte appended to raw signatures, telling the API how the hash was signed.
SIGNATURE_TYPE_NO_PREPEND = "00"
SIGNATURE_TYPE_DECIMAL = "01"


class OnboardingSigner(Protocol):
    """Anything able to sign an onboarding action for an Ethereum address."""

    def sign(
        self,
        ethereum_address: str,
        signing_method: SigningMethod,
        action: OnboardingAction,
    ) -> Union[str, Awaitable[str]]:
        ...


class EthereumOnboardingSigner:
    """Sign onboarding actions with a private key, for one network."""

    def __init__(self, network_id: int, private_key: str) -> None:
        self.network_id = network_id
        self._account = Account.from_key(private_key)
        self.logger = logging.getLogger(self.__class__.__name__)

    @property
    def address(self) -> str:
        return self._account.address

    def _is_mainnet(self) -> bool:
        return self.network_id == NETWORK_ID_MAINNET

    def typed_data(self, action: OnboardingAction) -> dict:
        """Return the EIP-712 payload for ``action`` on this network."""
        fields = [{"name": "action", "type": "string"}]
        message = {"action": action.value}
        if self._is_mainnet():
            fields.append({"name": "onlySignOn", "type": "string"})
            message["onlySignOn"] = ONLY_SIGN_ON_DOMAIN_MAINNET
        return {
            "types": {
                "EIP712Domain": [
                    {"name": "name", "type": "string"},
                    {"name": "version", "type": "string"},
                    {"name": "chainId", "type": "uint256"},
                ],
                "dYdX": fields,
            },
            "primaryType": "dYdX",
            "domain": {
                "name": EIP712_DOMAIN_NAME,
                "version": EIP712_DOMAIN_VERSION,
                "chainId": self.network_id,
            },
            "message": message,
        }

    def get_hash(self, action: OnboardingAction) -> bytes:
        """Return the EIP-712 digest of ``action``."""
        domain_separator = keccak(
            keccak(text=EIP712_DOMAIN_STRING)
            + keccak(text=EIP712_DOMAIN_NAME)
            + keccak(text=EIP712_DOMAIN_VERSION)
            + self.network_id.to_bytes(32, "big")
        )
        if self._is_mainnet():
            struct_hash = keccak(
                keccak(text=EIP712_ONBOARDING_ACTION_STRUCT_STRING)
                + keccak(text=action.value)
                + keccak(text=ONLY_SIGN_ON_DOMAIN_MAINNET)
            )
        else:
            struct_hash = keccak(
                keccak(text=EIP712_ONBOARDING_ACTION_STRUCT_STRING_TESTNET)
                + keccak(text=action.value)
            )
        return keccak(b"\x19\x01" + domain_separator + struct_hash)

    def sign(
        self,
        ethereum_address: str,
        signing_method: SigningMethod,
        action: OnboardingAction,
    ) -> str:
        if ethereum_address.lower() != self.address.lower():
            raise SigningError(
                f"Cannot sign for {ethereum_address}: key belongs to {self.address}"
            )
        if signing_method == SigningMethod.TYPED_DATA:
            signable = encode_typed_data(full_message=self.typed_data(action))
            signature_type = SIGNATURE_TYPE_NO_PREPEND
        elif signing_method == SigningMethod.HASH:
            signable = encode_defunct(primitive=self.get_hash(action))
            signature_type = SIGNATURE_TYPE_DECIMAL
        else:
            raise SigningError(f"Unsupported signing method: {signing_method}")
        signed = self._account.sign_message(signable)
        self.logger.debug("Signed onboarding action %r", action.value)
        return "0x" + bytes(signed.signature).hex() + signature_type
