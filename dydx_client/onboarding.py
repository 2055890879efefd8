"""Onboarding endpoints and STARK key derivation."""
from __future__ import annotations

import inspect
from typing import Any

import aiohttp
from aiolimiter import AsyncLimiter

from .base import AbstractRestClient
from .constants import (
    ETHEREUM_ADDRESS_HEADER,
    SIGNATURE_HEADER,
    OnboardingAction,
    SigningMethod,
)
from .errors import DydxError
from .helpers import strip_hex_prefix
from .keys import KeyDeriver, KeyPairWithYCoordinate
from .signing import OnboardingSigner


class Onboarding(AbstractRestClient):
    """Client for the Ethereum-signed onboarding flow."""

    def __init__(
        self,
        host: str,
        signer: OnboardingSigner,
        key_deriver: KeyDeriver | None = None,
        session: aiohttp.ClientSession | None = None,
        rate_limit: int = 10,
        proxy: str | None = None,
        timeout: float | None = None,
        limiter: AsyncLimiter | None = None,
    ) -> None:
        super().__init__(
            host,
            session=session,
            rate_limit=rate_limit,
            proxy=proxy,
            timeout=timeout,
            limiter=limiter,
        )
        self.signer = signer
        self.key_deriver = key_deriver

    async def _sign(
        self,
        ethereum_address: str,
        signing_method: SigningMethod,
        action: OnboardingAction,
    ) -> str:
        signature = self.signer.sign(ethereum_address, signing_method, action)
        if inspect.isawaitable(signature):
            signature = await signature
        return signature

    async def _post(
        self,
        endpoint: str,
        data: dict[str, Any],
        ethereum_address: str,
        signature: str | None = None,
        signing_method: SigningMethod = SigningMethod.HASH,
    ) -> dict:
        if not signature:
            signature = await self._sign(
                ethereum_address, signing_method, OnboardingAction.ONBOARDING
            )
        return await self._request(
            "POST",
            self._url(endpoint),
            data=data,
            headers={
                SIGNATURE_HEADER: signature,
                ETHEREUM_ADDRESS_HEADER: ethereum_address,
            },
        )

    async def create_user(
        self,
        params: dict[str, str],
        ethereum_address: str,
        signature: str | None = None,
        signing_method: SigningMethod = SigningMethod.HASH,
    ) -> dict:
        """Create a user, an account and an API key in one request.

        ``params`` holds ``starkKey`` and ``starkKeyYCoordinate``. When no
        ``signature`` is given one is requested from the signer.
        Returns a dict with ``apiKey``, ``user`` and ``account``.
        """
        return await self._post(
            "onboarding",
            params,
            ethereum_address,
            signature=signature,
            signing_method=signing_method,
        )

    async def derive_stark_key(
        self,
        ethereum_address: str,
        signing_method: SigningMethod = SigningMethod.HASH,
    ) -> KeyPairWithYCoordinate:
        """Derive a STARK key pair deterministically from an Ethereum key."""
        if self.key_deriver is None:
            raise DydxError("No STARK key deriver configured")
        signature = await self._sign(
            ethereum_address, signing_method, OnboardingAction.KEY_DERIVATION
        )
        return self.key_deriver(bytes.fromhex(strip_hex_prefix(signature)))
