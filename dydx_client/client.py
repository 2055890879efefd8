"""Entry point bundling the public and onboarding clients on one session."""
from __future__ import annotations

import aiohttp
from aiolimiter import AsyncLimiter

from .config import Settings
from .keys import KeyDeriver
from .onboarding import Onboarding
from .public import Public
from .signing import EthereumOnboardingSigner, OnboardingSigner


class Client:
    """dYdX v3 REST client.

    ``onboarding`` is only available when a signer is given, or when the
    settings carry an Ethereum private key. Both sub-clients share one session
    and one rate limiter.

    ``derive_stark_key`` needs a ``key_deriver`` turning signature bytes into
    a :class:`KeyPairWithYCoordinate`, for instance one built on dydx-v3-python::

        from dydx3.starkex.helpers import private_key_to_public_key_pair_hex
        from eth_utils import keccak

        def key_deriver(data: bytes) -> KeyPairWithYCoordinate:
            private_key = hex(int.from_bytes(keccak(data), "big") >> 5)
            public_x, public_y = private_key_to_public_key_pair_hex(private_key)
            return KeyPairWithYCoordinate(public_x, public_y, private_key)
    """

    def __init__(
        self,
        settings: Settings | None = None,
        session: aiohttp.ClientSession | None = None,
        signer: OnboardingSigner | None = None,
        key_deriver: KeyDeriver | None = None,
    ) -> None:
        self.settings = settings or Settings()
        # Signer first: a bad private key must not leave an open session behind.
        if signer is None and self.settings.ethereum_private_key:
            signer = EthereumOnboardingSigner(
                self.settings.network_id, self.settings.ethereum_private_key
            )
        self._owns_session = session is None
        if session is None:
            session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.settings.timeout)
            )
        self.session = session
        self.limiter = AsyncLimiter(self.settings.rate_limit, 1)
        self.public = Public(
            self.settings.host,
            session=session,
            proxy=self.settings.proxy,
            limiter=self.limiter,
        )
        self.onboarding = None
        if signer is not None:
            self.onboarding = Onboarding(
                self.settings.host,
                signer,
                key_deriver=key_deriver,
                session=session,
                proxy=self.settings.proxy,
                limiter=self.limiter,
            )

    async def close(self) -> None:
        if self._owns_session:
            await self.session.close()

    async def __aenter__(self) -> "Client":
        return self

    async def __aexit__(self, *exc) -> None:
        await self.close()
