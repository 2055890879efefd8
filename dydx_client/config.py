"""Environment-driven settings."""
from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from .constants import API_HOST_MAINNET, NETWORK_ID_MAINNET


@dataclass(frozen=True)
class Settings:
    host: str = API_HOST_MAINNET
    network_id: int = NETWORK_ID_MAINNET
    rate_limit: int = 10
    timeout: float = 30.0
    ethereum_private_key: str | None = None
    proxy: str | None = None

    @classmethod
    def from_env(cls) -> "Settings":
        # Charge le .env local (utile pour dev/local)
        load_dotenv()
        return cls(
            host=os.getenv("DYDX_API_HOST", API_HOST_MAINNET),
            network_id=int(os.getenv("DYDX_NETWORK_ID", str(NETWORK_ID_MAINNET))),
            rate_limit=int(os.getenv("DYDX_RATE_LIMIT", "10")),
            timeout=float(os.getenv("DYDX_TIMEOUT", "30")),
            ethereum_private_key=os.getenv("DYDX_ETHEREUM_PRIVATE_KEY") or None,
            proxy=os.getenv("HTTPS_PROXY") or None,
        )
