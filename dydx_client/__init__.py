"""Async client for the dYdX v3 REST API: onboarding and public market data."""

from .client import Client
from .config import Settings
from .constants import (
    API_HOST_MAINNET,
    API_HOST_ROPSTEN,
    NETWORK_ID_MAINNET,
    NETWORK_ID_ROPSTEN,
    Market,
    MarketStatisticDay,
    OnboardingAction,
    SigningMethod,
)
from .errors import DydxApiError, DydxError, SigningError
from .keys import KeyDeriver, KeyPairWithYCoordinate
from .onboarding import Onboarding
from .public import Public
from .signing import EthereumOnboardingSigner, OnboardingSigner

__all__ = [
    "Client",
    "Settings",
    "Public",
    "Onboarding",
    "OnboardingSigner",
    "EthereumOnboardingSigner",
    "KeyDeriver",
    "KeyPairWithYCoordinate",
    "DydxError",
    "DydxApiError",
    "SigningError",
    "SigningMethod",
    "OnboardingAction",
    "Market",
    "MarketStatisticDay",
    "API_HOST_MAINNET",
    "API_HOST_ROPSTEN",
    "NETWORK_ID_MAINNET",
    "NETWORK_ID_ROPSTEN",
]
