"""Hosts, networks, header names and enumerations used by the dYdX API."""
from enum import Enum, IntEnum

API_HOST_MAINNET = "https://api.dydx.exchange"
API_HOST_ROPSTEN = "https://api.stage.dydx.exchange"

NETWORK_ID_MAINNET = 1
NETWORK_ID_ROPSTEN = 3

API_VERSION_PREFIX = "/v3/"

SIGNATURE_HEADER = "DYDX-SIGNATURE"
ETHEREUM_ADDRESS_HEADER = "DYDX-ETHEREUM-ADDRESS"


class SigningMethod(str, Enum):
    HASH = "Hash"
    TYPED_DATA = "TypedData"


class OnboardingAction(str, Enum):
    """Actions an Ethereum key may be asked to sign during onboarding."""

    ONBOARDING = "dYdX Onboarding"
    KEY_DERIVATION = "dYdX STARK Key"


class MarketStatisticDay(IntEnum):
    ONE = 1
    SEVEN = 7
    THIRTY = 30


class Market(str, Enum):
    BTC_USD = "BTC-USD"
    ETH_USD = "ETH-USD"
    LINK_USD = "LINK-USD"
    AAVE_USD = "AAVE-USD"
    UNI_USD = "UNI-USD"
    SUSHI_USD = "SUSHI-USD"
    SOL_USD = "SOL-USD"
    YFI_USD = "YFI-USD"
    DOGE_USD = "DOGE-USD"
    LTC_USD = "LTC-USD"
