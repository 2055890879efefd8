"""Unauthenticated market-data endpoints."""
from __future__ import annotations

from typing import Any

from .base import AbstractRestClient
from .constants import Market, MarketStatisticDay
from .helpers import generate_query_path, path_segment


class Public(AbstractRestClient):
    """Client for the public dYdX v3 REST endpoints."""

    async def _get(self, request_path: str, params: dict[str, Any]) -> dict:
        return await self._request("GET", self._url(generate_query_path(request_path, params)))

    async def does_user_exist_with_address(self, ethereum_address: str) -> dict:
        """Check whether a user exists for an Ethereum address."""
        return await self._get("users/exists", {"ethereumAddress": ethereum_address})

    async def does_user_exist_with_username(self, username: str) -> dict:
        """Check whether a username is already taken."""
        return await self._get("usernames", {"username": username})

    async def get_markets(self, market: Market | str | None = None) -> dict:
        """Return all markets, or only ``market`` when given."""
        return await self._get("markets", {"market": market})

    async def get_order_book(self, market: Market | str) -> dict:
        return await self._get(f"orderbook/{path_segment(market)}", {})

    async def get_stats(
        self,
        market: Market | str,
        days: MarketStatisticDay | int | None = None,
    ) -> dict:
        """Return market statistics, optionally for a period of ``days``."""
        return await self._get(f"stats/{path_segment(market)}", {"days": days})

    async def get_trades(
        self,
        market: Market | str,
        starting_before_or_at: str | None = None,
    ) -> dict:
        """Return trades for ``market`` up to an ISO 8601 timestamp."""
        return await self._get(
            f"trades/{path_segment(market)}",
            {"startingBeforeOrAt": starting_before_or_at},
        )

    async def get_historical_funding(
        self,
        market: Market | str,
        effective_before_or_at: str | None = None,
    ) -> dict:
        """Return historical funding rates for ``market`` up to an ISO 8601 timestamp."""
        return await self._get(
            f"historical-funding/{path_segment(market)}",
            {"effectiveBeforeOrAt": effective_before_or_at},
        )
