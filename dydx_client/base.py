"""Shared HTTP plumbing for the dYdX REST clients."""
from __future__ import annotations

import json
import logging
from typing import Any

import aiohttp
from aiolimiter import AsyncLimiter

from .constants import API_VERSION_PREFIX
from .errors import DydxApiError


class AbstractRestClient:
    """Base class holding the host, the HTTP session and the rate limiter."""

    def __init__(
        self,
        host: str,
        session: aiohttp.ClientSession | None = None,
        rate_limit: int = 10,
        proxy: str | None = None,
        timeout: float | None = None,
        limiter: AsyncLimiter | None = None,
    ) -> None:
        self.host = host.rstrip("/")
        self._owns_session = session is None
        if session is None:
            kwargs = {}
            if timeout:
                kwargs["timeout"] = aiohttp.ClientTimeout(total=timeout)
            session = aiohttp.ClientSession(**kwargs)
        self.session = session
        self.limiter = limiter if limiter is not None else AsyncLimiter(rate_limit, 1)
        self.proxy = proxy
        self.logger = logging.getLogger(self.__class__.__name__)

    def _url(self, request_path: str) -> str:
        return f"{self.host}{API_VERSION_PREFIX}{request_path}"

    async def _request(
        self,
        method: str,
        url: str,
        data: dict | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """Send one request and return the decoded JSON body.

        Non-2xx answers raise :class:`DydxApiError` carrying the status and the
        body. Transport errors from aiohttp are left to propagate.
        """
        async with self.limiter:
            self.logger.debug("%s %s", method, url)
            async with self.session.request(
                method,
                url,
                json=data,
                headers=headers,
                proxy=self.proxy,
            ) as resp:
                if not 200 <= resp.status < 300:
                    text = await resp.text()
                    try:
                        body = json.loads(text)
                    except ValueError:
                        body = text
                    self.logger.warning(
                        "%s %s failed with status %s", method, url, resp.status
                    )
                    raise DydxApiError(resp.status, body, method=method, url=url)
                return await resp.json(content_type=None)

    async def close(self) -> None:
        """Close the HTTP session if this client created it."""
        if self._owns_session:
            await self.session.close()
