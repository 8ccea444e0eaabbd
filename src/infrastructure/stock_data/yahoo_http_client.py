"""
Raw Yahoo Finance HTTP client (v7 quote + v8 chart endpoints) over httpx.

Used by the /fetch-stock proxy endpoint, which forwards both payloads
untouched so that ProxyStockDataProvider can parse them on the other side.
"""

import logging
from typing import Any, Optional

import httpx

from src.domain.errors import FetchFailure

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://query1.finance.yahoo.com"
_HEADERS = {"User-Agent": "Mozilla/5.0 (compatible; stock-advisor)"}


class YahooFinanceClient:
    """Fetches raw JSON from Yahoo Finance."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 10.0,
        client: Optional[httpx.Client] = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._client = client or httpx.Client(timeout=timeout, headers=_HEADERS)

    def _get_json(self, path: str, params: dict) -> Any:
        url = f"{self._base_url}{path}"
        try:
            response = self._client.get(url, params=params)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as exc:
            raise FetchFailure(f"Fetch failed: {exc.response.status_code}") from exc
        except httpx.HTTPError as exc:
            raise FetchFailure(f"Fetch failed: {exc}") from exc
        except ValueError as exc:
            raise FetchFailure(f"Invalid JSON from {path}") from exc

    def fetch_quote(self, symbol: str) -> Any:
        logger.debug("GET quote %s", symbol)
        return self._get_json("/v7/finance/quote", {"symbols": symbol})

    def fetch_chart(self, symbol: str, range_: str = "1y", interval: str = "1d") -> Any:
        logger.debug("GET chart %s range=%s interval=%s", symbol, range_, interval)
        return self._get_json(
            f"/v8/finance/chart/{symbol}",
            {"range": range_, "interval": interval},
        )

    def fetch_combined(self, symbol: str, range_: str = "1y", interval: str = "1d") -> dict:
        """Both payloads in the proxy's ``{"quote": ..., "chart": ...}`` envelope."""
        return {
            "quote": self.fetch_quote(symbol),
            "chart": self.fetch_chart(symbol, range_, interval),
        }

    def close(self) -> None:
        self._client.close()
