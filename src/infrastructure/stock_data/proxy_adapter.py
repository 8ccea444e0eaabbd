"""
Infrastructure adapter: HTTP proxy function -> IStockDataProvider.

The proxy (see the /fetch-stock endpoint in fastapi_app) returns
``{"quote": <Yahoo v7 JSON>, "chart": <Yahoo v8 JSON>}``. Any server with
the same contract, e.g. a serverless function, works as a backend.
"""

import logging
from typing import Any, Optional

import httpx

from src.domain.entities.stock_price import PriceSeries, QuoteSnapshot
from src.domain.errors import FetchFailure
from src.domain.ports.stock_data_port import IStockDataProvider
from src.infrastructure.stock_data.yahoo_payload import parse_chart, parse_quote

logger = logging.getLogger(__name__)


class ProxyStockDataProvider(IStockDataProvider):
    """Fetches Yahoo Finance payloads through a proxy endpoint via httpx."""

    def __init__(
        self,
        proxy_url: str,
        timeout: float = 10.0,
        client: Optional[httpx.Client] = None,
    ) -> None:
        self._proxy_url = proxy_url
        self._timeout = timeout
        self._client = client

    def _get(self, params: dict) -> httpx.Response:
        # Without an injected client, each call opens and closes its own.
        if self._client is not None:
            return self._client.get(self._proxy_url, params=params)
        with httpx.Client(timeout=self._timeout) as client:
            return client.get(self._proxy_url, params=params)

    def _fetch(self, symbol: str, period: str = "1y", interval: str = "1d") -> dict[str, Any]:
        params = {"symbol": symbol, "range": period, "interval": interval}
        try:
            response = self._get(params)
        except httpx.HTTPError as exc:
            raise FetchFailure(f"Fetch failed: {exc}") from exc

        if response.is_error:
            detail = _error_detail(response)
            raise FetchFailure(f"Fetch failed: {response.status_code}{detail}")

        try:
            body = response.json()
        except ValueError as exc:
            raise FetchFailure("Proxy returned invalid JSON") from exc
        if not isinstance(body, dict):
            raise FetchFailure("Proxy returned an unexpected payload")
        return body

    def get_quote(self, symbol: str) -> QuoteSnapshot:
        body = self._fetch(symbol)
        return parse_quote(symbol, body.get("quote"))

    def get_price_history(
        self,
        symbol: str,
        period: str = "1y",
        interval: str = "1d",
    ) -> PriceSeries:
        body = self._fetch(symbol, period, interval)
        history = parse_chart(symbol, body.get("chart"), period, interval)
        logger.debug("Proxy returned %d closes for %s", len(history), symbol)
        return history


def _error_detail(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return f" ({response.text})" if response.text else ""
    if isinstance(body, dict):
        message = body.get("error") or body.get("detail")
        if message:
            return f" ({message})"
    return ""
