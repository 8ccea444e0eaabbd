"""
Infrastructure adapter: yfinance -> IStockDataProvider.
All yfinance-specific details (ticker.info, fast_info, history()) are confined here;
the rest of the codebase depends only on IStockDataProvider.
"""

import logging
from typing import Optional

import yfinance as yf

from src.domain.entities.stock_price import PriceSeries, QuoteSnapshot
from src.domain.errors import FetchFailure, NoData
from src.domain.ports.stock_data_port import IStockDataProvider

logger = logging.getLogger(__name__)


def _ratio(info: dict, key: str) -> Optional[float]:
    value = info.get(key)
    if value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


class YFinanceStockDataProvider(IStockDataProvider):
    """Fetches stock market data from Yahoo Finance via the yfinance library."""

    def __init__(self, timeout: float = 10.0) -> None:
        self._timeout = timeout

    def get_quote(self, symbol: str) -> QuoteSnapshot:
        try:
            ticker = yf.Ticker(symbol)
            info = ticker.info or {}
            fast_price = getattr(ticker.fast_info, "last_price", None)
        except Exception as exc:
            raise FetchFailure(f"Quote fetch failed for {symbol!r}: {exc}") from exc

        current_price = fast_price if fast_price is not None else info.get("currentPrice")
        if current_price is None:
            current_price = info.get("regularMarketPrice")
        if current_price is None:
            raise NoData(f"No price data available for symbol: {symbol!r}")
        try:
            price = round(float(current_price), 4)
        except (TypeError, ValueError) as exc:
            raise FetchFailure(f"Malformed price for {symbol!r}: {current_price!r}") from exc

        return QuoteSnapshot(
            symbol=symbol,
            price=price,
            trailing_pe=_ratio(info, "trailingPE"),
            price_to_book=_ratio(info, "priceToBook"),
            display_name=info.get("longName") or info.get("shortName"),
            currency=info.get("currency"),
        )

    def get_price_history(
        self,
        symbol: str,
        period: str = "1y",
        interval: str = "1d",
    ) -> PriceSeries:
        try:
            history = yf.Ticker(symbol).history(
                period=period, interval=interval, timeout=self._timeout
            )
        except Exception as exc:
            raise FetchFailure(f"History fetch failed for {symbol!r}: {exc}") from exc

        if history.empty:
            raise NoData(f"No historical data available for symbol: {symbol!r}")

        closes = tuple(round(float(c), 4) for c in history["Close"].dropna())
        if not closes:
            raise NoData(f"No historical data available for symbol: {symbol!r}")

        logger.debug("yfinance returned %d closes for %s", len(closes), symbol)
        return PriceSeries(symbol=symbol, period=period, interval=interval, closes=closes)
