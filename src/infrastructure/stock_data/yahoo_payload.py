"""
Parsers for raw Yahoo Finance JSON payloads (v7 quote, v8 chart).
Shared by the proxy adapter; all Yahoo response-shape knowledge lives here.
"""

from typing import Any, Optional

from src.domain.entities.stock_price import PriceSeries, QuoteSnapshot
from src.domain.errors import FetchFailure, NoData


def _optional_float(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _first_result(payload: Any, root_key: str, symbol: str) -> Optional[dict]:
    if not isinstance(payload, dict) or not isinstance(payload.get(root_key), dict):
        raise FetchFailure(f"Malformed {root_key} payload for symbol: {symbol!r}")
    body = payload[root_key]
    error = body.get("error")
    if error:
        description = error.get("description") if isinstance(error, dict) else str(error)
        raise NoData(f"{description or 'No data'} for symbol: {symbol!r}")
    results = body.get("result") or []
    if not results:
        return None
    if not isinstance(results, list) or not isinstance(results[0], dict):
        raise FetchFailure(f"Malformed {root_key} payload for symbol: {symbol!r}")
    return results[0]


def parse_quote(symbol: str, payload: Any) -> QuoteSnapshot:
    """Build a QuoteSnapshot from a v7 ``quoteResponse`` payload.

    Raises:
        FetchFailure: if the payload does not have the v7 shape.
        NoData:       if there is no quote or no usable price.
    """
    quote = _first_result(payload, "quoteResponse", symbol)
    if not quote:
        raise NoData(f"No quote data for symbol: {symbol!r}")

    price = _optional_float(quote.get("regularMarketPrice"))
    if price is None:
        raise NoData(f"No price data available for symbol: {symbol!r}")

    return QuoteSnapshot(
        symbol=symbol,
        price=price,
        trailing_pe=_optional_float(quote.get("trailingPE")),
        price_to_book=_optional_float(quote.get("priceToBook")),
        display_name=quote.get("longName") or quote.get("shortName"),
        currency=quote.get("currency"),
    )


def parse_chart(
    symbol: str,
    payload: Any,
    period: str = "1y",
    interval: str = "1d",
) -> PriceSeries:
    """Build a PriceSeries from a v8 ``chart`` payload.

    Null closes (halted or partial sessions) are dropped.

    Raises:
        FetchFailure: if the payload does not have the v8 shape.
        NoData:       if the chart has no closing prices.
    """
    chart = _first_result(payload, "chart", symbol)
    if not chart:
        raise NoData(f"No historical data available for symbol: {symbol!r}")

    try:
        raw_closes = chart["indicators"]["quote"][0].get("close") or []
    except (KeyError, IndexError, TypeError, AttributeError) as exc:
        raise FetchFailure(f"Malformed chart payload for symbol: {symbol!r}") from exc

    closes = tuple(
        round(c, 4) for c in (_optional_float(v) for v in raw_closes) if c is not None
    )
    if not closes:
        raise NoData(f"No historical data available for symbol: {symbol!r}")
    return PriceSeries(symbol=symbol, period=period, interval=interval, closes=closes)
