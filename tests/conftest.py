"""
Shared pytest fixtures for the Stock Advisor test suite.

Provides:
  - ``FakeStockDataProvider``: in-memory IStockDataProvider that records calls.
  - ``make_quote`` / ``make_history``: entity factories with sensible defaults.
  - ``ascending_history``: closes 1..200, enough for every indicator.
"""

from typing import Optional

import pytest

from src.domain.entities.stock_price import PriceSeries, QuoteSnapshot
from src.domain.ports.stock_data_port import IStockDataProvider


def make_quote(
    symbol: str = "RPOWER.NS",
    price: float = 200.0,
    trailing_pe: Optional[float] = 20.0,
    price_to_book: Optional[float] = 3.0,
    display_name: Optional[str] = "Reliance Power Limited",
    currency: Optional[str] = "INR",
) -> QuoteSnapshot:
    return QuoteSnapshot(
        symbol=symbol,
        price=price,
        trailing_pe=trailing_pe,
        price_to_book=price_to_book,
        display_name=display_name,
        currency=currency,
    )


def make_history(closes, symbol: str = "RPOWER.NS") -> PriceSeries:
    return PriceSeries(symbol=symbol, period="1y", interval="1d", closes=tuple(float(c) for c in closes))


class FakeStockDataProvider(IStockDataProvider):
    """Returns canned entities, or raises *error*, and records every call."""

    def __init__(self, quote=None, history=None, error: Optional[Exception] = None) -> None:
        self.quote = quote
        self.history = history
        self.error = error
        self.calls: list[tuple] = []

    def get_quote(self, symbol):
        self.calls.append(("quote", symbol))
        if self.error:
            raise self.error
        return self.quote or make_quote(symbol=symbol)

    def get_price_history(self, symbol, period="1y", interval="1d"):
        self.calls.append(("history", symbol, period, interval))
        if self.error:
            raise self.error
        return self.history or make_history(range(1, 201), symbol=symbol)


@pytest.fixture
def ascending_history() -> PriceSeries:
    return make_history(range(1, 201))


@pytest.fixture
def fake_provider() -> FakeStockDataProvider:
    return FakeStockDataProvider()
