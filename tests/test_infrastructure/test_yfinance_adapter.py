"""
Tests for src/infrastructure/stock_data/yfinance_adapter.py.

yfinance.Ticker is patched with a MagicMock; no network access.
"""

from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import pandas as pd
import pytest

from src.domain.errors import FetchFailure, NoData
from src.infrastructure.stock_data.yfinance_adapter import YFinanceStockDataProvider

TICKER = "src.infrastructure.stock_data.yfinance_adapter.yf.Ticker"


def _ticker(info=None, last_price=None, history=None):
    m = MagicMock()
    m.info = info if info is not None else {}
    m.fast_info = SimpleNamespace(last_price=last_price)
    m.history.return_value = history if history is not None else pd.DataFrame()
    return m


class TestGetQuote:
    def test_fast_info_price_and_ratios(self):
        info = {"trailingPE": 18.2, "priceToBook": 2.5, "longName": "Apple Inc.", "currency": "USD"}
        with patch(TICKER, return_value=_ticker(info, last_price=190.123456)):
            quote = YFinanceStockDataProvider().get_quote("AAPL")
        assert quote.symbol == "AAPL"
        assert quote.price == 190.1235
        assert quote.trailing_pe == 18.2
        assert quote.price_to_book == 2.5
        assert quote.display_name == "Apple Inc."
        assert quote.currency == "USD"

    def test_falls_back_to_info_price(self):
        with patch(TICKER, return_value=_ticker({"currentPrice": 12.5})):
            quote = YFinanceStockDataProvider().get_quote("X")
        assert quote.price == 12.5
        assert quote.trailing_pe is None
        assert quote.display_name is None

    def test_no_price_is_no_data(self):
        with patch(TICKER, return_value=_ticker({})):
            with pytest.raises(NoData):
                YFinanceStockDataProvider().get_quote("NOPE")

    def test_non_numeric_price_is_fetch_failure(self):
        with patch(TICKER, return_value=_ticker({"currentPrice": "n/a"})):
            with pytest.raises(FetchFailure, match="Malformed price"):
                YFinanceStockDataProvider().get_quote("X")

    def test_library_error_is_fetch_failure(self):
        with patch(TICKER, side_effect=RuntimeError("rate limited")):
            with pytest.raises(FetchFailure, match="rate limited"):
                YFinanceStockDataProvider().get_quote("X")


class TestGetPriceHistory:
    def test_closes_in_order_without_nans(self):
        frame = pd.DataFrame({"Close": [10.0, float("nan"), 12.345678]})
        ticker = _ticker(history=frame)
        with patch(TICKER, return_value=ticker):
            series = YFinanceStockDataProvider().get_price_history("X", period="1y", interval="1d")
        assert series.closes == (10.0, 12.3457)
        ticker.history.assert_called_once_with(period="1y", interval="1d", timeout=10.0)

    def test_timeout_is_passed_to_history(self):
        ticker = _ticker(history=pd.DataFrame({"Close": [1.0]}))
        with patch(TICKER, return_value=ticker):
            YFinanceStockDataProvider(timeout=2.5).get_price_history("X")
        assert ticker.history.call_args.kwargs["timeout"] == 2.5

    def test_empty_history_is_no_data(self):
        with patch(TICKER, return_value=_ticker()):
            with pytest.raises(NoData):
                YFinanceStockDataProvider().get_price_history("NOPE")

    def test_library_error_is_fetch_failure(self):
        ticker = _ticker()
        ticker.history.side_effect = ConnectionError("reset")
        with patch(TICKER, return_value=ticker):
            with pytest.raises(FetchFailure):
                YFinanceStockDataProvider().get_price_history("X")
