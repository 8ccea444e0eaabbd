"""
Tests for src/infrastructure/stock_data/yahoo_payload.py.
"""

import pytest

from src.domain.errors import FetchFailure, NoData
from src.infrastructure.stock_data.yahoo_payload import parse_chart, parse_quote


def _quote_payload(**fields):
    quote = {"symbol": "RPOWER.NS", "regularMarketPrice": 45.3, "currency": "INR"}
    quote.update(fields)
    return {"quoteResponse": {"result": [quote], "error": None}}


def _chart_payload(closes):
    return {
        "chart": {
            "result": [{"meta": {"symbol": "RPOWER.NS"}, "indicators": {"quote": [{"close": closes}]}}],
            "error": None,
        }
    }


class TestParseQuote:
    def test_full_quote(self):
        quote = parse_quote(
            "RPOWER.NS",
            _quote_payload(trailingPE=18.25, priceToBook=1.5, longName="Reliance Power Limited"),
        )
        assert quote.price == 45.3
        assert quote.trailing_pe == 18.25
        assert quote.price_to_book == 1.5
        assert quote.display_name == "Reliance Power Limited"
        assert quote.currency == "INR"

    def test_missing_ratios_are_none_and_zero_is_kept(self):
        quote = parse_quote("RPOWER.NS", _quote_payload(priceToBook=0))
        assert quote.trailing_pe is None
        assert quote.price_to_book == 0.0

    def test_short_name_fallback(self):
        assert parse_quote("X", _quote_payload(shortName="Short")).display_name == "Short"

    def test_empty_result_is_no_data(self):
        with pytest.raises(NoData, match="No quote data"):
            parse_quote("NOPE", {"quoteResponse": {"result": [], "error": None}})

    def test_missing_price_is_no_data(self):
        with pytest.raises(NoData):
            parse_quote("X", _quote_payload(regularMarketPrice=None))

    @pytest.mark.parametrize("payload", [None, [], {"unexpected": 1}, {"quoteResponse": "x"}])
    def test_malformed_payload(self, payload):
        with pytest.raises(FetchFailure):
            parse_quote("X", payload)


class TestParseChart:
    def test_drops_null_closes(self):
        series = parse_chart("RPOWER.NS", _chart_payload([1.0, None, 3.123456]), "1y", "1d")
        assert series.closes == (1.0, 3.1235)
        assert series.period == "1y"
        assert series.interval == "1d"

    def test_upstream_error_is_no_data(self):
        payload = {"chart": {"result": None, "error": {"code": "Not Found", "description": "No data found, symbol may be delisted"}}}
        with pytest.raises(NoData, match="delisted"):
            parse_chart("NOPE", payload)

    def test_all_null_closes_is_no_data(self):
        with pytest.raises(NoData):
            parse_chart("X", _chart_payload([None, None]))

    def test_missing_indicators_is_fetch_failure(self):
        payload = {"chart": {"result": [{"meta": {}}], "error": None}}
        with pytest.raises(FetchFailure):
            parse_chart("X", payload)
