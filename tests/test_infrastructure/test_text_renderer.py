"""
Tests for src/infrastructure/presentation/text_renderer.py.
"""

from conftest import make_history, make_quote
from src.domain.errors import FetchFailure
from src.domain.services.analysis import analyze
from src.infrastructure.presentation.text_renderer import (
    format_ratio,
    format_score,
    render_error,
    render_report,
)


class TestFormatting:
    def test_ratio(self):
        assert format_ratio(None) == "NA"
        assert format_ratio(0.0) == "0.00"
        assert format_ratio(18.5) == "18.50"

    def test_score_one_decimal(self):
        assert format_score(200 / 3) == "66.7%"
        assert format_score(10.0) == "10.0%"


class TestRenderReport:
    def test_summary_lines(self, ascending_history):
        text = render_report(analyze(make_quote(), ascending_history))
        lines = text.splitlines()
        assert lines[0] == "Reliance Power Limited"
        assert lines[1] == "Price: 200"
        assert lines[2] == "Score: 63.3% -> BUY"
        assert lines[3] == "P/E: 20.00 | P/B: 3.00"
        assert "  - RSI extreme" in lines

    def test_missing_name_and_ratios(self):
        report = analyze(
            make_quote(display_name=None, trailing_pe=None, price_to_book=None),
            make_history([1.5, 2.5]),
        )
        text = render_report(report)
        assert text.startswith("RPOWER.NS\nPrice: 2.5\n")
        assert "P/E: NA | P/B: NA" in text
        assert "SMA200 NA" in text


def test_render_error():
    assert render_error(FetchFailure("Fetch failed: 503")) == "Error\nFetch failed: 503"
