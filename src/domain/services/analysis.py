"""
Pure analysis: quote + price history in, AnalysisReport out.
No I/O here; the use case does the fetching.
"""

from src.domain.entities.analysis import AnalysisReport, IndicatorSnapshot
from src.domain.entities.stock_price import PriceSeries, QuoteSnapshot
from src.domain.errors import NoData
from src.domain.services.indicators import latest, macd, rsi, sma
from src.domain.services.scoring import (
    DEFAULT_RISK_PCT,
    score_fundamentals,
    score_stock,
    score_technicals,
)

SHORT_SMA_PERIOD = 50
LONG_SMA_PERIOD = 200
RSI_PERIOD = 14


def compute_indicators(history: PriceSeries) -> IndicatorSnapshot:
    closes = history.closes
    macd_series = macd(closes)
    return IndicatorSnapshot(
        last_close=history.last_close,
        sma50=latest(sma(closes, SHORT_SMA_PERIOD)),
        sma200=latest(sma(closes, LONG_SMA_PERIOD)),
        rsi14=latest(rsi(closes, RSI_PERIOD)),
        macd=latest(macd_series.line),
        macd_signal=latest(macd_series.signal),
    )


def analyze(
    quote: QuoteSnapshot,
    history: PriceSeries,
    risk_pct: float = DEFAULT_RISK_PCT,
) -> AnalysisReport:
    """Score *quote* and *history* for a single symbol.

    Histories shorter than an indicator's warm-up are still scored; the
    undefined readings count as failed technical conditions.

    Raises:
        NoData: if *history* holds no closing prices.
    """
    if not history.closes:
        raise NoData(f"No price history for symbol: {history.symbol!r}")

    indicators = compute_indicators(history)
    fundamentals = score_fundamentals(quote.trailing_pe, quote.price_to_book)
    technicals = score_technicals(
        indicators.last_close,
        indicators.sma50,
        indicators.sma200,
        indicators.rsi14,
    )
    return AnalysisReport(
        symbol=quote.symbol,
        quote=quote,
        history_length=len(history),
        indicators=indicators,
        result=score_stock(fundamentals, technicals, risk_pct),
    )
