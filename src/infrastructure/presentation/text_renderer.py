"""
Plain-text presentation of an AnalysisReport or a failed analysis.
Formatting only; every number shown here is computed in the domain layer.
"""

from typing import Optional

from src.domain.entities.analysis import AnalysisReport


def format_ratio(value: Optional[float]) -> str:
    """Two decimals, or "NA" when the ratio is absent. 0 is a real ratio."""
    return "NA" if value is None else f"{value:.2f}"


def format_price(price: float) -> str:
    """Up to four decimals, trailing zeros dropped (200.0 -> "200")."""
    return f"{price:.4f}".rstrip("0").rstrip(".")


def format_score(score: float) -> str:
    return f"{score:.1f}%"


def _format_reading(value: Optional[float]) -> str:
    return "NA" if value is None else f"{value:.2f}"


def render_report(report: AnalysisReport) -> str:
    result = report.result
    ind = report.indicators
    lines = [
        report.name,
        f"Price: {format_price(report.last_price)}",
        f"Score: {format_score(result.score)} -> {result.recommendation.value}",
        f"P/E: {format_ratio(report.quote.trailing_pe)} | "
        f"P/B: {format_ratio(report.quote.price_to_book)}",
        "",
        f"Fundamentals {result.fundamental_pct:.1f}% | "
        f"Technicals {result.technical_pct:.1f}% | Risk {result.risk_pct:.1f}%",
        f"SMA50 {_format_reading(ind.sma50)} | SMA200 {_format_reading(ind.sma200)} | "
        f"RSI14 {_format_reading(ind.rsi14)} | MACD {_format_reading(ind.macd)} "
        f"(signal {_format_reading(ind.macd_signal)})",
    ]
    lines.extend(f"  - {note}" for note in result.rationale)
    return "\n".join(lines)


def render_error(error: BaseException) -> str:
    return f"Error\n{error}"
