"""
Domain entities produced by the indicator engine and the scorer.
Zero external dependencies - pure Python dataclasses only.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from src.domain.entities.stock_price import QuoteSnapshot

# Same length as its source closes; None marks warm-up positions.
IndicatorSeries = tuple[Optional[float], ...]


class Recommendation(str, Enum):
    """Recommendation labels, strongest first."""

    STRONG_BUY = "STRONG BUY"
    BUY = "BUY"
    HOLD = "HOLD"
    SELL_AVOID = "SELL/AVOID"


@dataclass(frozen=True)
class MacdSeries:
    line: IndicatorSeries
    signal: IndicatorSeries
    histogram: IndicatorSeries


@dataclass(frozen=True)
class SubScore:
    points: int
    max_points: int
    notes: tuple[str, ...]

    @property
    def pct(self) -> float:
        return self.points / self.max_points * 100


@dataclass(frozen=True)
class ScoreResult:
    score: float
    recommendation: Recommendation
    rationale: tuple[str, ...]
    fundamental_pct: float
    technical_pct: float
    risk_pct: float


@dataclass(frozen=True)
class IndicatorSnapshot:
    last_close: Optional[float]
    sma50: Optional[float]
    sma200: Optional[float]
    rsi14: Optional[float]
    macd: Optional[float] = None
    macd_signal: Optional[float] = None


@dataclass(frozen=True)
class AnalysisReport:
    symbol: str
    quote: QuoteSnapshot
    history_length: int
    indicators: IndicatorSnapshot
    result: ScoreResult

    @property
    def name(self) -> str:
        return self.quote.display_name or self.symbol

    @property
    def last_price(self) -> float:
        """Last close when history exists, otherwise the quoted price."""
        if self.indicators.last_close is not None:
            return self.indicators.last_close
        return self.quote.price
