"""
JSON response models for AnalysisReport, shared by the API and `analyze --json`.
"""

from typing import Optional

from pydantic import BaseModel

from src.domain.entities.analysis import AnalysisReport


class IndicatorsResponse(BaseModel):
    last_close: Optional[float]
    sma50: Optional[float]
    sma200: Optional[float]
    rsi14: Optional[float]
    macd: Optional[float]
    macd_signal: Optional[float]


class AnalysisResponse(BaseModel):
    symbol: str
    name: str
    price: float
    currency: Optional[str]
    trailing_pe: Optional[float]
    price_to_book: Optional[float]
    score: float
    recommendation: str
    fundamental_pct: float
    technical_pct: float
    risk_pct: float
    rationale: list[str]
    history_length: int
    indicators: IndicatorsResponse

    @classmethod
    def from_report(cls, report: AnalysisReport) -> "AnalysisResponse":
        result = report.result
        ind = report.indicators
        return cls(
            symbol=report.symbol,
            name=report.name,
            price=report.last_price,
            currency=report.quote.currency,
            trailing_pe=report.quote.trailing_pe,
            price_to_book=report.quote.price_to_book,
            score=round(result.score, 1),
            recommendation=result.recommendation.value,
            fundamental_pct=round(result.fundamental_pct, 1),
            technical_pct=round(result.technical_pct, 1),
            risk_pct=result.risk_pct,
            rationale=list(result.rationale),
            history_length=report.history_length,
            indicators=IndicatorsResponse(
                last_close=ind.last_close,
                sma50=ind.sma50,
                sma200=ind.sma200,
                rsi14=ind.rsi14,
                macd=ind.macd,
                macd_signal=ind.macd_signal,
            ),
        )
