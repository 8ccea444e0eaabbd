"""
Scorer: turns valuation ratios and the latest indicator readings into a
weighted percentage and a recommendation label.

Weights: fundamentals 50%, technicals 30%, risk 20%. There is no risk
sub-model; callers pass a fixed risk percentage (50 by default).
"""

from typing import Optional

from src.domain.entities.analysis import Recommendation, ScoreResult, SubScore

PE_MAX = 25.0
PB_MAX = 4.0
RSI_LOWER = 30.0
RSI_UPPER = 70.0

FUNDAMENTAL_WEIGHT = 0.5
TECHNICAL_WEIGHT = 0.3
RISK_WEIGHT = 0.2
DEFAULT_RISK_PCT = 50.0

# (minimum score, label), checked in order.
RECOMMENDATION_THRESHOLDS: tuple[tuple[float, Recommendation], ...] = (
    (70.0, Recommendation.STRONG_BUY),
    (60.0, Recommendation.BUY),
    (45.0, Recommendation.HOLD),
)


def score_fundamentals(
    trailing_pe: Optional[float],
    price_to_book: Optional[float],
) -> SubScore:
    """Score the two valuation ratios out of three points.

    A missing ratio fails its check. The third point (debt and recent results)
    needs manual judgment and is never awarded here, so the ceiling is 2/3.
    """
    points = 0
    notes = []
    if trailing_pe is not None and trailing_pe < PE_MAX:
        points += 1
        notes.append("P/E reasonable")
    else:
        notes.append("P/E high/NA")
    if price_to_book is not None and price_to_book < PB_MAX:
        points += 1
        notes.append("P/B reasonable")
    else:
        notes.append("P/B high/NA")
    notes.append("Manual check: debt & results")
    return SubScore(points=points, max_points=3, notes=tuple(notes))


def score_technicals(
    last_close: Optional[float],
    sma50: Optional[float],
    sma200: Optional[float],
    rsi14: Optional[float],
) -> SubScore:
    """Score trend and momentum out of three points.

    An undefined reading fails its condition rather than raising.
    """
    points = 0
    notes = []
    for label, average in (("SMA50", sma50), ("SMA200", sma200)):
        if last_close is None or average is None:
            notes.append(f"{label} unavailable")
        elif last_close > average:
            points += 1
            notes.append(f"Price>{label}")
        else:
            notes.append(f"Price<={label}")

    if rsi14 is None:
        notes.append("RSI unavailable")
    elif RSI_LOWER < rsi14 < RSI_UPPER:
        points += 1
        notes.append("RSI neutral")
    else:
        notes.append("RSI extreme")
    return SubScore(points=points, max_points=3, notes=tuple(notes))


def _check_pct(name: str, value: float) -> None:
    if not 0.0 <= value <= 100.0:
        raise ValueError(f"{name} must be within [0, 100], got {value}")


def composite_score(
    fundamental_pct: float,
    technical_pct: float,
    risk_pct: float = DEFAULT_RISK_PCT,
) -> float:
    """Weighted blend of the three sub-percentages.

    Raises:
        ValueError: if any percentage is outside [0, 100].
    """
    _check_pct("fundamental_pct", fundamental_pct)
    _check_pct("technical_pct", technical_pct)
    _check_pct("risk_pct", risk_pct)
    return (
        fundamental_pct * FUNDAMENTAL_WEIGHT
        + technical_pct * TECHNICAL_WEIGHT
        + risk_pct * RISK_WEIGHT
    )


def recommend(score: float) -> Recommendation:
    for threshold, label in RECOMMENDATION_THRESHOLDS:
        if score >= threshold:
            return label
    return Recommendation.SELL_AVOID


def score_stock(
    fundamentals: SubScore,
    technicals: SubScore,
    risk_pct: float = DEFAULT_RISK_PCT,
) -> ScoreResult:
    """Combine both sub-scores into the final ScoreResult."""
    score = composite_score(fundamentals.pct, technicals.pct, risk_pct)
    return ScoreResult(
        score=score,
        recommendation=recommend(score),
        rationale=fundamentals.notes + technicals.notes,
        fundamental_pct=fundamentals.pct,
        technical_pct=technicals.pct,
        risk_pct=risk_pct,
    )
