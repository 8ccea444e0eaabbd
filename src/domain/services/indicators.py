"""
Indicator engine: pure functions over a sequence of closing prices.

Every function returns an IndicatorSeries of the same length as its input,
with None at the warm-up positions where the indicator is undefined.
Inputs are never mutated; each call builds a fresh tuple.
"""

import math
from typing import Optional, Sequence

from src.domain.entities.analysis import IndicatorSeries, MacdSeries

# Stand-in for a zero average loss. Arbitrary, kept for output compatibility.
RSI_EPSILON = 1e-9


def _check_period(period: int) -> None:
    if period <= 0:
        raise ValueError(f"period must be a positive integer, got {period!r}")


def sma(values: Sequence[float], period: int) -> IndicatorSeries:
    """Trailing simple moving average.

    Position i holds the mean of values[i-period+1 : i+1]; the first
    period-1 positions are None.

    Raises:
        ValueError: if *period* is not positive.
    """
    _check_period(period)
    out: list[Optional[float]] = []
    for i in range(len(values)):
        if i + 1 < period:
            out.append(None)
        else:
            out.append(math.fsum(values[i + 1 - period : i + 1]) / period)
    return tuple(out)


def ema(values: Sequence[float], period: int) -> IndicatorSeries:
    """Exponential moving average seeded with the SMA of the first *period* values.

    Raises:
        ValueError: if *period* is not positive.
    """
    _check_period(period)
    n = len(values)
    out: list[Optional[float]] = [None] * n
    if n < period:
        return tuple(out)

    k = 2 / (period + 1)
    prev = math.fsum(values[:period]) / period
    out[period - 1] = prev
    for i in range(period, n):
        prev = prev + k * (values[i] - prev)
        out[i] = prev
    return tuple(out)


def _rsi_value(avg_gain: float, avg_loss: float) -> float:
    rs = avg_gain / (avg_loss if avg_loss != 0 else RSI_EPSILON)
    return 100 - 100 / (1 + rs)


def rsi(values: Sequence[float], period: int = 14) -> IndicatorSeries:
    """Wilder-style relative strength index.

    The first *period* deltas seed the average gain and loss with simple
    means; later deltas update them with ``(avg*(period-1) + x) / period``.
    The seed yields the value at position *period*, so the first *period*
    positions are None. Fewer than period+1 values give an all-None series.

    Raises:
        ValueError: if *period* is not positive.
    """
    _check_period(period)
    n = len(values)
    out: list[Optional[float]] = [None] * n
    if n < period + 1:
        return tuple(out)

    deltas = [values[i] - values[i - 1] for i in range(1, n)]
    seed = deltas[:period]
    avg_gain = sum(d for d in seed if d > 0) / period
    avg_loss = sum(-d for d in seed if d < 0) / period
    out[period] = _rsi_value(avg_gain, avg_loss)

    for i in range(period, len(deltas)):
        d = deltas[i]
        avg_gain = (avg_gain * (period - 1) + max(d, 0.0)) / period
        avg_loss = (avg_loss * (period - 1) + max(-d, 0.0)) / period
        out[i + 1] = _rsi_value(avg_gain, avg_loss)
    return tuple(out)


def macd(
    values: Sequence[float],
    short: int = 12,
    long: int = 26,
    signal: int = 9,
) -> MacdSeries:
    """MACD line, signal line and histogram, each aligned to *values*.

    The signal line is an EMA over the defined part of the MACD line, so it
    starts signal-1 positions after the first defined MACD value.

    Raises:
        ValueError: if any period is not positive or *short* >= *long*.
    """
    _check_period(signal)
    if short >= long:
        raise ValueError(f"short period must be below long period, got {short} >= {long}")

    ema_short = ema(values, short)
    ema_long = ema(values, long)
    line = tuple(
        s - l if s is not None and l is not None else None
        for s, l in zip(ema_short, ema_long)
    )

    defined = [v for v in line if v is not None]
    offset = len(line) - len(defined)
    signal_line: list[Optional[float]] = [None] * offset + list(ema(defined, signal))
    histogram = tuple(
        m - s if m is not None and s is not None else None
        for m, s in zip(line, signal_line)
    )
    return MacdSeries(line=line, signal=tuple(signal_line), histogram=histogram)


def latest(series: IndicatorSeries) -> Optional[float]:
    """Last position of *series*, or None when the series is empty or still warming up."""
    return series[-1] if series else None
