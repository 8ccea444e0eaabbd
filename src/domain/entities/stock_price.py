"""
Domain entities for quote and price-history data.
Zero external dependencies - pure Python dataclasses only.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class QuoteSnapshot:
    symbol: str
    price: float
    trailing_pe: Optional[float] = None
    price_to_book: Optional[float] = None
    display_name: Optional[str] = None
    currency: Optional[str] = None


@dataclass(frozen=True)
class PriceSeries:
    """Daily closing prices, oldest first. Positions only, no dates."""

    symbol: str
    period: str
    interval: str
    closes: tuple[float, ...]

    def __len__(self) -> int:
        return len(self.closes)

    @property
    def last_close(self) -> Optional[float]:
        return self.closes[-1] if self.closes else None
