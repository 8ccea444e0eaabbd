"""
Port (interface) for market-data providers.
Infrastructure adapters (YFinanceStockDataProvider, ProxyStockDataProvider)
must implement this interface and raise only FetchFailure or NoData.
"""

from abc import ABC, abstractmethod

from src.domain.entities.stock_price import PriceSeries, QuoteSnapshot


class IStockDataProvider(ABC):
    @abstractmethod
    def get_quote(self, symbol: str) -> QuoteSnapshot: ...

    @abstractmethod
    def get_price_history(
        self,
        symbol: str,
        period: str = "1y",
        interval: str = "1d",
    ) -> PriceSeries: ...
