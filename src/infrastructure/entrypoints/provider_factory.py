"""
Composition helpers shared by the FastAPI app and the CLI: pick the
IStockDataProvider backend named in Settings and wire the use-case.
"""

from src.application.use_cases.analyze_stock import AnalyzeStockUseCase
from src.domain.ports.stock_data_port import IStockDataProvider
from src.infrastructure.config import Settings
from src.infrastructure.stock_data.proxy_adapter import ProxyStockDataProvider
from src.infrastructure.stock_data.yfinance_adapter import YFinanceStockDataProvider


def build_stock_provider(settings: Settings) -> IStockDataProvider:
    if settings.provider == "proxy":
        return ProxyStockDataProvider(
            settings.proxy_url,
            timeout=settings.fetch_timeout_seconds,
        )
    return YFinanceStockDataProvider(timeout=settings.fetch_timeout_seconds)


def build_analyze_use_case(settings: Settings) -> AnalyzeStockUseCase:
    return AnalyzeStockUseCase(
        build_stock_provider(settings),
        timeout_seconds=settings.fetch_timeout_seconds,
        history_period=settings.history_period,
        history_interval=settings.history_interval,
        risk_pct=settings.risk_pct,
    )
