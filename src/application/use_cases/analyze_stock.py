"""
Use-case: fetch a symbol's quote and price history, then score it.
Depends only on Domain ports, entities and services - no infrastructure imports.

The two provider calls are independent, so they run concurrently in worker
threads; each one is bounded by a timeout. Any failure is terminal for the
request: there are no partial results and no retries.
"""

import asyncio
import logging
from concurrent.futures import ThreadPoolExecutor

from src.domain.entities.analysis import AnalysisReport
from src.domain.errors import FetchFailure
from src.domain.ports.stock_data_port import IStockDataProvider
from src.domain.services.analysis import analyze
from src.domain.services.scoring import DEFAULT_RISK_PCT

logger = logging.getLogger(__name__)


def normalize_symbol(symbol: str) -> str:
    """Strip and upper-case *symbol*.

    Raises:
        ValueError: if *symbol* is blank.
    """
    if not symbol or not symbol.strip():
        raise ValueError("symbol must be a non-empty string")
    return symbol.strip().upper()


class AnalyzeStockUseCase:
    def __init__(
        self,
        provider: IStockDataProvider,
        timeout_seconds: float = 10.0,
        history_period: str = "1y",
        history_interval: str = "1d",
        risk_pct: float = DEFAULT_RISK_PCT,
    ) -> None:
        self._provider = provider
        self._timeout = timeout_seconds
        self._period = history_period
        self._interval = history_interval
        self._risk_pct = risk_pct

    async def _call(self, executor: ThreadPoolExecutor, label: str, func, *args):
        loop = asyncio.get_running_loop()
        try:
            return await asyncio.wait_for(
                loop.run_in_executor(executor, func, *args), self._timeout
            )
        except asyncio.TimeoutError as exc:
            raise FetchFailure(f"{label} fetch timed out after {self._timeout:g}s") from exc

    async def execute(self, symbol: str) -> AnalysisReport:
        """Analyse *symbol* (case-insensitive).

        Raises:
            ValueError:   if *symbol* is blank.
            FetchFailure: on transport errors, bad responses or timeouts.
            NoData:       if the symbol has no quote or no price history.
        """
        symbol = normalize_symbol(symbol)
        logger.info("Analysing %s via %s", symbol, type(self._provider).__name__)

        # Private pool: asyncio.run() joins the default executor, which would
        # block on a timed-out call until it returned.
        executor = ThreadPoolExecutor(max_workers=2, thread_name_prefix="stock-fetch")
        try:
            quote, history = await asyncio.gather(
                self._call(executor, "Quote", self._provider.get_quote, symbol),
                self._call(
                    executor,
                    "History",
                    self._provider.get_price_history,
                    symbol,
                    self._period,
                    self._interval,
                ),
            )
        finally:
            executor.shutdown(wait=False, cancel_futures=True)

        report = analyze(quote, history, self._risk_pct)
        logger.info(
            "%s scored %.1f%% -> %s",
            symbol,
            report.result.score,
            report.result.recommendation.value,
        )
        return report
