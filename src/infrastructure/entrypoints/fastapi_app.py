"""
FastAPI entry point - analysis API plus the Yahoo Finance proxy function.

This module is the Composition Root for server runs: it loads Settings, wires
the configured IStockDataProvider into AnalyzeStockUseCase and exposes:

    GET /analyze/{symbol}       scored report as JSON
    GET /fetch-stock?symbol=    raw {"quote", "chart"} Yahoo payloads, the
                                backend that ProxyStockDataProvider talks to
    GET /health

Run locally:
    uvicorn src.infrastructure.entrypoints.fastapi_app:app --reload --port 8000
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, HTTPException, Query
from fastapi.responses import JSONResponse, PlainTextResponse

from src.application.use_cases.analyze_stock import AnalyzeStockUseCase
from src.domain.errors import FetchFailure, NoData
from src.infrastructure.config import Settings, load_settings
from src.infrastructure.entrypoints.provider_factory import build_analyze_use_case
from src.infrastructure.entrypoints.schemas import AnalysisResponse
from src.infrastructure.logging_setup import configure_logging
from src.infrastructure.stock_data.yahoo_http_client import YahooFinanceClient

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    use_case: Optional[AnalyzeStockUseCase] = None,
    yahoo_client: Optional[YahooFinanceClient] = None,
) -> FastAPI:
    """Build the FastAPI app; collaborators default to the ones named in *settings*.

    A YahooFinanceClient built here is closed on shutdown; an injected one is
    left to its owner.
    """
    settings = settings or Settings()
    use_case = use_case or build_analyze_use_case(settings)
    owns_yahoo_client = yahoo_client is None
    if owns_yahoo_client:
        yahoo_client = YahooFinanceClient(
            base_url=settings.yahoo_base_url,
            timeout=settings.fetch_timeout_seconds,
        )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        if owns_yahoo_client:
            yahoo_client.close()

    app = FastAPI(title="Stock Advisor API", lifespan=lifespan)
    app.state.yahoo_client = yahoo_client

    @app.get("/analyze/{symbol}", response_model=AnalysisResponse)
    async def analyze_symbol(symbol: str):
        """Score *symbol* and return the report as JSON."""
        try:
            report = await use_case.execute(symbol)
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        except NoData as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc
        except FetchFailure as exc:
            logger.warning("Analysis of %s failed: %s", symbol, exc)
            raise HTTPException(status_code=502, detail=str(exc)) from exc
        return AnalysisResponse.from_report(report)

    @app.get("/fetch-stock")
    def fetch_stock(
        symbol: Optional[str] = Query(None),
        range_: str = Query(settings.history_period, alias="range"),
        interval: str = Query(settings.history_interval),
    ):
        """Forward the Yahoo quote and chart payloads for *symbol*, unparsed."""
        if not symbol or not symbol.strip():
            return PlainTextResponse("Symbol missing", status_code=400)
        try:
            return yahoo_client.fetch_combined(symbol.strip(), range_, interval)
        except FetchFailure as exc:
            logger.warning("Proxy fetch for %s failed: %s", symbol, exc)
            return JSONResponse({"error": str(exc)}, status_code=500)

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app


# ---------------------------------------------------------------------------
# Composition Root - wire all dependencies once at startup
# ---------------------------------------------------------------------------
_settings = load_settings()
configure_logging(_settings.log_level)
app = create_app(_settings)
