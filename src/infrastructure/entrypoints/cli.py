"""
Stock Advisor - CLI entry point (Composition Root for terminal runs).

Install and run::

    pip install -e .
    stock-advisor analyze RPOWER.NS
    stock-advisor analyze aapl --provider proxy --json
    stock-advisor serve --port 8000
"""

import asyncio
from typing import Optional

import typer

from src.domain.errors import StockDataError
from src.infrastructure.config import load_settings
from src.infrastructure.entrypoints.provider_factory import build_analyze_use_case
from src.infrastructure.entrypoints.schemas import AnalysisResponse
from src.infrastructure.logging_setup import configure_logging
from src.infrastructure.presentation.text_renderer import render_error, render_report

app = typer.Typer(
    name="stock-advisor",
    help="Score a ticker from its valuation ratios and price trend.",
    add_completion=False,
)


def _load_settings_or_exit(**overrides):
    try:
        return load_settings(**overrides)
    except Exception as exc:
        typer.echo(f"[ERROR] Config validation failed: {exc}", err=True)
        raise typer.Exit(code=1)


@app.command("analyze")
def analyze(
    symbol: str = typer.Argument(..., help="Ticker symbol, e.g. RPOWER.NS."),
    provider: Optional[str] = typer.Option(
        None, "--provider", help="Data source: yfinance or proxy."
    ),
    proxy_url: Optional[str] = typer.Option(
        None, "--proxy-url", help="Proxy endpoint used when --provider=proxy."
    ),
    timeout: Optional[float] = typer.Option(
        None, "--timeout", help="Per-fetch timeout in seconds."
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the report as JSON."),
) -> None:
    """Fetch, score and print a recommendation for SYMBOL."""
    settings = _load_settings_or_exit(
        provider=provider,
        proxy_url=proxy_url,
        fetch_timeout_seconds=timeout,
    )
    configure_logging(settings.log_level)
    use_case = build_analyze_use_case(settings)

    try:
        report = asyncio.run(use_case.execute(symbol))
    except (StockDataError, ValueError) as exc:
        typer.echo(render_error(exc), err=True)
        raise typer.Exit(code=1)

    if as_json:
        typer.echo(AnalysisResponse.from_report(report).model_dump_json(indent=2))
    else:
        typer.echo(render_report(report))


@app.command("serve")
def serve(
    host: str = typer.Option("127.0.0.1", "--host"),
    port: int = typer.Option(8000, "--port"),
) -> None:
    """Run the analysis API and /fetch-stock proxy with uvicorn."""
    import uvicorn

    uvicorn.run("src.infrastructure.entrypoints.fastapi_app:app", host=host, port=port)


if __name__ == "__main__":
    app()
