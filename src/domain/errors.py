"""
Error taxonomy for market-data access.
Adapters translate library and transport exceptions into these types so the
application layer only ever sees StockDataError subclasses.
"""


class StockDataError(Exception):
    """Terminal failure for a single analysis request."""


class FetchFailure(StockDataError):
    """The data source returned a non-success response, timed out, or sent a malformed payload."""


class NoData(StockDataError):
    """The symbol resolved to no quote, no price, or an empty price history."""
