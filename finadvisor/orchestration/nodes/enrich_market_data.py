import logging
from typing import Any, Callable, Optional

from finadvisor.market.market_data import NO_DATA_REQUESTED, fetch_market_data, summarize_market_data
from finadvisor.market.ticker_extractor import extract_ticker_requests

logger = logging.getLogger(__name__)


def node_enrich_market_data(
    state: dict[str, Any],
    *,
    fetcher: Optional[Callable[[list[str]], dict]] = None,
) -> dict[str, Any]:
    """
    Pull the tickers the Market Analyst mentioned and resolve quotes for them.
    Never fails: the fetcher degrades to synthetic quotes per ticker.
    """
    requested = extract_ticker_requests(state.get("initial_analysis", ""))

    if not requested:
        logger.info("No ticker data requested by the Market Analyst")
        return {"requested_tickers": [], "market_data": {}, "data_summary": NO_DATA_REQUESTED}

    logger.info("Tickers requested by Market Analyst: %s", requested)
    market_data = (fetcher or fetch_market_data)(requested)
    return {
        "requested_tickers": requested,
        "market_data": market_data,
        "data_summary": summarize_market_data(market_data),
    }
