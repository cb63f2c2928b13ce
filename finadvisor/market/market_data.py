"""
Market Data Fetcher: live Yahoo Finance quotes for the tickers the Market
Analyst asks for.

Design:
  - one yfinance quote lookup per ticker, fanned out on a thread pool
  - every ticker resolves on its own; any failure becomes a synthetic
    placeholder so enrichment never aborts a consultation
  - live quotes are memoised in quote_cache (QUOTE_CACHE_TTL seconds)
"""
from __future__ import annotations

import logging
import os
import random
import re
from concurrent.futures import ThreadPoolExecutor
from typing import Optional

import yfinance as yf

from finadvisor.market.models import MarketData
from finadvisor.utils.cache import cache_result, quote_cache
from finadvisor.utils.error_handler import MarketDataError

logger = logging.getLogger(__name__)

VALID_TICKER = re.compile(r"^[A-Z0-9.-]{1,10}$")

NO_DATA_REQUESTED = "No specific market data was requested or fetched for this query."
NO_DATA_RETRIEVED = "Attempted to fetch data for requested tickers, but no data was retrieved.\n"


def _money(value: float) -> str:
    return f"${value:.2f}"


def _volume(value) -> str:
    try:
        return f"{int(value):,}" if value else "N/A"
    except (TypeError, ValueError):
        # NaN or non-numeric volume from Yahoo
        return "N/A"


def _range(low, high) -> str:
    if low and high:
        return f"{_money(low)} - {_money(high)}"
    return "N/A"


@cache_result(quote_cache)
def _fetch_quote(ticker: str) -> MarketData:
    """Single Yahoo Finance quote. Raises MarketDataError when no price is available."""
    info = yf.Ticker(ticker).info or {}
    price = info.get("regularMarketPrice")
    if price is None:
        raise MarketDataError(f"Incomplete or no data received for {ticker}")

    previous_close = info.get("regularMarketPreviousClose")
    volume = info.get("regularMarketVolume")
    return MarketData(
        ticker=ticker,
        name=info.get("shortName") or info.get("longName") or ticker,
        price=_money(price),
        previous_close=_money(previous_close) if previous_close else "N/A",
        day_range=_range(info.get("regularMarketDayLow"), info.get("regularMarketDayHigh")),
        week_range=_range(info.get("fiftyTwoWeekLow"), info.get("fiftyTwoWeekHigh")),
        volume=_volume(volume),
    )


def generate_mock_data(ticker: str, reason: str = "Mock Data", rng: Optional[random.Random] = None) -> MarketData:
    """Synthetic quote used whenever a live one can't be fetched; the name carries the reason."""
    rng = rng or random
    base_price = 100 + rng.random() * 900
    variance = base_price * 0.02

    return MarketData(
        ticker=ticker,
        name=f"{ticker} ({reason})",
        price=_money(base_price),
        previous_close=_money(base_price - variance * (rng.random() - 0.5)),
        day_range=f"{_money(base_price - variance)} - {_money(base_price + variance)}",
        week_range=f"{_money(base_price * 0.8)} - {_money(base_price * 1.2)}",
        volume=f"{int(rng.random() * 10_000_000):,}",
        synthetic=True,
    )


def _resolve_ticker(ticker: str) -> MarketData:
    if not VALID_TICKER.match(ticker):
        logger.warning("Invalid ticker format skipped: %s", ticker)
        return generate_mock_data(ticker, "Invalid Ticker Format")

    try:
        return _fetch_quote(ticker)
    except MarketDataError as e:
        logger.info("%s, using mock data", e)
        return generate_mock_data(ticker, "No Real-time Data")
    except Exception as e:
        logger.error("Error fetching or processing data for %s: %s", ticker, e)
        return generate_mock_data(ticker, "Fetch Error")


def fetch_market_data(tickers: list[str], max_workers: Optional[int] = None) -> dict[str, MarketData]:
    """
    Resolve every requested ticker to a MarketData record.

    Returns:
        { ticker: MarketData }, one entry per distinct ticker, live or
        synthetic. Never raises. An empty list returns {} without any request.
    """
    if not tickers:
        return {}

    unique = list(dict.fromkeys(tickers))
    logger.info("Fetching market data for: %s", ", ".join(unique))

    workers = max_workers or int(os.getenv("MARKET_DATA_WORKERS", "8"))
    result: dict[str, MarketData] = {}

    with ThreadPoolExecutor(max_workers=max(1, min(workers, len(unique)))) as executor:
        future_to_ticker = {executor.submit(_resolve_ticker, t): t for t in unique}
        for future, ticker in future_to_ticker.items():
            result[ticker] = future.result()

    synthetic = sum(1 for data in result.values() if data.synthetic)
    logger.info("Resolved %d tickers (%d synthetic)", len(result), synthetic)
    return result


def summarize_market_data(market_data: dict[str, MarketData]) -> str:
    """Plain-text context block handed to the Market Analyst's refinement pass."""
    if not market_data:
        return NO_DATA_RETRIEVED

    summary = "Fetched Market Data Context:\n"
    for ticker, data in market_data.items():
        summary += (
            f"- {data.name} ({ticker}): Price={data.price}, Day Range={data.day_range}, "
            f"52wk Range={data.week_range}, Vol={data.volume}\n"
        )
    return summary
