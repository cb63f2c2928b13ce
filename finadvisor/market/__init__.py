"""
market: ticker extraction, Yahoo Finance quote enrichment and the index board.
"""

from .models import MarketData, MarketIndex
from .ticker_extractor import extract_ticker_requests
from .market_data import fetch_market_data, generate_mock_data, summarize_market_data

__all__ = [
    "MarketData",
    "MarketIndex",
    "extract_ticker_requests",
    "fetch_market_data",
    "generate_mock_data",
    "summarize_market_data",
]
