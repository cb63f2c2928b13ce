"""
finadvisor: multi-agent financial advisor backed by Gemini, with Yahoo Finance
market-data enrichment and a mock portfolio ledger.

Usage:

    from finadvisor.orchestration import get_financial_advice

    response = get_financial_advice("Should I invest in AAPL right now?")
    print(response.error or response.content)
"""

__version__ = "1.0.0"
