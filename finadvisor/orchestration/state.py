"""
ConsultationState: shared state schema for the advisor LangGraph pipeline.

Every node reads from and writes to this TypedDict as it flows through the
graph: analyze_query, enrich_market_data, refine_analysis, assess_risk,
plan_strategy, synthesize.
"""

from __future__ import annotations

from typing import TypedDict

from finadvisor.market.models import MarketData


class ConsultationState(TypedDict, total=False):
    """State of one consultation. Nothing here outlives the run.

    Fields
    ------
    consultation_id : str
        Identifier used to correlate audit log lines.
    user_query : str
        The question as asked.
    initial_analysis : str
        Market Analyst first pass, may name tickers it wants data for.
    requested_tickers : list[str]
        Tickers extracted from the first pass.
    market_data : dict[str, MarketData]
        Live or synthetic quotes keyed by ticker.
    data_summary : str
        Plain-text data block (or the "no data requested" sentinel).
    market_analysis : str
        Market Analyst refinement incorporating the data.
    risk_assessment : str
        Risk Assessor output.
    planning_strategy : str
        Planning Strategist output.
    final_response : str
        Chief Advisor synthesis ending with the mandatory disclaimer.
    """

    consultation_id: str
    user_query: str
    initial_analysis: str
    requested_tickers: list[str]
    market_data: dict[str, MarketData]
    data_summary: str
    market_analysis: str
    risk_assessment: str
    planning_strategy: str
    final_response: str
