"""
orchestration: multi-agent financial advisor consultation built on LangGraph.

Entry point
-----------
>>> from finadvisor.orchestration import get_financial_advice
>>> response = get_financial_advice("Should I invest in AAPL right now?")
>>> response.error is None
"""

from .advisor_team import AdvisorResponse, AdvisorTeam, get_financial_advice
from .agent import AgentResult, FinancialAgent
from .supervisor_graph import build_graph

__all__ = [
    "AdvisorResponse",
    "AdvisorTeam",
    "AgentResult",
    "FinancialAgent",
    "build_graph",
    "get_financial_advice",
]
