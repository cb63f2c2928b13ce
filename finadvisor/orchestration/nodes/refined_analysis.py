import logging
from typing import Any

from finadvisor.orchestration.agent import FinancialAgent, check_agent_result

logger = logging.getLogger(__name__)


def node_refined_analysis(state: dict[str, Any], *, market_analyst: FinancialAgent) -> dict[str, Any]:
    """Second Market Analyst pass, run as a follow-up turn over its own first output plus the data."""
    prompt = (
        "Based on your initial thoughts below and the provided market data summary, refine your "
        f'market analysis concerning the original user query: "{state["user_query"]}". '
        "Integrate the data points where relevant.\n"
        "---\n"
        f"Your Initial Thoughts:\n{state['initial_analysis']}\n"
        "---\n"
        f"Market Data Summary:\n{state['data_summary']}\n"
        "---\n"
        "Refined Analysis:"
    )

    result = market_analyst.process(prompt, is_follow_up=True)
    market_analysis = check_agent_result(
        result, "refined_analysis", "Failed during refined market analysis phase"
    )
    return {"market_analysis": market_analysis}
