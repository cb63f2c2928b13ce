import logging
from typing import Any

from finadvisor.orchestration.agent import FinancialAgent, check_agent_result

logger = logging.getLogger(__name__)


def node_initial_analysis(state: dict[str, Any], *, market_analyst: FinancialAgent) -> dict[str, Any]:
    """First Market Analyst pass; may ask for ticker data ("Data needed for: AAPL, MSFT")."""
    user_query = state["user_query"]
    prompt = (
        f'User Query: "{user_query}". Analyze the query and current market landscape. '
        "Identify any essential stock/index tickers needed for a better analysis, "
        "listing them clearly if required."
    )

    result = market_analyst.process(prompt, is_follow_up=False)
    initial_analysis = check_agent_result(
        result, "initial_analysis", "Failed during initial market analysis phase"
    )
    logger.debug("Initial Analysis Response: %s", initial_analysis)
    return {"initial_analysis": initial_analysis}
