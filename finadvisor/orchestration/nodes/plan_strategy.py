import logging
from typing import Any

from finadvisor.orchestration.agent import FinancialAgent, check_agent_result

logger = logging.getLogger(__name__)


def node_plan_strategy(state: dict[str, Any], *, planning_strategist: FinancialAgent) -> dict[str, Any]:
    prompt = (
        "Context for Planning Strategy:\n"
        f'Original User Query: "{state["user_query"]}"\n'
        f"Market Analysis:\n{state['market_analysis']}\n"
        f"Risk Assessment:\n{state['risk_assessment']}\n"
        "---\n"
        "Task: Outline potential strategic concepts (like diversification, types of "
        "accounts/vehicles) relevant to the user's query, considering the analysis and risks."
    )

    result = planning_strategist.process(prompt)
    planning_strategy = check_agent_result(result, "planning_strategy", "Failed during planning strategy phase")
    return {"planning_strategy": planning_strategy}
