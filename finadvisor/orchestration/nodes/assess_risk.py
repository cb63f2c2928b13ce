import logging
from typing import Any

from finadvisor.orchestration.agent import FinancialAgent, check_agent_result

logger = logging.getLogger(__name__)


def node_assess_risk(state: dict[str, Any], *, risk_assessor: FinancialAgent) -> dict[str, Any]:
    prompt = (
        "Context for Risk Assessment:\n"
        f'Original User Query: "{state["user_query"]}"\n'
        f"Market Analysis (incorporating data if fetched):\n{state['market_analysis']}\n"
        "---\n"
        "Task: Identify key risks associated with the topic raised in the user query, "
        "considering the market analysis provided."
    )

    result = risk_assessor.process(prompt)
    risk_assessment = check_agent_result(result, "risk_assessment", "Failed during risk assessment phase")
    return {"risk_assessment": risk_assessment}
