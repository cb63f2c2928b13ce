"""
synthesize.py: final stage: the Chief Advisor merges the three team inputs
into one answer that must end with the mandatory disclaimer.

Output key: `final_response` (str)
"""

import logging
from typing import Any

from finadvisor.orchestration.agent import FinancialAgent, check_agent_result
from finadvisor.orchestration.personas import DISCLAIMER

logger = logging.getLogger(__name__)

DISCLAIMER_MARKER = "**IMPORTANT DISCLAIMER:**"


def node_synthesize(state: dict[str, Any], *, chief_advisor: FinancialAgent) -> dict[str, Any]:
    prompt = (
        "Synthesize the following inputs into a single, coherent response for the user who asked: "
        f'"{state["user_query"]}". Integrate all points smoothly. Address the user directly. '
        "Conclude *exactly* with the mandatory disclaimer provided in your instructions.\n\n"
        "--- START OF TEAM INPUTS ---\n\n"
        f"[Market Analyst - Context & Data Insights]:\n{state['market_analysis']}\n\n"
        f"[Risk Assessor - Potential Risks]:\n{state['risk_assessment']}\n\n"
        f"[Planning Strategist - Strategic Concepts]:\n{state['planning_strategy']}\n\n"
        "--- END OF TEAM INPUTS ---\n\n"
        "Final Response to User:"
    )

    result = chief_advisor.process(prompt)
    final_response = check_agent_result(
        result, "synthesis", "The Chief Advisor failed to synthesize the final response"
    )

    if not final_response.endswith(DISCLAIMER):
        if DISCLAIMER_MARKER in final_response:
            logger.warning("Chief Advisor altered the mandatory disclaimer wording.")
        else:
            logger.warning("Chief Advisor did not include the mandatory disclaimer.")

    return {"final_response": final_response}
