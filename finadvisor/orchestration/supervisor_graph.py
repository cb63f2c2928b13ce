from functools import partial
from typing import Callable, Optional

from langgraph.graph import StateGraph, END

from .agent import FinancialAgent
from .state import ConsultationState
from finadvisor.utils.compliance import audit_node_wrapper

from .nodes.initial_analysis import node_initial_analysis
from .nodes.enrich_market_data import node_enrich_market_data
from .nodes.refined_analysis import node_refined_analysis
from .nodes.assess_risk import node_assess_risk
from .nodes.plan_strategy import node_plan_strategy
from .nodes.synthesize import node_synthesize

STAGES = (
    "analyze_query",
    "enrich_market_data",
    "refine_analysis",
    "assess_risk",
    "plan_strategy",
    "synthesize",
)


def _stage(node_func, **bound):
    return partial(audit_node_wrapper(node_func), **bound)


def build_graph(agents: dict[str, FinancialAgent], fetcher: Optional[Callable] = None):
    """
    Compile the six-stage consultation pipeline for one team's agents.

    Stages run strictly in order; a stage whose agent failed raises
    ConsultationStageError out of ``invoke`` and nothing after it runs.
    """
    workflow = StateGraph(ConsultationState)

    workflow.add_node("analyze_query", _stage(node_initial_analysis, market_analyst=agents["market_analyst"]))
    workflow.add_node("enrich_market_data", _stage(node_enrich_market_data, fetcher=fetcher))
    workflow.add_node("refine_analysis", _stage(node_refined_analysis, market_analyst=agents["market_analyst"]))
    workflow.add_node("assess_risk", _stage(node_assess_risk, risk_assessor=agents["risk_assessor"]))
    workflow.add_node("plan_strategy", _stage(node_plan_strategy, planning_strategist=agents["planning_strategist"]))
    workflow.add_node("synthesize", _stage(node_synthesize, chief_advisor=agents["chief_advisor"]))

    workflow.set_entry_point(STAGES[0])
    for current, following in zip(STAGES, STAGES[1:]):
        workflow.add_edge(current, following)
    workflow.add_edge(STAGES[-1], END)

    return workflow.compile()
