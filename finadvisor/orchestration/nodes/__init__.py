"""
Pipeline node functions for the advisor consultation graph.
"""

from .initial_analysis import node_initial_analysis
from .enrich_market_data import node_enrich_market_data
from .refined_analysis import node_refined_analysis
from .assess_risk import node_assess_risk
from .plan_strategy import node_plan_strategy
from .synthesize import node_synthesize

__all__ = [
    "node_initial_analysis",
    "node_enrich_market_data",
    "node_refined_analysis",
    "node_assess_risk",
    "node_plan_strategy",
    "node_synthesize",
]
