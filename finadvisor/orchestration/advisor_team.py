"""
AdvisorTeam: four role agents (Market Analyst, Risk Assessor, Planning
Strategist, Chief Advisor) run as one linear consultation.

Each team owns fresh agents and its own compiled graph, so concurrent
consultations share nothing.
"""
from __future__ import annotations

import logging
import time
import uuid
from typing import Any, Callable, Optional

from pydantic import BaseModel, model_validator

from finadvisor.orchestration.agent import FinancialAgent
from finadvisor.orchestration.personas import TEAM_PERSONAS
from finadvisor.orchestration.supervisor_graph import build_graph
from finadvisor.utils.compliance import redact_pii
from finadvisor.utils.error_handler import ConsultationStageError
from finadvisor.utils.llm_provider import has_credentials

logger = logging.getLogger(__name__)

MIN_QUERY_LENGTH = 5
QUERY_TOO_SHORT = "Query too short."
MISSING_API_KEY = "AI Advisor configuration error: API Key is missing."


class AdvisorResponse(BaseModel):
    """Either content (error None) or an error message (content empty), never both."""

    content: str = ""
    is_loading: bool = False
    error: Optional[str] = None

    @model_validator(mode="after")
    def _content_xor_error(self) -> "AdvisorResponse":
        if bool(self.content) == bool(self.error):
            raise ValueError("AdvisorResponse needs exactly one of content or error")
        return self

    @classmethod
    def failure(cls, message: str) -> "AdvisorResponse":
        return cls(content="", error=message)


class AdvisorTeam:
    def __init__(
        self,
        llm_factory: Optional[Callable[[], Any]] = None,
        fetcher: Optional[Callable[[list[str]], dict]] = None,
    ):
        self.agents: dict[str, FinancialAgent] = {
            persona.key: FinancialAgent.from_persona(persona, llm_factory=llm_factory)
            for persona in TEAM_PERSONAS
        }
        self._graph = build_graph(self.agents, fetcher=fetcher)

    def run_consultation(self, user_query: str) -> AdvisorResponse:
        consultation_id = uuid.uuid4().hex[:12]
        logger.info("Starting financial consultation %s for query: %s", consultation_id, redact_pii(user_query))
        t0 = time.time()

        try:
            final_state = self._graph.invoke({"consultation_id": consultation_id, "user_query": user_query})
        except ConsultationStageError as e:
            logger.error("Consultation %s aborted at %s: %s", consultation_id, e.stage, e)
            return AdvisorResponse.failure(
                f"Sorry, an error occurred during the consultation: {e}. "
                "Please try again later or contact support if the issue persists."
            )

        logger.info("Consultation %s finished successfully in %.2f seconds", consultation_id, time.time() - t0)
        return AdvisorResponse(content=final_state["final_response"])


def get_financial_advice(
    query: str,
    llm_factory: Optional[Callable[[], Any]] = None,
    fetcher: Optional[Callable[[list[str]], dict]] = None,
) -> AdvisorResponse:
    """
    Caller-facing entry point. Short queries and a missing API key are
    rejected before any agent exists or any request is made.
    """
    try:
        if not query or len(query.strip()) < MIN_QUERY_LENGTH:
            return AdvisorResponse.failure(QUERY_TOO_SHORT)

        if not has_credentials():
            logger.error(MISSING_API_KEY)
            return AdvisorResponse.failure(MISSING_API_KEY)

        team = AdvisorTeam(llm_factory=llm_factory, fetcher=fetcher)
        return team.run_consultation(query)

    except Exception as e:
        logger.exception("Unexpected error in get_financial_advice")
        return AdvisorResponse.failure(f"An unexpected error occurred: {e}")
