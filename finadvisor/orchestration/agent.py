"""
FinancialAgent: one role-bound wrapper around a chat-completion call.

process() never raises. Every failure (missing key, transport error, blocked
or empty completion) comes back as a failed AgentResult, whose ``sentinel``
renders the "[<role> Error: <message>]" string callers used to grep for.
"""
from __future__ import annotations

import logging
import time
from collections import deque
from typing import Any, Callable, Optional

from langchain_core.messages import AIMessage, BaseMessage, HumanMessage, SystemMessage
from pydantic import BaseModel

from finadvisor.orchestration.personas import Persona
from finadvisor.utils.error_handler import ConsultationStageError, LLMResponseError, safe_llm_invoke
from finadvisor.utils.llm_provider import get_llm

logger = logging.getLogger(__name__)

# 3 input/output pairs
MAX_HISTORY_ENTRIES = 6


class AgentResult(BaseModel):
    role: str
    text: str = ""
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def sentinel(self) -> str:
        return f"[{self.role} Error: {self.error}]"

    def __str__(self) -> str:
        return self.text if self.ok else self.sentinel


def check_agent_result(result: AgentResult, stage: str, message: str) -> str:
    """Return the agent's text, or abort the consultation with a stage-specific error."""
    if not result.ok or not result.text:
        logger.error("Error detected from %s: %s", result.role, result.sentinel)
        raise ConsultationStageError(stage, message, result.sentinel if not result.ok else "empty response")
    return result.text


def _response_text(response: Any) -> str:
    content = getattr(response, "content", None)
    if isinstance(content, list):
        # Gemini may return a list of content parts
        content = "".join(
            part.get("text", "") if isinstance(part, dict) else str(part) for part in content
        )
    if not isinstance(content, str) or not content.strip():
        raise LLMResponseError("Received empty or invalid content from Gemini API")
    return content.strip()


class FinancialAgent:
    """A single advisor role. History is kept per instance and only used for follow-up turns."""

    def __init__(self, role: str, persona: str, llm_factory: Optional[Callable[[], Any]] = None):
        self.role = role
        self.persona = persona
        self._llm_factory = llm_factory or get_llm
        self._history: deque[BaseMessage] = deque(maxlen=MAX_HISTORY_ENTRIES)

    @classmethod
    def from_persona(cls, persona: Persona, llm_factory: Optional[Callable[[], Any]] = None) -> "FinancialAgent":
        return cls(persona.role, persona.instructions, llm_factory=llm_factory)

    @property
    def history(self) -> list[BaseMessage]:
        return list(self._history)

    def build_messages(self, prompt: str, is_follow_up: bool = False) -> list[BaseMessage]:
        messages: list[BaseMessage] = [SystemMessage(content=self.persona)]
        if is_follow_up:
            messages.extend(self._history)
        messages.append(HumanMessage(content=f"Current Task/Input:\n{prompt}"))
        return messages

    def process(self, prompt: str, is_follow_up: bool = False) -> AgentResult:
        logger.info("Agent %s starting process...", self.role)
        t0 = time.time()

        if not is_follow_up:
            self._history.clear()

        try:
            response = safe_llm_invoke(self._llm_factory, self.build_messages(prompt, is_follow_up))
            text = _response_text(response)
        except Exception as e:
            logger.error("Error during generation for %s: %s", self.role, e)
            return AgentResult(role=self.role, error=str(e) or type(e).__name__)

        logger.info("Agent %s finished in %.2fs.", self.role, time.time() - t0)

        if is_follow_up:
            self._history.append(HumanMessage(content=prompt))
            self._history.append(AIMessage(content=text))

        return AgentResult(role=self.role, text=text)
