import logging
from tenacity import retry, stop_after_attempt, wait_exponential, retry_if_exception_type

logger = logging.getLogger(__name__)


class AdvisorError(Exception):
    """Base exception for the advisor ecosystem."""
    pass


class ConfigurationError(AdvisorError, ValueError):
    """Missing credential or unknown provider."""


class MarketDataError(AdvisorError):
    pass


class LLMRateLimitError(AdvisorError):
    pass


class LLMResponseError(AdvisorError):
    pass


class ConsultationStageError(AdvisorError):
    """Raised by a pipeline stage when its agent call failed; aborts the consultation."""

    def __init__(self, stage: str, message: str, cause: str = ""):
        self.stage = stage
        self.cause = cause
        super().__init__(f"{message}: {cause}" if cause else message)


_RATE_LIMIT_MARKERS = ("429", "rate limit", "resource exhausted", "resource_exhausted", "quota")


def is_rate_limit_error(exc: Exception) -> bool:
    text = str(exc).lower()
    return any(marker in text for marker in _RATE_LIMIT_MARKERS)


def handle_rate_limit(retry_state):
    logger.warning(f"Rate limited. Retrying... Attempt {retry_state.attempt_number}")


# Retry decorator for LLM calls; only rate limits are worth retrying
llm_retry = retry(
    stop=stop_after_attempt(3),
    wait=wait_exponential(multiplier=2, min=5, max=60),
    retry=retry_if_exception_type(LLMRateLimitError),
    after=handle_rate_limit,
    reraise=True,
)


@llm_retry
def safe_llm_invoke(llm, prompt):
    """
    Invoke a LangChain chat model, turning quota/429 failures into
    LLMRateLimitError so the retry decorator can back off and the provider
    can rotate to the next configured API key.
    """
    if not hasattr(llm, "invoke"):
        # factory, rebuilt each attempt to pick up a rotated key
        llm = llm()
    try:
        return llm.invoke(prompt)
    except Exception as e:
        if is_rate_limit_error(e):
            from .llm_provider import rotate_key, current_provider
            rotate_key(current_provider())
            raise LLMRateLimitError(str(e)) from e
        raise
