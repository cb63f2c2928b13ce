import os
import tempfile
from pathlib import Path

# Keep audit/JSON logs out of the working tree; must happen before finadvisor imports
os.environ.setdefault("ADVISOR_LOG_DIR", str(Path(tempfile.gettempdir()) / "finadvisor-test-logs"))

import pytest

from finadvisor.orchestration.personas import DISCLAIMER
from finadvisor.utils import llm_provider
from finadvisor.utils.cache import quote_cache


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for var in ("LLM_PROVIDER", "LLM_MODEL", "GOOGLE_API_KEY", "GEMINI_API_KEY", "OPENROUTER_API_KEY"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setattr(llm_provider, "_KEY_INDEXES", {"openrouter": 0, "google": 0})
    quote_cache.clear()
    yield
    quote_cache.clear()


@pytest.fixture
def api_key(monkeypatch):
    monkeypatch.setenv("GOOGLE_API_KEY", "test-key")
    return "test-key"


@pytest.fixture
def disclaimer():
    return DISCLAIMER
