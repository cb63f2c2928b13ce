"""
LLM provider: Gemini by default, with OpenRouter / Ollama selectable through
ONE environment variable (LLM_PROVIDER).

Credentials are read from the server-side environment only:
GOOGLE_API_KEY (or GEMINI_API_KEY) / OPENROUTER_API_KEY. Several keys may be
given comma or whitespace separated; they are rotated on rate-limit errors.
"""

import os
import logging
from typing import Optional
from dotenv import load_dotenv
from langchain_google_genai import ChatGoogleGenerativeAI, HarmBlockThreshold, HarmCategory
from langchain_openai import ChatOpenAI

from finadvisor.utils.error_handler import ConfigurationError

load_dotenv()
logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-2.0-flash"

# Fixed sampling parameters for every advisor agent
GENERATION_CONFIG = {
    "temperature": 0.6,
    "top_p": 1.0,
    "top_k": 32,
    "max_output_tokens": 4096,
}

SAFETY_SETTINGS = {
    HarmCategory.HARM_CATEGORY_HARASSMENT: HarmBlockThreshold.BLOCK_MEDIUM_AND_ABOVE,
    HarmCategory.HARM_CATEGORY_HATE_SPEECH: HarmBlockThreshold.BLOCK_MEDIUM_AND_ABOVE,
    HarmCategory.HARM_CATEGORY_SEXUALLY_EXPLICIT: HarmBlockThreshold.BLOCK_MEDIUM_AND_ABOVE,
    HarmCategory.HARM_CATEGORY_DANGEROUS_CONTENT: HarmBlockThreshold.BLOCK_MEDIUM_AND_ABOVE,
}

_KEY_ALIASES = {"google": ("GOOGLE_API_KEY", "GEMINI_API_KEY"), "openrouter": ("OPENROUTER_API_KEY",)}

# Global state to keep track of current key index per provider
_KEY_INDEXES = {"openrouter": 0, "google": 0}


def current_provider() -> str:
    provider = os.getenv("LLM_PROVIDER", "google").lower()
    return "google" if provider == "gemini" else provider


def get_keys_for_provider(provider: str) -> list:
    """Gets a list of keys from the environment for a given provider."""
    for env_var in _KEY_ALIASES.get(provider, (f"{provider.upper()}_API_KEY",)):
        raw_val = os.getenv(env_var, "")
        # Support comma-separated keys or multiple lines
        keys = [k.strip() for k in raw_val.replace(",", " ").split() if k.strip()]
        if keys:
            return keys
    return []


def has_credentials(provider: Optional[str] = None) -> bool:
    """True when the selected provider can be called (ollama needs no key)."""
    provider = provider or current_provider()
    if provider == "ollama":
        return True
    return bool(get_keys_for_provider(provider))


def rotate_key(provider: str):
    """Increments the key index for the provider."""
    keys = get_keys_for_provider(provider)
    if len(keys) > 1:
        _KEY_INDEXES[provider] = (_KEY_INDEXES.get(provider, 0) + 1) % len(keys)
        logger.warning(f"Rotating to next {provider} API key (New index: {_KEY_INDEXES[provider]})")


def _current_key(provider: str) -> Optional[str]:
    keys = get_keys_for_provider(provider)
    if not keys:
        return None
    return keys[_KEY_INDEXES.get(provider, 0) % len(keys)]


def get_llm(model_override: Optional[str] = None, **generation):
    """
    Get a chat model for the configured provider.

    ``generation`` overrides entries of GENERATION_CONFIG. Raises ConfigurationError
    when the provider is unknown or its API key is not set.
    """
    provider = current_provider()
    config = {**GENERATION_CONFIG, **generation}
    api_key = _current_key(provider)
    model = model_override or os.getenv("LLM_MODEL")

    if provider == "google":
        if not api_key:
            raise ConfigurationError("GOOGLE_API_KEY not set in .env")
        return ChatGoogleGenerativeAI(
            model=model or DEFAULT_MODEL,
            google_api_key=api_key,
            temperature=config["temperature"],
            top_p=config["top_p"],
            top_k=config["top_k"],
            max_output_tokens=config["max_output_tokens"],
            safety_settings=SAFETY_SETTINGS,
            max_retries=1,
        )

    elif provider == "openrouter":
        if not api_key:
            raise ConfigurationError("OPENROUTER_API_KEY not set in .env")
        return ChatOpenAI(
            api_key=api_key,
            base_url="https://openrouter.ai/api/v1",
            model=model or "openrouter/auto",
            temperature=config["temperature"],
            top_p=config["top_p"],
            max_tokens=config["max_output_tokens"],
            max_retries=1,
        )

    elif provider == "ollama":
        return ChatOpenAI(
            base_url=os.getenv("OLLAMA_BASE_URL", "http://localhost:11434/v1"),
            api_key="ollama",
            model=model or "llama3",
            temperature=config["temperature"],
            top_p=config["top_p"],
            max_tokens=config["max_output_tokens"],
            max_retries=1,
        )

    else:
        raise ConfigurationError(f"Unknown provider: {provider}. Use: google, openrouter, or ollama")
