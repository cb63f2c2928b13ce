"""Shared infrastructure: LLM provider, error handling, logging, caching."""
