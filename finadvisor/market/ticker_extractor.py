"""
Heuristic ticker extraction from analyst text.

One uppercase letter followed by up to five uppercase letters, digits or
periods, bounded by word edges. Lower-case and numeric-leading symbols are
missed and capitalised acronyms are over-matched; callers treat the result as
a best-effort guess.
"""
from __future__ import annotations

import re

TICKER_PATTERN = re.compile(r"\b([A-Z][A-Z0-9.]{0,5})\b", re.ASCII)

COMMON_WORDS = frozenset({
    "I", "A", "AN", "THE", "FOR", "AND", "OR", "TO", "IS", "ARE",
    "WAS", "BE", "IT", "DO", "IF", "OF", "ALL", "ANY", "NOW", "CEO",
})


def extract_ticker_requests(text: str) -> list[str]:
    """Return candidate tickers in first-seen order, without stoplist words or duplicates."""
    if not text:
        return []

    candidates = (re.sub(r"[^\w.]", "", match.strip()) for match in TICKER_PATTERN.findall(text))
    return list(dict.fromkeys(
        token for token in candidates if token and token not in COMMON_WORDS
    ))
