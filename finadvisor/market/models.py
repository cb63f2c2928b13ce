"""
Pydantic models for quote snapshots and the market index board.
"""
from __future__ import annotations

from pydantic import BaseModel


class MarketData(BaseModel):
    ticker: str
    name: str
    price: str              # "$123.45"
    previous_close: str
    day_range: str          # "$low - $high" or "N/A"
    week_range: str         # 52-week "$low - $high" or "N/A"
    volume: str             # "1,234,567" or "N/A"
    synthetic: bool = False  # placeholder generated when no live quote was usable


class MarketIndex(BaseModel):
    id: str
    name: str
    value: str
    change: str
