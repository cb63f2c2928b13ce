"""
Pydantic models for the portfolio ledger and its grouped summary.
"""
from __future__ import annotations

from typing import Literal, Optional
from pydantic import BaseModel

AssetType = Literal["stock", "mutualFund", "pf", "fd", "gold", "realEstate", "crypto", "other"]

ASSET_LABELS: dict[str, str] = {
    "stock": "Stocks",
    "mutualFund": "Mutual Funds",
    "pf": "Provident Funds",
    "fd": "Fixed Deposits",
    "gold": "Gold",
    "realEstate": "Real Estate",
    "crypto": "Cryptocurrency",
    "other": "Other Assets",
}

ASSET_COLORS: dict[str, str] = {
    "stock": "#8B5CF6",
    "mutualFund": "#10B981",
    "pf": "#3B82F6",
    "fd": "#F59E0B",
    "gold": "#F97316",
    "realEstate": "#6366F1",
    "crypto": "#EC4899",
    "other": "#6B7280",
}


class Asset(BaseModel):
    id: str
    name: str
    type: AssetType
    value: float                # current value
    initial_investment: float
    returns: float
    returns_percentage: float
    last_updated: str           # ISO date
    growth: Literal["positive", "negative", "neutral"]
    purchase_date: Optional[str] = None
    notes: Optional[str] = None


class AssetGroup(BaseModel):
    type: AssetType
    label: str
    total_value: float
    assets: list[Asset]
    allocation: float           # % of portfolio value
    returns: float
    returns_percentage: float
    color: str


class PortfolioSummary(BaseModel):
    total_value: float
    total_investment: float
    total_returns: float
    total_returns_percentage: float
    asset_groups: list[AssetGroup]
