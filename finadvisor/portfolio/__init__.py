"""
portfolio: mock ledger, new-asset construction and grouped summaries.
"""

from .models import Asset, AssetGroup, AssetType, PortfolioSummary
from .summary import build_asset, generate_portfolio_summary

__all__ = ["Asset", "AssetGroup", "AssetType", "PortfolioSummary", "build_asset", "generate_portfolio_summary"]
