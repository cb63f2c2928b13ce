import logging
import uuid
from datetime import date
from typing import Optional

import pandas as pd

from finadvisor.portfolio.mock_data import MOCK_ASSETS
from finadvisor.portfolio.models import ASSET_COLORS, ASSET_LABELS, Asset, AssetGroup, AssetType, PortfolioSummary

logger = logging.getLogger(__name__)


def _pct(part: float, whole: float) -> float:
    return (part / whole) * 100 if whole else 0.0


def build_asset(
    name: str,
    type: AssetType,
    value: float,
    initial_investment: Optional[float] = None,
    purchase_date: Optional[str] = None,
    notes: Optional[str] = None,
    asset_id: Optional[str] = None,
) -> Asset:
    """
    Create a ledger entry from user input. Returns are derived from value and
    initial investment (which defaults to the current value).
    """
    if not name or not name.strip() or value <= 0:
        raise ValueError("Please fill in all required fields: name, type and a positive value")

    initial = initial_investment or value
    returns = value - initial
    growth = "positive" if returns > 0 else "negative" if returns < 0 else "neutral"

    return Asset(
        id=asset_id or f"{type}-{uuid.uuid4().hex[:8]}",
        name=name.strip(),
        type=type,
        value=value,
        initial_investment=initial,
        returns=returns,
        returns_percentage=_pct(returns, initial),
        last_updated=date.today().isoformat(),
        growth=growth,
        purchase_date=purchase_date,
        notes=notes,
    )


def generate_portfolio_summary(assets: Optional[list[Asset]] = None) -> PortfolioSummary:
    """Group assets by type with totals, returns and allocation; largest allocation first."""
    assets = MOCK_ASSETS if assets is None else assets
    if not assets:
        return PortfolioSummary(
            total_value=0.0, total_investment=0.0, total_returns=0.0,
            total_returns_percentage=0.0, asset_groups=[],
        )

    df = pd.DataFrame([a.model_dump() for a in assets])

    total_value = float(df["value"].sum())
    total_investment = float(df["initial_investment"].sum())
    total_returns = total_value - total_investment

    grouped = df.groupby("type", sort=False).agg(
        group_value=("value", "sum"),
        group_investment=("initial_investment", "sum"),
    )

    asset_groups = []
    for asset_type, row in grouped.iterrows():
        group_value = float(row["group_value"])
        group_returns = group_value - float(row["group_investment"])
        asset_groups.append(AssetGroup(
            type=asset_type,
            label=ASSET_LABELS.get(asset_type, ASSET_LABELS["other"]),
            total_value=group_value,
            assets=[a for a in assets if a.type == asset_type],
            allocation=_pct(group_value, total_value),
            returns=group_returns,
            returns_percentage=_pct(group_returns, float(row["group_investment"])),
            color=ASSET_COLORS.get(asset_type, ASSET_COLORS["other"]),
        ))

    asset_groups.sort(key=lambda g: g.allocation, reverse=True)
    logger.debug("Portfolio summary: %d assets in %d groups", len(assets), len(asset_groups))

    return PortfolioSummary(
        total_value=total_value,
        total_investment=total_investment,
        total_returns=total_returns,
        total_returns_percentage=_pct(total_returns, total_investment),
        asset_groups=asset_groups,
    )
