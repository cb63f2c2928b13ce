import pytest

from finadvisor.portfolio import build_asset, generate_portfolio_summary
from finadvisor.portfolio.mock_data import MOCK_ASSETS


def test_mock_portfolio_totals():
    summary = generate_portfolio_summary()

    assert summary.total_value == 7_000_000
    assert summary.total_investment == 5_780_000
    assert summary.total_returns == 1_220_000
    assert summary.total_returns_percentage == pytest.approx(1_220_000 / 5_780_000 * 100)


def test_groups_sorted_by_allocation():
    groups = generate_portfolio_summary().asset_groups

    allocations = [g.allocation for g in groups]
    assert allocations == sorted(allocations, reverse=True)
    assert groups[0].type == "realEstate"
    assert groups[0].label == "Real Estate"
    assert sum(allocations) == pytest.approx(100)
    assert sum(len(g.assets) for g in groups) == len(MOCK_ASSETS)


def test_group_returns():
    stocks = next(g for g in generate_portfolio_summary().asset_groups if g.type == "stock")

    assert stocks.total_value == 550_000
    assert stocks.returns == 70_000
    assert stocks.returns_percentage == pytest.approx(70_000 / 480_000 * 100)
    assert stocks.color == "#8B5CF6"


def test_empty_portfolio():
    summary = generate_portfolio_summary([])

    assert summary.total_value == 0
    assert summary.total_returns_percentage == 0
    assert summary.asset_groups == []


def test_build_asset_computes_returns():
    asset = build_asset("Tata Motors", "stock", 120_000, initial_investment=100_000)

    assert asset.returns == 20_000
    assert asset.returns_percentage == pytest.approx(20)
    assert asset.growth == "positive"
    assert asset.id.startswith("stock-")


def test_build_asset_without_initial_investment_is_neutral():
    asset = build_asset("Bitcoin", "crypto", 50_000)

    assert asset.initial_investment == 50_000
    assert asset.returns == 0
    assert asset.growth == "neutral"


def test_build_asset_loss():
    assert build_asset("Paytm", "stock", 40_000, initial_investment=80_000).growth == "negative"


@pytest.mark.parametrize("name, value", [("", 1000), ("   ", 1000), ("Gold ETF", 0), ("Gold ETF", -5)])
def test_build_asset_rejects_invalid_input(name, value):
    with pytest.raises(ValueError):
        build_asset(name, "gold", value)


def test_user_assets_are_summarised():
    assets = [
        build_asset("Gold ETF", "gold", 30_000, initial_investment=25_000),
        build_asset("Nifty Index Fund", "mutualFund", 70_000, initial_investment=60_000),
    ]

    summary = generate_portfolio_summary(assets)

    assert [g.type for g in summary.asset_groups] == ["mutualFund", "gold"]
    assert summary.asset_groups[0].allocation == pytest.approx(70)
