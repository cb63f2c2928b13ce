"""
Hardcoded mock ledger used when no user assets are supplied.
"""
from finadvisor.portfolio.models import Asset

MOCK_ASSETS: list[Asset] = [
    # Stocks
    Asset(id="stock-1", name="Reliance Industries", type="stock", value=250000, initial_investment=200000,
          returns=50000, returns_percentage=25, last_updated="2023-08-15", growth="positive"),
    Asset(id="stock-2", name="HDFC Bank", type="stock", value=180000, initial_investment=150000,
          returns=30000, returns_percentage=20, last_updated="2023-08-15", growth="positive"),
    Asset(id="stock-3", name="Infosys Ltd", type="stock", value=120000, initial_investment=130000,
          returns=-10000, returns_percentage=-7.69, last_updated="2023-08-15", growth="negative"),
    # Mutual Funds
    Asset(id="mf-1", name="Axis Bluechip Fund", type="mutualFund", value=300000, initial_investment=250000,
          returns=50000, returns_percentage=20, last_updated="2023-08-14", growth="positive"),
    Asset(id="mf-2", name="SBI Small Cap Fund", type="mutualFund", value=150000, initial_investment=100000,
          returns=50000, returns_percentage=50, last_updated="2023-08-14", growth="positive"),
    # Provident Fund
    Asset(id="pf-1", name="Employee Provident Fund", type="pf", value=500000, initial_investment=450000,
          returns=50000, returns_percentage=11.11, last_updated="2023-07-31", growth="positive"),
    # Fixed Deposits
    Asset(id="fd-1", name="HDFC Bank FD", type="fd", value=200000, initial_investment=200000,
          returns=0, returns_percentage=0, last_updated="2023-08-01", growth="neutral"),
    Asset(id="fd-2", name="SBI Tax Saver FD", type="fd", value=150000, initial_investment=150000,
          returns=0, returns_percentage=0, last_updated="2023-08-01", growth="neutral"),
    # Gold
    Asset(id="gold-1", name="Digital Gold", type="gold", value=100000, initial_investment=80000,
          returns=20000, returns_percentage=25, last_updated="2023-08-10", growth="positive"),
    # Real Estate
    Asset(id="re-1", name="Residential Property", type="realEstate", value=5000000, initial_investment=4000000,
          returns=1000000, returns_percentage=25, last_updated="2023-06-30", growth="positive"),
    # Cryptocurrency
    Asset(id="crypto-1", name="Bitcoin", type="crypto", value=50000, initial_investment=70000,
          returns=-20000, returns_percentage=-28.57, last_updated="2023-08-15", growth="negative"),
]
