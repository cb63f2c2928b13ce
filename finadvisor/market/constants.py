from finadvisor.market.models import MarketIndex

# Static snapshot shown on the market board
MARKET_INDICES: list[MarketIndex] = [
    MarketIndex(id="NIFTY50", name="NIFTY 50", value="22,397.20", change="-0.33%"),
    MarketIndex(id="SENSEX", name="SENSEX", value="73,828.91", change="-0.27%"),
    MarketIndex(id="BANKNIFTY", name="BANK NIFTY", value="48,060.40", change="+0.01%"),
    MarketIndex(id="USDINR", name="USD/INR", value="87.08", change="-0.27%"),
]


def get_market_index(index_id: str) -> MarketIndex | None:
    return next((idx for idx in MARKET_INDICES if idx.id == index_id.upper()), None)
