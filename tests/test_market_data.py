import random
from unittest.mock import MagicMock, patch

from finadvisor.market.market_data import (
    NO_DATA_RETRIEVED,
    fetch_market_data,
    generate_mock_data,
    summarize_market_data,
)
from finadvisor.market.models import MarketData

AAPL_INFO = {
    "shortName": "Apple Inc.",
    "regularMarketPrice": 189.5,
    "regularMarketPreviousClose": 188.0,
    "regularMarketDayLow": 187.0,
    "regularMarketDayHigh": 191.25,
    "fiftyTwoWeekLow": 164.08,
    "fiftyTwoWeekHigh": 199.62,
    "regularMarketVolume": 52345678,
}


def _ticker_factory(infos):
    """yf.Ticker replacement answering from a dict; an Exception value is raised."""
    def make(symbol):
        info = infos[symbol]
        if isinstance(info, Exception):
            raise info
        return MagicMock(info=info)
    return make


def _price(text):
    return float(text.lstrip("$"))


@patch("finadvisor.market.market_data.yf.Ticker")
def test_empty_request_makes_no_lookup(mock_ticker):
    assert fetch_market_data([]) == {}
    mock_ticker.assert_not_called()


@patch("finadvisor.market.market_data.yf.Ticker")
def test_live_quote_is_formatted(mock_ticker):
    mock_ticker.side_effect = _ticker_factory({"AAPL": AAPL_INFO})

    data = fetch_market_data(["AAPL"])["AAPL"]

    assert data.name == "Apple Inc."
    assert data.price == "$189.50"
    assert data.previous_close == "$188.00"
    assert data.day_range == "$187.00 - $191.25"
    assert data.week_range == "$164.08 - $199.62"
    assert data.volume == "52,345,678"
    assert data.synthetic is False


@patch("finadvisor.market.market_data.yf.Ticker")
def test_missing_ranges_render_as_na(mock_ticker):
    mock_ticker.side_effect = _ticker_factory({"XYZ": {"regularMarketPrice": 10, "longName": "Xyz Corp"}})

    data = fetch_market_data(["XYZ"])["XYZ"]

    assert data.name == "Xyz Corp"
    assert data.day_range == "N/A"
    assert data.week_range == "N/A"
    assert data.volume == "N/A"


@patch("finadvisor.market.market_data.yf.Ticker")
def test_quote_without_price_becomes_synthetic(mock_ticker):
    mock_ticker.side_effect = _ticker_factory({"ZZZZ": {"shortName": "Delisted"}})

    result = fetch_market_data(["ZZZZ"])

    assert list(result) == ["ZZZZ"]
    assert result["ZZZZ"].ticker == "ZZZZ"
    assert result["ZZZZ"].name == "ZZZZ (No Real-time Data)"
    assert result["ZZZZ"].synthetic is True


@patch("finadvisor.market.market_data.yf.Ticker")
def test_fetch_error_only_affects_that_ticker(mock_ticker):
    mock_ticker.side_effect = _ticker_factory({
        "AAPL": AAPL_INFO,
        "BAD": ConnectionError("network unreachable"),
    })

    result = fetch_market_data(["AAPL", "BAD"])

    assert list(result) == ["AAPL", "BAD"]
    assert result["AAPL"].synthetic is False
    assert result["BAD"].name == "BAD (Fetch Error)"
    assert result["BAD"].synthetic is True


@patch("finadvisor.market.market_data.yf.Ticker")
def test_invalid_ticker_format_is_not_looked_up(mock_ticker):
    result = fetch_market_data(["BRK/B"])

    assert result["BRK/B"].name == "BRK/B (Invalid Ticker Format)"
    mock_ticker.assert_not_called()


@patch("finadvisor.market.market_data.yf.Ticker")
def test_duplicate_tickers_resolved_once(mock_ticker):
    mock_ticker.side_effect = _ticker_factory({"AAPL": AAPL_INFO})

    result = fetch_market_data(["AAPL", "AAPL"])

    assert list(result) == ["AAPL"]
    assert mock_ticker.call_count == 1


@patch("finadvisor.market.market_data.yf.Ticker")
def test_live_quotes_are_cached(mock_ticker):
    mock_ticker.side_effect = _ticker_factory({"AAPL": AAPL_INFO})

    first = fetch_market_data(["AAPL"])
    second = fetch_market_data(["AAPL"])

    assert first == second
    assert mock_ticker.call_count == 1


@patch("finadvisor.market.market_data.yf.Ticker")
def test_synthetic_quotes_are_not_cached(mock_ticker):
    mock_ticker.side_effect = _ticker_factory({"ZZZZ": {}})

    fetch_market_data(["ZZZZ"])
    fetch_market_data(["ZZZZ"])

    assert mock_ticker.call_count == 2


def test_mock_data_is_internally_consistent():
    data = generate_mock_data("TSLA", "Mock Data", rng=random.Random(42))

    price = _price(data.price)
    day_low, day_high = (_price(p) for p in data.day_range.split(" - "))
    week_low, week_high = (_price(p) for p in data.week_range.split(" - "))

    assert 100 <= price < 1000
    assert day_low < price < day_high
    assert week_low < day_low and day_high < week_high
    assert data.name == "TSLA (Mock Data)"
    assert data.synthetic is True


def test_summary_of_empty_data():
    assert summarize_market_data({}) == NO_DATA_RETRIEVED


def test_summary_lists_each_ticker():
    data = MarketData(
        ticker="AAPL", name="Apple Inc.", price="$189.50", previous_close="$188.00",
        day_range="$187.00 - $191.25", week_range="$164.08 - $199.62", volume="52,345,678",
    )

    summary = summarize_market_data({"AAPL": data})

    assert summary == (
        "Fetched Market Data Context:\n"
        "- Apple Inc. (AAPL): Price=$189.50, Day Range=$187.00 - $191.25, "
        "52wk Range=$164.08 - $199.62, Vol=52,345,678\n"
    )


@patch("finadvisor.market.market_data.yf.Ticker")
def test_nan_volume_keeps_live_quote(mock_ticker):
    mock_ticker.side_effect = _ticker_factory({"XX": {"regularMarketPrice": 10.0, "regularMarketVolume": float("nan")}})

    data = fetch_market_data(["XX"])["XX"]

    assert data.synthetic is False
    assert data.price == "$10.00"
    assert data.volume == "N/A"
