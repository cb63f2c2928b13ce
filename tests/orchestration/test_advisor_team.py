from unittest.mock import MagicMock, patch

import pytest

from finadvisor.orchestration.advisor_team import (
    MISSING_API_KEY,
    QUERY_TOO_SHORT,
    AdvisorResponse,
    AdvisorTeam,
    get_financial_advice,
)
from tests.fakes import FakeChatModel, analyst_reply

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


def _team_model(disclaimer, **failures):
    return FakeChatModel(
        responses={
            "Market Analyst": analyst_reply(
                initial="Apple trades near highs. Data needed for: AAPL",
                refined="AAPL sits at $189.50, close to its 52-week high.",
            ),
            "Risk Assessor": "Concentration risk and valuation risk.",
            "Planning Strategist": "Diversify across sectors with broad ETFs.",
            "Chief Advisor": f"Here is the team's view on Apple.\n\n{disclaimer}",
        },
        failures=failures,
    )


@patch("finadvisor.market.market_data.yf.Ticker")
def test_full_consultation_ends_with_disclaimer(mock_ticker, api_key, disclaimer):
    mock_ticker.return_value = MagicMock(info=AAPL_INFO)
    fake = _team_model(disclaimer)

    response = get_financial_advice("Should I invest in AAPL right now?", llm_factory=lambda: fake)

    assert response.error is None
    assert response.content.endswith(disclaimer)
    assert not response.content.startswith("[")
    mock_ticker.assert_called_once_with("AAPL")
    assert fake.roles_called == [
        "Market Analyst", "Market Analyst", "Risk Assessor", "Planning Strategist", "Chief Advisor",
    ]


@patch("finadvisor.market.market_data.yf.Ticker")
def test_refinement_receives_fetched_data(mock_ticker, api_key, disclaimer):
    mock_ticker.return_value = MagicMock(info=AAPL_INFO)
    fake = _team_model(disclaimer)

    get_financial_advice("Should I invest in AAPL right now?", llm_factory=lambda: fake)

    refine_prompt = fake.calls_for("Market Analyst")[1][-1].content
    assert "Fetched Market Data Context:" in refine_prompt
    assert "Apple Inc. (AAPL): Price=$189.50" in refine_prompt
    assert "Your Initial Thoughts:\nApple trades near highs. Data needed for: AAPL" in refine_prompt


def test_short_query_is_rejected_without_any_call(api_key):
    llm_factory = MagicMock()

    with patch("finadvisor.orchestration.advisor_team.AdvisorTeam") as mock_team:
        response = get_financial_advice("hi", llm_factory=llm_factory)

    assert response.content == ""
    assert response.error == QUERY_TOO_SHORT
    mock_team.assert_not_called()
    llm_factory.assert_not_called()


def test_missing_api_key_is_rejected_before_agents_exist():
    with patch("finadvisor.orchestration.advisor_team.FinancialAgent") as mock_agent:
        response = get_financial_advice("What is a bond ladder?")

    assert response.content == ""
    assert response.error == MISSING_API_KEY
    mock_agent.assert_not_called()
    mock_agent.from_persona.assert_not_called()


def test_stage_failure_aborts_remaining_stages(api_key, disclaimer):
    fake = _team_model(disclaimer, **{"Risk Assessor": RuntimeError("503 Service Unavailable")})
    fetcher = MagicMock(return_value={})

    response = get_financial_advice("What are the risks of holding AAPL?", llm_factory=lambda: fake, fetcher=fetcher)

    assert response.content == ""
    assert response.error.startswith("Sorry, an error occurred during the consultation:")
    assert "risk assessment" in response.error
    assert "503 Service Unavailable" in response.error
    assert fake.calls_for("Planning Strategist") == []
    assert fake.calls_for("Chief Advisor") == []


def test_unexpected_error_is_reported(api_key):
    with patch("finadvisor.orchestration.advisor_team.AdvisorTeam", side_effect=RuntimeError("graph exploded")):
        response = get_financial_advice("What is a bond ladder?")

    assert response.error == "An unexpected error occurred: graph exploded"


def test_teams_do_not_share_agents():
    first, second = AdvisorTeam(llm_factory=MagicMock()), AdvisorTeam(llm_factory=MagicMock())

    for key, agent in first.agents.items():
        assert agent is not second.agents[key]


def test_response_content_and_error_are_exclusive():
    assert AdvisorResponse(content="ok").error is None
    assert AdvisorResponse.failure("bad").content == ""


@pytest.mark.parametrize("kwargs", [{}, {"content": "ok", "error": "bad"}])
def test_response_rejects_neither_or_both(kwargs):
    with pytest.raises(ValueError):
        AdvisorResponse(**kwargs)
