"""
FastAPI backend for the AI financial advisor.
Exposes the consultation pipeline, quote enrichment, the mock portfolio
ledger and the market index board to the web frontend.
"""
import os
import logging
from pathlib import Path
from typing import Optional

# Load .env before any LangGraph imports
env_path = Path(__file__).resolve().parent / ".env"
if env_path.exists():
    from dotenv import load_dotenv
    load_dotenv(dotenv_path=str(env_path), override=True)

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from finadvisor import __version__
from finadvisor.market import MarketData, MarketIndex, fetch_market_data
from finadvisor.market.constants import MARKET_INDICES, get_market_index
from finadvisor.orchestration import AdvisorResponse, get_financial_advice
from finadvisor.portfolio import Asset, AssetType, PortfolioSummary, build_asset, generate_portfolio_summary
from finadvisor.utils.llm_provider import current_provider, has_credentials
from finadvisor.utils.logging import quiet_third_party_loggers

logging.basicConfig(level=logging.INFO)
quiet_third_party_loggers()
logger = logging.getLogger(__name__)

MAX_QUOTE_TICKERS = 20

app = FastAPI(title="AI Financial Advisor API", version=__version__)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:5173", "http://localhost:3000", "http://127.0.0.1:5173", "http://localhost:8080"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class AdviceRequest(BaseModel):
    query: str


class NewAssetRequest(BaseModel):
    name: str
    type: AssetType
    value: float
    initial_investment: Optional[float] = None
    purchase_date: Optional[str] = None
    notes: Optional[str] = None


@app.post("/api/advice", response_model=AdvisorResponse)
def advice(req: AdviceRequest):
    """Run one consultation. Failures come back in ``error``, not as HTTP errors."""
    return get_financial_advice(req.query)


@app.get("/api/market-data", response_model=dict[str, MarketData])
def market_data(tickers: str = Query(..., description="Comma separated ticker symbols")):
    symbols = [t.strip().upper() for t in tickers.split(",") if t.strip()]
    if len(symbols) > MAX_QUOTE_TICKERS:
        raise HTTPException(status_code=400, detail=f"At most {MAX_QUOTE_TICKERS} tickers per request.")
    return fetch_market_data(symbols)


@app.get("/api/indices", response_model=list[MarketIndex])
def indices():
    return MARKET_INDICES


@app.get("/api/indices/{index_id}", response_model=MarketIndex)
def index_detail(index_id: str):
    index = get_market_index(index_id)
    if index is None:
        raise HTTPException(status_code=404, detail=f"Index {index_id} not found.")
    return index


@app.get("/api/portfolio/summary", response_model=PortfolioSummary)
def portfolio_summary():
    return generate_portfolio_summary()


@app.post("/api/portfolio/assets/preview", response_model=Asset)
def preview_asset(req: NewAssetRequest):
    """Validate a new asset and compute its returns without storing it."""
    try:
        return build_asset(**req.model_dump())
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))


@app.get("/api/health")
def health():
    return {
        "status": "ok",
        "version": __version__,
        "engine": "LangGraph",
        "llm_provider": current_provider(),
        "llm_configured": has_credentials(),
        "log_dir": os.getenv("ADVISOR_LOG_DIR", "logs"),
    }
