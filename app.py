import os
import logging
from dotenv import load_dotenv

# 1. Load environment variables BEFORE importing the advisor pipeline
env_path = os.path.join(os.path.dirname(os.path.abspath(__file__)), '.env')
if os.path.exists(env_path):
    load_dotenv(dotenv_path=env_path, override=True)
else:
    load_dotenv(override=True)

import pandas as pd
import plotly.express as px
import streamlit as st

from finadvisor.market.constants import MARKET_INDICES
from finadvisor.orchestration import get_financial_advice
from finadvisor.portfolio import generate_portfolio_summary
from finadvisor.utils.llm_provider import has_credentials
from finadvisor.utils.logging import quiet_third_party_loggers

# Configure logging
logging.basicConfig(level=logging.INFO)
quiet_third_party_loggers()
logger = logging.getLogger(__name__)

# 2. Page Configuration
st.set_page_config(
    page_title="AI Financial Advisor",
    page_icon="💹",
    layout="wide"
)

# 3. Custom CSS
st.markdown("""
<style>
    #MainMenu {visibility: hidden;}
    footer {visibility: hidden;}

    [data-testid="stMetric"] {
        background-color: rgba(255, 255, 255, 0.05);
        padding: 20px;
        border-radius: 12px;
        border: 1px solid rgba(255, 255, 255, 0.1);
    }
</style>
""", unsafe_allow_html=True)

# 4. Sidebar
with st.sidebar:
    st.title("💹 AI Financial Advisor")
    st.markdown("""
    **Multi-Agent Consultation**
    A Market Analyst, Risk Assessor, Planning Strategist and Chief Advisor work through your question in turn.
    """)
    st.markdown("---")
    if has_credentials():
        st.success("LLM configured")
    else:
        st.warning("No API key found. Set GOOGLE_API_KEY in your .env file.")
    if st.button("Clear Conversation", width="stretch"):
        st.session_state.messages = []
    st.markdown("---")
    st.caption("Engine: LangGraph + Gemini 2.0 Flash")

# 5. Header
st.title("📈 Investment Dashboard")

if "messages" not in st.session_state:
    st.session_state.messages = []

tab_advisor, tab_portfolio, tab_market = st.tabs(["🤖 AI Guidance", "💼 Portfolio", "🌐 Market Indices"])

with tab_advisor:
    st.subheader("Ask the Advisor Team")
    for message in st.session_state.messages:
        with st.chat_message(message["role"]):
            st.markdown(message["content"])

    with st.form("advice_form", clear_on_submit=True):
        query = st.text_area("Your question", placeholder="Should I invest in AAPL right now?")
        submitted = st.form_submit_button("Ask", type="primary")

    if submitted and query.strip():
        st.session_state.messages.append({"role": "user", "content": query.strip()})
        with st.status("Consulting the advisor team...", expanded=True) as status:
            st.write("📊 Market Analyst reviewing the market...")
            st.write("📈 Fetching requested market data...")
            st.write("⚠️ Risk Assessor identifying risks...")
            st.write("🧭 Planning Strategist outlining strategies...")
            st.write("🧠 Chief Advisor synthesizing the answer...")

            response = get_financial_advice(query)
            status.update(label="Consultation complete", state="complete", expanded=False)

        if response.error:
            logger.error(f"Consultation failed: {response.error}")
            st.error(response.error)
        else:
            st.session_state.messages.append({"role": "assistant", "content": response.content})
            st.rerun()

with tab_portfolio:
    summary = generate_portfolio_summary()

    p_col1, p_col2, p_col3 = st.columns(3)
    p_col1.metric("Total Value", f"₹{summary.total_value:,.0f}")
    p_col2.metric("Total Investment", f"₹{summary.total_investment:,.0f}")
    p_col3.metric(
        "Total Returns",
        f"₹{summary.total_returns:,.0f}",
        delta=f"{summary.total_returns_percentage:.2f}%",
    )

    groups_df = pd.DataFrame([
        {
            "Asset Class": g.label,
            "Value": g.total_value,
            "Allocation %": round(g.allocation, 2),
            "Returns": g.returns,
            "Returns %": round(g.returns_percentage, 2),
        }
        for g in summary.asset_groups
    ])

    if not groups_df.empty:
        fig = px.pie(
            groups_df,
            names="Asset Class",
            values="Value",
            title="Asset Allocation",
            color="Asset Class",
            color_discrete_map={g.label: g.color for g in summary.asset_groups},
        )
        st.plotly_chart(fig, width="stretch")
        st.dataframe(groups_df, width="stretch")

    for group in summary.asset_groups:
        with st.expander(f"{group.label} | ₹{group.total_value:,.0f} ({group.allocation:.1f}%)"):
            st.dataframe(
                pd.DataFrame([a.model_dump(include={"name", "value", "initial_investment", "returns_percentage", "growth"})
                              for a in group.assets]),
                width="stretch",
            )

with tab_market:
    st.subheader("Market Indices")
    columns = st.columns(len(MARKET_INDICES))
    for col, index in zip(columns, MARKET_INDICES):
        col.metric(index.name, index.value, delta=index.change)
