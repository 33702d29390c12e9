import streamlit as st
from src.tabs.schema_generation import render_schema_generation_tab
from src.tabs.stream_status import render_stream_status_tab

# ---------- Config ----------
st.set_page_config(
    page_title="JSON Stream Faker",
    page_icon="🛰️",
    layout="wide",
    initial_sidebar_state="expanded",
)


def ensure_session_state():
    ss = st.session_state
    ss.setdefault("enhanced_schema", None)
    ss.setdefault("upload_message", None)
    ss.setdefault("generation_handle", None)
    ss.setdefault("stream_id", "")
    ss.setdefault("last_stats", None)


ensure_session_state()

# ==========================================
# Main UI Layout
# ==========================================

st.sidebar.title("JSON Stream Faker")
nav = st.sidebar.radio(
    " ",
    options=["Schema & Generation", "Stream Status"],
    index=0,
    format_func=lambda s: "🧬 " + s if s == "Schema & Generation" else "📈 " + s,
)

if nav == "Schema & Generation":
    render_schema_generation_tab()
else:
    render_stream_status_tab()
