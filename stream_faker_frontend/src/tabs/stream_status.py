import requests
import streamlit as st
from src.config import STOP_STREAM_ENDPOINT, STREAM_STATS_ENDPOINT
from src.utils import describe_http_error


def render_stream_status_tab():
    st.markdown("### 📈 Stream Status")

    stream_id = st.text_input("Stream ID", key="stream_id")
    if not stream_id:
        st.warning("⚠️ No stream started yet! Start a generation first or paste a stream ID.")
        return

    c1, c2 = st.columns(2)
    if c1.button("🔄 Refresh Stats", use_container_width=True):
        try:
            resp = requests.get(STREAM_STATS_ENDPOINT.format(stream_id=stream_id), timeout=30)
            resp.raise_for_status()
            st.session_state.last_stats = resp.json()
        except requests.HTTPError as e:
            st.error(describe_http_error(e))
        except Exception as e:
            st.error(f"Failed to fetch stats: {e}")

    if c2.button("⏹️ Stop Stream", use_container_width=True):
        try:
            resp = requests.post(STOP_STREAM_ENDPOINT.format(stream_id=stream_id), timeout=30)
            resp.raise_for_status()
            st.toast(f"Stop requested for stream {stream_id}", icon="⏹️")
        except requests.HTTPError as e:
            st.error(describe_http_error(e))
        except Exception as e:
            st.error(f"Failed to stop stream: {e}")

    if st.session_state.last_stats is not None:
        st.json(st.session_state.last_stats)
