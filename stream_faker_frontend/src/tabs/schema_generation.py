import json

import requests
import streamlit as st
from src.config import START_GENERATION_ENDPOINT, UPLOAD_ENDPOINT
from src.utils import OUTPUT_TYPES, build_output_config, build_start_payload, describe_http_error


def _render_upload_section():
    st.markdown("### 1. Upload & Enhance Schema")
    schema_file = st.file_uploader("Upload JSON Schema", type=["json"])

    if st.button("Upload and Enhance", type="primary", disabled=schema_file is None):
        with st.status("Uploading and processing schema…", state="running", expanded=True) as status:
            try:
                files = {"schemaFile": (schema_file.name, schema_file.getvalue(), "application/json")}
                resp = requests.post(UPLOAD_ENDPOINT, files=files, timeout=120)
                resp.raise_for_status()
                result = resp.json()

                st.session_state.upload_message = result.get("message")
                st.session_state.enhanced_schema = result.get("enhancedSchema")
                st.session_state.generation_handle = None

                if st.session_state.enhanced_schema is None:
                    status.update(label="No schema returned", state="error")
                    st.error("Schema processed, but no enhanced schema was returned.")
                else:
                    status.update(label="Done", state="complete", expanded=False)
                    st.rerun()

            except requests.HTTPError as e:
                st.session_state.enhanced_schema = None
                status.update(label=f"Backend error {e.response.status_code}", state="error")
                st.error(describe_http_error(e))
            except Exception as e:
                st.session_state.enhanced_schema = None
                status.update(label="Request failed", state="error")
                st.error(f"Request failed: {e}")

    if st.session_state.upload_message:
        st.info(st.session_state.upload_message)
    if st.session_state.enhanced_schema is not None:
        with st.expander("Enhanced Schema", expanded=True):
            st.json(st.session_state.enhanced_schema)
        st.download_button(
            label="⬇️ Download Enhanced Schema",
            data=json.dumps(st.session_state.enhanced_schema, indent=2),
            file_name="enhanced_schema.json",
            mime="application/json",
        )


def _render_generation_section():
    st.markdown("### 2. Configure Output & Start Generation")

    output_type = st.radio("Output", options=OUTPUT_TYPES, horizontal=True)

    file_path = ""
    bootstrap_servers = ""
    topic = ""
    batch_size = None
    interval_ms = None

    if output_type == "file":
        file_path = st.text_input("File path", value="/tmp/stream-faker-output.jsonl")
    elif output_type == "kafka":
        colk1, colk2 = st.columns(2)
        with colk1:
            bootstrap_servers = st.text_input("Bootstrap servers", value="localhost:9092")
            batch_size = st.number_input("Batch size (0 = service default)", min_value=0, value=0, step=1)
        with colk2:
            topic = st.text_input("Topic", value="mock-data")
            interval_ms = st.number_input("Interval ms (0 = service default)", min_value=0, value=0, step=100)

    st.markdown("#### Limits")
    coll1, coll2 = st.columns(2)
    with coll1:
        max_messages = st.number_input("Max messages (0 = unbounded)", min_value=0, value=100, step=1)
    with coll2:
        max_time = st.number_input("Max time in seconds (0 = unbounded)", min_value=0.0, value=0.0, step=1.0)

    if st.button("Start Generation", type="primary", use_container_width=True):
        try:
            output_config = build_output_config(
                output_type,
                file_path=file_path,
                bootstrap_servers=bootstrap_servers,
                topic=topic,
                batch_size=batch_size,
                interval_ms=interval_ms,
            )
        except ValueError as e:
            st.error(str(e))
            return

        payload = build_start_payload(
            st.session_state.enhanced_schema, output_config, max_messages, max_time
        )
        with st.spinner("Starting generation..."):
            try:
                resp = requests.post(START_GENERATION_ENDPOINT, json=payload, timeout=60)
                resp.raise_for_status()
                handle = resp.json()
                st.session_state.generation_handle = handle
                if handle.get("streamId"):
                    st.session_state.stream_id = handle["streamId"]
                st.toast(handle.get("message") or "Generation started", icon="🚀")
            except requests.HTTPError as e:
                st.error(describe_http_error(e))
            except requests.exceptions.ConnectionError:
                st.error("Could not connect to backend.")
            except Exception as e:
                st.error(f"Failed to start generation: {e}")

    handle = st.session_state.generation_handle
    if handle:
        status = handle.get("status")
        if status == "ERROR":
            st.error(f"Generator reported an error: {handle.get('message', 'unknown error')}")
        else:
            st.success(f"Stream {handle.get('streamId')}: {status}")


def render_schema_generation_tab():
    _render_upload_section()

    if st.session_state.enhanced_schema is not None:
        st.markdown("---")
        _render_generation_section()
