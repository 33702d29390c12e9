from typing import Any, Dict, Optional

import requests

OUTPUT_TYPES = ["console", "file", "kafka"]


def build_output_config(
    output_type: str,
    file_path: str = "",
    bootstrap_servers: str = "",
    topic: str = "",
    batch_size: Optional[int] = None,
    interval_ms: Optional[int] = None,
) -> Dict[str, Any]:
    """Builds the outputConfig payload for the selected sink, dropping fields of other sinks."""
    if output_type == "console":
        return {"type": "console"}

    if output_type == "file":
        if not file_path.strip():
            raise ValueError("A file path is required for the file output.")
        return {"type": "file", "filePath": file_path.strip()}

    if output_type == "kafka":
        if not bootstrap_servers.strip() or not topic.strip():
            raise ValueError("Bootstrap servers and topic are required for the Kafka output.")
        kafka: Dict[str, Any] = {
            "bootstrapServers": bootstrap_servers.strip(),
            "topic": topic.strip(),
        }
        if batch_size:
            kafka["batchSize"] = int(batch_size)
        if interval_ms:
            kafka["intervalMs"] = int(interval_ms)
        return {"type": "kafka", "kafka": kafka}

    raise ValueError(f"Unsupported output type: {output_type}")


def build_start_payload(
    enhanced_schema: Dict[str, Any],
    output_config: Dict[str, Any],
    max_messages: Optional[int] = None,
    max_time_in_seconds: Optional[float] = None,
) -> Dict[str, Any]:
    payload: Dict[str, Any] = {"enhancedSchema": enhanced_schema, "outputConfig": output_config}
    # 0 in the form means "no limit"
    if max_messages:
        payload["maxMessages"] = int(max_messages)
    if max_time_in_seconds:
        payload["maxTimeInSeconds"] = max_time_in_seconds
    return payload


def describe_http_error(error: requests.HTTPError) -> str:
    """Backend errors carry {"message": ...}; fall back to the raw body."""
    response = error.response
    try:
        payload = response.json()
    except ValueError:
        payload = None
    message = payload.get("message") if isinstance(payload, dict) else None
    return f"Backend returned {response.status_code}: {message or response.text[:600]}"
