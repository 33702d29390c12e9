import pytest
import requests

from src.utils import build_output_config, build_start_payload, describe_http_error


def test_console_output_ignores_other_sink_fields():
    assert build_output_config("console", file_path="/tmp/x", topic="t") == {"type": "console"}


def test_file_output_requires_path():
    assert build_output_config("file", file_path=" /tmp/out.jsonl ") == {"type": "file", "filePath": "/tmp/out.jsonl"}
    with pytest.raises(ValueError):
        build_output_config("file", file_path="  ")


def test_kafka_output_drops_unset_tuning():
    config = build_output_config("kafka", bootstrap_servers="kafka:9092", topic="events", batch_size=0, interval_ms=250)

    assert config == {"type": "kafka", "kafka": {"bootstrapServers": "kafka:9092", "topic": "events", "intervalMs": 250}}


def test_kafka_output_requires_servers_and_topic():
    with pytest.raises(ValueError):
        build_output_config("kafka", bootstrap_servers="kafka:9092")


def test_unknown_output_type():
    with pytest.raises(ValueError):
        build_output_config("s3")


def test_start_payload_treats_zero_limits_as_unbounded():
    payload = build_start_payload({"type": "object"}, {"type": "console"}, max_messages=0, max_time_in_seconds=0.0)

    assert payload == {"enhancedSchema": {"type": "object"}, "outputConfig": {"type": "console"}}


def test_start_payload_with_limits():
    payload = build_start_payload({"type": "object"}, {"type": "console"}, max_messages=100, max_time_in_seconds=12.5)

    assert payload["maxMessages"] == 100
    assert payload["maxTimeInSeconds"] == 12.5


def test_describe_http_error_prefers_backend_message():
    response = requests.Response()
    response.status_code = 503
    response._content = b'{"message": "Failed to start data generation with generator service: busy"}'

    message = describe_http_error(requests.HTTPError(response=response))

    assert message == "Backend returned 503: Failed to start data generation with generator service: busy"


def test_describe_http_error_falls_back_to_body():
    response = requests.Response()
    response.status_code = 502
    response._content = b"Bad Gateway"

    assert describe_http_error(requests.HTTPError(response=response)) == "Backend returned 502: Bad Gateway"


def test_describe_http_error_with_non_object_json_body():
    response = requests.Response()
    response.status_code = 500
    response._content = b'["unexpected"]'

    assert describe_http_error(requests.HTTPError(response=response)) == 'Backend returned 500: ["unexpected"]'
