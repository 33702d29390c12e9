import os
import json
import logging
from typing import Any, Dict, Optional, Union

import httpx
from pydantic import ValidationError

from config import CONFIG
from errors import InvalidInputError, UpstreamCallError
from generator_service.models import GenerationHandle, GenerationRequest, OutputConfig

logger = logging.getLogger(__name__)


class GeneratorServiceClient:
    """
    HTTP client for the external data generator service.

    Every method issues exactly one request and relays the service's JSON
    body unchanged; failures are translated into `UpstreamCallError`
    carrying the upstream status when there is one.
    """

    def __init__(self, base_url: str, http_client: httpx.AsyncClient):
        self.base_url = base_url.rstrip("/")
        self.http_client = http_client

    @classmethod
    def from_config(cls) -> "GeneratorServiceClient":
        service_config = CONFIG["generator_service"]
        base_url = os.getenv("GENERATOR_SERVICE_URL") or service_config["base_url"]

        http_client = httpx.AsyncClient(
            timeout=float(service_config.get("timeout_seconds", 5.0)),
            follow_redirects=True,
            max_redirects=int(service_config.get("max_redirects", 5)),
            headers={"Content-Type": "application/json"},
        )
        logger.info(f"Generator service client initialized. Base URL: {base_url}")
        return cls(base_url=base_url, http_client=http_client)

    async def aclose(self):
        await self.http_client.aclose()

    async def start_generation(
        self,
        enhanced_schema: Optional[Dict[str, Any]],
        output_config: Optional[OutputConfig],
        max_messages: Optional[int] = None,
        max_time_in_seconds: Optional[Union[int, float]] = None,
    ) -> GenerationHandle:
        if enhanced_schema is None or output_config is None:
            raise InvalidInputError("Enhanced schema and output configuration are required.")

        # The service expects the schema as a string field, not a nested object
        try:
            request = GenerationRequest(
                schema_content=json.dumps(enhanced_schema),
                output_config=output_config,
                max_messages=max_messages,
                max_time_in_seconds=max_time_in_seconds,
            )
        except ValidationError as e:
            logger.error(f"Invalid generation request: {e}")
            raise InvalidInputError("Invalid output configuration or generation limits.") from e

        endpoint = f"{self.base_url}/streams"
        logger.info(
            f"Requesting data generation start. Endpoint: {endpoint}, "
            f"Schema title: {enhanced_schema.get('title', 'Untitled Schema')}, "
            f"Output: {request.output_config.type}"
        )
        body = await self._send("POST", endpoint, "start data generation", json=request.to_payload())
        logger.info(f"Generator service responded for stream creation: {body}")
        return body

    async def stop_generation(self, stream_id: str) -> Dict[str, Any]:
        if not stream_id:
            raise InvalidInputError("Stream id is required.")

        endpoint = f"{self.base_url}/streams/{stream_id}"
        logger.info(f"Requesting stop of stream {stream_id}")
        return await self._send("DELETE", endpoint, "stop data generation")

    async def get_stream_stats(self, stream_id: str) -> Dict[str, Any]:
        if not stream_id:
            raise InvalidInputError("Stream id is required.")

        endpoint = f"{self.base_url}/streams/{stream_id}/stats"
        return await self._send("GET", endpoint, "fetch stream stats")

    async def ping(self) -> bool:
        try:
            response = await self.http_client.get(f"{self.base_url}/")
            return response.is_success
        except httpx.HTTPError as e:
            logger.warning(f"Generator service unreachable: {e}")
            return False

    async def _send(self, method: str, url: str, action: str, **kwargs) -> Dict[str, Any]:
        try:
            response = await self.http_client.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            logger.error(f"Error trying to {action} via generator service: {e}", exc_info=True)
            raise UpstreamCallError(f"Failed to {action} with generator service: service unreachable.") from e

        if not response.is_success:
            upstream_message = _extract_message(response)
            logger.error(
                f"Generator service returned {response.status_code} trying to {action}: "
                f"{upstream_message or response.text[:600]}"
            )
            raise UpstreamCallError(
                f"Failed to {action} with generator service: {upstream_message or response.reason_phrase}",
                status_code=response.status_code,
            )

        if not response.content:
            return {}
        try:
            return response.json()
        except ValueError as e:
            logger.error(f"Generator service returned a non-JSON body trying to {action}: {response.text[:600]}")
            raise UpstreamCallError(f"Failed to {action} with generator service: invalid response body.") from e


def _extract_message(response: httpx.Response) -> Optional[str]:
    try:
        payload = response.json()
    except ValueError:
        return None
    if isinstance(payload, dict) and payload.get("message"):
        return str(payload["message"])
    return None
