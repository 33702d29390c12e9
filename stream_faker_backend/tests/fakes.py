from typing import Callable, List, Optional

import httpx

from generator_service.client import GeneratorServiceClient

GENERATOR_BASE_URL = "http://generator.test"


class FakeLLMClient:
    """Stands in for LLMClient; records every prompt it receives."""

    model_name = "fake-model"

    def __init__(self, completion: Optional[str] = None, error: Optional[Exception] = None):
        self.completion = completion
        self.error = error
        self.prompts: List[str] = []

    async def complete(self, prompt: str) -> Optional[str]:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.completion


class FakeObservability:
    def check_health(self) -> dict:
        return {"status": "disabled", "message": "Langfuse not configured (missing credentials)"}


class GeneratorStub:
    """Generator service client backed by httpx.MockTransport."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.requests: List[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        self.client = GeneratorServiceClient(
            base_url=GENERATOR_BASE_URL,
            http_client=httpx.AsyncClient(transport=httpx.MockTransport(_record)),
        )
