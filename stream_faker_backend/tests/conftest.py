from typing import Callable, Optional

import httpx
import pytest
from fastapi.testclient import TestClient

from dependencies import get_generator_client, get_llm_client, get_observability
from fakes import FakeObservability, GeneratorStub
from main import app


@pytest.fixture
def generator_stub():
    def _build(handler: Callable[[httpx.Request], httpx.Response]) -> GeneratorStub:
        return GeneratorStub(handler)

    return _build


@pytest.fixture
def api():
    """TestClient whose collaborators are swapped per test via `api.use(...)`."""

    class Api:
        def __init__(self):
            self.client = TestClient(app)

        def use(self, llm_client=None, generator: Optional[GeneratorStub] = None):
            app.dependency_overrides[get_llm_client] = lambda: llm_client
            if generator is not None:
                app.dependency_overrides[get_generator_client] = lambda: generator.client
            app.dependency_overrides[get_observability] = lambda: FakeObservability()
            return self.client

    yield Api()
    app.dependency_overrides.clear()
