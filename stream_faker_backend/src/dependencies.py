from typing import Annotated, Optional

from fastapi import Depends, Request

from enhancement_engine.llm_client import LLMClient
from generator_service.client import GeneratorServiceClient
from utils.observability import ObservabilityManager


def get_llm_client(request: Request) -> Optional[LLMClient]:
    return request.app.state.llm_client


def get_generator_client(request: Request) -> GeneratorServiceClient:
    return request.app.state.generator_client


def get_observability(request: Request) -> ObservabilityManager:
    return request.app.state.observability


LLMClientDep = Annotated[Optional[LLMClient], Depends(get_llm_client)]
GeneratorClientDep = Annotated[GeneratorServiceClient, Depends(get_generator_client)]
ObservabilityDep = Annotated[ObservabilityManager, Depends(get_observability)]
