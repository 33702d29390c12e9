import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from enhancement_engine.llm_client import LLMClient
from generator_service.client import GeneratorServiceClient
from utils.observability import ObservabilityManager

logger = logging.getLogger(__name__)


def get_llm_client():
    logger.info("Initializing LLM client")
    return LLMClient.from_env()


def get_generator_client():
    logger.info("Initializing generator service client")
    return GeneratorServiceClient.from_config()


@asynccontextmanager
async def get_lifespan(app: FastAPI):
    # Created once per process, shared read-only by all requests
    app.state.llm_client = get_llm_client()
    app.state.generator_client = get_generator_client()
    app.state.observability = ObservabilityManager()

    yield

    await app.state.generator_client.aclose()
    logger.info("Generator service client closed")
