import logging
from typing import Optional

from fastapi import APIRouter, File, HTTPException, UploadFile
from fastapi.concurrency import run_in_threadpool

from base import StartGenerationRequest
from dependencies import GeneratorClientDep, LLMClientDep, ObservabilityDep
from enhancement_engine.pipeline import run_schema_enhancement_flow
from errors import InvalidInputError, SchemaProcessorError
from utils.file_processing import read_schema_file

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/schema-processor")


@router.post("/upload")
async def upload_schema(
        llm_client: LLMClientDep,
        schema_file: Optional[UploadFile] = File(default=None, alias="schemaFile"),
):
    """
    Uploaded JSON Schema -> LLM adds faker/format tags -> enhanced schema.
    """
    try:
        raw_schema = await read_schema_file(schema_file)
    except InvalidInputError as e:
        logger.error(f"Rejected schema upload: {e}")
        raise HTTPException(status_code=400, detail=e.message)

    try:
        result = await run_schema_enhancement_flow(raw_schema, llm_client)
        return result.model_dump(by_alias=True)

    except SchemaProcessorError as e:
        # Enhancement diagnostics stay in the logs
        logger.error(f"Error processing schema: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to process schema.")
    except Exception as e:
        logger.error(f"Unhandled exception during schema upload: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to process schema.")


@router.post("/start-generation")
async def start_generation(
        generator_client: GeneratorClientDep,
        payload: StartGenerationRequest,
):
    """
    Enhanced schema + output sink -> generator service stream.
    """
    try:
        if payload.enhanced_schema is None or payload.output_config is None:
            raise HTTPException(
                status_code=400,
                detail="Enhanced schema and output configuration are required.",
            )

        logger.info(
            "Received request to start generation for schema: "
            f"{payload.enhanced_schema.get('title', 'Untitled Schema')}"
        )
        return await generator_client.start_generation(
            payload.enhanced_schema,
            payload.output_config,
            payload.max_messages,
            payload.max_time_in_seconds,
        )

    except HTTPException as e:
        logger.error(f"HTTP Exception during start-generation: {e.detail}")
        raise e
    except SchemaProcessorError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception as e:
        logger.error(f"Error in start-generation: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to start data generation process.")


@router.post("/streams/{stream_id}/stop")
async def stop_generation(stream_id: str, generator_client: GeneratorClientDep):
    try:
        return await generator_client.stop_generation(stream_id)
    except SchemaProcessorError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception as e:
        logger.error(f"Error stopping stream {stream_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to stop data generation process.")


@router.get("/streams/{stream_id}/stats")
async def stream_stats(stream_id: str, generator_client: GeneratorClientDep):
    try:
        return await generator_client.get_stream_stats(stream_id)
    except SchemaProcessorError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception as e:
        logger.error(f"Error fetching stats for stream {stream_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to fetch stream stats.")


@router.get("/health")
async def health(
        llm_client: LLMClientDep,
        generator_client: GeneratorClientDep,
        observability: ObservabilityDep,
):
    generator_ok = await generator_client.ping()
    # Langfuse auth_check is a blocking call
    langfuse_health = await run_in_threadpool(observability.check_health)
    return {
        "llm": "configured" if llm_client is not None else "disabled",
        "generator_service": "healthy" if generator_ok else "unreachable",
        "langfuse": langfuse_health["status"],
    }
