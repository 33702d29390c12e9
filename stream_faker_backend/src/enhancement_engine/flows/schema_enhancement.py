import json
import logging
from typing import Any, Dict, Optional

from enhancement_engine.common import clean_json_string
from enhancement_engine.llm_client import LLMClient
from enhancement_engine.models import EnhancementResult
from enhancement_engine.prompts import build_schema_enhancement_prompt
from errors import (
    InvalidInputError,
    UpstreamEmptyResponseError,
    UpstreamMalformedResponseError,
)
from utils.observability import trace_step

logger = logging.getLogger(__name__)

SKIPPED_MARKER = "(LLM enhancement SKIPPED - API key missing)"


def parse_raw_schema(raw_schema_text: str) -> Dict[str, Any]:
    try:
        parsed = json.loads(raw_schema_text)
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON schema provided for processing: {e}")
        raise InvalidInputError("Invalid JSON schema provided.") from e

    if not isinstance(parsed, dict):
        logger.error(f"JSON schema must be an object, got {type(parsed).__name__}")
        raise InvalidInputError("Invalid JSON schema provided.")
    return parsed


def skip_enhancement(schema: Dict[str, Any]) -> EnhancementResult:
    """Pass-through used when no LLM is configured for this process."""
    schema["description"] = f"{schema.get('description') or ''} {SKIPPED_MARKER}"
    return EnhancementResult(
        message=f"Schema processed {SKIPPED_MARKER}.",
        enhanced_schema=schema,
        skipped=True,
    )


@trace_step(name="schema_enhancement")
async def run_schema_enhancement_flow(
    raw_schema_text: str, llm_client: Optional[LLMClient]
) -> EnhancementResult:
    """
    1. Validate the uploaded schema.
    2. Ask the LLM to add 'faker' / 'format' tags (single attempt).
    3. Parse the completion back into a schema object.
    """
    # [STEP 1] Parse before any network call
    schema = parse_raw_schema(raw_schema_text)

    if llm_client is None:
        logger.warning("LLM client not initialized. Returning schema without LLM enhancement.")
        return skip_enhancement(schema)

    # [STEP 2] Call the LLM
    prompt = build_schema_enhancement_prompt(raw_schema_text)
    logger.info(f"Sending schema to {llm_client.model_name} for enhancement...")
    completion = await llm_client.complete(prompt)

    if not completion or not completion.strip():
        logger.error("LLM returned an empty response content.")
        raise UpstreamEmptyResponseError("LLM returned an empty response.")

    # [STEP 3] Parse the completion
    try:
        enhanced_schema = json.loads(clean_json_string(completion))
    except json.JSONDecodeError as e:
        logger.error(f"Failed to parse LLM response as JSON: {e}")
        logger.debug(f"Raw LLM response content: {completion}")
        raise UpstreamMalformedResponseError("LLM response was not valid JSON.", raw_text=completion) from e

    if not isinstance(enhanced_schema, dict):
        logger.error(f"LLM returned a JSON {type(enhanced_schema).__name__} instead of a schema object.")
        logger.debug(f"Raw LLM response content: {completion}")
        raise UpstreamMalformedResponseError("LLM response was not a JSON schema object.", raw_text=completion)

    logger.info("LLM enhancement successful.")
    return EnhancementResult(message="Schema enhanced successfully by LLM.", enhanced_schema=enhanced_schema)
