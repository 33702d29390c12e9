import os
import logging
from typing import Optional

from google import genai
from google.genai import errors as genai_errors
from google.genai import types

from config import CONFIG
from errors import UpstreamCallError

logger = logging.getLogger(__name__)


class LLMClient:
    """
    Process-wide handle to the Gemini chat-completion API.

    Built once at startup by `from_env()`; when no API key is configured the
    factory returns None and schema enhancement stays disabled for the
    lifetime of the process.
    """

    def __init__(self, client: genai.Client, model_name: str, temperature: float):
        self.client = client
        self.model_name = model_name
        self.temperature = temperature

    @classmethod
    def from_env(cls) -> Optional["LLMClient"]:
        api_key = os.getenv("GEMINI_API_KEY") or os.getenv("GOOGLE_API_KEY")
        if not api_key:
            logger.warning("GEMINI_API_KEY not found in environment variables. LLM functionality will be disabled.")
            return None

        llm_config = CONFIG["llm"]
        model_name = os.getenv("LLM_MODEL_NAME") or llm_config.get("model_name", "gemini-2.0-flash")
        temperature = float(llm_config["generation_config"].get("temperature", 0.2))

        client = genai.Client(api_key=api_key)
        logger.info(f"LLM client initialized. Model: {model_name}, temperature: {temperature}")
        return cls(client=client, model_name=model_name, temperature=temperature)

    async def complete(self, prompt: str) -> Optional[str]:
        """Sends the prompt as a single user message and returns the completion text."""
        try:
            response = await self.client.aio.models.generate_content(
                model=self.model_name,
                contents=prompt,
                config=types.GenerateContentConfig(temperature=self.temperature),
            )
        except genai_errors.APIError as e:
            logger.error(f"LLM call failed with status {e.code}: {e.message}")
            raise UpstreamCallError("Failed to enhance schema with LLM.", status_code=e.code) from e
        except Exception as e:
            logger.error(f"LLM call failed: {e}", exc_info=True)
            raise UpstreamCallError("Failed to enhance schema with LLM.") from e

        return response.text
