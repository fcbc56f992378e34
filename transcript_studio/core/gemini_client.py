"""
Factory and thin call wrapper for the Google Gemini client.
"""

from typing import Optional

from google import genai
from google.genai import types

from transcript_studio.config import config
from transcript_studio.models.schemas import GenerationConfig
from transcript_studio.utils.error_handling import TransportFailureError
from transcript_studio.utils.logger import logging


ANALYSIS_RESPONSE_SCHEMA = types.Schema(
    type=types.Type.OBJECT,
    properties={
        "topic": types.Schema(
            type=types.Type.STRING,
            description="Chủ đề chính của video.",
        ),
        "keyPoints": types.Schema(
            type=types.Type.ARRAY,
            description="Danh sách các điểm chính hoặc nội dung cốt lõi từ video.",
            items=types.Schema(type=types.Type.STRING),
        ),
    },
    required=["topic", "keyPoints"],
)


def create_client(api_key: Optional[str] = None) -> genai.Client:
    """
    Create the Gemini client.

    Args:
        api_key: Gemini API key (if None, taken from the configuration)

    Returns:
        google.genai.Client

    Raises:
        ConfigurationMissingError: if no API key is available
    """
    api_key = api_key or config.get_api_key()
    logging.info("Initializing Gemini client")
    return genai.Client(api_key=api_key)


def build_content_config(generation: GenerationConfig) -> types.GenerateContentConfig:
    """Translate a GenerationConfig into the SDK request config."""
    if generation.structured:
        return types.GenerateContentConfig(
            temperature=generation.temperature,
            response_mime_type="application/json",
            response_schema=ANALYSIS_RESPONSE_SCHEMA,
        )
    return types.GenerateContentConfig(temperature=generation.temperature)


def generate_text(client, prompt: str, generation: GenerationConfig) -> Optional[str]:
    """
    Send one prompt to Gemini and return the reply text.

    Args:
        client: google.genai.Client (or any object with the same ``models`` API)
        prompt: Prompt text
        generation: Model, temperature and output mode

    Returns:
        The response text, which may be None when the model returns no candidates

    Raises:
        TransportFailureError: if the request fails
    """
    try:
        response = client.models.generate_content(
            model=generation.model,
            contents=prompt,
            config=build_content_config(generation),
        )
    except Exception as e:
        raise TransportFailureError(f"Error calling Gemini API ({generation.model}): {e}") from e

    return response.text
