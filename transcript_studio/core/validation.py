"""
Validation of Gemini responses.
"""

import json
from typing import Optional

from pydantic import ValidationError

from transcript_studio.models.schemas import AnalysisResult
from transcript_studio.utils.error_handling import InvalidResponseFormatError


def parse_analysis_response(text: Optional[str]) -> AnalysisResult:
    """
    Parse a structured analysis reply into an AnalysisResult.

    The reply must be a JSON object with a non-empty string ``topic`` and a
    non-empty array of strings ``keyPoints``.

    Args:
        text: Raw response text from the model

    Returns:
        AnalysisResult

    Raises:
        InvalidResponseFormatError: if the reply is empty, not JSON, or the wrong shape
    """
    if not text or not text.strip():
        raise InvalidResponseFormatError("Empty response from API")

    try:
        parsed = json.loads(text.strip())
    except json.JSONDecodeError as e:
        raise InvalidResponseFormatError(f"Response is not valid JSON: {e}") from e

    if not isinstance(parsed, dict):
        raise InvalidResponseFormatError("Invalid response format from API: expected a JSON object")

    topic = parsed.get("topic")
    key_points = parsed.get("keyPoints")
    if not isinstance(topic, str) or not topic.strip():
        raise InvalidResponseFormatError("Invalid response format from API: missing topic")
    if not isinstance(key_points, list) or not key_points:
        raise InvalidResponseFormatError("Invalid response format from API: keyPoints must be a non-empty array")
    if not all(isinstance(point, str) for point in key_points):
        raise InvalidResponseFormatError("Invalid response format from API: keyPoints must contain strings")

    try:
        return AnalysisResult(topic=topic, keyPoints=key_points)
    except ValidationError as e:
        raise InvalidResponseFormatError(str(e)) from e


def require_text(text: Optional[str]) -> str:
    """
    Return the trimmed free-text reply, rejecting an empty one.

    Raises:
        InvalidResponseFormatError: if the model returned nothing
    """
    if not text or not text.strip():
        raise InvalidResponseFormatError("Empty response from API")
    return text.strip()
