"""
Centralized error handling for the application.

Orchestration methods catch every internal failure and re-raise a single
operation-specific error. The view only ever reads ``user_message``.
"""

import json
from typing import Dict, Any, Optional

from transcript_studio.config import config
from transcript_studio.utils.logger import logging


class StudioError(Exception):
    """Base class for all application errors."""


class ConfigurationMissingError(StudioError):
    """A required setting (the Gemini API key) is not configured."""


class InvalidResponseFormatError(StudioError):
    """The model returned text that failed shape validation."""


class TransportFailureError(StudioError):
    """The Gemini call itself failed (network, quota, SDK error)."""


class OperationFailedError(StudioError):
    """Base class for the user-facing failure of one orchestration operation."""

    user_message = "Đã xảy ra lỗi. Vui lòng thử lại."

    def __init__(self, detail: Optional[str] = None):
        super().__init__(detail or self.user_message)
        self.detail = detail


class AnalysisFailedError(OperationFailedError):
    user_message = "Đã xảy ra lỗi khi phân tích. Vui lòng thử lại."

    def __init__(self):
        super().__init__("Failed to analyze transcript. Please check the API response and your configuration.")


class TranslationFailedError(OperationFailedError):
    user_message = "Không thể dịch kết quả. Vui lòng thử lại."

    def __init__(self, target_language: str):
        super().__init__(f"Failed to translate result to {target_language}.")
        self.target_language = target_language


class StoryGenerationFailedError(OperationFailedError):
    user_message = "Không thể tạo câu chuyện. Vui lòng thử lại."

    def __init__(self):
        super().__init__("Failed to generate the story.")


class StoryTranslationFailedError(OperationFailedError):
    user_message = "Không thể dịch câu chuyện. Vui lòng thử lại."

    def __init__(self, target_language: str):
        super().__init__(f"Failed to translate the story to {target_language}.")
        self.target_language = target_language


def user_message_for(error: Exception) -> str:
    """
    Get the message to show for a failed action.

    Args:
        error: The exception raised by an orchestration call

    Returns:
        Localized, human-readable message
    """
    if isinstance(error, OperationFailedError):
        return error.user_message
    return OperationFailedError.user_message


def log_diagnostic_info(context: Dict[str, Any]):
    """
    Log diagnostic information for debugging.

    Args:
        context: Dictionary of diagnostic information
    """
    if not config.DEBUG:
        return

    logging.info(f"Diagnostic info: {json.dumps(context, ensure_ascii=False, default=str)}")
