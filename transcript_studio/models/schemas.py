"""
Data models for the Transcript Studio application.
"""
from enum import Enum
from typing import Tuple
from pydantic import BaseModel, ConfigDict, Field, field_validator

from transcript_studio.utils.helpers import format_bullets


class Language(str, Enum):
    """Target languages offered by the language selectors."""
    ENGLISH = "English"
    VIETNAMESE = "Vietnamese"
    SPANISH = "Spanish"
    FRENCH = "French"
    JAPANESE = "Japanese"
    GERMAN = "German"
    CHINESE = "Chinese"
    KOREAN = "Korean"
    RUSSIAN = "Russian"

    @property
    def label(self) -> str:
        """Vietnamese display name."""
        return LANGUAGE_LABELS[self]


LANGUAGE_LABELS = {
    Language.ENGLISH: "Tiếng Anh",
    Language.VIETNAMESE: "Tiếng Việt",
    Language.SPANISH: "Tiếng Tây Ban Nha",
    Language.FRENCH: "Tiếng Pháp",
    Language.JAPANESE: "Tiếng Nhật",
    Language.GERMAN: "Tiếng Đức",
    Language.CHINESE: "Tiếng Trung",
    Language.KOREAN: "Tiếng Hàn",
    Language.RUSSIAN: "Tiếng Nga",
}


class AnalysisResult(BaseModel):
    """Topic and key points of a transcript, in one language."""
    topic: str
    key_points: Tuple[str, ...] = Field(alias="keyPoints")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @field_validator("topic")
    def validate_topic(cls, v):
        if not v.strip():
            raise ValueError("topic must not be empty")
        return v

    @field_validator("key_points")
    def validate_key_points(cls, v):
        if not v:
            raise ValueError("keyPoints must contain at least one point")
        return v

    def key_points_text(self) -> str:
        """Key points as ``- point`` lines."""
        return format_bullets(self.key_points)


class GenerationConfig(BaseModel):
    """Configuration for a single Gemini call."""
    model: str
    temperature: float = 0.2
    structured: bool = False


class ScriptWriterInput(BaseModel):
    """What the story-writer screen is opened with."""
    result: AnalysisResult
    language: Language

    model_config = ConfigDict(frozen=True)
