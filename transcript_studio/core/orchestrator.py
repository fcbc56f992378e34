"""
Module for the four Gemini-backed operations: analyze a transcript,
translate the analysis, write a story from it, and translate the story.
"""

from typing import Union

from transcript_studio.config import config
from transcript_studio.core import prompts
from transcript_studio.core.gemini_client import generate_text
from transcript_studio.core.validation import parse_analysis_response, require_text
from transcript_studio.models.schemas import AnalysisResult, GenerationConfig, Language
from transcript_studio.utils.error_handling import (
    AnalysisFailedError,
    StoryGenerationFailedError,
    StoryTranslationFailedError,
    StudioError,
    TranslationFailedError,
)
from transcript_studio.utils.helpers import target_word_count
from transcript_studio.utils.logger import logging


def language_name(language: Union[Language, str]) -> str:
    """Plain language name for use inside a prompt."""
    if isinstance(language, Language):
        return language.value
    return str(language)


class StudioOrchestrator:
    """Builds prompts, calls Gemini, and validates what comes back.

    Holds no state besides the client, so calls are independent of each other.
    """

    def __init__(self, client):
        """
        Initialize the orchestrator with a Gemini client.

        Args:
            client: google.genai.Client, or a stand-in with the same ``models`` API
        """
        self.client = client

    def analyze(self, transcript: str) -> AnalysisResult:
        """
        Extract the main topic and key points of a transcript.

        Args:
            transcript: Raw transcript text

        Returns:
            AnalysisResult

        Raises:
            AnalysisFailedError: on any transport or validation failure
        """
        generation = GenerationConfig(
            model=config.ANALYSIS_MODEL,
            temperature=config.ANALYSIS_TEMPERATURE,
            structured=True,
        )
        try:
            text = generate_text(self.client, prompts.build_analysis_prompt(transcript), generation)
            return parse_analysis_response(text)
        except StudioError as e:
            logging.error(f"Error calling Gemini API: {e}")
            raise AnalysisFailedError() from e

    def translate_result(self, result: AnalysisResult, target_language: Union[Language, str]) -> AnalysisResult:
        """
        Translate a topic and its key points.

        Args:
            result: Analysis to translate
            target_language: Language to translate into

        Returns:
            AnalysisResult in the target language

        Raises:
            TranslationFailedError: on any transport or validation failure
        """
        language = language_name(target_language)
        generation = GenerationConfig(
            model=config.ANALYSIS_MODEL,
            temperature=config.TRANSLATION_TEMPERATURE,
            structured=True,
        )
        try:
            text = generate_text(self.client, prompts.build_translate_result_prompt(result, language), generation)
            return parse_analysis_response(text)
        except StudioError as e:
            logging.error(f"Error calling Gemini API for translation: {e}")
            raise TranslationFailedError(language) from e

    def generate_script(self, result: AnalysisResult, duration_minutes: int, language: Union[Language, str]) -> str:
        """
        Write a single-narrator story based on an analysis.

        Args:
            result: Topic and key points the story is built on
            duration_minutes: Narration length in minutes
            language: Language to write the story in

        Returns:
            The story text

        Raises:
            ValueError: if duration_minutes is outside the supported range
            StoryGenerationFailedError: if the request fails
        """
        if not config.MIN_STORY_MINUTES <= duration_minutes <= config.MAX_STORY_MINUTES:
            raise ValueError(
                f"duration_minutes must be between {config.MIN_STORY_MINUTES} "
                f"and {config.MAX_STORY_MINUTES}, got {duration_minutes}"
            )

        word_count = target_word_count(duration_minutes, config.WORDS_PER_MINUTE)
        prompt = prompts.build_story_prompt(result, duration_minutes, word_count, language_name(language))
        generation = GenerationConfig(
            model=config.STORY_MODEL,
            temperature=config.STORY_TEMPERATURE,
        )
        logging.info(f"Generating a {duration_minutes}-minute story (~{word_count} words)")
        try:
            return require_text(generate_text(self.client, prompt, generation))
        except StudioError as e:
            logging.error(f"Error calling Gemini API for script generation: {e}")
            raise StoryGenerationFailedError() from e

    def translate_story(self, story: str, target_language: Union[Language, str]) -> str:
        """
        Translate a story, keeping its tone and localizing character names.

        Args:
            story: Story text
            target_language: Language to translate into

        Returns:
            The translated story text

        Raises:
            StoryTranslationFailedError: if the request fails
        """
        language = language_name(target_language)
        generation = GenerationConfig(
            model=config.ANALYSIS_MODEL,
            temperature=config.STORY_TRANSLATION_TEMPERATURE,
        )
        try:
            text = generate_text(self.client, prompts.build_translate_story_prompt(story, language), generation)
            return require_text(text)
        except StudioError as e:
            logging.error(f"Error translating story to {language}: {e}")
            raise StoryTranslationFailedError(language) from e
