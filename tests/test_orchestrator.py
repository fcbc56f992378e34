"""
Tests for the orchestration of Gemini calls.
"""

import json
import pytest

from transcript_studio.config import config
from transcript_studio.core.orchestrator import StudioOrchestrator, language_name
from transcript_studio.models.schemas import AnalysisResult, Language
from transcript_studio.utils.error_handling import (
    AnalysisFailedError,
    InvalidResponseFormatError,
    StoryGenerationFailedError,
    StoryTranslationFailedError,
    TransportFailureError,
    TranslationFailedError,
)

from conftest import make_response


@pytest.fixture
def orchestrator(fake_client):
    return StudioOrchestrator(fake_client)


def last_call(fake_client):
    return fake_client.models.generate_content.call_args.kwargs


def test_language_name():
    assert language_name(Language.SPANISH) == "Spanish"
    assert language_name("Klingon") == "Klingon"


def test_analyze(orchestrator, fake_client, analysis_json, analysis_payload):
    """Test analyzing a transcript."""
    fake_client.models.generate_content.return_value = make_response(analysis_json)
    transcript = "Xin chào, hôm nay chúng ta nói về thói quen buổi sáng."

    result = orchestrator.analyze(transcript)

    assert result.topic == analysis_payload["topic"]
    assert list(result.key_points) == analysis_payload["keyPoints"]

    kwargs = last_call(fake_client)
    assert kwargs["model"] == config.ANALYSIS_MODEL
    assert transcript in kwargs["contents"]
    assert kwargs["config"].temperature == config.ANALYSIS_TEMPERATURE
    assert kwargs["config"].response_mime_type == "application/json"


def test_analyze_transport_failure(orchestrator, fake_client):
    fake_client.models.generate_content.side_effect = RuntimeError("503 UNAVAILABLE")

    with pytest.raises(AnalysisFailedError) as exc_info:
        orchestrator.analyze("some transcript")

    assert isinstance(exc_info.value.__cause__, TransportFailureError)
    assert exc_info.value.user_message == "Đã xảy ra lỗi khi phân tích. Vui lòng thử lại."


@pytest.mark.parametrize("reply", [
    "not json",
    json.dumps({"topic": "Only a topic"}),
    json.dumps({"topic": "", "keyPoints": ["a"]}),
    json.dumps({"topic": "T", "keyPoints": []}),
])
def test_analyze_invalid_reply(orchestrator, fake_client, reply):
    """A malformed reply never yields a partial result."""
    fake_client.models.generate_content.return_value = make_response(reply)

    with pytest.raises(AnalysisFailedError) as exc_info:
        orchestrator.analyze("some transcript")

    assert isinstance(exc_info.value.__cause__, InvalidResponseFormatError)


def test_translate_result(orchestrator, fake_client, analysis_result, spanish_json):
    fake_client.models.generate_content.return_value = make_response(spanish_json)

    translated = orchestrator.translate_result(analysis_result, Language.SPANISH)

    assert translated.topic.startswith("Los hábitos")
    assert len(translated.key_points) > 0

    kwargs = last_call(fake_client)
    prompt = kwargs["contents"]
    assert "into Spanish" in prompt
    assert analysis_result.topic in prompt
    for point in analysis_result.key_points:
        assert f"- {point}" in prompt
    assert kwargs["model"] == config.ANALYSIS_MODEL
    assert kwargs["config"].temperature == config.TRANSLATION_TEMPERATURE
    assert kwargs["config"].response_schema is not None


def test_translate_result_failure(orchestrator, fake_client, analysis_result):
    fake_client.models.generate_content.return_value = make_response('{"topic": "Tema", "keyPoints": "x"}')

    with pytest.raises(TranslationFailedError) as exc_info:
        orchestrator.translate_result(analysis_result, "French")

    assert exc_info.value.target_language == "French"
    assert "French" in str(exc_info.value)


@pytest.mark.parametrize("duration, word_count", [(1, 140), (5, 700), (15, 2100)])
def test_generate_script_word_count(orchestrator, fake_client, spanish_result, duration, word_count):
    """The requested length is duration * 140 words."""
    fake_client.models.generate_content.return_value = make_response("Había una vez...")

    orchestrator.generate_script(spanish_result, duration, Language.SPANISH)

    prompt = last_call(fake_client)["contents"]
    assert f"approximately **{word_count}** words" in prompt
    assert f"**{duration}** minutes" in prompt


def test_generate_script_prompt_and_model(orchestrator, fake_client, spanish_result):
    fake_client.models.generate_content.return_value = make_response("\n  Había una vez una niña.  \n")

    story = orchestrator.generate_script(spanish_result, 5, Language.SPANISH)

    assert story == "Había una vez una niña."
    kwargs = last_call(fake_client)
    prompt = kwargs["contents"]
    assert "in the language: **Spanish**" in prompt
    assert spanish_result.topic in prompt
    for point in spanish_result.key_points:
        assert point in prompt
    assert "hook" in prompt
    assert "introduction" in prompt and "conclusion" in prompt
    assert "DO NOT use script format" in prompt
    assert "Change Character Names" in prompt
    assert kwargs["model"] == config.STORY_MODEL
    assert kwargs["config"].temperature == config.STORY_TEMPERATURE
    assert kwargs["config"].response_mime_type is None


@pytest.mark.parametrize("duration", [0, 16])
def test_generate_script_rejects_out_of_range_duration(orchestrator, fake_client, spanish_result, duration):
    with pytest.raises(ValueError):
        orchestrator.generate_script(spanish_result, duration, Language.SPANISH)

    fake_client.models.generate_content.assert_not_called()


def test_generate_script_failure(orchestrator, fake_client, spanish_result):
    fake_client.models.generate_content.side_effect = TimeoutError("read timed out")

    with pytest.raises(StoryGenerationFailedError) as exc_info:
        orchestrator.generate_script(spanish_result, 3, Language.SPANISH)

    assert exc_info.value.user_message == "Không thể tạo câu chuyện. Vui lòng thử lại."


def test_translate_story(orchestrator, fake_client):
    fake_client.models.generate_content.return_value = make_response(" Once upon a time, Anna... ")

    translated = orchestrator.translate_story("Ngày xửa ngày xưa, An...", Language.ENGLISH)

    assert translated == "Once upon a time, Anna..."
    kwargs = last_call(fake_client)
    assert "Translate the following story into English" in kwargs["contents"]
    assert "Ngày xửa ngày xưa, An..." in kwargs["contents"]
    assert "character names" in kwargs["contents"]
    assert kwargs["config"].temperature == config.STORY_TRANSLATION_TEMPERATURE


def test_translate_story_failure(orchestrator, fake_client):
    fake_client.models.generate_content.return_value = make_response(None)

    with pytest.raises(StoryTranslationFailedError) as exc_info:
        orchestrator.translate_story("Ngày xửa ngày xưa...", Language.KOREAN)

    assert exc_info.value.target_language == "Korean"


def test_calls_are_independent(orchestrator, fake_client, analysis_json):
    """No response is cached between calls."""
    fake_client.models.generate_content.return_value = make_response(analysis_json)

    first = orchestrator.analyze("same transcript")
    second = orchestrator.analyze("same transcript")

    assert first == second
    assert fake_client.models.generate_content.call_count == 2
    assert isinstance(first, AnalysisResult)
