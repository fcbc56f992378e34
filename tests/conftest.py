"""
Configuration for pytest tests.
"""

import json
import os
import pytest
from unittest.mock import MagicMock

os.environ.setdefault("GEMINI_API_KEY", "test_api_key")
os.environ.setdefault("ENVIRONMENT", "development")

from transcript_studio.models.schemas import AnalysisResult


def make_response(text):
    """Build a stand-in for a google-genai GenerateContentResponse."""
    response = MagicMock()
    response.text = text
    return response


@pytest.fixture
def fake_client():
    """A Gemini client whose generate_content is a MagicMock."""
    client = MagicMock()
    client.models.generate_content.return_value = make_response("")
    return client


@pytest.fixture
def analysis_payload():
    return {
        "topic": "Thói quen buổi sáng của người thành công",
        "keyPoints": [
            "Dậy sớm giúp có thời gian cho bản thân",
            "Tập thể dục tăng năng lượng",
            "Lên kế hoạch cho ngày mới",
        ],
    }


@pytest.fixture
def spanish_payload():
    return {
        "topic": "Los hábitos matutinos de las personas exitosas",
        "keyPoints": [
            "Levantarse temprano da tiempo para uno mismo",
            "El ejercicio aumenta la energía",
            "Planificar el nuevo día",
        ],
    }


@pytest.fixture
def analysis_result(analysis_payload):
    return AnalysisResult(**analysis_payload)


@pytest.fixture
def spanish_result(spanish_payload):
    return AnalysisResult(**spanish_payload)


@pytest.fixture
def analysis_json(analysis_payload):
    return json.dumps(analysis_payload, ensure_ascii=False)


@pytest.fixture
def spanish_json(spanish_payload):
    return json.dumps(spanish_payload, ensure_ascii=False)
