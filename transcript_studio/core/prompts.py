from transcript_studio.models.schemas import AnalysisResult
from transcript_studio.utils.helpers import format_bullets


analysis_template = """Phân tích bản ghi video YouTube sau đây và cung cấp chủ đề chính cùng danh sách các điểm cốt lõi.

**Bản ghi:**
---
{transcript}
---
"""

translate_result_template = """Translate the following topic and key points into {target_language}. Maintain the original meaning and structure.

**Topic to translate:**
{topic}

**Key Points to translate:**
{key_points}

Respond ONLY with the JSON object.
"""

story_template = """
You are an inspirational storyteller. Your task is to write a completely new, motivational story in the language: **{language}**.
The story should be told from the perspective of a single narrator, perfect for a text-to-speech application.

Base the story on the following topic and key points.
- **Topic:** {topic}
- **Key Points:**
{key_points}

**CRITICAL INSTRUCTIONS:**
1.  **Opening Hook:** You MUST start the story with a powerful, captivating hook (câu hook) to immediately grab the listener's attention. This is a mandatory first step.
2.  **Structure:** After the hook, the story MUST have a clear introduction (mở bài), body (thân bài), and conclusion (kết bài).
3.  **Format:** Write it as a continuous narrative text. DO NOT use script format with character names and dialogues. It should be a single block of prose.
4.  **Change Character Names:** If any character names are mentioned in the topic or key points, you MUST change them to new, different names that are appropriate for the **{language}** language and culture.
5.  **Story Length:** The story should be approximately **{word_count}** words long. This is suitable for a reading time of **{duration}** minutes at a normal speaking pace.

Respond ONLY with the story text.
"""

translate_story_template = """Translate the following story into {target_language}.
Maintain the tone, style, and narrative flow of the original text.

**CRITICAL INSTRUCTION:** If the original story contains any character names, you MUST change them to new names that are culturally and linguistically appropriate for the **{target_language}** language. For example, if translating a Vietnamese story to English, a name like "An" or "Minh" should be changed to a common English name like "Anna" or "Michael".

Respond ONLY with the translated story text.

**Story to Translate:**
---
{story}
---
"""


def build_analysis_prompt(transcript: str) -> str:
    return analysis_template.format(transcript=transcript)


def build_translate_result_prompt(result: AnalysisResult, target_language: str) -> str:
    return translate_result_template.format(
        target_language=target_language,
        topic=result.topic,
        key_points=result.key_points_text(),
    )


def build_story_prompt(result: AnalysisResult, duration: int, word_count: int, language: str) -> str:
    return story_template.format(
        language=language,
        topic=result.topic,
        key_points=format_bullets(result.key_points, prefix="  - "),
        word_count=word_count,
        duration=duration,
    )


def build_translate_story_prompt(story: str, target_language: str) -> str:
    return translate_story_template.format(target_language=target_language, story=story)
