"""
Reusable UI components for the Streamlit app.
"""

import json
from typing import Optional

import streamlit as st
import streamlit.components.v1 as components

from transcript_studio.config import config
from transcript_studio.models.schemas import AnalysisResult, Language
from transcript_studio.utils.helpers import count_words, is_blank


def page_setup():
    """Configure the browser page. Must be the first Streamlit call of a run."""
    st.set_page_config(
        page_title=config.APP_NAME,
        page_icon="🎬",
        layout="centered",
    )


def header():
    """Display the application header."""
    st.title("🎬 Phân Tích Bản Ghi YouTube")
    st.markdown("""
    Dán bản ghi video vào ô bên dưới để AI xác định chủ đề chính và các điểm cốt lõi.
    """)
    st.divider()


def script_writer_header() -> bool:
    """
    Display the story-writer header with its back button.

    Returns:
        True if the back button was clicked
    """
    col1, col2 = st.columns([1, 5])
    with col1:
        back = st.button("← Quay Lại", key="back_to_main")
    with col2:
        st.title("✍️ Người Kể Chuyện AI")
    return back


def transcript_input(transcript: str, is_loading: bool):
    """
    Display the transcript textarea and the analyze button.

    Args:
        transcript: Text to prefill the textarea with
        is_loading: Whether an analysis is in flight

    Returns:
        (transcript, clicked)
    """
    transcript = st.text_area(
        "Bản ghi",
        value=transcript,
        placeholder="Dán bản ghi video YouTube của bạn vào đây...",
        height=256,
        key="transcript_text",
        disabled=is_loading,
    )
    clicked = st.button(
        "Đang phân tích..." if is_loading else "Phân Tích",
        key="analyze",
        type="primary",
        disabled=is_loading or is_blank(transcript),
    )

    return transcript, clicked


def loading_spinner(message: str = "Đang xử lý..."):
    """
    Display a loading spinner with a message.

    Args:
        message: Message to display with the spinner
    """
    return st.spinner(message)


def display_error(message: Optional[str]):
    """
    Display an error banner if there is an error.

    Args:
        message: Error message to display
    """
    if message:
        st.error(message)


def copy_button(text: str, key: str):
    """
    Display a button that copies ``text`` to the clipboard.

    The copy happens in the browser; the label switches to an acknowledgment
    for a short while and then reverts.

    Args:
        text: Text to copy
        key: Unique element id on the page
    """
    safe_text_js = json.dumps(text)
    element_id = json.dumps(f"copy-{key}")
    components.html(f"""
        <style>
            .copy-btn {{
                background: #334155;
                color: #cbd5e1;
                border: none;
                padding: 0.4rem 0.8rem;
                border-radius: 6px;
                cursor: pointer;
                font-family: sans-serif;
            }}
            .copy-btn.copied {{
                background: rgba(34, 197, 94, 0.2);
                color: #4ade80;
            }}
        </style>
        <button class="copy-btn" id={element_id} aria-label="Sao chép">📋 Sao chép</button>
        <script>
            const btn = document.getElementById({element_id});
            btn.addEventListener("click", () => {{
                navigator.clipboard.writeText({safe_text_js}).then(() => {{
                    btn.classList.add("copied");
                    btn.textContent = "✅ Đã sao chép";
                    btn.setAttribute("aria-label", "Đã sao chép");
                    setTimeout(() => {{
                        btn.classList.remove("copied");
                        btn.textContent = "📋 Sao chép";
                        btn.setAttribute("aria-label", "Sao chép");
                    }}, {config.COPY_ACK_MS});
                }});
            }});
        </script>
    """, height=45)


def language_selector(value: Language, key: str, disabled: bool = False) -> Language:
    """
    Display the target-language dropdown.

    Args:
        value: Currently selected language
        key: Widget key
        disabled: Whether the selector is disabled

    Returns:
        The selected language
    """
    options = list(Language)
    return st.selectbox(
        "Ngôn ngữ",
        options=options,
        index=options.index(value),
        format_func=lambda language: language.label,
        key=key,
        disabled=disabled,
        label_visibility="collapsed",
    )


def duration_slider(value: int, disabled: bool = False) -> int:
    """Display the story duration slider (whole minutes)."""
    return st.slider(
        "Thời lượng câu chuyện (phút)",
        min_value=config.MIN_STORY_MINUTES,
        max_value=config.MAX_STORY_MINUTES,
        value=value,
        step=1,
        key="story_duration",
        disabled=disabled,
    )


def result_panels(result: AnalysisResult, translated: bool = False):
    """
    Display the topic panel and the key points panel, each with a copy button.

    Args:
        result: Analysis to display
        translated: Whether these are the translated panels
    """
    suffix = " (Đã dịch)" if translated else ""
    key_prefix = "translated" if translated else "original"

    with st.container(border=True):
        col1, col2 = st.columns([4, 1])
        with col1:
            st.subheader(f"Chủ Đề{suffix}")
        with col2:
            copy_button(result.topic, key=f"{key_prefix}-topic")
        st.markdown(result.topic)

    with st.container(border=True):
        col1, col2 = st.columns([4, 1])
        with col1:
            st.subheader(f"Các Điểm Cốt Lõi{suffix}")
        with col2:
            copy_button(result.key_points_text(), key=f"{key_prefix}-points")
        for point in result.key_points:
            st.markdown(f"- {point}")


def analysis_context(result: AnalysisResult):
    """Display the translated analysis a story is based on."""
    with st.container(border=True):
        st.markdown("#### Dựa trên nội dung đã dịch:")
        st.markdown(f"**Chủ Đề:** {result.topic}")
        st.markdown("**Các Điểm Cốt Lõi:**")
        for point in result.key_points:
            st.markdown(f"- {point}")


def story_panel(story: str, translated: bool = False):
    """
    Display a story with its word count and a copy button.

    Args:
        story: Story text
        translated: Whether this is the translated story
    """
    title = "Câu Chuyện (Đã dịch)" if translated else "Câu Chuyện Của Bạn"
    with st.container(border=True):
        col1, col2 = st.columns([4, 1])
        with col1:
            st.subheader(title)
            st.caption(f"({count_words(story)} từ)")
        with col2:
            copy_button(story, key="translated-story" if translated else "story")
        st.markdown(story)
