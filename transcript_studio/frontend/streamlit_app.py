"""
Main Streamlit application for Transcript Studio.
"""

import streamlit as st

from transcript_studio.core.gemini_client import create_client
from transcript_studio.core.orchestrator import StudioOrchestrator
from transcript_studio.frontend.components import (
    page_setup, header, script_writer_header, transcript_input,
    loading_spinner, display_error, language_selector, duration_slider,
    result_panels, analysis_context, story_panel
)
from transcript_studio.frontend.state import ActionState, StudioController, ScriptWriterView
from transcript_studio.config import config
from transcript_studio.utils.error_handling import ConfigurationMissingError, log_diagnostic_info
from transcript_studio.utils.logger import logging


def init_session_state() -> StudioController:
    """Create the per-session controller on first run and return it."""
    if "controller" not in st.session_state:
        try:
            client = create_client()
        except ConfigurationMissingError as e:
            logging.critical(str(e))
            st.error(f"Lỗi cấu hình: {e}")
            st.stop()

        log_diagnostic_info(config.get_settings())
        st.session_state.controller = StudioController(StudioOrchestrator(client))

    return st.session_state.controller


def run_in_flight(controller: StudioController, action: ActionState, message: str):
    """
    Send the queued request of a started action under a spinner, then redraw.

    Actions are started on click and the page is rerun first, so every
    control of the action is already drawn disabled while the request runs.
    """
    if not action.loading:
        return
    with loading_spinner(message):
        sent = controller.run_pending(action)
    if sent:
        st.rerun()


def translation_section(controller: StudioController):
    """Language picker, translate button and the translated panels."""
    main = controller.main
    busy = main.translation.loading

    st.divider()
    st.markdown("### 🌐 Dịch Kết Quả")
    col1, col2 = st.columns([3, 1])
    with col1:
        language = language_selector(main.target_language, key="target_language", disabled=busy)
    with col2:
        translate = st.button("Đang dịch..." if busy else "Dịch", key="translate_result", disabled=busy)
    controller.set_target_language(language)

    if translate:
        controller.start_translate()
        st.rerun()

    display_error(main.translation.error)
    run_in_flight(controller, main.translation, "Đang dịch...")

    if main.translated_result is not None:
        result_panels(main.translated_result, translated=True)

        if st.button("✍️ Chuyển Thành Câu Chuyện", key="go_to_script_writer", type="primary"):
            if controller.go_to_script_writer():
                st.rerun()


def main_view(controller: StudioController):
    """Display the transcript analysis screen."""
    main = controller.main
    busy = main.analysis.loading
    header()

    transcript, clicked = transcript_input(main.transcript, busy)
    if not busy:
        controller.set_transcript(transcript)

    if clicked:
        controller.start_analyze()
        st.rerun()

    display_error(main.analysis.error)
    run_in_flight(controller, main.analysis, "Đang phân tích...")

    if main.result is not None:
        result_panels(main.result)
        translation_section(controller)


def story_translation_section(controller: StudioController):
    """Language picker, translate button and the translated story."""
    writer = controller.script_writer
    busy = writer.translation.loading

    st.divider()
    st.markdown("### 🌐 Dịch Câu Chuyện")
    col1, col2 = st.columns([3, 1])
    with col1:
        language = language_selector(writer.story_target_language, key="story_target_language", disabled=busy)
    with col2:
        translate = st.button("Đang dịch..." if busy else "Dịch", key="translate_story", disabled=busy or not writer.story)
    controller.set_story_target_language(language)

    if translate:
        controller.start_translate_story()
        st.rerun()

    display_error(writer.translation.error)
    run_in_flight(controller, writer.translation, "Đang dịch...")

    if writer.translated_story:
        story_panel(writer.translated_story, translated=True)


def script_writer_view(controller: StudioController):
    """Display the story-writer screen."""
    if script_writer_header():
        controller.back_to_main()
        st.rerun()

    writer = controller.script_writer
    busy = writer.generation.loading
    analysis_context(writer.input.result)

    duration = duration_slider(writer.duration, disabled=busy)
    controller.set_duration(duration)
    st.markdown(f"Thời lượng câu chuyện: **{writer.duration} phút**")

    if st.button("Đang tạo..." if busy else "✍️ Tạo Câu Chuyện", key="generate_story", type="primary", disabled=busy):
        controller.start_generate_story()
        st.rerun()

    display_error(writer.generation.error)
    run_in_flight(controller, writer.generation, "Đang tạo...")

    if writer.story:
        story_panel(writer.story)
        story_translation_section(controller)


def main():
    """Main application entry point."""
    page_setup()
    controller = init_session_state()

    if isinstance(controller.view, ScriptWriterView):
        script_writer_view(controller)
    else:
        main_view(controller)


if __name__ == "__main__":
    main()
