"""
Screen state and the view controller for the Streamlit app.

The controller is kept free of Streamlit calls so it can be driven from
tests; the Streamlit script stores one instance per browser session.
"""

from dataclasses import dataclass, field
from typing import Callable, Optional, Union

from transcript_studio.config import config
from transcript_studio.core.orchestrator import StudioOrchestrator
from transcript_studio.models.schemas import AnalysisResult, Language, ScriptWriterInput
from transcript_studio.utils.error_handling import OperationFailedError, user_message_for
from transcript_studio.utils.helpers import is_blank
from transcript_studio.utils.logger import logging

EMPTY_TRANSCRIPT_MESSAGE = "Vui lòng nhập bản ghi trước khi phân tích."


@dataclass(frozen=True)
class MainView:
    """The transcript analysis screen."""


@dataclass(frozen=True)
class ScriptWriterView:
    """The story-writer screen and the input it was opened with."""
    input: ScriptWriterInput


View = Union[MainView, ScriptWriterView]


@dataclass
class ActionState:
    """Loading/error flags of one async action, plus its generation id.

    Each attempt gets a new generation; a completion whose generation is no
    longer the latest is dropped. A started attempt keeps its request in
    ``pending`` until it is run, so the page can be redrawn with the action's
    controls disabled before the request goes out.
    """
    name: str
    loading: bool = False
    error: Optional[str] = None
    generation: int = 0
    pending: Optional[Callable[[], None]] = field(default=None, repr=False, compare=False)

    def begin(self) -> int:
        self.generation += 1
        self.loading = True
        self.error = None
        return self.generation

    def invalidate(self) -> None:
        """Drop whatever attempt is in flight; its completion will be discarded."""
        self.generation += 1
        self.loading = False
        self.pending = None

    def is_current(self, generation: int) -> bool:
        return generation == self.generation

    def succeed(self, generation: int) -> bool:
        if not self.is_current(generation):
            logging.debug(f"Discarding stale {self.name} response (generation {generation} < {self.generation})")
            return False
        self.loading = False
        return True

    def fail(self, generation: int, message: str) -> bool:
        if not self.is_current(generation):
            logging.debug(f"Discarding stale {self.name} failure (generation {generation} < {self.generation})")
            return False
        self.loading = False
        self.error = message
        return True


@dataclass
class MainScreenState:
    transcript: str = ""
    result: Optional[AnalysisResult] = None
    translated_result: Optional[AnalysisResult] = None
    translated_language: Optional[Language] = None
    target_language: Language = Language(config.DEFAULT_TARGET_LANGUAGE)
    analysis: ActionState = field(default_factory=lambda: ActionState("analysis"))
    translation: ActionState = field(default_factory=lambda: ActionState("translation"))


def default_story_language(language: Language) -> Language:
    """Default story translation target: English for Vietnamese stories, Vietnamese otherwise."""
    if language == Language.VIETNAMESE:
        return Language.ENGLISH
    return Language.VIETNAMESE


@dataclass
class ScriptWriterState:
    input: ScriptWriterInput
    duration: int = config.DEFAULT_STORY_MINUTES
    story: Optional[str] = None
    translated_story: Optional[str] = None
    story_target_language: Optional[Language] = None
    generation: ActionState = field(default_factory=lambda: ActionState("story generation"))
    translation: ActionState = field(default_factory=lambda: ActionState("story translation"))

    def __post_init__(self):
        if self.story_target_language is None:
            self.story_target_language = default_story_language(self.input.language)


class StudioController:
    """Owns the current view and screen state, and routes user actions to the orchestrator."""

    def __init__(self, orchestrator: StudioOrchestrator):
        self.orchestrator = orchestrator
        self.view: View = MainView()
        self.main = MainScreenState()
        self.script_writer: Optional[ScriptWriterState] = None

    # Navigation

    def go_to_script_writer(self) -> bool:
        """
        Open the story-writer screen with the current translation.

        Returns:
            True if the view changed, False if there is no translation yet
        """
        if self.main.translated_result is None or self.main.translated_language is None:
            return False
        bundle = ScriptWriterInput(result=self.main.translated_result, language=self.main.translated_language)
        self.script_writer = ScriptWriterState(input=bundle)
        self.view = ScriptWriterView(input=bundle)
        return True

    def back_to_main(self) -> None:
        self.script_writer = None
        self.view = MainView()

    # Main screen actions

    def set_transcript(self, transcript: str) -> None:
        self.main.transcript = transcript

    def set_target_language(self, language: Union[Language, str]) -> None:
        self.main.target_language = Language(language)

    # Requests are started and run in two steps. ``start_*`` validates, marks
    # the action as loading and queues the request; ``run_pending`` sends it.
    # The plain action methods do both at once.

    def start_analyze(self) -> bool:
        main = self.main
        if is_blank(main.transcript):
            main.analysis.error = EMPTY_TRANSCRIPT_MESSAGE
            return False

        transcript = main.transcript
        main.result = None
        main.translated_result = None
        main.translated_language = None
        main.translation.invalidate()
        main.translation.error = None

        self._start(
            main.analysis,
            lambda: self.orchestrator.analyze(transcript),
            lambda analysis: setattr(main, "result", analysis),
        )
        return True

    def analyze(self) -> None:
        if self.start_analyze():
            self.run_pending(self.main.analysis)

    def start_translate(self) -> bool:
        main = self.main
        if main.result is None:
            return False

        source = main.result
        language = main.target_language
        main.translated_result = None
        main.translated_language = None

        def apply(translation: AnalysisResult):
            main.translated_result = translation
            main.translated_language = language

        self._start(
            main.translation,
            lambda: self.orchestrator.translate_result(source, language),
            apply,
        )
        return True

    def translate(self) -> None:
        if self.start_translate():
            self.run_pending(self.main.translation)

    # Story-writer actions

    def _require_script_writer(self) -> ScriptWriterState:
        if self.script_writer is None:
            raise RuntimeError("The story-writer screen is not open")
        return self.script_writer

    def set_duration(self, duration: int) -> None:
        writer = self._require_script_writer()
        writer.duration = max(config.MIN_STORY_MINUTES, min(config.MAX_STORY_MINUTES, int(duration)))

    def set_story_target_language(self, language: Union[Language, str]) -> None:
        self._require_script_writer().story_target_language = Language(language)

    def start_generate_story(self) -> bool:
        writer = self._require_script_writer()
        bundle = writer.input
        duration = writer.duration

        writer.story = None
        writer.translated_story = None
        writer.translation.invalidate()
        writer.translation.error = None

        self._start(
            writer.generation,
            lambda: self.orchestrator.generate_script(bundle.result, duration, bundle.language),
            lambda story: setattr(writer, "story", story),
        )
        return True

    def generate_story(self) -> None:
        if self.start_generate_story():
            self.run_pending(self._require_script_writer().generation)

    def start_translate_story(self) -> bool:
        writer = self._require_script_writer()
        if not writer.story:
            return False

        story = writer.story
        language = writer.story_target_language
        writer.translated_story = None

        self._start(
            writer.translation,
            lambda: self.orchestrator.translate_story(story, language),
            lambda translated: setattr(writer, "translated_story", translated),
        )
        return True

    def translate_story(self) -> None:
        if self.start_translate_story():
            self.run_pending(self._require_script_writer().translation)

    # Request plumbing

    def _start(self, action: ActionState, request: Callable, apply: Callable) -> int:
        generation = action.begin()
        action.pending = lambda: self._run(action, generation, request, apply)
        return generation

    def run_pending(self, action: ActionState) -> bool:
        """
        Send the queued request of ``action``, if any.

        The request stays queued until it returns, so a script run that is
        interrupted mid-request sends it again on the next run.

        Returns:
            True if a request was sent
        """
        pending = action.pending
        if pending is None:
            return False
        try:
            pending()
        except Exception:
            if action.pending is pending:
                action.pending = None
            raise
        if action.pending is pending:
            action.pending = None
        return True

    def _run(self, action: ActionState, generation: int, request: Callable, apply: Callable) -> None:
        """Issue one request and apply its outcome if it is still the latest for ``action``."""
        try:
            value = request()
        except OperationFailedError as e:
            logging.error(f"{action.name} failed: {e}")
            action.fail(generation, user_message_for(e))
            return
        except Exception as e:
            logging.exception(f"Unexpected error during {action.name}: {e}")
            action.fail(generation, user_message_for(e))
            raise

        if action.succeed(generation):
            apply(value)
