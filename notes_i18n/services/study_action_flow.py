"""
Study action flow

One pending AI action (summary, flashcards, quiz) moves through

    IDLE -> CHECKING_TRANSLATION -> EXECUTING -> DONE
    IDLE -> CHECKING_TRANSLATION -> AWAITING_USER_CHOICE
         -> USE_SOURCE:      EXECUTING -> DONE
         -> TRANSLATE_FIRST: TRANSLATING -> EXECUTING -> DONE

and any active state may end in FAILED. The flow never retries; failures of
the collaborators propagate to the caller unchanged.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Awaitable, Callable, Dict, FrozenSet, List, Optional

from notes_i18n.exceptions import InvalidActionTransitionError, NoTextAvailableError
from notes_i18n.i18n.messages import no_text_available_message
from notes_i18n.interfaces.collaborators import StudyAidGenerator, Translator
from notes_i18n.models.collaborators import TranslationRequest, TranslationResult
from notes_i18n.models.i18n import LanguageCode
from notes_i18n.services.language_resolution import (
    apply_translation,
    needs_translation_prompt,
    plan_translation,
    text_for_action,
)
from notes_i18n.utils.app_logger import get_i18n_logger
from notes_i18n.value_objects.versioned_content import VersionedContentStore

logger = get_i18n_logger("study_action")


class ActionState(str, Enum):
    IDLE = "idle"
    CHECKING_TRANSLATION = "checking_translation"
    AWAITING_USER_CHOICE = "awaiting_user_choice"
    TRANSLATING = "translating"
    EXECUTING = "executing"
    DONE = "done"
    FAILED = "failed"


class TranslationChoice(str, Enum):
    USE_SOURCE = "use_source"
    TRANSLATE_FIRST = "translate_first"


_TRANSITIONS: Dict[ActionState, FrozenSet[ActionState]] = {
    ActionState.IDLE: frozenset({ActionState.CHECKING_TRANSLATION}),
    ActionState.CHECKING_TRANSLATION: frozenset(
        {ActionState.AWAITING_USER_CHOICE, ActionState.EXECUTING, ActionState.FAILED}
    ),
    ActionState.AWAITING_USER_CHOICE: frozenset(
        {ActionState.EXECUTING, ActionState.TRANSLATING, ActionState.FAILED}
    ),
    ActionState.TRANSLATING: frozenset({ActionState.EXECUTING, ActionState.FAILED}),
    ActionState.EXECUTING: frozenset({ActionState.DONE, ActionState.FAILED}),
    ActionState.DONE: frozenset(),
    ActionState.FAILED: frozenset(),
}


class StudyActionFlow:
    """
    State of one AI action for a document and study language.

    Synchronous: the async driver (run_study_action) or a UI layer calls the
    transition methods as collaborator results arrive.
    """

    def __init__(self, store: VersionedContentStore, study_language: LanguageCode):
        self.store = store
        self.study_language = study_language
        self.state = ActionState.IDLE
        self.history: List[ActionState] = [ActionState.IDLE]
        self.error_code: Optional[str] = None
        self.output: Any = None
        self._text: Optional[str] = None

    def _move(self, target: ActionState, attempted: str) -> None:
        if target not in _TRANSITIONS[self.state]:
            raise InvalidActionTransitionError(self.state.value, attempted)
        logger.debug(f"Study action ({self.study_language}): {self.state.value} -> {target.value}")
        self.state = target
        self.history.append(target)

    def _begin_execution(self, attempted: str) -> None:
        text = text_for_action(self.store, self.study_language)
        if text is None:
            self.error_code = "NO_TEXT_AVAILABLE"
            self._move(ActionState.FAILED, attempted)
            return
        self._text = text
        self._move(ActionState.EXECUTING, attempted)

    @property
    def text(self) -> str:
        """Text the AI action consumes; only defined while executing or done."""
        if self.state not in (ActionState.EXECUTING, ActionState.DONE) or self._text is None:
            raise InvalidActionTransitionError(self.state.value, "read action text")
        return self._text

    @property
    def is_finished(self) -> bool:
        return self.state in (ActionState.DONE, ActionState.FAILED)

    def request(self) -> ActionState:
        """User asked for generation: check whether the study language has its own text."""
        self._move(ActionState.CHECKING_TRANSLATION, "request")
        if needs_translation_prompt(self.store, self.study_language):
            self._move(ActionState.AWAITING_USER_CHOICE, "request")
        else:
            self._begin_execution("request")
        return self.state

    def choose(self, choice: TranslationChoice) -> Optional[TranslationRequest]:
        """
        Apply the user's answer to the translation prompt.

        Returns:
            The request to send to the translator when translating first, else None
        """
        if self.state != ActionState.AWAITING_USER_CHOICE:
            raise InvalidActionTransitionError(self.state.value, f"choose {choice.value}")

        if choice == TranslationChoice.TRANSLATE_FIRST:
            plan = plan_translation(self.store, self.study_language)
            if plan.needs_request:
                self._move(ActionState.TRANSLATING, "translate first")
                return plan.request
            logger.info(
                f"Nothing to translate into '{self.study_language}' ({plan.outcome.value}), using current text"
            )

        self._begin_execution(f"choose {choice.value}")
        return None

    def complete_translation(self, result: TranslationResult) -> ActionState:
        """Record the translator's answer as an automated version and proceed."""
        if self.state != ActionState.TRANSLATING:
            raise InvalidActionTransitionError(self.state.value, "complete translation")
        apply_translation(self.store, self.study_language, result)
        self._begin_execution("complete translation")
        return self.state

    def finish(self, output: Any = None) -> ActionState:
        self._move(ActionState.DONE, "finish")
        self.output = output
        return self.state

    def fail(self, code: str = "ACTION_FAILED") -> ActionState:
        self._move(ActionState.FAILED, "fail")
        self.error_code = code
        return self.state


ChoiceCallback = Callable[[LanguageCode], Awaitable[TranslationChoice]]


async def run_study_action(
    store: VersionedContentStore,
    study_language: LanguageCode,
    generator: StudyAidGenerator,
    translator: Translator,
    choose: ChoiceCallback,
    ui_language: Optional[str] = None,
) -> StudyActionFlow:
    """
    Drive one AI action end to end.

    Args:
        store: Document content (translations are written into it)
        study_language: Language the study aid is generated for
        generator: Study-aid collaborator
        translator: Translation collaborator, used only on TRANSLATE_FIRST
        choose: Asked for the user's choice when the study language has no own text
        ui_language: Language of the error message, defaults to study_language

    Returns:
        The finished flow; its output holds the generator's result

    Raises:
        NoTextAvailableError: no text in any language can feed the action
    """
    flow = StudyActionFlow(store, study_language)
    flow.request()

    if flow.state == ActionState.AWAITING_USER_CHOICE:
        request = flow.choose(await choose(study_language))
        if request is not None:
            try:
                result = await translator.translate(request)
            except Exception:
                flow.fail("TRANSLATION_FAILED")
                raise
            flow.complete_translation(result)

    if flow.state == ActionState.FAILED:
        raise NoTextAvailableError(
            study_language,
            message=no_text_available_message(ui_language or study_language),
        )

    try:
        output = await generator.generate(flow.text, study_language)
    except Exception:
        flow.fail("GENERATION_FAILED")
        raise
    flow.finish(output)
    logger.info(f"Study action for '{study_language}' completed using {len(flow.text)} chars")
    return flow
