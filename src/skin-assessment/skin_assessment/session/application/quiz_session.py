"""QuizSession — drives one visitor through questions, lead capture, and results."""

import asyncio
import uuid
from collections.abc import Callable

from skin_assessment.analytics.domain.tracker import AnalyticsTracker
from skin_assessment.config.domain.booking import BookingConfig
from skin_assessment.config.domain.pacing import PacingConfig
from skin_assessment.lead.domain.contact import CONTACT_FIELDS, ContactField, LeadContact
from skin_assessment.lead.domain.validation import ValidationResult, validate
from skin_assessment.quiz.domain.question import Question
from skin_assessment.quiz.domain.question_bank import QUESTIONS
from skin_assessment.scoring.domain.classification import Classification
from skin_assessment.scoring.domain.scoring import compute_classification, total_score
from skin_assessment.session.domain.errors import (
    InvalidAnswerError,
    InvalidTransitionError,
    PacingUnavailableError,
    UnknownContactFieldError,
)
from skin_assessment.session.domain.observer import SessionObserver
from skin_assessment.session.domain.phase import (
    CapturingLead,
    Questioning,
    QuizPhase,
    ShowingResults,
)
from skin_assessment.session.domain.view import (
    LeadFormView,
    QuestionView,
    ResultsView,
    SessionView,
)
from skin_assessment.submission.domain.dispatcher import LeadDispatcher

_SUITABLE_CALL_TO_ACTION = (
    "Great news! You're a strong candidate for CO2 laser treatment. "
    "Ready to discuss your personalised treatment plan?"
)
_ALTERNATIVE_CALL_TO_ACTION = (
    "While CO2 laser may not be ideal for your skin type, we offer several "
    "effective alternatives that could achieve your goals safely."
)


class QuizSession:
    """State machine for a single assessment, cycling questioning -> lead -> results.

    The hosting page feeds user intents in (`select_answer`, `update_contact`,
    `submit_lead`, `restart`, `close`) and renders whatever `view()` returns.
    Answers and contact details live only on this instance.

    Two effects run detached and are never awaited here: the paced advance
    after an answer, and the lead dispatch. The results transition does not
    depend on the dispatch outcome, and analytics or dispatch failures are
    reported to the observer instead of raised.
    """

    def __init__(
        self,
        dispatcher: LeadDispatcher,
        tracker: AnalyticsTracker,
        observer: SessionObserver,
        booking: BookingConfig,
        pacing: PacingConfig,
        questions: tuple[Question, ...] = QUESTIONS,
    ) -> None:
        if not questions:
            raise ValueError("A quiz session needs at least one question")
        self._dispatcher = dispatcher
        self._tracker = tracker
        self._observer = observer
        self._booking = booking
        self._pacing = pacing
        self._questions = questions
        self._pending_advance: asyncio.Task[None] | None = None
        self._closed = False
        self._begin()

    # ------------------------------------------------------------------
    # Read side
    # ------------------------------------------------------------------

    @property
    def session_id(self) -> str:
        return self._session_id

    @property
    def phase(self) -> QuizPhase:
        return self._phase

    @property
    def answers(self) -> dict[str, int]:
        return dict(self._answers)

    @property
    def contact(self) -> LeadContact:
        return self._contact.model_copy()

    @property
    def errors(self) -> dict[str, str]:
        return dict(self._errors)

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def pending_transition(self) -> asyncio.Task[None] | None:
        """The paced advance waiting to fire, if any."""
        return self._pending_advance

    def view(self) -> SessionView:
        """Return the render data for the current phase."""
        phase = self._phase
        if isinstance(phase, Questioning):
            question = self._questions[phase.step_index]
            total = len(self._questions)
            return QuestionView(
                step_number=phase.step_index + 1,
                total_questions=total,
                progress_percent=round((phase.step_index + 1) / total * 100),
                question_id=question.id,
                prompt=question.prompt,
                option_labels=tuple(option.label for option in question.options),
            )
        if isinstance(phase, CapturingLead):
            return LeadFormView(contact=self._contact.model_copy(), errors=self.errors)
        return self._results_view(classification=phase.classification)

    # ------------------------------------------------------------------
    # Intents
    # ------------------------------------------------------------------

    def select_answer(self, option_index: int) -> None:
        """Record the chosen option for the current question and move on.

        With a non-zero pacing delay the advance is scheduled on the running
        event loop; choosing again before it fires replaces the recorded score
        without scheduling a second advance.

        Raises:
            InvalidTransitionError: if the session is not questioning.
            InvalidAnswerError: if option_index is not an option of the current question.
            PacingUnavailableError: if an advance must be scheduled but no event
                loop is running. Nothing is recorded in that case.
        """
        phase = self._require_phase(intent="record answer", expected=Questioning)
        question = self._questions[phase.step_index]
        if not 0 <= option_index < len(question.options):
            raise InvalidAnswerError(
                question_id=question.id,
                option_index=option_index,
                option_count=len(question.options),
            )

        loop: asyncio.AbstractEventLoop | None = None
        if self._pending_advance is None and self._pacing.answer_delay_seconds > 0:
            try:
                loop = asyncio.get_running_loop()
            except RuntimeError as exc:
                raise PacingUnavailableError(question_id=question.id) from exc

        score = question.options[option_index].score
        self._answers[question.id] = score
        self._observer.answer_recorded(
            session_id=self._session_id,
            question_id=question.id,
            score=score,
            step_index=phase.step_index,
        )

        if self._pending_advance is not None:
            return
        if loop is None:
            self._advance_from(step_index=phase.step_index)
            return
        self._pending_advance = loop.create_task(
            self._advance_after_delay(step_index=phase.step_index)
        )

    def update_contact(self, field: ContactField, value: str) -> None:
        """Set one lead form field.

        Raises:
            InvalidTransitionError: if the lead form is not showing.
            UnknownContactFieldError: if field is not a contact field.
        """
        self._require_phase(intent="update contact", expected=CapturingLead)
        if field not in CONTACT_FIELDS:
            raise UnknownContactFieldError(field=field)
        setattr(self._contact, field, value)

    def submit_lead(self) -> ValidationResult:
        """Validate the contact and, if valid, dispatch the lead and show results.

        An invalid contact leaves the session on the lead form with per-field
        errors and nothing dispatched.

        Raises:
            InvalidTransitionError: if the lead form is not showing.
        """
        self._require_phase(intent="submit lead", expected=CapturingLead)
        result = validate(self._contact)
        self._errors = dict(result.errors)
        if not result.is_valid:
            self._observer.lead_validation_failed(
                session_id=self._session_id, fields=sorted(result.errors)
            )
            return result

        classification = compute_classification(self._answers)
        self._observer.assessment_classified(
            session_id=self._session_id,
            total_score=total_score(self._answers),
            fitzpatrick_type=int(classification.tier),
        )

        contact = self._contact.model_copy()
        session_id = self._session_id
        self._run_side_effect(
            effect="lead_dispatch",
            action=lambda: self._dispatcher.submit(
                contact=contact, classification=classification
            ),
        )
        self._run_side_effect(
            effect="analytics.lead_submitted",
            action=lambda: self._tracker.lead_submitted(
                session_id=session_id, fitzpatrick_type=int(classification.tier)
            ),
        )
        self._run_side_effect(
            effect="analytics.assessment_completed",
            action=lambda: self._tracker.assessment_completed(
                session_id=session_id, recommendation=classification.display_name
            ),
        )
        self._set_phase(ShowingResults(classification=classification))
        return result

    def restart(self) -> None:
        """Discard all answers and contact details and return to the first question."""
        self._require_open(intent="restart")
        self._cancel_pending_advance()
        self._observer.session_restarted(session_id=self._session_id)
        self._begin()

    def close(self) -> None:
        """Tear the session down. Cancels any pending advance; idempotent."""
        if self._closed:
            return
        self._cancel_pending_advance()
        self._closed = True
        self._observer.session_closed(session_id=self._session_id)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _begin(self) -> None:
        self._session_id = str(uuid.uuid4())
        self._answers: dict[str, int] = {}
        self._contact = LeadContact()
        self._errors: dict[str, str] = {}
        self._phase: QuizPhase = Questioning(step_index=0)
        self._observer.session_started(
            session_id=self._session_id, total_questions=len(self._questions)
        )
        session_id = self._session_id
        self._run_side_effect(
            effect="analytics.assessment_started",
            action=lambda: self._tracker.assessment_started(session_id=session_id),
        )

    def _require_open(self, intent: str) -> None:
        if self._closed:
            raise InvalidTransitionError(intent=intent, phase="closed")

    def _require_phase[P: Questioning | CapturingLead | ShowingResults](
        self, intent: str, expected: type[P]
    ) -> P:
        self._require_open(intent=intent)
        phase = self._phase
        if not isinstance(phase, expected):
            raise InvalidTransitionError(intent=intent, phase=phase.kind)
        return phase

    async def _advance_after_delay(self, step_index: int) -> None:
        await asyncio.sleep(self._pacing.answer_delay_seconds)
        self._pending_advance = None
        self._advance_from(step_index=step_index)

    def _advance_from(self, step_index: int) -> None:
        if step_index < len(self._questions) - 1:
            self._set_phase(Questioning(step_index=step_index + 1))
        else:
            self._set_phase(CapturingLead())

    def _cancel_pending_advance(self) -> None:
        if self._pending_advance is not None:
            self._pending_advance.cancel()
            self._pending_advance = None

    def _set_phase(self, phase: QuizPhase) -> None:
        self._phase = phase
        self._observer.phase_changed(session_id=self._session_id, phase=phase.kind)

    def _run_side_effect(self, effect: str, action: Callable[[], None]) -> None:
        try:
            action()
        except Exception as exc:  # noqa: BLE001
            self._observer.side_effect_failed(
                session_id=self._session_id,
                effect=effect,
                reason=str(exc) or type(exc).__name__,
            )

    def _results_view(self, classification: Classification) -> ResultsView:
        if classification.is_suitable:
            call_to_action = _SUITABLE_CALL_TO_ACTION
            booking_url = self._booking.suitable_url
        else:
            call_to_action = _ALTERNATIVE_CALL_TO_ACTION
            booking_url = self._booking.alternative_url
        return ResultsView(
            classification=classification,
            eligibility_label=classification.eligibility.label,
            call_to_action=call_to_action,
            booking_url=booking_url,
        )
