import logging
from dataclasses import dataclass
from typing import Union

from packages.miw_catalog.service import RoleCatalog
from packages.miw_core.errors import InvalidReferenceError, PreconditionFailedError
from packages.miw_generators import heuristics
from .dto import InterviewSession
from .state import QuestionCursor, SessionStatus, TurnSpeaker

# Logger setup
logger = logging.getLogger("miw.session")

OPENING_FALLBACK_PREFIX = "(Fallback: No predefined questions for this role) "
FOLLOW_UP_FALLBACK_PREFIX = "(Fallback: No more predefined questions or AI unavailable) "
FEEDBACK_FALLBACK_PREFIX = "(Fallback: AI unavailable for feedback) "

NO_ROLE_MESSAGE = "No role selected for this session"


@dataclass
class NextQuestion:
    text: str
    question_number: Union[int, str]


@dataclass
class FeedbackResult:
    text: str
    assessment: heuristics.SkillAssessment
    total_questions: int


class InterviewSessionEngine:
    """
    State machine for a single interview session.

    Selects questions from the role's predefined bank while the cursor is
    indexed and below the cap, then switches to heuristic follow-ups for good.
    The engine mutates the session in place; persisting it is the caller's job.
    """
    def __init__(
        self,
        session: InterviewSession,
        catalog: RoleCatalog,
        max_predefined_questions: int = 10
    ):
        self.session = session
        self.catalog = catalog
        self.max_predefined_questions = max_predefined_questions

    def select_role(self, role_key: str) -> str:
        """
        CREATED -> ROLE_SELECTED.
        Emits the opening question: bank entry 0 when a bank exists, else the heuristic opener.
        """
        role = self.catalog.get_role(role_key)
        if role is None:
            raise InvalidReferenceError("Invalid role selected", details={"role_key": role_key})

        session = self.session
        session.role = role
        session.role_key = role_key

        bank = self.catalog.questions_for(role_key)
        if bank:
            question = bank[0].question
            session.cursor = QuestionCursor.indexed(0)
            logger.info(f"Session {session.session_id}: predefined opening question for {role_key}")
        else:
            question = OPENING_FALLBACK_PREFIX + heuristics.opening_question(role, session.resume_text)
            session.cursor = QuestionCursor.fallback()
            logger.info(f"Session {session.session_id}: no bank for {role_key}, using fallback opener")

        session.append_turn(TurnSpeaker.AI, question)
        session.status = SessionStatus.ROLE_SELECTED
        return question

    def record_answer(self, answer: str) -> NextQuestion:
        """
        Append the user's answer and pick the next question.
        """
        session = self._require_role()
        session.append_turn(TurnSpeaker.USER, answer)

        bank = self.catalog.questions_for(session.role_key)
        cursor = session.cursor or QuestionCursor.fallback()
        next_cursor = cursor.advance(len(bank), self.max_predefined_questions)

        if next_cursor.is_fallback:
            if not cursor.is_fallback:
                logger.info(f"Session {session.session_id}: predefined questions exhausted, switching to fallback")
            question = FOLLOW_UP_FALLBACK_PREFIX + heuristics.follow_up_question(session.role, session.history)
        else:
            question = bank[next_cursor.index].question
            logger.debug(f"Session {session.session_id}: predefined question {next_cursor.question_number}")

        session.cursor = next_cursor
        session.append_turn(TurnSpeaker.AI, question)
        if session.status != SessionStatus.COMPLETED:
            session.status = SessionStatus.IN_PROGRESS
        return NextQuestion(text=question, question_number=next_cursor.question_number)

    def build_feedback(self) -> FeedbackResult:
        """
        Heuristic feedback over the whole session. Marks the session COMPLETED.
        """
        session = self._require_role()
        assessment = heuristics.assess_skills(session.role, session.resume_text)
        text = FEEDBACK_FALLBACK_PREFIX + heuristics.render_feedback(assessment)

        session.status = SessionStatus.COMPLETED
        logger.info(
            f"Session {session.session_id}: feedback generated. "
            f"Score: {assessment.score}, Strengths: {len(assessment.strengths)}"
        )
        cursor = session.cursor or QuestionCursor.fallback()
        return FeedbackResult(text=text, assessment=assessment, total_questions=cursor.legacy_index)

    def _require_role(self) -> InterviewSession:
        if not self.session.has_role:
            raise PreconditionFailedError(NO_ROLE_MESSAGE, details={"session_id": self.session.session_id})
        return self.session
