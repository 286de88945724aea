"""
Local heuristic text generators.

These produce the opening question when a role has no predefined bank, the
follow-up question once the bank is exhausted, and the end-of-interview
feedback report. No model is called; output depends only on the inputs.
"""
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from packages.miw_catalog.domain import Role
from packages.miw_session.state import TurnSpeaker

OPENING_SKILL_COUNT = 3
FEEDBACK_SKILL_COUNT = 5
NEXT_STEP_SKILL_COUNT = 3

BASE_SCORE = 6
MIN_SCORE = 4
MAX_SCORE = 9

OPENING_TEMPLATE = (
    "Hi - thanks for joining. I see experience related to {skills} on your resume. "
    "Can you describe a recent project where you applied those skills, "
    "the challenges you faced, and the outcome?"
)
FOLLOW_UP_AFTER_ANSWER = (
    "Thanks for that detail. Can you build on that by explaining the technical "
    "trade-offs you considered and why you chose the approach you did?"
)
FOLLOW_UP_GENERIC = (
    "Can you walk me through your development process for a feature from design "
    "to deployment, focusing on testing and reliability?"
)

DEFAULT_STRENGTH = "Provided clear examples and showed domain knowledge."
DEFAULT_IMPROVEMENT = "Work on structuring answers with STAR (Situation, Task, Action, Result)."
DEFAULT_COMPETENCY = "Needs deeper technical examples and metrics."
COMMUNICATION_NOTE = (
    "Be concise and use concrete metrics where possible. "
    "Practice structuring answers and summarizing outcomes."
)
RECOMMENDATION_NOTE = (
    "Maybe. Candidate demonstrates potential but would benefit from stronger "
    "depth on a couple of key technologies."
)
STORIES_NOTE = "Prepare 2-3 detailed project stories with metrics and your specific impact."


@dataclass
class SkillAssessment:
    """Partition of a role's leading skills by whether the resume mentions them."""
    strengths: List[str] = field(default_factory=list)
    improvements: List[str] = field(default_factory=list)

    @property
    def score(self) -> int:
        raw = BASE_SCORE + (len(self.strengths) - len(self.improvements)) // 2
        return clamp_score(raw)


def clamp_score(raw: int) -> int:
    return max(MIN_SCORE, min(MAX_SCORE, raw))


def opening_question(role: Role, resume_text: Optional[str] = None) -> str:
    """First question for a role without a predefined bank. Resume content is not inspected."""
    skills = ", ".join(role.skills[:OPENING_SKILL_COUNT])
    return OPENING_TEMPLATE.format(skills=skills)


def follow_up_question(role: Role, history: Sequence) -> str:
    """
    Question asked once the predefined bank is exhausted.
    Only checks whether the latest user turn carries any text.
    """
    last_user = next(
        (turn for turn in reversed(history) if turn.speaker == TurnSpeaker.USER),
        None
    )
    if last_user is not None and last_user.text:
        return FOLLOW_UP_AFTER_ANSWER
    return FOLLOW_UP_GENERIC


def assess_skills(role: Role, resume_text: Optional[str]) -> SkillAssessment:
    """Case-insensitive substring match of the first five role skills against the resume."""
    lowered = (resume_text or "").lower()
    assessment = SkillAssessment()
    for skill in role.skills[:FEEDBACK_SKILL_COUNT]:
        if skill.lower() in lowered:
            assessment.strengths.append(skill)
        else:
            assessment.improvements.append(skill)
    return assessment


def feedback(role: Role, resume_text: Optional[str], history: Sequence = ()) -> str:
    """
    Multi-section feedback report.
    The conversation history is accepted but does not influence the result.
    """
    assessment = assess_skills(role, resume_text)
    return render_feedback(assessment)


def render_feedback(assessment: SkillAssessment) -> str:
    strengths = assessment.strengths
    improvements = assessment.improvements

    strength_lines = "\n- ".join(strengths) if strengths else DEFAULT_STRENGTH
    improvement_lines = "\n- ".join(improvements) if improvements else DEFAULT_IMPROVEMENT
    competency = (
        "Shows familiarity with: " + ", ".join(strengths) if strengths else DEFAULT_COMPETENCY
    )
    focus = ", ".join(improvements[:NEXT_STEP_SKILL_COUNT])

    sections = [
        f"Overall Performance Score: {assessment.score}/10",
        f"Strengths:\n- {strength_lines}",
        f"Areas for Improvement:\n- {improvement_lines}",
        f"Technical Competency:\n- {competency}",
        f"Communication Skills:\n- {COMMUNICATION_NOTE}",
        f"Final Recommendation:\n- {RECOMMENDATION_NOTE}",
        f"Specific Next Steps:\n- Focus learning on: {focus}\n- {STORIES_NOTE}\n",
    ]
    return "\n\n".join(sections)
