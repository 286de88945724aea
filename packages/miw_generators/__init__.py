from .heuristics import (
    SkillAssessment,
    assess_skills,
    feedback,
    follow_up_question,
    opening_question,
    render_feedback,
)

__all__ = [
    "SkillAssessment",
    "assess_skills",
    "feedback",
    "follow_up_question",
    "opening_question",
    "render_feedback",
]
