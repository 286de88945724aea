from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class Role:
    """
    An engineering job category offered by the interview wizard.
    """
    key: str
    name: str
    skills: Tuple[str, ...] = field(default_factory=tuple)
    question_types: Tuple[str, ...] = field(default_factory=tuple)

    def to_public_dict(self) -> dict:
        return {
            "name": self.name,
            "skills": list(self.skills),
            "questionTypes": list(self.question_types),
        }


@dataclass(frozen=True)
class QuestionBankEntry:
    """
    A predefined question with the answer an interviewer would expect.
    """
    role_key: str
    question: str
    expected_answer: str = ""
