import unittest

from packages.miw_catalog.domain import Role
from packages.miw_generators import heuristics
from packages.miw_session.dto import ConversationTurn
from packages.miw_session.state import TurnSpeaker

BACKEND = Role(
    key="backend-developer",
    name="Backend Developer",
    skills=("APIs", "databases", "server architecture", "security", "scalability"),
)


def _turn(speaker, text):
    return ConversationTurn(speaker=speaker, text=text)


class TestQuestionTemplates(unittest.TestCase):
    def test_01_opening_uses_first_three_skills(self):
        question = heuristics.opening_question(BACKEND, "whatever")
        self.assertIn("APIs, databases, server architecture on your resume", question)
        self.assertNotIn("security", question)

    def test_02_follow_up_after_user_answer(self):
        history = [_turn(TurnSpeaker.AI, "Q1"), _turn(TurnSpeaker.USER, "my answer")]
        self.assertEqual(heuristics.follow_up_question(BACKEND, history), heuristics.FOLLOW_UP_AFTER_ANSWER)

    def test_03_follow_up_without_user_answer(self):
        self.assertEqual(heuristics.follow_up_question(BACKEND, []), heuristics.FOLLOW_UP_GENERIC)
        history = [_turn(TurnSpeaker.AI, "Q1"), _turn(TurnSpeaker.USER, "")]
        self.assertEqual(heuristics.follow_up_question(BACKEND, history), heuristics.FOLLOW_UP_GENERIC)


class TestSkillAssessment(unittest.TestCase):
    def test_01_case_insensitive_substring_match(self):
        assessment = heuristics.assess_skills(BACKEND, "Experienced with apis and DATABASES")
        self.assertEqual(assessment.strengths, ["APIs", "databases"])
        self.assertEqual(assessment.improvements, ["server architecture", "security", "scalability"])
        # 6 + floor((2 - 3) / 2) = 5
        self.assertEqual(assessment.score, 5)

    def test_02_only_first_five_skills(self):
        role = Role(key="r", name="R", skills=("a1", "b2", "c3", "d4", "e5", "f6"))
        assessment = heuristics.assess_skills(role, "f6")
        self.assertNotIn("f6", assessment.strengths + assessment.improvements)

    def test_03_score_is_clamped(self):
        cases = [(0, 5, 4), (5, 0, 8), (1, 4, 4), (4, 1, 7), (0, 0, 6), (20, 0, 9), (0, 20, 4)]
        for strengths, improvements, expected in cases:
            with self.subTest(strengths=strengths, improvements=improvements):
                assessment = heuristics.SkillAssessment(
                    strengths=["s"] * strengths, improvements=["i"] * improvements
                )
                self.assertTrue(heuristics.MIN_SCORE <= assessment.score <= heuristics.MAX_SCORE)
                self.assertEqual(assessment.score, expected)


class TestFeedbackReport(unittest.TestCase):
    def test_01_deterministic_and_ignores_history(self):
        resume = "APIs, databases, security"
        first = heuristics.feedback(BACKEND, resume, [_turn(TurnSpeaker.USER, "long answer")])
        second = heuristics.feedback(BACKEND, resume, [])
        self.assertEqual(first, second)
        self.assertTrue(
            first.startswith("Overall Performance Score: 6/10\n\nStrengths:\n- APIs\n- databases\n- security")
        )
        self.assertIn("Focus learning on: server architecture, scalability", first)

    def test_02_defaults_for_empty_resume(self):
        report = heuristics.feedback(BACKEND, None)
        self.assertTrue(report.startswith("Overall Performance Score: 4/10"))
        self.assertIn(heuristics.DEFAULT_STRENGTH, report)
        self.assertIn(heuristics.DEFAULT_COMPETENCY, report)
        self.assertIn("Focus learning on: APIs, databases, server architecture", report)

    def test_03_sections_in_order(self):
        report = heuristics.feedback(BACKEND, "apis databases server architecture security scalability")
        headings = [
            "Overall Performance Score",
            "Strengths:",
            "Areas for Improvement:",
            "Technical Competency:",
            "Communication Skills:",
            "Final Recommendation:",
            "Specific Next Steps:",
        ]
        positions = [report.index(h) for h in headings]
        self.assertEqual(positions, sorted(positions))
        self.assertIn(heuristics.DEFAULT_IMPROVEMENT, report)
        self.assertTrue(report.endswith(heuristics.STORIES_NOTE + "\n"))


if __name__ == "__main__":
    unittest.main()
