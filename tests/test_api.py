import unittest
from unittest.mock import patch

from tests.helpers import build_client, build_service, make_pdf


class TestInterviewAPI(unittest.TestCase):
    def setUp(self):
        self.service = build_service()
        self.client = build_client(self.service)
        # Enter the client so lifespan startup/shutdown run
        self.client.__enter__()
        self.addCleanup(self.client.__exit__, None, None, None)

    def _upload(self, text: str = "Experienced with APIs and databases") -> str:
        response = self.client.post(
            "/api/upload-resume",
            files={"resume": ("resume.pdf", make_pdf(text), "application/pdf")},
        )
        self.assertEqual(response.status_code, 200, response.text)
        return response.json()["sessionId"]

    def _start(self, session_id: str, role_key: str):
        return self.client.post("/api/start-interview", json={"sessionId": session_id, "roleKey": role_key})

    def test_01_health(self):
        response = self.client.get("/health")
        self.assertEqual(response.status_code, 200)
        data = response.json()
        for field in ["status", "version", "timestamp"]:
            self.assertIn(field, data)
        self.assertEqual(data["status"], "ok")
        self.assertEqual(data["version"], self.service.config.VERSION)

    def test_02_roles_catalog(self):
        response = self.client.get("/api/roles")
        self.assertEqual(response.status_code, 200)
        roles = response.json()
        self.assertEqual(len(roles), 10)
        self.assertEqual(roles["cloud-engineer"]["name"], "Cloud Engineer")
        self.assertEqual(roles["cloud-engineer"]["questionTypes"][0], "technical")

    def test_03_upload_resume(self):
        response = self.client.post(
            "/api/upload-resume",
            files={"resume": ("resume.pdf", make_pdf("Experienced with APIs and databases"), "application/pdf")},
        )
        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertIs(data["success"], True)
        self.assertTrue(data["sessionId"])
        self.assertEqual(data["message"], "Resume uploaded successfully")
        self.assertIn("APIs", data["resumePreview"])
        self.assertTrue(data["resumePreview"].endswith("..."))

    def test_04_upload_without_file(self):
        response = self.client.post("/api/upload-resume")
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"error": "No resume file uploaded."})

    def test_05_upload_corrupt_pdf(self):
        response = self.client.post(
            "/api/upload-resume",
            files={"resume": ("resume.pdf", b"definitely not a pdf", "application/pdf")},
        )
        self.assertEqual(response.status_code, 400)
        self.assertIn("valid PDF", response.json()["error"])

    def test_06_upload_too_large(self):
        self.service.config.MAX_RESUME_SIZE_MB = 0
        response = self.client.post(
            "/api/upload-resume",
            files={"resume": ("resume.pdf", make_pdf("x"), "application/pdf")},
        )
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"error": "Resume file exceeds 0MB limit."})

    def test_07_backend_first_question(self):
        """Scenario: backend role opens with the first predefined question"""
        session_id = self._upload("Experienced with APIs and databases")
        response = self._start(session_id, "backend-developer")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {
            "success": True,
            "question": "Discuss the principles of designing RESTful APIs and common authentication methods.",
            "roleName": "Backend Developer",
            "sessionId": session_id,
        })

    def test_08_full_interview_flow(self):
        """Scenario: six predefined questions, then fallback follow-ups, then feedback"""
        session_id = self._upload()
        self._start(session_id, "devops-engineer")

        numbers = []
        for i in range(5):
            response = self.client.post(
                "/api/submit-answer", json={"sessionId": session_id, "userAnswer": f"answer {i}"}
            )
            self.assertEqual(response.status_code, 200)
            numbers.append(response.json()["questionNumber"])
        self.assertEqual(numbers, [2, 3, 4, 5, 6])

        response = self.client.post("/api/submit-answer", json={"sessionId": session_id, "userAnswer": "more"})
        data = response.json()
        self.assertEqual(data["questionNumber"], "AI-generated")
        self.assertTrue(data["nextQuestion"].startswith("(Fallback: No more predefined questions or AI unavailable)"))
        self.assertIn("trade-offs", data["nextQuestion"])

        response = self.client.post("/api/get-feedback", json={"sessionId": session_id})
        self.assertEqual(response.status_code, 200)
        feedback = response.json()
        self.assertIs(feedback["success"], True)
        self.assertEqual(feedback["roleName"], "DevOps Engineer")
        self.assertEqual(feedback["totalQuestions"], -1)
        self.assertTrue(
            feedback["feedback"].startswith("(Fallback: AI unavailable for feedback) Overall Performance Score:")
        )
        self.assertEqual(feedback["sessionData"]["fileName"], "resume.pdf")
        self.assertTrue(feedback["sessionData"]["uploadTime"].endswith("Z"))
        self.assertTrue(feedback["sessionData"]["interviewDuration"])

    def test_09_feedback_is_repeatable(self):
        session_id = self._upload("APIs databases security")
        self._start(session_id, "backend-developer")
        first = self.client.post("/api/get-feedback", json={"sessionId": session_id}).json()["feedback"]
        self.client.post(
            "/api/submit-answer", json={"sessionId": session_id, "userAnswer": "something else entirely"}
        )
        second = self.client.post("/api/get-feedback", json={"sessionId": session_id}).json()["feedback"]
        self.assertEqual(first, second)
        self.assertIn("Overall Performance Score: 6/10", first)

    def test_10_answer_and_feedback_need_role(self):
        session_id = self._upload()
        response = self.client.post("/api/submit-answer", json={"sessionId": session_id, "userAnswer": "hi"})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"error": "No role selected for this session"})

        response = self.client.post("/api/get-feedback", json={"sessionId": session_id})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"error": "No role selected for this session"})

    def test_11_unknown_session(self):
        cases = [
            ("/api/start-interview", {"sessionId": "unknown", "roleKey": "backend-developer"}),
            ("/api/submit-answer", {"sessionId": "unknown", "userAnswer": "x"}),
            ("/api/get-feedback", {"sessionId": "unknown"}),
            ("/api/get-feedback", {}),
        ]
        for path, body in cases:
            with self.subTest(path=path, body=body):
                response = self.client.post(path, json=body)
                self.assertEqual(response.status_code, 400)
                self.assertEqual(response.json(), {"error": "Invalid session ID"})

    def test_12_missing_body_is_invalid_session(self):
        response = self.client.post("/api/start-interview")
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"error": "Invalid session ID"})

    def test_13_unknown_role(self):
        session_id = self._upload()
        response = self._start(session_id, "astronaut")
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"error": "Invalid role selected"})

    def test_14_unexpected_error_is_500(self):
        """Scenario: a store failure on each session endpoint surfaces the endpoint's 500 message"""
        session_id = self._upload()
        self._start(session_id, "backend-developer")

        def boom(*args, **kwargs):
            raise RuntimeError("store exploded")

        self.service.repository.get_state = boom
        cases = [
            ("/api/start-interview", {"sessionId": session_id, "roleKey": "backend-developer"},
             "Failed to start interview"),
            ("/api/submit-answer", {"sessionId": session_id, "userAnswer": "x"},
             "Failed to submit answer"),
            ("/api/get-feedback", {"sessionId": session_id},
             "Failed to generate feedback"),
        ]
        for path, body, message in cases:
            with self.subTest(path=path):
                response = self.client.post(path, json=body)
                self.assertEqual(response.status_code, 500)
                self.assertEqual(response.json(), {"error": message})

    def test_15_upload_unexpected_error_is_500(self):
        expected = {"error": "Failed to upload resume due to an unexpected error."}
        files = {"resume": ("resume.pdf", make_pdf("APIs"), "application/pdf")}

        with self.subTest(failure="pdf reader"):
            with patch("packages.miw_providers.pdf.local_provider.PdfReader", side_effect=RuntimeError("boom")):
                response = self.client.post("/api/upload-resume", files=files)
            self.assertEqual(response.status_code, 500)
            self.assertEqual(response.json(), expected)

        with self.subTest(failure="service"):
            with patch.object(self.service.pdf_provider, "extract_text", side_effect=RuntimeError("boom")):
                response = self.client.post("/api/upload-resume", files=files)
            self.assertEqual(response.status_code, 500)
            self.assertEqual(response.json(), expected)

        self.assertEqual(self.service.repository.count(), 0)

    def test_16_cors_does_not_allow_credentials(self):
        response = self.client.get("/api/roles", headers={"Origin": "https://example.com"})
        self.assertEqual(response.headers["access-control-allow-origin"], "*")
        self.assertNotIn("access-control-allow-credentials", response.headers)


class TestGatewayPrefix(unittest.TestCase):
    def test_api_mounted_under_prefix(self):
        service = build_service(GATEWAY_PREFIX="/.netlify/functions/server")
        with build_client(service) as client:
            self.assertEqual(client.get("/.netlify/functions/server/api/roles").status_code, 200)
            self.assertEqual(client.get("/api/roles").status_code, 404)
            self.assertEqual(client.get("/health").status_code, 200)


if __name__ == "__main__":
    unittest.main()
