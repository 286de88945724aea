import threading
import unittest
from datetime import timedelta

from packages.miw_core.time import utc_now
from packages.miw_service.concurrency import ConcurrencyManager
from packages.miw_service.session_service import InterviewService
from tests.helpers import build_service, make_pdf


class TestConcurrencyManager(unittest.TestCase):
    def setUp(self):
        self.manager = ConcurrencyManager(timeout=0.05)

    def test_01_lock_times_out_while_held(self):
        with self.manager.acquire_lock("s1"):
            with self.assertRaises(BlockingIOError):
                with self.manager.acquire_lock("s1"):
                    pass

    def test_02_locks_are_per_session(self):
        with self.manager.acquire_lock("s1"):
            with self.manager.acquire_lock("s2"):
                pass

    def test_03_released_after_error(self):
        with self.assertRaises(RuntimeError):
            with self.manager.acquire_lock("s1"):
                raise RuntimeError("boom")
        with self.manager.acquire_lock("s1"):
            pass


class TestConcurrentAnswers(unittest.TestCase):
    def test_01_answers_on_one_session_are_serialised(self):
        service = build_service()
        session_id = service.upload_resume("cv.pdf", make_pdf("APIs")).session_id
        service.start_interview(session_id, "backend-developer")

        errors = []

        def answer(i):
            try:
                service.submit_answer(session_id, f"answer {i}")
            except Exception as e:
                errors.append(e)

        threads = [threading.Thread(target=answer, args=(i,)) for i in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        self.assertEqual(errors, [])
        session = service.repository.get_state(session_id)
        # opening question + 8 answers + 8 follow-ups
        self.assertEqual(len(session.history), 17)
        self.assertTrue(session.cursor.is_fallback)

    def test_02_lock_registry_follows_store_capacity(self):
        """Scenario: sessions evicted for capacity drop their lock entries"""
        service = build_service(MAX_SESSIONS=2)
        for _ in range(50):
            session_id = service.upload_resume("cv.pdf", make_pdf("APIs")).session_id
            service.start_interview(session_id, "backend-developer")

        self.assertEqual(service.repository.count(), 2)
        self.assertLessEqual(len(service.concurrency_manager._locks), 2)

    def test_03_lock_dropped_when_session_expires(self):
        service = build_service(SESSION_TTL_SECONDS=60)
        session_id = service.upload_resume("cv.pdf", make_pdf("APIs")).session_id
        service.start_interview(session_id, "backend-developer")
        self.assertIn(session_id, service.concurrency_manager._locks)

        session = service.repository.get_state(session_id)
        session.upload_time = utc_now() - timedelta(minutes=5)
        self.assertEqual(service.repository.purge_expired(), 1)
        self.assertNotIn(session_id, service.concurrency_manager._locks)

    def test_04_services_share_one_listener(self):
        service = build_service()
        for _ in range(3):
            InterviewService(
                repository=service.repository,
                catalog=service.catalog,
                pdf_provider=service.pdf_provider,
                config=service.config,
                concurrency_manager=service.concurrency_manager,
            )
        self.assertEqual(len(service.repository._eviction_listeners), 1)


if __name__ == "__main__":
    unittest.main()
