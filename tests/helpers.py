from fastapi.testclient import TestClient

from MIW.api.dependencies import get_interview_service
from MIW.main import create_app
from packages.miw_catalog.service import RoleCatalog
from packages.miw_core.config import MIWConfig
from packages.miw_providers.pdf.local_provider import LocalPDFProvider
from packages.miw_service.session_service import InterviewService
from packages.miw_session.infrastructure.memory_repo import MemorySessionRepository


def _pdf_escape(text: str) -> str:
    return text.replace("\\", "\\\\").replace("(", "\\(").replace(")", "\\)")


def make_pdf(text: str) -> bytes:
    """
    Single-page PDF with one line of Helvetica text.
    Object offsets in the xref table are computed, so pypdf parses it strictly.
    """
    stream = f"BT /F1 12 Tf 72 720 Td ({_pdf_escape(text)}) Tj ET".encode("latin-1")
    objects = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        b"<< /Type /Pages /Kids [3 0 R] /Count 1 >>",
        b"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
        b"/Resources << /Font << /F1 4 0 R >> >> /Contents 5 0 R >>",
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
        b"<< /Length %d >>\nstream\n" % len(stream) + stream + b"\nendstream",
    ]

    out = bytearray(b"%PDF-1.4\n")
    offsets = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += b"%d 0 obj\n" % number + body + b"\nendobj\n"

    xref_pos = len(out)
    out += b"xref\n0 %d\n" % (len(objects) + 1)
    out += b"0000000000 65535 f \n"
    for offset in offsets:
        out += b"%010d 00000 n \n" % offset
    out += b"trailer\n<< /Size %d /Root 1 0 R >>\nstartxref\n%d\n%%%%EOF\n" % (len(objects) + 1, xref_pos)
    return bytes(out)


def build_service(**config_overrides) -> InterviewService:
    """
    Service over a fresh in-memory store, built from config the way the app
    dependencies build it. TTL and capacity limits are off unless overridden.
    """
    overrides = {"SESSION_TTL_SECONDS": 0, "MAX_SESSIONS": 0}
    overrides.update(config_overrides)
    config = MIWConfig.load(**overrides)
    return InterviewService(
        repository=MemorySessionRepository(
            ttl_seconds=config.SESSION_TTL_SECONDS,
            max_sessions=config.MAX_SESSIONS
        ),
        catalog=RoleCatalog(),
        pdf_provider=LocalPDFProvider(),
        config=config,
    )


def build_client(service: InterviewService) -> TestClient:
    app = create_app(service.config)
    app.dependency_overrides[get_interview_service] = lambda: service
    return TestClient(app)
