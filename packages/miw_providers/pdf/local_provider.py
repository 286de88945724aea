import io
import time

from pypdf import PdfReader
from pypdf.errors import ParseError, PdfReadError

from packages.miw_core.dto import PDFExtractionResultDTO, PDFPageDTO
from packages.miw_core.errors import BadInputError, InternalServiceError, MIWBaseError
from packages.miw_core.logging import get_logger
from packages.miw_providers.pdf.base import IPDFProvider

MAX_PAGES = 50

INVALID_PDF_MESSAGE = (
    "The uploaded file is not a valid PDF or has an invalid structure. "
    "Please upload a different PDF."
)
UNEXPECTED_ERROR_MESSAGE = "Failed to upload resume due to an unexpected error."


class LocalPDFProvider(IPDFProvider):
    """
    Local PDF Text Extractor using pypdf.
    Structural parse failures are the caller's fault (BadInput); anything
    else is reported as an internal error.
    """

    def __init__(self, max_pages: int = MAX_PAGES):
        self.max_pages = max_pages
        self.logger = get_logger("MIW.provider.pdf.local")

    def extract_text(self, payload: bytes) -> PDFExtractionResultDTO:
        start_time = time.time()

        try:
            reader = PdfReader(io.BytesIO(payload))

            # 1. Validation: Encryption
            if reader.is_encrypted:
                self.logger.warning("PDF Validation Failed: Encrypted PDF.")
                raise BadInputError(INVALID_PDF_MESSAGE, details={"reason": "ENCRYPTED_PDF"})

            # 2. Validation: Page Count
            num_pages = len(reader.pages)
            if num_pages > self.max_pages:
                self.logger.warning(f"PDF Validation Failed: Too many pages ({num_pages} > {self.max_pages}).")
                raise BadInputError(
                    f"PDF exceeds maximum page limit ({self.max_pages}). Current: {num_pages}",
                    details={"reason": "TOO_MANY_PAGES", "num_pages": num_pages}
                )

            # 3. Text Extraction
            pages_dto = []
            full_text_builder = []
            total_chars = 0

            for i, page in enumerate(reader.pages):
                page_text = (page.extract_text() or "").strip()
                if page_text:
                    pages_dto.append(PDFPageDTO(page_number=i + 1, text=page_text))
                    full_text_builder.append(page_text)
                    total_chars += len(page_text)

            full_text = "\n\n".join(full_text_builder)

            # Image-only PDFs are accepted with empty text
            if not full_text:
                self.logger.warning("PDF has no text layer (Image/Scan). Continuing with empty resume text.")

            # 4. Logging Metrics
            latency_ms = int((time.time() - start_time) * 1000)
            self.logger.info(
                f"PDF Extraction Success. Pages: {num_pages}, Chars: {total_chars}, Time: {latency_ms}ms."
            )

            return PDFExtractionResultDTO(
                full_text=full_text,
                pages=pages_dto,
                metadata={
                    "num_pages": num_pages,
                    "file_size_bytes": len(payload),
                    "extraction_method": "pypdf",
                    "latency_ms": latency_ms
                }
            )

        except MIWBaseError:
            raise
        except (PdfReadError, ParseError) as e:
            self.logger.warning(f"PDF Validation Failed: invalid PDF structure ({e}).")
            raise BadInputError(INVALID_PDF_MESSAGE, details={"reason": "INVALID_PDF_STRUCTURE"}) from e
        except Exception as e:
            self.logger.exception("Unexpected error during PDF extraction.")
            raise InternalServiceError(UNEXPECTED_ERROR_MESSAGE) from e
