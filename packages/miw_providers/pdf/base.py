from abc import ABC, abstractmethod
from packages.miw_core.dto import PDFExtractionResultDTO

class IPDFProvider(ABC):
    """
    Abstract Base Class for PDF Text Extraction Providers.
    """

    @abstractmethod
    def extract_text(self, payload: bytes) -> PDFExtractionResultDTO:
        """
        Extract text from an in-memory PDF.

        Args:
            payload (bytes): Raw bytes of the uploaded file.

        Returns:
            PDFExtractionResultDTO: Extracted text and metadata.

        Raises:
            BadInputError: The bytes are not a readable PDF.
            InternalServiceError: Any other extraction failure.
        """
        pass
