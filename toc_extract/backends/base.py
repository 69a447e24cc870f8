"""Abstract interface for PDF -> text extraction backends."""

from abc import ABC, abstractmethod
from pathlib import Path

from toc_extract.models import RawDocument


class TextExtractionError(Exception):
    """Raised when a backend cannot read a PDF (missing, encrypted, corrupt)."""


class TextExtractionBackend(ABC):
    """Interface that each text extraction backend must implement."""

    @abstractmethod
    def extract(self, pdf_path: Path) -> RawDocument:
        """
        Read the PDF at pdf_path and return its full plain text, page count and
        title/author metadata. Raises TextExtractionError on failure.
        """
        ...

    @abstractmethod
    def extract_bytes(self, data: bytes) -> RawDocument:
        """Same as extract(), for PDF content already in memory."""
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """Backend identifier (e.g. 'pymupdf')."""
        ...
