"""PyMuPDF-based PDF -> plain text extraction."""

import logging
from pathlib import Path

import fitz  # PyMuPDF

from toc_extract.backends.base import TextExtractionBackend, TextExtractionError
from toc_extract.models import RawDocument

log = logging.getLogger(__name__)


def _meta_value(metadata: dict | None, key: str) -> str | None:
    """Metadata string or None (PyMuPDF reports missing fields as '')."""
    if not metadata:
        return None
    value = (metadata.get(key) or "").strip()
    return value or None


class PyMuPDFBackend(TextExtractionBackend):
    """Plain text in reading order, one page after another."""

    def extract(self, pdf_path: Path) -> RawDocument:
        pdf_path = Path(pdf_path)
        if not pdf_path.is_file():
            raise TextExtractionError(f"PDF not found: {pdf_path}")
        try:
            doc = fitz.open(pdf_path)
        except Exception as e:
            raise TextExtractionError(f"Failed to open PDF {pdf_path}: {e}") from e
        return self._read(doc, str(pdf_path))

    def extract_bytes(self, data: bytes) -> RawDocument:
        try:
            doc = fitz.open(stream=data, filetype="pdf")
        except Exception as e:
            raise TextExtractionError(f"Failed to open PDF from bytes: {e}") from e
        return self._read(doc, "<bytes>")

    def _read(self, doc: fitz.Document, source: str) -> RawDocument:
        try:
            if doc.needs_pass:
                raise TextExtractionError(f"PDF is encrypted: {source}")
            pages = [page.get_text("text") for page in doc]
            page_count = len(doc)
            metadata = doc.metadata
        except TextExtractionError:
            raise
        except Exception as e:
            raise TextExtractionError(f"Failed to read text from {source}: {e}") from e
        finally:
            doc.close()
        log.info("Extracted text from %d pages of %s", page_count, source)
        return RawDocument(
            text="\n".join(pages),
            page_count=page_count,
            title=_meta_value(metadata, "title"),
            author=_meta_value(metadata, "author"),
        )

    @property
    def name(self) -> str:
        return "pymupdf"
