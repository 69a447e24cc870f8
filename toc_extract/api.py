"""
Public API: extract a table of contents from code.

    from toc_extract import extract_toc_html, extract_toc_from_pdf
    html = extract_toc_html(text)
    document, result = extract_toc_from_pdf("course.pdf")
"""

from pathlib import Path

from toc_extract.backends import get_backend
from toc_extract.core import extract_toc
from toc_extract.models import ExtractionConfig, ExtractionResult, RawDocument


def extract_toc_html(
    document: RawDocument | str,
    config: ExtractionConfig | None = None,
) -> str:
    """Return the TOC as an HTML fragment (a placeholder element when none is found)."""
    return extract_toc(document, config).html


def extract_toc_from_pdf(
    pdf_path: str | Path,
    *,
    backend: str = "pymupdf",
    config: ExtractionConfig | None = None,
) -> tuple[RawDocument, ExtractionResult]:
    """
    Read a PDF with a text extraction backend, then run the TOC pipeline.

    Args:
        pdf_path: Path to the PDF file.
        backend: Text extraction backend ('pymupdf' default).
        config: Extraction thresholds; defaults when None.

    Returns:
        (document text and info, extraction result with rendered html).

    Raises:
        KeyError: unknown backend.
        TextExtractionError: the PDF could not be read.
    """
    backend_cls = get_backend(backend)
    document = backend_cls().extract(Path(pdf_path))
    return document, extract_toc(document, config)
