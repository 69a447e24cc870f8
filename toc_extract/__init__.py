"""
TOC Extract: recover a hierarchical table of contents from PDF text and render it as HTML.

Use as a library:

    from toc_extract import extract_toc_html
    html = extract_toc_html(pdf_text)

    from toc_extract import extract_toc_from_pdf
    document, result = extract_toc_from_pdf("path/to/course.pdf")

Or run the CLI:

    toc-extract extract path/to/course.pdf -o toc.html
"""

from toc_extract.api import extract_toc_from_pdf, extract_toc_html
from toc_extract.core import extract_entries, extract_toc
from toc_extract.models import (
    ExtractionConfig,
    ExtractionMode,
    ExtractionOutcome,
    ExtractionResult,
    RawDocument,
    StopReason,
    TOCEntry,
)
from toc_extract.render import render_toc_html

__all__ = [
    "extract_toc",
    "extract_toc_html",
    "extract_toc_from_pdf",
    "extract_entries",
    "render_toc_html",
    "ExtractionConfig",
    "ExtractionMode",
    "ExtractionOutcome",
    "ExtractionResult",
    "RawDocument",
    "StopReason",
    "TOCEntry",
]
