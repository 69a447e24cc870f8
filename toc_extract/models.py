"""Data models for raw documents, TOC entries, extraction config and results."""

from enum import Enum

from pydantic import BaseModel, Field


class RawDocument(BaseModel):
    """Plain text of a PDF plus document info, as returned by a text-extraction backend."""

    text: str = Field(description="Full plain text of the document")
    page_count: int = Field(default=0, ge=0, description="Number of pages in the source PDF")
    title: str | None = Field(default=None, description="Document title from PDF metadata")
    author: str | None = Field(default=None, description="Document author from PDF metadata")

    model_config = {"frozen": True}


class TOCEntry(BaseModel):
    """One line of a table of contents."""

    title: str = Field(description="Entry title as printed (without leader and page number)")
    page: int = Field(gt=0, description="Printed page number (upper bound enforced by ExtractionConfig.max_page)")
    level: int = Field(default=1, ge=1, description="1-based nesting depth (1 = chapter)")


class ExtractionMode(str, Enum):
    """STRICT: heading found, front matter filtered. LOOSE: fallback scan, no filtering."""

    STRICT = "strict"
    LOOSE = "loose"


class ExtractionOutcome(str, Enum):
    EXTRACTED = "extracted"
    NO_HEADING = "no_heading"
    NO_ENTRIES = "no_entries"


class StopReason(str, Enum):
    """Why the line scan ended."""

    WINDOW_EXHAUSTED = "window_exhausted"
    MISS_LIMIT = "miss_limit"
    BODY_MARKER = "body_marker"


class ExtractionConfig(BaseModel):
    """Thresholds for TOC extraction. Defaults are tuned for course-material PDFs."""

    max_page: int = Field(default=1000, gt=1, description="Reject page numbers >= this value")
    min_title_length: int = Field(default=3, ge=1, description="Reject titles shorter than this")
    max_title_length: int = Field(
        default=150,
        description="Reject titles longer than this (strict mode and loose fallback)",
    )
    loose_max_title_length: int = Field(
        default=100,
        description="Loose mode: titles must be shorter than this unless they carry a structural prefix",
    )
    miss_limit: int = Field(
        default=5,
        ge=1,
        description="Stop scanning after this many consecutive non-entry lines once the TOC has started",
    )
    strict_window_chars: int = Field(
        default=8000,
        gt=0,
        description="Max characters scanned after a TOC heading when no end marker is found",
    )
    loose_window_chars: int = Field(
        default=5000,
        gt=0,
        description="Characters scanned after a loosely matched 'Contents' occurrence",
    )
    full_text_fallback: bool = Field(
        default=False,
        description="If no heading is found at all, scan the whole text in loose mode",
    )


class ExtractionResult(BaseModel):
    """Result of one extraction run."""

    entries: list[TOCEntry] = Field(default_factory=list, description="Accepted entries in document order")
    outcome: ExtractionOutcome = Field(description="extracted / no_heading / no_entries")
    mode: ExtractionMode | None = Field(default=None, description="None when no window was located")
    stop_reason: StopReason | None = Field(default=None, description="None when no scan ran")
    window: tuple[int, int] | None = Field(
        default=None,
        description="(start, end) character offsets of the scanned window",
    )
    lines_scanned: int = Field(default=0, description="Non-empty window lines visited before the scan stopped")
    html: str = Field(default="", description="Rendered HTML fragment (empty until rendered)")

    @property
    def found(self) -> bool:
        return self.outcome == ExtractionOutcome.EXTRACTED
