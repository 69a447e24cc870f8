"""
Extraction pipeline: raw text -> TOC window -> filtered lines -> validated entries.

Pure and synchronous; never raises for malformed or TOC-less text. Absence of a
TOC is reported through ``ExtractionResult.outcome``.
"""

import logging

from toc_extract.boundary import TOCWindow, is_body_marker, locate_toc_window
from toc_extract.front_matter import is_front_matter
from toc_extract.models import (
    ExtractionConfig,
    ExtractionMode,
    ExtractionOutcome,
    ExtractionResult,
    RawDocument,
    StopReason,
    TOCEntry,
)
from toc_extract.patterns import Candidate, match_entry
from toc_extract.render import render_toc_html
from toc_extract.validator import EntryValidator

log = logging.getLogger(__name__)


def normalize_newlines(text: str) -> str:
    """Unify \\r\\n, \\r and form feeds (page breaks) to \\n. Window offsets refer to this text."""
    return text.replace("\r\n", "\n").replace("\r", "\n").replace("\f", "\n")


def split_lines(text: str) -> list[str]:
    """Stripped, non-empty lines."""
    return [s for s in (line.strip() for line in text.split("\n")) if s]


def scan_window(
    lines: list[str],
    mode: ExtractionMode,
    config: ExtractionConfig | None = None,
) -> tuple[list[Candidate], StopReason, int]:
    """
    Run filter -> match -> validate over window lines.

    Returns (accepted candidates after the final filter, stop reason, lines visited).
    """
    validator = EntryValidator(mode, config)
    strict = mode == ExtractionMode.STRICT
    accepted: list[Candidate] = []
    visited = 0
    for line in lines:
        visited += 1
        if is_body_marker(line) and validator.record_body_marker(line):
            break
        if strict and is_front_matter(line):
            log.debug("Front matter: %r", line)
            continue
        candidate = match_entry(line)
        if candidate is not None and validator.accepts(candidate):
            accepted.append(candidate)
            validator.record_hit()
            continue
        if validator.record_miss():
            break
    stop_reason = validator.stop_reason or StopReason.WINDOW_EXHAUSTED
    return validator.final_filter(accepted), stop_reason, visited


def _to_entries(candidates: list[Candidate]) -> list[TOCEntry]:
    return [TOCEntry(title=c.title, page=c.page, level=c.level) for c in candidates]


def extract_entries(text: str, config: ExtractionConfig | None = None) -> ExtractionResult:
    """Locate the TOC in ``text`` and extract its entries (no rendering)."""
    config = config or ExtractionConfig()
    text = normalize_newlines(text or "")
    window = locate_toc_window(text, config)
    if window is None and config.full_text_fallback:
        log.info("Scanning whole text in loose mode")
        window = TOCWindow(start=0, end=len(text), mode=ExtractionMode.LOOSE)
    if window is None:
        return ExtractionResult(outcome=ExtractionOutcome.NO_HEADING)

    lines = split_lines(text[window.start:window.end])
    candidates, stop_reason, visited = scan_window(lines, window.mode, config)
    entries = _to_entries(candidates)
    outcome = ExtractionOutcome.EXTRACTED if entries else ExtractionOutcome.NO_ENTRIES
    log.info(
        "%s mode: %d entries from %d/%d lines (%s)",
        window.mode.value, len(entries), visited, len(lines), stop_reason.value,
    )
    return ExtractionResult(
        entries=entries,
        outcome=outcome,
        mode=window.mode,
        stop_reason=stop_reason,
        window=(window.start, window.end),
        lines_scanned=visited,
    )


def extract_toc(
    document: RawDocument | str,
    config: ExtractionConfig | None = None,
) -> ExtractionResult:
    """Full pipeline: extract entries and render them; ``result.html`` holds the fragment."""
    text = document.text if isinstance(document, RawDocument) else document
    result = extract_entries(text, config)
    result.html = render_toc_html(result.entries, result.outcome)
    return result
