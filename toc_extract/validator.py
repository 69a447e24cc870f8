"""
Entry validation and scan termination.

The scan is a two-state machine:

  SEARCHING  no entry accepted yet; non-matching lines are ignored
  IN_TOC     at least one entry accepted; non-matching lines count as misses,
             and the scan stops after ``miss_limit`` consecutive misses or on a
             body-start marker line ("Introduction", "Chapter 1", ...)
"""

import logging
import re
from enum import Enum

from toc_extract.front_matter import front_matter_category, is_residual_front_matter
from toc_extract.models import ExtractionConfig, ExtractionMode, StopReason
from toc_extract.patterns import Candidate, has_structural_prefix

log = logging.getLogger(__name__)

# Leftovers of running headers/footers: "Page 4", "P. 12", "P12"
_PAGE_REFERENCE_RE = re.compile(r"^(?:page\b|p\.|p\s*\d+)", re.IGNORECASE)


class ScanState(str, Enum):
    SEARCHING = "searching"
    IN_TOC = "in_toc"


class EntryValidator:
    """Accept or reject candidates and decide when the TOC has ended."""

    def __init__(self, mode: ExtractionMode, config: ExtractionConfig | None = None):
        self.mode = mode
        self.config = config or ExtractionConfig()
        self.state = ScanState.SEARCHING
        self.consecutive_misses = 0
        self.stop_reason: StopReason | None = None

    @property
    def strict(self) -> bool:
        return self.mode == ExtractionMode.STRICT

    @property
    def stopped(self) -> bool:
        return self.stop_reason is not None

    def rejection_reason(self, candidate: Candidate) -> str | None:
        """Return why a candidate fails the bounds/sanity checks, or None if it passes."""
        cfg = self.config
        if not 0 < candidate.page < cfg.max_page:
            return f"page {candidate.page} out of range"
        n = len(candidate.title)
        if n < cfg.min_title_length:
            return "title too short"
        if n > cfg.max_title_length:
            return "title too long"
        if not self.strict:
            if n >= cfg.loose_max_title_length and not has_structural_prefix(candidate.label):
                return "title too long for an unnumbered entry"
            return None
        category = front_matter_category(candidate.label)
        if category is not None:
            return f"front matter ({category})"
        if _PAGE_REFERENCE_RE.match(candidate.label):
            return "page reference"
        return None

    def accepts(self, candidate: Candidate) -> bool:
        reason = self.rejection_reason(candidate)
        if reason is not None:
            log.debug("Rejected %r: %s", candidate.label, reason)
            return False
        return True

    def record_hit(self) -> None:
        """An entry was accepted: enter IN_TOC and reset the miss counter."""
        self.state = ScanState.IN_TOC
        self.consecutive_misses = 0

    def record_miss(self) -> bool:
        """A line yielded no entry. Returns True when the scan should stop."""
        if self.state == ScanState.SEARCHING:
            return False
        self.consecutive_misses += 1
        if self.consecutive_misses >= self.config.miss_limit:
            log.debug("%d consecutive non-entry lines; TOC ended", self.consecutive_misses)
            self.stop_reason = StopReason.MISS_LIMIT
            return True
        return False

    def record_body_marker(self, line: str) -> bool:
        """A body-start marker line was seen. Returns True when the scan should stop."""
        if self.state == ScanState.SEARCHING:
            return False
        log.debug("Body marker %r after TOC entries; TOC ended", line)
        self.stop_reason = StopReason.BODY_MARKER
        return True

    def final_filter(self, candidates: list[Candidate]) -> list[Candidate]:
        """Strict mode: drop accepted entries that still look like front matter."""
        if not self.strict:
            return list(candidates)
        kept = []
        for c in candidates:
            if is_residual_front_matter(c.label, c.title):
                log.debug("Final pass dropped %r", c.label)
                continue
            kept.append(c)
        return kept
