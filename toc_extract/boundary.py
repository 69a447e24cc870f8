"""
Boundary locator: find the character window of the text that holds the TOC.

Strict path: a line that is exactly "Table of Contents" / "Contents" (any case).
The window runs from the end of that line to the first body-start marker line
("Introduction", "Chapter 1", "Overview", ...), capped at ``strict_window_chars``.

Loose path: if no such heading line exists, the first "Table of Contents"
anywhere, or "Contents" at the end of a line, starts a window of
``loose_window_chars``. No front-matter filtering is applied to it.
"""

import logging
import re
from dataclasses import dataclass

from toc_extract.models import ExtractionConfig, ExtractionMode

log = logging.getLogger(__name__)

HEADING_RE = re.compile(
    r"^[ \t]*(?:table[ \t]+of[ \t]+contents|contents)[ \t]*:?[ \t]*$",
    re.IGNORECASE | re.MULTILINE,
)
LOOSE_HEADING_RE = re.compile(
    r"table\s+of\s+contents|\bcontents[ \t]*$",
    re.IGNORECASE | re.MULTILINE,
)

# Lines that mark the start of the document body
BODY_MARKERS = [
    r"introduction",
    r"chapter[ \t]+1",
    r"section[ \t]+1",
    r"part[ \t]+i",
    r"getting[ \t]+started",
    r"how[ \t]+to[ \t]+use",
    r"instructions",
    r"course[ \t]+information",
    r"overview",
]
_BODY_MARKER_ALT = "|".join(BODY_MARKERS)
BODY_MARKER_LINE_RE = re.compile(
    rf"^[ \t]*(?:{_BODY_MARKER_ALT})[ \t]*$", re.IGNORECASE | re.MULTILINE
)
_BODY_MARKER_RE = re.compile(rf"(?:{_BODY_MARKER_ALT})", re.IGNORECASE)


@dataclass(frozen=True)
class TOCWindow:
    """Character offsets [start, end) of the TOC region and how it was found."""

    start: int
    end: int
    mode: ExtractionMode
    heading: str = ""
    end_marker: str | None = None


def is_body_marker(line: str) -> bool:
    """True if the whole (stripped) line is a body-start marker."""
    return bool(_BODY_MARKER_RE.fullmatch(" ".join(line.split())))


def find_heading(text: str) -> re.Match | None:
    """First line that is a TOC heading on its own."""
    return HEADING_RE.search(text)


def locate_toc_window(text: str, config: ExtractionConfig | None = None) -> TOCWindow | None:
    """Return the TOC window, or None when neither heading search succeeds."""
    config = config or ExtractionConfig()
    m = find_heading(text)
    if m:
        start = m.end()
        limit = min(len(text), start + config.strict_window_chars)
        end = limit
        marker = BODY_MARKER_LINE_RE.search(text, start)
        end_marker = None
        if marker and marker.start() < limit:
            end = marker.start()
            end_marker = marker.group(0).strip()
        log.info(
            "TOC heading %r at offset %d; window %d-%d (%s)",
            m.group(0).strip(), m.start(), start, end,
            f"ends at {end_marker!r}" if end_marker else "no end marker",
        )
        return TOCWindow(
            start=start,
            end=end,
            mode=ExtractionMode.STRICT,
            heading=m.group(0).strip(),
            end_marker=end_marker,
        )

    m = LOOSE_HEADING_RE.search(text)
    if m:
        start = m.start()
        end = min(len(text), start + config.loose_window_chars)
        log.info("No TOC heading line; loose window %d-%d after %r", start, end, m.group(0).strip())
        return TOCWindow(start=start, end=end, mode=ExtractionMode.LOOSE, heading=m.group(0).strip())

    log.info("No 'Contents' heading found")
    return None
