"""
Front-matter classifier: recognize administrative noise (credit notices,
governing-body disclaimers, instructions, objectives) that precedes or
interleaves with the real TOC in course-material PDFs.

Only applied in strict mode, i.e. when a TOC heading was found.
"""

import re

from toc_extract.patterns import has_structural_prefix

# Lines shorter than this are never TOC content
MIN_LINE_LENGTH = 3

# (category, pattern) pairs; checked case-insensitively anywhere in the text
FRONT_MATTER_PATTERNS: list[tuple[str, re.Pattern]] = [
    ("credit", re.compile(r"\bcredits?\b(?:\s*(?:hours?|amount|value))?", re.IGNORECASE)),
    ("ceu", re.compile(r"\bceus?\b", re.IGNORECASE)),
    ("governing_body", re.compile(r"governing\s+body", re.IGNORECASE)),
    ("board_number", re.compile(r"board\s+number", re.IGNORECASE)),
    ("continuing_education", re.compile(r"continuing\s+education", re.IGNORECASE)),
    ("instructions", re.compile(r"\binstructions?\s+(?:for|on)\b", re.IGNORECASE)),
    ("how_to", re.compile(r"\bhow\s+to\s+(?:take|complete|use)\b", re.IGNORECASE)),
    ("requirements", re.compile(r"\brequirements?\b", re.IGNORECASE)),
    ("prerequisites", re.compile(r"\bprerequisites?\b", re.IGNORECASE)),
    ("course_description", re.compile(r"course\s+description", re.IGNORECASE)),
    ("objectives", re.compile(r"\bobjectives?\b", re.IGNORECASE)),
    ("overview", re.compile(r"\boverview\b", re.IGNORECASE)),
    ("credit_count", re.compile(r"^\s*\d+\s*(?:credit|ceu|hour)", re.IGNORECASE)),
    ("marker_number", re.compile(r"^\s*#\s*\d+")),
]

# A standalone or trailing "Introduction" heading. Numbered entries such as
# "Chapter 1 Introduction", "1. Introduction" or "I. Introduction" are exempt.
_TRAILING_INTRODUCTION_RE = re.compile(r"\bintroduction\s*$", re.IGNORECASE)

# Page numbers, "#123", "1 - 2", "...." and similar
_MARKER_ONLY_RE = re.compile(r"^[#\d\s\-.]+$")

# Title prefixes removed by the final pass over accepted entries
_RESIDUAL_PREFIX_RE = re.compile(
    r"^(?:credit|ceu|hour|governing|board|instruction|requirement|prerequisite|objective|overview)",
    re.IGNORECASE,
)


def front_matter_category(text: str) -> str | None:
    """Return the name of the first front-matter category the text falls into, or None."""
    for category, pattern in FRONT_MATTER_PATTERNS:
        if pattern.search(text):
            return category
    if _TRAILING_INTRODUCTION_RE.search(text) and not has_structural_prefix(text):
        return "introduction"
    return None


def is_front_matter(line: str) -> bool:
    """
    True if a trimmed, non-empty line is administrative noise to drop before
    pattern matching: too short, a bare number/marker, or any front-matter category.
    """
    line = line.strip()
    if len(line) < MIN_LINE_LENGTH:
        return True
    if _MARKER_ONLY_RE.match(line):
        return True
    return front_matter_category(line) is not None


def is_residual_front_matter(label: str, title: str) -> bool:
    """Final-pass check for an accepted entry (label includes any enumeration prefix)."""
    if front_matter_category(label) is not None:
        return True
    return bool(_RESIDUAL_PREFIX_RE.match(title.strip()))
