"""
Entry pattern matching: classify a single text line as a TOC entry shape and
extract (title, page, level).

Three shapes are tried in a fixed order and the first one that matches wins:

  1. enumerated   "1.2) Title ........ 14"      level = number of numeric segments
  2. chapter      "Chapter 3 Title .... 40"     level = 1 (also Section N, Part IV, "II.")
  3. generic      "Any title ....... 7"         level from "N.M" / "N.M.P" inside the title

A title must start with a non-leader character, so "Chapter 1 ..... 5" is not a
chapter line with an empty title; it falls through to the generic shape and
keeps "Chapter 1" as its title.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable


class PatternKind(str, Enum):
    ENUMERATED = "enumerated"
    CHAPTER = "chapter"
    GENERIC = "generic"


@dataclass(frozen=True)
class Candidate:
    """A line that matched one of the entry shapes, before validation."""

    kind: PatternKind
    title: str
    page: int
    level: int
    # Title as printed, including an enumeration or Chapter/Section/Part prefix
    label: str


# ---------------------------------------------------------------------------
# Regex building blocks
# ---------------------------------------------------------------------------

# Dots, middle dots and ellipsis characters; whitespace also counts as leader
_LEADER_CHARS = ".·…"
_PAGE_DIGITS = "0123456789"
# Longer trailing digit runs are not page numbers
MAX_PAGE_DIGITS = 6

# The shapes below are matched against the line with its leader and page removed
_TITLE = r"(?P<title>[^.\s·…].*)"

ENUMERATED_RE = re.compile(rf"^(?P<prefix>\d+(?:\.\d+)*[.)])(?!\d)\s*{_TITLE}$")
CHAPTER_RE = re.compile(
    r"^(?P<prefix>(?:chapter|section)\s+\d+(?:\.\d+)*\b"
    r"|part\s+(?:[ivxlc]+|\d+)\b"
    r"|(?-i:[IVXLC]+)\.)"
    rf"\s*(?:[:\-–—]\s*)?{_TITLE}$",
    re.IGNORECASE,
)
GENERIC_RE = re.compile(rf"^{_TITLE}$")

_DOTTED_3_RE = re.compile(r"^\d+\.\d+\.\d+")
_DOTTED_2_RE = re.compile(r"^\d+\.\d+")
_NUMERIC_SEGMENT_RE = re.compile(r"\d+")

# Titles carrying one of these prefixes may exceed the loose-mode length ceiling
# and are exempt from the trailing-"introduction" front-matter rule
STRUCTURAL_PREFIX_RE = re.compile(
    r"^(?:(?:chapter|section|part|unit|module|lesson)\b|\d+(?:\.\d+)*[.)]|(?-i:[IVXLC]+)\.)",
    re.IGNORECASE,
)


def has_structural_prefix(text: str) -> bool:
    """True for 'Chapter 2 ...', 'Unit 4 ...', '3) ...', '1.2. ...', 'IV. ...'."""
    return bool(STRUCTURAL_PREFIX_RE.match(text.strip()))


def split_page(line: str) -> tuple[str, int] | None:
    """
    Split 'Title ..... 12' into ('Title', 12).

    Works backwards from the end of the line: the trailing digit run is the
    page, the leader run before it is dropped. Returns None when there is no
    page, no leader, or nothing in front of the leader. Linear in the line length.
    """
    head = line.rstrip(_PAGE_DIGITS)
    digits = line[len(head):]
    if not digits or len(digits) > MAX_PAGE_DIGITS:
        return None
    end = len(head)
    while end and (head[end - 1] in _LEADER_CHARS or head[end - 1].isspace()):
        end -= 1
    if end == 0 or end == len(head):
        return None
    return head[:end], int(digits)


def infer_level(title: str) -> int:
    """Depth from numbering inside the title: '1.2.3 Foo' -> 3, '1.2 Foo' -> 2, else 1."""
    s = title.strip()
    if _DOTTED_3_RE.match(s):
        return 3
    if _DOTTED_2_RE.match(s):
        return 2
    return 1


def _enumerated(m: re.Match, page: int) -> Candidate:
    prefix = m.group("prefix")
    title = m.group("title").strip()
    return Candidate(
        kind=PatternKind.ENUMERATED,
        title=title,
        page=page,
        level=len(_NUMERIC_SEGMENT_RE.findall(prefix)),
        label=f"{prefix} {title}",
    )


def _chapter(m: re.Match, page: int) -> Candidate:
    prefix = " ".join(m.group("prefix").split())
    title = m.group("title").strip()
    return Candidate(
        kind=PatternKind.CHAPTER,
        title=title,
        page=page,
        level=1,
        label=f"{prefix} {title}",
    )


def _generic(m: re.Match, page: int) -> Candidate:
    title = m.group("title").strip()
    return Candidate(
        kind=PatternKind.GENERIC,
        title=title,
        page=page,
        level=infer_level(title),
        label=title,
    )


# Precedence order matters: most specific shape first
ENTRY_PATTERNS: list[tuple[re.Pattern, Callable[[re.Match, int], Candidate]]] = [
    (ENUMERATED_RE, _enumerated),
    (CHAPTER_RE, _chapter),
    (GENERIC_RE, _generic),
]


def match_entry(line: str) -> Candidate | None:
    """Return the first matching entry shape for a stripped line, or None."""
    split = split_page(line)
    if split is None:
        return None
    head, page = split
    for pattern, extract in ENTRY_PATTERNS:
        m = pattern.match(head)
        if m:
            return extract(m, page)
    return None
