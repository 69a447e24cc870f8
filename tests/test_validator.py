"""
Entry validator tests.

- Page and title bounds in strict and loose mode
- Front-matter and page-reference rejection (strict only)
- SEARCHING / IN_TOC state machine and miss counting
- Final front-matter pass
"""

import pytest

from toc_extract.models import ExtractionConfig, ExtractionMode, StopReason
from toc_extract.patterns import Candidate, PatternKind
from toc_extract.validator import EntryValidator, ScanState


def _candidate(title="Professional Standards", page=5, level=1, label=None, kind=PatternKind.GENERIC):
    return Candidate(kind=kind, title=title, page=page, level=level, label=label or title)


@pytest.fixture
def strict():
    return EntryValidator(ExtractionMode.STRICT)


@pytest.fixture
def loose():
    return EntryValidator(ExtractionMode.LOOSE)


@pytest.mark.parametrize("page,ok", [(0, False), (1, True), (999, True), (1000, False)])
def test_page_bounds(strict, page, ok):
    assert strict.accepts(_candidate(page=page)) is ok


def test_title_length_bounds_strict(strict):
    assert not strict.accepts(_candidate(title="ab"))
    assert strict.accepts(_candidate(title="abc"))
    assert strict.accepts(_candidate(title="x" * 150))
    assert not strict.accepts(_candidate(title="x" * 151))


def test_loose_ceiling_for_unnumbered_titles(loose):
    assert loose.accepts(_candidate(title="x" * 99))
    assert not loose.accepts(_candidate(title="x" * 100))
    long_title = "Chapter 9 " + "y" * 100
    assert loose.accepts(_candidate(title=long_title))
    assert not loose.accepts(_candidate(title="z" * 151, label="Chapter 1 " + "z" * 151))


def test_front_matter_title_rejected_only_in_strict(strict, loose):
    c = _candidate(title="Learning Objectives")
    assert strict.rejection_reason(c) == "front matter (objectives)"
    assert loose.accepts(c)


def test_numbered_introduction_is_accepted(strict):
    c = _candidate(title="Introduction", label="Chapter 1 Introduction", kind=PatternKind.CHAPTER)
    assert strict.accepts(c)


@pytest.mark.parametrize("label", ["Page 4 of 20", "P. 12 Notes", "P12 Summary"])
def test_page_reference_rejected(strict, label):
    assert strict.rejection_reason(_candidate(title=label)) == "page reference"


def test_misses_not_counted_while_searching(strict):
    for _ in range(20):
        assert strict.record_miss() is False
    assert strict.state == ScanState.SEARCHING
    assert strict.consecutive_misses == 0


def test_miss_limit_after_first_entry(strict):
    strict.record_hit()
    assert strict.state == ScanState.IN_TOC
    for _ in range(4):
        assert strict.record_miss() is False
    assert strict.record_miss() is True
    assert strict.stop_reason == StopReason.MISS_LIMIT


def test_hit_resets_miss_counter(strict):
    strict.record_hit()
    for _ in range(4):
        strict.record_miss()
    strict.record_hit()
    assert strict.consecutive_misses == 0
    assert strict.record_miss() is False


def test_custom_miss_limit():
    v = EntryValidator(ExtractionMode.STRICT, ExtractionConfig(miss_limit=2))
    v.record_hit()
    assert v.record_miss() is False
    assert v.record_miss() is True


def test_body_marker_only_stops_inside_toc(strict):
    assert strict.record_body_marker("Introduction") is False
    strict.record_hit()
    assert strict.record_body_marker("Introduction") is True
    assert strict.stop_reason == StopReason.BODY_MARKER


def test_final_filter(strict, loose):
    kept = _candidate(title="Basics", label="Chapter 2 Basics")
    dropped = _candidate(title="Hours of Operation", label="1. Hours of Operation", kind=PatternKind.ENUMERATED)
    assert strict.final_filter([kept, dropped]) == [kept]
    assert loose.final_filter([kept, dropped]) == [kept, dropped]
