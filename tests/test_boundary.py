"""
Boundary locator tests.
"""

from toc_extract.boundary import is_body_marker, locate_toc_window
from toc_extract.models import ExtractionConfig, ExtractionMode


def test_heading_line_starts_strict_window():
    text = "Cover page\n\nTable of Contents\nChapter 1 Alpha ..... 1\n"
    window = locate_toc_window(text)
    assert window.mode == ExtractionMode.STRICT
    assert window.start == text.index("Table of Contents") + len("Table of Contents")
    assert window.end == len(text)
    assert window.heading == "Table of Contents"


def test_first_heading_wins_over_later_contents():
    text = (
        "TABLE OF CONTENTS\n"
        "Chapter 1 Alpha ..... 1\n"
        "\n"
        "The contents of this chapter are reviewed below.\n"
        "Contents\n"
        "Chapter 2 Beta ..... 9\n"
    )
    window = locate_toc_window(text)
    assert window.start == len("TABLE OF CONTENTS")


def test_end_marker_closes_window():
    text = "Contents\nAlpha ..... 1\nBeta ..... 2\nIntroduction\nBody text.\n"
    window = locate_toc_window(text)
    assert window.end == text.index("Introduction")
    assert window.end_marker == "Introduction"


def test_window_capped_without_end_marker():
    text = "Contents\n" + ("Lorem ipsum dolor sit amet.\n" * 1000)
    window = locate_toc_window(text)
    assert window.end - window.start == 8000
    assert window.end_marker is None

    window = locate_toc_window(text, ExtractionConfig(strict_window_chars=100))
    assert window.end - window.start == 100


def test_marker_mid_line_does_not_end_window():
    text = "Contents\nGetting Started with Ethics ..... 4\nOverview of Duties ..... 6\n"
    window = locate_toc_window(text)
    assert window.end == len(text)


def test_loose_fallback_when_no_heading_line():
    text = "Course Table of Contents (see below)\nAlpha ..... 1\n"
    window = locate_toc_window(text)
    assert window.mode == ExtractionMode.LOOSE
    assert window.start == text.index("Table of Contents")
    assert window.end == len(text)


def test_loose_window_length():
    text = "Course Contents\n" + ("x" * 10000)
    window = locate_toc_window(text)
    assert window.mode == ExtractionMode.LOOSE
    assert window.end - window.start == 5000


def test_no_window():
    assert locate_toc_window("Nothing but prose here.\nAnd more prose.") is None
    assert locate_toc_window("") is None


def test_word_ending_in_contents_is_not_a_heading():
    text = "Civilization and Its Discontents\nAlpha ..... 1\n"
    assert locate_toc_window(text) is None


def test_body_marker_lines():
    assert is_body_marker("Introduction")
    assert is_body_marker("  Getting   Started ")
    assert is_body_marker("CHAPTER 1")
    assert is_body_marker("Part I")
    assert not is_body_marker("Chapter 12")
    assert not is_body_marker("Chapter 1 Basics ..... 3")
