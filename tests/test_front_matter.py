"""
Front-matter classifier tests.
"""

import pytest

from toc_extract.front_matter import front_matter_category, is_front_matter, is_residual_front_matter


@pytest.mark.parametrize(
    "line",
    [
        "3 CEU Credit Hours",
        "Governing Body: ABC",
        "Board Number 12345",
        "Approved for continuing education",
        "Instructions for completing the exam",
        "How to take this course",
        "Course Requirements",
        "Prerequisites: none",
        "Course Description",
        "Learning Objectives",
        "Overview",
        "Course Introduction",
        "1 hour of ethics",
        "#123",
        "12",
        "- 4 -",
        "ab",
    ],
)
def test_noise_lines(line):
    assert is_front_matter(line)


@pytest.mark.parametrize(
    "line",
    [
        "Chapter 1 Introduction ..... 1",
        "1. Introduction ..... 3",
        "I. Introduction ..... 1",
        "Fiduciary Duties ..... 12",
        "Accreditation Standards ..... 8",
        "Summary ..... 20",
    ],
)
def test_toc_lines_are_kept(line):
    assert not is_front_matter(line)


def test_introduction_category_exempts_numbered_titles():
    assert front_matter_category("Introduction") == "introduction"
    assert front_matter_category("Chapter 1 Introduction") is None
    assert front_matter_category("1. Introduction") is None
    assert front_matter_category("I. Introduction") is None
    assert front_matter_category("Part I Introduction") is None


def test_category_names():
    assert front_matter_category("Governing Body: ABC") == "governing_body"
    assert front_matter_category("Learning Objectives") == "objectives"
    assert front_matter_category("Professional Standards") is None


def test_residual_prefix_lexicon():
    """Test that the final pass catches titles the line-level filter lets through."""
    assert is_residual_front_matter("1. Hours of Operation", "Hours of Operation")
    assert is_residual_front_matter("Overview of Ethics", "Overview of Ethics")
    assert not is_residual_front_matter("Chapter 2 Basics", "Basics")
    assert not is_residual_front_matter("I. Introduction", "Introduction")
